"""Notation guides embedded in agent tool schemas and the /notation/fields listing."""

from typing import Dict, List

from .models import (
    MAX_EFFORT,
    MAX_REPS,
    MAX_REST_SECONDS,
    MAX_SETS,
    MAX_WEIGHT,
    MIN_EFFORT,
    MIN_REPS,
    MIN_REST_SECONDS,
    MIN_SETS,
)

FIELD_BOUNDS: Dict[str, Dict] = {
    "weight": {"min": 0, "max": MAX_WEIGHT, "decimal_places": 2,
               "special_tokens": ["BW", "BW+N", "ES", "E/S"]},
    "reps": {"min": MIN_REPS, "max": MAX_REPS, "decimal_places": 0,
             "special_tokens": ["AMRAP"]},
    "sets": {"min": MIN_SETS, "max": MAX_SETS, "decimal_places": 0,
             "special_tokens": ["N+AMRAP"]},
    "rest": {"min": MIN_REST_SECONDS, "max": MAX_REST_SECONDS, "decimal_places": 0,
             "special_tokens": ["m", "s"]},
    "effort": {"min": MIN_EFFORT, "max": MAX_EFFORT, "decimal_places": 2,
               "special_tokens": []},
}

FIELD_EXAMPLES: Dict[str, List[str]] = {
    "weight": ["125", "125,130,135", "125-135", "50 ES", "BW", "BW+25", "BW+20-30"],
    "reps": ["8", "12,10,8", "8-12", "AMRAP", "10,8,AMRAP"],
    "sets": ["3", "3-4", "3+AMRAP"],
    "rest": ["90s", "2m", "1m30s", "1m-2m", "60s-90s", "90s,2m,2m"],
    "effort": ["8", "7,8,9", "7-8", "7.5"],
}

FIELD_GUIDES: Dict[str, str] = {
    "weight": f"""Weight notation (unitless). Examples:
- Fixed: "125"
- Per-set: "125,130,135"
- Range: "125-135"
- Per side: "50 ES", "50ES", "50 E/S"
- Bodyweight: "BW", "BW+25", "BW+20-30"
- Mixed: "125-135,140,145"
Decimals up to 2 places allowed. Max {MAX_WEIGHT}.""",
    "reps": f"""Rep notation. Examples:
- Fixed: "8"
- Per-set: "12,10,8"
- Range: "8-12"
- AMRAP: "AMRAP" (case-insensitive)
- Mixed: "10,8,AMRAP"
Integers only, min {MIN_REPS}, max {MAX_REPS}.""",
    "sets": f"""Set notation. Examples:
- Fixed: "3"
- Range: "3-4"
- With AMRAP finisher: "3+AMRAP"
Integers only, min {MIN_SETS}, max {MAX_SETS}. Comma lists are not allowed.""",
    "rest": f"""Rest notation. Examples:
- Seconds: "90s"
- Minutes: "2m"
- Combined: "1m30s"
- Range: "1m-2m", "60s-90s"
- Per-set: "90s,2m,2m"
Min {MIN_REST_SECONDS}s, max {MAX_REST_SECONDS // 60}m. A unit is required.""",
    "effort": f"""Effort notation (unitless, displayed as RPE or RIR). Examples:
- Fixed: "8"
- Per-set: "7,8,9"
- Range: "7-8"
Range {MIN_EFFORT}-{MAX_EFFORT}. Decimals up to 2 places allowed.""",
}


def short_description(field: str) -> str:
    """One-line guide, e.g. for tools that refer back to a fuller schema"""
    bounds = FIELD_BOUNDS[field]
    examples = ", ".join(f'"{example}"' for example in FIELD_EXAMPLES[field])
    if field == "rest":
        limits = f"Min {bounds['min']}s, max {bounds['max'] // 60}m."
    elif field in ("weight", "effort"):
        limits = f"Range {bounds['min']}-{bounds['max']}."
    else:
        limits = f"Min {bounds['min']}, max {bounds['max']}."
    return f"{field.capitalize()} notation. Examples: {examples}. {limits}"
