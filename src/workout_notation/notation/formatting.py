"""
Canonical notation rendering.

Turns parsed values back into the notation strings the parsers accept, so a
stored or displayed value can always be re-parsed to the same structure.
"""

from typing import Callable, Dict, Optional

from pydantic import BaseModel

from .models import ParsedEffort, ParsedReps, ParsedRest, ParsedSets, ParsedWeight


def format_number(number: float) -> str:
    """125.0 -> "125", 7.50 -> "7.5" (at most two decimal places)"""
    return ("%.2f" % number).rstrip("0").rstrip(".")


def format_duration(seconds: int) -> str:
    """Seconds as XmYs with zero parts dropped: 90 -> "1m30s", 120 -> "2m"."""
    minutes, remainder = divmod(seconds, 60)
    text = ""
    if minutes:
        text += f"{minutes}m"
    if remainder or not minutes:
        text += f"{remainder}s"
    return text


def _scalar_or_range(value, render: Callable = format_number) -> str:
    if value.type == "range":
        return f"{render(value.min)}-{render(value.max)}"
    return render(value.value)


def format_weight(parsed: ParsedWeight) -> str:
    segments = [_scalar_or_range(value) for value in parsed.values]

    if parsed.bodyweight:
        if parsed.added is None:
            # Every BW segment was bare: one zero placeholder stands in for it
            index = next((i for i, v in enumerate(parsed.values) if _is_zero(v)), None)
            if index is None:
                raise ValueError("bodyweight weight without added load needs a zero placeholder value")
            segments[index] = "BW"
        else:
            # Re-parsing keeps the last BW+N as `added`, so mark the last match
            matches = [i for i, v in enumerate(parsed.values) if v == parsed.added]
            if not matches:
                raise ValueError("bodyweight added load must appear among the weight values")
            index = matches[-1]
            segments[index] = f"BW+{segments[index]}"

    if parsed.per_side:
        segments = [f"{segment} ES" for segment in segments]

    return ",".join(segments)


def format_reps(parsed: ParsedReps) -> str:
    segments = []
    for value in parsed.values:
        if value.type == "amrap":
            segments.append("AMRAP")
        else:
            segments.append(_scalar_or_range(value, str))
    return ",".join(segments)


def format_sets(parsed: ParsedSets) -> str:
    text = _scalar_or_range(parsed.count, str)
    if parsed.amrap_finisher:
        text += "+AMRAP"
    return text


def format_rest(parsed: ParsedRest) -> str:
    segments = []
    for value in parsed.values:
        if value.type == "range":
            segments.append(
                f"{format_duration(value.min_seconds)}-{format_duration(value.max_seconds)}"
            )
        else:
            segments.append(format_duration(value.seconds))
    return ",".join(segments)


def format_effort(parsed: ParsedEffort) -> str:
    return ",".join(_scalar_or_range(value) for value in parsed.values)


FORMATTERS: Dict[str, Callable] = {
    "weight": format_weight,
    "reps": format_reps,
    "sets": format_sets,
    "rest": format_rest,
    "effort": format_effort,
}


def to_notation(field: str, parsed: Optional[BaseModel]) -> str:
    """Canonical notation for a parsed value; empty string for no value.

    Raises:
        KeyError: If the field is unknown.
    """
    formatter = FORMATTERS[field]
    if parsed is None:
        return ""
    return formatter(parsed)


def _is_zero(value) -> bool:
    return value.type == "fixed" and value.value == 0
