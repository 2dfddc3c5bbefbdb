"""
Row validation service.

Gates program row writes: every notation field on a row must parse before the
raw strings are stored. Only the original strings are persisted by callers;
the parsed values are returned for display and tool feedback.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from workout_notation.models import (
    CircuitHeaderRow,
    ExerciseFieldUpdates,
    ExerciseRow,
    RowValidationResult,
)
from workout_notation.notation import NotationParseError, get_parser

logger = logging.getLogger(__name__)

EXERCISE_NOTATION_FIELDS = ("weight", "reps", "sets", "rest", "effort")
REQUIRED_NOTATION_FIELDS = ("weight", "reps", "sets")


def _check_fields(fields: Iterable[Tuple[str, Optional[str]]]) -> RowValidationResult:
    errors: Dict[str, List[str]] = {}
    parsed = {}

    for field, raw in fields:
        if raw is None:
            continue
        result = get_parser(field).parse(raw)
        if result.valid:
            parsed[field] = (
                result.value.model_dump(by_alias=True) if result.value is not None else None
            )
        else:
            errors[field] = result.errors

    if errors:
        logger.info(f"Row rejected on fields: {', '.join(errors)}")

    return RowValidationResult(valid=not errors, errors=errors, parsed=parsed)


def validate_exercise_row(row: ExerciseRow) -> RowValidationResult:
    """Validate all notation fields on an exercise row."""
    return _check_fields((field, getattr(row, field)) for field in EXERCISE_NOTATION_FIELDS)


def validate_circuit_header(header: CircuitHeaderRow) -> RowValidationResult:
    """Validate the optional group-level set count on a circuit header."""
    return _check_fields([("sets", header.sets)])


def validate_field_updates(updates: ExerciseFieldUpdates) -> RowValidationResult:
    """Validate only the notation fields present in a partial update.

    Explicit None clears rest/effort and needs no parsing; weight, reps and
    sets are required on an exercise row and cannot be cleared.
    """
    provided = updates.model_fields_set
    result = _check_fields(
        (field, getattr(updates, field))
        for field in EXERCISE_NOTATION_FIELDS
        if field in provided
    )

    cleared = [
        field for field in REQUIRED_NOTATION_FIELDS
        if field in provided and getattr(updates, field) is None
    ]
    if not cleared:
        return result

    logger.info(f"Update rejected, required fields cleared: {', '.join(cleared)}")
    errors = dict(result.errors)
    for field in cleared:
        errors[field] = [f"{field} is required and cannot be cleared"]
    return RowValidationResult(valid=False, errors=errors, parsed=result.parsed)


def require_valid_row(row: ExerciseRow) -> Dict[str, object]:
    """
    Parse every notation field on a row, raising on the first rejection.

    Returns:
        Parsed value per field (None for empty or absent fields)

    Raises:
        NotationParseError: For the first field that fails, in field order
    """
    parsed = {}
    for field in EXERCISE_NOTATION_FIELDS:
        raw = getattr(row, field)
        if raw is None:
            parsed[field] = None
            continue
        try:
            parsed[field] = get_parser(field).parse_or_raise(raw)
        except NotationParseError:
            logger.info(f"Strict row validation failed on {field}: {raw!r}")
            raise
    return parsed
