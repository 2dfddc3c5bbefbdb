"""API routes for notation parsing and row validation."""
import logging
from typing import List

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from workout_notation.models import (
    CircuitHeaderRow,
    ExerciseFieldUpdates,
    ExerciseRow,
    FieldInfo,
    NotationParseResponse,
    NotationRequest,
    RowValidationResult,
)
from workout_notation.notation import BaseNotationParser, available_fields, get_parser
from workout_notation.notation.descriptions import (
    FIELD_BOUNDS,
    FIELD_EXAMPLES,
    FIELD_GUIDES,
    short_description,
)
from workout_notation.notation.formatting import to_notation
from workout_notation.services.row_validator import (
    require_valid_row,
    validate_circuit_header,
    validate_exercise_row,
    validate_field_updates,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_parser(field: str) -> BaseNotationParser:
    try:
        return get_parser(field)
    except KeyError:
        logger.info(f"Unknown notation field requested: {field}")
        raise HTTPException(
            status_code=404,
            detail=f"Unknown notation field '{field}'. Expected one of: {', '.join(available_fields())}",
        )


@router.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}


@router.get("/notation/fields", response_model=List[FieldInfo])
def list_fields() -> List[FieldInfo]:
    """Bounds, examples and usage guides for every notation field."""
    return [
        FieldInfo(
            field=field,
            examples=FIELD_EXAMPLES[field],
            description=FIELD_GUIDES[field],
            short_description=short_description(field),
            **FIELD_BOUNDS[field],
        )
        for field in available_fields()
    ]


@router.post("/notation/{field}/parse")
def parse_notation(field: str, request: NotationRequest) -> JSONResponse:
    """
    Parse a notation string for one field.

    ## Response
    - **value**: Parsed structure (camelCase keys) or null for empty/invalid input
    - **valid**: Whether the notation was accepted
    - **errors**: One message per rejected segment
    - **canonical**: Canonical notation for valid input
    """
    parser = _resolve_parser(field)
    result = parser.parse(request.input)

    response = NotationParseResponse(
        field=field,
        value=result.value.model_dump(by_alias=True) if result.value is not None else None,
        valid=result.valid,
        errors=result.errors,
        canonical=to_notation(field, result.value) if result.valid else None,
    )
    return JSONResponse(response.model_dump())


@router.post("/notation/{field}/validate")
def validate_notation(field: str, request: NotationRequest):
    parser = _resolve_parser(field)
    return {"valid": parser.validate(request.input)}


@router.post("/rows/validate", response_model=RowValidationResult)
def validate_row(row: ExerciseRow, strict: bool = False) -> RowValidationResult:
    """
    Validate the notation fields of an exercise row before it is written.

    With ``strict=true`` the first rejected field is returned as a 422 with a
    structured error body instead of a per-field error map.
    """
    if strict:
        require_valid_row(row)
    return validate_exercise_row(row)


@router.post("/rows/validate-header", response_model=RowValidationResult)
def validate_header(header: CircuitHeaderRow) -> RowValidationResult:
    return validate_circuit_header(header)


@router.post("/rows/validate-updates", response_model=RowValidationResult)
def validate_updates(updates: ExerciseFieldUpdates) -> RowValidationResult:
    return validate_field_updates(updates)
