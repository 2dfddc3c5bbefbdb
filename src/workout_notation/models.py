"""Data models for program rows and notation requests."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from workout_notation.config import settings

NOTATION_MAX_LENGTH = settings.MAX_NOTATION_LENGTH


class ExerciseRow(BaseModel):
    """Exercise row as written by the grid editor or the agent's addExercise tool."""
    kind: Literal["exercise"] = "exercise"
    weight: str = Field(..., max_length=NOTATION_MAX_LENGTH)
    reps: str = Field(..., max_length=NOTATION_MAX_LENGTH)
    sets: str = Field(..., max_length=NOTATION_MAX_LENGTH)
    rest: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)
    effort: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)
    notes: str = ""

    class Config:
        extra = "ignore"  # Ignore ids and ordering fields from the UI


class CircuitHeaderRow(BaseModel):
    """Header row grouping exercises into a superset or circuit."""
    kind: Literal["circuitHeader"] = "circuitHeader"
    name: str
    sets: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)

    class Config:
        extra = "ignore"


class ExerciseFieldUpdates(BaseModel):
    """Partial update of an exercise row. None on rest/effort clears the field;
    weight/reps/sets may be omitted but not cleared."""
    weight: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)
    reps: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)
    sets: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)
    rest: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)
    effort: Optional[str] = Field(default=None, max_length=NOTATION_MAX_LENGTH)
    notes: Optional[str] = None

    class Config:
        extra = "ignore"


class RowValidationResult(BaseModel):
    """Outcome of gating a row write on its notation fields."""
    valid: bool = True
    errors: Dict[str, List[str]] = Field(default_factory=dict)
    parsed: Dict[str, Any] = Field(
        default_factory=dict,
        description="Parsed value per notation field (camelCase JSON, None for empty)",
    )


class NotationRequest(BaseModel):
    """Request body for the /notation/{field} endpoints."""
    input: str = Field(..., max_length=NOTATION_MAX_LENGTH, description="Raw notation, e.g. '125-135'")


class NotationParseResponse(BaseModel):
    """Parse result plus the canonical notation for valid input."""
    field: str
    value: Optional[Dict[str, Any]] = None
    valid: bool
    errors: List[str] = Field(default_factory=list)
    canonical: Optional[str] = None


class FieldInfo(BaseModel):
    """Bounds and usage guide for one notation field."""
    field: str
    min: float
    max: float
    decimal_places: int
    special_tokens: List[str] = Field(default_factory=list)
    examples: List[str] = Field(default_factory=list)
    description: str
    short_description: str
