"""
Notation Models

Pydantic value types produced by the notation parsers. Every variant carries a
``type`` discriminator so consumers can match on it; the JSON form uses the
camelCase keys the UI and agent tools expect (``perSide``, ``minSeconds``...).
"""

from typing import Annotated, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


# Bounds
MAX_WEIGHT = 2000
MIN_REPS = 1
MAX_REPS = 999
MIN_SETS = 1
MAX_SETS = 99
MIN_REST_SECONDS = 1
MAX_REST_SECONDS = 3600  # 60 minutes
MIN_EFFORT = 0
MAX_EFFORT = 10


class NotationModel(BaseModel):
    """Immutable base for all parsed notation values"""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class _OrderedRange(NotationModel):
    """Range whose lower endpoint must be strictly below the upper one"""

    @model_validator(mode="after")
    def _check_order(self):
        low, high = self.bounds()
        if low >= high:
            raise ValueError("range min must be less than max")
        return self

    def bounds(self):
        return self.min, self.max


# ---------------------------------------------------------------------------
# Weight / effort (unitless decimals)
# ---------------------------------------------------------------------------


class FixedValue(NotationModel):
    type: Literal["fixed"] = "fixed"
    value: float


class RangeValue(_OrderedRange):
    type: Literal["range"] = "range"
    min: float
    max: float


WeightValue = Annotated[Union[FixedValue, RangeValue], Field(discriminator="type")]
EffortValue = WeightValue


class ParsedWeight(NotationModel):
    """Load notation: per-set values plus per-side / bodyweight flags"""
    values: List[WeightValue]
    per_side: bool = False
    bodyweight: bool = False
    added: Optional[WeightValue] = Field(
        default=None,
        description="Load added on top of bodyweight (last BW+N segment wins)",
    )


class ParsedEffort(NotationModel):
    """RPE/RIR notation, each value within 0-10"""
    values: List[EffortValue]


# ---------------------------------------------------------------------------
# Reps
# ---------------------------------------------------------------------------


class FixedRep(NotationModel):
    type: Literal["fixed"] = "fixed"
    value: int


class RangeRep(_OrderedRange):
    type: Literal["range"] = "range"
    min: int
    max: int


class AmrapRep(NotationModel):
    type: Literal["amrap"] = "amrap"


RepValue = Annotated[Union[FixedRep, RangeRep, AmrapRep], Field(discriminator="type")]


class ParsedReps(NotationModel):
    values: List[RepValue]


# ---------------------------------------------------------------------------
# Sets
# ---------------------------------------------------------------------------


class FixedCount(NotationModel):
    type: Literal["fixed"] = "fixed"
    value: int


class RangeCount(_OrderedRange):
    type: Literal["range"] = "range"
    min: int
    max: int


SetCount = Annotated[Union[FixedCount, RangeCount], Field(discriminator="type")]


class ParsedSets(NotationModel):
    """Set count; ``amrap_finisher`` only ever accompanies a fixed count"""
    count: SetCount
    amrap_finisher: bool = False

    @model_validator(mode="after")
    def _finisher_needs_fixed_count(self):
        if self.amrap_finisher and self.count.type != "fixed":
            raise ValueError("AMRAP finisher requires a fixed set count")
        return self


# ---------------------------------------------------------------------------
# Rest (normalized to whole seconds)
# ---------------------------------------------------------------------------


class FixedRest(NotationModel):
    type: Literal["fixed"] = "fixed"
    seconds: int


class RangeRest(_OrderedRange):
    type: Literal["range"] = "range"
    min_seconds: int
    max_seconds: int

    def bounds(self):
        return self.min_seconds, self.max_seconds


RestValue = Annotated[Union[FixedRest, RangeRest], Field(discriminator="type")]


class ParsedRest(NotationModel):
    values: List[RestValue]


# ---------------------------------------------------------------------------
# Result envelope
# ---------------------------------------------------------------------------

T = TypeVar("T")


class ParseResult(BaseModel, Generic[T]):
    """Result from a notation parser.

    ``value`` is None both for empty input (valid "no value") and for any
    rejected input; ``errors`` is non-empty exactly when ``valid`` is False.
    """
    model_config = ConfigDict(frozen=True)

    value: Optional[T] = None
    valid: bool = True
    errors: List[str] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "ParseResult[T]":
        return cls(value=None, valid=True, errors=[])

    @classmethod
    def ok(cls, value: T) -> "ParseResult[T]":
        return cls(value=value, valid=True, errors=[])

    @classmethod
    def failed(cls, errors: List[str]) -> "ParseResult[T]":
        return cls(value=None, valid=False, errors=list(errors))
