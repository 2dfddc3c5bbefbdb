"""Structured notation errors."""
from enum import Enum
from typing import Literal

NotationField = Literal["weight", "reps", "sets", "rest", "effort"]


class ErrorKind(str, Enum):
    """Why a piece of notation was rejected"""
    MALFORMED = "malformed_segment"           # token does not match the grammar
    OUT_OF_RANGE = "out_of_range"             # parses, but outside the field bounds
    INVALID_RANGE = "invalid_range"           # both endpoints parse, min >= max
    UNSUPPORTED = "unsupported_construct"     # e.g. comma list for sets, "3-4+AMRAP"


class NotationParseError(ValueError):
    """A rejected notation segment, tagged with the field it belongs to.

    Parsers raise this internally and convert it to a plain message before
    returning, so ``parse`` never propagates it. Callers that want exceptions
    get it from ``parse_or_raise``.
    """

    def __init__(self, field: NotationField, input: str, reason: str,
                 kind: ErrorKind = ErrorKind.MALFORMED):
        super().__init__(f"Invalid {field}: {reason}")
        self.field = field
        self.input = input
        self.reason = reason
        self.kind = kind

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "input": self.input,
            "reason": self.reason,
            "kind": self.kind.value,
        }
