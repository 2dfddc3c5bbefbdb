"""
Reps Parser

Repetition notation: "8", "8-12", "AMRAP" (any case), and per-set lists such
as "10,8,AMRAP". Integers only, 1-999.
"""

from .base import INTEGER_TOKEN, BaseNotationParser, compile_pattern
from .models import (
    MAX_REPS,
    MIN_REPS,
    AmrapRep,
    FixedRep,
    ParsedReps,
    ParseResult,
    RangeRep,
)
from . import register_parser


class RepsParser(BaseNotationParser):
    """Parser for rep notation"""

    field = "reps"
    value_model = ParsedReps

    AMRAP_PATTERN = compile_pattern(r"amrap")
    REP_PATTERN = compile_pattern(rf"({INTEGER_TOKEN})(?:-({INTEGER_TOKEN}))?")

    def parse_segment(self, segment: str):
        if self.AMRAP_PATTERN.fullmatch(segment):
            return AmrapRep()

        if "." in segment:
            raise self.error(segment, "reps must be whole numbers")

        match = self.REP_PATTERN.fullmatch(segment)
        if not match:
            raise self.error(segment, "unrecognized rep notation")

        return self.scalar_or_range(
            segment, match.group(1), match.group(2),
            MIN_REPS, MAX_REPS, FixedRep, RangeRep, convert=int,
        )


register_parser(RepsParser)

_parser = RepsParser()


def parse(text: str) -> ParseResult[ParsedReps]:
    return _parser.parse(text)


def validate(text: str) -> bool:
    return _parser.validate(text)
