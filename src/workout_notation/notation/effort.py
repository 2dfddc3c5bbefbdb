"""Effort (RPE/RIR) parser: "8", "7-8", "7.5", "7,8,9". Range 0-10, zero is a valid RIR."""

from .base import NUMBER_TOKEN, BaseNotationParser, compile_pattern
from .models import MAX_EFFORT, MIN_EFFORT, FixedValue, ParsedEffort, ParseResult, RangeValue
from . import register_parser


class EffortParser(BaseNotationParser):
    field = "effort"
    value_model = ParsedEffort

    EFFORT_PATTERN = compile_pattern(rf"({NUMBER_TOKEN})(?:-({NUMBER_TOKEN}))?")

    def parse_segment(self, segment: str):
        match = self.EFFORT_PATTERN.fullmatch(segment)
        if not match:
            raise self.error(segment, "unrecognized effort notation")

        return self.scalar_or_range(
            segment, match.group(1), match.group(2),
            MIN_EFFORT, MAX_EFFORT, FixedValue, RangeValue,
        )


register_parser(EffortParser)

_parser = EffortParser()


def parse(text: str) -> ParseResult[ParsedEffort]:
    return _parser.parse(text)


def validate(text: str) -> bool:
    return _parser.validate(text)
