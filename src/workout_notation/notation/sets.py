"""
Sets Parser

Set count notation: "3", "3-4", or "3+AMRAP" (a fixed count followed by an
AMRAP finisher set). Applied to the whole input; per-set lists make no sense
for a set count, so commas are rejected.
"""

from typing import List

from .base import INTEGER_TOKEN, BaseNotationParser, compile_pattern
from .errors import ErrorKind, NotationParseError
from .models import MAX_SETS, MIN_SETS, FixedCount, ParsedSets, ParseResult, RangeCount
from . import register_parser


class SetsParser(BaseNotationParser):
    """Parser for set count notation"""

    field = "sets"
    value_model = ParsedSets

    SETS_PATTERN = compile_pattern(
        rf"({INTEGER_TOKEN})(?:-({INTEGER_TOKEN})|(\+amrap))?"
    )  # "3", "3-4", "3+AMRAP"
    RANGE_FINISHER_PATTERN = compile_pattern(
        rf"{INTEGER_TOKEN}-{INTEGER_TOKEN}\+amrap"
    )  # "3-4+AMRAP"

    def split_segments(self, text: str) -> List[str]:
        return [text]

    def build(self, values: List[ParsedSets]) -> ParsedSets:
        return values[0]

    def format_error(self, error: NotationParseError) -> str:
        if error.kind == ErrorKind.MALFORMED:
            return f'invalid sets notation: "{error.input}"'
        return error.reason

    def parse_segment(self, segment: str) -> ParsedSets:
        if "," in segment:
            raise self.error(
                segment, "sets does not support comma-separated values",
                ErrorKind.UNSUPPORTED,
            )
        if self.RANGE_FINISHER_PATTERN.fullmatch(segment):
            raise self.error(
                segment, "AMRAP finisher is only allowed on a fixed set count",
                ErrorKind.UNSUPPORTED,
            )

        match = self.SETS_PATTERN.fullmatch(segment)
        if not match:
            raise self.error(segment, "unrecognized sets notation")

        first = self._count(segment, match.group(1))
        if match.group(2) is None:
            return ParsedSets(
                count=FixedCount(value=first),
                amrap_finisher=match.group(3) is not None,
            )

        second = self._count(segment, match.group(2))
        if first >= second:
            raise self.error(segment, "range min must be less than max", ErrorKind.INVALID_RANGE)

        return ParsedSets(count=RangeCount(min=first, max=second))

    def _count(self, segment: str, token: str) -> int:
        count = int(token)
        if count < MIN_SETS:
            raise self.error(segment, f"sets must be at least {MIN_SETS}", ErrorKind.OUT_OF_RANGE)
        if count > MAX_SETS:
            raise self.error(segment, f"sets cannot exceed {MAX_SETS}", ErrorKind.OUT_OF_RANGE)
        return count


register_parser(SetsParser)

_parser = SetsParser()


def parse(text: str) -> ParseResult[ParsedSets]:
    return _parser.parse(text)


def validate(text: str) -> bool:
    return _parser.validate(text)
