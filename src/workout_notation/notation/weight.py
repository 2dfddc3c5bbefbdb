"""
Weight Parser

Load notation (unitless):
- Fixed / range: "125", "125-135", decimals up to two places
- Per-set lists: "125,130,135"
- Per side: "50 ES", "50ES", "50 E/S"
- Bodyweight: "BW", "BW+25", "BW+20-30"
"""

from dataclasses import dataclass
from typing import List, Optional

from .base import NUMBER_TOKEN, BaseNotationParser, compile_pattern
from .models import MAX_WEIGHT, FixedValue, ParsedWeight, ParseResult, RangeValue
from . import register_parser


@dataclass(frozen=True)
class WeightSegment:
    """One parsed weight segment before flags are folded together"""
    value: object
    per_side: bool = False
    bodyweight: bool = False
    added: Optional[object] = None


class WeightParser(BaseNotationParser):
    """Parser for weight notation"""

    field = "weight"
    value_model = ParsedWeight

    PER_SIDE_SUFFIX = compile_pattern(r"\s*(?:es|e/s)\Z")  # "ES", "E/S"
    BODYWEIGHT_PREFIX = compile_pattern(r"bw")
    BODYWEIGHT_PATTERN = compile_pattern(
        rf"bw(?:\+({NUMBER_TOKEN})(?:-({NUMBER_TOKEN}))?)?"
    )  # "BW", "BW+25", "BW+20-30"
    SIMPLE_PATTERN = compile_pattern(
        rf"({NUMBER_TOKEN})(?:-({NUMBER_TOKEN}))?"
    )  # "125", "125-135"

    def parse_segment(self, segment: str) -> WeightSegment:
        per_side = bool(self.PER_SIDE_SUFFIX.search(segment))
        body = self.PER_SIDE_SUFFIX.sub("", segment, count=1).strip()

        if self.BODYWEIGHT_PREFIX.match(body):
            return self._parse_bodyweight(segment, body, per_side)

        match = self.SIMPLE_PATTERN.fullmatch(body)
        if not match:
            raise self.error(segment, "unrecognized weight notation")

        value = self._weight_value(segment, match.group(1), match.group(2))
        return WeightSegment(value=value, per_side=per_side)

    def _parse_bodyweight(self, segment: str, body: str, per_side: bool) -> WeightSegment:
        match = self.BODYWEIGHT_PATTERN.fullmatch(body)
        if not match:
            raise self.error(segment, "malformed bodyweight notation")

        if match.group(1) is None:
            # Bare BW carries a zero placeholder
            return WeightSegment(
                value=FixedValue(value=0),
                per_side=per_side,
                bodyweight=True,
            )

        added = self._weight_value(segment, match.group(1), match.group(2))
        return WeightSegment(value=added, per_side=per_side, bodyweight=True, added=added)

    def _weight_value(self, segment: str, first: str, second: Optional[str]):
        return self.scalar_or_range(
            segment, first, second, 0, MAX_WEIGHT, FixedValue, RangeValue
        )

    def build(self, values: List[WeightSegment]) -> ParsedWeight:
        # Mixed BW and plain segments are allowed; only the last BW+N is kept as `added`
        added = None
        for segment in values:
            if segment.added is not None:
                added = segment.added

        return ParsedWeight(
            values=[segment.value for segment in values],
            per_side=any(segment.per_side for segment in values),
            bodyweight=any(segment.bodyweight for segment in values),
            added=added,
        )


register_parser(WeightParser)

_parser = WeightParser()


def parse(text: str) -> ParseResult[ParsedWeight]:
    return _parser.parse(text)


def validate(text: str) -> bool:
    return _parser.validate(text)
