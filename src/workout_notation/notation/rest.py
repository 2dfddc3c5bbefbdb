"""
Rest Parser

Duration notation normalized to whole seconds: "90s", "2m", "1m30s", ranges
such as "1m-2m" or "1m30s-2m", and per-set lists like "90s,2m,2m".
Bounds are 1s-60m; a bare number without a unit is rejected.
"""

from typing import List

from .base import BaseNotationParser, compile_pattern
from .errors import ErrorKind, NotationParseError
from .models import (
    MAX_REST_SECONDS,
    MIN_REST_SECONDS,
    FixedRest,
    ParsedRest,
    ParseResult,
    RangeRest,
)
from . import register_parser


class RestParser(BaseNotationParser):
    """Parser for rest duration notation"""

    field = "rest"
    value_model = ParsedRest

    DURATION_PATTERN = compile_pattern(r"(?:([0-9]+)m)?(?:([0-9]+)s)?")  # "2m", "90s", "1m30s"

    def parse_segment(self, segment: str):
        try:
            return FixedRest(seconds=self.parse_duration(segment, segment))
        except NotationParseError as e:
            whole_error = e

        # Not a single duration: try every hyphen as the range separator and
        # take the first split where both sides are valid durations. A plain
        # split on the first hyphen is not enough once tokens get composite.
        split_errors: List[NotationParseError] = []
        for index in range(1, len(segment)):
            if segment[index] != "-":
                continue
            try:
                low = self.parse_duration(segment, segment[:index])
                high = self.parse_duration(segment, segment[index + 1:])
            except NotationParseError as e:
                split_errors.append(e)
                continue

            self.check_order(segment, low, high)
            return RangeRest(min_seconds=low, max_seconds=high)

        raise self._most_specific(whole_error, split_errors)

    def parse_duration(self, segment: str, token: str) -> int:
        """Convert a single ``XmYs`` token to seconds within the rest bounds"""
        token = token.strip()
        match = self.DURATION_PATTERN.fullmatch(token)
        if not match or (match.group(1) is None and match.group(2) is None):
            raise self.error(segment, f"unrecognized duration {token!r}")

        minutes = int(match.group(1) or 0)
        seconds = int(match.group(2) or 0)
        total = minutes * 60 + seconds

        if total < MIN_REST_SECONDS:
            raise self.error(
                segment, f"rest must be at least {MIN_REST_SECONDS}s", ErrorKind.OUT_OF_RANGE
            )
        if total > MAX_REST_SECONDS:
            raise self.error(
                segment, f"rest cannot exceed {MAX_REST_SECONDS // 60}m", ErrorKind.OUT_OF_RANGE
            )
        return total

    @staticmethod
    def _most_specific(whole_error: NotationParseError,
                       split_errors: List[NotationParseError]) -> NotationParseError:
        # Prefer a bounds error over "unrecognized" so "1m-61m" reports the 61m
        for error in [whole_error, *split_errors]:
            if error.kind != ErrorKind.MALFORMED:
                return error
        return whole_error


register_parser(RestParser)

_parser = RestParser()


def parse(text: str) -> ParseResult[ParsedRest]:
    return _parser.parse(text)


def validate(text: str) -> bool:
    return _parser.validate(text)
