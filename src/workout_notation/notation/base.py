"""
Base Notation Parser

Abstract base class for the field parsers. Owns the comma-list driver every
field shares: trim, split on commas, parse each segment against the field
grammar, and fail the whole input if any segment fails.
"""

import re
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple, Type

from pydantic import BaseModel

from .errors import ErrorKind, NotationField, NotationParseError
from .models import ParseResult

logger = logging.getLogger(__name__)

# Number tokens are ASCII digits only; decimals capped at two places
INTEGER_TOKEN = r"[0-9]+"
NUMBER_TOKEN = r"[0-9]+(?:\.[0-9]{1,2})?"


class BaseNotationParser(ABC):
    """Abstract base class for notation parsers"""

    field: NotationField
    value_model: Type[BaseModel]

    @abstractmethod
    def parse_segment(self, segment: str) -> Any:
        """
        Parse a single trimmed segment.

        Returns:
            The parsed value for that segment

        Raises:
            NotationParseError: If the segment is rejected
        """
        ...

    def split_segments(self, text: str) -> List[str]:
        """Split trimmed, non-empty input into trimmed segments"""
        return [segment.strip() for segment in text.split(",")]

    def build(self, values: List[Any]) -> BaseModel:
        """Combine parsed segments into the field's value model"""
        return self.value_model(values=values)

    def format_error(self, error: NotationParseError) -> str:
        """Message surfaced in ``ParseResult.errors`` for a rejected segment"""
        return f'invalid {self.field} segment: "{error.input}"'

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, text: str) -> ParseResult:
        """Parse notation into a result envelope. Never raises for bad notation."""
        value, issues = self._run(text)
        result_type = ParseResult[self.value_model]

        if issues:
            return result_type.failed([self.format_error(e) for e in issues])
        if value is None:
            return result_type.empty()
        return result_type.ok(value)

    def validate(self, text: str) -> bool:
        return self.parse(text).valid

    def diagnose(self, text: str) -> List[NotationParseError]:
        """Structured errors, one per rejected segment, in input order"""
        return self._run(text)[1]

    def parse_or_raise(self, text: str) -> Optional[BaseModel]:
        """
        Parse notation, raising the first structured error instead of
        returning an envelope.

        Returns:
            The parsed value, or None for empty input
        """
        value, issues = self._run(text)
        if issues:
            raise issues[0]
        return value

    def _run(self, text: str) -> Tuple[Optional[BaseModel], List[NotationParseError]]:
        if not isinstance(text, str):
            raise TypeError(
                f"{self.field} notation must be a string, got {type(text).__name__}"
            )

        trimmed = text.strip()
        if not trimmed:
            return None, []

        values = []
        issues: List[NotationParseError] = []

        for segment in self.split_segments(trimmed):
            try:
                values.append(self.parse_segment(segment))
            except NotationParseError as e:
                logger.debug(f"Rejected {self.field} segment {segment!r}: {e.reason}")
                issues.append(e)

        if issues:
            return None, issues

        return self.build(values), []

    # ------------------------------------------------------------------
    # Helpers for grammar implementations
    # ------------------------------------------------------------------

    def error(self, segment: str, reason: str,
              kind: ErrorKind = ErrorKind.MALFORMED) -> NotationParseError:
        return NotationParseError(self.field, segment, reason, kind)

    def check_bounds(self, segment: str, number, minimum, maximum):
        """Return ``number`` if it lies within [minimum, maximum]"""
        if number < minimum:
            raise self.error(
                segment, f"{_fmt(number)} is below the minimum of {minimum}",
                ErrorKind.OUT_OF_RANGE,
            )
        if number > maximum:
            raise self.error(
                segment, f"{_fmt(number)} exceeds the maximum of {maximum}",
                ErrorKind.OUT_OF_RANGE,
            )
        return number

    def check_order(self, segment: str, low, high) -> None:
        if low >= high:
            raise self.error(
                segment,
                f"range min ({_fmt(low)}) must be less than max ({_fmt(high)})",
                ErrorKind.INVALID_RANGE,
            )

    def scalar_or_range(self, segment: str, first: str, second: Optional[str],
                        minimum, maximum, fixed_type, range_type, convert=float):
        """Build a fixed or range value from one or two matched number tokens"""
        low = self.check_bounds(segment, convert(first), minimum, maximum)
        if second is None:
            return fixed_type(value=low)

        high = self.check_bounds(segment, convert(second), minimum, maximum)
        self.check_order(segment, low, high)
        return range_type(min=low, max=high)


def compile_pattern(pattern: str) -> "re.Pattern[str]":
    """Case-insensitive, ASCII-only pattern used with ``fullmatch``"""
    return re.compile(pattern, re.IGNORECASE | re.ASCII)


def _fmt(number) -> str:
    if isinstance(number, float):
        return ("%.2f" % number).rstrip("0").rstrip(".")
    return str(number)
