"""Tests for the sets notation parser."""
import pytest
from workout_notation.notation.sets import parse, validate
from workout_notation.notation.models import FixedCount, ParsedSets, RangeCount


class TestValidInputs:

    def test_empty_string(self):
        result = parse("")
        assert result.valid is True
        assert result.value is None
        assert result.errors == []

    def test_single_fixed_value(self):
        result = parse("3")
        assert result.value == ParsedSets(count=FixedCount(value=3), amrap_finisher=False)

    def test_max_value(self):
        assert parse("99").value.count == FixedCount(value=99)

    def test_range(self):
        result = parse("3-4")
        assert result.value == ParsedSets(count=RangeCount(min=3, max=4), amrap_finisher=False)

    @pytest.mark.parametrize("text", ["3+AMRAP", "3+amrap", "3+Amrap"])
    def test_amrap_finisher(self, text):
        result = parse(text)
        assert result.valid is True
        assert result.value == ParsedSets(count=FixedCount(value=3), amrap_finisher=True)

    def test_surrounding_whitespace(self):
        assert parse("  3  ").value.count == FixedCount(value=3)


class TestInvalidInputs:

    @pytest.mark.parametrize("text,message", [
        ("0", "sets must be at least 1"),
        ("100", "sets cannot exceed 99"),
        ("0-3", "sets must be at least 1"),
        ("3-100", "sets cannot exceed 99"),
        ("4-4", "range min must be less than max"),
        ("4-3", "range min must be less than max"),
    ])
    def test_bounds_and_ranges(self, text, message):
        result = parse(text)
        assert result.valid is False
        assert result.value is None
        assert result.errors == [message]

    @pytest.mark.parametrize("text", ["abc", "3.5", "-3", "3+", "AMRAP", "3 + AMRAP", "3x"])
    def test_malformed(self, text):
        result = parse(text)
        assert result.valid is False
        assert result.errors == [f'invalid sets notation: "{text}"']

    def test_range_cannot_take_amrap_finisher(self):
        result = parse("3-4+AMRAP")
        assert result.valid is False
        assert result.errors == ["AMRAP finisher is only allowed on a fixed set count"]

    def test_comma_list_rejected(self):
        result = parse("3,4")
        assert result.valid is False
        assert result.errors == ["sets does not support comma-separated values"]


class TestValidate:
    def test_returns_true_for_valid_input(self):
        for text in ("3", "3-4", "3+AMRAP", ""):
            assert validate(text) is True

    def test_returns_false_for_invalid_input(self):
        for text in ("0", "100", "3-4+AMRAP", "3,4"):
            assert validate(text) is False
