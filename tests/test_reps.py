"""Tests for the reps notation parser."""
import pytest
from workout_notation.notation.reps import parse, validate
from workout_notation.notation.models import AmrapRep, FixedRep, ParsedReps, RangeRep


class TestValidInputs:

    def test_empty_string(self):
        result = parse("")
        assert result.valid is True
        assert result.value is None
        assert result.errors == []

    def test_single_fixed_value(self):
        result = parse("8")
        assert result.value == ParsedReps(values=[FixedRep(value=8)])

    def test_max_value(self):
        assert parse("999").value.values == [FixedRep(value=999)]

    def test_range(self):
        assert parse("8-12").value.values == [RangeRep(min=8, max=12)]

    @pytest.mark.parametrize("text", ["AMRAP", "amrap", "Amrap"])
    def test_amrap_any_case(self, text):
        result = parse(text)
        assert result.valid is True
        assert result.value.values == [AmrapRep()]

    def test_per_set_values(self):
        result = parse("12 , 10 , 8")
        assert result.value.values == [
            FixedRep(value=12),
            FixedRep(value=10),
            FixedRep(value=8),
        ]

    def test_mixed_fixed_and_amrap(self):
        result = parse("10,8,AMRAP")
        assert result.value.values == [
            FixedRep(value=10),
            FixedRep(value=8),
            AmrapRep(),
        ]

    def test_mixed_fixed_range_and_amrap(self):
        result = parse("10,8-12,AMRAP")
        assert result.value.values == [
            FixedRep(value=10),
            RangeRep(min=8, max=12),
            AmrapRep(),
        ]

    def test_amrap_in_middle_of_list(self):
        result = parse("10,AMRAP,8")
        assert [v.type for v in result.value.values] == ["fixed", "amrap", "fixed"]

    def test_duplicates_preserved(self):
        result = parse("8,8,8")
        assert len(result.value.values) == 3


class TestInvalidInputs:

    @pytest.mark.parametrize("text", [
        "0",
        "-5",
        "1000",
        "0-8",
        "8-1000",
        "8-8",
        "12-8",
        "abc",
        "8.5",
        "8-12.5",
        "8-12-15",
        "8,,12",
        "AMRAP8",
        "8 reps",
    ])
    def test_rejected(self, text):
        result = parse(text)
        assert result.valid is False
        assert result.value is None
        assert len(result.errors) > 0

    def test_partial_invalid_in_comma_list(self):
        result = parse("8,abc,12")
        assert result.errors == ['invalid reps segment: "abc"']


class TestValidate:
    def test_returns_true_for_valid_input(self):
        for text in ("8", "8-12", "AMRAP", "10,8,AMRAP", ""):
            assert validate(text) is True

    def test_returns_false_for_invalid_input(self):
        for text in ("0", "1000", "abc", "8.5"):
            assert validate(text) is False
