"""Tests for structured notation errors (diagnose / parse_or_raise)."""
import pytest
from workout_notation.notation import ErrorKind, NotationParseError, get_parser
from workout_notation.notation.models import FixedRep, ParsedReps


class TestNotationParseError:

    def test_message_and_attributes(self):
        error = NotationParseError("weight", "abc", "unrecognized weight notation")
        assert str(error) == "Invalid weight: unrecognized weight notation"
        assert error.field == "weight"
        assert error.input == "abc"
        assert error.kind == ErrorKind.MALFORMED
        assert isinstance(error, ValueError)

    def test_to_dict(self):
        error = NotationParseError("sets", "3,4", "no lists", ErrorKind.UNSUPPORTED)
        assert error.to_dict() == {
            "field": "sets",
            "input": "3,4",
            "reason": "no lists",
            "kind": "unsupported_construct",
        }


class TestDiagnose:

    @pytest.mark.parametrize("field,text,kind", [
        ("weight", "abc", ErrorKind.MALFORMED),
        ("weight", "2001", ErrorKind.OUT_OF_RANGE),
        ("weight", "135-125", ErrorKind.INVALID_RANGE),
        ("weight", "BW+2001", ErrorKind.OUT_OF_RANGE),
        ("reps", "0", ErrorKind.OUT_OF_RANGE),
        ("reps", "8.5", ErrorKind.MALFORMED),
        ("reps", "12-8", ErrorKind.INVALID_RANGE),
        ("sets", "3,4", ErrorKind.UNSUPPORTED),
        ("sets", "3-4+AMRAP", ErrorKind.UNSUPPORTED),
        ("sets", "100", ErrorKind.OUT_OF_RANGE),
        ("effort", "11", ErrorKind.OUT_OF_RANGE),
        ("effort", "9-7", ErrorKind.INVALID_RANGE),
    ])
    def test_error_kind(self, field, text, kind):
        errors = get_parser(field).diagnose(text)
        assert [e.kind for e in errors] == [kind]
        assert errors[0].field == field

    def test_one_error_per_failing_segment_in_order(self):
        parser = get_parser("reps")
        text = "abc,8,0,9-3"
        errors = parser.diagnose(text)
        assert [e.input for e in errors] == ["abc", "0", "9-3"]
        assert len(errors) == len(parser.parse(text).errors)

    def test_valid_input_has_no_errors(self):
        assert get_parser("rest").diagnose("1m30s-2m") == []
        assert get_parser("rest").diagnose("") == []


class TestParseOrRaise:

    def test_returns_value(self):
        assert get_parser("reps").parse_or_raise("8") == ParsedReps(values=[FixedRep(value=8)])

    def test_returns_none_for_empty(self):
        assert get_parser("weight").parse_or_raise("  ") is None

    def test_raises_first_error(self):
        with pytest.raises(NotationParseError) as exc_info:
            get_parser("effort").parse_or_raise("7,11,12")
        assert exc_info.value.input == "11"
        assert exc_info.value.kind == ErrorKind.OUT_OF_RANGE
