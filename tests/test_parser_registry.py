import pytest
from workout_notation.notation import (
    BaseNotationParser, register_parser, get_parser, _PARSER_REGISTRY
)
from workout_notation.notation.models import ParsedReps
from workout_notation.notation.reps import RepsParser


class _FakeParser(BaseNotationParser):
    field = "fake_field_test"
    value_model = ParsedReps

    def parse_segment(self, segment: str):
        raise self.error(segment, "never valid")


@pytest.fixture(autouse=True)
def clean_registry():
    """Remove test parsers from registry after each test."""
    yield
    _PARSER_REGISTRY.pop("fake_field_test", None)


def test_register_and_get_parser():
    register_parser(_FakeParser)
    parser = get_parser("fake_field_test")
    assert isinstance(parser, _FakeParser)
    assert parser.parse("x").errors == ['invalid fake_field_test segment: "x"']


def test_duplicate_registration_raises():
    with pytest.raises(ValueError):
        register_parser(RepsParser)


def test_get_unregistered_raises():
    with pytest.raises(KeyError):
        get_parser("tempo")
