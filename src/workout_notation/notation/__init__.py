"""Notation parser registry for the five workout fields."""
from typing import Dict, List, Type

from .base import BaseNotationParser
from .errors import ErrorKind, NotationField, NotationParseError
from .models import ParseResult

_PARSER_REGISTRY: Dict[str, Type[BaseNotationParser]] = {}


def register_parser(parser_class: Type[BaseNotationParser]) -> None:
    """Register a notation parser class under its field name.

    Raises:
        ValueError: If a parser is already registered for this field.
    """
    name = parser_class.field
    if name in _PARSER_REGISTRY:
        raise ValueError(f"Parser already registered for field '{name}'")
    _PARSER_REGISTRY[name] = parser_class


def get_parser(field: str) -> BaseNotationParser:
    """Get an instantiated parser for the given field.

    Raises:
        KeyError: If no parser is registered for the field.
    """
    cls = _PARSER_REGISTRY[field]
    return cls()


def available_fields() -> List[str]:
    return list(_PARSER_REGISTRY)


__all__ = [
    "register_parser",
    "get_parser",
    "available_fields",
    "BaseNotationParser",
    "ErrorKind",
    "NotationField",
    "NotationParseError",
    "ParseResult",
]

# Auto-load parsers (triggers self-registration, in display order)
from . import weight  # noqa: F401,E402
from . import reps  # noqa: F401,E402
from . import sets  # noqa: F401,E402
from . import rest  # noqa: F401,E402
from . import effort  # noqa: F401,E402
