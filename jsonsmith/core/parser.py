"""
Parser/validator for jsonsmith - turns text into a JsonValue.

Comments are stripped first, then the text is handed to the standard ``json``
grammar. No recovery happens here; see ``jsonsmith.recovery`` for that.
"""

import json
from typing import Any, NoReturn, Optional, Union

from ..preprocessing.handlers import strip_comments
from ..security.exceptions import ParseDiagnostic, ParseError, SecurityError
from ..security.limits import LimitValidator
from ..utils.config import ParseLimits

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]


def _reject_constant(name: str) -> NoReturn:
    raise ParseError(f"Unexpected token {name}: not valid in JSON")


def loads_strict(text: str) -> JsonValue:
    """
    Parse text with the standard JSON grammar and nothing else.

    ``NaN``, ``Infinity`` and ``-Infinity`` are rejected.

    Raises:
        ParseError: with the grammar engine's message and location
        SecurityError: when nesting exceeds the interpreter's recursion limit
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)  # type: ignore[no-any-return]
    except json.JSONDecodeError as e:
        raise ParseError(str(e), position=e.pos, line=e.lineno, column=e.colno) from e
    except RecursionError as e:
        raise SecurityError("Nesting depth exceeds the interpreter recursion limit") from e


def parse(text: str, limits: Optional[ParseLimits] = None) -> JsonValue:
    """
    Strip comments from text and parse it.

    Args:
        text: JSON text, optionally with ``//`` and ``/* */`` comments
        limits: Size and depth bounds; defaults to ParseLimits()

    Returns:
        A freshly built JsonValue
    """
    validator = LimitValidator(limits or ParseLimits())
    validator.validate_input_size(text)

    value = loads_strict(strip_comments(text))
    validator.validate_nesting(value)
    return value


def validate(
    text: str, limits: Optional[ParseLimits] = None
) -> Optional[ParseDiagnostic]:
    """Return None if text parses, otherwise a diagnostic describing the failure."""
    try:
        parse(text, limits)
    except ParseError as e:
        return e.diagnostic
    except SecurityError as e:
        return ParseDiagnostic(message=str(e))
    return None
