"""
Recursive key ordering for parsed JSON values.
"""

from typing import Any

from ..security.exceptions import SecurityError
from ..utils.config import SortOrder


def order_keys(value: Any, direction: SortOrder) -> Any:
    """
    Return a copy of value with every object's keys sorted.

    Keys are compared by code point. DESC is the reverse of the ASC sequence.
    Arrays are walked so nested objects get ordered too, but array elements keep
    their positions. SortOrder.NONE returns value itself.

    Raises:
        SecurityError: when value nests deeper than the interpreter can recurse
    """
    if direction is SortOrder.NONE:
        return value
    try:
        return _order(value, direction is SortOrder.DESC)
    except RecursionError as e:
        raise SecurityError("Nesting depth exceeds what the key orderer can handle") from e


def _order(value: Any, descending: bool) -> Any:
    if isinstance(value, list):
        return [_order(item, descending) for item in value]
    if isinstance(value, dict):
        return {
            key: _order(value[key], descending)
            for key in sorted(value, reverse=descending)
        }
    return value
