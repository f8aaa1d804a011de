"""
Structural formatter - re-serializes a parsed JsonValue.

Three layouts are supported:
- Pretty: every non-empty container expanded, one entry per line
- Minify: compact text with no insignificant whitespace
- Smart: subtrees whose minified text fits SMART_INLINE_LIMIT stay on one line
  (with ``": "`` after keys), larger ones are expanded one level and recursed into

Scalars, keys and inline subtrees are always produced by ``json.dumps``. Numbers that
have no JSON form (infinities from out-of-range literals such as ``1e400``) are
written as ``null``.
"""

import json
import math
from typing import Any, Callable, Optional

from ..security.exceptions import SecurityError
from ..utils.config import FormatMode, FormatOptions
from .constants import COMPACT_SEPARATORS, SMART_INLINE_LIMIT, SPACED_SEPARATORS
from .ordering import order_keys

ChildRenderer = Callable[[Any, int], str]


class StructuralFormatter:
    """Renders JsonValues according to a FormatOptions instance."""

    def __init__(self, options: Optional[FormatOptions] = None):
        self.options = options or FormatOptions()

    def pretty(self, value: Any) -> str:
        """Fully expanded layout."""
        return self._render(self._pretty, value)

    def minify(self, value: Any) -> str:
        """Fully compact layout."""
        return self._render(self._minify, value)

    def smart(self, value: Any) -> str:
        """Size-adaptive hybrid layout."""
        return self._render(self._smart, value)

    def format(self, value: Any) -> str:
        """Order keys if requested, then render in the configured mode."""
        value = order_keys(value, self.options.sort_order)
        if self.options.mode is FormatMode.MINIFY:
            return self.minify(value)
        if self.options.mode is FormatMode.SMART:
            return self.smart(value)
        return self.pretty(value)

    def _render(self, renderer: ChildRenderer, value: Any) -> str:
        try:
            return renderer(_finite(value), 0)
        except RecursionError as e:
            raise SecurityError(
                "Nesting depth exceeds what the formatter can render"
            ) from e

    def _minify(self, value: Any, _depth: int) -> str:
        return self._encode(value, COMPACT_SEPARATORS)

    def _encode(self, value: Any, separators: tuple[str, str]) -> str:
        return json.dumps(
            value,
            separators=separators,
            ensure_ascii=self.options.ensure_ascii,
            allow_nan=False,
        )

    def _pretty(self, value: Any, depth: int) -> str:
        if not _is_expandable(value):
            return self._encode(value, COMPACT_SEPARATORS)
        return self._expand(value, depth, self._pretty)

    def _smart(self, value: Any, depth: int) -> str:
        compact = self._encode(value, COMPACT_SEPARATORS)
        if not _is_expandable(value):
            return compact
        if len(compact) <= SMART_INLINE_LIMIT:
            return self._encode(value, SPACED_SEPARATORS)
        return self._expand(value, depth, self._smart)

    def _expand(self, value: Any, depth: int, render_child: ChildRenderer) -> str:
        """Render one container level with each child on its own line."""
        width = self.options.indent_width
        indent = " " * (width * depth)
        child_indent = " " * (width * (depth + 1))

        if isinstance(value, dict):
            entries = [
                f"{child_indent}{self._encode(key, COMPACT_SEPARATORS)}: "
                f"{render_child(child, depth + 1)}"
                for key, child in value.items()
            ]
            opener, closer = "{", "}"
        else:
            entries = [
                f"{child_indent}{render_child(child, depth + 1)}" for child in value
            ]
            opener, closer = "[", "]"

        body = ",\n".join(entries)
        return f"{opener}\n{body}\n{indent}{closer}"


def _finite(value: Any) -> Any:
    """Copy value with non-finite floats replaced by None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, list):
        return [_finite(item) for item in value]
    if isinstance(value, dict):
        return {key: _finite(child) for key, child in value.items()}
    return value


def _is_expandable(value: Any) -> bool:
    """Non-empty objects and arrays can be laid out over several lines."""
    return isinstance(value, (dict, list)) and len(value) > 0


def pretty(value: Any, options: Optional[FormatOptions] = None) -> str:
    """Render value fully expanded."""
    return StructuralFormatter(options).pretty(value)


def minify(value: Any, options: Optional[FormatOptions] = None) -> str:
    """Render value with no insignificant whitespace."""
    return StructuralFormatter(options).minify(value)


def smart(value: Any, options: Optional[FormatOptions] = None) -> str:
    """Render value in the size-adaptive layout."""
    return StructuralFormatter(options).smart(value)


def format_value(value: Any, options: Optional[FormatOptions] = None) -> str:
    """Order then render value as described by options."""
    return StructuralFormatter(options).format(value)
