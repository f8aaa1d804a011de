"""
Parse limits for jsonsmith.
This module keeps parsing and formatting within interactive-document bounds.
"""

from typing import Any

from ..utils.config import ParseLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates input size and structure depth against ParseLimits."""

    def __init__(self, limits: ParseLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def validate_nesting(self, value: Any) -> None:
        """Validate that a parsed value does not nest deeper than allowed."""
        depth = measure_depth(value)
        if depth > self.limits.max_nesting_depth:
            raise SecurityError(
                f"Nesting depth {depth} exceeds limit "
                f"{self.limits.max_nesting_depth}"
            )


def measure_depth(value: Any) -> int:
    """Return the container nesting depth of a value; scalars have depth 0."""
    max_depth = 0
    stack = [(value, 1)]
    while stack:
        node, depth = stack.pop()
        if isinstance(node, dict):
            children = node.values()
        elif isinstance(node, list):
            children = node
        else:
            continue
        max_depth = max(max_depth, depth)
        stack.extend((child, depth + 1) for child in children)
    return max_depth
