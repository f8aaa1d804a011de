"""
Core interfaces for composable components.

This module defines the contracts that repair steps and validation callbacks must
satisfy so they can be swapped or extended independently.
"""

from typing import Any, Callable, Optional, Protocol

# Receives the parsed value (or None) and the error message (or None)
ValidationListener = Callable[[Any, Optional[str]], None]


class RepairStep(Protocol):
    """Protocol for steps in the repair pipeline."""

    name: str

    def process(self, text: str, config: Any) -> str:
        """Process the input text according to this repair step."""
        ...

    def should_apply(self, config: Any) -> bool:
        """Determine if this step should be applied given the configuration."""
        ...
