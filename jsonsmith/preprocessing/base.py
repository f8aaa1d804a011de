"""
Base class for repair pipeline steps.

Each step is a small text-to-text transformation that can be switched on or off
through RepairConfig and composed in a RepairPipeline.
"""

from ..utils.config import RepairConfig


class RepairStepBase:
    """Base class for repair steps with common functionality."""

    name = "step"

    def should_apply(self, _config: RepairConfig) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _config: RepairConfig) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")
