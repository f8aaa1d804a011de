"""
Repair pipeline for composable JSON repair steps.

This module implements the pipeline pattern: an ordered list of text-to-text steps,
each of which assumes the previous ones already ran.
"""

import logging
from typing import Optional

from ..core.interfaces import RepairStep
from ..utils.config import RepairConfig
from .handlers import CommentHandler
from .normalizers import BooleanNormalizer, QuoteNormalizer
from .repairers import StringCloser, StructureCloser, TrailingCommaRemover

logger = logging.getLogger(__name__)


class RepairPipeline:
    """Manages a sequence of repair steps applied to JSON text."""

    def __init__(self, steps: Optional[list[RepairStep]] = None):
        self.steps = steps or []

    def add_step(self, step: RepairStep) -> None:
        """Add a repair step to the pipeline."""
        self.steps.append(step)

    def run(
        self, text: str, config: Optional[RepairConfig] = None
    ) -> tuple[str, list[str]]:
        """
        Apply all applicable steps to the text.

        Returns:
            The repaired text and the names of the steps that changed it, in order
        """
        if config is None:
            config = RepairConfig()

        result = text
        applied: list[str] = []
        for step in self.steps:
            if not step.should_apply(config):
                continue
            updated = step.process(result, config)
            if updated != result:
                logger.debug("Repair step %s changed the text", step.name)
                applied.append(step.name)
            result = updated
        return result, applied

    @classmethod
    def create_default_pipeline(cls) -> "RepairPipeline":
        """Create the standard six-step repair pipeline."""
        pipeline = cls()

        # Cleanup
        pipeline.add_step(CommentHandler())
        pipeline.add_step(TrailingCommaRemover())

        # Normalization
        pipeline.add_step(QuoteNormalizer())
        pipeline.add_step(BooleanNormalizer())

        # Structure repair (strings first, then brackets)
        pipeline.add_step(StringCloser())
        pipeline.add_step(StructureCloser())

        return pipeline
