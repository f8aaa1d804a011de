"""
JSON repair steps.

This module provides the comment handler shared with the parser and the individual
heuristics of the repair pipeline. Each step is a focused, single-responsibility
component; RepairPipeline composes them in their fixed order.
"""

from .base import RepairStepBase
from .handlers import CommentHandler, strip_comments
from .normalizers import BooleanNormalizer, QuoteNormalizer
from .pipeline import RepairPipeline
from .repairers import StringCloser, StructureCloser, TrailingCommaRemover

__all__ = [
    "RepairPipeline",
    "RepairStepBase",
    "CommentHandler",
    "strip_comments",
    "QuoteNormalizer",
    "BooleanNormalizer",
    "TrailingCommaRemover",
    "StringCloser",
    "StructureCloser",
]
