"""
jsonsmith Repair System.

This module turns near-valid JSON text into parseable JSON using the ordered
heuristics of the repair pipeline.
"""

from .repair import RepairResult, repair, repair_or_raise

__all__ = ['RepairResult', 'repair', 'repair_or_raise']
