"""
Best-effort repair of malformed JSON text.

The repair pipeline is a fixed sequence of textual heuristics; its output is always
returned, and a final strict parse decides whether the text was recovered.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..core.parser import loads_strict
from ..preprocessing.pipeline import RepairPipeline
from ..security.exceptions import (
    ParseDiagnostic,
    ParseError,
    RepairFailure,
    SecurityError,
)
from ..utils.config import RepairConfig

logger = logging.getLogger(__name__)


@dataclass
class RepairResult:
    """Outcome of a repair attempt."""

    text: str
    recovered: bool
    diagnostic: Optional[str] = None
    applied_steps: list[str] = field(default_factory=list)


def repair(
    text: str,
    config: Optional[RepairConfig] = None,
    pipeline: Optional[RepairPipeline] = None,
) -> RepairResult:
    """
    Run the repair pipeline over text.

    Surrounding whitespace is trimmed before the first step. The returned text is
    the pipeline output even when it still fails to parse; ``recovered`` tells the
    two cases apart and ``diagnostic`` carries the parser message on failure.
    """
    if pipeline is None:
        pipeline = RepairPipeline.create_default_pipeline()

    fixed, applied = pipeline.run(text.strip(), config)

    try:
        loads_strict(fixed)
    except (ParseError, SecurityError) as e:
        logger.warning("Repair did not produce valid JSON: %s", e)
        return RepairResult(
            text=fixed, recovered=False, diagnostic=str(e), applied_steps=applied
        )

    logger.debug("Repair recovered the document using %s", applied)
    return RepairResult(text=fixed, recovered=True, applied_steps=applied)


def repair_or_raise(
    text: str,
    config: Optional[RepairConfig] = None,
    pipeline: Optional[RepairPipeline] = None,
) -> RepairResult:
    """Like repair(), but raise RepairFailure when the result does not parse."""
    result = repair(text, config, pipeline)
    if not result.recovered:
        raise RepairFailure(result.text, ParseDiagnostic(message=result.diagnostic or ""))
    return result
