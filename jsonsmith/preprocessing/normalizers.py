"""
Token normalization repair steps.

This module contains the steps that rewrite quote style and boolean-like tokens.
"""

import regex

from ..core.regex_engine import get_engine
from ..utils.config import RepairConfig
from .base import RepairStepBase
from .string_utils import apply_outside_strings

FALSE_TOKEN_PATTERN = r":\s*f[a-z]*"
TRUE_TOKEN_PATTERN = r":\s*t[a-z]*"


class QuoteNormalizer(RepairStepBase):
    """Converts single-quote delimited text to double quotes."""

    name = "normalize_quotes"

    def should_apply(self, config: RepairConfig) -> bool:
        """Apply if quote normalization is enabled."""
        return config.normalize_quotes

    def process(self, text: str, config: RepairConfig) -> str:
        """Replace every ``'`` with ``"`` when the text has no double quotes.

        Single quotes are assumed to be the only string delimiter; mixed quoting
        is left untouched.
        """
        if '"' in text or "'" not in text:
            return text
        return text.replace("'", '"')


class BooleanNormalizer(RepairStepBase):
    """Rewrites boolean-like values after a colon to ``false``/``true``."""

    name = "normalize_booleans"

    def should_apply(self, config: RepairConfig) -> bool:
        """Apply if boolean normalization is enabled."""
        return config.normalize_booleans

    def process(self, text: str, config: RepairConfig) -> str:
        """Normalize boolean-like tokens.

        Only the leading letter is checked, so ``: FALSE``, ``: f`` and ``: fals``
        all become ``: false``. Without ``string_aware`` this also rewrites text
        inside string values that happens to follow a colon.
        """
        if config.string_aware:
            return apply_outside_strings(text, self.normalize_booleans)
        return self.normalize_booleans(text)

    @staticmethod
    def normalize_booleans(text: str) -> str:
        """Apply the false rule, then the true rule."""
        engine = get_engine()
        result = engine.sub(FALSE_TOKEN_PATTERN, ": false", text, flags=regex.IGNORECASE)
        return engine.sub(TRUE_TOKEN_PATTERN, ": true", result, flags=regex.IGNORECASE)
