"""
Comment handling for JSON text.

Comments are removed both before every parse and as the first repair step.
"""

import regex

from ..core.regex_engine import get_engine
from ..utils.config import RepairConfig
from .base import RepairStepBase
from .string_utils import StringStateTracker

LINE_COMMENT_PATTERN = r"//[^\r\n]*"
BLOCK_COMMENT_PATTERN = r"/\*.*?\*/"


def strip_comments(text: str, string_aware: bool = False) -> str:
    """
    Remove ``//`` line comments and ``/* */`` block comments.

    The default form is purely pattern based and will also remove comment-like
    sequences inside string values (``"http://host"`` loses ``//host"``). Pass
    ``string_aware=True`` to leave string literals alone.
    """
    if string_aware:
        return CommentHandler.remove_comments_outside_strings(text)

    engine = get_engine()
    result = engine.sub(LINE_COMMENT_PATTERN, "", text)
    return engine.sub(BLOCK_COMMENT_PATTERN, "", result, flags=regex.DOTALL)


class CommentHandler(RepairStepBase):
    """Removes comments from JSON text."""

    name = "strip_comments"

    def should_apply(self, config: RepairConfig) -> bool:
        """Apply if comment removal is enabled."""
        return config.strip_comments

    def process(self, text: str, config: RepairConfig) -> str:
        """Remove comments from JSON text."""
        return strip_comments(text, string_aware=config.string_aware)

    @staticmethod
    def remove_comments_outside_strings(text: str) -> str:
        """Remove single-line and multi-line comments that are not inside strings."""
        result = []
        tracker = StringStateTracker()
        i = 0

        while i < len(text):
            char = text[i]
            if tracker.update_state(char):
                result.append(char)
                i += 1
                continue

            next_char = text[i + 1] if i + 1 < len(text) else ""
            if char == "/" and next_char == "/":
                # Keep the newline itself
                while i < len(text) and text[i] not in "\r\n":
                    i += 1
            elif char == "/" and next_char == "*":
                end = text.find("*/", i + 2)
                if end == -1:
                    # Unterminated block comment is left as is
                    result.append(text[i:])
                    break
                i = end + 2
            else:
                result.append(char)
                i += 1

        return "".join(result)
