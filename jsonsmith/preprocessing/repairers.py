"""
Structure repair steps.

This module contains the steps that remove trailing commas, close strings left open
at the end of a line and append the closers of unterminated objects and arrays.
"""

from ..core.regex_engine import get_engine
from ..utils.config import RepairConfig
from .base import RepairStepBase
from .string_utils import StringStateTracker, apply_outside_strings

TRAILING_COMMA_PATTERN = r",(\s*[\]}])"
UNESCAPED_QUOTE_PATTERN = r'(?<!\\)"'

CLOSERS = {"{": "}", "[": "]"}


class TrailingCommaRemover(RepairStepBase):
    """Removes commas that directly precede a closing brace or bracket."""

    name = "remove_trailing_commas"

    def should_apply(self, config: RepairConfig) -> bool:
        """Apply if trailing comma removal is enabled."""
        return config.remove_trailing_commas

    def process(self, text: str, config: RepairConfig) -> str:
        """Remove trailing commas before ``}`` and ``]``."""
        if config.string_aware:
            return apply_outside_strings(text, self.remove_trailing_commas)
        return self.remove_trailing_commas(text)

    @staticmethod
    def remove_trailing_commas(text: str) -> str:
        """Drop the comma, keep the whitespace and the closer."""
        return get_engine().sub(TRAILING_COMMA_PATTERN, r"\1", text)


class StringCloser(RepairStepBase):
    """Closes strings that are left open at the end of a line."""

    name = "close_strings"

    def should_apply(self, config: RepairConfig) -> bool:
        """Apply if string closing is enabled."""
        return config.close_strings

    def process(self, text: str, config: RepairConfig) -> str:
        """Close every line that holds an odd number of unescaped double quotes.

        Works line by line: a string value that legitimately spans several lines
        is treated as unterminated on each of them.
        """
        return "\n".join(self.close_line(line) for line in text.split("\n"))

    @staticmethod
    def close_line(line: str) -> str:
        """Insert a closing quote before a trailing comma, else at line end."""
        quote_count = len(get_engine().findall(UNESCAPED_QUOTE_PATTERN, line))
        if quote_count % 2 == 0:
            return line

        if line.strip().endswith(","):
            comma = line.rfind(",")
            return line[:comma] + '"' + line[comma:]
        return line + '"'


class StructureCloser(RepairStepBase):
    """Appends the closers of objects and arrays left open at the end of text."""

    name = "close_structures"

    def should_apply(self, config: RepairConfig) -> bool:
        """Apply if structure closing is enabled."""
        return config.close_structures

    def process(self, text: str, config: RepairConfig) -> str:
        """Append missing ``}``/``]`` in reverse order of opening."""
        return text + "".join(reversed(self.unclosed(text, config.string_aware)))

    @staticmethod
    def unclosed(text: str, string_aware: bool = False) -> list[str]:
        """
        Return the stack of expected closers left after scanning ``text``.

        A closer only pops the stack when it matches the innermost open structure;
        a mismatched closer is ignored and stays in the text.
        """
        stack: list[str] = []
        tracker = StringStateTracker()

        for char in text:
            if string_aware and tracker.update_state(char):
                continue
            if char in CLOSERS:
                stack.append(CLOSERS[char])
            elif char in "}]" and stack and stack[-1] == char:
                stack.pop()

        return stack
