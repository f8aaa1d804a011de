"""
String-literal scanning shared by the string-aware repair steps.

JSON strings are double-quoted and use backslash escapes; this module finds those
literals so that textual heuristics can be applied to everything else.
"""

from collections.abc import Callable, Generator


class StringStateTracker:
    """Tracks whether a character stream is inside a double-quoted string."""

    def __init__(self) -> None:
        self.in_string = False
        self._escaped = False

    def update_state(self, char: str) -> bool:
        """
        Feed one character and return True if it belongs to a string literal.

        The opening and closing quotes count as part of the literal.
        """
        if not self.in_string:
            if char == '"':
                self.in_string = True
                self._escaped = False
                return True
            return False

        if self._escaped:
            self._escaped = False
        elif char == "\\":
            self._escaped = True
        elif char == '"':
            self.in_string = False
        return True

    def reset(self) -> None:
        """Reset string state tracking."""
        self.in_string = False
        self._escaped = False


def find_string_end(text: str, start: int) -> int:
    """
    Find the closing quote of the string literal opening at ``start``.

    Returns:
        Index of the closing quote, or -1 if the literal is unterminated
    """
    if start >= len(text) or text[start] != '"':
        return -1

    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == '"':
            return i
        i += 1
    return -1


def iter_segments(text: str) -> Generator[tuple[str, bool], None, None]:
    """
    Split text into alternating code and string-literal segments.

    Yields:
        Tuple of (segment, is_string_literal). An unterminated literal runs to the
        end of the text.
    """
    pos = 0
    while pos < len(text):
        start = text.find('"', pos)
        if start == -1:
            yield text[pos:], False
            return
        if start > pos:
            yield text[pos:start], False
        end = find_string_end(text, start)
        if end == -1:
            yield text[start:], True
            return
        yield text[start : end + 1], True
        pos = end + 1


def apply_outside_strings(
    text: str, processor_func: Callable[[str], str]
) -> str:
    """
    Apply ``processor_func`` to every code segment, leaving string literals intact.
    """
    return "".join(
        segment if is_string else processor_func(segment)
        for segment, is_string in iter_segments(text)
    )

