"""
Exception types raised by jsonsmith.

Every failure an operation can report is a subclass of JsonSmithError so callers can
catch the whole family at once.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ParseDiagnostic:
    """Location and message of a failed parse."""

    message: str
    position: int = 0
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return self.message


class JsonSmithError(Exception):
    """Base exception for all jsonsmith errors."""


class ParseError(JsonSmithError):
    """Raised when text fails the JSON grammar.

    ``message`` is the grammar engine's message, unmodified.
    """

    def __init__(
        self,
        message: str,
        position: int = 0,
        line: int = 1,
        column: int = 1,
    ):
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        super().__init__(message)

    @property
    def diagnostic(self) -> ParseDiagnostic:
        """The error as a ParseDiagnostic."""
        return ParseDiagnostic(
            message=self.message,
            position=self.position,
            line=self.line,
            column=self.column,
        )


class EmptyInputError(JsonSmithError):
    """Raised when an operation that needs a document gets blank input."""

    def __init__(self, message: str = "Input is empty"):
        super().__init__(message)


class RepairFailure(JsonSmithError):
    """Raised when the repaired text still does not parse."""

    def __init__(self, text: str, diagnostic: Optional[ParseDiagnostic] = None):
        self.text = text
        self.diagnostic = diagnostic
        detail = f": {diagnostic.message}" if diagnostic else ""
        super().__init__(f"Repair did not produce valid JSON{detail}")


class SecurityError(JsonSmithError):
    """Raised when input exceeds the configured parse limits."""
