"""
jsonsmith error types and parse limits.
"""

from .exceptions import (
    EmptyInputError,
    JsonSmithError,
    ParseDiagnostic,
    ParseError,
    RepairFailure,
    SecurityError,
)
from .limits import LimitValidator

__all__ = [
    'JsonSmithError', 'ParseError', 'ParseDiagnostic', 'EmptyInputError',
    'RepairFailure', 'SecurityError', 'LimitValidator',
]
