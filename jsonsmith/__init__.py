"""
jsonsmith - format, reorder and repair JSON text.

jsonsmith parses JSON (tolerating ``//`` and ``/* */`` comments), re-serializes it in
one of three layouts, sorts object keys recursively, and applies a best-effort
repair pipeline to text that does not parse.

Key Features:
- Pretty, Minify and Smart (size-adaptive) layouts
- Recursive ascending/descending key ordering that never reorders arrays
- Six-step repair pipeline: comments, trailing commas, single quotes, boolean
  tokens, unterminated strings, unclosed objects/arrays
- Headless tool session with debounced live validation and persisted settings

Quick Start:
    import jsonsmith
    value = jsonsmith.parse('{"b": 1, "a": [1, 2]} // comment')
    text = jsonsmith.format_value(value, jsonsmith.FormatOptions(
        indent_width=4, sort_order=jsonsmith.SortOrder.ASC))

    result = jsonsmith.repair('{"a": [1, 2')
    result.recovered  # True, result.text == '{"a": [1, 2]}'
"""

from .core.formatter import StructuralFormatter, format_value, minify, pretty, smart
from .core.ordering import order_keys
from .core.parser import JsonValue, loads_strict, parse, validate
from .preprocessing.handlers import strip_comments
from .recovery.repair import RepairResult, repair, repair_or_raise
from .security.exceptions import (
    EmptyInputError,
    JsonSmithError,
    ParseDiagnostic,
    ParseError,
    RepairFailure,
    SecurityError,
)
from .session.tool import JsonFormatterTool
from .utils.config import (
    FormatMode,
    FormatOptions,
    ParseLimits,
    RepairConfig,
    SortOrder,
    ToolConfig,
)

__version__ = "0.1.0"

__all__ = [
    # Parsing
    "parse", "validate", "loads_strict", "strip_comments", "JsonValue",
    # Formatting and ordering
    "format_value", "pretty", "minify", "smart", "order_keys", "StructuralFormatter",
    # Repair
    "repair", "repair_or_raise", "RepairResult",
    # Tool session
    "JsonFormatterTool",
    # Configuration
    "FormatOptions", "FormatMode", "SortOrder", "RepairConfig", "ParseLimits",
    "ToolConfig",
    # Exceptions
    "JsonSmithError", "ParseError", "ParseDiagnostic", "EmptyInputError",
    "RepairFailure", "SecurityError",
]
