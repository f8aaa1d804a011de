"""
jsonsmith core: structural formatting and key ordering.

The parser lives in ``jsonsmith.core.parser``; it is not re-exported here because
it depends on the preprocessing package, which itself uses the core regex engine.
"""

from .formatter import StructuralFormatter, format_value, minify, pretty, smart
from .ordering import order_keys

__all__ = [
    'StructuralFormatter', 'format_value', 'pretty', 'minify', 'smart',
    'order_keys',
]
