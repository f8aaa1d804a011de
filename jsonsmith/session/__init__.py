"""
jsonsmith tool session: buffer ownership, debounced validation and persistence.
"""

from .debounce import Debouncer
from .messages import translate
from .store import JsonFileStore, KeyValueStore, MemoryStore
from .tool import JsonFormatterTool

__all__ = [
    'JsonFormatterTool', 'Debouncer', 'KeyValueStore', 'MemoryStore',
    'JsonFileStore', 'translate',
]
