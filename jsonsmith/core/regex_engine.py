"""
Regex engine with timeout protection for the repair heuristics.

This module wraps the third-party ``regex`` module so that every pattern used by the
repair pipeline:
- Runs under a native per-call timeout (no signals or helper threads needed)
- Is compiled once and cached
- Reports slow patterns through logging
"""

import logging
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

import regex

from ..security.exceptions import JsonSmithError

Replacement = Union[str, Callable[[Any], str]]


@dataclass
class RegexConfig:
    """Configuration for regex engine behavior."""

    default_timeout: float = 1.0  # seconds
    cache_size: int = 128
    log_slow_patterns: bool = True
    slow_threshold_ms: float = 100.0
    logger: Optional[logging.Logger] = None


class RegexTimeoutError(JsonSmithError):
    """Raised when a regex operation exceeds its timeout."""

    def __init__(
        self,
        pattern: str,
        input_length: int,
        timeout: float,
        operation: str = "search",
    ):
        self.pattern = pattern
        self.input_length = input_length
        self.timeout = timeout
        self.operation = operation

        pattern_display = pattern[:100] + "..." if len(pattern) > 100 else pattern
        super().__init__(
            f"Regex {operation} timed out after {timeout}s\n"
            f"Pattern: {pattern_display}\n"
            f"Input length: {input_length} chars"
        )


class PatternCache:
    """LRU cache for compiled regex patterns."""

    def __init__(self, maxsize: int = 128):
        self.maxsize = maxsize
        self._cache: "OrderedDict[tuple[str, int], Any]" = OrderedDict()

    def get(self, pattern: str, flags: int) -> Optional[Any]:
        """Get cached compiled pattern."""
        key = (pattern, flags)
        compiled = self._cache.get(key)
        if compiled is not None:
            self._cache.move_to_end(key)
        return compiled

    def put(self, pattern: str, flags: int, compiled: Any) -> None:
        """Add compiled pattern to cache, evicting the least recently used."""
        key = (pattern, flags)
        self._cache[key] = compiled
        self._cache.move_to_end(key)
        while len(self._cache) > self.maxsize > 0:
            self._cache.popitem(last=False)

    def clear(self) -> None:
        """Clear all cached patterns."""
        self._cache.clear()

    def size(self) -> int:
        """Get current cache size."""
        return len(self._cache)


class RegexEngine:
    """
    Timeout-protected regex operations used by the repair pipeline.
    """

    def __init__(self, config: Optional[RegexConfig] = None):
        self.config = config or RegexConfig()
        self.cache = PatternCache(self.config.cache_size)
        self.logger = self.config.logger or logging.getLogger(__name__)

    def compile(self, pattern: str, flags: int = 0) -> Any:
        """Compile a pattern, using the cache when possible."""
        compiled = self.cache.get(pattern, flags)
        if compiled is None:
            compiled = regex.compile(pattern, flags)
            self.cache.put(pattern, flags, compiled)
        return compiled

    def sub(
        self,
        pattern: str,
        repl: Replacement,
        string: str,
        flags: int = 0,
        count: int = 0,
        timeout: Optional[float] = None,
    ) -> str:
        """Substitute matches of pattern in string."""
        compiled = self.compile(pattern, flags)
        return self._run(  # type: ignore[no-any-return]
            "sub",
            compiled,
            string,
            timeout,
            lambda t: compiled.sub(repl, string, count=count, timeout=t),
        )

    def findall(
        self,
        pattern: str,
        string: str,
        flags: int = 0,
        timeout: Optional[float] = None,
    ) -> list[Any]:
        """Find all matches of pattern in string."""
        compiled = self.compile(pattern, flags)
        return self._run(  # type: ignore[no-any-return]
            "findall", compiled, string, timeout,
            lambda t: compiled.findall(string, timeout=t),
        )

    def _run(
        self,
        operation: str,
        compiled: Any,
        string: str,
        timeout: Optional[float],
        func: Callable[[float], Any],
    ) -> Any:
        timeout_val = timeout or self.config.default_timeout
        start = time.perf_counter()
        try:
            result = func(timeout_val)
        except TimeoutError as e:
            self.logger.warning(
                "Regex %s timed out after %ss on %d chars",
                operation, timeout_val, len(string),
            )
            raise RegexTimeoutError(
                compiled.pattern, len(string), timeout_val, operation
            ) from e

        duration_ms = (time.perf_counter() - start) * 1000
        if self.config.log_slow_patterns and duration_ms > self.config.slow_threshold_ms:
            self.logger.warning(
                "Slow regex %s detected (%.2fms): pattern=%s",
                operation, duration_ms, compiled.pattern[:50],
            )
        return result

    def clear_cache(self) -> None:
        """Clear the compiled pattern cache."""
        self.cache.clear()


_engine: Optional[RegexEngine] = None


def get_engine(config: Optional[RegexConfig] = None) -> RegexEngine:
    """Get the shared engine, creating it on first use or when a config is given."""
    global _engine  # pylint: disable=global-statement
    if _engine is None or config is not None:
        _engine = RegexEngine(config)
    return _engine


def reset_engine() -> None:
    """Drop the shared engine (used by tests)."""
    global _engine  # pylint: disable=global-statement
    _engine = None
