"""
Headless JSON formatter tool session.

A JsonFormatterTool owns one text buffer and everything derived from it: the parsed
value shown by a tree view, the current error message, and the indent and sort
settings. Edits are validated on a trailing-edge debounce; user actions (format,
smart format, minify, repair, clear) run synchronously and replace the buffer only
when they succeed. Repair is the exception: its output always replaces the buffer.
"""

import asyncio
import logging
from typing import Any, Optional

from ..core.constants import STORAGE_KEY_INDENT, STORAGE_KEY_INPUT, STORAGE_KEY_SORT
from ..core.formatter import format_value
from ..core.interfaces import ValidationListener
from ..core.parser import parse
from ..recovery.repair import RepairResult, repair
from ..security.exceptions import EmptyInputError, ParseError, SecurityError
from ..utils.config import (
    ALLOWED_INDENT_WIDTHS,
    FormatMode,
    FormatOptions,
    SortOrder,
    ToolConfig,
)
from .debounce import Debouncer
from .messages import translate
from .store import KeyValueStore, MemoryStore

logger = logging.getLogger(__name__)


class JsonFormatterTool:
    """One formatter tool instance and its persisted state."""

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        config: Optional[ToolConfig] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
        listener: Optional[ValidationListener] = None,
    ):
        """
        Create a session bound to ``loop``, or to the running loop when omitted.

        Raises:
            RuntimeError: when no loop is given and none is running
        """
        self.config = config or ToolConfig()
        self._debouncer = Debouncer(
            self.config.debounce_delay, self.validate_now, loop=loop
        )
        self.store: KeyValueStore = store if store is not None else MemoryStore()
        self.listener = listener

        self._text = str(self.store.get(STORAGE_KEY_INPUT, ""))
        self._indent_width = self._load_indent_width()
        self._sort_order = self._load_sort_order()

        self.parsed_value: Any = None
        self.error: Optional[str] = None
        self.validation_count = 0
        self._closed = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        """The current buffer."""
        return self._text

    @property
    def indent_width(self) -> int:
        return self._indent_width

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def validation_pending(self) -> bool:
        """Whether a debounced validation is scheduled."""
        return self._debouncer.pending

    @property
    def error_label(self) -> Optional[str]:
        """Localized label shown in front of the current error, if any."""
        if self.error is None:
            return None
        return translate("json.syntax_error", self.config.language)

    def options(self, mode: FormatMode = FormatMode.PRETTY) -> FormatOptions:
        """FormatOptions for the current settings."""
        return FormatOptions(
            indent_width=self._indent_width, sort_order=self._sort_order, mode=mode
        )

    def set_text(self, text: str) -> None:
        """Replace the buffer and schedule validation of the new content."""
        if self._closed:
            raise RuntimeError("Tool session is closed")
        self._replace_text(text)

    def set_indent_width(self, width: int) -> None:
        if width not in ALLOWED_INDENT_WIDTHS:
            raise ValueError(
                f"indent width must be one of {ALLOWED_INDENT_WIDTHS}, got {width}"
            )
        self._indent_width = width
        self.store.set(STORAGE_KEY_INDENT, width)

    def set_sort_order(self, order: SortOrder) -> None:
        self._sort_order = SortOrder(order)
        self.store.set(STORAGE_KEY_SORT, self._sort_order.value)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_now(self) -> None:
        """Parse the buffer and update the parsed value and error message.

        Failures are advisory: they only set ``error``.
        """
        self.validation_count += 1
        self.parsed_value = None
        self.error = None
        if self._text.strip():
            try:
                self.parsed_value = parse(self._text, self.config.limits)
            except (ParseError, SecurityError) as e:
                self.error = self._describe(e)

        logger.debug("Validated buffer (%d chars), error=%s", len(self._text), self.error)
        if self.listener is not None:
            self.listener(self.parsed_value, self.error)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def format(self) -> str:
        """Pretty-print the buffer with the current indent and sort settings."""
        return self._transform(FormatMode.PRETTY)

    def smart_format(self) -> str:
        """Apply the size-adaptive layout to the buffer."""
        return self._transform(FormatMode.SMART)

    def minify(self) -> str:
        """Minify the buffer."""
        return self._transform(FormatMode.MINIFY)

    def repair(self) -> RepairResult:
        """Run the repair pipeline and replace the buffer with its output."""
        self._require_document()
        result = repair(self._text, self.config.repair)
        self._replace_text(result.text)
        if result.recovered:
            self.error = None
        else:
            self.error = translate("json.repair_fail", self.config.language)
        logger.info("Repair finished, recovered=%s", result.recovered)
        return result

    def clear(self) -> None:
        """Empty the buffer and drop any pending validation."""
        self._debouncer.cancel()
        self._text = ""
        self.store.set(STORAGE_KEY_INPUT, "")
        self.parsed_value = None
        self.error = None

    def close(self) -> None:
        """Tear the session down; pending validation never runs."""
        self._debouncer.close()
        self._closed = True

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _transform(self, mode: FormatMode) -> str:
        self._require_document()
        try:
            value = parse(self._text, self.config.limits)
            output = format_value(value, self.options(mode))
        except (ParseError, SecurityError) as e:
            self.error = self._describe(e)
            raise
        self._replace_text(output)
        self.error = None
        return output

    def _describe(self, error: Exception) -> str:
        if isinstance(error, ParseError):
            return error.message
        return translate("json.size_limit", self.config.language, detail=error)

    def _require_document(self) -> None:
        if not self._text.strip():
            raise EmptyInputError(translate("json.empty_input", self.config.language))

    def _replace_text(self, text: str) -> None:
        # Nothing may change before scheduling succeeds
        self._debouncer.trigger()
        self._text = text
        self.store.set(STORAGE_KEY_INPUT, text)

    def _load_indent_width(self) -> int:
        width = self.store.get(STORAGE_KEY_INDENT, 2)
        if width not in ALLOWED_INDENT_WIDTHS:
            logger.warning("Ignoring stored indent width %r", width)
            return 2
        return int(width)

    def _load_sort_order(self) -> SortOrder:
        stored = self.store.get(STORAGE_KEY_SORT, SortOrder.NONE.value)
        try:
            return SortOrder(stored)
        except ValueError:
            logger.warning("Ignoring stored sort order %r", stored)
            return SortOrder.NONE
