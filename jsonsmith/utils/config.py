"""
Configuration and limits for jsonsmith.

This module defines the formatting options, repair switches, parse limits and tool
session settings used across the package.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

ALLOWED_INDENT_WIDTHS = (2, 4)


class SortOrder(Enum):
    """Direction applied by the key orderer."""

    NONE = "none"
    ASC = "asc"
    DESC = "desc"


class FormatMode(Enum):
    """Structural serialization modes."""

    PRETTY = "pretty"
    MINIFY = "minify"
    SMART = "smart"


@dataclass
class FormatOptions:
    """Options shared by the structural formatter operations."""

    indent_width: int = 2
    sort_order: SortOrder = SortOrder.NONE
    mode: FormatMode = FormatMode.PRETTY
    ensure_ascii: bool = False

    def __post_init__(self) -> None:
        if self.indent_width not in ALLOWED_INDENT_WIDTHS:
            raise ValueError(
                f"indent_width must be one of {ALLOWED_INDENT_WIDTHS}, "
                f"got {self.indent_width}"
            )
        # Accept the persisted string form ("asc", "pretty", ...) as well
        self.sort_order = SortOrder(self.sort_order)
        self.mode = FormatMode(self.mode)


@dataclass
class SizeLimits:
    """Input size limits."""
    max_input_size: int = 10 * 1024 * 1024


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = 100


@dataclass
class ParseLimits:
    """Bounds applied before and after parsing to keep work interactive-sized."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **flat_args: Any,
    ):
        self.size_limits = size_limits or SizeLimits(
            max_input_size=flat_args.get("max_input_size", 10 * 1024 * 1024)
        )
        self.structure_limits = structure_limits or StructureLimits(
            max_nesting_depth=flat_args.get("max_nesting_depth", 100)
        )

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for JSON structures."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth


@dataclass
class RepairConfig:
    """Granular control over the repair pipeline steps."""

    strip_comments: bool = True
    remove_trailing_commas: bool = True
    normalize_quotes: bool = True
    normalize_booleans: bool = True
    close_strings: bool = True
    close_structures: bool = True
    # Skip string literal contents in the comment, comma and boolean steps
    string_aware: bool = False

    @classmethod
    def string_safe(cls) -> "RepairConfig":
        """Create a configuration whose pattern steps leave string literals alone."""
        return cls(string_aware=True)

    @classmethod
    def from_features(cls, enabled_features: set[str]) -> "RepairConfig":
        """Create a configuration with only the named steps enabled."""
        config = cls(
            strip_comments=False,
            remove_trailing_commas=False,
            normalize_quotes=False,
            normalize_booleans=False,
            close_strings=False,
            close_structures=False,
        )
        for feature_name in enabled_features:
            if not hasattr(config, feature_name):
                raise ValueError(f"Unknown repair feature: {feature_name}")
            setattr(config, feature_name, True)
        return config


@dataclass
class ToolConfig:
    """Settings for a formatter tool session."""

    debounce_delay: float = 0.5
    language: str = "en"
    limits: ParseLimits = field(default_factory=ParseLimits)
    repair: RepairConfig = field(default_factory=RepairConfig)

    def __post_init__(self) -> None:
        if self.debounce_delay < 0:
            raise ValueError("debounce_delay must not be negative")
