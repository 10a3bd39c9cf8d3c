"""
Configuration and limits for jsonsift extraction.

This module defines the limits and options that shape scanning, the regex
fallback net and pretty-printing.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass
class ScanLimits:
    """Input size and fragment count limits."""

    max_input_size: int = 10 * 1024 * 1024
    max_fragments: int = 10000

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.max_fragments <= 0:
            raise ValueError("max_fragments must be positive")


@dataclass
class FallbackSettings:
    """Settings for the regex fallback extractor."""

    enabled: bool = True
    max_nesting: int = 2
    timeout: float = 1.0

    def __post_init__(self) -> None:
        if self.max_nesting < 0:
            raise ValueError("max_nesting must not be negative")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")


@dataclass
class FormatSettings:
    """Settings for rendering normalized JSON."""

    indent: int = 2
    ensure_ascii: bool = False
    fragment_separator: str = "\n\n"


@dataclass
class ExtractionConfig:
    """Complete configuration for extraction and formatting."""

    limits: Optional[ScanLimits] = None
    fallback: Optional[FallbackSettings] = None
    formatting: Optional[FormatSettings] = None
    keep_longest: bool = False
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        if self.limits is None:
            self.limits = ScanLimits()
        if self.fallback is None:
            self.fallback = FallbackSettings()
        if self.formatting is None:
            self.formatting = FormatSettings()

    @property
    def max_fragments(self) -> int:
        """Maximum number of fragments a single scan may emit."""
        assert self.limits is not None
        return self.limits.max_fragments

    @property
    def fallback_enabled(self) -> bool:
        """Whether the regex fallback runs when the scanner finds nothing."""
        assert self.fallback is not None
        return self.fallback.enabled

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger, or the module logger for ``name``."""
        return self.logger or logging.getLogger(name)
