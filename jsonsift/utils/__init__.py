"""Configuration helpers for jsonsift."""

from .config import ExtractionConfig, FallbackSettings, FormatSettings, ScanLimits

__all__ = ["ExtractionConfig", "FallbackSettings", "FormatSettings", "ScanLimits"]
