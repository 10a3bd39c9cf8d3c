"""
Fragment extraction helpers.

The regex fallback net and the fragment selection policy.
"""

from .fallback import RegexFallbackExtractor, build_balanced_pattern
from .policy import ExtractionPolicy

__all__ = ["ExtractionPolicy", "RegexFallbackExtractor", "build_balanced_pattern"]
