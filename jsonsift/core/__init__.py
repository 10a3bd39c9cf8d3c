"""
jsonsift core scanning and parsing.

This module provides relaxed value parsing and fragment scanning.
"""

from .printer import compact, pretty_print
from .relaxed import ParseAttempt, RelaxedValueParser
from .scanner import Fragment, FragmentScanner, ScanEvent, ScanState
from .engine import (
    compress_json,
    filter_json,
    format_in_place,
    parse_relaxed,
    scan_fragments,
    try_parse_relaxed,
)

__all__ = [
    'compact', 'pretty_print',
    'ParseAttempt', 'RelaxedValueParser',
    'Fragment', 'FragmentScanner', 'ScanEvent', 'ScanState',
    'compress_json', 'filter_json', 'format_in_place',
    'parse_relaxed', 'scan_fragments', 'try_parse_relaxed',
]
