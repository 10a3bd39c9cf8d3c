"""
jsonsift - find, normalize and pretty-print JSON buried in arbitrary text.

jsonsift scans text such as log lines, chat transcripts or pasted console
output, finds the JSON-like fragments in it (single or double quoted) and
either keeps only the normalized JSON or rewrites the fragments in place.

Key Features:
- Relaxed parsing: strict JSON, then single quotes, then apostrophe-aware quoting
- Structural fragment scanning with recovery of values nested in invalid spans
- Regex fallback net for text the structural scanner cannot enter
- Filter mode (JSON only) and in-place mode (everything else byte-identical)
- Keep-longest selection when several fragments are found

Quick Start:
    import jsonsift

    jsonsift.filter_json("Log: {'id': 1} done")
    # '{\\n  "id": 1\\n}'

    jsonsift.format_in_place('prefix {"a":1} suffix')
    # 'prefix {\\n  "a": 1\\n} suffix'

    jsonsift.parse_relaxed("{'name': 'O\\\\'Brien'}")
    # {'name': "O'Brien"}
"""

from .core.engine import (
    compress_json,
    filter_json,
    format_in_place,
    parse_relaxed,
    pretty_print,
    scan_fragments,
    try_parse_relaxed,
)
from .core.scanner import Fragment
from .formatting.formatter import Formatter
from .security.exceptions import NoJsonFoundError, ParseError, SecurityError
from .utils.config import ExtractionConfig, FallbackSettings, FormatSettings, ScanLimits

__version__ = "0.1.0"
__author__ = "jsonsift contributors"

__all__ = [
    # Entry points
    "format_in_place", "filter_json", "scan_fragments", "parse_relaxed",
    "try_parse_relaxed", "compress_json", "pretty_print",
    # Types
    "Fragment", "Formatter",
    # Configuration classes
    "ExtractionConfig", "FallbackSettings", "FormatSettings", "ScanLimits",
    # Exception classes
    "ParseError", "NoJsonFoundError", "SecurityError",
]
