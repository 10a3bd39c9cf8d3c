"""
Public entry points for jsonsift.

Every function is a pure transformation of its input text. Malformed input
never raises: "not JSON" and "no JSON found" are returned as ``None``.
"""

import json
from typing import Any, Optional

from ..formatting.formatter import Formatter
from ..security.exceptions import ParseError
from ..utils.config import ExtractionConfig
from . import printer
from .relaxed import RelaxedValueParser, loads_strict
from .scanner import Fragment, FragmentScanner


def parse_relaxed(text: str) -> Any:
    """
    Parse ``text`` as relaxed JSON.

    Returns ``None`` when the text is not JSON. Use ``try_parse_relaxed`` to
    tell a JSON ``null`` apart from a failure.

    Example:
        >>> parse_relaxed("{'a': 'b'}")
        {'a': 'b'}
    """
    return try_parse_relaxed(text)[1]


def try_parse_relaxed(text: str) -> tuple[bool, Any]:
    """Parse ``text`` as relaxed JSON, returning (found, value)."""
    return RelaxedValueParser().try_parse(text)


def scan_fragments(
    text: str, config: Optional[ExtractionConfig] = None
) -> list[Fragment]:
    """Locate every JSON fragment in ``text`` in document order."""
    return FragmentScanner(config).scan(text)


def filter_json(
    text: str,
    keep_longest: Optional[bool] = None,
    config: Optional[ExtractionConfig] = None,
    raise_on_empty: bool = False,
) -> Optional[str]:
    """
    Discard everything in ``text`` that is not JSON.

    Args:
        text: Arbitrary text.
        keep_longest: Keep only the fragment with the longest pretty-printed form.
            Defaults to ``config.keep_longest``.
        config: Optional extraction configuration.
        raise_on_empty: Raise NoJsonFoundError instead of returning None.

    Returns:
        Pretty-printed fragments separated by a blank line, or None if no
        JSON was found or the input is over the size limit.
    """
    return Formatter(config).filter(text, keep_longest, raise_on_empty)


def format_in_place(text: str, config: Optional[ExtractionConfig] = None) -> str:
    """Pretty-print the JSON fragments of ``text`` without touching anything else."""
    return Formatter(config).in_place(text)


def pretty_print(value: Any, config: Optional[ExtractionConfig] = None) -> str:
    """Render a parsed value with the configured indentation."""
    return printer.pretty_print(value, config.formatting if config else None)


def compress_json(text: str, config: Optional[ExtractionConfig] = None) -> str:
    """
    Render a whole relaxed JSON document with no insignificant whitespace.

    Raises:
        ParseError: If ``text`` as a whole is not relaxed JSON.
    """
    found, value = RelaxedValueParser().try_parse(text)
    if found:
        return printer.compact(value, config.formatting if config else None)

    stripped = text.strip()
    if not stripped:
        raise ParseError("Empty document", 1, 1)

    leading = len(text) - len(text.lstrip())
    try:
        loads_strict(stripped)
    except json.JSONDecodeError as e:
        raise ParseError.at_position(f"Invalid JSON: {e.msg}", leading + e.pos, text) from e
    except (ValueError, RecursionError) as e:
        raise ParseError(f"Invalid JSON: {e}") from e

    raise ParseError("Invalid JSON")
