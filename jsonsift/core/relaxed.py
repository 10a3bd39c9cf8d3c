"""
Relaxed value parsing for jsonsift.

A candidate string is tried under three escalating strategies, stopping at
the first success:

1. strict JSON
2. naive substitution of single quotes with double quotes
3. quote-aware transliteration of single-quoted strings

Failure of all three is reported as a value, never as an exception.
"""

import json
import logging
from enum import Enum
from typing import Any, NoReturn, Optional

from .constants import closes_single_quote

logger = logging.getLogger(__name__)


class ParseAttempt(Enum):
    """Strategies tried by the relaxed parser, in order."""

    STRICT = "strict"
    NAIVE_SUBSTITUTION = "naive_substitution"
    TRANSLITERATION = "transliteration"


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"Non-standard JSON constant: {name}")


def loads_strict(text: str) -> Any:
    """
    Parse standard JSON only.

    Raises:
        json.JSONDecodeError: On any grammar violation.
        ValueError: On NaN/Infinity literals.
    """
    return json.loads(text, parse_constant=_reject_constant)


def substitute_quotes(text: str) -> str:
    """Replace every single quote not preceded by a backslash with a double quote."""
    result = []
    for i, char in enumerate(text):
        if char == "'" and (i == 0 or text[i - 1] != "\\"):
            result.append('"')
        else:
            result.append(char)
    return "".join(result)


def transliterate_quotes(text: str) -> str:
    """
    Rewrite single-quoted strings as double-quoted ones.

    A ``'`` inside a single-quoted string closes it only when followed by end
    of input, whitespace, ``,``, ``}``, ``]`` or ``:``; otherwise it is kept as
    a literal apostrophe. So ``'cat's toy'`` survives, while ``'rock 'n' roll'``
    is split after ``'n'``.
    """
    result = []
    quote_char: Optional[str] = None
    length = len(text)
    i = 0

    while i < length:
        char = text[i]

        if char == "\\":
            nxt = text[i + 1] if i + 1 < length else ""
            if quote_char is not None and nxt == "'":
                result.append("'")
            else:
                result.append(char + nxt)
            i += 2
            continue

        if quote_char is None:
            if char == "'":
                result.append('"')
                quote_char = "'"
            else:
                if char == '"':
                    quote_char = '"'
                result.append(char)
        elif quote_char == '"':
            if char == '"':
                quote_char = None
            result.append(char)
        elif char == "'":
            if closes_single_quote(text, i):
                result.append('"')
                quote_char = None
            else:
                result.append("'")
        elif char == '"':
            result.append('\\"')
        else:
            result.append(char)

        i += 1

    return "".join(result)


class RelaxedValueParser:
    """Parses JSON values written with either single or double quotes."""

    def parse_with_attempt(self, text: str) -> tuple[Optional[ParseAttempt], Any]:
        """Parse ``text``; return the strategy that succeeded (or None) and the value."""
        candidate = text.strip()
        if not candidate:
            return None, None

        try:
            return ParseAttempt.STRICT, loads_strict(candidate)
        except (ValueError, RecursionError):
            pass

        if "'" not in candidate:
            return None, None

        try:
            return ParseAttempt.NAIVE_SUBSTITUTION, loads_strict(
                substitute_quotes(candidate)
            )
        except (ValueError, RecursionError):
            pass

        try:
            return ParseAttempt.TRANSLITERATION, loads_strict(
                transliterate_quotes(candidate)
            )
        except (ValueError, RecursionError):
            logger.debug("Candidate rejected by all strategies: %.40r", candidate)
            return None, None

    def try_parse(self, text: str) -> tuple[bool, Any]:
        """Parse ``text``. Returns (found, value) so that JSON null is unambiguous."""
        attempt, value = self.parse_with_attempt(text)
        return attempt is not None, value

    def parse(self, text: str) -> Any:
        """Parse ``text``; ``None`` means either JSON null or "not JSON"."""
        return self.try_parse(text)[1]
