"""
Regex fallback extraction.

A secondary, lower-precision net used only when the structural scanner finds
nothing. It matches balanced brackets up to a bounded nesting depth and is
blind to quotes, so it can recover JSON next to stray apostrophes that kept
the scanner inside an unterminated string.
"""

from typing import Optional

from ..core.regex_engine import RegexEngine, RegexTimeoutError, get_engine
from ..core.relaxed import RelaxedValueParser
from ..core.scanner import Fragment
from ..utils.config import ExtractionConfig

_ATOM = r"[^{}\[\]]"


def build_balanced_pattern(max_nesting: int) -> str:
    """Build a pattern for ``{...}``/``[...]`` with up to ``max_nesting`` inner levels."""
    body = rf"{_ATOM}*"
    group = rf"\{{{body}\}}|\[{body}\]"
    for _ in range(max_nesting):
        body = rf"(?:{_ATOM}|{group})*"
        group = rf"\{{{body}\}}|\[{body}\]"
    return group


class RegexFallbackExtractor:
    """Extracts bracket-balanced spans by pattern and keeps those that parse."""

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        parser: Optional[RelaxedValueParser] = None,
        engine: Optional[RegexEngine] = None,
    ):
        self.config = config or ExtractionConfig()
        self.parser = parser or RelaxedValueParser()
        self.engine = engine or get_engine()
        self.logger = self.config.get_logger(__name__)

        assert self.config.fallback is not None
        self.settings = self.config.fallback
        self.pattern = build_balanced_pattern(self.settings.max_nesting)

    def extract(self, text: str) -> list[Fragment]:
        """Return the parseable pattern matches of ``text`` in document order."""
        try:
            matches = self.engine.finditer(
                self.pattern, text, timeout=self.settings.timeout
            )
        except RegexTimeoutError as e:
            self.logger.warning("Fallback extraction abandoned: %s", e.args[0])
            return []

        fragments = []
        for match in matches:
            found, value = self.parser.try_parse(match.group())
            if found:
                fragments.append(Fragment(match.start(), match.end(), value, text))
            else:
                self.logger.debug(
                    "Fallback match at %d-%d is not JSON", match.start(), match.end()
                )
        return fragments
