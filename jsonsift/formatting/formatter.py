"""
Filter and in-place formatting of text containing JSON fragments.
"""

from typing import Optional

from ..core.constants import OPENERS
from ..core.printer import pretty_print
from ..core.relaxed import RelaxedValueParser
from ..core.scanner import Fragment, FragmentScanner
from ..extraction.fallback import RegexFallbackExtractor
from ..extraction.policy import ExtractionPolicy
from ..security.exceptions import NoJsonFoundError, SecurityError
from ..security.limits import LimitValidator
from ..utils.config import ExtractionConfig


class Formatter:
    """Rewrites text by normalizing the JSON fragments it contains."""

    def __init__(self, config: Optional[ExtractionConfig] = None):
        self.config = config or ExtractionConfig()
        self.parser = RelaxedValueParser()
        self.scanner = FragmentScanner(self.config, self.parser)
        self.fallback = RegexFallbackExtractor(self.config, self.parser)
        self.policy = ExtractionPolicy(self.render)
        self.logger = self.config.get_logger(__name__)

    def render(self, fragment: Fragment) -> str:
        return pretty_print(fragment.value, self.config.formatting)

    def within_limits(self, text: str) -> bool:
        """Check the input size limit; oversized text is left alone, not rejected."""
        assert self.config.limits is not None
        try:
            LimitValidator(self.config.limits).validate_input_size(text)
        except SecurityError as e:
            self.logger.warning("Skipping formatting: %s", e)
            return False
        return True

    def find_fragments(self, text: str) -> list[Fragment]:
        """Scan ``text``, falling back to the regex net when nothing is found."""
        fragments = self.scanner.scan(text)
        if not fragments and self.config.fallback_enabled:
            self.logger.debug("Scanner found nothing; trying regex fallback")
            fragments = self.fallback.extract(text)
        return fragments

    def filter(
        self,
        text: str,
        keep_longest: Optional[bool] = None,
        raise_on_empty: bool = False,
    ) -> Optional[str]:
        """
        Keep only the normalized JSON found in ``text``.

        Args:
            text: Arbitrary text.
            keep_longest: Keep only the longest fragment. Defaults to the
                configured ``keep_longest``.
            raise_on_empty: Raise NoJsonFoundError instead of returning None.

        Returns:
            The selected fragments pretty-printed and joined by a blank line,
            or None when no JSON was found or the input is over the size limit.
        """
        if not self.within_limits(text):
            return None
        if keep_longest is None:
            keep_longest = self.config.keep_longest

        selected = self.policy.select(self.find_fragments(text), keep_longest)
        if not selected:
            if raise_on_empty:
                raise NoJsonFoundError()
            return None

        assert self.config.formatting is not None
        separator = self.config.formatting.fragment_separator
        return separator.join(self.render(fragment) for fragment in selected)

    def in_place(self, text: str) -> str:
        """
        Rewrite recognized fragments of ``text``, leaving all other text intact.

        An object or array document that is JSON as a whole is pretty-printed
        as a whole; any other document is rewritten fragment by fragment. The
        regex fallback is never used here because its offsets are not exact.
        Text over the size limit is returned unchanged.
        """
        if not self.within_limits(text):
            return text

        stripped = text.strip()
        if stripped and stripped[0] in OPENERS:
            found, value = self.parser.try_parse(stripped)
            if found:
                return pretty_print(value, self.config.formatting)

        fragments = self.scanner.scan(text)
        if not fragments:
            return text

        pieces = []
        cursor = len(text)
        for fragment in sorted(fragments, key=lambda f: f.start, reverse=True):
            if fragment.end > cursor:
                self.logger.debug(
                    "Skipping overlapping fragment at %d-%d", fragment.start, fragment.end
                )
                continue
            pieces.append(text[fragment.end : cursor])
            pieces.append(self.render(fragment))
            cursor = fragment.start
        pieces.append(text[:cursor])

        return "".join(reversed(pieces))
