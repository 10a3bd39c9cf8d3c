"""
Fragment scanner for jsonsift.

Finds balanced ``{...}`` / ``[...]`` spans in arbitrary text and keeps those
that parse as relaxed JSON.

The scan itself is a single forward pass, but each candidate costs one parse
attempt bounded by its own length and a rejected candidate is rescanned from
its second character. Bracket-heavy adversarial input is therefore O(n^2);
editor-sized buffers (tens of KB) are fine, larger inputs should be scanned
off the UI thread and are capped by ``ScanLimits``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from ..security.limits import LimitValidator
from ..utils.config import ExtractionConfig
from .constants import OPENERS, QUOTE_CHARS, closes_single_quote
from .relaxed import RelaxedValueParser


@dataclass(frozen=True)
class Fragment:
    """A span of the source text recognized as a JSON value."""

    start: int
    end: int
    value: Any
    source: str = field(repr=False, compare=False)

    @property
    def raw_text(self) -> str:
        """The original text of the span."""
        return self.source[self.start : self.end]

    def __len__(self) -> int:
        return self.end - self.start

    def overlaps(self, other: "Fragment") -> bool:
        """Check whether two fragments share any offset."""
        return self.start < other.end and other.start < self.end


class ScanEvent(Enum):
    """Outcome of feeding one character to an open fragment."""

    CONTINUE = "continue"
    COMPLETE = "complete"
    ABORT = "abort"


@dataclass
class ScanState:
    """Bracket and string state of the fragment currently being scanned."""

    brace_depth: int = 0
    bracket_depth: int = 0
    quote_char: Optional[str] = None
    escaped: bool = False
    fragment_start: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.fragment_start is not None

    def open(self, offset: int, char: str) -> None:
        """Open a candidate fragment at ``offset`` on the bracket ``char``."""
        self.reset()
        self.fragment_start = offset
        if char == "{":
            self.brace_depth = 1
        else:
            self.bracket_depth = 1

    def reset(self) -> None:
        self.brace_depth = 0
        self.bracket_depth = 0
        self.quote_char = None
        self.escaped = False
        self.fragment_start = None

    def feed(self, text: str, offset: int) -> ScanEvent:
        """Advance the state over ``text[offset]`` inside an open fragment."""
        char = text[offset]

        if self.escaped:
            self.escaped = False
            return ScanEvent.CONTINUE

        if char == "\\":
            self.escaped = True
            return ScanEvent.CONTINUE

        if self.quote_char == '"':
            if char == '"':
                self.quote_char = None
            return ScanEvent.CONTINUE

        if self.quote_char == "'":
            if char == "'" and closes_single_quote(text, offset):
                self.quote_char = None
            return ScanEvent.CONTINUE

        if char in QUOTE_CHARS:
            self.quote_char = char
        elif char == "{":
            self.brace_depth += 1
        elif char == "[":
            self.bracket_depth += 1
        elif char == "}":
            self.brace_depth -= 1
        elif char == "]":
            self.bracket_depth -= 1
        else:
            return ScanEvent.CONTINUE

        if self.brace_depth < 0 or self.bracket_depth < 0:
            return ScanEvent.ABORT
        if self.brace_depth == 0 and self.bracket_depth == 0:
            return ScanEvent.COMPLETE
        return ScanEvent.CONTINUE


class FragmentScanner:
    """Locates relaxed JSON fragments embedded in arbitrary text."""

    def __init__(
        self,
        config: Optional[ExtractionConfig] = None,
        parser: Optional[RelaxedValueParser] = None,
    ):
        self.config = config or ExtractionConfig()
        self.parser = parser or RelaxedValueParser()
        self.logger = self.config.get_logger(__name__)

    def scan(self, text: str) -> list[Fragment]:
        """
        Return the fragments of ``text`` in document order.

        A candidate that fails to parse is rescanned from its second
        character, so valid values nested inside an invalid outer span are
        still found. An accepted fragment resumes scanning after its closing
        bracket; emitted fragments never overlap each other.
        """
        assert self.config.limits is not None
        validator = LimitValidator(self.config.limits)
        validator.validate_input_size(text)

        fragments: list[Fragment] = []
        state = ScanState()
        length = len(text)
        pos = 0

        while pos < length:
            if not state.is_open:
                char = text[pos]
                if char in OPENERS:
                    state.open(pos, char)
                pos += 1
                continue

            event = state.feed(text, pos)
            if event is ScanEvent.CONTINUE:
                pos += 1
                continue

            start = state.fragment_start
            assert start is not None
            state.reset()

            if event is ScanEvent.COMPLETE:
                end = pos + 1
                found, value = self.parser.try_parse(text[start:end])
                if found:
                    fragments.append(Fragment(start, end, value, text))
                    if not validator.count_fragment():
                        self.logger.warning(
                            "Fragment limit %d reached at offset %d; "
                            "remaining text is not scanned",
                            self.config.max_fragments,
                            end,
                        )
                        break
                    pos = end
                    continue

            pos = start + 1

        if state.is_open:
            self.logger.debug(
                "Abandoned unterminated candidate at offset %d", state.fragment_start
            )

        return fragments
