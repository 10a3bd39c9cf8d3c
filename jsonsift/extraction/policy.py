"""
Selection of recognized fragments.
"""

from typing import Callable, Optional

from ..core.printer import pretty_print
from ..core.scanner import Fragment


class ExtractionPolicy:
    """Chooses which fragments to keep: all of them, or only the longest."""

    def __init__(self, render: Optional[Callable[[Fragment], str]] = None):
        self.render = render or (lambda fragment: pretty_print(fragment.value))

    def select(self, fragments: list[Fragment], keep_longest: bool) -> list[Fragment]:
        """
        Select fragments for output.

        With ``keep_longest`` the single fragment with the longest rendered
        form wins; ties go to the earliest start offset. Otherwise every
        fragment is returned in document order.
        """
        if not fragments:
            return []

        ordered = sorted(fragments, key=lambda fragment: fragment.start)
        if not keep_longest or len(ordered) == 1:
            return ordered

        best = ordered[0]
        best_length = len(self.render(best))
        for fragment in ordered[1:]:
            length = len(self.render(fragment))
            if length > best_length:
                best, best_length = fragment, length
        return [best]
