"""
Processing limits for jsonsift.
This module keeps the quadratic worst case of fragment scanning bounded.
"""

from ..utils.config import ScanLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates scanning limits to prevent resource exhaustion."""

    def __init__(self, limits: ScanLimits):
        self.limits = limits
        self.fragment_count = 0

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )

    def count_fragment(self) -> bool:
        """Record an emitted fragment; return False once the limit is reached."""
        self.fragment_count += 1
        return self.fragment_count < self.limits.max_fragments

    def reset(self) -> None:
        """Reset validator state for reuse."""
        self.fragment_count = 0
