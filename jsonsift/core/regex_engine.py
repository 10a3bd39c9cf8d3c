"""
Time-bounded regex matching for the fallback extractor.

Patterns are compiled once with the ``regex`` module and matched in a worker
thread, so a pathological input costs the caller at most the timeout.
"""

import queue
import threading
from typing import Any, Optional

import regex  # type: ignore[import-untyped]


class RegexTimeoutError(Exception):
    """Raised when matching does not finish within its timeout."""

    def __init__(self, pattern: str, input_length: int, timeout: float):
        self.pattern = pattern
        self.input_length = input_length
        self.timeout = timeout
        super().__init__(
            f"Matching {input_length} chars took longer than {timeout}s "
            f"(pattern {pattern[:40]}...)"
        )


class RegexEngine:
    """Compiled-pattern store plus a timeout-guarded ``finditer``."""

    def __init__(self, max_patterns: int = 8):
        self.max_patterns = max_patterns
        self._compiled: dict[str, Any] = {}
        self._lock = threading.Lock()

    def compile(self, pattern: str) -> Any:
        with self._lock:
            compiled = self._compiled.get(pattern)
            if compiled is None:
                if len(self._compiled) >= self.max_patterns:
                    # dicts keep insertion order; drop the oldest pattern
                    del self._compiled[next(iter(self._compiled))]
                compiled = self._compiled[pattern] = regex.compile(pattern)
            return compiled

    def finditer(self, pattern: str, text: str, timeout: float) -> list[Any]:
        """
        Return every non-overlapping match of ``pattern`` in ``text``.

        The worker thread is a daemon: after a timeout it is abandoned and
        finishes in the background.

        Raises:
            RegexTimeoutError: If matching takes longer than ``timeout`` seconds.
        """
        compiled = self.compile(pattern)
        outcome: queue.Queue = queue.Queue(maxsize=1)

        def collect() -> None:
            try:
                outcome.put((True, list(compiled.finditer(text))))
            except Exception as e:  # pylint: disable=broad-exception-caught
                outcome.put((False, e))

        threading.Thread(target=collect, daemon=True).start()
        try:
            ok, result = outcome.get(timeout=timeout)
        except queue.Empty:
            raise RegexTimeoutError(pattern, len(text), timeout) from None

        if not ok:
            raise result
        return result


_shared_engine: Optional[RegexEngine] = None
_shared_engine_lock = threading.Lock()


def get_engine() -> RegexEngine:
    """Return the process-wide engine, so compiled patterns outlive one call."""
    global _shared_engine  # pylint: disable=global-statement

    with _shared_engine_lock:
        if _shared_engine is None:
            _shared_engine = RegexEngine()
        return _shared_engine
