"""
Exceptions and error context for jsonsift.

Malformed input never raises from the extraction entry points; these
exceptions cover caller-facing limits and the explicit whole-document
actions.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorContext:
    """Context information for a failure position."""

    position: int
    line: int
    column: int
    context_text: str


class ErrorContextBuilder:
    """Builds error context information from a position in source text."""

    @staticmethod
    def build_context(
        position: int, original_text: str, context_length: int = 50
    ) -> ErrorContext:
        """Build error context from position and original text."""
        if not original_text:
            return ErrorContext(
                position=position, line=1, column=position + 1, context_text=""
            )

        position = max(0, min(position, len(original_text)))
        line = original_text[:position].count("\n") + 1
        line_start = original_text.rfind("\n", 0, position) + 1
        column = position - line_start + 1

        start = max(0, position - context_length // 2)
        end = min(len(original_text), position + context_length // 2)

        return ErrorContext(
            position=position,
            line=line,
            column=column,
            context_text=original_text[start:end],
        )


class ParseError(Exception):
    """Raised when a whole document cannot be read as relaxed JSON."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        context: str = "",
    ):
        self.message = message
        self.line = line
        self.column = column
        self.context = context

        full_message = message
        if line is not None and column is not None:
            full_message = f"{message} at line {line}, column {column}"
        if context.strip():
            full_message += f": {context.strip()}"
        super().__init__(full_message)

    @classmethod
    def at_position(cls, message: str, position: int, text: str) -> "ParseError":
        """Create a ParseError located at ``position`` within ``text``."""
        ctx = ErrorContextBuilder.build_context(position, text)
        return cls(message, ctx.line, ctx.column, ctx.context_text)


class NoJsonFoundError(ParseError):
    """Raised on request when filtering finds no JSON fragment at all."""

    def __init__(self, message: str = "No JSON found"):
        super().__init__(message)


class SecurityError(Exception):
    """Raised when input exceeds a configured processing limit."""
