"""
jsonsift limits and exceptions.

This module provides processing limits and exception types.
"""

from .exceptions import (
    ErrorContext,
    ErrorContextBuilder,
    NoJsonFoundError,
    ParseError,
    SecurityError,
)
from .limits import LimitValidator

__all__ = [
    "ErrorContext",
    "ErrorContextBuilder",
    "LimitValidator",
    "NoJsonFoundError",
    "ParseError",
    "SecurityError",
]
