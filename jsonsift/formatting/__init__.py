"""
Rewriting of text that contains JSON fragments.
"""

from .formatter import Formatter

__all__ = ["Formatter"]
