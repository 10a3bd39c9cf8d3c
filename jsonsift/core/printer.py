"""
Rendering of parsed values as JSON text.
"""

import json
from typing import Any, Optional

from ..utils.config import FormatSettings

_DEFAULT_SETTINGS = FormatSettings()


def pretty_print(value: Any, settings: Optional[FormatSettings] = None) -> str:
    """Render ``value`` indented, keys in encounter order, strings double-quoted."""
    settings = settings or _DEFAULT_SETTINGS
    return json.dumps(
        value,
        indent=settings.indent,
        ensure_ascii=settings.ensure_ascii,
        allow_nan=False,
    )


def compact(value: Any, settings: Optional[FormatSettings] = None) -> str:
    """Render ``value`` with no insignificant whitespace."""
    settings = settings or _DEFAULT_SETTINGS
    return json.dumps(
        value,
        separators=(",", ":"),
        ensure_ascii=settings.ensure_ascii,
        allow_nan=False,
    )
