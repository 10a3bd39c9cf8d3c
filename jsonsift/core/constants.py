"""
Common constants and character helpers used across jsonsift.
"""

OPENERS = "{["
CLOSERS = "}]"
QUOTE_CHARS = "'\""

# A single quote inside a single-quoted string closes it only when followed
# by end of input, whitespace or one of these delimiters.
SINGLE_QUOTE_TERMINATORS = ",}]:"


def closes_single_quote(text: str, pos: int) -> bool:
    """Check whether the ``'`` at ``pos`` closes a single-quoted string."""
    nxt = pos + 1
    if nxt >= len(text):
        return True
    char = text[nxt]
    return char.isspace() or char in SINGLE_QUOTE_TERMINATORS
