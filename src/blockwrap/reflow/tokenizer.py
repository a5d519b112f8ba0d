"""Split raw text into word tokens."""

import re

_WHITESPACE = re.compile(r"\s+")


def tokenize(text: str) -> list[str]:
    """
    Split text into whitespace-delimited word tokens.

    Leading and trailing whitespace is ignored and empty tokens are dropped,
    so empty or whitespace-only input yields an empty list.

    Examples:
        >>> tokenize("  alpha \\t beta\\n\\ngamma ")
        ['alpha', 'beta', 'gamma']
        >>> tokenize("")
        []
    """
    return [token for token in _WHITESPACE.split(text.strip()) if token]
