"""Word normalization for language guessing.

Turns raw text into the token sequence the classifier counts. A token is a
lowercase run of Latin letters; digits, punctuation, and anything outside
ASCII are stripped, and pieces that end up empty are dropped.

The pipeline is applied per whitespace-separated piece, so ``"don't"``
becomes ``"dont"`` rather than two tokens. Normalization is idempotent:
feeding tokens back through :func:`normalize_words` returns them unchanged.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

# ASCII whitespace only; other separators such as NBSP stay inside a piece.
_WHITESPACE_RE = re.compile(r"\s+", re.ASCII)

# Applied in order to each lowercased piece.
_STRIP_PATTERNS: list[re.Pattern] = [
    # Punctuation and symbols
    re.compile(r"[^a-zA-Z0-9]"),
    # Digits
    re.compile(r"[0-9]"),
    # Non-ASCII characters
    re.compile(r"[^\x00-\x7f]"),
]

# Final pass of the filter chain; a no-op once the patterns above ran.
_EXCLAMATION_RE = re.compile(r"[!|?]")


def _is_latin(char: str) -> bool:
    """Whether a character belongs to the Latin script."""
    return unicodedata.name(char, "").startswith("LATIN")


def normalize_word(word: str) -> str:
    """Normalize a single piece of text.

    Args:
        word: A whitespace-free piece of raw text.

    Returns:
        The normalized token, or an empty string if nothing survives.
    """
    word = word.lower()
    for pattern in _STRIP_PATTERNS:
        word = pattern.sub("", word)
    word = "".join(char for char in word if _is_latin(char))
    return _EXCLAMATION_RE.sub("", word)


def normalize_words(words: Iterable[str]) -> list[str]:
    """Normalize a sequence of words, dropping those that end up empty."""
    tokens: list[str] = []
    for word in words:
        token = normalize_word(word)
        if token:
            tokens.append(token)
    return tokens


def tokenize(text: str) -> list[str]:
    """Split text on whitespace and normalize each piece.

    Args:
        text: Raw sentence or paragraph.

    Returns:
        Ordered list of tokens, possibly empty.

    Example::

        >>> tokenize("Hello, World! 42 times")
        ['hello', 'world', 'times']
    """
    return normalize_words(_WHITESPACE_RE.split(text))
