"""Removal of forbidden punctuation from raw source text."""

from __future__ import annotations

FORBIDDEN_CHARS = ("*", '"')

_DELETE_FORBIDDEN = {ord(ch): None for ch in FORBIDDEN_CHARS}


def sanitize(text: str) -> str:
    """Return `text` with every `*` and `"` removed.

    All other characters keep their original relative order.

    Doxygen:
    - @param text: Raw source content.
    - @return: Sanitized content.
    """
    return text.translate(_DELETE_FORBIDDEN)
