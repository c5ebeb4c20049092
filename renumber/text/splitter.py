"""Split sanitized text into trimmed, non-blank lines."""

from __future__ import annotations

from typing import List, Optional

# Only ASCII whitespace counts; str.strip() would also eat Unicode spaces.
ASCII_WHITESPACE = " \t\n\r\v\f"


def estimate_max_lines(text: str) -> int:
    """Cheap upper bound on the number of lines: newline count + 2."""
    return text.count("\n") + 2


def split_lines(text: str, max_lines: Optional[int] = None) -> List[str]:
    """Return the trimmed non-blank lines of `text` in document order.

    Blank segments are discarded and do not count toward `max_lines`.
    Splitting stops as soon as `max_lines` lines were accepted, even if more
    segments remain. `None` means no bound.

    Doxygen:
    - @param text: Sanitized source text, `\\n`-delimited.
    - @param max_lines: Upper bound on accepted lines, or None.
    - @return: List of lines without leading/trailing ASCII whitespace.
    """
    lines: List[str] = []
    if not text:
        return lines
    for segment in text.split("\n"):
        if max_lines is not None and len(lines) >= max_lines:
            break
        stripped = segment.lstrip(ASCII_WHITESPACE)
        if not stripped:
            continue
        lines.append(stripped.rstrip(ASCII_WHITESPACE))
    return lines
