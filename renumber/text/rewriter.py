"""Per-line rewrite: drop legacy numbering and title labels, then renumber.

A line such as ``"3. Introduction: hello world"`` loses its ``"3. "`` ordinal
and its ``"Introduction:"`` label and is emitted as ``"<n>. hello world"``
followed by a blank-line separator.
"""

from __future__ import annotations

from .splitter import ASCII_WHITESPACE

_ASCII_DIGITS = "0123456789"

LINE_SEPARATOR = "\n\n"


def strip_prefixes(line: str) -> str:
    """Return the body of `line` without its ordinal and title prefixes.

    Doxygen:
    - @param line: One trimmed line.
    - @return: Remaining body text; may be empty (e.g. for ``"42:"``).
    """
    body = line.lstrip(ASCII_WHITESPACE)
    body = body.lstrip(_ASCII_DIGITS)
    if body.startswith("."):
        body = body[1:]
    body = body.lstrip(ASCII_WHITESPACE)

    # Only the first colon marks a title.
    _, colon, rest = body.partition(":")
    if colon:
        body = rest
    return body.lstrip(ASCII_WHITESPACE)


def rewrite_line(line: str, sequence_number: int) -> str:
    """Render `line` as ``"<sequence_number>. <body>\\n\\n"``.

    Doxygen:
    - @param line: One trimmed line from the splitter.
    - @param sequence_number: Number assigned by the caller (starts at 1).
    - @return: Formatted line including its trailing separator.
    """
    return f"{sequence_number}. {strip_prefixes(line)}{LINE_SEPARATOR}"
