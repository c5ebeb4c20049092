"""Text stages of the renumbering pipeline: sanitize, split, rewrite."""

from .sanitize import FORBIDDEN_CHARS, sanitize
from .splitter import ASCII_WHITESPACE, estimate_max_lines, split_lines
from .rewriter import LINE_SEPARATOR, rewrite_line, strip_prefixes

__all__ = [
    "FORBIDDEN_CHARS",
    "sanitize",
    "ASCII_WHITESPACE",
    "estimate_max_lines",
    "split_lines",
    "LINE_SEPARATOR",
    "rewrite_line",
    "strip_prefixes",
]
