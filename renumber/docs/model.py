from __future__ import annotations

from dataclasses import dataclass

from renumber.text.splitter import ASCII_WHITESPACE


@dataclass(frozen=True)
class LineRecord:
    """One trimmed, non-blank source line."""

    text: str

    def __post_init__(self) -> None:
        if not self.text:
            raise ValueError("LineRecord text must not be empty.")
        if self.text.strip(ASCII_WHITESPACE) != self.text:
            raise ValueError(f"LineRecord text must be trimmed: {self.text!r}")


@dataclass
class FormatResult:
    path: str
    line_count: int
    text: str
