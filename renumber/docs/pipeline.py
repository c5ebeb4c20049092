from __future__ import annotations

import os
from typing import List, Tuple

from renumber.text import estimate_max_lines, rewrite_line, sanitize, split_lines

from .buffer import assemble
from .model import FormatResult, LineRecord
from .txt import read_txt, write_txt
from .docx_io import read_docx, write_docx


def _detect_type(path: str) -> str:
    ext = os.path.splitext(path)[1].lower()
    if ext in (".docx",):
        return "docx"
    return "txt"


def renumber_text(content: str) -> Tuple[str, int]:
    """Run sanitize → split → rewrite → assemble on in-memory text.

    Doxygen:
    - @param content: Full source text.
    - @return: (formatted text, number of lines). Zero lines gives ("", 0).
    """
    sanitized = sanitize(content)
    records = [LineRecord(t) for t in split_lines(sanitized, max_lines=estimate_max_lines(sanitized))]
    if not records:
        return "", 0

    formatted: List[str] = [rewrite_line(rec.text, number) for number, rec in enumerate(records, start=1)]
    # Start at twice the sanitized input size; the buffer grows past that on demand.
    initial_capacity = 2 * len(sanitized.encode("utf-8", "surrogateescape"))
    return assemble(formatted, initial_capacity), len(records)


def format_document(file_path: str, encoding: str = "utf-8") -> FormatResult:
    """Renumber a document in place: read → renumber → overwrite.

    - Plain text is written back with `\\n` endings and no trailing newline.
    - DOCX is written back with one paragraph per numbered item.
    - Nothing is written when the source yields no lines.
    """
    doc_type = _detect_type(file_path)

    # 1) Read the whole source
    if doc_type == "docx":
        content = read_docx(file_path)
    else:
        content = read_txt(file_path, encoding=encoding)

    # 2) Renumber in memory
    text, count = renumber_text(content)
    if count == 0:
        raise ValueError(f"No lines to process in {file_path}")

    # 3) Overwrite the source
    if doc_type == "docx":
        write_docx(text, file_path)
    else:
        write_txt(text, file_path, encoding=encoding)

    print(f"File successfully formatted: {file_path}")
    return FormatResult(path=file_path, line_count=count, text=text)
