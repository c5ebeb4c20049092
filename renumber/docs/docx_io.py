from __future__ import annotations

import os
from typing import List

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError


def read_docx(path: str) -> str:
    """Return the paragraphs of a DOCX file as newline-joined text."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Cannot open file {path}")
    if os.path.getsize(path) == 0:
        raise ValueError(f"Empty file or file read error: {path}")
    try:
        docx = DocxDocument(path)
    except PackageNotFoundError as e:
        raise ValueError(f"Cannot open file {path}") from e
    return "\n".join(para.text for para in docx.paragraphs)


def write_docx(text: str, out_path: str) -> str:
    """Write formatted text to DOCX, one paragraph per numbered item.

    Blank separator lines between items are not written as empty paragraphs;
    paragraph spacing in Word plays that role.
    """
    d = DocxDocument()
    blocks: List[str] = [b for b in text.split("\n\n") if b]
    for block in blocks:
        p = d.add_paragraph()
        p.add_run(block)
    d.save(out_path)
    return out_path
