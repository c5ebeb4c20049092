"""Document layer of the renumbering pipeline.

Exposes:
- Data model: LineRecord, FormatResult
- Output assembly: OutputBuffer, assemble
- Readers/writers: txt, docx
- Driver: renumber_text, format_document
"""

from .model import LineRecord, FormatResult
from .buffer import GROWTH_MARGIN, OutputBuffer, assemble
from .pipeline import renumber_text, format_document

__all__ = [
    "LineRecord",
    "FormatResult",
    "GROWTH_MARGIN",
    "OutputBuffer",
    "assemble",
    "renumber_text",
    "format_document",
]
