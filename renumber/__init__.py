"""renumber - document renumbering pipeline.

Packages:
- renumber.text: sanitize, split and rewrite lines
- renumber.docs: output assembly, txt/docx I/O and the file-level driver
- renumber.media: bulk media renamer (independent sibling tool)
"""

__version__ = "1.0.0"
