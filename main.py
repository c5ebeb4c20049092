"""
Entry point and facade for the document renumbering pipeline.

Packages:
- renumber.text: Sanitize forbidden characters, split lines, rewrite prefixes
- renumber.docs: Output buffer, txt/docx I/O and `format_document`
- renumber.media: Bulk media renamer (`rename_media_files`)
"""

from __future__ import annotations

import sys

from renumber.config import load_settings
from renumber.text import (
    sanitize,
    estimate_max_lines,
    split_lines,
    strip_prefixes,
    rewrite_line,
)
from renumber.docs import (
    OutputBuffer,
    assemble,
    renumber_text,
    format_document,
)
from renumber.media import rename_media_files

__all__ = [
    # config
    "load_settings",
    # text stages
    "sanitize",
    "estimate_max_lines",
    "split_lines",
    "strip_prefixes",
    "rewrite_line",
    # assembly / documents
    "OutputBuffer",
    "assemble",
    "renumber_text",
    "format_document",
    # media
    "rename_media_files",
]


def _cli(argv: list[str] | None = None) -> None:
    """CLI for document renumbering or media renaming.

    Document mode (default):
    --file / -f: Path to the document to renumber in place (txt|docx);
                 default comes from config/settings.json
    --encoding: Text encoding for plain-text sources

    Rename mode:
    --rename-media DIR: Rename image/video files in DIR to random hex names
    --seed: Fixed generator seed (default: high-resolution clock)
    """
    import argparse

    settings = load_settings()

    parser = argparse.ArgumentParser(description="Renumber a list-like text document in place.")
    # document mode
    parser.add_argument("--file", "-f", type=str, default=settings.source_file, help=f"Path to document (txt|docx) (default: {settings.source_file})")
    parser.add_argument("--encoding", type=str, default=settings.encoding, help=f"Encoding of plain-text sources (default: {settings.encoding})")
    # rename mode
    parser.add_argument("--rename-media", type=str, metavar="DIR", help="Rename media files in DIR instead of formatting a document")
    parser.add_argument("--seed", type=int, default=None, help="Seed for generated media names (default: clock)")

    args = parser.parse_args(argv)

    try:
        if args.rename_media:
            renamed = rename_media_files(args.rename_media, seed=args.seed, extensions=settings.media_extensions)
            print(f"Files renamed: {len(renamed)}")
            return

        format_document(args.file, encoding=args.encoding)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)


if __name__ == "__main__":
    _cli()
