"""Media file utilities, separate from the renumbering pipeline."""

from .rename import MEDIA_EXTENSIONS, media_extension, rename_media_files, xorshift32

__all__ = [
    "MEDIA_EXTENSIONS",
    "media_extension",
    "rename_media_files",
    "xorshift32",
]
