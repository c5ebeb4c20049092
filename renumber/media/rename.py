"""Bulk renamer for image and video files.

Each matching file in a directory gets an 8-hex-digit pseudo-random name from
a 32-bit xorshift generator, keeping its original extension. This tool is
independent of the renumbering pipeline.
"""

from __future__ import annotations

import os
import time
from typing import Iterable, List, Optional, Tuple

MEDIA_EXTENSIONS = (
    ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".tiff", ".svg",
    ".mp4", ".mov", ".avi", ".mkv", ".flv", ".wmv", ".webm", ".mpeg", ".mpg", ".3gp",
)

_MASK32 = 0xFFFFFFFF


def xorshift32(state: int) -> int:
    """Advance a 32-bit xorshift state (shifts 13, 17, 5) and return it.

    Doxygen:
    - @param state: Current generator state.
    - @return: Next state, in [0, 2**32).
    """
    x = state & _MASK32
    x ^= (x << 13) & _MASK32
    x ^= x >> 17
    x ^= (x << 5) & _MASK32
    return x


def _clock_seed() -> int:
    return time.perf_counter_ns() & _MASK32


def media_extension(name: str, extensions: Iterable[str] = MEDIA_EXTENSIONS) -> Optional[str]:
    """Return the extension of `name` (from its last dot) if it is a media type."""
    idx = name.rfind(".")
    if idx < 0:
        return None
    ext = name[idx:]
    if ext.isascii() and ext.lower() in {e.lower() for e in extensions}:
        return ext
    return None


def rename_media_files(
    directory: str = ".",
    seed: Optional[int] = None,
    extensions: Iterable[str] = MEDIA_EXTENSIONS,
) -> List[Tuple[str, str]]:
    """Rename every media file in `directory` to ``<8 hex digits><ext>``.

    Doxygen:
    - @param directory: Directory to scan (not recursive).
    - @param seed: Generator seed; the high-resolution clock is used if None.
    - @param extensions: Extensions treated as media, with leading dot.
    - @return: List of (old_name, new_name) pairs actually renamed.
    - @throws FileNotFoundError: If `directory` does not exist.
    """
    if not os.path.isdir(directory):
        raise FileNotFoundError(f"Directory not found: {directory}")

    exts = list(extensions)
    state = _clock_seed() if seed is None else seed & _MASK32
    renamed: List[Tuple[str, str]] = []

    for name in sorted(os.listdir(directory)):
        src = os.path.join(directory, name)
        if not os.path.isfile(src):
            continue
        ext = media_extension(name, exts)
        if ext is None:
            continue

        state = xorshift32(state)
        new_name = f"{state:08x}{ext}"
        dst = os.path.join(directory, new_name)
        if os.path.exists(dst):
            print(f"Warning: target already exists, skipping: {name} -> {new_name}")
            continue
        try:
            os.rename(src, dst)
        except OSError as e:
            print(f"Warning: failed to rename '{name}': {e}")
            continue
        print(new_name)
        renamed.append((name, new_name))

    return renamed
