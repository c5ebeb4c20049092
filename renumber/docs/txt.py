from __future__ import annotations

import os


def read_txt(path: str, encoding: str = "utf-8") -> str:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Cannot open file {path}")
    with open(path, "rb") as f:
        raw = f.read()
    if not raw:
        raise ValueError(f"Empty file or file read error: {path}")
    # Undecodable bytes survive as lone surrogates and are written back unchanged.
    return raw.decode(encoding, errors="surrogateescape")


def write_txt(text: str, out_path: str, encoding: str = "utf-8") -> str:
    # newline="" keeps "\n" endings on every platform
    with open(out_path, "w", encoding=encoding, errors="surrogateescape", newline="") as f:
        f.write(text)
    return out_path
