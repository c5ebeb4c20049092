from __future__ import annotations

from typing import Iterable, Union

# Slack added on every growth.
GROWTH_MARGIN = 1024


class OutputBuffer:
    """Growable byte buffer that accumulates the formatted document.

    Capacity is tracked explicitly. An append that would not fit strictly
    under the current capacity grows it to exactly
    ``len(self) + len(chunk) + GROWTH_MARGIN``.
    """

    def __init__(self, initial_capacity: int = 0, margin: int = GROWTH_MARGIN) -> None:
        if initial_capacity < 0:
            raise ValueError("initial_capacity must be non-negative.")
        self.margin = int(margin)
        self._data = bytearray(initial_capacity)
        self._length = 0

    def __len__(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._data)

    def _grow(self, needed: int) -> None:
        new_capacity = self._length + needed + self.margin
        self._data.extend(bytes(new_capacity - len(self._data)))

    def append(self, chunk: Union[str, bytes]) -> None:
        data = chunk.encode("utf-8", "surrogateescape") if isinstance(chunk, str) else bytes(chunk)
        if self._length + len(data) >= self.capacity:
            self._grow(len(data))
        end = self._length + len(data)
        self._data[self._length:end] = data
        self._length = end

    def trim_trailing_newlines(self) -> None:
        while self._length > 0 and self._data[self._length - 1] == 0x0A:
            self._length -= 1

    def getbytes(self) -> bytes:
        return bytes(self._data[: self._length])

    def getvalue(self) -> str:
        return self.getbytes().decode("utf-8", "surrogateescape")


def assemble(formatted_lines: Iterable[str], initial_capacity: int = 0) -> str:
    """Concatenate formatted lines and drop the trailing separator.

    Doxygen:
    - @param formatted_lines: Rendered lines, each ending in a blank-line separator.
    - @param initial_capacity: Starting buffer size in bytes.
    - @return: Final document text without trailing newlines.
    """
    buffer = OutputBuffer(initial_capacity)
    for line in formatted_lines:
        buffer.append(line)
    buffer.trim_trailing_newlines()
    return buffer.getvalue()
