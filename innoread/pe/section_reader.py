"""A seekable view onto one contiguous section of a larger stream."""

from __future__ import annotations

import io
from typing import BinaryIO


class SectionReader:
    """Read and seek within ``length`` bytes of ``inner`` that begin at ``start``.

    Positions are relative to the section start. Seeks are clamped to the
    section bounds rather than failing.
    """

    def __init__(self, inner: BinaryIO, start: int, length: int) -> None:
        if start < 0:
            raise ValueError(f"section start must not be negative: {start}")
        if length < 0:
            raise ValueError(f"section length must not be negative: {length}")
        inner.seek(start, io.SEEK_SET)
        self._inner = inner
        self._start = start
        self._length = length
        self._position = 0

    def position(self) -> int:
        """The current position within the section, counted from zero."""
        return self._position

    def remaining(self) -> int:
        """The number of bytes left before the end of the section."""
        return max(self._length - self._position, 0)

    def section_start(self) -> int:
        """The offset of the section in the underlying stream."""
        return self._start

    def section_length(self) -> int:
        """The length of the section in bytes."""
        return self._length

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, never past the end of the section."""
        remaining = self.remaining()
        if remaining == 0:
            return b""
        to_read = remaining if size is None or size < 0 else min(size, remaining)
        data = self._inner.read(to_read)
        self._position += len(data)
        return data

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Move within the section and return the new, clamped position."""
        if whence == io.SEEK_SET:
            if offset < 0:
                raise ValueError(f"negative seek position {offset}")
            new_position = offset
        elif whence == io.SEEK_END:
            new_position = max(self._length + offset, 0)
        elif whence == io.SEEK_CUR:
            new_position = max(self._position + offset, 0)
        else:
            raise ValueError(f"invalid whence value: {whence}")

        clamped = min(new_position, self._length)
        self._inner.seek(self._start + clamped, io.SEEK_SET)
        self._position = clamped
        return self._position

    def tell(self) -> int:
        """The current position within the section."""
        return self._position

    def __repr__(self) -> str:
        return (
            f"SectionReader(start={self._start}, length={self._length}, "
            f"position={self._position})"
        )