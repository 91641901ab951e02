"""A reader wrapper that computes a running CRC32 of everything read through it."""

from __future__ import annotations

import zlib
from typing import BinaryIO


class Crc32Reader:
    """Pass reads through to ``inner`` while hashing the bytes that were returned."""

    def __init__(self, inner: BinaryIO) -> None:
        self._inner = inner
        self._crc = 0

    @property
    def inner(self) -> BinaryIO:
        """The wrapped stream; reading from it directly bypasses the hash."""
        return self._inner

    def read(self, size: int = -1) -> bytes:
        data = self._inner.read(size)
        self._crc = zlib.crc32(data, self._crc)
        return data

    def finalize(self) -> int:
        """Return the CRC32 of all bytes read so far."""
        return self._crc & 0xFFFFFFFF