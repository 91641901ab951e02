"""Reader for Inno Setup data split into CRC32-protected 4 KiB chunks."""

from __future__ import annotations

import zlib
from typing import BinaryIO

from innoread.binary import LITTLE_ENDIAN, read_u32

INNO_CHUNK_SIZE = 1 << 12


class CrcChecksumMismatchError(ValueError):
    """Raised when stored and computed CRC32 checksums differ."""

    def __init__(self, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"CRC32 checksum mismatch: actual {actual:#010x}, expected {expected:#010x}"
        )


class InnoChunkReader:
    """Read a stream made of chunks, each a little-endian CRC32 followed by up to 4 KiB."""

    def __init__(self, inner: BinaryIO) -> None:
        self._inner = inner
        self._buffer = b""
        self._pos = 0

    def _read_chunk(self) -> bool:
        try:
            block_crc32 = read_u32(self._inner, LITTLE_ENDIAN)
        except EOFError:
            return False

        data = self._inner.read(INNO_CHUNK_SIZE)
        if not data:
            raise EOFError("unexpected Inno block end")

        actual = zlib.crc32(data) & 0xFFFFFFFF
        if actual != block_crc32:
            raise CrcChecksumMismatchError(actual, block_crc32)

        self._buffer = data
        self._pos = 0
        return True

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything when ``size`` is negative."""
        out = bytearray()
        while size < 0 or len(out) < size:
            if self._pos == len(self._buffer) and not self._read_chunk():
                break
            available = len(self._buffer) - self._pos
            take = available if size < 0 else min(size - len(out), available)
            out += self._buffer[self._pos : self._pos + take]
            self._pos += take
        return bytes(out)