"""Helpers for reading fixed-size integers from binary streams."""

from __future__ import annotations

from typing import BinaryIO, Literal

ByteOrder = Literal["little", "big"]

LITTLE_ENDIAN: ByteOrder = "little"
BIG_ENDIAN: ByteOrder = "big"


def read_exact(src: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes from ``src``.

    Raises EOFError if the stream ends before enough bytes are available.
    """
    if size < 0:
        raise ValueError(f"cannot read a negative number of bytes: {size}")
    chunks = []
    remaining = size
    while remaining:
        chunk = src.read(remaining)
        if not chunk:
            raise EOFError(
                f"unexpected end of stream: wanted {size} bytes, got {size - remaining}"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _read_int(src: BinaryIO, size: int, byteorder: ByteOrder, signed: bool) -> int:
    if byteorder not in (LITTLE_ENDIAN, BIG_ENDIAN):
        raise ValueError(f"byteorder must be 'little' or 'big', not {byteorder!r}")
    return int.from_bytes(read_exact(src, size), byteorder, signed=signed)


def read_u8(src: BinaryIO) -> int:
    """Read an unsigned 8-bit integer."""
    return read_exact(src, 1)[0]


def read_u16(src: BinaryIO, byteorder: ByteOrder) -> int:
    """Read an unsigned 16-bit integer in the given byte order."""
    return _read_int(src, 2, byteorder, signed=False)


def read_i16(src: BinaryIO, byteorder: ByteOrder) -> int:
    """Read a signed 16-bit integer in the given byte order."""
    return _read_int(src, 2, byteorder, signed=True)


def read_u32(src: BinaryIO, byteorder: ByteOrder) -> int:
    """Read an unsigned 32-bit integer in the given byte order."""
    return _read_int(src, 4, byteorder, signed=False)


def read_i32(src: BinaryIO, byteorder: ByteOrder) -> int:
    """Read a signed 32-bit integer in the given byte order."""
    return _read_int(src, 4, byteorder, signed=True)


def read_u64(src: BinaryIO, byteorder: ByteOrder) -> int:
    """Read an unsigned 64-bit integer in the given byte order."""
    return _read_int(src, 8, byteorder, signed=False)