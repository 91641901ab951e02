"""The PE signature that follows the DOS stub."""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO

from innoread.binary import read_exact

_MAGIC_BYTES = b"PE\0\0"


class Signature(Enum):
    """PE magic ``PE\\0\\0``, stored little endian."""

    MAGIC = int.from_bytes(_MAGIC_BYTES, "little")

    @classmethod
    def read_from(cls, src: BinaryIO) -> "Signature":
        """Read and validate the four signature bytes."""
        raw = read_exact(src, 4)
        try:
            return cls(int.from_bytes(raw, "little"))
        except ValueError:
            raise ValueError(f"invalid PE signature: {raw!r}") from None

    def as_bytes(self) -> bytes:
        return self.value.to_bytes(4, "little")

    def __str__(self) -> str:
        return self.as_bytes().decode("ascii")