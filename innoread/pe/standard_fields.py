"""Standard COFF fields at the start of the PE optional header."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO, Optional, Union

from innoread.binary import LITTLE_ENDIAN, read_exact, read_u16


class Magic(IntEnum):
    """Optional header magic that tells PE32 from PE32+."""

    IMAGE_NT_OPTIONAL_HDR32 = 0x10B
    IMAGE_NT_OPTIONAL_HDR64 = 0x20B
    IMAGE_ROM_OPTIONAL_HDR = 0x107

    @classmethod
    def read_from(cls, src: BinaryIO) -> "Magic":
        """Read and validate a little-endian magic value."""
        value = read_u16(src, LITTLE_ENDIAN)
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid optional header magic: {value:#x}") from None


def _check_magic(value: int, expected: Magic) -> Magic:
    if value != expected:
        raise ValueError(
            f"invalid optional header magic: {value:#x}, expected {int(expected):#x}"
        )
    return expected


_LAYOUT_32 = struct.Struct("<HBBIIIIII")
_LAYOUT_64 = struct.Struct("<HBBIIIII")


@dataclass(frozen=True)
class StandardFields32:
    """Standard fields of a PE32 image."""

    magic: Magic
    major_linker_version: int
    minor_linker_version: int
    size_of_code: int
    size_of_initialized_data: int
    size_of_uninitialized_data: int
    address_of_entry_point: int
    base_of_code: int
    base_of_data: Optional[int]

    SIZE = _LAYOUT_32.size

    @classmethod
    def read_from(cls, src: BinaryIO) -> "StandardFields32":
        """Read the fields, including a magic that must be the PE32 one."""
        magic, *rest = _LAYOUT_32.unpack(read_exact(src, _LAYOUT_32.size))
        return cls(_check_magic(magic, Magic.IMAGE_NT_OPTIONAL_HDR32), *rest)


@dataclass(frozen=True)
class StandardFields64:
    """Standard fields of a PE32+ image; these have no ``base_of_data``."""

    magic: Magic
    major_linker_version: int
    minor_linker_version: int
    size_of_code: int
    size_of_initialized_data: int
    size_of_uninitialized_data: int
    address_of_entry_point: int
    base_of_code: int
    base_of_data: Optional[int] = field(default=None, init=False)

    SIZE = _LAYOUT_64.size

    @classmethod
    def read_from(cls, src: BinaryIO) -> "StandardFields64":
        """Read the fields, including a magic that must be the PE32+ one."""
        magic, *rest = _LAYOUT_64.unpack(read_exact(src, _LAYOUT_64.size))
        return cls(_check_magic(magic, Magic.IMAGE_NT_OPTIONAL_HDR64), *rest)


StandardFields = Union[StandardFields32, StandardFields64]