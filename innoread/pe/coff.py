"""The COFF file header (IMAGE_FILE_HEADER) of a PE image."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntFlag
from typing import BinaryIO

from innoread.binary import read_exact


class CoffCharacteristics(IntFlag):
    """Flags describing attributes of the image file."""

    IMAGE_FILE_RELOCS_STRIPPED = 1
    IMAGE_FILE_EXECUTABLE_IMAGE = 1 << 1
    IMAGE_FILE_LINE_NUMS_STRIPPED = 1 << 2
    IMAGE_FILE_LOCAL_SYMS_STRIPPED = 1 << 3
    IMAGE_FILE_AGGRESSIVE_WS_TRIM = 1 << 4
    IMAGE_FILE_LARGE_ADDRESS_AWARE = 1 << 5
    RESERVED = 1 << 6
    IMAGE_FILE_BYTES_REVERSED_LO = 1 << 7
    IMAGE_FILE_32BIT_MACHINE = 1 << 8
    IMAGE_FILE_DEBUG_STRIPPED = 1 << 9
    IMAGE_FILE_REMOVABLE_RUN_FROM_SWAP = 1 << 10
    IMAGE_FILE_NET_RUN_FROM_SWAP = 1 << 11
    IMAGE_FILE_SYSTEM = 1 << 12
    IMAGE_FILE_DLL = 1 << 13
    IMAGE_FILE_UP_SYSTEM_ONLY = 1 << 14
    IMAGE_FILE_BYTES_REVERSED_HI = 1 << 15


_LAYOUT = struct.Struct("<HHIIIHH")


@dataclass(frozen=True)
class CoffHeader:
    """The 20-byte COFF header that follows the PE signature."""

    machine: int
    number_of_sections: int
    time_date_stamp: int
    pointer_to_symbol_table: int
    number_of_symbols: int
    size_of_optional_header: int
    characteristics: CoffCharacteristics

    SIZE = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "CoffHeader":
        """Decode a header from exactly 20 bytes."""
        if len(data) != _LAYOUT.size:
            raise ValueError(
                f"COFF header needs {_LAYOUT.size} bytes, got {len(data)}"
            )
        (
            machine,
            number_of_sections,
            time_date_stamp,
            pointer_to_symbol_table,
            number_of_symbols,
            size_of_optional_header,
            characteristics,
        ) = _LAYOUT.unpack(data)
        return cls(
            machine=machine,
            number_of_sections=number_of_sections,
            time_date_stamp=time_date_stamp,
            pointer_to_symbol_table=pointer_to_symbol_table,
            number_of_symbols=number_of_symbols,
            size_of_optional_header=size_of_optional_header,
            characteristics=CoffCharacteristics(characteristics),
        )

    @classmethod
    def read_from(cls, src: BinaryIO) -> "CoffHeader":
        return cls.from_bytes(read_exact(src, _LAYOUT.size))