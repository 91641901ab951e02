"""The PE section table and the section headers it holds."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Tuple

from innoread.binary import read_exact
from innoread.pe.coff import CoffHeader

_LAYOUT = struct.Struct("<8s6I2HI")
_U32_MAX = 0xFFFFFFFF


@dataclass(frozen=True)
class SectionHeader:
    """One 40-byte entry of the section table."""

    name: bytes
    virtual_size: int
    virtual_address: int
    size_of_raw_data: int
    pointer_to_raw_data: int
    pointer_to_relocations: int
    pointer_to_line_numbers: int
    number_of_relocations: int
    number_of_line_numbers: int
    characteristics: int

    SIZE = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "SectionHeader":
        """Decode a section header from exactly 40 bytes."""
        if len(data) != _LAYOUT.size:
            raise ValueError(
                f"section header needs {_LAYOUT.size} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack(data))

    @classmethod
    def _read_from(cls, src: BinaryIO) -> "SectionHeader":
        return cls.from_bytes(read_exact(src, _LAYOUT.size))

    def real_name(self) -> str:
        """The section name without trailing NULs, or an empty string if not UTF-8."""
        try:
            return self.name.decode("utf-8").rstrip("\0")
        except UnicodeDecodeError:
            return ""


@dataclass(frozen=True)
class SectionTable:
    """The section headers that follow the optional header."""

    sections: Tuple[SectionHeader, ...] = ()

    @classmethod
    def read_from(cls, src: BinaryIO, coff_header: CoffHeader) -> "SectionTable":
        """Read as many section headers as the COFF header announces."""
        return cls(
            tuple(
                SectionHeader._read_from(src)
                for _ in range(coff_header.number_of_sections)
            )
        )

    def to_file_offset(self, address: int) -> int:
        """Convert a relative virtual address to a file offset.

        Raises ValueError if no section contains the address.
        """
        for section in self.sections:
            start = section.virtual_address
            end = min(start + section.virtual_size, _U32_MAX)
            if start <= address < end:
                return address + section.pointer_to_raw_data - start
        raise ValueError(f"Address 0x{address:X} not found in any section")

    def __iter__(self) -> Iterator[SectionHeader]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)