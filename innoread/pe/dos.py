"""The DOS header (IMAGE_DOS_HEADER) found at the start of every PE image."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Tuple

from innoread.binary import read_exact


class DosSignature(Enum):
    """The ``MZ`` magic number, stored little endian."""

    MZ = int.from_bytes(b"MZ", "little")


# signature, 13 words, e_res[4], e_oemid, e_oeminfo, e_res2[10], e_lfanew
_LAYOUT = struct.Struct("<30HI")


@dataclass(frozen=True)
class DosHeader:
    """The 64-byte DOS header; only ``signature`` and ``pe_pointer`` matter today."""

    signature: DosSignature
    bytes_on_last_page: int
    pages_in_file: int
    relocations: int
    size_of_header_in_paragraphs: int
    minimum_extra_paragraphs_needed: int
    maximum_extra_paragraphs_needed: int
    initial_relative_ss: int
    initial_sp: int
    checksum: int
    initial_ip: int
    initial_relative_cs: int
    file_address_of_relocation_table: int
    overlay_number: int
    reserved: Tuple[int, ...]
    oem_id: int
    oem_info: int
    reserved2: Tuple[int, ...]
    pe_pointer: int

    SIZE = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "DosHeader":
        """Decode a header from exactly 64 bytes, checking the ``MZ`` signature."""
        if len(data) != _LAYOUT.size:
            raise ValueError(f"DOS header needs {_LAYOUT.size} bytes, got {len(data)}")
        values = _LAYOUT.unpack(data)
        try:
            signature = DosSignature(values[0])
        except ValueError:
            raise ValueError(
                f"invalid DOS signature: {bytes(data[:2])!r}"
            ) from None
        (
            bytes_on_last_page,
            pages_in_file,
            relocations,
            size_of_header_in_paragraphs,
            minimum_extra_paragraphs_needed,
            maximum_extra_paragraphs_needed,
            initial_relative_ss,
            initial_sp,
            checksum,
            initial_ip,
            initial_relative_cs,
            file_address_of_relocation_table,
            overlay_number,
        ) = values[1:14]
        reserved = tuple(values[14:18])
        oem_id, oem_info = values[18:20]
        reserved2 = tuple(values[20:30])
        pe_pointer = values[30]
        return cls(
            signature=signature,
            bytes_on_last_page=bytes_on_last_page,
            pages_in_file=pages_in_file,
            relocations=relocations,
            size_of_header_in_paragraphs=size_of_header_in_paragraphs,
            minimum_extra_paragraphs_needed=minimum_extra_paragraphs_needed,
            maximum_extra_paragraphs_needed=maximum_extra_paragraphs_needed,
            initial_relative_ss=initial_relative_ss,
            initial_sp=initial_sp,
            checksum=checksum,
            initial_ip=initial_ip,
            initial_relative_cs=initial_relative_cs,
            file_address_of_relocation_table=file_address_of_relocation_table,
            overlay_number=overlay_number,
            reserved=reserved,
            oem_id=oem_id,
            oem_info=oem_info,
            reserved2=reserved2,
            pe_pointer=pe_pointer,
        )

    @classmethod
    def read_from(cls, src: BinaryIO) -> "DosHeader":
        """Read and decode a header from a stream."""
        return cls.from_bytes(read_exact(src, _LAYOUT.size))