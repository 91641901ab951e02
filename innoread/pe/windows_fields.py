"""Windows-specific fields of the PE optional header (the NT additional fields)."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

from innoread.binary import read_exact

_LAYOUT_32 = struct.Struct("<III6HIIIIHHIIIIII")
_LAYOUT_64 = struct.Struct("<QII6HIIIIHHQQQQII")


@dataclass(frozen=True)
class WindowsFields32:
    """Windows fields of a PE32 image."""

    image_base: int
    section_alignment: int
    file_alignment: int
    major_operating_system_version: int
    minor_operating_system_version: int
    major_image_version: int
    minor_image_version: int
    major_subsystem_version: int
    minor_subsystem_version: int
    win32_version_value: int
    size_of_image: int
    size_of_headers: int
    check_sum: int
    subsystem: int
    dll_characteristics: int
    size_of_stack_reserve: int
    size_of_stack_commit: int
    size_of_heap_reserve: int
    size_of_heap_commit: int
    loader_flags: int
    number_of_data_directories: int

    SIZE = _LAYOUT_32.size

    @classmethod
    def read_from(cls, src: BinaryIO) -> "WindowsFields32":
        """Read the little-endian PE32 fields from a stream."""
        return cls(*_LAYOUT_32.unpack(read_exact(src, _LAYOUT_32.size)))


@dataclass(frozen=True)
class WindowsFields64:
    """Windows fields of a PE32+ image; also the unified form for both widths."""

    image_base: int
    section_alignment: int
    file_alignment: int
    major_operating_system_version: int
    minor_operating_system_version: int
    major_image_version: int
    minor_image_version: int
    major_subsystem_version: int
    minor_subsystem_version: int
    win32_version_value: int
    size_of_image: int
    size_of_headers: int
    check_sum: int
    subsystem: int
    dll_characteristics: int
    size_of_stack_reserve: int
    size_of_stack_commit: int
    size_of_heap_reserve: int
    size_of_heap_commit: int
    loader_flags: int
    number_of_data_directories: int

    SIZE = _LAYOUT_64.size

    @classmethod
    def read_from(cls, src: BinaryIO) -> "WindowsFields64":
        """Read the little-endian PE32+ fields from a stream."""
        return cls(*_LAYOUT_64.unpack(read_exact(src, _LAYOUT_64.size)))

    @classmethod
    def from_32(cls, fields: WindowsFields32) -> "WindowsFields64":
        """Widen PE32 fields into the unified form."""
        return cls(
            image_base=fields.image_base,
            section_alignment=fields.section_alignment,
            file_alignment=fields.file_alignment,
            major_operating_system_version=fields.major_operating_system_version,
            minor_operating_system_version=fields.minor_operating_system_version,
            major_image_version=fields.major_image_version,
            minor_image_version=fields.minor_image_version,
            major_subsystem_version=fields.major_subsystem_version,
            minor_subsystem_version=fields.minor_subsystem_version,
            win32_version_value=fields.win32_version_value,
            size_of_image=fields.size_of_image,
            size_of_headers=fields.size_of_headers,
            check_sum=fields.check_sum,
            subsystem=fields.subsystem,
            dll_characteristics=fields.dll_characteristics,
            size_of_stack_reserve=fields.size_of_stack_reserve,
            size_of_stack_commit=fields.size_of_stack_commit,
            size_of_heap_reserve=fields.size_of_heap_reserve,
            size_of_heap_commit=fields.size_of_heap_commit,
            loader_flags=fields.loader_flags,
            number_of_data_directories=fields.number_of_data_directories,
        )


WindowsFields = WindowsFields64