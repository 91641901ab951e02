"""The PE optional header: standard fields, Windows fields and data directories."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import BinaryIO

from innoread.pe.data_directory import DataDirectories
from innoread.pe.standard_fields import (
    Magic,
    StandardFields,
    StandardFields32,
    StandardFields64,
)
from innoread.pe.windows_fields import WindowsFields, WindowsFields32, WindowsFields64

_MAGIC_SIZE = 2


@dataclass(frozen=True)
class OptionalHeader:
    """The optional header of a PE32 or PE32+ image."""

    standard_fields: StandardFields
    windows_fields: WindowsFields
    data_directories: DataDirectories

    @classmethod
    def read_from(cls, src: BinaryIO) -> "OptionalHeader":
        """Read an optional header, choosing the layout from its magic.

        The stream must be seekable, since the magic is read twice.
        """
        magic = Magic.read_from(src)
        src.seek(-_MAGIC_SIZE, io.SEEK_CUR)

        is_64 = magic == Magic.IMAGE_NT_OPTIONAL_HDR64

        standard_fields: StandardFields
        windows_fields: WindowsFields
        if is_64:
            standard_fields = StandardFields64.read_from(src)
            windows_fields = WindowsFields64.read_from(src)
        else:
            standard_fields = StandardFields32.read_from(src)
            windows_fields = WindowsFields64.from_32(WindowsFields32.read_from(src))

        data_directories = DataDirectories.read_from(
            src, windows_fields.number_of_data_directories
        )
        return cls(
            standard_fields=standard_fields,
            windows_fields=windows_fields,
            data_directories=data_directories,
        )