"""Data directories of the PE optional header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Iterator, Optional, Tuple

from innoread.binary import read_exact
from innoread.pe.section_table import SectionTable

_LAYOUT = struct.Struct("<II")


@dataclass(frozen=True)
class DataDirectory:
    """The address and size of one table in the image."""

    virtual_address: int
    size: int

    SIZE = _LAYOUT.size

    @classmethod
    def from_bytes(cls, data: bytes) -> "DataDirectory":
        """Decode a data directory from exactly 8 bytes."""
        if len(data) != _LAYOUT.size:
            raise ValueError(
                f"data directory needs {_LAYOUT.size} bytes, got {len(data)}"
            )
        return cls(*_LAYOUT.unpack(data))

    def file_offset(self, section_table: SectionTable) -> int:
        """The file offset of this directory's virtual address."""
        return section_table.to_file_offset(self.virtual_address)


@dataclass(frozen=True)
class DataDirectories:
    """The list of data directories; entries beyond its length are absent."""

    directories: Tuple[DataDirectory, ...] = ()

    @classmethod
    def read_from(cls, src: BinaryIO, count: int) -> "DataDirectories":
        """Read ``count`` consecutive data directories."""
        return cls(
            tuple(
                DataDirectory.from_bytes(read_exact(src, _LAYOUT.size))
                for _ in range(count)
            )
        )

    def _get(self, index: int) -> Optional[DataDirectory]:
        return self.directories[index] if index < len(self.directories) else None

    def export_table(self) -> Optional[DataDirectory]:
        return self._get(0)

    def import_table(self) -> Optional[DataDirectory]:
        return self._get(1)

    def resource_table(self) -> Optional[DataDirectory]:
        return self._get(2)

    def exception_table(self) -> Optional[DataDirectory]:
        return self._get(3)

    def certificate_table(self) -> Optional[DataDirectory]:
        return self._get(4)

    def base_relocation_table(self) -> Optional[DataDirectory]:
        return self._get(5)

    def debug_table(self) -> Optional[DataDirectory]:
        return self._get(6)

    def architecture(self) -> Optional[DataDirectory]:
        return self._get(7)

    def global_ptr(self) -> Optional[DataDirectory]:
        return self._get(8)

    def tls_table(self) -> Optional[DataDirectory]:
        return self._get(9)

    def load_config_table(self) -> Optional[DataDirectory]:
        return self._get(10)

    def bound_import_table(self) -> Optional[DataDirectory]:
        return self._get(11)

    def import_address_table(self) -> Optional[DataDirectory]:
        return self._get(12)

    def delay_import_descriptor(self) -> Optional[DataDirectory]:
        return self._get(13)

    def clr_runtime_header(self) -> Optional[DataDirectory]:
        return self._get(14)

    def __iter__(self) -> Iterator[DataDirectory]:
        return iter(self.directories)

    def __len__(self) -> int:
        return len(self.directories)