"""The PE resource directory tree."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from enum import IntEnum
from itertools import chain
from typing import BinaryIO, Iterator, Optional, Tuple, Union

from innoread.binary import read_exact
from innoread.pe.section_reader import SectionReader


class ResourceType(IntEnum):
    """Predefined resource type identifiers."""

    CURSOR = 1
    BITMAP = 2
    ICON = 3
    MENU = 4
    DIALOG = 5
    STRING = 6
    FONT_DIRECTORY = 7
    FONT = 8
    ACCELERATOR = 9
    RCDATA = 10
    MESSAGE_TABLE = 11
    GROUP_CURSOR = 12
    GROUP_ICON = 14
    VERSION = 16
    DIALOG_INCLUDE = 17
    PLUG_PLAY = 19
    VXD = 20
    ANIMATED_CURSOR = 21
    ANIMATED_ICON = 22
    HTML = 23
    MANIFEST = 24

    @property
    def id(self) -> int:
        return int(self)

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.display_name

    def __repr__(self) -> str:
        return f"{self.display_name}({int(self)})"


_DISPLAY_NAMES = {
    ResourceType.CURSOR: "Cursor",
    ResourceType.BITMAP: "Bitmap",
    ResourceType.ICON: "Icon",
    ResourceType.MENU: "Menu",
    ResourceType.DIALOG: "Dialog",
    ResourceType.STRING: "String",
    ResourceType.FONT_DIRECTORY: "FontDirectory",
    ResourceType.FONT: "Font",
    ResourceType.ACCELERATOR: "Accelerator",
    ResourceType.RCDATA: "RCData",
    ResourceType.MESSAGE_TABLE: "MessageTable",
    ResourceType.GROUP_CURSOR: "GroupCursor",
    ResourceType.GROUP_ICON: "GroupIcon",
    ResourceType.VERSION: "Version",
    ResourceType.DIALOG_INCLUDE: "DialogInclude",
    ResourceType.PLUG_PLAY: "PlugPlay",
    ResourceType.VXD: "Vxd",
    ResourceType.ANIMATED_CURSOR: "AnimatedCursor",
    ResourceType.ANIMATED_ICON: "AnimatedIcon",
    ResourceType.HTML: "Html",
    ResourceType.MANIFEST: "Manifest",
}

_DATA_ENTRY = struct.Struct("<IIII")
_DIRECTORY_HEADER = struct.Struct("<IIHHHH")
_DIRECTORY_ENTRY = struct.Struct("<II")
_IS_DIRECTORY_MASK = 1 << 31


@dataclass(frozen=True)
class ImageResourceDataEntry:
    """A leaf of the resource tree: where the data is, its size and code page."""

    offset_to_data: int
    size: int
    codepage: int
    reserved: int = 0

    SIZE = _DATA_ENTRY.size

    @classmethod
    def read_from(cls, src: BinaryIO) -> "ImageResourceDataEntry":
        return cls(*_DATA_ENTRY.unpack(read_exact(src, _DATA_ENTRY.size)))


@dataclass(frozen=True)
class ImageResourceDirectory:
    """The header of a resource directory table."""

    characteristics: int
    time_date_stamp: int
    major_version: int
    minor_version: int
    number_of_name_entries: int
    number_of_id_entries: int

    SIZE = _DIRECTORY_HEADER.size

    @classmethod
    def read_from(cls, src: BinaryIO) -> "ImageResourceDirectory":
        return cls(*_DIRECTORY_HEADER.unpack(read_exact(src, _DIRECTORY_HEADER.size)))


ResourceDirectoryEntryData = Union["ResourceDirectoryTable", ImageResourceDataEntry]


@dataclass(frozen=True)
class ImageResourceDirectoryEntry:
    """An entry of a directory table, pointing at a subtable or a data entry."""

    name_or_id: int
    offset_to_data_or_directory: int

    SIZE = _DIRECTORY_ENTRY.size

    @classmethod
    def read_from(cls, src: BinaryIO) -> "ImageResourceDirectoryEntry":
        return cls(*_DIRECTORY_ENTRY.unpack(read_exact(src, _DIRECTORY_ENTRY.size)))

    def is_table(self) -> bool:
        """Whether the entry points at a subtable rather than a data entry."""
        return bool(self.offset_to_data_or_directory & _IS_DIRECTORY_MASK)

    def data_offset(self) -> int:
        """The offset, within the resource section, of the table or data entry."""
        return self.offset_to_data_or_directory & ~_IS_DIRECTORY_MASK

    def data(self, directory: "ResourceDirectory") -> ResourceDirectoryEntryData:
        """Read the subtable or data entry this entry points at."""
        reader = directory.reader()
        reader.seek(self.data_offset(), io.SEEK_SET)
        if self.is_table():
            return ResourceDirectoryTable.read_from(reader)
        return ImageResourceDataEntry.read_from(reader)

    def file_offset(self, resource_offset: int) -> int:
        return self.data_offset() + resource_offset


@dataclass(frozen=True)
class ResourceDirectoryTable:
    """A directory table: its header followed by named and numbered entries."""

    header: ImageResourceDirectory
    name_entries: Tuple[ImageResourceDirectoryEntry, ...] = ()
    id_entries: Tuple[ImageResourceDirectoryEntry, ...] = ()

    @classmethod
    def read_from(cls, src: BinaryIO) -> "ResourceDirectoryTable":
        header = ImageResourceDirectory.read_from(src)
        name_entries = tuple(
            ImageResourceDirectoryEntry.read_from(src)
            for _ in range(header.number_of_name_entries)
        )
        id_entries = tuple(
            ImageResourceDirectoryEntry.read_from(src)
            for _ in range(header.number_of_id_entries)
        )
        return cls(header=header, name_entries=name_entries, id_entries=id_entries)

    def find_id_entry(self, entry_id: int) -> Optional[ImageResourceDirectoryEntry]:
        """The first numbered entry with the given id, or None."""
        return next(
            (entry for entry in self.id_entries if entry.name_or_id == entry_id), None
        )

    def entries(self) -> Iterator[ImageResourceDirectoryEntry]:
        """All entries: named ones first, then numbered ones."""
        return chain(self.name_entries, self.id_entries)


class ResourceDirectory:
    """Walks down the resource tree of a section, one table at a time."""

    def __init__(self, reader: SectionReader) -> None:
        self._current_table = ResourceDirectoryTable.read_from(reader)
        self._reader = reader

    def reader(self) -> SectionReader:
        """The reader over the resource section."""
        return self._reader

    @property
    def current_table(self) -> ResourceDirectoryTable:
        return self._current_table

    def find_rc_data(self) -> ResourceDirectoryTable:
        """Descend into the RCData table."""
        return self.find_directory_table_by_id(ResourceType.RCDATA.id)

    def find_directory_table_by_id(self, entry_id: int) -> ResourceDirectoryTable:
        """Descend into the subtable with the given id and make it current.

        Raises ValueError if there is no such entry or it is not a table.
        """
        entry = self._current_table.find_id_entry(entry_id)
        if entry is None:
            raise ValueError(f"{entry_id} not found in current directory table")
        data = entry.data(self)
        if not isinstance(data, ResourceDirectoryTable):
            raise ValueError(f"entry {entry_id} is a data entry, not a directory table")
        self._current_table = data
        return data