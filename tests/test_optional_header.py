import io
import struct

import pytest

from innoread.pe.data_directory import DataDirectory
from innoread.pe.optional_header import OptionalHeader
from innoread.pe.standard_fields import Magic, StandardFields32, StandardFields64

WINDOWS_VALUES = (
    0x400000, 0x1000, 0x200,
    6, 1, 2, 3, 5, 0,
    0, 0x9000, 0x400, 0x1234, 2, 0x8140,
    0x100000, 0x1000, 0x100000, 0x1000,
    0,
)


def directories(count):
    return [(0x1000 * (i + 1), 0x10 * (i + 1)) for i in range(count)]


def build_pe32(count=3, magic=0x10B):
    std = struct.pack("<HBBIIIIII", magic, 14, 2, 0x5000, 0x3000, 0, 0x1100, 0x1000, 0x6000)
    win = struct.pack("<III6HIIIIHHIIIIII", *WINDOWS_VALUES, count)
    dirs = b"".join(struct.pack("<II", *d) for d in directories(count))
    return std + win + dirs


def build_pe64(count=3):
    std = struct.pack("<HBBIIIII", 0x20B, 14, 2, 0x5000, 0x3000, 0, 0x1100, 0x1000)
    win = struct.pack("<QII6HIIIIHHQQQQII", *WINDOWS_VALUES, count)
    dirs = b"".join(struct.pack("<II", *d) for d in directories(count))
    return std + win + dirs


def test_reads_pe32_header():
    data = build_pe32()
    src = io.BytesIO(data)
    header = OptionalHeader.read_from(src)
    assert isinstance(header.standard_fields, StandardFields32)
    assert header.standard_fields.magic == Magic.IMAGE_NT_OPTIONAL_HDR32
    assert header.standard_fields.base_of_data == 0x6000
    assert header.windows_fields.image_base == 0x400000
    assert header.windows_fields.number_of_data_directories == 3
    assert [(d.virtual_address, d.size) for d in header.data_directories] == directories(3)
    assert src.tell() == len(data)


def test_reads_pe64_header():
    data = build_pe64()
    src = io.BytesIO(data)
    header = OptionalHeader.read_from(src)
    assert isinstance(header.standard_fields, StandardFields64)
    assert header.standard_fields.magic == Magic.IMAGE_NT_OPTIONAL_HDR64
    assert header.standard_fields.base_of_data is None
    assert header.data_directories.resource_table() == DataDirectory(0x3000, 0x30)
    assert src.tell() == len(data)


def test_pe32_and_pe64_windows_fields_agree():
    h32 = OptionalHeader.read_from(io.BytesIO(build_pe32()))
    h64 = OptionalHeader.read_from(io.BytesIO(build_pe64()))
    assert h32.windows_fields == h64.windows_fields
    assert h32.data_directories == h64.data_directories


def test_zero_data_directories():
    header = OptionalHeader.read_from(io.BytesIO(build_pe32(count=0)))
    assert len(header.data_directories) == 0
    assert header.data_directories.export_table() is None


def test_rom_magic_is_rejected():
    with pytest.raises(ValueError):
        OptionalHeader.read_from(io.BytesIO(build_pe32(magic=0x107)))


def test_unknown_magic_is_rejected():
    with pytest.raises(ValueError):
        OptionalHeader.read_from(io.BytesIO(build_pe32(magic=0x999)))


def test_truncated_data_directories_raise():
    with pytest.raises(EOFError):
        OptionalHeader.read_from(io.BytesIO(build_pe32()[:-4]))