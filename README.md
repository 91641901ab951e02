# innoread

A pure-Python library for reading the structures found in Inno Setup
installers:

- the Inno Setup version marker (`innoread.version`)
- the Windows version ranges stored in setup headers (`innoread.windows_version`)
- the stream of 4 KiB chunks, each checked with its own CRC32 (`innoread.chunk`, `innoread.crc32`)
- the PE headers, section table and resource tree of the installer executable (`innoread.pe`)

It has no dependencies outside the standard library.

## Installation

```
pip install innoread
```

## Reading an Inno Setup version

```python
from innoread.version import InnoVersion

version = InnoVersion.from_raw_version(b"Inno Setup Setup Data (5.5.7) (u)")
print(version)                 # 5.5.7.0 (u)
print(version.is_unicode())    # True
print(version >= (5, 5))       # True
```

`from_raw_version` returns `None` when the marker cannot be parsed. Versions
6.3.0 and later are always marked Unicode. A version is marked ISX when the
text after the version holds `ISX` or `Inno Setup Extensions`.

Versions compare only by their four numbers. The Unicode and ISX flags are
not part of the comparison. A version also compares with a plain integer, which
is taken as the major version, and with a tuple of one to four integers, where
missing parts count as zero.

`InnoVersion.read_from(stream)` reads the 64-byte marker from a binary stream.
It raises `UnknownVersionError` when the marker cannot be parsed.

## Windows version ranges

```python
from innoread.windows_version import WindowsVersionRange

version_range = WindowsVersionRange.read_from(stream, version)
print(version_range.begin.nt_version, version_range.end.nt_service_pack)
```

Build numbers and the NT service pack are read only for Inno Setup 1.3.19 and
later.

## Chunked, CRC-checked data

`InnoChunkReader` wraps a stream made of chunks. Each chunk is a little-endian
CRC32 followed by up to 4096 bytes. Its `read(size)` checks every chunk as it
goes. It raises `CrcChecksumMismatchError` (from `innoread.chunk`) on a bad
checksum, and `EOFError` when a checksum is not followed by any data.

`Crc32Reader` passes reads through to the stream it wraps. Its `finalize()`
returns the CRC32 of all the bytes read so far.

The functions in `innoread.binary` read fixed-size integers in the given byte
order: `read_u8`, `read_u16`, `read_i16`, `read_u32`, `read_i32` and
`read_u64`, plus `read_exact`. For example, `read_u32(stream, "little")`.

## Walking a PE file

```python
from innoread.pe.dos import DosHeader
from innoread.pe.signature import Signature
from innoread.pe.coff import CoffHeader
from innoread.pe.optional_header import OptionalHeader
from innoread.pe.section_table import SectionTable
from innoread.pe.section_reader import SectionReader
from innoread.pe.resource import ResourceDirectory

with open("setup.exe", "rb") as exe:
    dos = DosHeader.read_from(exe)
    exe.seek(dos.pe_pointer)
    Signature.read_from(exe)
    coff = CoffHeader.read_from(exe)
    optional = OptionalHeader.read_from(exe)
    sections = SectionTable.read_from(exe, coff)

    resource_table = optional.data_directories.resource_table()
    offset = resource_table.file_offset(sections)
    reader = SectionReader(exe, offset, resource_table.size)
    resources = ResourceDirectory(reader)
    rc_data = resources.find_rc_data()
    for entry in rc_data.entries():
        print(entry.name_or_id, entry.is_table())
```

`OptionalHeader.read_from` needs a seekable stream. It picks the PE32 or PE32+
layout from the magic number. Its `windows_fields` always have the 64-bit
shape. `SectionReader` clamps its seeks to the bounds of the section.

Malformed input raises an exception:

- A short read raises `EOFError`.
- A bad magic number or signature raises `ValueError`.
- An address that lies in no section raises `ValueError`.
- A resource id that is missing from the current table raises `ValueError`.

## What this package does not do

The package reads headers and checks chunk streams. Some things are not in it:

- It does not decompress zlib or LZMA data.
- It does not parse the setup header or the wizard images.
- It does not extract the files packed into an installer.
- It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```