"""Windows version requirements stored in Inno Setup headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from innoread.binary import LITTLE_ENDIAN, read_u8, read_u16
from innoread.version import InnoVersion

_BUILD_NUMBERS_SINCE = (1, 3, 19)


@dataclass(frozen=True, order=True)
class Version:
    """A Windows version: major, minor and build number."""

    major: int = 0
    minor: int = 0
    build: int = 0

    @classmethod
    def read_from(cls, src: BinaryIO, inno_version: InnoVersion) -> "Version":
        build = 0
        if inno_version >= _BUILD_NUMBERS_SINCE:
            build = read_u16(src, LITTLE_ENDIAN)
        minor = read_u8(src)
        major = read_u8(src)
        return cls(major=major, minor=minor, build=build)


@dataclass(frozen=True, order=True)
class ServicePack:
    """A Windows NT service pack level."""

    major: int = 0
    minor: int = 0


@dataclass(frozen=True, order=True)
class WindowsVersion:
    """Windows 9x and NT versions together with the NT service pack."""

    win_version: Version = field(default_factory=Version)
    nt_version: Version = field(default_factory=Version)
    nt_service_pack: ServicePack = field(default_factory=ServicePack)

    @classmethod
    def read_from(cls, src: BinaryIO, version: InnoVersion) -> "WindowsVersion":
        win_version = Version.read_from(src, version)
        nt_version = Version.read_from(src, version)
        service_pack = ServicePack()
        if version >= _BUILD_NUMBERS_SINCE:
            minor = read_u8(src)
            major = read_u8(src)
            service_pack = ServicePack(major=major, minor=minor)
        return cls(
            win_version=win_version,
            nt_version=nt_version,
            nt_service_pack=service_pack,
        )


@dataclass(frozen=True, order=True)
class WindowsVersionRange:
    """The lowest and highest Windows versions a setup runs on."""

    begin: WindowsVersion = field(default_factory=WindowsVersion)
    end: WindowsVersion = field(default_factory=WindowsVersion)

    @classmethod
    def read_from(cls, src: BinaryIO, version: InnoVersion) -> "WindowsVersionRange":
        begin = WindowsVersion.read_from(src, version)
        end = WindowsVersion.read_from(src, version)
        return cls(begin=begin, end=end)