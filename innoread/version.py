"""Inno Setup version identification."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Flag
from functools import total_ordering
from typing import BinaryIO, Optional, Tuple

from innoread.binary import read_exact


class VersionFlags(Flag):
    """Variant flags attached to an Inno Setup version."""

    UNICODE = 1
    ISX = 2


class UnknownVersionError(ValueError):
    """Raised when a setup data version string cannot be recognised."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"unknown Inno Setup version: {raw!r}")


_RAW_LEN = 64
_U8_PATTERN = re.compile(rb"\+?[0-9]+")
_ISX = b"ISX"
_INNO_SETUP_EXTENSIONS = b"Inno Setup Extensions"


def _as_key(other: object) -> Optional[Tuple[int, int, int, int]]:
    if isinstance(other, InnoVersion):
        return other._key
    if isinstance(other, bool):
        return None
    if isinstance(other, int):
        return (other, 0, 0, 0)
    if (
        isinstance(other, tuple)
        and 1 <= len(other) <= 4
        and all(isinstance(part, int) and not isinstance(part, bool) for part in other)
    ):
        return tuple(other) + (0,) * (4 - len(other))  # type: ignore[return-value]
    return None


def _parse_u8(part: bytes) -> Optional[int]:
    if not _U8_PATTERN.fullmatch(part):
        return None
    value = int(part)
    return value if value <= 0xFF else None


@total_ordering
@dataclass(frozen=True, eq=False)
class InnoVersion:
    """An Inno Setup version; the variant flags do not take part in comparisons.

    Versions compare with other versions, with tuples of one to four integers
    (missing parts count as zero) and with a bare integer major version.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    revision: int = 0
    variant: VersionFlags = field(default=VersionFlags(0))

    @property
    def _key(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.revision)

    @classmethod
    def read_from(cls, src: BinaryIO) -> "InnoVersion":
        """Read the 64-byte version signature from a stream."""
        raw_version = read_exact(src, _RAW_LEN)
        version = cls.from_raw_version(raw_version)
        if version is None:
            raise UnknownVersionError(raw_version.decode("utf-8", errors="replace"))
        return version

    @classmethod
    def from_raw_version(cls, raw_version: bytes) -> Optional["InnoVersion"]:
        """Parse a raw version signature, returning None if it is not recognised."""
        raw = bytes(raw_version)
        trimmed = raw.rstrip(b"\0")
        if trimmed:
            raw = trimmed

        start = raw.find(b"(")
        if start == -1:
            return None
        end = raw.find(b")", start)
        if end == -1:
            return None
        version_text = raw[start + 1 : end]
        remaining = raw[end + 1 :]

        parts = [
            value
            for value in (_parse_u8(part) for part in version_text.split(b"."))
            if value is not None
        ]
        if len(parts) < 3:
            return None
        major, minor, patch = parts[:3]
        revision = parts[3] if len(parts) > 3 else 0

        if (major, minor, patch, revision) >= (6, 3, 0, 0):
            return cls(major, minor, patch, revision, VersionFlags.UNICODE)

        flags = VersionFlags(0)

        u_start = remaining.find(b"(")
        if u_start != -1:
            u_end = remaining.find(b")", u_start)
            if u_end != -1 and remaining[u_start + 1 : u_end].lower() == b"u":
                flags |= VersionFlags.UNICODE

        if _ISX in remaining or _INNO_SETUP_EXTENSIONS in remaining:
            flags |= VersionFlags.ISX

        return cls(major, minor, patch, revision, flags)

    def is_unicode(self) -> bool:
        return VersionFlags.UNICODE in self.variant

    def is_isx(self) -> bool:
        return VersionFlags.ISX in self.variant

    def is_blackbox(self) -> bool:
        """Whether this is one of the Unicode builds with a non-standard layout."""
        return self.is_unicode() and self._key in (
            (5, 3, 10, 0),
            (5, 4, 2, 0),
            (5, 5, 0, 0),
        )

    def __eq__(self, other: object) -> bool:
        key = _as_key(other)
        if key is None:
            return NotImplemented
        return self._key == key

    def __lt__(self, other: object) -> bool:
        key = _as_key(other)
        if key is None:
            return NotImplemented
        return self._key < key

    def __hash__(self) -> int:
        return hash(self._key)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}.{self.revision}"
        if self.is_unicode():
            text += " (u)"
        return text