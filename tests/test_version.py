import io

import pytest

from innoread.version import InnoVersion, UnknownVersionError, VersionFlags

NONE = VersionFlags(0)


@pytest.mark.parametrize(
    "raw, expected, variant",
    [
        (b"", InnoVersion(0, 0, 0, 0), NONE),
        (b"Inno Setup Setup Data (1.3.3)", InnoVersion(1, 3, 3, 0), NONE),
        (
            b"Inno Setup Setup Data (1.3.12) with ISX (1.3.12.1)",
            InnoVersion(1, 3, 12, 0, VersionFlags.ISX),
            VersionFlags.ISX,
        ),
        (
            b"Inno Setup Setup Data (3.0.3) with ISX (3.0.0)",
            InnoVersion(3, 0, 3, 0, VersionFlags.ISX),
            VersionFlags.ISX,
        ),
        (b"My Inno Setup Extensions Setup Data (3.0.4)", InnoVersion(3, 0, 4, 0), NONE),
        (
            b"My Inno Setup Extensions Setup Data (3.0.6.1)",
            InnoVersion(3, 0, 6, 1),
            NONE,
        ),
        (b"Inno Setup Setup Data (5.3.10)", InnoVersion(5, 3, 10, 0), NONE),
        (
            b"Inno Setup Setup Data (5.3.10) (u)",
            InnoVersion(5, 3, 10, 0, VersionFlags.UNICODE),
            VersionFlags.UNICODE,
        ),
        (
            b"Inno Setup Setup Data (5.5.7) (U)",
            InnoVersion(5, 5, 7, 0, VersionFlags.UNICODE),
            VersionFlags.UNICODE,
        ),
        (b"Inno Setup Setup Data (5.6.0)", InnoVersion(5, 6, 0, 0), NONE),
        (
            b"Inno Setup Setup Data (5.6.0) (u)",
            InnoVersion(5, 6, 0, 0, VersionFlags.UNICODE),
            VersionFlags.UNICODE,
        ),
        (
            b"Inno Setup Setup Data (6.1.0) (u)",
            InnoVersion(6, 1, 0, 0, VersionFlags.UNICODE),
            VersionFlags.UNICODE,
        ),
        (
            b"Inno Setup Setup Data (6.2.0) (u)",
            InnoVersion(6, 2, 0, 0, VersionFlags.UNICODE),
            VersionFlags.UNICODE,
        ),
        (
            b"Inno Setup Setup Data (6.3.0)",
            InnoVersion(6, 3, 0, 0, VersionFlags.UNICODE),
            VersionFlags.UNICODE,
        ),
        (
            b"Inno Setup Setup Data (6.4.0.1)",
            InnoVersion(6, 4, 0, 1, VersionFlags.UNICODE),
            VersionFlags.UNICODE,
        ),
    ],
)
def test_inno_version_from_bytes(raw, expected, variant):
    parsed = InnoVersion.from_raw_version(raw) or InnoVersion()
    assert parsed == expected
    assert parsed.variant == variant


def test_from_raw_version_empty_is_none():
    assert InnoVersion.from_raw_version(b"") is None


def test_from_raw_version_trims_trailing_nulls():
    raw = b"Inno Setup Setup Data (5.3.10) (u)".ljust(64, b"\0")
    parsed = InnoVersion.from_raw_version(raw)
    assert parsed == (5, 3, 10, 0)
    assert parsed.is_unicode()


def test_from_raw_version_needs_three_parts():
    assert InnoVersion.from_raw_version(b"Inno Setup Setup Data (5.3)") is None


def test_inno_version_equality():
    version = InnoVersion(1, 2, 3, 4)
    unicode_version = InnoVersion(1, 2, 3, 4, VersionFlags.UNICODE)
    isx_version = InnoVersion(1, 2, 3, 4, VersionFlags.ISX)

    assert version == unicode_version
    assert version == isx_version
    assert unicode_version == isx_version

    assert not (version < unicode_version) and not (version > unicode_version)
    assert not (version < isx_version) and not (version > isx_version)
    assert not (unicode_version < isx_version) and not (unicode_version > isx_version)

    assert hash(version) == hash(unicode_version) == hash(isx_version)


def test_inno_version_tuple_equality():
    assert InnoVersion(1, 2, 3, 4) == (1, 2, 3, 4)
    assert InnoVersion(1, 2, 3, 0) == (1, 2, 3)
    assert InnoVersion(1, 2, 0, 0) == (1, 2)
    assert InnoVersion(1, 0, 0, 0) == 1

    assert InnoVersion(1, 2, 3, 4) != (4, 3, 2, 1)
    assert InnoVersion(1, 2, 3, 4) != (1, 2, 3)
    assert InnoVersion(1, 2, 3, 4) != (1, 2)
    assert InnoVersion(1, 2, 3, 4) != 1

    assert InnoVersion(1, 2, 3, 4) <= (1, 2, 3, 4) and InnoVersion(1, 2, 3, 4) >= (1, 2, 3, 4)
    assert InnoVersion(1, 2, 3, 0) <= (1, 2, 3) and InnoVersion(1, 2, 3, 0) >= (1, 2, 3)
    assert InnoVersion(1, 2, 0, 0) <= (1, 2) and InnoVersion(1, 2, 0, 0) >= (1, 2)
    assert InnoVersion(1, 0, 0, 0) <= 1 and InnoVersion(1, 0, 0, 0) >= 1

    assert (1, 2, 3, 4) == InnoVersion(1, 2, 3, 4)
    assert (1, 2, 3) == InnoVersion(1, 2, 3, 0)
    assert (1, 2) == InnoVersion(1, 2, 0, 0)
    assert 1 == InnoVersion(1, 0, 0, 0)

    assert (1, 2, 3, 4) != InnoVersion(4, 3, 2, 1)
    assert (1, 2, 3) != InnoVersion(1, 2, 3, 4)
    assert (1, 2) != InnoVersion(1, 2, 3, 4)
    assert 1 != InnoVersion(1, 2, 3, 4)

    assert (1, 2, 3, 4) <= InnoVersion(1, 2, 3, 4) and (1, 2, 3, 4) >= InnoVersion(1, 2, 3, 4)
    assert (1, 2, 3) <= InnoVersion(1, 2, 3, 0) and (1, 2, 3) >= InnoVersion(1, 2, 3, 0)
    assert (1, 2) <= InnoVersion(1, 2, 0, 0) and (1, 2) >= InnoVersion(1, 2, 0, 0)
    assert 1 <= InnoVersion(1, 0, 0, 0) and 1 >= InnoVersion(1, 0, 0, 0)


def test_inno_version_comparison():
    version = InnoVersion(1, 2, 3, 4)

    assert version < InnoVersion(1, 2, 3, 5)
    assert version > InnoVersion(1, 2, 3, 3)

    assert version < (1, 2, 3, 5)
    assert version > (1, 2, 3, 3)

    assert version > (1, 2, 3)
    assert version < (1, 2, 4)

    assert (1, 2, 4) > version
    assert (1, 2, 3) < version


def test_comparison_with_unrelated_type_raises():
    with pytest.raises(TypeError):
        InnoVersion(1, 2, 3, 4) < "1.2.3.4"


def test_str_plain_and_unicode():
    assert str(InnoVersion(1, 2, 3, 4)) == "1.2.3.4"
    assert str(InnoVersion(5, 5, 7, 0, VersionFlags.UNICODE)) == "5.5.7.0 (u)"


def test_flags_queries():
    both = InnoVersion(3, 0, 0, 0, VersionFlags.UNICODE | VersionFlags.ISX)
    assert both.is_unicode() and both.is_isx()
    plain = InnoVersion(3, 0, 0, 0)
    assert not plain.is_unicode() and not plain.is_isx()


@pytest.mark.parametrize(
    "version, expected",
    [
        (InnoVersion(5, 3, 10, 0, VersionFlags.UNICODE), True),
        (InnoVersion(5, 4, 2, 0, VersionFlags.UNICODE), True),
        (InnoVersion(5, 5, 0, 0, VersionFlags.UNICODE), True),
        (InnoVersion(5, 3, 10, 0), False),
        (InnoVersion(5, 5, 7, 0, VersionFlags.UNICODE), False),
    ],
)
def test_is_blackbox(version, expected):
    assert version.is_blackbox() is expected


def test_read_from_stream():
    raw = b"Inno Setup Setup Data (5.5.7) (u)".ljust(64, b"\0")
    src = io.BytesIO(raw + b"rest")
    version = InnoVersion.read_from(src)
    assert version == (5, 5, 7)
    assert version.is_unicode()
    assert src.read() == b"rest"


def test_read_from_unknown_version_raises():
    raw = b"not a version string".ljust(64, b"\0")
    with pytest.raises(UnknownVersionError):
        InnoVersion.read_from(io.BytesIO(raw))


def test_read_from_short_stream_raises():
    with pytest.raises(EOFError):
        InnoVersion.read_from(io.BytesIO(b"Inno Setup Setup Data (5.5.7)"))