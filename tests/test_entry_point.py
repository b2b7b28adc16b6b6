import pytest

import entry_point
from builders import end_of_table, entry_v2, entry_v3, fix_checksum, structure
from smbios_errors import (AnchorNotFound, EntryChecksumInvalid, EntrySizeInvalid,
                           EntryVersionTooOld, InvalidEntryPointError)
from structures import InfoType, SmbiosVersion


def test_v2_checksum_is_zero():
    assert entry_point.bytesum(entry_v2()) == 0


def test_find_anchor_on_stride():
    buffer = b"\0" * 48 + entry_v2()
    assert entry_point.find_anchor(buffer) == 48


def test_find_anchor_ignores_unaligned_signature():
    buffer = b"\0" * 8 + b"_SM_" + b"\0" * 52
    assert entry_point.find_anchor(buffer) is None


def test_find_anchor_first_match_wins():
    buffer = b"\0" * 16 + entry_v3() + b"\0" * 8 + entry_v2()
    assert entry_point.find_anchor(buffer) == 16


def test_search_without_anchor():
    with pytest.raises(AnchorNotFound):
        entry_point.search(b"\0" * 64)


def test_validate_v2():
    entry = entry_point.validate(entry_v2(0x000F0000, 0x1234, 42, 2, 7))
    assert isinstance(entry, entry_point.EntryPointV2)
    assert entry.version == SmbiosVersion(2, 7)
    assert entry.version >= (2, 4)
    assert entry.table_address == 0x000F0000
    assert entry.table_length == 0x1234
    assert entry.table_count == 42
    assert entry.table_offset(0x000E0000) == 0x10000
    assert entry.dmi_signature == b"_DMI_"


def test_validate_v3():
    entry = entry_point.search(b"\0" * 32 + entry_v3(0x7F000000, 0x800, 3, 4))
    assert isinstance(entry, entry_point.EntryPointV3)
    assert entry.version == (3, 4)
    assert entry.table_address == 0x7F000000
    assert entry.table_length == 0x800
    assert entry.table_count is None


def test_validate_short_buffer():
    with pytest.raises(EntrySizeInvalid) as excinfo:
        entry_point.validate(entry_v2()[:0x1E])
    assert excinfo.value.size == 0x1E


def test_validate_declared_length_too_small():
    ep = bytearray(entry_v2())
    ep[5] = 0x10
    with pytest.raises(EntrySizeInvalid) as excinfo:
        entry_point.validate(fix_checksum(ep, 4))
    assert excinfo.value.size == 0x10


def test_validate_declared_length_past_buffer():
    ep = bytearray(entry_v2())
    ep[5] = 0x20
    with pytest.raises(EntrySizeInvalid):
        entry_point.validate(fix_checksum(ep, 4))


def test_validate_longer_entry():
    ep = bytearray(entry_v2()) + b"\0"
    ep[5] = 0x20
    entry = entry_point.validate(fix_checksum(ep, 4))
    assert entry.length == 0x20


@pytest.mark.parametrize("offset", [o for o in range(0x1F) if o != 5])
def test_v2_single_byte_corruption(offset):
    ep = bytearray(entry_v2())
    ep[offset] = (ep[offset] + 1) & 0xFF
    with pytest.raises(EntryChecksumInvalid) as excinfo:
        entry_point.validate(ep)
    assert excinfo.value.checksum == 1


def test_v3_corruption():
    ep = bytearray(entry_v3())
    ep[0x10] ^= 0x80
    with pytest.raises(EntryChecksumInvalid):
        entry_point.validate(ep)


def test_version_too_old():
    with pytest.raises(EntryVersionTooOld) as excinfo:
        entry_point.validate(entry_v2(major=1, minor=0))
    assert excinfo.value.major == 1
    assert isinstance(excinfo.value, InvalidEntryPointError)


def test_entry_point_walks_its_table():
    table = structure(0, 0, bytes(0x0E)) + end_of_table()
    entry = entry_point.validate(entry_v2(0x20, len(table), 2))
    records = list(entry.structures(table))
    assert [r.info for r in records] == [InfoType.BIOS, InfoType.END]
