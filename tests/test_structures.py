import pytest

from builders import end_of_table, record, structure
from smbios_errors import (RecordSizeInvalid, RecordStringsUnterminated,
                           SliceConversionFailed, StringIndexInvalid)
from structures import InfoType, OemInfoType, SmbiosVersion, Structures, find_nulnul


def test_walk(small_table):
    records = list(Structures(small_table, (2, 8), len(small_table), 3))
    assert [r.info for r in records] == [InfoType.BIOS, InfoType.SYSTEM, InfoType.END]
    assert [r.handle for r in records] == [0x0000, 0x0001, 0xFEFF]
    assert records[0].offset == 0
    assert records[1].offset == 4 + 0x0E + len(b"Vendor\x001.0\x00\x00")
    assert records[0].version == SmbiosVersion(2, 8)


def test_walk_is_repeatable(small_table):
    structures = Structures(small_table, (3, 0), len(small_table))
    first = [(r.offset, r.handle) for r in structures]
    second = [(r.offset, r.handle) for r in structures]
    assert first == second
    assert len(first) == 3


def test_views_stay_inside_table(small_table):
    buffer = small_table + b"\xAA" * 32
    for r in Structures(buffer, (3, 0), len(small_table)):
        assert r.offset + 4 + len(r.data) + len(r.strings) <= len(small_table)
        assert bytes(r.strings).endswith(b"\0\0")


def test_count_limits_walk(small_table):
    records = list(Structures(small_table, (2, 8), len(small_table), 1))
    assert [r.info for r in records] == [InfoType.BIOS]


def test_zero_count(small_table):
    assert list(Structures(small_table, (2, 8), len(small_table), 0)) == []


def test_length_limits_walk(small_table):
    first = structure(0, 0x0000, bytes(0x0E), ["Vendor", "1.0"])
    records = list(Structures(small_table, (2, 8), len(first)))
    assert len(records) == 1


def test_trailing_bytes_shorter_than_header_end_walk():
    table = structure(1, 0x0001, bytes(4)) + b"\x01\x08"
    assert len(list(Structures(table, (2, 8), len(table)))) == 1


def test_v3_stops_at_end_of_table(small_table):
    table = small_table + structure(2, 0x0002, bytes(4))
    records = list(Structures(table, (3, 2), len(table)))
    assert records[-1].info == InfoType.END


def test_v2_walks_past_end_of_table(small_table):
    table = small_table + structure(2, 0x0002, bytes(4))
    records = list(Structures(table, (2, 8), len(table)))
    assert records[-1].info == InfoType.BASE_BOARD


def test_record_past_table_end():
    table = structure(0, 0x0000, bytes(0x0E)) + structure(4, 0x0004, bytes(0x10))
    walk = iter(Structures(table, (2, 8), len(table) - 10))
    assert next(walk).info == InfoType.BIOS
    with pytest.raises(RecordSizeInvalid) as excinfo:
        next(walk)
    assert excinfo.value.offset == 4 + 0x0E + 2
    assert excinfo.value.length == 0x14
    assert str(excinfo.value) == f"Structure at offset {4 + 0x0E + 2} with length 20 extends beyond SMBIOS"
    # the walk is over for good
    with pytest.raises(StopIteration):
        next(walk)


def test_record_length_below_header():
    table = b"\x00\x02\x00\x00\x00\x00"
    with pytest.raises(RecordSizeInvalid):
        list(Structures(table, (2, 8), len(table)))


def test_unterminated_strings():
    table = structure(1, 0x0001, bytes(4))[:-1] + b"A"
    with pytest.raises(RecordStringsUnterminated) as excinfo:
        list(Structures(table, (2, 8), len(table)))
    assert excinfo.value.offset == 0


def test_oem_and_unknown_types():
    table = structure(0x80, 0x0010, b"\x01\x02") + structure(100, 0x0011)
    records = list(Structures(table, (3, 0), len(table)))
    assert records[0].info == OemInfoType(0x80)
    assert records[0].code == 0x80
    assert str(records[0].info) == "OEM-specific Type (128)"
    assert str(records[1].info) == "Unknown Type (100)"


def test_strings():
    r = record(11, b"\x03", [b"A", b"BB", b"CCC"])
    assert bytes(r.strings) == b"A\0BB\0CCC\0\0"
    assert r.get_string_by_index(1) == "A"
    assert r.get_string_by_index(2) == "BB"
    assert r.get_string_by_index(3) == "CCC"
    assert r.n_strings == 3
    assert list(r.iter_strings()) == ["A", "BB", "CCC"]
    with pytest.raises(StringIndexInvalid):
        r.get_string_by_index(4)
    with pytest.raises(StringIndexInvalid) as excinfo:
        r.get_string_by_index(0)
    assert excinfo.value.index == 0
    assert excinfo.value.handle == 0x0100


def test_empty_string_table():
    r = record(11, b"\x00")
    assert bytes(r.strings) == b"\0\0"
    assert r.n_strings == 0
    with pytest.raises(StringIndexInvalid):
        r.get_string_by_index(1)


def test_invalid_utf8_is_replaced():
    r = record(11, b"\x01", [b"ab\xffc"])
    assert r.get_string_by_index(1) == "ab\ufffdc"


def test_get_string_at():
    r = record(1, b"\x00\x02\x01\x00", ["first", "second"])
    assert r.get_string_at(1) == "second"
    assert r.get_string_at(2) == "first"
    with pytest.raises(StringIndexInvalid):
        r.get_string_at(0)


def test_reads():
    r = record(0x80, bytes(range(1, 17)))
    assert r.read_u8(0) == 0x01
    assert r.read_u16(0) == 0x0201
    assert r.read_u32(4) == 0x08070605
    assert r.read_u64(8) == 0x100F0E0D0C0B0A09
    assert r.read("h", 14) == 0x100F


def test_short_reads_fail():
    r = record(0x80, b"\x01\x02\x03")
    with pytest.raises(SliceConversionFailed) as excinfo:
        r.read_u32(0)
    assert (excinfo.value.offset, excinfo.value.width) == (0, 4)
    with pytest.raises(SliceConversionFailed):
        r.read_u16(2)
    with pytest.raises(SliceConversionFailed):
        r.read_u8(3)


def test_read_slice():
    r = record(0x80, b"\x01\x02\x03\x04")
    assert bytes(r.read_slice(1, 2)) == b"\x02\x03"
    assert bytes(r.read_slice(4, 0)) == b""
    assert r.read_slice(3, 2) is None
    assert r.read_slice(-1, 1) is None


def test_find_nulnul():
    assert find_nulnul(b"A\0B\0\0", 0, 5) == 3
    assert find_nulnul(b"\0\0", 0, 2) == 0
    assert find_nulnul(b"A\0B\0", 0, 4) is None


def test_find_nulnul_window():
    data = b"\0\0AB\0C\0\0\0\0"
    assert find_nulnul(data, 2, len(data)) == 6
    # the pair must lie wholly inside the window
    assert find_nulnul(data, 2, 7) is None
    assert find_nulnul(memoryview(data), 3, 8) == 6
    assert find_nulnul(bytearray(data), 7, 10) == 7


def test_walk_many_structures():
    # long string tables, so most of the table is scanned for terminators
    table = b"".join(structure(11, h, b"\x01", ["x" * 200]) for h in range(500))
    table += end_of_table()
    handles = [r.handle for r in Structures(table, (3, 0), len(table))]
    assert handles == list(range(500)) + [0xFEFF]


def test_version_parse():
    assert SmbiosVersion.parse("3.2") == (3, 2)
    assert SmbiosVersion.parse("2") == (2, 0)
    assert str(SmbiosVersion(2, 7)) == "2.7"


def test_end_of_table_record():
    r = next(iter(Structures(end_of_table(), (3, 0), 6)))
    assert r.info == InfoType.END
    assert f"{r.info}" == "End Of Table"
    assert len(r.data) == 0
