import logging
import struct

import pytest

import firmware_dump
from builders import dmidecode_dump, entry_v2, entry_v3
from smbios_errors import AnchorNotFound, EntryChecksumInvalid, TableAddressInvalid
from structures import InfoType, SmbiosVersion


def infos(smbios):
    return [r.info for r in smbios.structures()]


def test_dmidecode_dump(small_table):
    smbios = firmware_dump.load_table(dmidecode_dump(small_table, 3, 2, 7))
    assert smbios.source == "entry point"
    assert smbios.version == SmbiosVersion(2, 7)
    assert smbios.count == 3
    assert smbios.length == len(small_table)
    assert bytes(smbios.data) == small_table
    assert infos(smbios) == [InfoType.BIOS, InfoType.SYSTEM, InfoType.END]


def test_captured_memory_with_base(small_table):
    ep = entry_v3(0x000F0040, len(small_table))
    memory = ep + b"\0" * (0x40 - len(ep)) + small_table
    smbios = firmware_dump.load_table(memory, base=0x000F0000)
    assert smbios.version == (3, 2)
    assert smbios.count is None
    assert infos(smbios)[-1] == InfoType.END


def test_table_address_outside_buffer(small_table):
    ep = entry_v2(0x000F1000, len(small_table), 3)
    with pytest.raises(TableAddressInvalid) as excinfo:
        firmware_dump.load_table(ep + small_table)
    assert excinfo.value.address == 0x000F1000


def test_bad_entry_point_in_dump(small_table):
    dump = bytearray(dmidecode_dump(small_table, 3))
    dump[6] = 3
    with pytest.raises(EntryChecksumInvalid):
        firmware_dump.load_table(bytes(dump))


def test_separate_entry_point(small_table):
    entry = entry_v3(0x7F000000, len(small_table), 3, 0)
    smbios = firmware_dump.load_table(small_table, entry_data=entry)
    assert smbios.source == "entry file"
    assert smbios.version == (3, 0)
    assert smbios.entry_point.table_address == 0x7F000000
    assert len(infos(smbios)) == 3


def test_separate_entry_point_invalid(small_table):
    with pytest.raises(AnchorNotFound):
        firmware_dump.load_table(small_table, entry_data=b"\0" * 32)


def test_raw_smbios_data(small_table):
    blob = struct.pack("<BBBBI", 1, 3, 4, 0, len(small_table)) + small_table
    smbios = firmware_dump.load_table(blob)
    assert smbios.source == "RawSMBIOSData"
    assert smbios.version == (3, 4)
    assert bytes(smbios.data) == small_table
    assert len(infos(smbios)) == 3


def test_parse_raw_smbios_data_header():
    header, offset = firmware_dump.parse_raw_smbios_data_header(b"\x00\x02\x08\x00\x10\x00\x00\x00")
    assert header == firmware_dump.RawSMBIOSData(0, 2, 8, 0, 16)
    assert offset == 8
    assert firmware_dump.parse_raw_smbios_data_header(b"\x00\x02") == (None, 0)


def test_bare_table(small_table, caplog):
    with caplog.at_level(logging.WARNING):
        smbios = firmware_dump.load_table(small_table)
    assert smbios.source == "bare table"
    assert smbios.version == firmware_dump.DEFAULT_TABLE_VERSION
    assert "assuming SMBIOS 2.0" in caplog.text
    assert len(infos(smbios)) == 3


def test_version_override(small_table):
    smbios = firmware_dump.load_table(small_table, version=(3, 1))
    assert smbios.version == SmbiosVersion(3, 1)
    smbios = firmware_dump.load_table(dmidecode_dump(small_table, 3), version=(2, 3))
    assert smbios.version == (2, 3)


def test_read_dump(tmp_path, small_table):
    table = tmp_path / "DMI"
    entry = tmp_path / "smbios_entry_point"
    table.write_bytes(small_table)
    entry.write_bytes(entry_v2(0x000E0000, len(small_table), 3, 2, 8))
    smbios = firmware_dump.read_dump(str(table), str(entry))
    assert smbios.count == 3
    assert smbios.version == (2, 8)


def test_read_dump_missing_file(tmp_path):
    with pytest.raises(OSError):
        firmware_dump.read_dump(str(tmp_path / "missing.bin"))


def test_bare_table_not_mistaken_for_raw_header():
    # System structure: 01 08 01 00 | 01 00 00 00 reads as a 1-byte RawSMBIOSData table
    table = b"\x01\x08\x01\x00\x01\x00\x00\x00Maker\0\0"
    smbios = firmware_dump.load_table(table)
    assert smbios.source == "bare table"
    assert [r.handle for r in smbios.structures()] == [0x0001]
