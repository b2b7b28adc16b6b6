import pytest

import cli_main
from builders import dmidecode_dump, entry_v2, structure


@pytest.fixture
def dump_file(tmp_path, small_table):
    path = tmp_path / "dmi.bin"
    path.write_bytes(dmidecode_dump(small_table, 3, 2, 0))
    return str(path)


def test_structures(dump_file, capsys):
    assert cli_main.main([dump_file]) == 0
    out = capsys.readouterr().out
    assert "SMBIOS 2.0" in out
    assert "Type 0 (Handle 0x0000) - BIOS Information" in out
    assert "Type 1 (Handle 0x0001) - System Information" in out
    assert "Maker" in out
    assert "Finished. Parsed 3 structures." in out


def test_type_filter(dump_file, capsys):
    assert cli_main.main([dump_file, "-t", "1"]) == 0
    out = capsys.readouterr().out
    assert "System Information" in out
    assert "BIOS Information" not in out
    assert "Parsed 1 structures." in out


def test_summary(dump_file, capsys):
    assert cli_main.main([dump_file, "--summary"]) == 0
    out = capsys.readouterr().out
    assert "SMBIOS Structures" in out
    assert "0xFEFF" in out
    assert "End Of Table" in out
    assert "Finished" not in out


def test_summary_type_filter(dump_file, capsys):
    assert cli_main.main([dump_file, "--summary", "-t", "0", "-t", "127"]) == 0
    out = capsys.readouterr().out
    assert "BIOS Information" in out
    assert "End Of Table" in out
    assert "System Information" not in out


def test_hex(dump_file, capsys):
    assert cli_main.main([dump_file, "--hex", "-t", "1"]) == 0
    out = capsys.readouterr().out
    assert "Formatted Section (Handle 0x0001)" in out
    assert "01 00 00 00" in out


def test_long_flags(dump_file, capsys):
    assert cli_main.main([dump_file, "--long", "-t", "0"]) == 0
    out = capsys.readouterr().out
    assert "Reserved for system vendor" in out


def test_version_override(dump_file, capsys):
    assert cli_main.main([dump_file, "--smbios-version", "2.8", "-t", "0"]) == 0
    out = capsys.readouterr().out
    assert "SMBIOS 2.8" in out
    assert "Parse Error" in out


def test_separate_entry(tmp_path, small_table, capsys):
    table = tmp_path / "DMI"
    entry = tmp_path / "smbios_entry_point"
    table.write_bytes(small_table)
    entry.write_bytes(entry_v2(0x000E0000, len(small_table), 3, 2, 0))
    assert cli_main.main([str(table), "--entry", str(entry), "--summary"]) == 0
    assert "entry file" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert cli_main.main([str(tmp_path / "missing.bin")]) == 1
    assert "Could not read SMBIOS dump" in capsys.readouterr().out


def test_invalid_entry_point(tmp_path, small_table, capsys):
    dump = bytearray(dmidecode_dump(small_table, 3))
    dump[7] ^= 0x01
    path = tmp_path / "bad.bin"
    path.write_bytes(bytes(dump))
    assert cli_main.main([str(path)]) == 1
    assert "Invalid SMBIOS dump" in capsys.readouterr().out


def test_malformed_table(tmp_path, capsys):
    # second structure claims more bytes than the table holds
    table = structure(1, 0x0001, bytes(4), ["Maker"]) + b"\x02\x40\x02\x00" + bytes(8)
    path = tmp_path / "DMI"
    path.write_bytes(table)
    assert cli_main.main([str(path)]) == 1
    out = capsys.readouterr().out
    assert "System Information" in out
    assert "Error walking SMBIOS table" in out


def test_bad_arguments(dump_file):
    with pytest.raises(SystemExit) as excinfo:
        cli_main.main([dump_file, "--smbios-version", "x.y"])
    assert excinfo.value.code == 2
