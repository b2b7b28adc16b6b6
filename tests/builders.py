"""Byte-level builders for SMBIOS test data."""

import struct

from structures import Structures


def fix_checksum(data, offset):
    """Set byte `offset` so that all of data sums to zero (mod 256)."""
    data = bytearray(data)
    data[offset] = 0
    data[offset] = -sum(data) & 0xFF
    return bytes(data)


def entry_v2(table_address=0x20, table_length=0, count=0, major=2, minor=8):
    ep = struct.pack("<4sBBBBHB5s5sBHIHB", b"_SM_", 0, 0x1F, major, minor, 0x100, 0,
                     b"\0" * 5, b"_DMI_", 0, table_length, table_address, count, 0)
    # intermediate checksum covers the _DMI_ part
    ep = bytearray(ep)
    ep[0x15] = -sum(ep[0x10:0x1F]) & 0xFF
    return fix_checksum(ep, 4)


def entry_v3(table_address=0x20, table_length=0, major=3, minor=2):
    ep = struct.pack("<5sBBBBBBBIQ", b"_SM3_", 0, 0x18, major, minor, 0, 1, 0,
                     table_length, table_address)
    return fix_checksum(ep, 5)


def structure(code, handle, formatted=b"", strings=()):
    """One structure: header, formatted section and string table."""
    header = struct.pack("<BBH", code, 4 + len(formatted), handle)
    if strings:
        tail = b"".join((s if isinstance(s, bytes) else s.encode()) + b"\0" for s in strings) + b"\0"
    else:
        tail = b"\0\0"
    return header + bytes(formatted) + tail


def end_of_table(handle=0xFEFF):
    return structure(127, handle)


def dmidecode_dump(table, count, major=2, minor=8):
    """Entry point at 0, table at 0x20, as written by dmidecode --dump-bin."""
    ep = entry_v2(0x20, len(table), count, major, minor)
    return ep + b"\0" * (0x20 - len(ep)) + table


def record(code, formatted, strings=(), version=(3, 2), handle=0x0100):
    """The RawStructure for a single structure."""
    data = structure(code, handle, formatted, strings)
    return next(iter(Structures(data, version, len(data))))
