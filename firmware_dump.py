"""
Load a captured SMBIOS table from bytes or files.

Recognised layouts, tried in order:
  - a buffer holding an entry point and the table it points at
    (dmidecode --dump-bin writes the entry point at 0 and the table at 0x20)
  - a bare table plus a separate entry point
    (/sys/firmware/dmi/tables/DMI and smbios_entry_point)
  - the Windows GetSystemFirmwareTable('RSMB') blob, which starts with a
    RawSMBIOSData header
  - a bare table, decoded with an assumed version
"""

import logging
import struct
from collections import namedtuple

import entry_point
from smbios_errors import TableAddressInvalid
from structures import SmbiosVersion, Structures

log = logging.getLogger(__name__)

DEFAULT_TABLE_VERSION = SmbiosVersion(2, 0)

RAW_SMBIOS_DATA_FORMAT = '<BBBBI'
RAW_SMBIOS_DATA_SIZE = struct.calcsize(RAW_SMBIOS_DATA_FORMAT)

RawSMBIOSData = namedtuple('RawSMBIOSData', [
    'used_20_calling_method', 'major_version', 'minor_version',
    'dmi_revision', 'length'
])


class SmbiosTable(namedtuple('SmbiosTable', ['source', 'version', 'data', 'length', 'count', 'entry_point'])):
    """
    A located structure table. `data` starts at the first structure;
    `entry_point` is None when the table was not found through one.
    """
    __slots__ = ()

    def structures(self):
        return Structures(self.data, self.version, self.length, self.count)


def parse_raw_smbios_data_header(data):
    """
    Parses the Windows RawSMBIOSData header.
    Returns (header_obj, data_offset), or (None, 0) if data is too short.
    """
    if len(data) < RAW_SMBIOS_DATA_SIZE:
        return None, 0

    # struct RawSMBIOSData {
    #   BYTE  Used20CallingMethod;
    #   BYTE  SMBIOSMajorVersion;
    #   BYTE  SMBIOSMinorVersion;
    #   BYTE  DmiRevision;
    #   DWORD Length;
    #   BYTE  SMBIOSTableData[];
    # };
    header = RawSMBIOSData._make(struct.unpack_from(RAW_SMBIOS_DATA_FORMAT, data))
    # The actual SMBIOS data follows immediately
    return header, RAW_SMBIOS_DATA_SIZE


def looks_like_raw_smbios_data(header, available):
    # a bare table starts with a structure header, whose length byte
    # lands in major_version
    if header is None:
        return False
    return (header.used_20_calling_method in (0, 1)
            and header.major_version in (2, 3)
            and 0 < header.length <= available)


def _from_entry_point(data, base, version):
    entry = entry_point.search(data)
    offset = entry.table_offset(base)
    if offset < 0 or offset >= len(data):
        raise TableAddressInvalid(entry.table_address, len(data))
    table = memoryview(data)[offset:]
    if len(table) < entry.table_length:
        log.warning("table truncated: %u of %u bytes present", len(table), entry.table_length)
    return SmbiosTable("entry point", version or entry.version, table,
                       entry.table_length, entry.table_count, entry)


def load_table(data, entry_data=None, base=0, version=None):
    """
    Locate the structure table in `data`.

    `entry_data` is a separately stored entry point, `base` the address
    `data` was captured from, and `version` overrides the version found
    in the dump.
    """
    if version is not None:
        version = SmbiosVersion(*version)

    if entry_point.find_anchor(data) is not None:
        return _from_entry_point(data, base, version)

    if entry_data is not None:
        entry = entry_point.search(entry_data)
        log.debug("using separate entry point, SMBIOS %s", entry.version)
        return SmbiosTable("entry file", version or entry.version, memoryview(data),
                           entry.table_length, entry.table_count, entry)

    header, offset = parse_raw_smbios_data_header(data)
    if looks_like_raw_smbios_data(header, len(data) - offset):
        log.debug("found RawSMBIOSData header: SMBIOS %u.%u, %u bytes",
                  header.major_version, header.minor_version, header.length)
        detected = SmbiosVersion(header.major_version, header.minor_version)
        return SmbiosTable("RawSMBIOSData", version or detected,
                           memoryview(data)[offset:offset + header.length],
                           header.length, None, None)

    if version is None:
        log.warning("no entry point found, assuming SMBIOS %s", DEFAULT_TABLE_VERSION)
        version = DEFAULT_TABLE_VERSION
    return SmbiosTable("bare table", version, memoryview(data), len(data), None, None)


def read_dump(path, entry_path=None, base=0, version=None):
    with open(path, "rb") as f:
        data = f.read()
    entry_data = None
    if entry_path is not None:
        with open(entry_path, "rb") as f:
            entry_data = f.read()
    log.debug("read %u bytes from %s", len(data), path)
    return load_table(data, entry_data, base=base, version=version)
