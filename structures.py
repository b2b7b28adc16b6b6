"""
Walk the SMBIOS structure table.

Each structure is a 4-byte header (type, length, handle), the rest of the
formatted section, then a string table: NUL-terminated strings followed by
one more NUL. Structures never copy the table; `data` and `strings` are
memoryviews into the caller's buffer.
"""

import enum
import logging
import struct
from collections import namedtuple

from smbios_errors import (RecordSizeInvalid, RecordStringsUnterminated,
                           SliceConversionFailed, StringIndexInvalid)

log = logging.getLogger(__name__)

HEADER_FORMAT = "<BBH"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)


class SmbiosVersion(namedtuple('SmbiosVersion', ['major', 'minor'])):
    """Ordered like a tuple, so `version >= (2, 4)` works."""
    __slots__ = ()

    def __str__(self):
        return f"{self.major}.{self.minor}"

    @classmethod
    def parse(cls, text):
        major, _, minor = text.partition(".")
        return cls(int(major), int(minor or 0))


class InfoType(enum.IntEnum):
    BIOS = 0
    SYSTEM = 1
    BASE_BOARD = 2
    ENCLOSURE = 3
    PROCESSOR = 4
    MEMORY_CONTROLLER = 5
    MEMORY_MODULE = 6
    CACHE = 7
    PORT_CONNECTOR = 8
    SYSTEM_SLOTS = 9
    ON_BOARD_DEVICES = 10
    OEM_STRINGS = 11
    SYSTEM_CONFIGURATION_OPTIONS = 12
    BIOS_LANGUAGE = 13
    GROUP_ASSOCIATIONS = 14
    SYSTEM_EVENT_LOG = 15
    PHYSICAL_MEMORY_ARRAY = 16
    MEMORY_DEVICE = 17
    MEMORY_ERROR_32 = 18
    MEMORY_ARRAY_MAPPED_ADDRESS = 19
    MEMORY_DEVICE_MAPPED_ADDRESS = 20
    BUILT_IN_POINTING_DEVICE = 21
    PORTABLE_BATTERY = 22
    SYSTEM_RESET = 23
    HARDWARE_SECURITY = 24
    SYSTEM_POWER_CONTROLS = 25
    VOLTAGE_PROBE = 26
    COOLING_DEVICE = 27
    TEMPERATURE_PROBE = 28
    ELECTRICAL_CURRENT_PROBE = 29
    OUT_OF_BAND_REMOTE_ACCESS = 30
    BIS_ENTRY_POINT = 31
    SYSTEM_BOOT = 32
    MEMORY_ERROR_64 = 33
    MANAGEMENT_DEVICE = 34
    MANAGEMENT_DEVICE_COMPONENT = 35
    MANAGEMENT_DEVICE_THRESHOLD_DATA = 36
    MEMORY_CHANNEL = 37
    IPMI_DEVICE = 38
    SYSTEM_POWER_SUPPLY = 39
    ADDITIONAL_INFORMATION = 40
    ONBOARD_DEVICES_EXTENDED = 41
    MANAGEMENT_CONTROLLER_HOST_INTERFACE = 42
    TPM_DEVICE = 43
    PROCESSOR_ADDITIONAL_INFORMATION = 44
    FIRMWARE_INVENTORY = 45
    STRING_PROPERTY = 46
    INACTIVE = 126
    END = 127

    def __str__(self):
        return INFO_TYPE_NAMES[self]

    def __format__(self, spec):
        return format(str(self), spec)


INFO_TYPE_NAMES = {
    InfoType.BIOS: "BIOS Information",
    InfoType.SYSTEM: "System Information",
    InfoType.BASE_BOARD: "Base Board Information",
    InfoType.ENCLOSURE: "Chassis Information",
    InfoType.PROCESSOR: "Processor Information",
    InfoType.MEMORY_CONTROLLER: "Memory Controller Information",
    InfoType.MEMORY_MODULE: "Memory Module Information",
    InfoType.CACHE: "Cache Information",
    InfoType.PORT_CONNECTOR: "Port Connector Information",
    InfoType.SYSTEM_SLOTS: "System Slot Information",
    InfoType.ON_BOARD_DEVICES: "On Board Devices Information",
    InfoType.OEM_STRINGS: "OEM Strings",
    InfoType.SYSTEM_CONFIGURATION_OPTIONS: "System Configuration Options",
    InfoType.BIOS_LANGUAGE: "BIOS Language Information",
    InfoType.GROUP_ASSOCIATIONS: "Group Associations",
    InfoType.SYSTEM_EVENT_LOG: "System Event Log",
    InfoType.PHYSICAL_MEMORY_ARRAY: "Physical Memory Array",
    InfoType.MEMORY_DEVICE: "Memory Device",
    InfoType.MEMORY_ERROR_32: "32-bit Memory Error Information",
    InfoType.MEMORY_ARRAY_MAPPED_ADDRESS: "Memory Array Mapped Address",
    InfoType.MEMORY_DEVICE_MAPPED_ADDRESS: "Memory Device Mapped Address",
    InfoType.BUILT_IN_POINTING_DEVICE: "Built-in Pointing Device",
    InfoType.PORTABLE_BATTERY: "Portable Battery",
    InfoType.SYSTEM_RESET: "System Reset",
    InfoType.HARDWARE_SECURITY: "Hardware Security",
    InfoType.SYSTEM_POWER_CONTROLS: "System Power Controls",
    InfoType.VOLTAGE_PROBE: "Voltage Probe",
    InfoType.COOLING_DEVICE: "Cooling Device",
    InfoType.TEMPERATURE_PROBE: "Temperature Probe",
    InfoType.ELECTRICAL_CURRENT_PROBE: "Electrical Current Probe",
    InfoType.OUT_OF_BAND_REMOTE_ACCESS: "Out-of-band Remote Access",
    InfoType.BIS_ENTRY_POINT: "Boot Integrity Services Entry Point",
    InfoType.SYSTEM_BOOT: "System Boot Information",
    InfoType.MEMORY_ERROR_64: "64-bit Memory Error Information",
    InfoType.MANAGEMENT_DEVICE: "Management Device",
    InfoType.MANAGEMENT_DEVICE_COMPONENT: "Management Device Component",
    InfoType.MANAGEMENT_DEVICE_THRESHOLD_DATA: "Management Device Threshold Data",
    InfoType.MEMORY_CHANNEL: "Memory Channel",
    InfoType.IPMI_DEVICE: "IPMI Device Information",
    InfoType.SYSTEM_POWER_SUPPLY: "System Power Supply",
    InfoType.ADDITIONAL_INFORMATION: "Additional Information",
    InfoType.ONBOARD_DEVICES_EXTENDED: "Onboard Device",
    InfoType.MANAGEMENT_CONTROLLER_HOST_INTERFACE: "Management Controller Host Interface",
    InfoType.TPM_DEVICE: "TPM Device",
    InfoType.PROCESSOR_ADDITIONAL_INFORMATION: "Processor Additional Information",
    InfoType.FIRMWARE_INVENTORY: "Firmware Inventory Information",
    InfoType.STRING_PROPERTY: "String Property",
    InfoType.INACTIVE: "Inactive",
    InfoType.END: "End Of Table",
}


class OemInfoType(namedtuple('OemInfoType', ['code'])):
    """A structure type outside the known set; 128-255 are OEM-specific."""
    __slots__ = ()

    def __str__(self):
        if self.code >= 128:
            return f"OEM-specific Type ({self.code})"
        return f"Unknown Type ({self.code})"

    def __int__(self):
        return self.code


def info_type_from_code(code):
    try:
        return InfoType(code)
    except ValueError:
        return OemInfoType(code)


class RawStructure(namedtuple('RawStructure', ['version', 'info', 'handle', 'data', 'strings', 'offset'])):
    """
    One structure from the table, undecoded.
    `data` is the formatted section after the 4-byte header, so field offsets
    used with read() are the DSP0134 offsets minus 4.
    """
    __slots__ = ()

    @property
    def code(self):
        return int(self.info)

    def read(self, fmt, offset):
        """Read one little-endian struct value from the formatted section."""
        fmt = "<" + fmt
        width = struct.calcsize(fmt)
        if offset < 0 or offset + width > len(self.data):
            raise SliceConversionFailed(offset, width)
        return struct.unpack_from(fmt, self.data, offset)[0]

    def read_u8(self, offset):
        return self.read("B", offset)

    def read_u16(self, offset):
        return self.read("H", offset)

    def read_u32(self, offset):
        return self.read("I", offset)

    def read_u64(self, offset):
        return self.read("Q", offset)

    def read_slice(self, offset, length):
        """Sub-view of the formatted section, or None if out of bounds."""
        if offset < 0 or length < 0 or offset + length > len(self.data):
            return None
        return self.data[offset:offset + length]

    def iter_strings(self):
        for chunk in bytes(self.strings).split(b"\0"):
            if chunk:
                yield chunk.decode("utf-8", errors="replace")

    @property
    def n_strings(self):
        return sum(1 for _ in self.iter_strings())

    def get_string_by_index(self, index):
        """
        Return string number `index` (1-based). Index 0 means the field
        references no string and is rejected like any other bad index.
        """
        if index > 0:
            for n, s in enumerate(self.iter_strings(), 1):
                if n == index:
                    return s
        raise StringIndexInvalid(self.info, self.handle, index)

    def get_string_at(self, offset):
        return self.get_string_by_index(self.read_u8(offset))

    def __str__(self):
        return f"handle=0x{self.handle:04X} type={self.code} {self.info}"


def find_nulnul(buf, start, end):
    """Index of the first of two adjacent NUL bytes in buf[start:end], or None."""
    if not isinstance(buf, (bytes, bytearray)):
        buf = bytes(buf)
    index = buf.find(b"\0\0", start, end)
    return None if index < 0 else index


class Structures(object):
    """
    The structures in a table of `length` bytes holding at most `count`
    structures (None: no limit). Iterating starts a new walk from the
    first structure; a malformed structure raises and ends that walk.
    """

    def __init__(self, buffer, version, length, count=None):
        self.buffer = memoryview(buffer)
        self.version = SmbiosVersion(*version)
        self.length = length
        self.count = count

    def __iter__(self):
        end = min(self.length, len(self.buffer))
        buf = self.buffer
        # one copy for the terminator scans; records still view the caller's buffer
        scan = bytes(buf[:end])
        offset = 0
        produced = 0
        while offset + HEADER_SIZE <= end:
            if self.count is not None and produced >= self.count:
                break
            (code, length, handle) = struct.unpack_from(HEADER_FORMAT, buf, offset)
            strings_start = offset + length
            if length < HEADER_SIZE or strings_start > end:
                raise RecordSizeInvalid(offset, length)
            terminator = find_nulnul(scan, strings_start, end)
            if terminator is None:
                raise RecordStringsUnterminated(offset)

            structure = RawStructure(
                version=self.version,
                info=info_type_from_code(code),
                handle=handle,
                data=buf[offset + HEADER_SIZE:strings_start],
                strings=buf[strings_start:terminator + 2],
                offset=offset,
            )
            log.debug("structure at 0x%04X: %s, %u bytes", offset, structure, terminator + 2 - offset)
            offset = terminator + 2
            produced += 1
            yield structure

            # SMBIOS 3.x has no structure count, only a maximum size
            if self.version.major >= 3 and structure.info == InfoType.END:
                break

    def __repr__(self):
        return f"Structures(version={self.version}, length={self.length}, count={self.count})"
