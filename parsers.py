"""
Decoders for individual SMBIOS structure types.

Every decoder takes a RawStructure and reads it only through its accessor
methods (read_*, read_slice, get_string_by_index, get_string_at), so a short
or corrupt structure raises a MalformedStructureError instead of misreading
neighbouring bytes. Offsets below are relative to the formatted data, i.e.
the DSP0134 offset minus the 4-byte header.
"""

import struct
import uuid
from collections import namedtuple

import field_values as fv
from characteristics import (BaseBoardFeatures, BiosCharacteristics,
                             BiosCharacteristicsExtension1, BiosCharacteristicsExtension2,
                             BiosLanguageFlags, CacheSramType, EventLogStatus, MemoryTypeDetail,
                             ProcessorCharacteristics, SlotCharacteristics1, SlotCharacteristics2)
from smbios_errors import (FormattedSectionLengthInvalid, RecordTypeMismatch,
                           SliceConversionFailed, SmbiosError)
from structures import HEADER_SIZE, InfoType, info_type_from_code

HEX_LINE_WIDTH = 16

# Named tuples for decoded structures
Revision = namedtuple('Revision', ['major', 'minor'])

RomSize = namedtuple('RomSize', ['basic', 'extended'])

Bios = namedtuple('Bios', [
    'handle', 'vendor', 'bios_version', 'bios_starting_address_segment',
    'bios_release_date', 'rom_size', 'characteristics', 'characteristics_ext1',
    'characteristics_ext2', 'bios_revision', 'firmware_revision'
])

System = namedtuple('System', [
    'handle', 'manufacturer', 'product_name', 'version', 'serial_number',
    'uuid', 'wake_up_type', 'sku_number', 'family'
])

BaseBoard = namedtuple('BaseBoard', [
    'handle', 'manufacturer', 'product', 'version', 'serial_number', 'asset_tag',
    'features', 'location_in_chassis', 'chassis_handle', 'board_type',
    'contained_handles'
])

Enclosure = namedtuple('Enclosure', [
    'handle', 'manufacturer', 'chassis_type', 'lock_present', 'version',
    'serial_number', 'asset_tag', 'boot_up_state', 'power_supply_state',
    'thermal_state', 'security_status', 'oem_defined', 'height', 'power_cords',
    'contained_elements', 'sku_number'
])

ContainedElement = namedtuple('ContainedElement', ['element_type', 'minimum', 'maximum'])

Processor = namedtuple('Processor', [
    'handle', 'socket_designation', 'processor_type', 'processor_family',
    'processor_manufacturer', 'processor_id', 'processor_version', 'voltage',
    'external_clock', 'max_speed', 'current_speed', 'status', 'processor_upgrade',
    'l1_cache_handle', 'l2_cache_handle', 'l3_cache_handle', 'serial_number',
    'asset_tag', 'part_number', 'core_count', 'core_enabled', 'thread_count',
    'characteristics'
])

CacheConfiguration = namedtuple('CacheConfiguration', [
    'level', 'socketed', 'location', 'enabled', 'operational_mode'
])

Cache = namedtuple('Cache', [
    'handle', 'socket_designation', 'configuration', 'maximum_size',
    'installed_size', 'supported_sram_type', 'current_sram_type', 'cache_speed',
    'error_correction_type', 'system_cache_type', 'associativity'
])

PeerDevice = namedtuple('PeerDevice', [
    'segment_group', 'bus_number', 'device_function_number', 'data_bus_width'
])

SystemSlots = namedtuple('SystemSlots', [
    'handle', 'slot_designation', 'slot_type', 'slot_data_bus_width',
    'current_usage', 'slot_length', 'slot_id', 'characteristics1',
    'characteristics2', 'segment_group', 'bus_number', 'device_function_number',
    'data_bus_width', 'peer_devices'
])

OemStrings = namedtuple('OemStrings', ['handle', 'strings'])

MemoryDevice = namedtuple('MemoryDevice', [
    'handle', 'physical_memory_array_handle', 'memory_error_information_handle',
    'total_width', 'data_width', 'size', 'form_factor', 'device_set',
    'device_locator', 'bank_locator', 'memory_type', 'type_detail', 'speed',
    'manufacturer', 'serial_number', 'asset_tag', 'part_number', 'rank',
    'configured_memory_speed', 'minimum_voltage', 'maximum_voltage',
    'configured_voltage'
])

PortableBattery = namedtuple('PortableBattery', [
    'handle', 'location', 'manufacturer', 'manufacture_date', 'serial_number',
    'device_name', 'device_chemistry', 'design_capacity', 'design_voltage',
    'sbds_version_number', 'maximum_error', 'sbds_serial_number',
    'sbds_manufacture_date', 'sbds_device_chemistry', 'oem_specific'
])

PortConnector = namedtuple('PortConnector', [
    'handle', 'internal_reference_designator', 'internal_connector_type',
    'external_reference_designator', 'external_connector_type', 'port_type'
])

SystemConfigurationOptions = namedtuple('SystemConfigurationOptions', ['handle', 'options'])

BiosLanguage = namedtuple('BiosLanguage', [
    'handle', 'installable_languages', 'flags', 'current_language'
])

GroupItem = namedtuple('GroupItem', ['item_type', 'item_handle'])

GroupAssociations = namedtuple('GroupAssociations', ['handle', 'group_name', 'items'])

EventLogTypeDescriptor = namedtuple('EventLogTypeDescriptor', ['log_type', 'data_format'])

SystemEventLog = namedtuple('SystemEventLog', [
    'handle', 'log_area_length', 'log_header_start_offset', 'log_data_start_offset',
    'access_method', 'log_status', 'log_change_token', 'access_method_address',
    'log_header_format', 'supported_log_types'
])

PhysicalMemoryArray = namedtuple('PhysicalMemoryArray', [
    'handle', 'location', 'use', 'memory_error_correction', 'maximum_capacity',
    'memory_error_information_handle', 'number_of_memory_devices'
])

MemoryError32 = namedtuple('MemoryError32', [
    'handle', 'error_type', 'error_granularity', 'error_operation', 'vendor_syndrome',
    'memory_array_error_address', 'device_error_address', 'error_resolution'
])

MemoryArrayMappedAddress = namedtuple('MemoryArrayMappedAddress', [
    'handle', 'starting_address', 'ending_address', 'memory_array_handle',
    'partition_width'
])

MemoryDeviceMappedAddress = namedtuple('MemoryDeviceMappedAddress', [
    'handle', 'starting_address', 'ending_address', 'memory_device_handle',
    'memory_array_mapped_address_handle', 'partition_row_position',
    'interleave_position', 'interleaved_data_depth'
])

BuiltInPointingDevice = namedtuple('BuiltInPointingDevice', [
    'handle', 'device_type', 'interface', 'number_of_buttons'
])


def _check(record, info, min_length, *gates):
    """
    Reject a record of the wrong type, or one whose formatted section is
    shorter than its version requires. `gates` are (version, min_length)
    pairs for the fields later versions add.
    """
    if record.info != info:
        raise RecordTypeMismatch(info, record.info, record.handle)
    for version, length in gates:
        if record.version >= version:
            min_length = max(min_length, length)
    if len(record.data) < min_length:
        raise FormattedSectionLengthInvalid(record.info, record.handle, min_length + HEADER_SIZE)


def _string(record, offset):
    """String field; index 0 (no string) gives None."""
    index = record.read_u8(offset)
    if index == 0:
        return None
    return record.get_string_by_index(index)


def _slice(record, offset, length):
    view = record.read_slice(offset, length)
    if view is None:
        raise SliceConversionFailed(offset, length)
    return bytes(view)


def _handle(value):
    return None if value == 0xFFFF else value


def _has(record, offset):
    return len(record.data) > offset


# --- Specific Parsers ---

def parse_bios(record):
    # BIOS Information (Type 0)
    _check(record, InfoType.BIOS, 0x0E, ((2, 4), 0x14), ((3, 1), 0x16))
    v = record.version
    ext1 = ext2 = bios_revision = firmware_revision = extended_rom = None
    if v >= (2, 4):
        ext1 = BiosCharacteristicsExtension1(record.read_u8(0x0E))
        ext2 = BiosCharacteristicsExtension2(record.read_u8(0x0F))
        bios_revision = Revision(record.read_u8(0x10), record.read_u8(0x11))
        firmware_revision = Revision(record.read_u8(0x12), record.read_u8(0x13))
    if v >= (3, 1):
        extended_rom = record.read_u16(0x14)
    return Bios(
        handle=record.handle,
        vendor=_string(record, 0x00),
        bios_version=_string(record, 0x01),
        bios_starting_address_segment=record.read_u16(0x02),
        bios_release_date=_string(record, 0x04),
        rom_size=RomSize(record.read_u8(0x05), extended_rom),
        characteristics=BiosCharacteristics(record.read_u64(0x06)),
        characteristics_ext1=ext1,
        characteristics_ext2=ext2,
        bios_revision=bios_revision,
        firmware_revision=firmware_revision,
    )


def rom_size_bytes(rom_size):
    """Size of the BIOS ROM in bytes, or None if it cannot be expressed."""
    if rom_size.basic != 0xFF:
        return (rom_size.basic + 1) << 16
    if rom_size.extended is None:
        return None
    unit = (rom_size.extended >> 14) & 0b11
    size = rom_size.extended & 0x3FFF
    if unit == 0b00:
        return size << 20
    if unit == 0b01:
        return size << 30
    return None


def parse_system(record):
    # System Information (Type 1)
    _check(record, InfoType.SYSTEM, 0x04, ((2, 1), 0x15), ((2, 4), 0x17))
    v = record.version
    system_uuid = wake_up_type = sku = family = None
    if v >= (2, 1):
        raw = _slice(record, 0x04, 16)
        # little-endian encoding of the first three fields since 2.6
        system_uuid = uuid.UUID(bytes_le=raw) if v >= (2, 6) else uuid.UUID(bytes=raw)
        wake_up_type = record.read_u8(0x14)
    if v >= (2, 4):
        sku = _string(record, 0x15)
        family = _string(record, 0x16)
    return System(
        handle=record.handle,
        manufacturer=_string(record, 0x00),
        product_name=_string(record, 0x01),
        version=_string(record, 0x02),
        serial_number=_string(record, 0x03),
        uuid=system_uuid,
        wake_up_type=wake_up_type,
        sku_number=sku,
        family=family,
    )


def parse_baseboard(record):
    # Baseboard (Type 2); optional fields are present according to the length
    _check(record, InfoType.BASE_BOARD, 0x04)
    asset = features = location = chassis = board_type = None
    contained = []
    if _has(record, 0x04):
        asset = _string(record, 0x04)
    if _has(record, 0x05):
        features = BaseBoardFeatures(record.read_u8(0x05))
    if _has(record, 0x06):
        location = _string(record, 0x06)
    if _has(record, 0x08):
        chassis = record.read_u16(0x07)
    if _has(record, 0x09):
        board_type = record.read_u8(0x09)
    if _has(record, 0x0A):
        n = record.read_u8(0x0A)
        contained = list(struct.unpack(f"<{n}H", _slice(record, 0x0B, 2 * n)))
    return BaseBoard(
        handle=record.handle,
        manufacturer=_string(record, 0x00),
        product=_string(record, 0x01),
        version=_string(record, 0x02),
        serial_number=_string(record, 0x03),
        asset_tag=asset,
        features=features,
        location_in_chassis=location,
        chassis_handle=chassis,
        board_type=board_type,
        contained_handles=contained,
    )


def contained_element_type_str(element_type):
    # bit 7 set: an SMBIOS structure type, clear: a baseboard type
    if element_type & 0x80:
        return f"Structure type: {info_type_from_code(element_type & 0x7F)}"
    return f"Baseboard type: {fv.lookup(fv.BOARD_TYPES, element_type)}"


def _contained_elements(raw, count, size):
    # records shorter than type/minimum/maximum carry nothing to show
    if size < 3:
        return []
    return [ContainedElement._make(struct.unpack_from("<BBB", raw, i * size))
            for i in range(count)]


def parse_enclosure(record):
    # Chassis Information (Type 3). Fields after the 2.0 layout are read in
    # order for as long as the formatted section holds them.
    _check(record, InfoType.ENCLOSURE, 0x05)
    boot_up = psu = thermal = security = oem = height = cords = None
    elements = sku = None
    if _has(record, 0x08):
        boot_up = record.read_u8(0x05)
        psu = record.read_u8(0x06)
        thermal = record.read_u8(0x07)
        security = record.read_u8(0x08)
    if _has(record, 0x0E):
        oem = record.read_u32(0x09)
        height = record.read_u8(0x0D)
        cords = record.read_u8(0x0E)
    if _has(record, 0x10):
        n = record.read_u8(0x0F)
        m = record.read_u8(0x10)
        raw = record.read_slice(0x11, n * m)
        if raw is not None:
            elements = _contained_elements(raw, n, m)
            # SKU follows the n records of m bytes each
            if _has(record, 0x11 + n * m):
                sku = _string(record, 0x11 + n * m)
    chassis_type = record.read_u8(0x01)
    return Enclosure(
        handle=record.handle,
        manufacturer=_string(record, 0x00),
        chassis_type=chassis_type & 0x7F,
        lock_present=bool(chassis_type & 0x80),
        version=_string(record, 0x02),
        serial_number=_string(record, 0x03),
        asset_tag=_string(record, 0x04),
        boot_up_state=boot_up,
        power_supply_state=psu,
        thermal_state=thermal,
        security_status=security,
        oem_defined=oem,
        height=height or None,
        power_cords=cords or None,
        contained_elements=elements,
        sku_number=sku,
    )


def parse_processor(record):
    # Processor Information (Type 4)
    _check(record, InfoType.PROCESSOR, 0x16, ((2, 1), 0x1C), ((2, 3), 0x1F), ((2, 5), 0x24),
           ((2, 6), 0x26), ((3, 0), 0x2C))
    v = record.version
    caches = (None, None, None)
    serial = asset = part = None
    core_count = core_enabled = thread_count = characteristics = None
    family = record.read_u8(0x02)
    if v >= (2, 1):
        caches = tuple(_handle(record.read_u16(p)) for p in (0x16, 0x18, 0x1A))
    if v >= (2, 3):
        serial = _string(record, 0x1C)
        asset = _string(record, 0x1D)
        part = _string(record, 0x1E)
    if v >= (2, 5):
        core_count = record.read_u8(0x1F)
        core_enabled = record.read_u8(0x20)
        thread_count = record.read_u8(0x21)
        characteristics = ProcessorCharacteristics(record.read_u16(0x22))
    if v >= (2, 6) and family == 0xFE:
        family = record.read_u16(0x24)
    if v >= (3, 0):
        if core_count == 0xFF:
            core_count = record.read_u16(0x26)
        if core_enabled == 0xFF:
            core_enabled = record.read_u16(0x28)
        if thread_count == 0xFF:
            thread_count = record.read_u16(0x2A)
    return Processor(
        handle=record.handle,
        socket_designation=_string(record, 0x00),
        processor_type=record.read_u8(0x01),
        processor_family=family,
        processor_manufacturer=_string(record, 0x03),
        processor_id=record.read_u64(0x04),
        processor_version=_string(record, 0x0C),
        voltage=record.read_u8(0x0D),
        external_clock=record.read_u16(0x0E),
        max_speed=record.read_u16(0x10),
        current_speed=record.read_u16(0x12),
        status=record.read_u8(0x14),
        processor_upgrade=record.read_u8(0x15),
        l1_cache_handle=caches[0],
        l2_cache_handle=caches[1],
        l3_cache_handle=caches[2],
        serial_number=serial,
        asset_tag=asset,
        part_number=part,
        core_count=core_count,
        core_enabled=core_enabled,
        thread_count=thread_count,
        characteristics=characteristics,
    )


def processor_voltage_str(voltage):
    if voltage & 0x80:
        return "%.1f V" % ((voltage & 0x7F) / 10)
    legacy = [s for bit, s in enumerate(("5.0 V", "3.3 V", "2.9 V")) if voltage & (1 << bit)]
    return " ".join(legacy) if legacy else "Unknown"


def processor_status_str(status):
    if not status & 0x40:
        return "Unpopulated"
    return "Populated, " + fv.lookup(fv.PROCESSOR_STATUS, status & 0x07)


def _cache_size16(raw):
    # bit 15 selects 64K granularity
    return (raw & 0x7FFF) << (16 if raw & 0x8000 else 10)


def _cache_size32(raw):
    return (raw & 0x7FFFFFFF) << (16 if raw & 0x80000000 else 10)


def parse_cache(record):
    # Cache Information (Type 7)
    _check(record, InfoType.CACHE, 0x0B, ((2, 1), 0x0F), ((3, 1), 0x17))
    v = record.version
    config = record.read_u16(0x01)
    max_raw = record.read_u16(0x03)
    installed_raw = record.read_u16(0x05)
    maximum = _cache_size16(max_raw)
    installed = _cache_size16(installed_raw)
    speed = ecc = cache_type = assoc = None
    if v >= (2, 1):
        speed = record.read_u8(0x0B) or None
        ecc = record.read_u8(0x0C)
        cache_type = record.read_u8(0x0D)
        assoc = record.read_u8(0x0E)
    if v >= (3, 1):
        if max_raw == 0xFFFF:
            maximum = _cache_size32(record.read_u32(0x0F))
        if installed_raw == 0xFFFF:
            installed = _cache_size32(record.read_u32(0x13))
    return Cache(
        handle=record.handle,
        socket_designation=_string(record, 0x00),
        configuration=CacheConfiguration(
            level=(config & 0x07) + 1,
            socketed=bool(config & 0x08),
            location=(config >> 5) & 0x03,
            enabled=bool(config & 0x80),
            operational_mode=(config >> 8) & 0x03,
        ),
        maximum_size=maximum,
        installed_size=installed,
        supported_sram_type=CacheSramType(record.read_u16(0x07)),
        current_sram_type=CacheSramType(record.read_u16(0x09)),
        cache_speed=speed,
        error_correction_type=ecc,
        system_cache_type=cache_type,
        associativity=assoc,
    )


def parse_port_connector(record):
    # Port Connector Information (Type 8)
    _check(record, InfoType.PORT_CONNECTOR, 0x05)
    return PortConnector(
        handle=record.handle,
        internal_reference_designator=_string(record, 0x00),
        internal_connector_type=record.read_u8(0x01),
        external_reference_designator=_string(record, 0x02),
        external_connector_type=record.read_u8(0x03),
        port_type=record.read_u8(0x04),
    )


def parse_system_slots(record):
    # System Slots (Type 9)
    _check(record, InfoType.SYSTEM_SLOTS, 0x08, ((2, 1), 0x09), ((2, 6), 0x0D))
    v = record.version
    char2 = segment = bus = devfn = width = None
    peers = []
    if v >= (2, 1):
        char2 = SlotCharacteristics2(record.read_u8(0x08))
    if v >= (2, 6):
        segment = record.read_u16(0x09)
        bus = record.read_u8(0x0B)
        devfn = record.read_u8(0x0C)
    # 3.2 tables still carry 2.6-sized slot records
    if v >= (3, 2) and _has(record, 0x0E):
        width = record.read_u8(0x0D)
        n = record.read_u8(0x0E)
        raw = _slice(record, 0x0F, 5 * n)
        peers = [PeerDevice._make(p) for p in struct.iter_unpack("<HBBB", raw)]
    return SystemSlots(
        handle=record.handle,
        slot_designation=_string(record, 0x00),
        slot_type=record.read_u8(0x01),
        slot_data_bus_width=record.read_u8(0x02),
        current_usage=record.read_u8(0x03),
        slot_length=record.read_u8(0x04),
        slot_id=record.read_u16(0x05),
        characteristics1=SlotCharacteristics1(record.read_u8(0x07)),
        characteristics2=char2,
        segment_group=segment,
        bus_number=bus,
        device_function_number=devfn,
        data_bus_width=width,
        peer_devices=peers,
    )


def _counted_strings(record):
    # a count byte at offset 0, then that many strings
    count = record.read_u8(0x00)
    return [record.get_string_by_index(i) for i in range(1, count + 1)]


def parse_oem_strings(record):
    # OEM Strings (Type 11)
    _check(record, InfoType.OEM_STRINGS, 0x01)
    return OemStrings(handle=record.handle, strings=_counted_strings(record))


def parse_system_configuration_options(record):
    # System Configuration Options (Type 12)
    _check(record, InfoType.SYSTEM_CONFIGURATION_OPTIONS, 0x01)
    return SystemConfigurationOptions(handle=record.handle, options=_counted_strings(record))


def parse_bios_language(record):
    # BIOS Language Information (Type 13); 2.1 inserted the flags byte
    _check(record, InfoType.BIOS_LANGUAGE, 0x11, ((2, 1), 0x12))
    if record.version >= (2, 1):
        flags = BiosLanguageFlags(record.read_u8(0x01))
        current = _string(record, 0x11)
    else:
        flags = None
        current = _string(record, 0x10)
    return BiosLanguage(
        handle=record.handle,
        installable_languages=_counted_strings(record),
        flags=flags,
        current_language=current,
    )


def parse_group_associations(record):
    # Group Associations (Type 14): a group name, then 3-byte (type, handle) items
    _check(record, InfoType.GROUP_ASSOCIATIONS, 0x01)
    count = (len(record.data) - 1) // 3
    raw = _slice(record, 0x01, 3 * count)
    return GroupAssociations(
        handle=record.handle,
        group_name=_string(record, 0x00),
        items=[GroupItem._make(item) for item in struct.iter_unpack("<BH", raw)],
    )


def parse_system_event_log(record):
    """
    System Event Log (Type 15).

    Only the structure describing the log is decoded; the log area itself
    lives outside the table, at the access method's address. The header
    format and the supported log type descriptors are 2.1 additions.
    """
    _check(record, InfoType.SYSTEM_EVENT_LOG, 0x10, ((2, 1), 0x13))
    header_format = None
    log_types = []
    if record.version >= (2, 1):
        header_format = record.read_u8(0x10)
        n = record.read_u8(0x11)
        size = record.read_u8(0x12)
        raw = _slice(record, 0x13, n * size)
        # each descriptor starts with the log type and its variable data format
        if size >= 2:
            log_types = [EventLogTypeDescriptor._make(struct.unpack_from("<BB", raw, i * size))
                         for i in range(n)]
    return SystemEventLog(
        handle=record.handle,
        log_area_length=record.read_u16(0x00),
        log_header_start_offset=record.read_u16(0x02),
        log_data_start_offset=record.read_u16(0x04),
        access_method=record.read_u8(0x06),
        log_status=EventLogStatus(record.read_u8(0x07)),
        log_change_token=record.read_u32(0x08),
        access_method_address=record.read_u32(0x0C),
        log_header_format=header_format,
        supported_log_types=log_types,
    )


def event_log_address_str(method, address):
    if method == 0x00:
        return "Index 0x%02X, Data 0x%02X" % (address & 0xFF, (address >> 16) & 0xFF)
    if method == 0x01:
        return "Index 0x%02X 0x%02X, Data 0x%02X" % (
            address & 0xFF, (address >> 8) & 0xFF, (address >> 16) & 0xFF)
    if method == 0x02:
        return "Index 0x%04X, Data 0x%02X" % (address & 0xFFFF, (address >> 16) & 0xFF)
    if method == 0x04:
        return "GPNV Handle 0x%04X" % (address & 0xFFFF)
    return "0x%08X" % address


def parse_physical_memory_array(record):
    # Physical Memory Array (Type 16)
    _check(record, InfoType.PHYSICAL_MEMORY_ARRAY, 0x0B, ((2, 7), 0x13))
    capacity = record.read_u32(0x03)
    if capacity != 0x80000000:
        maximum = capacity << 10
    elif record.version >= (2, 7):
        # too large for the KiB field, the extended field holds bytes
        maximum = record.read_u64(0x0B) or None
    else:
        maximum = None
    return PhysicalMemoryArray(
        handle=record.handle,
        location=record.read_u8(0x00),
        use=record.read_u8(0x01),
        memory_error_correction=record.read_u8(0x02),
        maximum_capacity=maximum,
        memory_error_information_handle=record.read_u16(0x07),
        number_of_memory_devices=record.read_u16(0x09),
    )


def _memory_size(record, raw):
    if raw == 0:
        return 0      # no module installed
    if raw == 0xFFFF:
        return None   # unknown
    if raw == 0x7FFF and record.version >= (2, 7):
        return (record.read_u32(0x18) & 0x7FFFFFFF) << 20
    if raw & 0x8000:
        return (raw & 0x7FFF) << 10
    return raw << 20


def parse_memory_device(record):
    # Memory Device (Type 17)
    _check(record, InfoType.MEMORY_DEVICE, 0x11, ((2, 3), 0x17), ((2, 6), 0x18), ((2, 7), 0x1E),
           ((2, 8), 0x24))
    v = record.version
    speed = mfr = serial = asset = part = rank = None
    configured_speed = min_v = max_v = conf_v = None
    if v >= (2, 3):
        speed = record.read_u16(0x11) or None
        mfr = _string(record, 0x13)
        serial = _string(record, 0x14)
        asset = _string(record, 0x15)
        part = _string(record, 0x16)
    if v >= (2, 6):
        rank = (record.read_u8(0x17) & 0x0F) or None
    if v >= (2, 7):
        configured_speed = record.read_u16(0x1C) or None
    if v >= (2, 8):
        min_v = record.read_u16(0x1E) or None
        max_v = record.read_u16(0x20) or None
        conf_v = record.read_u16(0x22) or None
    return MemoryDevice(
        handle=record.handle,
        physical_memory_array_handle=record.read_u16(0x00),
        memory_error_information_handle=_handle(record.read_u16(0x02)),
        total_width=_handle(record.read_u16(0x04)),
        data_width=_handle(record.read_u16(0x06)),
        size=_memory_size(record, record.read_u16(0x08)),
        form_factor=record.read_u8(0x0A),
        device_set=record.read_u8(0x0B),
        device_locator=_string(record, 0x0C),
        bank_locator=_string(record, 0x0D),
        memory_type=record.read_u8(0x0E),
        type_detail=MemoryTypeDetail(record.read_u16(0x0F)),
        speed=speed,
        manufacturer=mfr,
        serial_number=serial,
        asset_tag=asset,
        part_number=part,
        rank=rank,
        configured_memory_speed=configured_speed,
        minimum_voltage=min_v,
        maximum_voltage=max_v,
        configured_voltage=conf_v,
    )


def parse_memory_error_32(record):
    # 32-bit Memory Error Information (Type 18)
    _check(record, InfoType.MEMORY_ERROR_32, 0x13)
    return MemoryError32(
        handle=record.handle,
        error_type=record.read_u8(0x00),
        error_granularity=record.read_u8(0x01),
        error_operation=record.read_u8(0x02),
        vendor_syndrome=record.read_u32(0x03),
        memory_array_error_address=record.read_u32(0x07),
        device_error_address=record.read_u32(0x0B),
        error_resolution=record.read_u32(0x0F),
    )


def _mapped_range(record, extended_offset):
    """
    (start, end) byte addresses of a mapped range. The 32-bit fields count
    KiB; a starting address of FFFFFFFFh defers to the 2.7 extended
    fields, which give bytes.
    """
    start = record.read_u32(0x00)
    end = record.read_u32(0x04)
    if start == 0xFFFFFFFF and record.version >= (2, 7):
        return record.read_u64(extended_offset), record.read_u64(extended_offset + 8)
    return start << 10, ((end + 1) << 10) - 1


def parse_memory_array_mapped_address(record):
    # Memory Array Mapped Address (Type 19)
    _check(record, InfoType.MEMORY_ARRAY_MAPPED_ADDRESS, 0x0B, ((2, 7), 0x1B))
    start, end = _mapped_range(record, 0x0B)
    return MemoryArrayMappedAddress(
        handle=record.handle,
        starting_address=start,
        ending_address=end,
        memory_array_handle=record.read_u16(0x08),
        partition_width=record.read_u8(0x0A),
    )


def parse_memory_device_mapped_address(record):
    # Memory Device Mapped Address (Type 20)
    _check(record, InfoType.MEMORY_DEVICE_MAPPED_ADDRESS, 0x0F, ((2, 7), 0x1F))
    start, end = _mapped_range(record, 0x0F)
    return MemoryDeviceMappedAddress(
        handle=record.handle,
        starting_address=start,
        ending_address=end,
        memory_device_handle=record.read_u16(0x08),
        memory_array_mapped_address_handle=record.read_u16(0x0A),
        partition_row_position=record.read_u8(0x0C),
        interleave_position=record.read_u8(0x0D),
        interleaved_data_depth=record.read_u8(0x0E),
    )


def parse_built_in_pointing_device(record):
    # Built-in Pointing Device (Type 21)
    _check(record, InfoType.BUILT_IN_POINTING_DEVICE, 0x03)
    return BuiltInPointingDevice(
        handle=record.handle,
        device_type=record.read_u8(0x00),
        interface=record.read_u8(0x01),
        number_of_buttons=record.read_u8(0x02),
    )


def sbds_date_str(raw):
    # bits 15:9 year - 1980, 8:5 month, 4:0 day
    return "%04u-%02u-%02u" % (1980 + (raw >> 9), (raw >> 5) & 0x0F, raw & 0x1F)


def parse_portable_battery(record):
    # Portable Battery (Type 22)
    _check(record, InfoType.PORTABLE_BATTERY, 0x0C, ((2, 2), 0x16))
    v = record.version
    sbds_serial = sbds_date = sbds_chemistry = oem = None
    multiplier = 1
    if v >= (2, 2):
        sbds_serial = record.read_u16(0x0C)
        sbds_date = record.read_u16(0x0E)
        sbds_chemistry = _string(record, 0x10)
        multiplier = record.read_u8(0x11) or 1
        oem = record.read_u32(0x12)
    capacity = record.read_u16(0x06)
    max_error = record.read_u8(0x0B)
    return PortableBattery(
        handle=record.handle,
        location=_string(record, 0x00),
        manufacturer=_string(record, 0x01),
        manufacture_date=_string(record, 0x02),
        serial_number=_string(record, 0x03),
        device_name=_string(record, 0x04),
        device_chemistry=record.read_u8(0x05),
        design_capacity=capacity * multiplier if capacity else None,
        design_voltage=record.read_u16(0x08) or None,
        sbds_version_number=_string(record, 0x0A),
        maximum_error=None if max_error == 0xFF else max_error,
        sbds_serial_number=sbds_serial,
        sbds_manufacture_date=sbds_date,
        sbds_device_chemistry=sbds_chemistry,
        oem_specific=oem,
    )


PARSERS = {
    InfoType.BIOS: parse_bios,
    InfoType.SYSTEM: parse_system,
    InfoType.BASE_BOARD: parse_baseboard,
    InfoType.ENCLOSURE: parse_enclosure,
    InfoType.PROCESSOR: parse_processor,
    InfoType.CACHE: parse_cache,
    InfoType.PORT_CONNECTOR: parse_port_connector,
    InfoType.SYSTEM_SLOTS: parse_system_slots,
    InfoType.OEM_STRINGS: parse_oem_strings,
    InfoType.SYSTEM_CONFIGURATION_OPTIONS: parse_system_configuration_options,
    InfoType.BIOS_LANGUAGE: parse_bios_language,
    InfoType.GROUP_ASSOCIATIONS: parse_group_associations,
    InfoType.SYSTEM_EVENT_LOG: parse_system_event_log,
    InfoType.PHYSICAL_MEMORY_ARRAY: parse_physical_memory_array,
    InfoType.MEMORY_DEVICE: parse_memory_device,
    InfoType.MEMORY_ERROR_32: parse_memory_error_32,
    InfoType.MEMORY_ARRAY_MAPPED_ADDRESS: parse_memory_array_mapped_address,
    InfoType.MEMORY_DEVICE_MAPPED_ADDRESS: parse_memory_device_mapped_address,
    InfoType.BUILT_IN_POINTING_DEVICE: parse_built_in_pointing_device,
    InfoType.PORTABLE_BATTERY: parse_portable_battery,
}


def decode_structure(record):
    """
    Decode a record with its type's parser. Types without a parser are
    returned unchanged, as the RawStructure.
    """
    parser = PARSERS.get(record.info)
    if parser is None:
        return record
    return parser(record)


# --- Display ---

def size_str(n):
    if n is None:
        return "Unknown"
    for shift, unit in ((40, "TB"), (30, "GB"), (20, "MB"), (10, "kB")):
        if n >= (1 << shift) and n % (1 << shift) == 0:
            return f"{n >> shift} {unit}"
    return f"{n} bytes"


def _text(s):
    return "Not Specified" if s is None else s


def _opt(value, fmt="{}"):
    return "Unknown" if value is None else fmt.format(value)


def flags_str(bitfield, long_flags=False):
    """Set, non-reserved flags, one per line."""
    spec = "#" if long_flags else ""
    lines = [format(flag, spec) for flag in bitfield.significants()]
    return "\n".join(lines) if lines else "None"


def _flag_rows(label, bitfield, long_flags):
    if bitfield is None:
        return []
    rows = [(label, flags_str(bitfield, long_flags))]
    if long_flags:
        reserved = [str(r) for r in bitfield.reserved()]
        if reserved:
            rows.append((label + " (Reserved)", "\n".join(reserved)))
    return rows


def _describe_bios(b, long_flags):
    info = [
        ("Vendor", _text(b.vendor)),
        ("Version", _text(b.bios_version)),
        ("Release Date", _text(b.bios_release_date)),
        ("Address", f"0x{b.bios_starting_address_segment:04X}0"),
        ("ROM Size", size_str(rom_size_bytes(b.rom_size))),
    ]
    info += _flag_rows("Characteristics", b.characteristics, long_flags)
    info += _flag_rows("Characteristics Ext. 1", b.characteristics_ext1, long_flags)
    info += _flag_rows("Characteristics Ext. 2", b.characteristics_ext2, long_flags)
    if b.bios_revision is not None and b.bios_revision != (0xFF, 0xFF):
        info.append(("BIOS Revision", "%u.%u" % b.bios_revision))
    if b.firmware_revision is not None and b.firmware_revision != (0xFF, 0xFF):
        info.append(("Firmware Revision", "%u.%u" % b.firmware_revision))
    return info


def _describe_system(s, long_flags):
    info = [
        ("Manufacturer", _text(s.manufacturer)),
        ("Product Name", _text(s.product_name)),
        ("Version", _text(s.version)),
        ("Serial Number", _text(s.serial_number)),
    ]
    if s.uuid is not None:
        if s.uuid.bytes == b"\x00" * 16:
            info.append(("UUID", "Not Present"))
        elif s.uuid.bytes == b"\xff" * 16:
            info.append(("UUID", "Not Settable"))
        else:
            info.append(("UUID", str(s.uuid).upper()))
    if s.wake_up_type is not None:
        info.append(("Wake-up Type", fv.lookup(fv.WAKE_UP_TYPES, s.wake_up_type)))
    if s.sku_number is not None or s.family is not None:
        info.append(("SKU Number", _text(s.sku_number)))
        info.append(("Family", _text(s.family)))
    return info


def _describe_baseboard(b, long_flags):
    info = [
        ("Manufacturer", _text(b.manufacturer)),
        ("Product Name", _text(b.product)),
        ("Version", _text(b.version)),
        ("Serial Number", _text(b.serial_number)),
        ("Asset Tag", _text(b.asset_tag)),
    ]
    info += _flag_rows("Features", b.features, long_flags)
    if b.location_in_chassis is not None:
        info.append(("Location In Chassis", b.location_in_chassis))
    if b.chassis_handle is not None:
        info.append(("Chassis Handle", f"0x{b.chassis_handle:04X}"))
    if b.board_type is not None:
        info.append(("Type", fv.lookup(fv.BOARD_TYPES, b.board_type)))
    if b.contained_handles:
        info.append(("Contained Object Handles",
                     "\n".join(f"0x{h:04X}" for h in b.contained_handles)))
    return info


def _describe_enclosure(e, long_flags):
    info = [
        ("Manufacturer", _text(e.manufacturer)),
        ("Type", fv.lookup(fv.CHASSIS_TYPES, e.chassis_type)),
        ("Lock", "Present" if e.lock_present else "Not Present"),
        ("Version", _text(e.version)),
        ("Serial Number", _text(e.serial_number)),
        ("Asset Tag", _text(e.asset_tag)),
    ]
    if e.boot_up_state is not None:
        info.append(("Boot-up State", fv.lookup(fv.CHASSIS_STATES, e.boot_up_state)))
        info.append(("Power Supply State", fv.lookup(fv.CHASSIS_STATES, e.power_supply_state)))
        info.append(("Thermal State", fv.lookup(fv.CHASSIS_STATES, e.thermal_state)))
        info.append(("Security Status", fv.lookup(fv.CHASSIS_SECURITY_STATUS, e.security_status)))
    if e.oem_defined is not None:
        info.append(("OEM Information", f"0x{e.oem_defined:08X}"))
        info.append(("Height", _opt(e.height, "{} U")))
        info.append(("Number Of Power Cords", _opt(e.power_cords)))
    if e.contained_elements is not None:
        info.append(("Contained Elements", str(len(e.contained_elements))))
        for i, el in enumerate(e.contained_elements, 1):
            info.append((f"Contained Element {i}", "%s (%u-%u)" % (
                contained_element_type_str(el.element_type), el.minimum, el.maximum)))
    if e.sku_number is not None:
        info.append(("SKU Number", e.sku_number))
    return info


def _describe_processor(p, long_flags):
    info = [
        ("Socket Designation", _text(p.socket_designation)),
        ("Type", fv.lookup(fv.PROCESSOR_TYPES, p.processor_type)),
        ("Family", fv.lookup(fv.PROCESSOR_FAMILIES, p.processor_family)),
        ("Manufacturer", _text(p.processor_manufacturer)),
        ("ID", " ".join("%02X" % b for b in struct.pack("<Q", p.processor_id))),
        ("Version", _text(p.processor_version)),
        ("Voltage", processor_voltage_str(p.voltage)),
        ("External Clock", _opt(p.external_clock or None, "{} MHz")),
        ("Max Speed", _opt(p.max_speed or None, "{} MHz")),
        ("Current Speed", _opt(p.current_speed or None, "{} MHz")),
        ("Status", processor_status_str(p.status)),
        ("Upgrade", fv.lookup(fv.PROCESSOR_UPGRADES, p.processor_upgrade)),
    ]
    for level, h in enumerate((p.l1_cache_handle, p.l2_cache_handle, p.l3_cache_handle), 1):
        info.append((f"L{level} Cache Handle", "Not Provided" if h is None else f"0x{h:04X}"))
    if p.part_number is not None or p.serial_number is not None:
        info.append(("Serial Number", _text(p.serial_number)))
        info.append(("Asset Tag", _text(p.asset_tag)))
        info.append(("Part Number", _text(p.part_number)))
    if p.core_count is not None:
        info.append(("Core Count", _opt(p.core_count or None)))
        info.append(("Core Enabled", _opt(p.core_enabled or None)))
        info.append(("Thread Count", _opt(p.thread_count or None)))
    info += _flag_rows("Characteristics", p.characteristics, long_flags)
    return info


def _describe_cache(c, long_flags):
    cfg = c.configuration
    info = [
        ("Socket Designation", _text(c.socket_designation)),
        ("Configuration", "%s, %s, Level %u" % (
            "Enabled" if cfg.enabled else "Disabled",
            "Socketed" if cfg.socketed else "Not Socketed",
            cfg.level)),
        ("Operational Mode", fv.lookup(fv.CACHE_OPERATIONAL_MODES, cfg.operational_mode)),
        ("Location", fv.lookup(fv.CACHE_LOCATIONS, cfg.location)),
        ("Installed Size", size_str(c.installed_size)),
        ("Maximum Size", size_str(c.maximum_size)),
    ]
    info += _flag_rows("Supported SRAM Types", c.supported_sram_type, long_flags)
    info += _flag_rows("Installed SRAM Type", c.current_sram_type, long_flags)
    if c.error_correction_type is not None:
        info.append(("Speed", _opt(c.cache_speed, "{} ns")))
        info.append(("Error Correction Type", fv.lookup(fv.CACHE_ERROR_CORRECTION, c.error_correction_type)))
        info.append(("System Type", fv.lookup(fv.CACHE_SYSTEM_TYPES, c.system_cache_type)))
        info.append(("Associativity", fv.lookup(fv.CACHE_ASSOCIATIVITY, c.associativity)))
    return info


def _describe_port_connector(p, long_flags):
    return [
        ("Internal Reference Designator", _text(p.internal_reference_designator)),
        ("Internal Connector Type", fv.lookup(fv.CONNECTOR_TYPES, p.internal_connector_type)),
        ("External Reference Designator", _text(p.external_reference_designator)),
        ("External Connector Type", fv.lookup(fv.CONNECTOR_TYPES, p.external_connector_type)),
        ("Port Type", fv.lookup(fv.PORT_TYPES, p.port_type)),
    ]


def _describe_system_slots(s, long_flags):
    info = [
        ("Designation", _text(s.slot_designation)),
        ("Type", "%s %s" % (fv.lookup(fv.SLOT_WIDTHS, s.slot_data_bus_width),
                            fv.lookup(fv.SLOT_TYPES, s.slot_type))),
        ("Current Usage", fv.lookup(fv.SLOT_USAGES, s.current_usage)),
        ("Length", fv.lookup(fv.SLOT_LENGTHS, s.slot_length)),
        ("ID", str(s.slot_id)),
    ]
    info += _flag_rows("Characteristics", s.characteristics1, long_flags)
    info += _flag_rows("Characteristics 2", s.characteristics2, long_flags)
    if s.segment_group is not None:
        info.append(("Bus Address", "%04x:%02x:%02x.%x" % (
            s.segment_group, s.bus_number, s.device_function_number >> 3,
            s.device_function_number & 0x7)))
    if s.data_bus_width is not None:
        info.append(("Data Bus Width", str(s.data_bus_width)))
        info.append(("Peer Devices", str(len(s.peer_devices))))
        for i, peer in enumerate(s.peer_devices, 1):
            info.append((f"Peer Device {i}", "%04x:%02x:%02x.%x (Width %u)" % (
                peer.segment_group, peer.bus_number, peer.device_function_number >> 3,
                peer.device_function_number & 0x7, peer.data_bus_width)))
    return info


def _describe_oem_strings(o, long_flags):
    return [(f"String {i}", s) for i, s in enumerate(o.strings, 1)]


def _describe_system_configuration_options(o, long_flags):
    return [(f"Option {i}", s) for i, s in enumerate(o.options, 1)]


def _describe_bios_language(b, long_flags):
    info = [("Installable Languages", str(len(b.installable_languages)))]
    info += [(f"Language {i}", s) for i, s in enumerate(b.installable_languages, 1)]
    info += _flag_rows("Flags", b.flags, long_flags)
    info.append(("Currently Installed Language", _text(b.current_language)))
    return info


def _describe_group_associations(g, long_flags):
    info = [
        ("Name", _text(g.group_name)),
        ("Items", str(len(g.items))),
    ]
    for i, item in enumerate(g.items, 1):
        info.append((f"Item {i}", "0x%04X (%s)" % (item.item_handle, info_type_from_code(item.item_type))))
    return info


def _error_handle_str(handle):
    if handle == 0xFFFE:
        return "Not Provided"
    if handle == 0xFFFF:
        return "No Error"
    return f"0x{handle:04X}"


def _describe_system_event_log(s, long_flags):
    info = [
        ("Area Length", f"{s.log_area_length} bytes"),
        ("Header Start Offset", f"0x{s.log_header_start_offset:04X}"),
    ]
    header_length = s.log_data_start_offset - s.log_header_start_offset
    if header_length > 0:
        info.append(("Header Length", f"{header_length} bytes"))
    info += [
        ("Data Start Offset", f"0x{s.log_data_start_offset:04X}"),
        ("Access Method", fv.lookup_oem(fv.EVENT_LOG_ACCESS_METHODS, s.access_method)),
        ("Access Address", event_log_address_str(s.access_method, s.access_method_address)),
    ]
    info += _flag_rows("Status", s.log_status, long_flags)
    info.append(("Change Token", f"0x{s.log_change_token:08X}"))
    if s.log_header_format is not None:
        info.append(("Header Format", fv.lookup_oem(fv.EVENT_LOG_HEADER_FORMATS, s.log_header_format)))
        info.append(("Supported Log Type Descriptors", str(len(s.supported_log_types))))
        for i, d in enumerate(s.supported_log_types, 1):
            info.append((f"Descriptor {i}", "%s (%s)" % (
                fv.lookup_oem(fv.EVENT_LOG_TYPES, d.log_type),
                fv.lookup_oem(fv.EVENT_LOG_DATA_FORMATS, d.data_format))))
    return info


def _describe_physical_memory_array(a, long_flags):
    return [
        ("Location", fv.lookup(fv.MEMORY_ARRAY_LOCATIONS, a.location)),
        ("Use", fv.lookup(fv.MEMORY_ARRAY_USES, a.use)),
        ("Error Correction Type", fv.lookup(fv.MEMORY_ARRAY_ERROR_CORRECTION, a.memory_error_correction)),
        ("Maximum Capacity", size_str(a.maximum_capacity)),
        ("Error Information Handle", _error_handle_str(a.memory_error_information_handle)),
        ("Number Of Devices", str(a.number_of_memory_devices)),
    ]


def _describe_memory_device(d, long_flags):
    if d.size == 0:
        size = "No Module Installed"
    else:
        size = size_str(d.size)
    info = [
        ("Array Handle", f"0x{d.physical_memory_array_handle:04X}"),
        ("Error Information Handle", _opt(d.memory_error_information_handle, "0x{:04X}")),
        ("Total Width", _opt(d.total_width, "{} bits")),
        ("Data Width", _opt(d.data_width, "{} bits")),
        ("Size", size),
        ("Form Factor", fv.lookup(fv.MEMORY_FORM_FACTORS, d.form_factor)),
        ("Set", "None" if d.device_set == 0 else _opt(None if d.device_set == 0xFF else d.device_set)),
        ("Locator", _text(d.device_locator)),
        ("Bank Locator", _text(d.bank_locator)),
        ("Type", fv.lookup(fv.MEMORY_TYPES, d.memory_type)),
    ]
    info += _flag_rows("Type Detail", d.type_detail, long_flags)
    if d.speed is not None or d.manufacturer is not None:
        info.append(("Speed", _opt(d.speed, "{} MT/s")))
        info.append(("Manufacturer", _text(d.manufacturer)))
        info.append(("Serial Number", _text(d.serial_number)))
        info.append(("Asset Tag", _text(d.asset_tag)))
        info.append(("Part Number", _text(d.part_number)))
    if d.rank is not None:
        info.append(("Rank", str(d.rank)))
    if d.configured_memory_speed is not None:
        info.append(("Configured Memory Speed", f"{d.configured_memory_speed} MT/s"))
    for label, mv in (("Minimum Voltage", d.minimum_voltage),
                      ("Maximum Voltage", d.maximum_voltage),
                      ("Configured Voltage", d.configured_voltage)):
        if mv is not None:
            info.append((label, "%.3f V" % (mv / 1000)))
    return info


def _describe_memory_error_32(m, long_flags):
    def unknown_or(value, fmt):
        return "Unknown" if value == 0x80000000 else fmt % value

    return [
        ("Type", fv.lookup(fv.MEMORY_ERROR_TYPES, m.error_type)),
        ("Granularity", fv.lookup(fv.MEMORY_ERROR_GRANULARITIES, m.error_granularity)),
        ("Operation", fv.lookup(fv.MEMORY_ERROR_OPERATIONS, m.error_operation)),
        ("Vendor Syndrome", "Unknown" if m.vendor_syndrome == 0 else "0x%08X" % m.vendor_syndrome),
        ("Memory Array Address", unknown_or(m.memory_array_error_address, "0x%08X")),
        ("Device Address", unknown_or(m.device_error_address, "0x%08X")),
        ("Resolution", unknown_or(m.error_resolution, "%u bytes")),
    ]


def _address_rows(m):
    return [
        ("Starting Address", f"0x{m.starting_address:011X}"),
        ("Ending Address", f"0x{m.ending_address:011X}"),
        ("Range Size", size_str(m.ending_address - m.starting_address + 1)),
    ]


def _describe_memory_array_mapped_address(m, long_flags):
    return _address_rows(m) + [
        ("Physical Array Handle", f"0x{m.memory_array_handle:04X}"),
        ("Partition Width", str(m.partition_width)),
    ]


def _describe_memory_device_mapped_address(m, long_flags):
    def position(value):
        return _opt(None if value == 0xFF else value)

    return _address_rows(m) + [
        ("Physical Device Handle", f"0x{m.memory_device_handle:04X}"),
        ("Memory Array Mapped Address Handle", f"0x{m.memory_array_mapped_address_handle:04X}"),
        ("Partition Row Position", position(m.partition_row_position)),
        ("Interleave Position", position(m.interleave_position)),
        ("Interleaved Data Depth", position(m.interleaved_data_depth)),
    ]


def _describe_built_in_pointing_device(p, long_flags):
    return [
        ("Type", fv.lookup(fv.POINTING_DEVICE_TYPES, p.device_type)),
        ("Interface", fv.lookup(fv.POINTING_DEVICE_INTERFACES, p.interface)),
        ("Buttons", str(p.number_of_buttons)),
    ]


def _describe_portable_battery(b, long_flags):
    chemistry = fv.lookup(fv.BATTERY_CHEMISTRIES, b.device_chemistry)
    if b.device_chemistry == 0x02 and b.sbds_device_chemistry is not None:
        chemistry = b.sbds_device_chemistry
    date = b.manufacture_date
    if date is None and b.sbds_manufacture_date:
        date = sbds_date_str(b.sbds_manufacture_date)
    info = [
        ("Location", _text(b.location)),
        ("Manufacturer", _text(b.manufacturer)),
        ("Manufacture Date", _text(date)),
        ("Serial Number", _text(b.serial_number)),
        ("Name", _text(b.device_name)),
        ("Chemistry", chemistry),
        ("Design Capacity", _opt(b.design_capacity, "{} mWh")),
        ("Design Voltage", _opt(b.design_voltage, "{} mV")),
        ("SBDS Version", _text(b.sbds_version_number)),
        ("Maximum Error", _opt(b.maximum_error, "{}%")),
    ]
    if b.sbds_serial_number is not None and b.serial_number is None:
        info.append(("SBDS Serial Number", f"{b.sbds_serial_number:04X}"))
    if b.oem_specific is not None:
        info.append(("OEM-specific Information", f"0x{b.oem_specific:08X}"))
    return info


DESCRIBERS = {
    InfoType.BIOS: _describe_bios,
    InfoType.SYSTEM: _describe_system,
    InfoType.BASE_BOARD: _describe_baseboard,
    InfoType.ENCLOSURE: _describe_enclosure,
    InfoType.PROCESSOR: _describe_processor,
    InfoType.CACHE: _describe_cache,
    InfoType.PORT_CONNECTOR: _describe_port_connector,
    InfoType.SYSTEM_SLOTS: _describe_system_slots,
    InfoType.OEM_STRINGS: _describe_oem_strings,
    InfoType.SYSTEM_CONFIGURATION_OPTIONS: _describe_system_configuration_options,
    InfoType.BIOS_LANGUAGE: _describe_bios_language,
    InfoType.GROUP_ASSOCIATIONS: _describe_group_associations,
    InfoType.SYSTEM_EVENT_LOG: _describe_system_event_log,
    InfoType.PHYSICAL_MEMORY_ARRAY: _describe_physical_memory_array,
    InfoType.MEMORY_DEVICE: _describe_memory_device,
    InfoType.MEMORY_ERROR_32: _describe_memory_error_32,
    InfoType.MEMORY_ARRAY_MAPPED_ADDRESS: _describe_memory_array_mapped_address,
    InfoType.MEMORY_DEVICE_MAPPED_ADDRESS: _describe_memory_device_mapped_address,
    InfoType.BUILT_IN_POINTING_DEVICE: _describe_built_in_pointing_device,
    InfoType.PORTABLE_BATTERY: _describe_portable_battery,
}


def get_parsed_smbios_info(record, long_flags=False):
    """
    Decode a record into a list of (key, value) rows for display.
    Returns None if there is no parser for the record's type; a record
    that fails to decode gives a single "Parse Error" row.
    """
    describe = DESCRIBERS.get(record.info)
    if describe is None:
        return None
    try:
        return describe(decode_structure(record), long_flags)
    except SmbiosError as e:
        return [("Parse Error", str(e))]


def hex_rows(data, length=HEX_LINE_WIDTH):
    """(offset, hex, ascii) text for each line of a hex dump."""
    for i in range(0, len(data), length):
        chunk = bytes(data[i:i+length])
        hex_part = ' '.join(f"{b:02X}" for b in chunk)
        ascii_part = ''.join(chr(b) if 32 <= b < 127 else '.' for b in chunk)
        yield f"{i:04X}", hex_part, ascii_part


def hex_dump(data, length=HEX_LINE_WIDTH):
    """Generates a hex dump of data."""
    return "\n".join(f"{offset}  {hex_part:<{length*3}}  {ascii_part}"
                     for offset, hex_part, ascii_part in hex_rows(data, length))
