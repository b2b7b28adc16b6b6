"""
Names for enumerated byte fields, as listed in DSP0134.
Values missing from a table print as "Undefined: N".
"""


def lookup(table, value):
    return table.get(value, f"Undefined: {value}")


def lookup_oem(table, value, oem_from=0x80):
    """Like lookup(), with values from `oem_from` up named "OEM-specific"."""
    if value not in table and value >= oem_from:
        return "OEM-specific"
    return lookup(table, value)


WAKE_UP_TYPES = {
    0x00: "Reserved",
    0x01: "Other",
    0x02: "Unknown",
    0x03: "APM Timer",
    0x04: "Modem Ring",
    0x05: "LAN Remote",
    0x06: "Power Switch",
    0x07: "PCI PME#",
    0x08: "AC Power Restored",
}

BOARD_TYPES = {
    0x01: "Unknown",
    0x02: "Other",
    0x03: "Server Blade",
    0x04: "Connectivity Switch",
    0x05: "System Management Module",
    0x06: "Processor Module",
    0x07: "I/O Module",
    0x08: "Memory Module",
    0x09: "Daughter board",
    0x0A: "Motherboard (includes processor, memory, and I/O)",
    0x0B: "Processor/Memory Module",
    0x0C: "Processor/IO Module",
    0x0D: "Interconnect board",
}

CHASSIS_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Desktop",
    0x04: "Low Profile Desktop",
    0x05: "Pizza Box",
    0x06: "Mini Tower",
    0x07: "Tower",
    0x08: "Portable",
    0x09: "Laptop",
    0x0A: "Notebook",
    0x0B: "Hand Held",
    0x0C: "Docking Station",
    0x0D: "All in One",
    0x0E: "Sub Notebook",
    0x0F: "Space-saving",
    0x10: "Lunch Box",
    0x11: "Main Server Chassis",
    0x12: "Expansion Chassis",
    0x13: "SubChassis",
    0x14: "Bus Expansion Chassis",
    0x15: "Peripheral Chassis",
    0x16: "RAID Chassis",
    0x17: "Rack Mount Chassis",
    0x18: "Sealed-case PC",
    0x19: "Multi-system chassis",
    0x1A: "Compact PCI",
    0x1B: "Advanced TCA",
    0x1C: "Blade",
    0x1D: "Blade Enclosure",
    0x1E: "Tablet",
    0x1F: "Convertible",
    0x20: "Detachable",
    0x21: "IoT Gateway",
    0x22: "Embedded PC",
    0x23: "Mini PC",
    0x24: "Stick PC",
}

CHASSIS_STATES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Safe",
    0x04: "Warning",
    0x05: "Critical",
    0x06: "Non-recoverable",
}

CHASSIS_SECURITY_STATUS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "None",
    0x04: "External interface locked out",
    0x05: "External interface enabled",
}

PROCESSOR_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Central Processor",
    0x04: "Math Processor",
    0x05: "DSP Processor",
    0x06: "Video Processor",
}

# Only the families commonly found in current tables; see DSP0134 7.5.2
PROCESSOR_FAMILIES = {
    0x01: "Other",
    0x02: "Unknown",
    0x0B: "Pentium",
    0x0E: "Pentium MMX",
    0x0F: "Celeron",
    0x18: "Duron",
    0x19: "K5",
    0x1A: "K6",
    0x1D: "Athlon",
    0x28: "Core Duo",
    0x2B: "Atom",
    0x2C: "Core M",
    0x38: "Turion",
    0x3F: "Athlon X4",
    0x40: "Opteron X1000",
    0x41: "Opteron X2000",
    0x42: "Opteron A-Series",
    0x46: "Ryzen 7",
    0x47: "Ryzen 5",
    0x48: "Ryzen 3",
    0x6B: "Zen",
    0x83: "Athlon 64",
    0x84: "Opteron",
    0x8A: "Opteron",
    0xB3: "Xeon",
    0xB5: "Pentium 4",
    0xBF: "Core 2 Duo",
    0xC0: "Core 2 Solo",
    0xC1: "Core 2 Extreme",
    0xC2: "Core 2 Quad",
    0xC3: "Core 2 Extreme Mobile",
    0xC4: "Core 2 Duo Mobile",
    0xC5: "Core 2 Solo Mobile",
    0xC6: "Core i7",
    0xC7: "Dual-Core Celeron",
    0xCD: "Core i5",
    0xCE: "Core i3",
    0xCF: "Core i9",
    0xFE: "Processor Family 2",
    0x100: "ARMv7",
    0x101: "ARMv8",
    0x102: "ARMv9",
    0x118: "ARM",
    0x119: "StrongARM",
    0x200: "RISC-V RV32",
    0x201: "RISC-V RV64",
    0x202: "RISC-V RV128",
}

PROCESSOR_STATUS = {
    0x00: "Unknown",
    0x01: "Enabled",
    0x02: "Disabled By User",
    0x03: "Disabled By BIOS",
    0x04: "Idle",
    0x07: "Other",
}

PROCESSOR_UPGRADES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Daughter Board",
    0x04: "ZIF Socket",
    0x05: "Replaceable Piggy Back",
    0x06: "None",
    0x07: "LIF Socket",
    0x08: "Slot 1",
    0x09: "Slot 2",
    0x0A: "370-pin Socket",
    0x0B: "Slot A",
    0x0C: "Slot M",
    0x0D: "Socket 423",
    0x0E: "Socket A (Socket 462)",
    0x0F: "Socket 478",
    0x10: "Socket 754",
    0x11: "Socket 940",
    0x12: "Socket 939",
    0x13: "Socket mPGA604",
    0x14: "Socket LGA771",
    0x15: "Socket LGA775",
    0x16: "Socket S1",
    0x17: "Socket AM2",
    0x18: "Socket F (1207)",
    0x19: "Socket LGA1366",
    0x1A: "Socket G34",
    0x1B: "Socket AM3",
    0x1C: "Socket C32",
    0x1D: "Socket LGA1156",
    0x1E: "Socket LGA1567",
    0x1F: "Socket PGA988A",
    0x20: "Socket BGA1288",
    0x21: "Socket rPGA988B",
    0x22: "Socket BGA1023",
    0x23: "Socket BGA1224",
    0x24: "Socket LGA1155",
    0x25: "Socket LGA1356",
    0x26: "Socket LGA2011",
    0x27: "Socket FS1",
    0x28: "Socket FS2",
    0x29: "Socket FM1",
    0x2A: "Socket FM2",
    0x2B: "Socket LGA2011-3",
    0x2C: "Socket LGA1356-3",
    0x2D: "Socket LGA1150",
    0x2E: "Socket BGA1168",
    0x2F: "Socket BGA1234",
    0x30: "Socket BGA1364",
    0x31: "Socket AM4",
    0x32: "Socket LGA1151",
    0x33: "Socket BGA1356",
    0x34: "Socket BGA1440",
    0x35: "Socket BGA1515",
    0x36: "Socket LGA3647-1",
    0x37: "Socket SP3",
    0x38: "Socket SP3r2",
    0x39: "Socket LGA2066",
    0x3A: "Socket BGA1392",
    0x3B: "Socket BGA1510",
    0x3C: "Socket BGA1528",
    0x3D: "Socket LGA4189",
    0x3E: "Socket LGA1200",
    0x3F: "Socket LGA4677",
    0x40: "Socket LGA1700",
    0x41: "Socket BGA1744",
    0x42: "Socket BGA1781",
    0x43: "Socket BGA1211",
    0x44: "Socket BGA2422",
    0x45: "Socket LGA1211",
    0x46: "Socket LGA2422",
    0x47: "Socket LGA5773",
    0x48: "Socket BGA5773",
}

CACHE_OPERATIONAL_MODES = {
    0b00: "Write Through",
    0b01: "Write Back",
    0b10: "Varies With Memory Address",
    0b11: "Unknown",
}

CACHE_LOCATIONS = {
    0b00: "Internal",
    0b01: "External",
    0b10: "Reserved",
    0b11: "Unknown",
}

CACHE_ERROR_CORRECTION = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "None",
    0x04: "Parity",
    0x05: "Single-bit ECC",
    0x06: "Multi-bit ECC",
}

CACHE_SYSTEM_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Instruction",
    0x04: "Data",
    0x05: "Unified",
}

CACHE_ASSOCIATIVITY = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Direct Mapped",
    0x04: "2-way Set-associative",
    0x05: "4-way Set-associative",
    0x06: "Fully Associative",
    0x07: "8-way Set-associative",
    0x08: "16-way Set-associative",
    0x09: "12-way Set-associative",
    0x0A: "24-way Set-associative",
    0x0B: "32-way Set-associative",
    0x0C: "48-way Set-associative",
    0x0D: "64-way Set-associative",
    0x0E: "20-way Set-associative",
}

CONNECTOR_TYPES = {
    0x00: "None",
    0x01: "Centronics",
    0x02: "Mini Centronics",
    0x03: "Proprietary",
    0x04: "DB-25 male",
    0x05: "DB-25 female",
    0x06: "DB-15 male",
    0x07: "DB-15 female",
    0x08: "DB-9 male",
    0x09: "DB-9 female",
    0x0A: "RJ-11",
    0x0B: "RJ-45",
    0x0C: "50 Pin MiniSCSI",
    0x0D: "Mini DIN",
    0x0E: "Micro DIN",
    0x0F: "PS/2",
    0x10: "Infrared",
    0x11: "HP-HIL",
    0x12: "Access Bus (USB)",
    0x13: "SSA SCSI",
    0x14: "Circular DIN-8 male",
    0x15: "Circular DIN-8 female",
    0x16: "On Board IDE",
    0x17: "On Board Floppy",
    0x18: "9 Pin Dual Inline (pin 10 cut)",
    0x19: "25 Pin Dual Inline (pin 26 cut)",
    0x1A: "50 Pin Dual Inline",
    0x1B: "68 Pin Dual Inline",
    0x1C: "On Board Sound Input From CD-ROM",
    0x1D: "Mini Centronics Type-14",
    0x1E: "Mini Centronics Type-26",
    0x1F: "Mini Jack (headphones)",
    0x20: "BNC",
    0x21: "IEEE 1394",
    0x22: "SAS/SATA Plug Receptacle",
    0x23: "USB Type-C Receptacle",
    0xA0: "PC-98",
    0xA1: "PC-98 Hireso",
    0xA2: "PC-H98",
    0xA3: "PC-98 Note",
    0xA4: "PC-98 Full",
    0xFF: "Other",
}

PORT_TYPES = {
    0x00: "None",
    0x01: "Parallel Port XT/AT Compatible",
    0x02: "Parallel Port PS/2",
    0x03: "Parallel Port ECP",
    0x04: "Parallel Port EPP",
    0x05: "Parallel Port ECP/EPP",
    0x06: "Serial Port XT/AT Compatible",
    0x07: "Serial Port 16450 Compatible",
    0x08: "Serial Port 16550 Compatible",
    0x09: "Serial Port 16550A Compatible",
    0x0A: "SCSI Port",
    0x0B: "MIDI Port",
    0x0C: "Joystick Port",
    0x0D: "Keyboard Port",
    0x0E: "Mouse Port",
    0x0F: "SSA SCSI",
    0x10: "USB",
    0x11: "Firewire (IEEE P1394)",
    0x12: "PCMCIA Type I",
    0x13: "PCMCIA Type II",
    0x14: "PCMCIA Type III",
    0x15: "Cardbus",
    0x16: "Access Bus Port",
    0x17: "SCSI II",
    0x18: "SCSI Wide",
    0x19: "PC-98",
    0x1A: "PC-98 Hireso",
    0x1B: "PC-H98",
    0x1C: "Video Port",
    0x1D: "Audio Port",
    0x1E: "Modem Port",
    0x1F: "Network Port",
    0x20: "SATA",
    0x21: "SAS",
    0x22: "MFDP (Multi-Function Display Port)",
    0x23: "Thunderbolt",
    0xA0: "8251 Compatible",
    0xA1: "8251 FIFO Compatible",
    0xFF: "Other",
}

SLOT_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "ISA",
    0x04: "MCA",
    0x05: "EISA",
    0x06: "PCI",
    0x07: "PC Card (PCMCIA)",
    0x08: "VL-VESA",
    0x09: "Proprietary",
    0x0A: "Processor Card Slot",
    0x0B: "Proprietary Memory Card Slot",
    0x0C: "I/O Riser Card Slot",
    0x0D: "NuBus",
    0x0E: "PCI - 66MHz Capable",
    0x0F: "AGP",
    0x10: "AGP 2X",
    0x11: "AGP 4X",
    0x12: "PCI-X",
    0x13: "AGP 8X",
    0x14: "M.2 Socket 1-DP (Mechanical Key A)",
    0x15: "M.2 Socket 1-SD (Mechanical Key E)",
    0x16: "M.2 Socket 2 (Mechanical Key B)",
    0x17: "M.2 Socket 3 (Mechanical Key M)",
    0x18: "MXM Type I",
    0x19: "MXM Type II",
    0x1A: "MXM Type III (standard connector)",
    0x1B: "MXM Type III (HE connector)",
    0x1C: "MXM Type IV",
    0x1D: "MXM 3.0 Type A",
    0x1E: "MXM 3.0 Type B",
    0x1F: "PCI Express Gen 2 SFF-8639 (U.2)",
    0x20: "PCI Express Gen 3 SFF-8639 (U.2)",
    0x21: "PCI Express Mini 52-pin with bottom-side keep-outs",
    0x22: "PCI Express Mini 52-pin without bottom-side keep-outs",
    0x23: "PCI Express Mini 76-pin",
    0x24: "PCI Express Gen 4 SFF-8639 (U.2)",
    0x25: "PCI Express Gen 5 SFF-8639 (U.2)",
    0x26: "OCP NIC 3.0 Small Form Factor (SFF)",
    0x27: "OCP NIC 3.0 Large Form Factor (LFF)",
    0x28: "OCP NIC Prior to 3.0",
    0x30: "CXL Flexbus 1.0",
    0xA0: "PC-98/C20",
    0xA1: "PC-98/C24",
    0xA2: "PC-98/E",
    0xA3: "PC-98/Local Bus",
    0xA4: "PC-98/Card",
    0xA5: "PCI Express",
    0xA6: "PCI Express x1",
    0xA7: "PCI Express x2",
    0xA8: "PCI Express x4",
    0xA9: "PCI Express x8",
    0xAA: "PCI Express x16",
    0xAB: "PCI Express 2",
    0xAC: "PCI Express 2 x1",
    0xAD: "PCI Express 2 x2",
    0xAE: "PCI Express 2 x4",
    0xAF: "PCI Express 2 x8",
    0xB0: "PCI Express 2 x16",
    0xB1: "PCI Express 3",
    0xB2: "PCI Express 3 x1",
    0xB3: "PCI Express 3 x2",
    0xB4: "PCI Express 3 x4",
    0xB5: "PCI Express 3 x8",
    0xB6: "PCI Express 3 x16",
    0xB8: "PCI Express 4",
    0xB9: "PCI Express 4 x1",
    0xBA: "PCI Express 4 x2",
    0xBB: "PCI Express 4 x4",
    0xBC: "PCI Express 4 x8",
    0xBD: "PCI Express 4 x16",
    0xBE: "PCI Express 5",
    0xBF: "PCI Express 5 x1",
    0xC0: "PCI Express 5 x2",
    0xC1: "PCI Express 5 x4",
    0xC2: "PCI Express 5 x8",
    0xC3: "PCI Express 5 x16",
    0xC4: "PCI Express 6+",
    0xC5: "EDSFF E1",
    0xC6: "EDSFF E3",
}

SLOT_WIDTHS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "8-bit",
    0x04: "16-bit",
    0x05: "32-bit",
    0x06: "64-bit",
    0x07: "128-bit",
    0x08: "x1",
    0x09: "x2",
    0x0A: "x4",
    0x0B: "x8",
    0x0C: "x12",
    0x0D: "x16",
    0x0E: "x32",
}

SLOT_USAGES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Available",
    0x04: "In Use",
    0x05: "Unavailable",
}

SLOT_LENGTHS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Short",
    0x04: "Long",
    0x05: "2.5\" drive form factor",
    0x06: "3.5\" drive form factor",
}

EVENT_LOG_ACCESS_METHODS = {
    0x00: "Indexed I/O, one 8-bit index port, one 8-bit data port",
    0x01: "Indexed I/O, two 8-bit index ports, one 8-bit data port",
    0x02: "Indexed I/O, one 16-bit index port, one 8-bit data port",
    0x03: "Memory-mapped physical 32-bit address",
    0x04: "General-purpose non-volatile data functions",
}

EVENT_LOG_HEADER_FORMATS = {
    0x00: "No Header",
    0x01: "Type 1",
}

EVENT_LOG_TYPES = {
    0x00: "Reserved",
    0x01: "Single-bit ECC memory error",
    0x02: "Multi-bit ECC memory error",
    0x03: "Parity memory error",
    0x04: "Bus timeout",
    0x05: "I/O channel block",
    0x06: "Software NMI",
    0x07: "POST memory resize",
    0x08: "POST error",
    0x09: "PCI parity error",
    0x0A: "PCI system error",
    0x0B: "CPU failure",
    0x0C: "EISA failsafe timer timeout",
    0x0D: "Correctable memory log disabled",
    0x0E: "Logging disabled",
    0x0F: "Reserved",
    0x10: "System limit exceeded",
    0x11: "Asynchronous hardware timer expired",
    0x12: "System configuration information",
    0x13: "Hard disk information",
    0x14: "System reconfigured",
    0x15: "Uncorrectable CPU-complex error",
    0x16: "Log area reset/cleared",
    0x17: "System boot",
    0xFF: "End of log",
}

EVENT_LOG_DATA_FORMATS = {
    0x00: "None",
    0x01: "Handle",
    0x02: "Multiple-event",
    0x03: "Multiple-event handle",
    0x04: "POST results bitmap",
    0x05: "System management",
    0x06: "Multiple-event system management",
}

MEMORY_ARRAY_LOCATIONS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "System Board Or Motherboard",
    0x04: "ISA Add-on Card",
    0x05: "EISA Add-on Card",
    0x06: "PCI Add-on Card",
    0x07: "MCA Add-on Card",
    0x08: "PCMCIA Add-on Card",
    0x09: "Proprietary Add-on Card",
    0x0A: "NuBus",
    0xA0: "PC-98/C20 Add-on Card",
    0xA1: "PC-98/C24 Add-on Card",
    0xA2: "PC-98/E Add-on Card",
    0xA3: "PC-98/Local Bus Add-on Card",
    0xA4: "CXL Add-on Card",
}

MEMORY_ARRAY_USES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "System Memory",
    0x04: "Video Memory",
    0x05: "Flash Memory",
    0x06: "Non-volatile RAM",
    0x07: "Cache Memory",
}

MEMORY_ARRAY_ERROR_CORRECTION = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "None",
    0x04: "Parity",
    0x05: "Single-bit ECC",
    0x06: "Multi-bit ECC",
    0x07: "CRC",
}

MEMORY_FORM_FACTORS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "SIMM",
    0x04: "SIP",
    0x05: "Chip",
    0x06: "DIP",
    0x07: "ZIP",
    0x08: "Proprietary Card",
    0x09: "DIMM",
    0x0A: "TSOP",
    0x0B: "Row of chips",
    0x0C: "RIMM",
    0x0D: "SODIMM",
    0x0E: "SRIMM",
    0x0F: "FB-DIMM",
    0x10: "Die",
    0x11: "CAMM",
}

MEMORY_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "DRAM",
    0x04: "EDRAM",
    0x05: "VRAM",
    0x06: "SRAM",
    0x07: "RAM",
    0x08: "ROM",
    0x09: "Flash",
    0x0A: "EEPROM",
    0x0B: "FEPROM",
    0x0C: "EPROM",
    0x0D: "CDRAM",
    0x0E: "3DRAM",
    0x0F: "SDRAM",
    0x10: "SGRAM",
    0x11: "RDRAM",
    0x12: "DDR",
    0x13: "DDR2",
    0x14: "DDR2 FB-DIMM",
    0x18: "DDR3",
    0x19: "FBD2",
    0x1A: "DDR4",
    0x1B: "LPDDR",
    0x1C: "LPDDR2",
    0x1D: "LPDDR3",
    0x1E: "LPDDR4",
    0x1F: "Logical non-volatile device",
    0x20: "HBM",
    0x21: "HBM2",
    0x22: "DDR5",
    0x23: "LPDDR5",
    0x24: "HBM3",
}

MEMORY_ERROR_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "OK",
    0x04: "Bad Read",
    0x05: "Parity Error",
    0x06: "Single-bit Error",
    0x07: "Double-bit Error",
    0x08: "Multi-bit Error",
    0x09: "Nibble Error",
    0x0A: "Checksum Error",
    0x0B: "CRC Error",
    0x0C: "Corrected Single-bit Error",
    0x0D: "Corrected Error",
    0x0E: "Uncorrectable Error",
}

MEMORY_ERROR_GRANULARITIES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Device Level",
    0x04: "Memory Partition Level",
}

MEMORY_ERROR_OPERATIONS = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Read",
    0x04: "Write",
    0x05: "Partial Write",
}

POINTING_DEVICE_TYPES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Mouse",
    0x04: "Track Ball",
    0x05: "Track Point",
    0x06: "Glide Point",
    0x07: "Touch Pad",
    0x08: "Touch Screen",
    0x09: "Optical Sensor",
}

POINTING_DEVICE_INTERFACES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Serial",
    0x04: "PS/2",
    0x05: "Infrared",
    0x06: "HP-HIL",
    0x07: "Bus Mouse",
    0x08: "ADB (Apple Desktop Bus)",
    0xA0: "Bus Mouse DB-9",
    0xA1: "Bus Mouse Micro DIN",
    0xA2: "USB",
}

BATTERY_CHEMISTRIES = {
    0x01: "Other",
    0x02: "Unknown",
    0x03: "Lead Acid",
    0x04: "Nickel Cadmium",
    0x05: "Nickel metal hydride",
    0x06: "Lithium-ion",
    0x07: "Zinc air",
    0x08: "Lithium Polymer",
}
