"""
Flag layouts for the packed bit fields of the decoded structure types.
"""

from bitfield import BitField, layout


class BiosCharacteristics(BitField):
    LAYOUT = layout(
        64,
        ("Reserved", 2),
        "Unknown",
        ("BIOS characteristics not supported",
         "BIOS Characteristics are not supported"),
        "ISA is supported",
        "MCA is supported",
        "EISA is supported",
        "PCI is supported",
        "PC card (PCMCIA) is supported",
        ("PNP is supported", "Plug and Play is supported"),
        "APM is supported",
        ("BIOS is upgradeable", "BIOS is upgradeable (Flash)"),
        "BIOS shadowing is allowed",
        ("VLB is supported", "VL-VESA is supported"),
        "ESCD support is available",
        "Boot from CD is supported",
        "Selectable boot is supported",
        ("BIOS ROM is socketed", "BIOS ROM is socketed (e.g. PLCC or SOP socket)"),
        "Boot from PC card (PCMCIA) is supported",
        ("EDD is supported", "EDD specification is supported"),
        ("Japanese floppy for NEC 9800 1.2 MB is supported (int 13h)",
         "Int 13h, Japanese floppy for NEC 9800 1.2 MB (3.5\", 1K bytes/sector, 360 RPM) is supported"),
        ("Japanese floppy for Toshiba 1.2 MB is supported (int 13h)",
         "Int 13h, Japanese floppy for Toshiba 1.2 MB (3.5\", 360 RPM) is supported"),
        ("5.25\"/360 kB floppy services are supported (int 13h)",
         "Int 13h, 5.25\" / 360 KB floppy services are supported"),
        ("5.25\"/1.2 MB floppy services are supported (int 13h)",
         "Int 13h, 5.25\" / 1.2 MB floppy services are supported"),
        ("3.5\"/720 kB floppy services are supported (int 13h)",
         "Int 13h, 3.5\" / 720 KB floppy services are supported"),
        ("3.5\"/2.88 MB floppy services are supported (int 13h)",
         "Int 13h, 3.5\" / 2.88 MB floppy services are supported"),
        ("Print screen service is supported (int 5h)",
         "Int 5h, print screen Service is supported"),
        ("8042 keyboard services are supported (int 9h)",
         "Int 9h, 8042 keyboard services are supported"),
        ("Serial services are supported (int 14h)",
         "Int 14h, serial services are supported"),
        ("Printer services are supported (int 17h)",
         "Int 17h, printer services are supported"),
        ("CGA/mono video services are supported (int 10h)",
         "Int 10h, CGA/Mono Video Services are supported"),
        "NEC PC-98",
        ("Reserved for BIOS vendor", 16),
        ("Reserved for system vendor", 16),
    )


class BiosCharacteristicsExtension1(BitField):
    LAYOUT = layout(
        8,
        "ACPI is supported",
        ("USB legacy is supported", "USB Legacy is supported"),
        "AGP is supported",
        "I2O boot is supported",
        "LS-120 SuperDisk boot is supported",
        "ATAPI ZIP drive boot is supported",
        ("IEEE 1394 boot is supported", "1394 boot is supported"),
        "Smart battery is supported",
    )


class BiosCharacteristicsExtension2(BitField):
    LAYOUT = layout(
        8,
        ("BIOS boot specification is supported",
         "BIOS Boot specification is supported"),
        ("Function key-initiated network boot is supported",
         "Function key-initiated network service boot is supported"),
        ("Targeted content distribution is supported",
         "Enable targeted content distribution. The manufacturer has ensured that the SMBIOS "
         "data is useful in identifying the computer for targeted delivery of model-specific "
         "software and firmware content through third-party content distribution services"),
        "UEFI is supported",
        ("System is a virtual machine",
         "SMBIOS table describes a virtual machine. (If this bit is not set, no inference "
         "can be made about the virtuality of the system.)"),
        ("Manufacturing mode is supported",
         "Manufacturing mode is supported. (Manufacturing mode is a special boot mode, not "
         "normally available to end users, that modifies BIOS features and settings for use "
         "while the computer is being manufactured and tested.)"),
        "Manufacturing mode is enabled",
        ("Reserved for future assignment", 1),
    )


class BaseBoardFeatures(BitField):
    LAYOUT = layout(
        8,
        ("Board is a hosting board",
         "The board is a hosting board (for example, a motherboard)"),
        ("Board requires at least one daughter board",
         "The board requires at least one daughter board or auxiliary card to function properly"),
        ("Board is removable",
         "The board is removable; it is designed to be taken in and out of the chassis "
         "without impairing the function of the chassis"),
        ("Board is replaceable",
         "The board is replaceable; it is possible to replace (either as a field repair or "
         "as an upgrade) the board with a physically different board"),
        ("Board is hot swappable",
         "The board is hot swappable; it is possible to replace the board with a physically "
         "different but equivalent board while power is applied to the board"),
        ("Reserved", 3),
    )


class ProcessorCharacteristics(BitField):
    LAYOUT = layout(
        16,
        ("Reserved", 1),
        "Unknown",
        "64-bit capable",
        "Multi-Core",
        ("Hardware Thread", "Hardware Thread (multiple threads per core)"),
        ("Execute Protection", "Execute Protection (NX / XD)"),
        "Enhanced Virtualization",
        "Power/Performance Control",
        "128-bit Capable",
        ("Arm64 SoC ID", "Arm64 SoC ID (SMCCC_ARCH_SOC_ID is supported)"),
        ("Reserved", 6),
    )


class CacheSramType(BitField):
    LAYOUT = layout(
        16,
        "Other",
        "Unknown",
        "Non-burst",
        "Burst",
        "Pipeline Burst",
        "Synchronous",
        "Asynchronous",
        ("Reserved", 9),
    )


class SlotCharacteristics1(BitField):
    LAYOUT = layout(
        8,
        "Characteristics unknown",
        ("5.0 V is provided", "Provides 5.0 volts"),
        ("3.3 V is provided", "Provides 3.3 volts"),
        ("Opening is shared",
         "Slot's opening is shared with another slot (for example, PCI/EISA shared slot)"),
        ("PC Card-16 is supported", "PC Card slot supports PC Card-16"),
        ("Cardbus is supported", "PC Card slot supports CardBus"),
        ("Zoom Video is supported", "PC Card slot supports Zoom Video"),
        ("Modem ring resume is supported", "PC Card slot supports Modem Ring Resume"),
    )


class SlotCharacteristics2(BitField):
    LAYOUT = layout(
        8,
        ("PME signal is supported",
         "PCI slot supports Power Management Event (PME#) signal"),
        ("Hot-plug devices are supported", "Slot supports hot-plug devices"),
        ("SMBus signal is supported", "PCI slot supports SMBus signal"),
        ("PCIe slot bifurcation is supported",
         "PCIe slot supports bifurcation. This slot can partition its lanes into two or "
         "more PCIe devices plugged into the slot"),
        ("Async/surprise removal is supported",
         "Slot supports async/surprise removal (i.e., removal without prior notification "
         "to the operating system, device driver, or applications)"),
        "Flexbus slot, CXL 1.0 capable",
        "Flexbus slot, CXL 2.0 capable",
        "Flexbus slot, CXL 3.0 capable",
    )


class BiosLanguageFlags(BitField):
    LAYOUT = layout(
        8,
        ("Abbreviated format",
         "Current language strings use the abbreviated format: a two-character ISO 639-1 "
         "language name directly followed by a two-character ISO 3166-1-alpha-2 territory name"),
        ("Reserved", 7),
    )


class EventLogStatus(BitField):
    LAYOUT = layout(
        8,
        ("Valid", "Log area valid"),
        ("Full", "Log area full"),
        ("Reserved", 6),
    )


class MemoryTypeDetail(BitField):
    LAYOUT = layout(
        16,
        ("Reserved", 1),
        "Other",
        "Unknown",
        "Fast-paged",
        "Static Column",
        "Pseudo-static",
        "RAMBus",
        "Synchronous",
        "CMOS",
        "EDO",
        "Window DRAM",
        "Cache DRAM",
        "Non-Volatile",
        ("Registered (Buffered)", "Registered (Buffered)"),
        ("Unbuffered (Unregistered)", "Unbuffered (Unregistered)"),
        "LRDIMM",
    )
