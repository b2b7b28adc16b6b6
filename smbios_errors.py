"""
Exceptions raised while locating and walking SMBIOS tables.

Everything derives from SmbiosError, which is a ValueError: malformed
firmware data is bad input, not a programming error.
"""


class SmbiosError(ValueError):
    pass


# --- Entry point ---

class InvalidEntryPointError(SmbiosError):
    pass


class AnchorNotFound(InvalidEntryPointError):
    def __init__(self):
        super().__init__("Input did not contain a valid SMBIOS entry point")


class EntrySizeInvalid(InvalidEntryPointError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"Input contained an invalid-sized SMBIOS entry: {size}")


class EntryChecksumInvalid(InvalidEntryPointError):
    def __init__(self, checksum):
        self.checksum = checksum
        super().__init__(f"SMBIOS entry point has an invalid checksum: {checksum}")


class EntryVersionTooOld(InvalidEntryPointError):
    def __init__(self, major):
        self.major = major
        super().__init__(f"Input version number was below 2.0: {major}")


class TableAddressInvalid(InvalidEntryPointError):
    def __init__(self, address, available):
        self.address = address
        self.available = available
        super().__init__(
            f"Structure table address 0x{address:X} is outside the {available} byte buffer")


# --- Structures ---

class MalformedStructureError(SmbiosError):
    pass


class RecordSizeInvalid(MalformedStructureError):
    def __init__(self, offset, length):
        self.offset = offset
        self.length = length
        super().__init__(
            f"Structure at offset {offset} with length {length} extends beyond SMBIOS")


class RecordStringsUnterminated(MalformedStructureError):
    def __init__(self, offset):
        self.offset = offset
        super().__init__(f"Structure at offset {offset} with unterminated strings")


class StringIndexInvalid(MalformedStructureError):
    def __init__(self, info, handle, index):
        self.info = info
        self.handle = handle
        self.index = index
        super().__init__(
            f"Structure {info} with handle 0x{handle:04X} has invalid string index {index}")


class FormattedSectionLengthInvalid(MalformedStructureError):
    def __init__(self, info, handle, expected_length):
        self.info = info
        self.handle = handle
        self.expected_length = expected_length
        super().__init__(
            f"Structure {info} with handle 0x{handle:04X} has a formatted section "
            f"shorter than {expected_length} bytes")


class SliceConversionFailed(MalformedStructureError):
    def __init__(self, offset, width):
        self.offset = offset
        self.width = width
        super().__init__(f"Cannot read {width} bytes at formatted offset {offset}")


class RecordTypeMismatch(MalformedStructureError):
    def __init__(self, expected, actual, handle):
        self.expected = expected
        self.actual = actual
        self.handle = handle
        super().__init__(
            f"Structure with handle 0x{handle:04X} is {actual}, expected {expected}")
