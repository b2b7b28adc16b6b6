"""
SMBIOS entry point ("anchor") structures.

The entry point announces where the structure table lives, how large it is
and which version of DSP0134 it follows. It sits on a 16-byte boundary and
is valid when its bytes sum to zero (mod 256).
"""

import logging
import struct
from collections import namedtuple

from smbios_errors import (AnchorNotFound, EntryChecksumInvalid, EntrySizeInvalid,
                           EntryVersionTooOld)
from structures import SmbiosVersion, Structures

log = logging.getLogger(__name__)

ANCHOR_STRIDE = 16

V2_SIGNATURE = b"_SM_"
V3_SIGNATURE = b"_SM3_"

# struct layouts; sizes are the minimum header sizes
V2_FORMAT = "<4sBBBBHB5s5sBHIHB"
V3_FORMAT = "<5sBBBBBBBIQ"
V2_SIZE = struct.calcsize(V2_FORMAT)    # 0x1F
V3_SIZE = struct.calcsize(V3_FORMAT)    # 0x18

LENGTH_OFFSET = 5


class _EntryPointMixin(object):
    __slots__ = ()

    @property
    def version(self):
        return SmbiosVersion(self.major, self.minor)

    def table_offset(self, base=0):
        """Table address relative to `base`, e.g. the physical address a buffer was captured from."""
        return self.table_address - base

    def structures(self, buffer):
        """Walk the structure table held in `buffer` (which starts at the table)."""
        return Structures(buffer, self.version, self.table_length, self.table_count)


class EntryPointV2(namedtuple('EntryPointV2', [
        'signature', 'checksum', 'length', 'major', 'minor',
        'max_structure_size', 'revision', 'formatted_area',
        'dmi_signature', 'dmi_checksum', 'smbios_len', 'smbios_address',
        'smbios_count', 'bcd_revision']), _EntryPointMixin):
    """32-bit entry point, signature "_SM_"."""
    __slots__ = ()

    @property
    def table_address(self):
        return self.smbios_address

    @property
    def table_length(self):
        return self.smbios_len

    @property
    def table_count(self):
        return self.smbios_count


class EntryPointV3(namedtuple('EntryPointV3', [
        'signature', 'checksum', 'length', 'major', 'minor', 'docrev',
        'revision', 'reserved', 'smbios_len_max', 'smbios_address']), _EntryPointMixin):
    """
    64-bit entry point, signature "_SM3_". There is no structure count;
    the table ends at the End-of-Table structure.
    """
    __slots__ = ()

    @property
    def table_address(self):
        return self.smbios_address

    @property
    def table_length(self):
        return self.smbios_len_max

    @property
    def table_count(self):
        return None


def find_anchor(buffer):
    """
    Return the offset of the first 16-byte aligned entry point signature,
    or None.
    """
    for offset in range(0, len(buffer), ANCHOR_STRIDE):
        chunk = bytes(buffer[offset:offset + len(V3_SIGNATURE)])
        if chunk.startswith(V2_SIGNATURE) or chunk.startswith(V3_SIGNATURE):
            return offset
    return None


def bytesum(data):
    return sum(data) & 0xff


def validate(buffer, offset=0):
    """
    Decode and check the entry point at `offset`.
    Raises EntrySizeInvalid, EntryChecksumInvalid or EntryVersionTooOld.
    """
    sub_buffer = memoryview(buffer)[offset:]
    if bytes(sub_buffer[:len(V3_SIGNATURE)]) == V3_SIGNATURE:
        fmt, size, cls = V3_FORMAT, V3_SIZE, EntryPointV3
    else:
        fmt, size, cls = V2_FORMAT, V2_SIZE, EntryPointV2

    if len(sub_buffer) < size:
        raise EntrySizeInvalid(len(sub_buffer))
    entry = cls._make(struct.unpack_from(fmt, sub_buffer))
    if entry.length < size:
        raise EntrySizeInvalid(entry.length)
    if len(sub_buffer) < entry.length:
        raise EntrySizeInvalid(len(sub_buffer))

    checksum = bytesum(sub_buffer[:entry.length])
    if checksum != 0:
        raise EntryChecksumInvalid(checksum)

    if entry.major < 2:
        raise EntryVersionTooOld(entry.major)

    log.debug("SMBIOS %u.%u entry point at offset 0x%X: table 0x%X, %u bytes",
              entry.major, entry.minor, offset, entry.table_address, entry.table_length)
    return entry


def search(buffer):
    """Find and validate the entry point in `buffer`."""
    offset = find_anchor(buffer)
    if offset is None:
        raise AnchorNotFound()
    return validate(buffer, offset)
