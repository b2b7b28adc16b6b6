"""
Bit Field values in SMBIOS structures.

Many SMBIOS fields are packed flag words where every bit has a documented
meaning, is reserved for some party, or is simply not described. A Layout
records that classification once per field kind; BitField subclasses pair a
value with its Layout and can then list the set flags or the reserved ranges.

Short descriptions follow dmidecode wording, long descriptions follow the
SMBIOS Reference Specification (DSP0134).
"""

from collections import namedtuple


class FlagType(object):
    """Classification of a single bit position."""
    __slots__ = ()
    is_reserved = False
    is_significant = False

    def _key(self):
        return ()

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())


class Unknown(FlagType):
    __slots__ = ()

    def __repr__(self):
        return "Unknown()"


class Significant(FlagType):
    __slots__ = ("meaning", "description")
    is_significant = True

    def __init__(self, meaning, description=None):
        self.meaning = meaning
        self.description = meaning if description is None else description

    def _key(self):
        return (self.meaning, self.description)

    def __repr__(self):
        return f"Significant({self.meaning!r}, {self.description!r})"


class Reserved(FlagType):
    __slots__ = ("description",)
    is_reserved = True

    def __init__(self, description):
        self.description = description

    def _key(self):
        return (self.description,)

    def __repr__(self):
        return f"Reserved({self.description!r})"


UNKNOWN = Unknown()


def layout(length, *entries):
    """
    Build a layout tuple of `length` classifications.

    Entries are consumed from bit 0 upwards:
      "Text"                 significant bit, same short and long text
      ("Short", "Long")      significant bit with separate long text
      ("Reserved", count)    `count` consecutive reserved bits
    Positions not covered by an entry stay Unknown.
    """
    table = [UNKNOWN] * length
    index = 0
    for entry in entries:
        if isinstance(entry, str):
            kinds = [Significant(entry)]
        elif isinstance(entry[1], int):
            kinds = [Reserved(entry[0])] * entry[1]
        else:
            kinds = [Significant(entry[0], entry[1])]
        if index + len(kinds) > length:
            raise ValueError(f"layout entries overflow {length} bits at {entry!r}")
        table[index:index + len(kinds)] = kinds
        index += len(kinds)
    return tuple(table)


class Flag(namedtuple('Flag', ['position', 'is_set', 'type'])):
    """
    One bit of a value. str() gives the short form, format(flag, "#")
    the long form.
    """
    __slots__ = ()

    def __str__(self):
        return self.describe()

    def __format__(self, spec):
        if spec == "#":
            return self.describe(long=True)
        return format(self.describe(), spec)

    def describe(self, long=False):
        if self.type.is_significant:
            return self.type.description if long else self.type.meaning
        if self.type.is_reserved:
            return self.type.description
        return "Unknown"


class ReservedRange(namedtuple('ReservedRange', ['description', 'start', 'end'])):
    """Inclusive range of reserved bits sharing one description."""
    __slots__ = ()

    @property
    def range(self):
        return range(self.start, self.end + 1)

    def __str__(self):
        if self.start == self.end:
            return f"{self.description} (bit {self.start})"
        return f"{self.description} (bits {self.start}-{self.end})"


def iter_flags(value, table):
    for position, kind in enumerate(table):
        yield Flag(position, bool(value & (1 << position)), kind)


def significant_flags(flags):
    for flag in flags:
        if flag.is_set and not flag.type.is_reserved:
            yield flag


def fold_reserved(flags):
    """
    Group consecutive reserved positions with identical descriptions into
    ReservedRange values, whether or not the bits are set.
    """
    description = None
    start = last = 0
    for flag in flags:
        if flag.type.is_reserved:
            if flag.type.description != description:
                if description is not None:
                    yield ReservedRange(description, start, last)
                description = flag.type.description
                start = flag.position
        elif description is not None:
            yield ReservedRange(description, start, last)
            description = None
        last = flag.position
    if description is not None:
        yield ReservedRange(description, start, last)


def bits_from_positions(positions, width=None):
    value = 0
    for position in positions:
        if width is not None and position >= width:
            raise OverflowError(f"bit position {position} does not fit in {width} bits")
        value |= 1 << position
    return value


class BitField(object):
    """
    A packed flag word. Subclasses set LAYOUT; its length is the bit width
    of the value.
    """
    LAYOUT = ()

    def __init__(self, value):
        width = len(self.LAYOUT)
        if value < 0 or value >> width:
            raise ValueError(f"{type(self).__name__}: 0x{value:X} does not fit in {width} bits")
        self.value = value

    @classmethod
    def width(cls):
        return len(cls.LAYOUT)

    @classmethod
    def from_positions(cls, positions):
        return cls(bits_from_positions(positions, cls.width()))

    def __iter__(self):
        return iter_flags(self.value, self.LAYOUT)

    def iter(self):
        return iter_flags(self.value, self.LAYOUT)

    def significants(self):
        return significant_flags(self.iter())

    def reserved(self):
        return fold_reserved(self.iter())

    def __int__(self):
        return self.value

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        digits = (self.width() + 3) // 4
        return f"{type(self).__name__}(0x{self.value:0{digits}X})"
