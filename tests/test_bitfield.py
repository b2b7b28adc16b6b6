import pytest

from bitfield import (UNKNOWN, BitField, Flag, Reserved, ReservedRange, Significant,
                      Unknown, bits_from_positions, fold_reserved, iter_flags, layout,
                      significant_flags)
from characteristics import BiosCharacteristics, ProcessorCharacteristics

LAYOUT = layout(
    8,
    ("A", "A Long"),
    ("B", "B Long"),
    ("Reserved 1", 1),
    ("C", "C Long"),
    ("D", "D Long"),
    ("E", "E Long"),
    ("Reserved 2", 2),
)


class Sample(BitField):
    LAYOUT = LAYOUT


def test_layout_entries():
    assert LAYOUT == (
        Significant("A", "A Long"),
        Significant("B", "B Long"),
        Reserved("Reserved 1"),
        Significant("C", "C Long"),
        Significant("D", "D Long"),
        Significant("E", "E Long"),
        Reserved("Reserved 2"),
        Reserved("Reserved 2"),
    )


def test_layout_plain_text_and_unknown_tail():
    table = layout(4, "Only")
    assert table[0] == Significant("Only", "Only")
    assert table[1:] == (UNKNOWN, UNKNOWN, UNKNOWN)
    assert Unknown() == UNKNOWN
    assert Reserved("x") != Significant("x")


def test_layout_overflow():
    with pytest.raises(ValueError):
        layout(4, "a", ("Reserved", 4))


def test_iter_flags():
    flags = list(iter_flags(0b1010_1001, LAYOUT))
    assert [(f.position, f.is_set, f.type) for f in flags] == [
        (0, True, LAYOUT[0]),
        (1, False, LAYOUT[1]),
        (2, False, LAYOUT[2]),
        (3, True, LAYOUT[3]),
        (4, False, LAYOUT[4]),
        (5, True, LAYOUT[5]),
        (6, False, LAYOUT[6]),
        (7, True, LAYOUT[7]),
    ]


def test_significants_short_and_long():
    flags = list(Sample(0b1010_1001).significants())
    assert [str(f) for f in flags] == ["A", "C", "E"]
    assert [format(f, "#") for f in flags] == ["A Long", "C Long", "E Long"]


def test_significants_report_set_unknown_bits():
    table = layout(4, "a", ("Reserved", 1))
    flags = list(significant_flags(iter_flags(0b1111, table)))
    assert [f.position for f in flags] == [0, 2, 3]
    assert str(flags[1]) == "Unknown"


def test_fold_reserved_example():
    ranges = list(Sample(0).reserved())
    assert ranges == [
        ReservedRange("Reserved 1", 2, 2),
        ReservedRange("Reserved 2", 6, 7),
    ]
    assert str(ranges[0]) == "Reserved 1 (bit 2)"
    assert str(ranges[1]) == "Reserved 2 (bits 6-7)"


def test_fold_reserved_ignores_bit_values():
    assert list(Sample(0xFF).reserved()) == list(Sample(0).reserved())


def test_fold_adjacent_distinct_descriptions():
    table = layout(8, ("A", 2), ("B", 3), "x")
    ranges = list(fold_reserved(iter_flags(0, table)))
    assert ranges == [ReservedRange("A", 0, 1), ReservedRange("B", 2, 4)]


def test_fold_no_reserved():
    table = layout(8, *"abcdefgh")
    assert list(fold_reserved(iter_flags(0xFF, table))) == []


def test_fold_all_reserved():
    table = layout(8, ("R 1", 8))
    assert [r.range for r in fold_reserved(iter_flags(0xFF, table))] == [range(0, 8)]


def test_fold_complex():
    table = layout(
        16,
        ("S A", "A Long"),
        ("S B", "B Long"),
        ("R 1", 1),
        ("S C", "C Long"),
        ("S C", "C Long"),
        ("S D", "D Long"),
        ("S E", "E Long"),
        ("R 2", 2),
        ("S C", "C Long"),
        ("R 2", 2),
        ("R 3", 4),
    )
    ranges = [(r.start, r.end) for r in fold_reserved(iter_flags(0xFFFF, table))]
    assert ranges == [(2, 2), (7, 8), (10, 11), (12, 15)]


def test_bits_from_positions():
    positions = [2, 3, 5, 7, 9, 13, 29, 31, 37]
    assert bits_from_positions([p for p in positions if p < 8]) == 0b1010_1100
    assert bits_from_positions([p for p in positions if p < 16], 16) == 0b0010_0010_1010_1100
    with pytest.raises(OverflowError):
        bits_from_positions(positions, 32)


def test_bitfield_value_must_fit():
    with pytest.raises(ValueError):
        Sample(0x100)
    with pytest.raises(ValueError):
        Sample(-1)


def test_bitfield_from_positions():
    value = Sample.from_positions([0, 3])
    assert int(value) == 0b1001
    assert value == Sample(9)
    assert repr(value) == "Sample(0x09)"


def test_flag_format():
    flag = Flag(0, True, Significant("Short", "Long"))
    assert f"{flag}" == "Short"
    assert f"{flag:#}" == "Long"
    assert f"{flag:>7}" == "  Short"


def test_bios_characteristics():
    # PCI, BIOS upgradeable, boot from CD
    value = BiosCharacteristics.from_positions([7, 11, 15])
    assert [str(f) for f in value.significants()] == [
        "PCI is supported",
        "BIOS is upgradeable",
        "Boot from CD is supported",
    ]
    assert [str(r) for r in value.reserved()] == [
        "Reserved (bits 0-1)",
        "Reserved for BIOS vendor (bits 32-47)",
        "Reserved for system vendor (bits 48-63)",
    ]


def test_processor_characteristics():
    flags = ProcessorCharacteristics(0x00FC).significants()
    assert [str(f) for f in flags] == [
        "64-bit capable",
        "Multi-Core",
        "Hardware Thread",
        "Execute Protection",
        "Enhanced Virtualization",
        "Power/Performance Control",
    ]
