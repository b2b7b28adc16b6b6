import pytest

from builders import end_of_table, structure


@pytest.fixture
def small_table():
    """BIOS, System and End-of-Table structures."""
    return (
        structure(0, 0x0000, b"\x01\x02" + bytes(0x0C), ["Vendor", "1.0"])
        + structure(1, 0x0001, b"\x01\x00\x00\x00", ["Maker"])
        + end_of_table()
    )
