import pytest

from joywork.byteswap import byte_swap2, byte_swap4, byte_swap8, swap_value


def test_swap4_documented_example():
    assert byte_swap4(0x01FA9E80) == 0x809EFA01


def test_swap2_value():
    assert byte_swap2(0x0102) == 0x0201


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0xFFFF, 0xABCD])
def test_swap2_round_trip(value):
    assert byte_swap2(byte_swap2(value)) == value


@pytest.mark.parametrize("value", [0, 7, 0x01FA9E80, 0xFFFFFFFF])
def test_swap4_round_trip(value):
    assert byte_swap4(byte_swap4(value)) == value


@pytest.mark.parametrize("value", [0, 1, 0x0102030405060708, 2**64 - 1])
def test_swap8_round_trip(value):
    assert byte_swap8(byte_swap8(value)) == value


def test_swap8_matches_bytes_reversal():
    value = 0x0102030405060708
    expected = int.from_bytes(value.to_bytes(8, "big")[::-1], "big")
    assert byte_swap8(value) == expected


@pytest.mark.parametrize(
    "func, value", [(byte_swap2, 1 << 16), (byte_swap4, 1 << 32), (byte_swap8, -1)]
)
def test_out_of_range_rejected(func, value):
    with pytest.raises(ValueError):
        func(value)


def test_swap_value_unsigned_matches_integer_swap():
    assert swap_value(0x01FA9E80, "I") == byte_swap4(0x01FA9E80)


@pytest.mark.parametrize("value, fmt", [(1.5, "f"), (1.5, "d"), (-123, "i"), (-5, "h"), (42, "q")])
def test_swap_value_round_trip(value, fmt):
    assert swap_value(swap_value(value, fmt), fmt) == value


def test_swap_value_rejects_single_byte():
    with pytest.raises(ValueError):
        swap_value(1, "B")


def test_swap_value_rejects_bad_value():
    with pytest.raises(ValueError):
        swap_value(1 << 20, "H")