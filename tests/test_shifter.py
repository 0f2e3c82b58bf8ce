import pytest

from cpusim.bits import from_unsigned_bits, to_unsigned_bits
from cpusim.shifter import shift_left, shift_right


@pytest.mark.parametrize("value, n, expected", [(1, 1, 2), (5, 2, 20)])
def test_shift_left(value, n, expected):
    assert from_unsigned_bits(shift_left(to_unsigned_bits(value, 16), n)) == expected


@pytest.mark.parametrize("value, n, expected", [(2, 1, 1), (20, 2, 5)])
def test_shift_right(value, n, expected):
    assert from_unsigned_bits(shift_right(to_unsigned_bits(value, 16), n)) == expected


def test_shift_past_width_gives_zero():
    assert shift_left(to_unsigned_bits(0xFFFF, 16), 16) == [False] * 16
    assert shift_right(to_unsigned_bits(0xFFFF, 16), 20) == [False] * 16


def test_msb_dropped_on_left_shift():
    assert from_unsigned_bits(shift_left(to_unsigned_bits(0x8001, 16), 1)) == 2


def test_negative_amount_rejected():
    with pytest.raises(ValueError):
        shift_left([True, False], -1)