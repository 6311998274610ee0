"""Tests for base decoding and encoding."""

import pytest

from core.errors import InvalidBase, InvalidDigit
from core.radix import decode, encode


def test_decode_hex():
    assert decode("ff", 16) == 255


def test_decode_binary():
    assert decode("1010", 2) == 10


def test_decode_case_insensitive():
    assert decode("FF", 16) == decode("fF", 16) == 255


def test_decode_base36():
    assert decode("zz", 36) == 35 * 36 + 35


def test_decode_beyond_machine_words():
    digits = "z" * 40
    assert decode(digits, 36) == 36 ** 40 - 1


def test_decode_trims_whitespace():
    assert decode("  42\n", 10) == 42


def test_decode_empty_is_zero():
    assert decode("", 10) == 0


def test_digit_out_of_range():
    with pytest.raises(InvalidDigit) as exc:
        decode("102", 2)
    assert exc.value.char == "2"
    assert exc.value.base == 2
    assert exc.value.position == 2


def test_non_alphanumeric_digit():
    with pytest.raises(InvalidDigit) as exc:
        decode("1-2", 10)
    assert exc.value.char == "-"


def test_invalid_digit_is_value_error():
    with pytest.raises(ValueError):
        decode("g", 16)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_invalid_base(base):
    with pytest.raises(InvalidBase):
        decode("1", base)


def test_encode():
    assert encode(255, 16) == "ff"
    assert encode(10, 2) == "1010"
    assert encode(0, 7) == "0"


def test_encode_negative():
    with pytest.raises(ValueError):
        encode(-1, 10)


def test_encode_decode_big():
    value = 3 ** 200
    for base in (2, 10, 36):
        assert decode(encode(value, base), base) == value
