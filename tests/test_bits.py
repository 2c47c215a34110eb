import pytest

from wavlsb.bits import bits_to_int, char_to_bits, int_to_bits


def test_char_to_bits_known_value():
    assert char_to_bits("A") == "01000001"


@pytest.mark.parametrize("value", [0, 1, 0x7F, 0x80, 0xFF])
def test_char_to_bits_int_round_trip(value):
    bits = char_to_bits(value)
    assert len(bits) == 8
    assert int(bits, 2) == value


def test_char_to_bits_str_and_int_agree():
    assert char_to_bits("z") == char_to_bits(ord("z"))


@pytest.mark.parametrize("ch", ["\u0100", "\u0416", 256, -1])
def test_char_to_bits_rejects_wide_characters(ch):
    with pytest.raises(ValueError):
        char_to_bits(ch)


@pytest.mark.parametrize("number", [0, 1, 7, 1000, 2**31 - 1, -1, -(2**31)])
def test_int_round_trip(number):
    bits = int_to_bits(number)
    assert len(bits) == 32
    assert bits_to_int(bits) == number


def test_int_to_bits_one():
    assert int_to_bits(1) == "0" * 31 + "1"


def test_negative_one_is_all_ones():
    assert int_to_bits(-1) == "1" * 32


def test_bits_to_int_uses_only_first_32_digits():
    assert bits_to_int(int_to_bits(5) + "1111") == 5


def test_bits_to_int_empty_is_zero():
    assert bits_to_int("") == 0


@pytest.mark.parametrize("text", ["012", "abc", "1 0"])
def test_bits_to_int_rejects_non_binary(text):
    with pytest.raises(ValueError):
        bits_to_int(text)