import os

import pytest

from cherrygame.base58 import Base58Error, decode, encode

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def test_known_value():
    assert encode(b"Hello World!") == "2NEpo7TZRRrLZSi2U"
    assert decode("2NEpo7TZRRrLZSi2U") == b"Hello World!"


def test_empty():
    assert encode(b"") == ""
    assert decode("") == b""


def test_leading_zeros_preserved():
    data = b"\x00\x00\x01\x02"
    encoded = encode(data)
    assert encoded.startswith("11")
    assert decode(encoded) == data


def test_only_zeros():
    assert decode(encode(b"\x00\x00\x00")) == b"\x00\x00\x00"
    assert encode(b"\x00") == "1"


@pytest.mark.parametrize("size", [1, 5, 16, 32, 64, 100])
def test_round_trip_random(size):
    data = os.urandom(size)
    assert decode(encode(data)) == data


def test_encoded_uses_alphabet_only():
    data = bytes(range(256))
    encoded = encode(data)
    assert set(encoded) <= set(ALPHABET)
    assert decode(encoded) == data


@pytest.mark.parametrize("bad, pos", [("0", 0), ("abcO", 3), ("11l", 2)])
def test_invalid_character(bad, pos):
    with pytest.raises(Base58Error) as info:
        decode(bad)
    assert f"position {pos}" in str(info.value)