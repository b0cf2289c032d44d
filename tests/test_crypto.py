import hashlib

import pytest

from cherrygame.crypto import (
    base64_decode,
    base64_decode_bytes,
    base64_encode,
    crc32,
    md5,
    md5_with_bytes,
)


def test_md5_empty_string():
    assert md5("") == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_matches_bytes_variant():
    assert md5("cherry") == md5_with_bytes(b"cherry")
    assert md5("cherry") == hashlib.md5(b"cherry").hexdigest()
    assert len(md5("anything")) == 32


def test_base64_round_trip():
    for text in ["", "a", "hello world", "中文字符"]:
        assert base64_decode(base64_encode(text)) == text


def test_base64_known_value():
    assert base64_encode("hello") == "aGVsbG8="


def test_base64_decode_bytes():
    assert base64_decode_bytes(base64_encode("xyz")) == b"xyz"


def test_base64_invalid():
    with pytest.raises(ValueError):
        base64_decode("not*base64")
    with pytest.raises(ValueError):
        base64_decode_bytes("abc")


def test_crc32_known_value():
    assert crc32("123456789") == 0xCBF43926


def test_crc32_non_negative():
    for text in ["", "a", "cherry", "x" * 1000]:
        assert 0 <= crc32(text) <= 0xFFFFFFFF