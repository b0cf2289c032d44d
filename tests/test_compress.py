import gzip

import pytest

from cherrygame.compress import deflate_data, inflate_data, is_compressed


def test_round_trip():
    data = b"cherry " * 100
    packed = deflate_data(data)
    assert len(packed) < len(data)
    assert inflate_data(packed) == data


def test_round_trip_empty():
    assert inflate_data(deflate_data(b"")) == b""


def test_deflate_has_zlib_header():
    packed = deflate_data(b"hello world")
    assert packed[0] == 0x78
    assert is_compressed(packed) is True


def test_gzip_detected():
    assert is_compressed(gzip.compress(b"hello")) is True


def test_plain_data_not_compressed():
    assert is_compressed(b"hello world") is False
    assert is_compressed(b"\x78\x9c") is False


def test_inflate_invalid_raises():
    with pytest.raises(ValueError):
        inflate_data(b"not zlib data")