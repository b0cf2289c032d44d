"""Zlib helpers."""

import zlib


def deflate_data(data: bytes) -> bytes:
    """Compress ``data`` in zlib format."""
    return zlib.compress(data)


def inflate_data(data: bytes) -> bytes:
    """Decompress zlib data; raise ValueError if it is not valid."""
    try:
        return zlib.decompress(data)
    except zlib.error as exc:
        raise ValueError(f"inflate failed: {exc}") from exc


def is_compressed(data: bytes) -> bool:
    """Return True if ``data`` starts with a zlib or gzip header."""
    if len(data) <= 2:
        return False
    zlib_header = data[0] == 0x78 and data[1] in (0x9C, 0x01, 0xDA, 0x5E)
    gzip_header = data[0] == 0x1F and data[1] == 0x8B
    return zlib_header or gzip_header