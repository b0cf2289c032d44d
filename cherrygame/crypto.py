"""Hashing and base64 helpers."""

import base64
import binascii
import hashlib
import zlib


def md5_with_bytes(data: bytes) -> str:
    """Return the hex MD5 digest of ``data``."""
    return hashlib.md5(data).hexdigest()


def md5(value: str) -> str:
    """Return the hex MD5 digest of a UTF-8 string."""
    return md5_with_bytes(value.encode("utf-8"))


def base64_encode(value: str) -> str:
    """Encode a string with standard padded base64."""
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def base64_decode_bytes(value: str) -> bytes:
    """Decode standard base64; raise ValueError on malformed input."""
    try:
        return base64.b64decode(value, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"illegal base64 data: {exc}") from exc


def base64_decode(value: str) -> str:
    """Decode standard base64 into a string."""
    return base64_decode_bytes(value).decode("utf-8", errors="replace")


def crc32(value: str) -> int:
    """Return the IEEE CRC-32 of a UTF-8 string as an unsigned int."""
    return zlib.crc32(value.encode("utf-8")) & 0xFFFFFFFF