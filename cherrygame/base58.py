"""Base58 encoding using the Bitcoin alphabet."""

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {ord(ch): i for i, ch in enumerate(ALPHABET)}


class Base58Error(ValueError):
    """Raised when a string is not valid Base58."""


def encode(data: bytes) -> str:
    """Encode bytes to Base58; leading zero bytes become leading '1's."""
    num = int.from_bytes(data, "big")
    digits = []
    while num > 0:
        num, rem = divmod(num, 58)
        digits.append(ALPHABET[rem])
    zeros = len(data) - len(data.lstrip(b"\x00"))
    return ALPHABET[0] * zeros + "".join(reversed(digits))


def decode(text: str) -> bytes:
    """Decode a Base58 string; raise Base58Error on illegal characters."""
    raw = text.encode("utf-8")
    num = 0
    for position, byte in enumerate(raw):
        value = _INDEX.get(byte)
        if value is None:
            raise Base58Error(
                f'invalid Base58 input string at character "{chr(byte)}", '
                f"position {position}"
            )
        num = num * 58 + value
    body = num.to_bytes((num.bit_length() + 7) // 8, "big")
    zeros = len(raw) - len(raw.lstrip(b"1"))
    return b"\x00" * zeros + body