"""
CipherKit - byte helpers.

Coercion of user input to ``bytes`` happens here, before anything reaches the
block transforms, which only ever see raw bytes.
"""

import secrets

from .errors import KeyLengthError


def to_bytes(value, encoding="utf-8"):
    """
    Normalize key, IV or message input to bytes.

    Args:
        value: bytes-like object, text, or an iterable of ints in 0..255
        encoding: text encoding used when ``value`` is a str

    Returns:
        bytes: The normalized value
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode(encoding)
    if isinstance(value, int):
        # bytes(n) would silently build n zero bytes
        raise TypeError("Cannot convert int to bytes")
    try:
        return bytes(value)
    except (TypeError, ValueError) as e:
        raise TypeError(f"Cannot convert {type(value).__name__} to bytes: {e}") from e


def xor_bytes(a, b):
    # zip stops at the shorter input, which truncates a keystream to a partial segment
    return bytes(x ^ y for x, y in zip(a, b))


def generate_key(key_size_bits=256):

    if key_size_bits not in (128, 192, 256):
        raise KeyLengthError(f"Invalid key size: {key_size_bits} bits. Must be 128, 192, or 256.")

    return secrets.token_bytes(key_size_bits // 8)


def generate_iv(block_size=16):

    return secrets.token_bytes(block_size)
