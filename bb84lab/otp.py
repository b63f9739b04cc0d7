from __future__ import annotations

from typing import Sequence

from .errors import EmptyKeyError


def xor_mask(data: bytes, key_bits: Sequence[int]) -> bytes:
    """XOR every byte with 0xFF or 0x00 depending on one key bit.

    The key is reused cyclically when it is shorter than ``data``. The
    operation is its own inverse.
    """
    if len(key_bits) == 0:
        raise EmptyKeyError("Cannot cipher with an empty key; run the protocol first")
    length = len(key_bits)
    return bytes(byte ^ (0xFF if key_bits[j % length] else 0x00) for j, byte in enumerate(data))


def encrypt(message: bytes, key_bits: Sequence[int]) -> bytes:
    return xor_mask(message, key_bits)


def decrypt(ciphertext: bytes, key_bits: Sequence[int]) -> bytes:
    return xor_mask(ciphertext, key_bits)


def encrypt_text(text: str, key_bits: Sequence[int]) -> str:
    """Encrypt UTF-8 text and return it as space-separated hex bytes."""
    return encrypt(text.encode("utf-8"), key_bits).hex(" ")


def decrypt_hex(hex_text: str, key_bits: Sequence[int]) -> str:
    try:
        data = bytes.fromhex(hex_text)
    except ValueError as exc:
        raise ValueError(f"Ciphertext is not valid hex: {hex_text!r}") from exc
    return decrypt(data, key_bits).decode("utf-8", errors="replace")
