"""A cascade cipher: reverse the text, apply Vigenère, then shuffle the bits.

The helpers that make up the cascade are usable on their own as well.
Letters are the ASCII letters only; everything else passes through.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _is_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def _upper(ch: str) -> str:
    return ch.upper() if "a" <= ch <= "z" else ch


def _c_remainder(value: int, divisor: int) -> int:
    """Remainder that truncates towards zero, keeping the sign of ``value``."""
    remainder = abs(value) % divisor
    return remainder if value >= 0 else -remainder


def _key_shifts(key: str) -> Iterator[int]:
    if not key:
        raise ValueError("key must not be empty")
    return itertools.cycle([ord(_upper(ch)) - ord("A") for ch in key])


def reverse(text: str) -> str:
    """Return ``text`` reversed, with ASCII letters upper-cased."""
    return "".join(_upper(ch) for ch in reversed(text))


def vigenere_encrypt(key: str, text: str) -> str:
    """Encrypt the letters of ``text`` with ``key``; other characters are kept.

    The key advances only on letters. The result is upper case.
    """
    shifts = _key_shifts(key)
    out = []
    for ch in text:
        if not _is_letter(ch):
            out.append(ch)
            continue
        value = _c_remainder(ord(_upper(ch)) - ord("A") + next(shifts), 26)
        out.append(chr(value + ord("A")))
    return "".join(out)


def vigenere_decrypt(key: str, text: str) -> str:
    """Undo :func:`vigenere_encrypt`; the result is upper case."""
    shifts = _key_shifts(key)
    out = []
    for ch in text:
        ch = _upper(ch)
        if not _is_letter(ch):
            out.append(ch)
            continue
        value = _c_remainder(ord(ch) - ord("A") - next(shifts) + 26, 26)
        out.append(chr(value + ord("A")))
    return "".join(out)


def _swap_bit_pairs(nibble: int) -> int:
    return ((nibble & 0xA) >> 1) | ((nibble & 0x5) << 1)


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode(_ENCODING, _ERRORS)
    return bytes(data)


def bit_encrypt(text: str | bytes) -> bytes:
    """Scramble every byte: swap bit pairs in the high nibble, then XOR it into the low one.

    A ``str`` is first encoded as UTF-8.
    """
    out = bytearray()
    for byte in _as_bytes(text):
        high = _swap_bit_pairs(byte >> 4)
        low = (byte & 0x0F) ^ high
        out.append((high << 4) | low)
    return bytes(out)


def bit_decrypt(data: bytes | bytearray | memoryview) -> str:
    """Undo :func:`bit_encrypt` and decode the bytes as UTF-8."""
    out = bytearray()
    for byte in _as_bytes(data):
        changed_high = byte >> 4
        low = (byte & 0x0F) ^ changed_high
        high = _swap_bit_pairs(changed_high)
        out.append((high << 4) | low)
    return out.decode(_ENCODING, _ERRORS)


def bmp_encrypt(key: str, text: str) -> bytes:
    """Reverse ``text``, Vigenère-encrypt it with ``key`` and bit-scramble the result."""
    return bit_encrypt(vigenere_encrypt(key, reverse(text)))


def bmp_decrypt(key: str, data: bytes) -> str:
    """Undo :func:`bmp_encrypt`; letters come back in upper case."""
    return reverse(vigenere_decrypt(key, bit_decrypt(data)))