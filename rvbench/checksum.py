"""Checksum and small arithmetic routines used by the debug target programs."""

from __future__ import annotations

from typing import Callable, Optional

_MASK32 = 0xFFFFFFFF
_CRC32_POLY = 0x04C11DB7

FOX = "The quick brown fox jumps of the lazy dog."


def reverse_bits(x: int) -> int:
    """Reflect the bits of a 32-bit word."""
    x &= _MASK32
    x = ((x & 0x55555555) << 1) | ((x >> 1) & 0x55555555)
    x = ((x & 0x33333333) << 2) | ((x >> 2) & 0x33333333)
    x = ((x & 0x0F0F0F0F) << 4) | ((x >> 4) & 0x0F0F0F0F)
    x = (x << 24) | ((x & 0xFF00) << 8) | ((x >> 8) & 0xFF00) | (x >> 24)
    return x & _MASK32


def crc32a(message: bytes | bytearray | str) -> int:
    """Bitwise CRC-32 of ``message``, following the shift-register form."""
    if isinstance(message, str):
        message = message.encode("latin-1")
    crc = _MASK32
    for value in message:
        byte = reverse_bits(value)
        for _ in range(8):
            if (crc ^ byte) & 0x80000000:
                crc = ((crc << 1) ^ _CRC32_POLY) & _MASK32
            else:
                crc = (crc << 1) & _MASK32
            byte = (byte << 1) & _MASK32
    return reverse_bits(~crc & _MASK32)


def fib(n: int, on_step: Optional[Callable[[int], None]] = None) -> int:
    """Return the n-th Fibonacci number modulo 2**32.

    ``on_step`` is called with the running value after every iteration,
    standing in for the breakpoint the target program hits there.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    a, b = 0, 1
    for _ in range(1, n):
        a, b = b, (a + b) & _MASK32
        if on_step is not None:
            on_step(b)
    return b


def _rot13_char(ch: str) -> str:
    if "a" <= ch <= "m" or "A" <= ch <= "M":
        return chr(ord(ch) + 13)
    if "n" <= ch <= "z" or "N" <= ch <= "Z":
        return chr(ord(ch) - 13)
    return ch


def rot13(text: str) -> str:
    """Apply ROT13 to ASCII letters, leaving everything else untouched."""
    return "".join(_rot13_char(ch) for ch in text)


def counting_loop() -> int:
    """Count up to ten while summing, and return the final counter."""
    total = 0
    counter = 0
    while counter < 10:
        counter += 1
        total += counter
    return counter


def debug_checksum(text: str = FOX) -> int:
    """XOR of the CRCs of ``text`` in ROT13 form and in its original form."""
    scrambled = rot13(text)
    checksum = crc32a(scrambled)
    checksum ^= crc32a(rot13(scrambled))
    return checksum