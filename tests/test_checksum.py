import zlib

import pytest

from rvbench.checksum import (
    FOX,
    counting_loop,
    crc32a,
    debug_checksum,
    fib,
    reverse_bits,
    rot13,
)


@pytest.mark.parametrize("value", [0, 1, 0x55555555, 0xDEADBEEF, 0x11223344, 0xFFFFFFFF])
def test_reverse_bits_is_involution(value):
    assert reverse_bits(reverse_bits(value)) == value


def test_reverse_bits_single_bit():
    for bit in range(32):
        assert reverse_bits(1 << bit) == 1 << (31 - bit)


@pytest.mark.parametrize(
    "message",
    [b"", b"a", b"123456789", FOX.encode(), bytes(range(256))],
)
def test_crc32a_matches_standard_crc32(message):
    assert crc32a(message) == zlib.crc32(message)


def test_crc32a_accepts_str():
    assert crc32a(FOX) == crc32a(FOX.encode("latin-1"))


def test_crc32a_of_empty_is_zero():
    assert crc32a(b"") == 0


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


def test_fib_recurrence():
    for n in range(2, 60):
        assert fib(n) == (fib(n - 1) + fib(n - 2)) & 0xFFFFFFFF


def test_fib_wraps_to_32_bits():
    assert all(0 <= fib(n) <= 0xFFFFFFFF for n in range(200))


def test_fib_calls_step_each_iteration():
    seen = []
    result = fib(4, seen.append)
    assert len(seen) == 3
    assert seen[-1] == result


def test_fib_rejects_negative():
    with pytest.raises(ValueError):
        fib(-1)


def test_rot13_round_trip():
    assert rot13(rot13(FOX)) == FOX


def test_rot13_leaves_non_letters():
    text = "0123 .,!?"
    assert rot13(text) == text


def test_rot13_changes_every_letter():
    out = rot13(FOX)
    assert all(a != b for a, b in zip(FOX, out) if a.isalpha())


def test_counting_loop_returns_ten():
    assert counting_loop() == 10


def test_debug_checksum_matches_crc_of_both_forms():
    expected = zlib.crc32(rot13(FOX).encode()) ^ zlib.crc32(FOX.encode())
    assert debug_checksum() == expected


def test_debug_checksum_symmetric_under_rot13():
    assert debug_checksum(rot13(FOX)) == debug_checksum(FOX)