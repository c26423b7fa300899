import pytest

from pushswap.libft.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    result = bzero(buf, 3)
    assert result is buf
    assert buf == bytearray(3) + b"def"


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


def test_calloc_zero_count():
    assert len(calloc(0, 1000)) == 0


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2, SIZE_MAX)


def test_memchr_finds_first_occurrence():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")


def test_memchr_respects_length():
    data = b"hello world"
    assert memchr(data, ord("w"), 5) is None
    assert memchr(data, ord("w"), len(data)) == data.index(b"w")


def test_memchr_truncates_value_to_byte():
    data = b"abc"
    assert memchr(data, ord("b") + 256, 3) == 1


def test_memcmp_equal_prefix_is_zero():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abcX", b"abcY", 4) < 0
    assert memcmp(b"abcY", b"abcX", 4) > 0
    assert memcmp(b"a\x00", b"a\xff", 2) == 0 - 0xFF


def test_memcpy_copies_prefix():
    dst = bytearray(b"xxxxxx")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcdxx")


def test_memcpy_too_long_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(2), b"abcdef", 4)


@pytest.mark.parametrize("dst,src", [(2, 0), (0, 2), (3, 3)])
def test_memmove_overlapping(dst, src):
    original = b"0123456789"
    buf = bytearray(original)
    memmove(buf, dst, src, 5)
    expected = bytearray(original)
    expected[dst:dst + 5] = original[src:src + 5]
    assert buf == expected


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memset_fills_with_truncated_byte():
    buf = bytearray(5)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4 + [0])