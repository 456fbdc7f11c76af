import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    original = b"abcdef"
    buffer = bytearray(original)
    result = memset(buffer, ord("z"), 3)
    assert result is buffer
    assert buffer[:3] == bytes([ord("z")]) * 3
    assert buffer[3:] == original[3:]


def test_memset_value_wraps_to_byte():
    buffer = bytearray(4)
    memset(buffer, 0x141, 4)
    assert set(buffer) == {0x141 & 0xFF}


def test_memset_too_long_raises():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero_zeroes():
    original = b"hello"
    buffer = bytearray(original)
    bzero(buffer, 4)
    assert buffer[:4] == bytes(4)
    assert buffer[4:] == original[4:]


def test_memcpy_round_trip():
    src = b"payload"
    dest = bytearray(len(src) + 2)
    memcpy(dest, src, len(src))
    assert bytes(dest[: len(src)]) == src
    assert dest[len(src) :] == bytes(2)


def test_memcpy_source_too_short_raises():
    with pytest.raises(IndexError):
        memcpy(bytearray(8), b"ab", 3)


def test_memmove_forward_overlap():
    original = b"abcdef"
    buffer = bytearray(original)
    memmove(buffer, 1, 0, 4)
    assert buffer[1:5] == original[0:4]
    assert buffer[:1] == original[:1]
    assert buffer[5:] == original[5:]


def test_memmove_backward_overlap():
    original = b"abcdef"
    buffer = bytearray(original)
    memmove(buffer, 0, 2, 4)
    assert buffer[0:4] == original[2:6]
    assert buffer[4:] == original[4:]


def test_memmove_out_of_range_raises():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_memchr_limited_by_n():
    data = b"hello"
    assert memchr(data, ord("o"), 3) is None


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"a", b"c", 1) == ord("a") - ord("c")


def test_calloc_zeroed():
    buffer = calloc(3, 4)
    assert len(buffer) == 3 * 4
    assert not any(buffer)


def test_calloc_zero_gives_single_byte():
    assert len(calloc(0, 5)) == 1
    assert len(calloc(5, 0)) == 1


def test_calloc_overflow_raises():
    with pytest.raises(OverflowError):
        calloc(2**40, 2**40)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)