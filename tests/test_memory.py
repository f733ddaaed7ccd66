import pytest
from hypothesis import given, strategies as st

from pushswap.memory import (
    alloc_zeroed,
    compare_bytes,
    copy_bytes,
    fill,
    find_byte,
    move_bytes,
    zero,
)


def test_fill_sets_prefix_only():
    buffer = bytearray(b"ABCD EFGH")
    result = fill(buffer, ord("x"), 3)
    assert result is buffer
    assert buffer == bytearray(b"xxxD EFGH")


def test_fill_wraps_value_to_byte():
    buffer = bytearray(4)
    fill(buffer, 0x141, 4)
    assert buffer == bytearray(b"\x41" * 4)


def test_fill_rejects_count_past_end():
    with pytest.raises(IndexError):
        fill(bytearray(2), 1, 3)


def test_fill_rejects_negative_count():
    with pytest.raises(ValueError):
        fill(bytearray(2), 1, -1)


def test_zero_clears_prefix():
    buffer = bytearray(b"Nayara")
    zero(buffer, 3)
    assert buffer == bytearray(b"\0\0\0ara")


@given(st.integers(min_value=0, max_value=64), st.integers(min_value=0, max_value=64))
def test_alloc_zeroed_length_and_content(count, size):
    buffer = alloc_zeroed(count, size)
    assert len(buffer) == count * size
    assert not any(buffer)


def test_alloc_zeroed_rejects_negative():
    with pytest.raises(ValueError):
        alloc_zeroed(-1, 4)


def test_find_byte_found():
    assert find_byte(b"Nayara", ord("y"), 6) == 2


def test_find_byte_outside_range_is_none():
    assert find_byte(b"Nayara", ord("r"), 4) is None


def test_find_byte_wraps_value():
    data = b"Nayara"
    assert find_byte(data, ord("y") + 256, len(data)) == data.index(b"y")


def test_compare_bytes_first_difference():
    a = b"abcdefjghij"
    b = b"abcdelmnop"
    result = compare_bytes(a, b, 6)
    assert result < 0
    assert result == ord("f") - ord("l")


def test_compare_bytes_equal_prefix_is_zero():
    assert compare_bytes(b"abcdefjghij", b"abcdelmnop", 5) == 0


def test_compare_bytes_rejects_count_past_end():
    with pytest.raises(IndexError):
        compare_bytes(b"ab", b"abc", 3)


@given(st.binary(max_size=32), st.binary(max_size=32))
def test_compare_bytes_antisymmetric(a, b):
    n = min(len(a), len(b))
    assert compare_bytes(a, b, n) == -compare_bytes(b, a, n)


def test_copy_bytes_prefix():
    dest = bytearray(b"0123456789")
    result = copy_bytes(dest, b"Nayara", 3)
    assert result is dest
    assert dest == bytearray(b"Nay3456789")


@given(st.binary(min_size=1, max_size=32), st.data())
def test_move_bytes_matches_original_source_region(data, draw):
    n = draw.draw(st.integers(min_value=0, max_value=len(data)))
    src = draw.draw(st.integers(min_value=0, max_value=len(data) - n))
    dest = draw.draw(st.integers(min_value=0, max_value=len(data) - n))
    buffer = bytearray(data)
    move_bytes(buffer, dest, src, n)
    assert buffer[dest : dest + n] == data[src : src + n]
    assert buffer[:dest] == data[:dest]
    assert buffer[dest + n :] == data[dest + n :]
    assert len(buffer) == len(data)


def test_move_bytes_overlapping_forward():
    buffer = bytearray(b"abcdef")
    move_bytes(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_move_bytes_rejects_out_of_range():
    with pytest.raises(IndexError):
        move_bytes(bytearray(4), 2, 0, 3)