"""Byte-buffer helpers: filling, searching, comparing, copying and moving bytes."""

from __future__ import annotations

from collections.abc import Sequence


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def fill(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (taken modulo 256)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def zero(buffer: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    return fill(buffer, 0, n)


def alloc_zeroed(count: int, size: int) -> bytearray:
    """Return a new buffer of ``count * size`` zero bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count} and {size}")
    return bytearray(count * size)


def find_byte(data: Sequence[int], value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` (modulo 256) among the first ``n``."""
    _check_count(n, len(data))
    target = value & 0xFF
    return next((index for index, byte in enumerate(data[:n]) if byte == target), None)


def compare_bytes(a: Sequence[int], b: Sequence[int], n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0 when they all match."""
    _check_count(n, len(a), len(b))
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)


def copy_bytes(dest: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def move_bytes(buffer: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes from offset ``src`` to offset ``dest`` of the same buffer.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest < 0 or src < 0:
        raise ValueError(f"offsets must not be negative, got {dest} and {src}")
    _check_count(n, len(buffer) - dest, len(buffer) - src)
    buffer[dest : dest + n] = buffer[src : src + n]
    return buffer