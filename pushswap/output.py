"""Formatted output: a small printf and helpers that write text to a stream."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_INT_SIGN = 0x80000000


def _as_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    return ((value + _INT_SIGN) & _UINT_MASK) - _INT_SIGN


def _as_uint32(value: int) -> int:
    """Wrap ``value`` to an unsigned 32-bit integer."""
    return value & _UINT_MASK


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of a non-negative integer, lower or upper case."""
    if n < 0:
        raise ValueError(f"cannot write a negative number in hexadecimal: {n}")
    return format(n, "X" if upper else "x")


def format_pointer(address: int | None) -> str:
    """An address as ``0x`` followed by hex digits, or ``(nil)`` for none or zero."""
    if not address:
        return "(nil)"
    return "0x" + to_hex(address)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _format_string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _convert(spec: str, args: list[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    if not args:
        raise TypeError(f"not enough arguments for %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return str(_as_int32(int(value)))
    if spec == "u":
        return str(_as_uint32(int(value)))
    return to_hex(_as_uint32(int(value)), upper=spec == "X")


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions ``%c %s %p %d %i %u %x %X %%`` in ``fmt``.

    An unknown conversion produces nothing, and a ``%`` at the very end
    of ``fmt`` is kept as it is.
    """
    remaining = list(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
        else:
            pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def _resolve(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def write_char(char: str, stream: TextIO | None = None) -> int:
    """Write a single character to ``stream`` (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _resolve(stream).write(char)
    return 1


def write_str(text: str, stream: TextIO | None = None) -> int:
    """Write ``text`` to ``stream`` (standard output by default)."""
    _resolve(stream).write(text)
    return len(text)


def write_line(text: str, stream: TextIO | None = None) -> int:
    """Write ``text`` followed by a newline."""
    return write_str(text + "\n", stream)


def write_number(n: int, stream: TextIO | None = None) -> int:
    """Write the decimal representation of ``n``."""
    return write_str(str(n), stream)