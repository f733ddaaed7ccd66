"""Reading the command-line arguments into the numbers for stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct integers."""


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split on a single separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Read a leading integer as the C library does, ignoring trailing junk."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
    return sign * int(digits) if digits else 0


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_valid_token(token: str) -> bool:
    """Return True for an optional sign followed by one or more digits."""
    body = token[1:] if token[:1] in ("+", "-") else token
    return bool(body) and all(_is_digit(char) for char in body)


def parse_number(token: str) -> int:
    """Convert one argument, checking syntax and the 32-bit range."""
    if not is_valid_token(token):
        raise InputError(f"not an integer: {token!r}")
    value = atoi(token)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"out of range: {token!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Convert every argument, rejecting bad syntax, overflow and duplicates."""
    numbers: list[int] = []
    seen: set[int] = set()
    for token in args:
        value = parse_number(token)
        if value in seen:
            raise InputError(f"duplicate value: {value}")
        seen.add(value)
        numbers.append(value)
    return numbers