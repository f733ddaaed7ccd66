"""String helpers: searching, comparing, slicing, joining and trimming text."""

from __future__ import annotations

from collections.abc import Callable

_NUL = "\0"


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def find_char(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; the NUL character matches the end."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def rfind_char(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; the NUL character matches the end."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; negative, zero or positive like strncmp.

    A string that ends early compares as if followed by the NUL character.
    """
    _check_non_negative("n", n)
    for position in range(min(n, max(len(s1), len(s2)))):
        left = ord(s1[position]) if position < len(s1) else 0
        right = ord(s2[position]) if position < len(s2) else 0
        if left != right:
            return left - right
    return 0


def find_within(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    _check_non_negative("length", length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if not text or start >= len(text):
        return ""
    return text[start : start + length]


def join(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars) if chars else text


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had;
    when ``dest`` already fills the buffer that length is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return dest, len(src)
    if len(dest) >= size:
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def int_to_str(n: int) -> str:
    """Decimal representation of ``n``, with a leading minus when negative."""
    return str(n)