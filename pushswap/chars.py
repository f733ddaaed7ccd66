"""ASCII character classification and case conversion on character codes."""


def is_alpha(code: int) -> bool:
    """True for an ASCII letter."""
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(code: int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= code <= ord("9")


def is_alnum(code: int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_upper(code: int) -> int:
    """Map a lower-case ASCII letter to upper case; leave others unchanged."""
    return code - 32 if ord("a") <= code <= ord("z") else code


def to_lower(code: int) -> int:
    """Map an upper-case ASCII letter to lower case; leave others unchanged."""
    return code + 32 if ord("A") <= code <= ord("Z") else code