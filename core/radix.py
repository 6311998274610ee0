"""Digit strings in bases 2..36 to exact integers and back."""

from core.errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36
DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def char_to_digit(c: str) -> int:
    """Digit value of c, or -1 if c is not 0-9, a-z or A-Z."""
    if '0' <= c <= '9':
        return ord(c) - ord('0')
    if 'a' <= c <= 'z':
        return 10 + ord(c) - ord('a')
    if 'A' <= c <= 'Z':
        return 10 + ord(c) - ord('A')
    return -1


def check_base(base: int):
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)


def decode(digits: str, base: int) -> int:
    """Decode `digits` in `base` by left-to-right accumulation.

    Surrounding whitespace is ignored; an empty string decodes to 0.
    """
    check_base(base)
    s = digits.strip()
    result = 0
    for i, c in enumerate(s):
        d = char_to_digit(c)
        if d < 0 or d >= base:
            raise InvalidDigit(c, base, i, s)
        result = result * base + d
    return result


def encode(value: int, base: int) -> str:
    """Inverse of decode for non-negative values (lowercase digits)."""
    check_base(base)
    if value < 0:
        raise ValueError("Cannot encode a negative value")
    if value == 0:
        return "0"
    out = []
    while value:
        value, d = divmod(value, base)
        out.append(DIGITS[d])
    return ''.join(reversed(out))
