"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def isalpha(c: CharLike) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: CharLike) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """Return True for an ASCII letter or digit."""
    return isdigit(c) or isalpha(c)


def isascii(c: CharLike) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else comes back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text with no digits gives 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and isdigit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return result * sign


def itoa(n: int) -> str:
    """Return the decimal text of an integer."""
    if n < 0:
        return "-" + itoa(-n)
    digits = []
    while True:
        n, digit = divmod(n, 10)
        digits.append(chr(ord("0") + digit))
        if n == 0:
            break
    return "".join(reversed(digits))