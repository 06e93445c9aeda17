"""Writing characters, strings and numbers to text streams, and printf-style formatting."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from solong.chars import itoa

CharLike = Union[int, str]

_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _to_int32(n: int) -> int:
    n &= _UINT32_MASK
    return n - (1 << 32) if n & 0x80000000 else n


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _stream(stream).write(_char(c))


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; None writes only the newline."""
    put_str(s, stream)
    _stream(stream).write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of ``n``."""
    _stream(stream).write(itoa(n))


def format_num(n: int) -> str:
    """Return the signed decimal text of ``n``."""
    return itoa(n)


def format_unsigned(n: int) -> str:
    """Return the decimal text of ``n`` taken as a 32-bit unsigned value."""
    return itoa(n & _UINT32_MASK)


def format_hex(n: int, spec: str = "x") -> str:
    """Return ``n`` as 32-bit unsigned hexadecimal.

    ``spec`` is ``"x"`` for lower-case digits or ``"X"`` for upper-case.
    """
    if spec not in ("x", "X"):
        raise ValueError(f"hex spec must be 'x' or 'X', got {spec!r}")
    return format(n & _UINT32_MASK, spec)


def format_ptr(address: Optional[int]) -> str:
    """Return an address as ``0x`` followed by lower-case hex, or ``(nil)`` for None or 0."""
    if not address:
        return "(nil)"
    return "0x" + format(address & _POINTER_MASK, "x")


def format_string(s: Optional[str]) -> str:
    """Return ``s``, or ``(null)`` for None."""
    return "(null)" if s is None else s


def _convert(spec: str, args: list) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiupxX":
        return ""
    if not args:
        raise TypeError(f"not enough arguments for %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return format_string(value)
    if spec in "di":
        return format_num(_to_int32(value))
    if spec == "u":
        return format_unsigned(value)
    if spec == "p":
        return format_ptr(value)
    return format_hex(value, spec)


def format_printf(fmt: str, *args) -> str:
    """Expand ``fmt`` with the conversions %c %s %d %i %u %p %x %X and %%.

    Unknown conversions expand to nothing and take no argument. A lone
    ``%`` at the end of the format raises ValueError.
    """
    if fmt is None:
        raise ValueError("format string is None")
    remaining = list(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def ft_printf(fmt: str, *args, stream: Optional[TextIO] = None) -> int:
    """Format like :func:`format_printf`, write the result and return its length."""
    text = format_printf(fmt, *args)
    _stream(stream).write(text)
    return len(text)