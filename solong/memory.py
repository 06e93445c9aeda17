"""Byte-buffer operations on bytearrays."""

from __future__ import annotations

from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


def _check_span(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"{what}: negative length {n}")
    if n > length:
        raise ValueError(f"{what}: length {n} exceeds buffer of {length} bytes")


def memset(buffer: bytearray, value: int, num: int) -> bytearray:
    """Fill the first ``num`` bytes of ``buffer`` with ``value`` (taken mod 256)."""
    _check_span(len(buffer), num, "memset")
    buffer[:num] = bytes([value & 0xFF]) * num
    return buffer


def bzero(buffer: bytearray, num: int) -> bytearray:
    """Zero the first ``num`` bytes of ``buffer``."""
    return memset(buffer, 0, num)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("calloc: negative count or size")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: BytesLike, size: int) -> bytearray:
    """Copy ``size`` bytes from ``src`` to the start of ``dest``."""
    _check_span(len(dest), size, "memcpy")
    _check_span(len(src), size, "memcpy")
    dest[:size] = bytes(src[:size])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer``, safe for overlapping regions."""
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("memmove: negative offset")
    _check_span(len(buffer), dest_offset + n, "memmove")
    _check_span(len(buffer), src_offset + n, "memmove")
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: BytesLike, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes."""
    _check_span(len(data), n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: BytesLike, b: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch."""
    _check_span(len(a), n, "memcmp")
    _check_span(len(b), n, "memcmp")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0