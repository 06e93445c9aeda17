"""String searching, comparison, slicing and bounded copying helpers."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c)


def _check_size(size: int, what: str) -> None:
    if size < 0:
        raise ValueError(f"{what}: negative size {size}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference at the first mismatch, the end of a
    string counting as code 0, or 0 if the compared parts are equal.
    """
    _check_size(n, "strncmp")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Return the index of ``needle`` within the first ``n`` characters of ``haystack``.

    An empty needle is found at index 0; otherwise None when absent.
    """
    _check_size(n, "strnstr")
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    if start < 0:
        raise ValueError(f"substr: negative start {start}")
    _check_size(length, "substr")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Apply ``func(index, item)`` to each item of ``chars`` in place.

    A non-None result replaces the item; None leaves it unchanged.
    """
    for index, item in enumerate(chars):
        result = func(index, item)
        if result is not None:
            chars[index] = result


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the resulting text and the length of ``src``. A size of 0
    leaves ``dest`` untouched.
    """
    _check_size(size, "strlcpy")
    if size == 0:
        return dest, len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters, NUL included.

    Returns the resulting text and the length the full result would
    have had: ``min(size, len(dest)) + len(src)``, or ``len(src)`` when
    the size is 0.
    """
    _check_size(size, "strlcat")
    if size == 0:
        return dest, len(src)
    dest_len = len(dest)
    if size <= dest_len:
        return dest, size + len(src)
    room = size - 1 - dest_len
    return dest + src[:room], dest_len + len(src)