"""String building helpers: splitting, joining, bounded copies and trimming."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from konosubash.textutils import find_substring


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping the empty pieces between separators."""
    return [word for word in s.split(sep) if word]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the copied text and the full length of ``src``; the copy was
    truncated when that length is ``size`` or more.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dst`` already fills the buffer it is left alone and the length
    reported is ``size`` plus the length of ``src``.
    """
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of ``s`` in place with ``func(index, char)``."""
    for index, char in enumerate(s):
        s[index] = func(index, char)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Take up to ``length`` characters of ``s`` from ``start``.

    The tail of ``s`` from ``start`` is located by searching for it from the
    beginning of ``s``, so a tail that also occurs earlier is taken from its
    first occurrence. A ``start`` at or past the end gives an empty string.
    """
    if start >= len(s) or not s:
        return ""
    begin = find_substring(s, s[start:], len(s))
    if begin is None:
        begin = start
    return s[begin : begin + length]