"""Formatted output with a small printf dialect, and raw descriptor writers.

Supported conversions: ``%c %s %p %d %i %u %x %X %%``. Any other character
after ``%`` is dropped together with the ``%``; a ``%`` ending the format is
written as is. Integers follow 32-bit C semantics.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import Any

STDOUT_FILENO = 1

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MASK = (1 << 32) - 1
_INT_SIGN = 1 << 31
_POINTER_MASK = (1 << 64) - 1


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd``; return the number written."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value & _INT_SIGN else value


def _base_is_valid(base: str) -> bool:
    if len(base) <= 1:
        return False
    if "+" in base or "-" in base:
        return False
    return len(set(base)) == len(base)


def format_unsigned_base(nbr: int, base: str) -> str:
    """Digits of the non-negative ``nbr`` written in ``base``.

    A base shorter than two characters, holding a sign or a repeated
    character is not usable, and gives an empty string.
    """
    if nbr < 0:
        raise ValueError(f"expected a non-negative number, got {nbr}")
    if not _base_is_valid(base):
        return ""
    radix = len(base)
    digits = []
    while True:
        nbr, remainder = divmod(nbr, radix)
        digits.append(base[remainder])
        if nbr == 0:
            break
    return "".join(reversed(digits))


def format_pointer(ptr: int | None) -> str:
    """An address as ``0x`` and lower-case hex, or ``(nil)`` for a null one."""
    if not ptr:
        return "(nil)"
    return "0x" + format_unsigned_base(ptr & _POINTER_MASK, HEX_LOWER)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for format conversion %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return format_pointer(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    base = {"u": DECIMAL, "x": HEX_LOWER, "X": HEX_UPPER}[spec]
    return format_unsigned_base(int(value) & _UINT_MASK, base)


def format_printf(fmt: str, *args: Any) -> str:
    """The text that ``printf(fmt, *args)`` would write.

    Raises TypeError when the format asks for more arguments than given.
    """
    values = iter(args)
    out = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        out.append("%" if spec is None else _convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the bytes written."""
    data = _encode(format_printf(fmt, *args))
    try:
        sys.stdout.flush()
    except (OSError, ValueError, AttributeError):
        pass
    return _write_all(STDOUT_FILENO, data)


def put_char_fd(c: str, fd: int) -> None:
    """Write one character to ``fd``."""
    _write_all(fd, _encode(_format_char(c)))


def put_str_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; None writes nothing."""
    if s:
        _write_all(fd, _encode(s))


def put_endl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` and a newline to ``fd``."""
    _write_all(fd, _encode((s or "") + "\n"))


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of ``n`` to ``fd``."""
    _write_all(fd, _encode(str(n)))