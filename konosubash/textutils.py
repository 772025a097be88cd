"""Character classification, number conversion and string search helpers.

The helpers follow C string conventions. A NUL character ends a string, and
comparisons work on character codes.
"""

from __future__ import annotations

_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: str | int) -> int:
    """Return the code of a single character given as a string or an int."""
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def _as_c_string(s: str) -> str:
    """Cut a string at its first NUL, as a C string would end there."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _wrap_int(value: int) -> int:
    """Wrap a value into the range of a 32-bit signed integer."""
    value &= _INT_MASK
    return value - (1 << _INT_BITS) if value & _INT_SIGN else value


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return ord(" ") <= _code(c) <= 126


def to_upper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; leave anything else as is."""
    return chr(_code(c) - 32) if "a" <= c <= "z" else c


def to_lower(c: str) -> str:
    """Lower-case an ASCII upper-case letter; leave anything else as is."""
    return chr(_code(c) + 32) if "A" <= c <= "Z" else c


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping like a 32-bit int.

    Leading whitespace is skipped, one optional sign is read, and digits are
    consumed until the first non-digit. Text with no digits gives 0.
    """
    text = _as_c_string(text)
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and is_digit(text[pos]):
        result = result * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int(_wrap_int(result) * sign)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    return str(n)


def str_compare(s1: str, s2: str) -> int:
    """Compare two strings; the sign tells their order.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0.
    """
    return strn_compare(s1, s2, None)


def strn_compare(s1: str, s2: str, n: int | None) -> int:
    """Compare at most ``n`` characters of two strings (all if ``n`` is None)."""
    a = _as_c_string(s1)
    b = _as_c_string(s2)
    limit = max(len(a), len(b)) if n is None else min(n, max(len(a), len(b)))
    for pos in range(limit):
        ca = ord(a[pos]) if pos < len(a) else 0
        cb = ord(b[pos]) if pos < len(b) else 0
        if ca != cb:
            return ca - cb
    return 0


def find_char(s: str, c: str) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    s = _as_c_string(s)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def find_last_char(s: str, c: str) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the end of the string.
    """
    s = _as_c_string(s)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def find_substring(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` in the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. A match must fit entirely inside
    the first ``length`` characters.
    """
    big = _as_c_string(big)
    little = _as_c_string(little)
    if not little:
        return 0
    remaining = length
    for start in range(len(big)):
        if remaining <= 0:
            break
        if len(little) <= remaining and big.startswith(little, start):
            return start
        remaining -= 1
    return None