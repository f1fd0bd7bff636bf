"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _code(c: str | int) -> int:
    """Return the character code of a one-character string or an int."""
    if isinstance(c, bool):
        raise TypeError("expected a one-character string or an int")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    raise TypeError("expected a one-character string or an int")


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range, two's complement style."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return code == 32 or 9 <= code <= 13


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0 to 9."""
    return 48 <= _code(c) <= 57


def _is_upper(code: int) -> bool:
    return 65 <= code <= 90


def _is_lower(code: int) -> bool:
    return 97 <= code <= 122


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return _is_upper(code) or _is_lower(code)


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; other values come back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    result = code - 32 if _is_lower(code) else code
    return chr(result) if isinstance(c, str) else result


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; other values come back unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    result = code + 32 if _is_upper(code) else code
    return chr(result) if isinstance(c, str) else result


def atoi(text: str) -> int:
    """Parse the leading integer of ``text``.

    Leading white space is skipped, one optional sign is accepted and digits
    are read up to the first non-digit. Without digits the result is 0.
    The value wraps around in the signed 32-bit range.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and is_digit(text[pos]):
        pos += 1
    digits = text[start:pos]
    if not digits:
        return 0
    return _wrap_int32(sign * _wrap_int32(int(digits)))


def itoa(n: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an int")
    if not _INT_MIN <= n <= _INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)