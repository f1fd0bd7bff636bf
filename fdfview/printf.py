"""Formatted output with a small set of printf-style conversions.

Supported conversions: %c, %s, %p, %d, %i, %u, %x, %X and %%.
Any other character after '%' produces no output and consumes no argument.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Iterator

_UINT32 = 2**32
_INT32_MIN = -(2**31)
_UINT64 = 2**64


def _signed32(value: int) -> int:
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    address %= _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _decimal(value: Any) -> str:
    return str(_signed32(operator.index(value)))


def _unsigned(value: Any) -> str:
    return str(operator.index(value) % _UINT32)


def _hex_lower(value: Any) -> str:
    return format(operator.index(value) % _UINT32, "x")


def _hex_upper(value: Any) -> str:
    return format(operator.index(value) % _UINT32, "X")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    converter = _CONVERSIONS.get(spec)
    if converter is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    return converter(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted arguments."""
    values = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        out.append(_convert(spec, values))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)