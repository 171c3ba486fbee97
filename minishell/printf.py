"""A small printf-style formatter supporting c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, TextIO

_CONVERSIONS = "csdxXipu%"
_UINT32 = 2**32
_INT32_HALF = 2**31
_POINTER_SPACE = 2**64


class FormatError(ValueError):
    """Raised when a template is malformed or lacks arguments."""


def _as_int32(value: Any) -> int:
    number = operator.index(value)
    return (number + _INT32_HALF) % _UINT32 - _INT32_HALF


def _as_uint32(value: Any) -> int:
    return operator.index(value) % _UINT32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) % _POINTER_SPACE
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _decimal(value: Any) -> str:
    return str(_as_int32(value))


def _unsigned(value: Any) -> str:
    return str(_as_uint32(value))


def _hex_lower(value: Any) -> str:
    return f"{_as_uint32(value):x}"


def _hex_upper(value: Any) -> str:
    return f"{_as_uint32(value):X}"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _unsigned,
    "x": _hex_lower,
    "X": _hex_upper,
}


def format_string(template: str, *args: Any) -> str:
    """Expand the conversions in ``template`` with ``args``.

    An unknown conversion is copied through unchanged. A ``%`` followed by a
    space or by the end of the template raises FormatError, as does running
    out of arguments.
    """
    if template is None:
        raise FormatError("template must not be None")
    pieces: list[str] = []
    values = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "" or spec == " ":
            raise FormatError("incomplete conversion specification")
        if spec not in _CONVERSIONS:
            pieces.append("%" + spec)
            continue
        if spec == "%":
            pieces.append("%")
            continue
        try:
            value = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        pieces.append(_CONVERTERS[spec](value))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)