"""A plain formatter without flags, width, precision or length modifiers."""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, TextIO, Union

from miniprintf.numbers import (
    format_binary,
    format_hex,
    format_hex_upper,
    format_int,
    format_octal,
    format_pointer,
    format_unsigned,
)
from miniprintf.printf import FormatError
from miniprintf.spec import Spec
from miniprintf.text import format_char, format_reverse, format_rot13, format_string

_PLAIN = Spec()
_NULL = "(null)"


def _escape_all(value: Optional[Union[str, bytes, bytearray]]) -> str:
    """Show printable ASCII as is and other bytes as ``\\x`` codes.

    Bytes of 128 and above are taken as negative signed values, whose
    32-bit unsigned form is printed after a ``0``.
    """
    if value is None:
        value = _NULL
    data = value.encode("utf-8") if isinstance(value, str) else bytes(value)
    parts = []
    for byte in data:
        if 32 <= byte < 127:
            parts.append(chr(byte))
            continue
        signed = byte - 256 if byte >= 128 else byte
        lead = "0" if signed < 16 else ""
        parts.append(f"\\x{lead}{signed & 0xFFFFFFFF:X}")
    return "".join(parts)


_CONVERSIONS: Dict[str, Callable[[object], str]] = {
    "s": lambda v: format_string(v, _PLAIN),
    "c": lambda v: format_char(v, _PLAIN),
    "i": lambda v: format_int(v, _PLAIN),
    "d": lambda v: format_int(v, _PLAIN),
    "r": lambda v: format_reverse(_NULL if v is None else v, _PLAIN),
    "R": lambda v: format_rot13(_NULL if v is None else v, _PLAIN),
    "b": lambda v: format_binary(v, _PLAIN),
    "u": lambda v: format_unsigned(v, _PLAIN),
    "o": lambda v: format_octal(v, _PLAIN),
    "x": lambda v: format_hex(v, _PLAIN),
    "X": lambda v: format_hex_upper(v, _PLAIN),
    "S": _escape_all,
    "p": lambda v: format_pointer(v, _PLAIN),
}


def simple_format(fmt: str, *args: object) -> str:
    """Render ``fmt`` with ``args`` using two-character conversions only.

    A ``%`` not followed by a known conversion character is copied as is.
    Raises :class:`FormatError` for a missing format, a format of just
    ``%``, or too few arguments.
    """
    if fmt is None or fmt == "%":
        raise FormatError("invalid format string")
    arg_iter = iter(args)
    out: List[str] = []
    pos = 0
    while pos < len(fmt):
        conv = fmt[pos + 1] if fmt[pos] == "%" and pos + 1 < len(fmt) else ""
        if conv == "%":
            out.append("%")
            pos += 2
        elif conv and conv in _CONVERSIONS:
            try:
                value = next(arg_iter)
            except StopIteration:
                raise FormatError(f"missing argument for '%{conv}'") from None
            out.append(_CONVERSIONS[conv](value))
            pos += 2
        else:
            out.append(fmt[pos])
            pos += 1
    return "".join(out)


def simple_printf(fmt: str, *args: object, file: Optional[TextIO] = None) -> int:
    """Render ``fmt`` to ``file`` (standard output by default); return the character count."""
    text = simple_format(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)