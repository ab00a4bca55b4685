"""Integer conversions: signed and unsigned decimal, binary, octal, hex and pointers."""

from __future__ import annotations

import operator
from typing import Optional

from miniprintf.render import (
    convert_signed,
    convert_unsigned,
    pad_pointer,
    pad_signed,
    pad_unsigned,
)
from miniprintf.spec import Flag, Size, Spec

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


def _digits(value: int, base: int, alphabet: str = _UPPER_HEX) -> str:
    """Render a non-negative integer in ``base`` using ``alphabet``."""
    if value == 0:
        return alphabet[0]
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(alphabet[rem])
    return "".join(reversed(out))


def format_int(value: int, spec: Spec) -> str:
    """Format a signed decimal integer (``%d`` and ``%i``)."""
    number = convert_signed(operator.index(value), spec.size)
    return pad_signed(_digits(abs(number), 10), number < 0, spec)


def format_binary(value: int, spec: Spec) -> str:
    """Format an unsigned 32-bit integer in binary (``%b``).

    Flags, width, precision and size are ignored.
    """
    number = convert_unsigned(operator.index(value), Size.NONE)
    return _digits(number, 2)


def format_unsigned(value: int, spec: Spec) -> str:
    """Format an unsigned decimal integer (``%u``)."""
    number = convert_unsigned(operator.index(value), spec.size)
    return pad_unsigned(_digits(number, 10), spec)


def format_octal(value: int, spec: Spec) -> str:
    """Format an unsigned integer in octal (``%o``); ``#`` adds a leading zero."""
    raw = operator.index(value)
    digits = _digits(convert_unsigned(raw, spec.size), 8)
    if spec.flags & Flag.HASH and raw != 0:
        digits = "0" + digits
    return pad_unsigned(digits, spec)


def format_hex(value: int, spec: Spec, upper: bool = False) -> str:
    """Format an unsigned integer in hexadecimal (``%x``, or ``%X`` when ``upper``).

    ``#`` adds a ``0x`` or ``0X`` prefix for a non-zero argument.
    """
    raw = operator.index(value)
    alphabet = _UPPER_HEX if upper else _LOWER_HEX
    digits = _digits(convert_unsigned(raw, spec.size), 16, alphabet)
    if spec.flags & Flag.HASH and raw != 0:
        digits = ("0X" if upper else "0x") + digits
    return pad_unsigned(digits, spec)


def format_hex_upper(value: int, spec: Spec) -> str:
    """Format an unsigned integer in upper-case hexadecimal (``%X``)."""
    return format_hex(value, spec, upper=True)


def format_pointer(address: Optional[int], spec: Spec) -> str:
    """Format an address as ``0x...`` (``%p``); a null address gives ``(nil)``."""
    if address is None:
        return "(nil)"
    number = convert_unsigned(operator.index(address), Size.LONG)
    if number == 0:
        return "(nil)"
    return pad_pointer(_digits(number, 16, _LOWER_HEX), spec)