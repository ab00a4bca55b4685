"""Padding and sizing helpers shared by the conversion routines."""

from __future__ import annotations

import operator
from typing import Union

from miniprintf.spec import Flag, Size, Spec

CharLike = Union[str, int]


def _code(char: CharLike) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError("expected a single character")
        return ord(char)
    return operator.index(char)


def _precision(spec: Spec) -> int:
    return -1 if spec.precision is None else spec.precision


def is_printable(char: CharLike) -> bool:
    """True for printable ASCII (space through tilde)."""
    return 32 <= _code(char) < 127


def hex_escape(char: CharLike) -> str:
    """Return the ``\\xHH`` escape for a byte value.

    Bytes of 128 and above are taken as signed and negated, as a signed
    ``char`` would be.
    """
    code = _code(char)
    if not 0 <= code <= 255:
        raise ValueError(f"byte value out of range: {code}")
    if code >= 128:
        code = 256 - code
    return f"\\x{code:02X}"


def convert_signed(value: int, size: Size) -> int:
    """Wrap ``value`` to a signed integer of the width ``size`` selects."""
    bits = {Size.LONG: 64, Size.SHORT: 16}.get(size, 32)
    span = 1 << bits
    value = operator.index(value) % span
    return value - span if value >= span >> 1 else value


def convert_unsigned(value: int, size: Size) -> int:
    """Wrap ``value`` to an unsigned integer of the width ``size`` selects."""
    bits = {Size.LONG: 64, Size.SHORT: 16}.get(size, 32)
    return operator.index(value) % (1 << bits)


def pad_char(char: str, spec: Spec) -> str:
    """Pad a single character to the field width."""
    if spec.width <= 1:
        return char
    padding = ("0" if spec.flags & Flag.ZERO else " ") * (spec.width - 1)
    if spec.flags & Flag.MINUS:
        return char + padding
    return padding + char


def pad_signed(digits: str, negative: bool, spec: Spec) -> str:
    """Lay out the decimal ``digits`` of a signed number with sign and padding."""
    flags = spec.flags
    prec = _precision(spec)
    width = spec.width
    pad = "0" if flags & Flag.ZERO and not flags & Flag.MINUS else " "

    if negative:
        sign = "-"
    elif flags & Flag.PLUS:
        sign = "+"
    elif flags & Flag.SPACE:
        sign = " "
    else:
        sign = ""

    if prec == 0 and digits == "0":
        if width == 0:
            return ""
        digits, pad = " ", " "
    if 0 < prec < len(digits):
        pad = " "
    if prec > len(digits):
        digits = digits.rjust(prec, "0")

    length = len(digits) + len(sign)
    if width > length:
        fill = pad * (width - length)
        if pad == "0":
            return sign + fill + digits
        if flags & Flag.MINUS:
            return sign + digits + fill
        return fill + sign + digits
    return sign + digits


def pad_unsigned(digits: str, spec: Spec) -> str:
    """Lay out an unsigned number (any prefix already included) with padding."""
    flags = spec.flags
    prec = _precision(spec)
    if prec == 0 and digits == "0":
        return ""
    if prec > len(digits):
        digits = digits.rjust(prec, "0")
    pad = "0" if flags & Flag.ZERO and not flags & Flag.MINUS else " "
    if spec.width > len(digits):
        fill = pad * (spec.width - len(digits))
        if flags & Flag.MINUS:
            return digits + fill
        return fill + digits
    return digits


def pad_pointer(digits: str, spec: Spec) -> str:
    """Lay out the hexadecimal digits of an address with ``0x`` and padding."""
    flags = spec.flags
    pad = "0" if flags & Flag.ZERO and not flags & Flag.MINUS else " "
    if flags & Flag.PLUS:
        sign = "+"
    elif flags & Flag.SPACE:
        sign = " "
    else:
        sign = ""

    body = "0x" + digits
    length = len(body) + len(sign)
    if spec.width > length:
        fill = pad * (spec.width - length)
        if pad == "0":
            return sign + "0x" + fill + digits
        if flags & Flag.MINUS:
            return sign + body + fill
        return fill + sign + body
    return sign + body