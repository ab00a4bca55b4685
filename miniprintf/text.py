"""Character and string conversions: %c, %s, %%, %S, %r and %R."""

from __future__ import annotations

import operator
from typing import Optional, Union

from miniprintf.render import hex_escape, is_printable, pad_char
from miniprintf.spec import Flag, Spec

TextLike = Union[str, bytes, bytearray]

_PERCENT_SIGN = "%"

_ROT13 = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    "NOPQRSTUVWXYZABCDEFGHIJKLMnopqrstuvwxyzabcdefghijklm",
)


def _as_text(value: TextLike) -> str:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("latin-1")
    if isinstance(value, str):
        return value
    raise TypeError(f"expected a string, got {type(value).__name__}")


def _as_bytes(value: TextLike) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"expected a string, got {type(value).__name__}")


def _precision(spec: Spec) -> int:
    return -1 if spec.precision is None else spec.precision


def format_char(value: Union[str, int], spec: Spec) -> str:
    """Format a single character (``%c``), padded to the field width.

    An integer argument is truncated to a byte, as a ``char`` would be.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("expected a single character")
        char = value
    else:
        char = chr(operator.index(value) & 0xFF)
    return pad_char(char, spec)


def format_string(value: Optional[TextLike], spec: Spec) -> str:
    """Format a string (``%s``) honouring precision, width and ``-``.

    A missing string prints ``(null)``, or six spaces when the precision is
    at least six.
    """
    prec = _precision(spec)
    if value is None:
        text = "      " if prec >= 6 else "(null)"
    else:
        text = _as_text(value)
    if 0 <= prec < len(text):
        text = text[:prec]
    if spec.width > len(text):
        if spec.flags & Flag.MINUS:
            return text.ljust(spec.width)
        return text.rjust(spec.width)
    return text


def format_percent(value: object, spec: Spec) -> str:
    """Format a literal percent sign (``%%``).

    The sign takes no argument and is never padded: flags, width and
    precision have no effect on it.
    """
    del value, spec
    return _PERCENT_SIGN


def format_non_printable(value: Optional[TextLike], spec: Spec) -> str:
    """Format a string (``%S``) with non-printable bytes shown as ``\\xHH``.

    Text is taken as UTF-8 bytes. Flags, width and precision are ignored.
    """
    if value is None:
        return "(null)"
    return "".join(
        chr(byte) if is_printable(byte) else hex_escape(byte)
        for byte in _as_bytes(value)
    )


def format_reverse(value: Optional[TextLike], spec: Spec) -> str:
    """Format a string reversed (``%r``); a missing string prints ``(lluN)``."""
    text = ")Null(" if value is None else _as_text(value)
    return text[::-1]


def format_rot13(value: Optional[TextLike], spec: Spec) -> str:
    """Format a string in ROT13 (``%R``); a missing string prints ``(NULL)``."""
    text = "(AHYY)" if value is None else _as_text(value)
    return text.translate(_ROT13)