"""Parsing of conversion specifications: flags, width, precision and size."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


class Flag(enum.IntFlag):
    """Flag characters that may follow a ``%``."""

    MINUS = 1
    PLUS = 2
    ZERO = 4
    HASH = 8
    SPACE = 16


class Size(enum.IntEnum):
    """Length modifier applied to integer conversions."""

    NONE = 0
    SHORT = 1
    LONG = 2


_FLAG_CHARS = {
    "-": Flag.MINUS,
    "+": Flag.PLUS,
    "0": Flag.ZERO,
    "#": Flag.HASH,
    " ": Flag.SPACE,
}

_SIZE_CHARS = {"l": Size.LONG, "h": Size.SHORT}

_DIGITS = "0123456789"


@dataclass(frozen=True)
class Spec:
    """A parsed conversion specification.

    ``precision`` is ``None`` when no precision was given; a negative value
    supplied through ``*`` behaves the same way.
    """

    flags: Flag = Flag(0)
    width: int = 0
    precision: Optional[int] = None
    size: Size = Size.NONE


def _take_star(args: Optional[Iterator[object]]) -> int:
    if args is None:
        raise ValueError("missing argument for '*'")
    try:
        value = next(args)
    except StopIteration:
        raise ValueError("missing argument for '*'") from None
    return operator.index(value)


def _read_amount(fmt: str, pos: int, args: Optional[Iterator[object]]) -> Tuple[int, int]:
    value = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch in _DIGITS:
            value = value * 10 + int(ch)
            pos += 1
        elif ch == "*":
            return _take_star(args), pos + 1
        else:
            break
    return value, pos


def parse_flags(fmt: str, pos: int) -> Tuple[Flag, int]:
    """Read flag characters starting at ``pos``; return the flags and the next position."""
    flags = Flag(0)
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        flags |= _FLAG_CHARS[fmt[pos]]
        pos += 1
    return flags, pos


def parse_width(fmt: str, pos: int, args: Optional[Iterator[object]]) -> Tuple[int, int]:
    """Read a field width (digits or ``*``); return it and the next position."""
    return _read_amount(fmt, pos, args)


def parse_precision(
    fmt: str, pos: int, args: Optional[Iterator[object]]
) -> Tuple[Optional[int], int]:
    """Read ``.precision`` if present; return it (or ``None``) and the next position."""
    if pos >= len(fmt) or fmt[pos] != ".":
        return None, pos
    return _read_amount(fmt, pos + 1, args)


def parse_size(fmt: str, pos: int) -> Tuple[Size, int]:
    """Read an ``l`` or ``h`` length modifier if present."""
    if pos < len(fmt) and fmt[pos] in _SIZE_CHARS:
        return _SIZE_CHARS[fmt[pos]], pos + 1
    return Size.NONE, pos


def parse_spec(
    fmt: str, pos: int, args: Optional[Iterator[object]]
) -> Tuple[Spec, int]:
    """Parse everything between ``%`` and the conversion character.

    ``pos`` is the index just after ``%``. The returned position is that of
    the conversion character, or ``len(fmt)`` if the string ended first.
    """
    flags, pos = parse_flags(fmt, pos)
    width, pos = parse_width(fmt, pos, args)
    precision, pos = parse_precision(fmt, pos, args)
    size, pos = parse_size(fmt, pos)
    return Spec(flags=flags, width=width, precision=precision, size=size), pos