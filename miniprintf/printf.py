"""The formatting engine: ``sprintf``, ``printf`` and a demonstration entry point."""

from __future__ import annotations

import sys
from typing import Callable, Dict, Iterator, List, Optional, Sequence, TextIO

from miniprintf.numbers import (
    format_binary,
    format_hex,
    format_hex_upper,
    format_int,
    format_octal,
    format_pointer,
    format_unsigned,
)
from miniprintf.spec import Spec, parse_spec
from miniprintf.text import (
    format_char,
    format_non_printable,
    format_percent,
    format_reverse,
    format_rot13,
    format_string,
)


class FormatError(ValueError):
    """Raised when a format string cannot be rendered."""


Converter = Callable[[object, Spec], str]

_CONVERSIONS: Dict[str, Converter] = {
    "c": format_char,
    "s": format_string,
    "%": format_percent,
    "i": format_int,
    "d": format_int,
    "b": format_binary,
    "u": format_unsigned,
    "o": format_octal,
    "x": format_hex,
    "X": format_hex_upper,
    "p": format_pointer,
    "S": format_non_printable,
    "r": format_reverse,
    "R": format_rot13,
}

_NO_ARGUMENT = frozenset("%")


def _next_arg(args: Iterator[object], conv: str) -> object:
    try:
        return next(args)
    except StopIteration:
        raise FormatError(f"missing argument for '%{conv}'") from None


def _unknown(fmt: str, pos: int, spec: Spec, out: List[str]) -> int:
    """Emit an unrecognised conversion; return the position to resume from."""
    out.append("%")
    if fmt[pos - 1] == " ":
        out.append(" ")
    elif spec.width:
        back = pos - 1
        while fmt[back] not in " %":
            back -= 1
        if fmt[back] == " ":
            back -= 1
        return back + 1
    out.append(fmt[pos])
    return pos + 1


def sprintf(fmt: str, *args: object) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    Raises :class:`FormatError` if ``fmt`` is ``None``, ends inside a
    conversion, or needs more arguments than were given.
    """
    if fmt is None:
        raise FormatError("format string is missing")
    arg_iter = iter(args)
    out: List[str] = []
    pos = 0
    while pos < len(fmt):
        ch = fmt[pos]
        if ch != "%":
            out.append(ch)
            pos += 1
            continue
        try:
            spec, pos = parse_spec(fmt, pos + 1, arg_iter)
        except ValueError as err:
            raise FormatError(str(err)) from None
        if pos >= len(fmt):
            raise FormatError("format string ends inside a conversion")
        conv = fmt[pos]
        converter = _CONVERSIONS.get(conv)
        if converter is None:
            pos = _unknown(fmt, pos, spec, out)
            continue
        value = None if conv in _NO_ARGUMENT else _next_arg(arg_iter, conv)
        out.append(converter(value, spec))
        pos += 1
    return "".join(out)


def printf(fmt: str, *args: object, file: Optional[TextIO] = None) -> int:
    """Render ``fmt`` with ``args`` to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print each demonstration line followed by a reference rendering."""
    out = sys.stdout
    sentence = "Let's try to printf a simple sentence.\n"
    length = printf(sentence, file=out)
    out.write(sentence)
    ref_length = len(sentence)

    ui = (2**31 - 1) + 1024
    addr = 0x7FFE637541F0
    demos = [
        ("Length:[%d, %i]\n", (length, length), "Length:[%d, %i]\n" % (ref_length, ref_length)),
        ("Negative:[%d]\n", (-762534,), "Negative:[%d]\n" % -762534),
        ("Unsigned:[%u]\n", (ui,), "Unsigned:[%d]\n" % ui),
        ("Unsigned octal:[%o]\n", (ui,), "Unsigned octal:[%o]\n" % ui),
        ("Unsigned hexadecimal:[%x, %X]\n", (ui, ui), "Unsigned hexadecimal:[%x, %X]\n" % (ui, ui)),
        ("Character:[%c]\n", ("H",), "Character:[%c]\n" % "H"),
        ("String:[%s]\n", ("I am a string !",), "String:[%s]\n" % "I am a string !"),
        ("Address:[%p]\n", (addr,), "Address:[%#x]\n" % addr),
    ]
    for fmt, args, reference in demos:
        printf(fmt, *args, file=out)
        out.write(reference)

    length = printf("Percent:[%%]\n", file=out)
    reference = "Percent:[%%]\n" % ()
    out.write(reference)
    printf("Len:[%d]\n", length, file=out)
    out.write("Len:[%d]\n" % len(reference))

    try:
        printf("Unknown:[%r]\n", file=out)
    except FormatError as err:
        print(f"error: {err}", file=sys.stderr)
    out.write("Unknown:[%r]\n")
    return 0