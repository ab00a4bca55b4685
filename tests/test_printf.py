import io

import pytest

from miniprintf.printf import FormatError, main, printf, sprintf


def test_unsigned_matches_decimal():
    assert sprintf("Unsigned:[%u]\n", 2147484671) == "Unsigned:[%d]\n" % 2147484671


def test_pointer():
    addr = 0x7FFE637541F0
    assert sprintf("Address:[%p]\n", addr) == "Address:[%s]\n" % hex(addr)


def test_percent():
    assert sprintf("Percent:[%%]\n") == "Percent:[%%]\n" % ()


def test_star_width_consumes_argument():
    assert sprintf("%*d", 5, 42) == "%5d" % 42


def test_short_size_wraps():
    assert sprintf("%hd", 65535) == sprintf("%d", -1)


@pytest.mark.parametrize("fmt", ["%y", "% y", "%5y", "abc %q def"])
def test_unknown_conversion_is_echoed(fmt):
    assert sprintf(fmt) == fmt


def test_unknown_with_width_after_space_flag():
    assert sprintf("%- 5y") == "% 5y"


@pytest.mark.parametrize("fmt", ["abc%", "%l", "%-"])
def test_format_ending_in_conversion_raises(fmt):
    with pytest.raises(FormatError):
        sprintf(fmt)


def test_none_format_raises():
    with pytest.raises(FormatError):
        sprintf(None)


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        sprintf("Unknown:[%r]\n")


def test_missing_star_argument_raises():
    with pytest.raises(FormatError):
        sprintf("%*d")


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("String:[%s] %d\n", "x", 7, file=buf)
    assert buf.getvalue() == sprintf("String:[%s] %d\n", "x", 7)
    assert count == len(buf.getvalue())


def test_printf_writes_nothing_on_error():
    buf = io.StringIO()
    with pytest.raises(FormatError):
        printf("before %d", file=buf)
    assert buf.getvalue() == ""


def test_main_lines_match_reference(capsys):
    assert main() == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[-1] == "Unknown:[%r]"
    body = lines[:-1]
    assert len(body) % 2 == 0
    for ours, reference in zip(body[::2], body[1::2]):
        assert ours == reference
    assert captured.err.startswith("error:")