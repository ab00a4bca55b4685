# miniprintf

A small printf-style formatter for integers and strings. `sprintf` returns
the rendered text, and `printf` writes it to a stream and returns the number
of characters it wrote.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from miniprintf.printf import sprintf, printf

sprintf("Negative:[%d]", -762534)       # 'Negative:[-762534]'
sprintf("[%-5d|%05d]", 42, 42)          # '[42   |00042]'
sprintf("%#x %X %o", 255, 255, 8)       # '0xff FF 10'
sprintf("%b", 5)                        # '101'
sprintf("%r", "abc")                    # 'cba'
sprintf("%R", "Hello")                  # 'Uryyb'
sprintf("%S", "a\nb")                   # 'a\\x0Ab'

count = printf("Hello %s\n", "world")   # writes to stdout, returns 12
```

`printf` takes a `file=` keyword to write somewhere other than standard
output.

### Conversions

| Spec | Meaning |
|------|---------|
| `%c` | a character (a one-character string, or an integer taken as a byte) |
| `%s` | a string, honouring width, precision and `-`; `None` gives `(null)` |
| `%%` | a literal percent sign; takes no argument |
| `%d`, `%i` | signed integer |
| `%u` | unsigned integer |
| `%o` | octal (`#` adds a leading `0`) |
| `%x`, `%X` | hexadecimal (`#` adds `0x` / `0X`) |
| `%b` | unsigned 32-bit binary; flags and width are ignored |
| `%p` | address as `0x…`, or `(nil)` for `None` or zero |
| `%S` | string with non-printable bytes shown as `\xHH` |
| `%r` | string reversed |
| `%R` | string in ROT13 |

The flags are `-`, `+`, `0`, `#` and space. Width and precision may be
given as `*`, in which case they are taken from the arguments. The length
modifiers `l` and `h` wrap integers to 64 or 16 bits; without one they wrap
to 32 bits.

An unknown conversion is written out with its percent sign instead of
raising. `miniprintf.printf.FormatError` (a `ValueError`) is raised when the
format is `None`, when it ends inside a conversion, or when there are fewer
arguments than conversions.

The building blocks are public too: `miniprintf.spec.parse_spec` parses a
conversion into a `Spec` (with `Flag` and `Size`), and the `format_*`
functions in `miniprintf.numbers` and `miniprintf.text` render a single
value for a given `Spec`.

### Simple formatter

`miniprintf.simple` holds a plainer formatter with the same conversion
letters and no flags, width, precision or length modifiers. A `%` followed
by anything else is copied as it stands, and in `%S` each non-printable byte
is written as `\x` followed by its code in hexadecimal.

```python
from miniprintf.simple import simple_format, simple_printf

simple_format("%d and %x", 42, 255)     # '42 and ff'
simple_printf("%s\n", "hi")             # writes 'hi\n', returns 3
```

Both raise `FormatError` for a `None` format, a format that is just `%`, or
too few arguments.

## Demo

```
miniprintf-demo
```

prints a set of sample lines, each followed by the same line rendered with
Python's `%` operator for comparison. The last sample, `%r` with no
argument, reports its error on standard error.

## What it does not do

There are no floating-point conversions (`%f`, `%e`, `%g`), no wide
characters and no positional arguments.