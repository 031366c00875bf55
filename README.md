# wideint

Text input and output for 128-bit integers in Python.

Python integers are unbounded, so `wideint` works with plain `int` values
and checks that they fit the 128-bit range: signed values run from −2¹²⁷
to 2¹²⁷−1 and unsigned values from 0 to 2¹²⁸−1. It turns such values into
text in base 8, 10 or 16 and reads them back, the way a stream with
`oct`/`dec`/`hex` flags would.

## Installation

```
pip install wideint
```

## Digits

`wideint.formatting.to_chars(value, base, uppercase)` returns the bare
digits of a value in base 8, 10 or 16, with a leading `-` for negative
values. Any other base raises `ValueError`; a value outside the 128-bit
range raises `OverflowError`.

```python
from wideint.formatting import to_chars

assert to_chars(255, 16, False) == "ff"
assert to_chars(255, 16, True) == "FF"
assert to_chars(-4500, 10, False) == "-4500"
assert to_chars((1 << 128) - 1, 10, False) == "340282366920938463463374607431768211455"
```

## Stream-style text

`wideint.stream` has `NumberBase` (`OCT`, `DEC`, `HEX`) and two functions.

`format_value(value, base, uppercase)` writes a value with the radix
prefix a stream adds: `0` for octal, `0x` or `0X` for hex, none for
decimal.

```python
from wideint.stream import NumberBase, format_value

assert format_value(42) == "42"
assert format_value(0xFF, NumberBase.HEX, False) == "0xff"
assert format_value(0xFF, NumberBase.HEX, True) == "0XFF"
assert format_value(4, NumberBase.OCT, False) == "04"
```

`parse_value(text, base, signed)` reads the first whitespace-separated
token of `text`. In octal a leading `0` is skipped, in hex a leading `0x`.
Digits are read up to the first character that is not a digit of the base.
As with a failed stream read, the result is 0 when there are no digits,
when the token has a `-` and `signed` is false, when it has a `+`, or when
the value is out of range for the signed or unsigned type.

```python
from wideint.stream import NumberBase, parse_value

assert parse_value("42") == 42
assert parse_value("0xffff", NumberBase.HEX, False) == 0xFFFF
assert parse_value("01111", NumberBase.OCT, False) == 0o1111
assert parse_value("3F") == 3
assert parse_value("-42", NumberBase.DEC, True) == -42
assert parse_value("-42", NumberBase.DEC, False) == 0
```

## What it does not do

`wideint` has no fixed-width integer type and no wrapping arithmetic,
and it does not split values into machine words. It only formats and
parses plain Python integers that lie in the 128-bit range.