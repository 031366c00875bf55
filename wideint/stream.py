"""Stream-style text input and output of 128-bit integers."""

from __future__ import annotations

import enum
from itertools import takewhile

from wideint.formatting import to_chars

_DIGITS = "0123456789abcdef"

_INT128_MIN = -(1 << 127)
_INT128_MAX = (1 << 127) - 1
_UINT128_MAX = (1 << 128) - 1


class NumberBase(enum.IntEnum):
    """The radix used when reading or writing a value."""

    OCT = 8
    DEC = 10
    HEX = 16


def format_value(value: int, base: int = NumberBase.DEC, uppercase: bool = False) -> str:
    """Write ``value`` as a stream would: octal gets ``0``, hex ``0x`` or ``0X``."""
    radix = NumberBase(base)
    digits = to_chars(value, int(radix), uppercase)
    if radix is NumberBase.OCT:
        return "0" + digits
    if radix is NumberBase.HEX:
        return ("0X" if uppercase else "0x") + digits
    return digits


def _valid_digits(base: int) -> frozenset[str]:
    allowed = _DIGITS[:base]
    return frozenset(allowed + allowed.upper())


def _from_chars(token: str, base: int, signed: bool) -> int:
    negative = token.startswith("-")
    if negative:
        if not signed:
            return 0
        token = token[1:]

    allowed = _valid_digits(base)
    digits = "".join(takewhile(allowed.__contains__, token))
    if not digits:
        return 0

    magnitude = int(digits, base)
    value = -magnitude if negative else magnitude
    low, high = (_INT128_MIN, _INT128_MAX) if signed else (0, _UINT128_MAX)
    if not low <= value <= high:
        return 0
    return value


def parse_value(text: str, base: int = NumberBase.DEC, signed: bool = False) -> int:
    """Read the first whitespace-separated token of ``text`` as an integer.

    As with stream extraction, octal input may carry a leading ``0`` and
    hex input a leading ``0x``. Digits are read up to the first character
    that is not one; input with no digits, a sign the type cannot hold, or
    a value out of range reads as 0.
    """
    radix = NumberBase(base)
    tokens = text.split()
    token = tokens[0] if tokens else ""
    if token.startswith("0"):
        if radix is NumberBase.OCT:
            token = token[1:]
        elif radix is NumberBase.HEX:
            token = token[2:]
    return _from_chars(token, int(radix), signed)