"""Rendering 128-bit integers as digit strings."""

from __future__ import annotations

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"
_SUPPORTED_BASES = (8, 10, 16)

_INT128_MIN = -(1 << 127)
_UINT128_MAX = (1 << 128) - 1


def _magnitude_digits(value: int, base: int, uppercase: bool) -> str:
    if value == 0:
        return "0"
    table = _UPPER_DIGITS if uppercase else _LOWER_DIGITS
    digits = []
    while value:
        value, digit = divmod(value, base)
        digits.append(table[digit])
    return "".join(reversed(digits))


def to_chars(value: int, base: int = 10, uppercase: bool = False) -> str:
    """Return the digits of ``value`` in base 8, 10 or 16.

    ``value`` may be any signed or unsigned 128-bit integer; negative
    values get a leading minus sign.
    """
    if base not in _SUPPORTED_BASES:
        raise ValueError(f"unsupported base {base!r}; use 8, 10 or 16")
    if not _INT128_MIN <= value <= _UINT128_MAX:
        raise OverflowError(f"{value} is outside the 128-bit range")
    if value < 0:
        return "-" + _magnitude_digits(-value, base, uppercase)
    return _magnitude_digits(value, base, uppercase)