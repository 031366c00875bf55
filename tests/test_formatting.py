import pytest
from hypothesis import given
from hypothesis import strategies as st

from wideint.formatting import to_chars

ANY128 = st.integers(min_value=-(2**127), max_value=2**128 - 1)


def test_unsigned_max():
    assert to_chars(2**128 - 1, 10) == "340282366920938463463374607431768211455"


def test_signed_max():
    assert to_chars(2**127 - 1, 10) == "170141183460469231731687303715884105727"


def test_signed_min():
    assert to_chars(-(2**127), 10) == "-170141183460469231731687303715884105728"


def test_negative_small():
    assert to_chars(-4500, 10) == "-4500"


def test_hex_cases():
    assert to_chars(0xFF, 16) == "ff"
    assert to_chars(0xFF, 16, True) == "FF"


@pytest.mark.parametrize("base", [8, 10, 16])
def test_zero(base):
    assert to_chars(0, base) == "0"


@pytest.mark.parametrize("base", [8, 10, 16])
@given(value=ANY128)
def test_round_trip_through_int(base, value):
    assert int(to_chars(value, base), base) == value


@given(ANY128)
def test_uppercase_only_changes_letters(value):
    assert to_chars(value, 16, True) == to_chars(value, 16).upper()


@given(ANY128)
def test_decimal_ignores_uppercase(value):
    assert to_chars(value, 10, True) == to_chars(value, 10, False)


@given(st.integers(min_value=1, max_value=2**128 - 1))
def test_no_leading_zero(value):
    for base in (8, 10, 16):
        assert not to_chars(value, base).startswith("0")


@pytest.mark.parametrize("base", [2, 0, 36])
def test_unsupported_base(base):
    with pytest.raises(ValueError):
        to_chars(10, base)


@pytest.mark.parametrize("value", [2**128, -(2**127) - 1])
def test_out_of_range(value):
    with pytest.raises(OverflowError):
        to_chars(value, 10)