import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonval.strconv import dtostr, strtod

finite = st.floats(allow_nan=False, allow_infinity=False)


@pytest.mark.parametrize("text", ["1.5", "-0.25", "3e2", "1E-3", ".5"])
def test_strtod_reads_decimal(text):
    assert strtod(text) == float(text)


def test_strtod_accepts_bytes():
    assert strtod(b"2.5") == 2.5


@pytest.mark.parametrize("text", ["1e400", "-1e999"])
def test_strtod_overflow(text):
    with pytest.raises(OverflowError):
        strtod(text)


@pytest.mark.parametrize("text", ["", "abc", "1.5x", "inf", "nan", "1_0", " 1"])
def test_strtod_rejects_garbage(text):
    with pytest.raises(ValueError):
        strtod(text)


@given(finite)
def test_dtostr_round_trip(value):
    assert float(dtostr(value)) == value


@given(finite)
def test_dtostr_always_looks_real(value):
    out = dtostr(value)
    assert "." in out or "e" in out
    assert "+" not in out
    assert "e0" not in out and "e-0" not in out


@given(finite)
def test_dtostr_reads_back_through_strtod(value):
    assert strtod(dtostr(value)) == value


def test_dtostr_whole_number_gets_fraction():
    assert dtostr(1.0) == "1.0"


def test_dtostr_strips_plus_sign():
    assert dtostr(1e100) == "1e100"


def test_dtostr_strips_exponent_zeros():
    assert dtostr(1e-5, 1) == "1e-5"


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_dtostr_rejects_non_finite(value):
    with pytest.raises(ValueError):
        dtostr(value)