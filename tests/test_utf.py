import pytest
from hypothesis import given
from hypothesis import strategies as st

from jsonval.utf import (
    utf8_check_first,
    utf8_check_full,
    utf8_check_string,
    utf8_encode,
    utf8_iterate,
)

non_surrogates = st.integers(min_value=0, max_value=0x10FFFF).filter(
    lambda cp: not 0xD800 <= cp <= 0xDFFF
)


@given(non_surrogates)
def test_encode_matches_standard_codec(cp):
    assert utf8_encode(cp) == chr(cp).encode("utf-8")


@pytest.mark.parametrize("cp", [-1, 0x110000, 0x7FFFFFFF])
def test_encode_out_of_range(cp):
    with pytest.raises(ValueError):
        utf8_encode(cp)


@given(non_surrogates)
def test_check_first_gives_sequence_length(cp):
    encoded = chr(cp).encode("utf-8")
    assert utf8_check_first(encoded[0]) == len(encoded)


@pytest.mark.parametrize("byte", [0x80, 0xBF, 0xC0, 0xC1, 0xF5, 0xFF])
def test_check_first_rejects_invalid_lead(byte):
    assert utf8_check_first(byte) == 0


@given(non_surrogates.filter(lambda cp: cp >= 0x80))
def test_check_full_decodes(cp):
    assert utf8_check_full(chr(cp).encode("utf-8")) == cp


@pytest.mark.parametrize(
    "data",
    [
        b"\xc0\x80",  # overlong
        b"\xe0\x80\x80",  # overlong
        b"\xf0\x80\x80\x80",  # overlong
        b"\xed\xa0\x80",  # surrogate
        b"\xf4\x90\x80\x80",  # above U+10FFFF
        b"\xc3\x28",  # bad continuation
        b"A",  # wrong size
    ],
)
def test_check_full_rejects(data):
    assert utf8_check_full(data) is None


@given(st.binary(max_size=32))
def test_check_string_agrees_with_codec(data):
    try:
        data.decode("utf-8")
        valid = True
    except UnicodeDecodeError:
        valid = False
    assert utf8_check_string(data) is valid


@given(st.text(max_size=20))
def test_iterate_walks_all_codepoints(text):
    rest = text.encode("utf-8")
    seen = []
    while rest:
        cp, rest = utf8_iterate(rest)
        seen.append(cp)
    assert seen == [ord(c) for c in text]


def test_iterate_empty():
    assert utf8_iterate(b"") == (None, b"")


@pytest.mark.parametrize("data", [b"\x80abc", b"\xe2\x82", b"\xed\xa0\x80"])
def test_iterate_invalid(data):
    with pytest.raises(ValueError):
        utf8_iterate(data)


def test_iterate_noutf8_takes_single_bytes():
    assert utf8_iterate(b"\xff\xfe", noutf8=True) == (0xFF, b"\xfe")