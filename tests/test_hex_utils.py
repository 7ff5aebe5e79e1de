import pytest

from bix.errors import InvalidByteToken, InvalidOffsetToken
from bix.utils.hex_utils import (
    format_byte,
    format_offset,
    parse_byte_token,
    parse_byte_tokens,
    parse_offset,
    to_display_char
)


@pytest.mark.parametrize("token, expected", [
    ("0x10", 16),
    ("16", 16),
    ("0", 0),
    ("0x0", 0),
    ("0xff", 255),
    ("0xFFFFFFFFFFFFFFFF", 2 ** 64 - 1),
    ("010", 10),
])
def test_parse_offset(token, expected):
    assert parse_offset(token) == expected


@pytest.mark.parametrize("token", [
    "0xZZ", "", "0x", "-1", "1.5", "ten", "0X10", "0x-1", "18446744073709551616",
])
def test_parse_offset_invalid(token):
    with pytest.raises(InvalidOffsetToken):
        parse_offset(token)


def test_invalid_offset_is_value_error():
    with pytest.raises(ValueError):
        parse_offset("0xZZ")


@pytest.mark.parametrize("token, expected", [
    ("AA", 0xAA), ("aa", 0xAA), ("f", 0x0F), ("00", 0), ("7F", 0x7F),
])
def test_parse_byte_token(token, expected):
    assert parse_byte_token(token) == expected


@pytest.mark.parametrize("token", ["", "GG", "ABC", "0x1", "-1", " A"])
def test_parse_byte_token_invalid(token):
    with pytest.raises(InvalidByteToken):
        parse_byte_token(token)


def test_parse_byte_tokens():
    assert parse_byte_tokens(["AA", "DD", "CC", "BA"]) == b'\xAA\xDD\xCC\xBA'


def test_format_offset():
    assert format_offset(0x1A) == "0000001A"
    assert format_offset(0x1A, 4) == "001A"


def test_format_byte():
    assert format_byte(0x0A) == "0A"


@pytest.mark.parametrize("value, expected", [
    (0x41, 'A'), (0x20, ' '), (0x7E, '~'), (0x0A, '.'), (0x7F, '.'), (0xC3, '.'),
])
def test_to_display_char(value, expected):
    assert to_display_char(value) == expected
