"""
Utility functions for parsing and formatting hex tokens.
"""

from typing import Final, Iterable

from ..errors import InvalidByteToken, InvalidOffsetToken

MAX_OFFSET: Final[int] = 2 ** 64 - 1
HEX_DIGITS: Final[str] = '0123456789ABCDEFabcdef'
ADDRESS_DIGITS: Final[int] = 8


def parse_offset(token: str) -> int:
    """
    Parse an offset given as 0x-prefixed hex or plain decimal.

    Args:
        token (str): Offset text, e.g. "0x10" or "16"

    Returns:
        int: The offset as an unsigned 64-bit value

    Raises:
        InvalidOffsetToken: If the text is malformed or out of range
    """

    text = token.strip()
    if text.startswith('0x'):
        digits, base = text[2:], 16
        valid = bool(digits) and all(c in HEX_DIGITS for c in digits)
    else:
        digits, base = text, 10
        valid = digits.isascii() and digits.isdigit()

    if not valid:
        raise InvalidOffsetToken(token)

    value = int(digits, base)
    if value > MAX_OFFSET:
        raise InvalidOffsetToken(token)

    return value


def parse_byte_token(token: str) -> int:
    """
    Parse a single byte written as one or two hex digits.

    Args:
        token (str): Byte text, e.g. "AA" or "f"

    Returns:
        int: Byte value between 0 and 255

    Raises:
        InvalidByteToken: If the text is not one or two hex digits
    """

    if not 1 <= len(token) <= 2 or not all(c in HEX_DIGITS for c in token):
        raise InvalidByteToken(token)

    return int(token, 16)


def parse_byte_tokens(tokens: Iterable[str]) -> bytes:
    """Parse a sequence of byte tokens, e.g. ["AA", "DD", "CC", "BA"]."""

    return bytes(parse_byte_token(token) for token in tokens)


def format_offset(offset: int, width: int = ADDRESS_DIGITS) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Minimum number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"


def format_byte(value: int) -> str:
    return f"{value:02X}"


def to_display_char(value: int) -> str:
    """Printable ASCII (space included) as itself, anything else as a dot."""

    return chr(value) if 0x20 <= value <= 0x7E else '.'
