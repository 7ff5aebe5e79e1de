"""
Utility package for hex token parsing and formatting.
"""

from .hex_utils import (
    parse_offset,
    parse_byte_token,
    parse_byte_tokens,
    format_offset,
    format_byte,
    to_display_char
)

__all__ = [
    'parse_offset',
    'parse_byte_token',
    'parse_byte_tokens',
    'format_offset',
    'format_byte',
    'to_display_char'
]
