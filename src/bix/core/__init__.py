"""
Core package for the byte viewer and patcher.

This package implements the rendering engine that turns a window of bytes
into hex dump lines, and the patcher that overwrites bytes of a file at a
given offset.
"""

from ..errors import (
    BixError,
    SourceNotFound,
    ShortRead,
    SinkNotWritable,
    OffsetOutOfRange,
    InvalidByteToken,
    InvalidOffsetToken,
    InvalidWidth,
    EmptyPayload,
    PartialWrite
)
from .layout import (
    ByteWindow,
    LayoutConfig,
    RawLayout,
    Row,
    StructuredLayout,
    hex_column_footprint
)
from .renderer import render, render_text, iter_rows, format_row
from .patcher import GrowthPolicy, PatchRequest, Patcher, patch_file
from .source import read_range, read_window

__all__ = [
    'BixError',
    'SourceNotFound',
    'ShortRead',
    'SinkNotWritable',
    'OffsetOutOfRange',
    'InvalidByteToken',
    'InvalidOffsetToken',
    'InvalidWidth',
    'EmptyPayload',
    'PartialWrite',
    'ByteWindow',
    'LayoutConfig',
    'RawLayout',
    'Row',
    'StructuredLayout',
    'hex_column_footprint',
    'render',
    'render_text',
    'iter_rows',
    'format_row',
    'GrowthPolicy',
    'PatchRequest',
    'Patcher',
    'patch_file',
    'read_range',
    'read_window'
]
