"""
Renderer turning a byte window into hex dump lines.
"""

from typing import Iterator

from .layout import ByteWindow, LayoutConfig, Row, hex_column_footprint
from ..utils.hex_utils import format_byte, format_offset, to_display_char


def iter_rows(window: ByteWindow, width: int) -> Iterator[Row]:
    """
    Split a window into rows of at most `width` bytes.

    Args:
        window (ByteWindow): Bytes to split
        width (int): Bytes per row

    Yields:
        Row: One row per chunk, the last one possibly shorter
    """

    data = window.data
    for chunk_index, start in enumerate(range(0, len(data), width)):
        chunk = data[start:start + width]
        yield Row(
            address=window.base_offset + chunk_index * width,
            hex_cells=tuple((value, index) for index, value in enumerate(chunk)),
            ascii_cells=tuple(to_display_char(value) for value in chunk)
        )


def format_hex_cells(row: Row, config: LayoutConfig) -> str:
    """Hex column text for a row, including the group gap if reached."""

    group_index = config.group_index
    parts = []
    for value, index in row.hex_cells:
        parts.append(format_byte(value) + ' ')
        if index == group_index:
            parts.append(' ')

    return ''.join(parts)


def format_row(row: Row, config: LayoutConfig) -> str:
    """
    Render a row as a single line of text.

    Args:
        row (Row): Row to render
        config (LayoutConfig): Structured layout to apply

    Returns:
        str: The line, newline terminated
    """

    line = ''
    if config.show_address:
        line += format_offset(row.address) + ': '

    hex_text = format_hex_cells(row, config)
    line += hex_text

    if config.show_ascii:
        footprint = hex_column_footprint(config.width, config.group_mid)
        line += ' ' * (footprint - len(hex_text))
        line += '|' + ''.join(row.ascii_cells) + '|'

    return line + '\n'


def format_raw(window: ByteWindow) -> str:
    """Every byte as two hex digits on one space separated line."""

    return ' '.join(format_byte(value) for value in window.data) + '\n'


def render(window: ByteWindow, config: LayoutConfig) -> Iterator[str]:
    """
    Lazily render a window as lines of text.

    Raw mode produces exactly one line. Structured mode produces one line
    per row and nothing at all for an empty window.
    """

    if config.raw_mode:
        yield format_raw(window)
        return

    for row in iter_rows(window, config.width):
        yield format_row(row, config)


def render_text(window: ByteWindow, config: LayoutConfig) -> str:
    return ''.join(render(window, config))
