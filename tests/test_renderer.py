import itertools

import pytest

from bix.core.layout import ByteWindow, LayoutConfig, Row
from bix.core.renderer import format_row, iter_rows, render, render_text


def _hex_bytes(line, config):
    """Recover the byte values printed in a structured line."""

    if config.show_address:
        line = line.split(': ', 1)[1]
    if config.show_ascii:
        line = line[:line.index('|')]

    return bytes.fromhex(line)


def test_example_row():
    window = ByteWindow(bytes([0x41, 0x42, 0x0A, 0x20]), 0)
    config = LayoutConfig.from_flags(4, show_address=True, group_mid=False, show_ascii=True)

    assert list(render(window, config)) == ["00000000: 41 42 0A 20 |AB. |\n"]


def test_empty_window_structured():
    assert list(render(ByteWindow(b''), LayoutConfig())) == []


def test_empty_window_raw():
    assert list(render(ByteWindow(b''), LayoutConfig.from_flags(raw_mode=True))) == ["\n"]


def test_raw_line():
    window = ByteWindow(bytes([0xAA, 0x01, 0x7F]), 0x100)
    assert render_text(window, LayoutConfig.from_flags(raw_mode=True)) == "AA 01 7F\n"


def test_raw_ignores_other_flags():
    window = ByteWindow(bytes(range(40)), 0x20)
    outputs = set()
    for address, group, ascii_col in itertools.product([True, False], repeat=3):
        config = LayoutConfig.from_flags(7, address, group, ascii_col, raw_mode=True)
        outputs.add(render_text(window, config))

    assert len(outputs) == 1


def test_render_is_lazy():
    lines = render(ByteWindow(bytes(64)), LayoutConfig(16))
    assert next(lines).startswith("00000000: ")
    assert next(lines).startswith("00000010: ")


@pytest.mark.parametrize("length, width, rows", [
    (1, 16, 1),
    (16, 16, 1),
    (17, 16, 2),
    (32, 16, 2),
    (10, 3, 4),
    (7, 1, 7),
])
def test_row_count(length, width, rows):
    window = ByteWindow(bytes(length))
    assert len(list(render(window, LayoutConfig(width)))) == rows


def test_addresses_follow_base_offset():
    window = ByteWindow(bytes(40), 0x1000)
    lines = list(render(window, LayoutConfig(16)))
    assert [line[:10] for line in lines] == ["00001000: ", "00001010: ", "00001020: "]


def test_address_wider_than_eight_digits():
    window = ByteWindow(b'\x00', 0x123456789)
    line = render_text(window, LayoutConfig.from_flags(4, show_ascii=False))
    assert line.startswith("123456789: ")


@pytest.mark.parametrize("width", [1, 2, 3, 5, 8, 16, 33])
@pytest.mark.parametrize("flags", list(itertools.product([True, False], repeat=3)))
def test_hex_bytes_reproduce_window(width, flags):
    data = bytes((i * 37) & 0xFF for i in range(71))
    config = LayoutConfig.from_flags(width, *flags)
    lines = render(ByteWindow(data, 0), config)

    assert b''.join(_hex_bytes(line, config) for line in lines) == data


def test_rows_carry_cells():
    rows = list(iter_rows(ByteWindow(b'ABCDE', 8), 4))
    assert rows[0] == Row(8, ((0x41, 0), (0x42, 1), (0x43, 2), (0x44, 3)),
                          ('A', 'B', 'C', 'D'))
    assert rows[1].address == 12
    assert rows[1].data == b'E'


def test_group_gap_once_per_full_row():
    data = bytes(range(0x30, 0x30 + 20))
    config = LayoutConfig.from_flags(16, show_address=False, group_mid=True, show_ascii=False)
    first, second = render(ByteWindow(data), config)

    assert first.count("  ") == 1
    assert "37  38 " in first
    assert "  " not in second


def test_group_gap_absent_when_short_row_misses_midpoint():
    config = LayoutConfig.from_flags(16, show_address=False, group_mid=True, show_ascii=False)
    assert render_text(ByteWindow(bytes(7)), config) == "00 " * 7 + "\n"


def test_group_gap_present_when_row_reaches_midpoint():
    config = LayoutConfig.from_flags(16, show_address=False, group_mid=True, show_ascii=False)
    assert render_text(ByteWindow(bytes(8)), config) == "00 " * 8 + " \n"


def test_group_gap_odd_width():
    config = LayoutConfig.from_flags(5, show_address=False, group_mid=True, show_ascii=False)
    assert render_text(ByteWindow(bytes(5)), config) == "00 00  00 00 00 \n"


def test_no_group_gap_when_disabled():
    config = LayoutConfig.from_flags(16, show_address=False, group_mid=False, show_ascii=False)
    assert "  " not in render_text(ByteWindow(bytes(16)), config)


@pytest.mark.parametrize("width, group", [
    (16, True), (16, False), (8, True), (4, True), (5, True), (3, False), (1, True),
])
def test_ascii_column_aligned_on_short_row(width, group):
    data = bytes(width * 2 + 1)
    config = LayoutConfig.from_flags(width, show_address=True, group_mid=group, show_ascii=True)
    lines = list(render(ByteWindow(data), config))

    assert len({line.index('|') for line in lines}) == 1


def test_ascii_column_without_address():
    config = LayoutConfig.from_flags(4, show_address=False, group_mid=False, show_ascii=True)
    lines = list(render(ByteWindow(b'hello'), config))

    assert lines == ["68 65 6C 6C |hell|\n", "6F          |o|\n"]


def test_ascii_replaces_non_printable():
    data = bytes([0x00, 0x1F, 0x20, 0x7E, 0x7F, 0x80, 0xFF, 0x41])
    config = LayoutConfig.from_flags(8, show_address=False, group_mid=False, show_ascii=True)
    assert render_text(ByteWindow(data), config).endswith("|.. ~...A|\n")


def test_format_row_without_ascii_or_address():
    row = next(iter_rows(ByteWindow(b'\x01\x02'), 16))
    config = LayoutConfig.from_flags(16, show_address=False, group_mid=True, show_ascii=False)
    assert format_row(row, config) == "01 02 \n"
