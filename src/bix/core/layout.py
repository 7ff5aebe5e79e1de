"""
Layout and value types shared by the renderer and the patcher.
"""

from dataclasses import dataclass
from typing import Final, Tuple, Union

from ..errors import InvalidWidth, OffsetOutOfRange
from ..utils.hex_utils import MAX_OFFSET

DEFAULT_WIDTH: Final[int] = 16
HEX_CELL_WIDTH: Final[int] = 3
GROUP_THRESHOLD: Final[int] = 2


@dataclass(frozen=True)
class RawLayout:
    """Flat hex stream: no address, no grouping, no ASCII column."""


@dataclass(frozen=True)
class StructuredLayout:
    """Column layout with independently switchable parts."""
    show_address: bool = True
    group_mid: bool = True
    show_ascii: bool = True


LayoutMode = Union[RawLayout, StructuredLayout]


@dataclass(frozen=True)
class LayoutConfig:
    """How a window is turned into text."""
    width: int = DEFAULT_WIDTH
    mode: LayoutMode = StructuredLayout()

    def __post_init__(self) -> None:
        if self.width < 1:
            raise InvalidWidth(self.width)

    @classmethod
    def from_flags(cls, width: int = DEFAULT_WIDTH, show_address: bool = True,
                   group_mid: bool = True, show_ascii: bool = True,
                   raw_mode: bool = False) -> 'LayoutConfig':
        """Build a config from the four command line flags, raw winning."""

        if raw_mode:
            return cls(width, RawLayout())

        return cls(width, StructuredLayout(show_address, group_mid, show_ascii))

    @property
    def raw_mode(self) -> bool:
        return isinstance(self.mode, RawLayout)

    @property
    def show_address(self) -> bool:
        return not self.raw_mode and self.mode.show_address

    @property
    def group_mid(self) -> bool:
        return not self.raw_mode and self.mode.group_mid

    @property
    def show_ascii(self) -> bool:
        return not self.raw_mode and self.mode.show_ascii

    @property
    def group_index(self) -> int:
        """Cell index followed by the extra group space, -1 when none."""

        return self.width // 2 - 1 if self.group_mid else -1


@dataclass(frozen=True)
class ByteWindow:
    """A run of bytes and the absolute file offset of its first byte."""
    data: bytes = b''
    base_offset: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.base_offset <= MAX_OFFSET:
            raise OffsetOutOfRange(
                self.base_offset, MAX_OFFSET,
                f"Base offset out of range: {self.base_offset}"
            )

        if not isinstance(self.data, bytes):
            object.__setattr__(self, 'data', bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class Row:
    """One rendered line worth of bytes."""
    address: int
    hex_cells: Tuple[Tuple[int, int], ...]
    ascii_cells: Tuple[str, ...]

    @property
    def data(self) -> bytes:
        return bytes(value for value, _ in self.hex_cells)


def hex_column_footprint(width: int, group_enabled: bool) -> int:
    """
    Number of characters a full row's hex column occupies.

    Args:
        width (int): Configured bytes per row
        group_enabled (bool): Whether the midpoint gap is drawn

    Returns:
        int: Three characters per cell, plus one for the group gap
    """

    if width < 1:
        raise InvalidWidth(width)

    footprint = width * HEX_CELL_WIDTH
    if group_enabled and width >= GROUP_THRESHOLD:
        footprint += 1

    return footprint
