"""
Byte source reading a range of a file into a window.
"""

import io
import logging
from typing import BinaryIO, Final, Optional

from ..errors import ShortRead, SourceNotFound
from .layout import ByteWindow

logger = logging.getLogger(__name__)

CHUNK_SIZE: Final[int] = 1024 * 1024


def read_range(stream: BinaryIO, offset: int, length: Optional[int] = None) -> bytes:
    """
    Read bytes from a seekable stream.

    Args:
        stream (BinaryIO): Readable, seekable binary stream
        offset (int): Absolute offset to start at
        length (Optional[int]): Exact number of bytes, or None for the rest

    Returns:
        bytes: The requested bytes

    Raises:
        ShortRead: If the stream ends before `length` bytes were read
    """

    end = stream.seek(0, io.SEEK_END)
    available = max(0, end - offset)

    if length is None:
        length = available
    elif length > available:
        raise ShortRead(length, available)

    if not length:
        return b''

    stream.seek(offset, io.SEEK_SET)

    chunks = []
    remaining = length
    while remaining > 0:
        chunk = stream.read(min(remaining, CHUNK_SIZE))
        if not chunk:
            break

        chunks.append(chunk)
        remaining -= len(chunk)

    data = b''.join(chunks)
    if len(data) < length:
        raise ShortRead(length, len(data))

    return data


def read_window(filename: str, offset: int = 0, length: Optional[int] = None) -> ByteWindow:
    """Load a byte range of a file as a window based at `offset`."""

    try:
        with open(filename, 'rb') as f:
            data = read_range(f, offset, length)
    except FileNotFoundError as e:
        raise SourceNotFound(filename) from e

    logger.debug("Read %d bytes from %s at 0x%X", len(data), filename, offset)

    return ByteWindow(data, offset)
