"""
Patcher overwriting bytes of a seekable sink at a given offset.
"""

import enum
import io
import logging
from dataclasses import dataclass
from typing import BinaryIO

from ..errors import (
    EmptyPayload,
    OffsetOutOfRange,
    PartialWrite,
    SinkNotWritable,
    SourceNotFound
)
from ..utils.hex_utils import MAX_OFFSET

logger = logging.getLogger(__name__)


class GrowthPolicy(enum.Enum):
    """What to do with an offset past the end of the sink."""
    REJECT = 'reject'
    ZERO_EXTEND = 'zero-extend'


@dataclass(frozen=True)
class PatchRequest:
    """Bytes to write and where to write them."""
    offset: int
    payload: bytes

    def __post_init__(self) -> None:
        if not 0 <= self.offset <= MAX_OFFSET:
            raise OffsetOutOfRange(
                self.offset, MAX_OFFSET, f"Patch offset out of range: {self.offset}"
            )

        if not self.payload:
            raise EmptyPayload("Patch payload must contain at least one byte")

        if not isinstance(self.payload, bytes):
            object.__setattr__(self, 'payload', bytes(self.payload))

    def __len__(self) -> int:
        return len(self.payload)


class Patcher:
    """
    Writes patch requests into a seekable binary sink.

    The sink is left partially modified if a write fails midway; the error
    reports how many payload bytes made it.
    """

    def __init__(self, sink: BinaryIO, growth: GrowthPolicy = GrowthPolicy.REJECT) -> None:
        self.sink = sink
        self.growth = growth

    def size(self) -> int:
        """Current extent of the sink in bytes."""

        return self.sink.seek(0, io.SEEK_END)

    def write(self, request: PatchRequest) -> int:
        """
        Write a request's payload at its offset.

        Args:
            request (PatchRequest): Offset and payload to write

        Returns:
            int: Number of bytes written, always the payload length

        Raises:
            SinkNotWritable: If the sink does not accept writes
            OffsetOutOfRange: If the offset is past the end and growth is rejected
            PartialWrite: If the sink fails after accepting some bytes
        """

        if self.sink.closed or not self.sink.writable():
            raise SinkNotWritable("Sink is not opened for writing")

        size = self.size()
        if request.offset > size:
            if self.growth is GrowthPolicy.REJECT:
                raise OffsetOutOfRange(request.offset, size)

            logger.info("Extending sink from 0x%X to 0x%X", size, request.offset)

        written = self._write_all(request.payload, request.offset)

        logger.debug("Wrote %d bytes at 0x%X", written, request.offset)

        return written

    def _write_all(self, data: bytes, offset: int) -> int:
        """Write until `data` is exhausted, reporting progress on failure."""

        # Seeking past the end leaves a gap the sink reads back as zeros
        try:
            self.sink.seek(offset, io.SEEK_SET)
        except (OverflowError, OSError) as e:
            raise OffsetOutOfRange(
                offset, self.size(), f"Cannot seek to offset 0x{offset:X}: {e}"
            ) from e

        view = memoryview(data)
        written = 0
        while written < len(data):
            try:
                count = self.sink.write(view[written:])
            except OSError as e:
                raise PartialWrite(written, offset, str(e)) from e

            if not count:
                raise PartialWrite(written, offset, "sink accepted no bytes")

            written += count

        try:
            self.sink.flush()
        except OSError as e:
            raise PartialWrite(written, offset, str(e)) from e

        return written


def patch_file(filename: str, request: PatchRequest,
               growth: GrowthPolicy = GrowthPolicy.REJECT) -> int:
    """Open an existing file for update and apply one patch to it."""

    try:
        with open(filename, 'r+b') as f:
            return Patcher(f, growth).write(request)
    except FileNotFoundError as e:
        raise SourceNotFound(filename) from e
    except PermissionError as e:
        if isinstance(e, SinkNotWritable):
            raise
        raise SinkNotWritable(f"Cannot open {filename} for writing: {e}") from e
