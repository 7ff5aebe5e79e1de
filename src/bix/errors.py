"""
Error types raised by the viewer and patcher.
"""

from typing import Optional


class BixError(Exception):
    """Base class for every error surfaced to the caller."""


class SourceNotFound(BixError, FileNotFoundError):
    """The file to read or patch does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"No such file: {path}")
        self.path = path


class ShortRead(BixError, EOFError):
    """Fewer bytes were available than requested."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(
            f"Requested {requested} bytes but only {available} available"
        )
        self.requested = requested
        self.available = available


class SinkNotWritable(BixError, PermissionError):
    """The byte sink was not opened for writing."""


class OffsetOutOfRange(BixError, IndexError):
    """An offset lies outside what the file or address space allows."""

    def __init__(self, offset: int, size: int, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Offset 0x{offset:X} is past the end of the file (size 0x{size:X})"
        )
        self.offset = offset
        self.size = size


class InvalidByteToken(BixError, ValueError):
    """A patch byte was not one or two hex digits."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid byte: {token!r}")
        self.token = token


class InvalidOffsetToken(BixError, ValueError):
    """An offset string was neither 0x-prefixed hex nor decimal."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid offset: {token!r}")
        self.token = token


class InvalidWidth(BixError, ValueError):
    """Row width below one."""

    def __init__(self, width: int) -> None:
        super().__init__(f"Width must be at least 1, got {width}")
        self.width = width


class EmptyPayload(BixError, ValueError):
    """A patch request carried no bytes."""


class PartialWrite(BixError, OSError):
    """
    A write failed after some bytes reached the sink.

    Attributes:
        bytes_written (int): Number of payload bytes written before failing
        offset (int): Offset the write started at
    """

    def __init__(self, bytes_written: int, offset: int, reason: str = "") -> None:
        message = f"Wrote only {bytes_written} bytes at 0x{offset:X}"
        if reason:
            message += f": {reason}"

        super().__init__(message)
        self.bytes_written = bytes_written
        self.offset = offset
