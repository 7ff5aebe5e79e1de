"""
Output sink writing rendered lines to a terminal or stream.
"""

import sys
from typing import Iterable, Optional, TextIO

from .highlight import DumpHighlighter

COLOR_CHOICES = ('auto', 'always', 'never')


def should_colorize(stream: TextIO, mode: str = 'auto') -> bool:
    """Resolve a --color choice against the target stream."""

    if mode == 'always':
        return True
    if mode == 'never':
        return False

    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


class ConsoleSink:
    """Writes lines in order, optionally coloured."""

    def __init__(self, stream: Optional[TextIO] = None, color: bool = False) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.highlighter: Optional[DumpHighlighter] = DumpHighlighter() if color else None

    def write_lines(self, lines: Iterable[str]) -> int:
        """Write every line and return how many were written."""

        count = 0
        for line in lines:
            if self.highlighter:
                line = self.highlighter.highlight_line(line)

            self.stream.write(line)
            count += 1

        self.stream.flush()
        return count
