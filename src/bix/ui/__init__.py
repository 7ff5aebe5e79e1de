"""
UI package for terminal output of rendered dumps.
"""

from .console import ConsoleSink, should_colorize
from .highlight import DumpHighlighter

__all__ = ['ConsoleSink', 'DumpHighlighter', 'should_colorize']
