"""
Colouring of rendered hex dumps using Pygments.
"""

from typing import Any, Dict, Final

from pygments.console import colorize
from pygments.lexers.hexdump import HexdumpLexer
from pygments.token import Token

DUMP_COLORS: Final[Dict[str, str]] = {
    'address': 'cyan',
    'byte': 'default',
    'ascii': 'green',
    'punctuation': 'gray',
    'default': 'default',
}

TOKEN_COLOR_MAP: Final[Dict[Any, str]] = {
    Token.Name.Label: DUMP_COLORS['address'],
    Token.Number.Hex: DUMP_COLORS['byte'],
    Token.String: DUMP_COLORS['ascii'],
    Token.Punctuation: DUMP_COLORS['punctuation'],

    Token.Text: DUMP_COLORS['default'],
    Token.Text.Whitespace: DUMP_COLORS['default'],
}


class DumpHighlighter:
    """Adds ANSI colours to hex dump lines."""

    def __init__(self) -> None:
        self.lexer = HexdumpLexer(stripnl=False, ensurenl=False)

    def highlight_line(self, line: str) -> str:
        """
        Colour one rendered line, keeping its text intact.

        Args:
            line: The rendered line, with or without trailing newline

        Returns:
            The line with ANSI escape sequences around coloured tokens
        """

        if not line.strip():
            return line

        result = []
        for token_type, text in self.lexer.get_tokens(line):
            color = self._get_token_color(token_type)
            if color == 'default' or not text.strip():
                result.append(text)
                continue

            result.append(colorize(color, text))

        return ''.join(result)

    def _get_token_color(self, token_type: Any) -> str:
        """
        Get the colour name for a token type.

        Args:
            token_type: The Pygments token type

        Returns:
            A pygments.console colour name
        """

        if token_type in TOKEN_COLOR_MAP:
            return TOKEN_COLOR_MAP[token_type]

        while token_type.parent:
            token_type = token_type.parent
            if token_type in TOKEN_COLOR_MAP:
                return TOKEN_COLOR_MAP[token_type]

        return DUMP_COLORS['default']
