#!/usr/bin/python3

"""
Command line entry point for bix.
"""

import argparse
import logging
import sys
from typing import Any, Callable, List, Optional

from . import __version__
from .errors import BixError
from .core.layout import DEFAULT_WIDTH, LayoutConfig
from .core.patcher import GrowthPolicy, PatchRequest, patch_file
from .core.renderer import render
from .core.source import read_window
from .logging_config import level_for_verbosity, setup_logging
from .ui.console import COLOR_CHOICES, ConsoleSink, should_colorize
from .utils.hex_utils import parse_byte_token, parse_offset

logger = logging.getLogger("bix.cli")


def _argument_type(parser_fn: Callable[[str], Any]) -> Callable[[str], Any]:
    """Wrap a token parser so argparse reports its error message."""

    def convert(text: str) -> Any:
        try:
            return parser_fn(text)
        except BixError as e:
            raise argparse.ArgumentTypeError(str(e))

    convert.__name__ = parser_fn.__name__
    return convert


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the view and set commands."""

    parser = argparse.ArgumentParser(
        prog="bix",
        description="bix - view and patch binary files byte by byte"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write logs to this file"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    view = commands.add_parser(
        "view",
        help="Print the hexadecimal representation of a file"
    )
    view.add_argument("file", type=str, help="File to read")
    view.add_argument(
        "-o", "--offset",
        type=_argument_type(parse_offset),
        default=0,
        help="Offset in the file, hex with 0x prefix or decimal (default 0x0)"
    )
    view.add_argument(
        "-n", "--number",
        type=_argument_type(parse_offset),
        default=None,
        help="Number of bytes to print from the offset (default: rest of file)"
    )
    view.add_argument(
        "-w", "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Number of bytes per row (default {DEFAULT_WIDTH})"
    )
    view.add_argument(
        "--no-group",
        action="store_true",
        help="Do not add extra whitespace between the two halves of a row"
    )
    view.add_argument(
        "--no-addr",
        action="store_true",
        help="Do not print the address column"
    )
    view.add_argument(
        "--no-ascii",
        action="store_true",
        help="Do not print the ASCII column"
    )
    view.add_argument(
        "--raw",
        action="store_true",
        help="Same as --no-addr --no-group --no-ascii: a flat hex stream"
    )
    view.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        default="never",
        help="Colour the output (default never)"
    )

    set_cmd = commands.add_parser(
        "set",
        help="Write bytes at an offset of a file"
    )
    set_cmd.add_argument("file", type=str, help="File to patch")
    set_cmd.add_argument(
        "bytes",
        nargs="+",
        type=_argument_type(parse_byte_token),
        help="Bytes in hex to write, e.g. AA DD CC BA"
    )
    set_cmd.add_argument(
        "-o", "--offset",
        type=_argument_type(parse_offset),
        default=0,
        help="Offset in the file, hex with 0x prefix or decimal (default 0x0)"
    )
    set_cmd.add_argument(
        "--extend",
        action="store_true",
        help="Zero-fill the file up to the offset if it lies past the end"
    )

    return parser


def run_view(args: argparse.Namespace) -> int:
    """Render a byte range of a file to stdout."""

    config = LayoutConfig.from_flags(
        width=args.width,
        show_address=not args.no_addr,
        group_mid=not args.no_group,
        show_ascii=not args.no_ascii,
        raw_mode=args.raw
    )
    window = read_window(args.file, args.offset, args.number)

    sink = ConsoleSink(sys.stdout, color=should_colorize(sys.stdout, args.color))
    lines = sink.write_lines(render(window, config))

    logger.info("Rendered %d bytes in %d lines", len(window), lines)
    return 0


def run_set(args: argparse.Namespace) -> int:
    """Overwrite bytes of a file and report what was written."""

    request = PatchRequest(args.offset, bytes(args.bytes))
    growth = GrowthPolicy.ZERO_EXTEND if args.extend else GrowthPolicy.REJECT

    written = patch_file(args.file, request, growth)
    print(f"Wrote {written} bytes at 0x{request.offset:X}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = build_parser().parse_args(argv)
    setup_logging(level_for_verbosity(args.verbose), args.log_file)

    try:
        if args.command == "view":
            return run_view(args)

        return run_set(args)

    except (BixError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
