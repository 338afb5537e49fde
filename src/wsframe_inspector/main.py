"""
wsframe-inspector Command Line
==============================

Decodes one masked WebSocket frame and prints its bit-level diagram.

Usage:
    wsframe-inspect gYNaDpE2O2zy
    wsframe-inspect --hex "81 83 5a 0e 91 36 3b 6c f2"
    wsframe-inspect --file capture.bin --raw
    echo gYNaDpE2O2zy | wsframe-inspect --summary --no-color

Exit Codes:
    0 - Diagram printed
    1 - Input or frame could not be decoded
    2 - Invalid command-line usage
"""

import argparse
import logging
import sys
from typing import List, Optional

from colorama import just_fix_windows_console

from wsframe_inspector import __version__
from wsframe_inspector.config import Settings, load_config, setup_logging
from wsframe_inspector.decoding import FrameDecodeError, decode_frame
from wsframe_inspector.inputs import INPUT_FORMATS, InputDecodeError, decode_input
from wsframe_inspector.rendering import (
    BUILTIN_THEMES,
    PLAIN_THEME,
    StyleTheme,
    format_frame,
    format_qword_table,
    format_summary,
    get_theme,
)


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wsframe-inspect",
        description="Render a bit-level diagram of a masked WebSocket frame",
    )
    parser.add_argument(
        "data",
        nargs="?",
        help="Encoded frame (format from --format); read from stdin when omitted",
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument("--base64", "-b", help="Base64 encoded frame data")
    input_group.add_argument("--hex", "-x", help="Hex encoded frame data")
    input_group.add_argument("--file", "-f", help="Binary file containing one raw frame")

    parser.add_argument(
        "--format",
        choices=INPUT_FORMATS,
        default=None,
        help="Encoding of positional/stdin data (default: from config, 'auto')",
    )
    parser.add_argument(
        "--theme",
        choices=sorted(BUILTIN_THEMES),
        default=None,
        help="Colour theme (default: from config, 'default')",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours")
    parser.add_argument("--summary", "-s", action="store_true", help="Print a one-line frame summary")
    parser.add_argument("--raw", "-r", action="store_true", help="Also dump the raw input bytes")
    parser.add_argument("--config", "-c", default=None, help="Path to wsframe.yaml")
    parser.add_argument("--log-level", default=None, help="Log level (e.g. DEBUG)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_frame_bytes(args: argparse.Namespace, settings: Settings) -> bytes:
    """
    Collect the raw frame bytes from whichever input the user chose.

    Raises:
        InputDecodeError: If the text is not valid in its format
        OSError: If --file cannot be read
    """
    if args.file:
        logger.info(f"Reading frame from file: {args.file}")
        with open(args.file, "rb") as f:
            return f.read()
    if args.base64 is not None:
        return decode_input(args.base64, "base64")
    if args.hex is not None:
        return decode_input(args.hex, "hex")

    text = args.data if args.data is not None else sys.stdin.read()
    return decode_input(text, args.format or settings.input.format)


def resolve_theme(args: argparse.Namespace, settings: Settings) -> StyleTheme:
    if args.no_color or not settings.render.color:
        return PLAIN_THEME
    if args.theme:
        return get_theme(args.theme)
    if settings.render.custom_theme is not None:
        return settings.render.custom_theme
    return get_theme(settings.render.theme)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    if args.log_level:
        settings.logging.level = args.log_level
    setup_logging(settings)

    try:
        theme = resolve_theme(args, settings)
        data = read_frame_bytes(args, settings)
        logger.info(f"Data size: {len(data)} bytes")
        frame = decode_frame(data)
    except (InputDecodeError, FrameDecodeError, OSError, ValueError) as e:
        logger.error(f"Cannot decode frame: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    just_fix_windows_console()

    output = ""
    if args.summary or settings.render.summary:
        output += format_summary(frame, theme)
    if args.raw or settings.render.raw:
        output += format_qword_table(data, theme) + "\n"
    output += format_frame(frame, theme)
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
