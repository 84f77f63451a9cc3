"""Main CLI entry point for fixedwidth."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .. import __version__
from ..builtins import BINARY_BUILTINS, find_codec
from ..cli.describe import describe_type
from ..formats import BYTE_ORDERS
from ..log import get_logger, setup_logging
from ..utils.hexfmt import format_hex, parse_hex_bytes, parse_number

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fixedwidth",
        description="fixedwidth: Fixed-Width Binary Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fixedwidth encode i32 -1 --endian little     FF FF FF FF
  fixedwidth decode u16 "30 39"                12345
  fixedwidth encode f32 1.0                    3F 80 00 00
  fixedwidth info i128                         Show size and range
  fixedwidth list                              List every entry point
        """,
    )
    parser.add_argument("--version", action="version", version=f"fixedwidth {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    encode_parser = subparsers.add_parser("encode", help="Encode a number and print its bytes as hex")
    encode_parser.add_argument("type", help="Type name: i8..i256, u8..u256, f32, f64")
    encode_parser.add_argument("value", help="Number to encode (0x/0b/0o prefixes allowed for integers)")
    encode_parser.add_argument("--endian", choices=BYTE_ORDERS, default="big", help="Byte order (default: big)")

    decode_parser = subparsers.add_parser("decode", help="Decode hex bytes and print the number")
    decode_parser.add_argument("type", help="Type name: i8..i256, u8..u256, f32, f64")
    decode_parser.add_argument("hex", help='Bytes as hex, e.g. "FF FF FF 7F" or FFFFFF7F')
    decode_parser.add_argument("--endian", choices=BYTE_ORDERS, default="big", help="Byte order (default: big)")

    info_parser = subparsers.add_parser("info", help="Show size, range and entry points of a type")
    info_parser.add_argument("type", help="Type name: i8..i256, u8..u256, f32, f64")

    subparsers.add_parser("list", help="List every entry point name")

    return parser


def _encode(args: argparse.Namespace) -> int:
    encoder, _ = find_codec(args.type, args.endian)
    value = parse_number(args.value, encoder.fmt)
    logger.debug("encoding", entry_point=encoder.name, value=value)

    data, error = encoder(value)
    if error is not None:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(format_hex(data))
    return 0


def _decode(args: argparse.Namespace) -> int:
    _, decoder = find_codec(args.type, args.endian)
    data = parse_hex_bytes(args.hex)
    logger.debug("decoding", entry_point=decoder.name, data=data.hex())

    value, error = decoder(data)
    if error is not None:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(repr(value) if isinstance(value, float) else value)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the fixedwidth CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(debug=args.verbose)

    if args.command == "list":
        for name in BINARY_BUILTINS:
            print(name)
        return 0

    try:
        if args.command == "encode":
            return _encode(args)
        if args.command == "decode":
            return _decode(args)
        if args.command == "info":
            describe_type(args.type)
            return 0
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
