"""
ipcnv - IPv4 address / 32-bit integer conversion tool.

Usage:
    ipcnv -i <INPUT> -m <MODE> [-o <PATH>]

Modes:
    0   IPv4 address -> signed 32-bit integer
    1   signed 32-bit integer -> IPv4 address
    2   IPv4 address -> unsigned 32-bit integer
    3   unsigned 32-bit integer -> IPv4 address
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from .config import get_settings
from .logging_config import logger, setup_logging
from .models.schemas import ConversionRequest, describe_validation_error
from .services.converter import ConversionError, convert
from .utils.endianness import EndiannessError, get_host_byte_order

MODE_HELP = (
    "0 - ipv4 to int32\n"
    "1 - int32 to ipv4\n"
    "2 - ipv4 to uint32\n"
    "3 - uint32 to ipv4"
)


def fatal(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipcnv",
        description="Simple IP address conversion tool",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("-i", "--input", default="", help="input ip address or integer")
    parser.add_argument("-m", "--mode", default=None, help=MODE_HELP)
    parser.add_argument("-o", "--output", default=None, help="write the result to this file instead of stdout")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as exc:
        return fatal(describe_validation_error(exc))
    setup_logging(settings.log_level)

    try:
        byte_order = get_host_byte_order()
    except EndiannessError as exc:
        return fatal(str(exc))

    args = build_parser().parse_args(argv)
    logger.debug("cli.start", mode=args.mode, output=args.output, byte_order=byte_order.value)

    try:
        request = ConversionRequest(mode=args.mode, value=args.input, output=args.output)
    except ValidationError as exc:
        reason = describe_validation_error(exc)
        logger.info("request.invalid", reason=reason)
        return fatal(reason)

    try:
        result = convert(request.value, request.mode, byte_order)
    except ConversionError as exc:
        logger.info("convert.failed", mode=request.mode.value, reason=str(exc))
        return fatal(str(exc))
    logger.debug("convert.done", mode=request.mode.value, result=result)

    if request.output is None:
        print(result)
        return 0

    try:
        request.output.write_text(result, encoding=settings.output_encoding)
    except (OSError, LookupError) as exc:
        logger.info("output.failed", path=str(request.output), reason=str(exc))
        return fatal(str(exc))
    logger.debug("output.written", path=str(request.output))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
