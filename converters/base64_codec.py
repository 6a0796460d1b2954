"""Base64 encode/decode CLI.

Examples:
  python -m converters.base64_codec encode --text "hello"
  python -m converters.base64_codec decode --file encoded.txt --export
"""

from __future__ import annotations

import argparse
import base64
import binascii
import logging
import sys
from pathlib import Path
from typing import Sequence

from common.cli_helpers import (
    add_export_argument,
    add_input_arguments,
    add_log_level_argument,
    read_input,
    setup_logging,
)
from common.exceptions import FileOperationError, ToolkitError
from common.file_helpers import write_export

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "provided input is not a valid base64 string."


class Base64Error(ToolkitError):
    """Raised when input cannot be decoded as base64."""


def encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode(text: str) -> str:
    """Decode standard base64; invalid UTF-8 is replaced, not rejected."""
    try:
        raw = base64.b64decode("".join(text.split()), validate=True)
    except (binascii.Error, ValueError) as ex:
        raise Base64Error(INVALID_INPUT_MESSAGE) from ex
    return raw.decode("utf-8", errors="replace")


def export_result(
    source: str, result: str, mode: str, export_dir: Path | None = None
) -> Path:
    label = "Encoded" if mode == "encode" else "Decoded"
    return write_export(
        "base64.txt", [f"Input: {source}", f"{label}: {result}"], export_dir
    )


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Encode or decode base64 text.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("mode", choices=["encode", "decode"], help="Direction")
    add_input_arguments(parser)
    add_export_argument(parser)
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    source = read_input(args.text, args.file)
    try:
        result = encode(source) if args.mode == "encode" else decode(source)
    except Base64Error as ex:
        logger.error(str(ex))
        return 1
    print(result)

    if args.export:
        try:
            target = export_result(source, result, args.mode)
        except FileOperationError as ex:
            logger.error(str(ex))
            return 1
        logger.info(f"Successfully exported to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
