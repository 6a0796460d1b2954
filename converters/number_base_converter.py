"""Number base converter between binary, decimal and hexadecimal.

Only non-negative integers are supported. Besides the requested
conversion, the full table of binary/decimal/hexadecimal conversions of the
input is computed so it can be displayed or exported at once.

Examples:
  python -m converters.number_base_converter 255 --from 10 --to 16
  python -m converters.number_base_converter 1010 --from 2 --to 10 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, Sequence

from common.cli_helpers import (
    add_export_argument,
    add_json_output_argument,
    add_log_level_argument,
    setup_logging,
)
from common.exceptions import FileOperationError, ToolkitError
from common.file_helpers import write_export

logger = logging.getLogger(__name__)


BASE_NAMES: Dict[int, str] = {2: "binary", 10: "decimal", 16: "hexadecimal"}


class NumberBaseError(ToolkitError):
    """Raised for unparsable numbers or unsupported base pairs."""


@dataclass(frozen=True)
class ConversionTable:
    binary_to_decimal: str
    binary_to_hexadecimal: str
    decimal_to_binary: str
    decimal_to_hexadecimal: str
    hexadecimal_to_binary: str
    hexadecimal_to_decimal: str


def parse_number(value: str, base: int) -> int:
    if base not in BASE_NAMES:
        raise NumberBaseError(f"Unsupported base: {base}")
    cleaned = value.strip()
    try:
        if not cleaned or "_" in cleaned or cleaned.startswith(("-", "+")):
            raise ValueError(cleaned)
        return int(cleaned, base)
    except ValueError as ex:
        raise NumberBaseError(f"Invalid {BASE_NAMES[base]} number") from ex


def format_number(number: int, base: int) -> str:
    if base == 2:
        return format(number, "b")
    if base == 16:
        return format(number, "X")
    if base == 10:
        return str(number)
    raise NumberBaseError(f"Unsupported base: {base}")


def convert(value: str, base_from: int, base_to: int) -> str:
    """Convert ``value`` written in ``base_from`` into ``base_to``.

    Raises:
        NumberBaseError: If the pair is unsupported or the value is invalid
    """
    if base_from not in BASE_NAMES or base_to not in BASE_NAMES or base_from == base_to:
        raise NumberBaseError(f"Unsupported conversion: {base_from} -> {base_to}")
    return format_number(parse_number(value, base_from), base_to)


def _try_convert(value: str, base_from: int, base_to: int) -> str:
    try:
        return convert(value, base_from, base_to)
    except NumberBaseError as ex:
        return str(ex)


def conversion_table(value: str) -> ConversionTable:
    """Interpret ``value`` in every base; invalid cells carry the error text."""
    return ConversionTable(
        binary_to_decimal=_try_convert(value, 2, 10),
        binary_to_hexadecimal=_try_convert(value, 2, 16),
        decimal_to_binary=_try_convert(value, 10, 2),
        decimal_to_hexadecimal=_try_convert(value, 10, 16),
        hexadecimal_to_binary=_try_convert(value, 16, 2),
        hexadecimal_to_decimal=_try_convert(value, 16, 10),
    )


def table_lines(table: ConversionTable) -> list[str]:
    return [
        f"{name.replace('_', ' ').title()}: {result}"
        for name, result in asdict(table).items()
    ]


def export_conversion(
    value: str,
    base_from: int,
    base_to: int,
    result: str,
    table: ConversionTable,
    export_dir: Path | None = None,
) -> Path:
    lines = [
        f"Input: {value}",
        f"From Base: {base_from}",
        f"To Base: {base_to}",
        f"Result: {result}",
    ]
    lines.extend(table_lines(table))
    return write_export("number_conversion.txt", lines, export_dir)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert numbers between bases 2, 10 and 16.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("value", help="Number to convert")
    parser.add_argument(
        "--from", dest="base_from", type=int, choices=sorted(BASE_NAMES), default=10
    )
    parser.add_argument(
        "--to", dest="base_to", type=int, choices=sorted(BASE_NAMES), default=2
    )
    add_json_output_argument(parser)
    add_export_argument(parser)
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    try:
        result = convert(args.value, args.base_from, args.base_to)
    except NumberBaseError as ex:
        logger.error(str(ex))
        return 1
    table = conversion_table(args.value)

    if args.json:
        print(json.dumps({"result": result, "table": asdict(table)}))
    else:
        print(result)
        for line in table_lines(table):
            logger.debug(line)

    if args.export:
        try:
            target = export_conversion(
                args.value, args.base_from, args.base_to, result, table
            )
        except FileOperationError as ex:
            logger.error(str(ex))
            return 1
        logger.info(f"Successfully exported to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
