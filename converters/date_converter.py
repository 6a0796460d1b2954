"""Date converter: render one instant in several common formats (UTC).

Input may be a Unix timestamp (signed 32-bit range) or a date/time in one
of ``INPUT_FORMATS``. Offsets in the input are honoured and the result is
shown in UTC.

Examples:
  python -m converters.date_converter 1711101600
  python -m converters.date_converter "2024-03-22 10:00:00" --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from pathlib import Path
from typing import Sequence

from common.cli_helpers import (
    add_export_argument,
    add_json_output_argument,
    add_log_level_argument,
    setup_logging,
)
from common.exceptions import FileOperationError, ToolkitError
from common.file_helpers import write_export

logger = logging.getLogger(__name__)


INPUT_FORMATS = [
    "%Y-%m-%d %H:%M:%S",  # 2024-03-22 10:00:00
    "%Y-%m-%dT%H:%M:%S%z",  # 2024-03-22T10:00:00-05:00
    "%d/%m/%Y %H:%M:%S",  # 22/03/2024 10:00:00
    "%Y-%m-%d",  # 2024-03-22
    "%d/%m/%Y",  # 22/03/2024
]

TIMESTAMP_MIN = -(2**31)
TIMESTAMP_MAX = 2**31 - 1

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class DateFormatError(ToolkitError):
    """Raised when input cannot be interpreted as a date."""


@dataclass(frozen=True)
class DateFormats:
    rfc3339: str
    rfc2822: str
    iso8601: str
    unix_timestamp: str
    human_readable: str
    short_date: str
    time_only: str


def parse_input(text: str) -> datetime:
    """Parse a timestamp or formatted date into an aware UTC datetime.

    Raises:
        DateFormatError: If the value is out of range or unrecognised
    """
    value = text.strip()
    try:
        timestamp = int(value)
    except ValueError:
        timestamp = None

    if timestamp is not None:
        if not TIMESTAMP_MIN <= timestamp <= TIMESTAMP_MAX:
            raise DateFormatError("Timestamp out of supported range")
        return EPOCH + timedelta(seconds=timestamp)

    for fmt in INPUT_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    raise DateFormatError("Unrecognized date-time format")


def format_all(moment: datetime) -> DateFormats:
    moment = moment.astimezone(timezone.utc)
    return DateFormats(
        rfc3339=moment.isoformat(),
        rfc2822=format_datetime(moment),
        iso8601=moment.strftime("%Y-%m-%dT%H:%M:%S") + "+00:00",
        unix_timestamp=str(int((moment - EPOCH).total_seconds())),
        human_readable=moment.strftime("%A, %B %d, %Y, %I:%M:%S %p"),
        short_date=moment.strftime("%d/%m/%Y"),
        time_only=moment.strftime("%H:%M:%S"),
    )


def convert_all(text: str) -> DateFormats:
    return format_all(parse_input(text))


def export_formats(
    text: str, formats: DateFormats, export_dir: Path | None = None
) -> Path:
    lines = [f"Input: {text}"]
    lines.extend(
        f"{name.replace('_', ' ').title()}: {value}"
        for name, value in asdict(formats).items()
    )
    return write_export("date.txt", lines, export_dir)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert a timestamp or date into common formats.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("value", help="Unix timestamp or date string")
    add_json_output_argument(parser)
    add_export_argument(parser)
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    try:
        formats = convert_all(args.value)
    except DateFormatError as ex:
        logger.error(str(ex))
        return 1

    if args.json:
        print(json.dumps(asdict(formats)))
    else:
        for name, value in asdict(formats).items():
            print(f"{name:<15} {value}")

    if args.export:
        try:
            target = export_formats(args.value, formats)
        except FileOperationError as ex:
            logger.error(str(ex))
            return 1
        logger.info(f"Successfully exported to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
