"""UUID generator for version 4 (random) and version 7 (time ordered).

Examples:
  python -m converters.uuid_generator --count 5
  python -m converters.uuid_generator --version 7 --count 3 --json
"""

from __future__ import annotations

import argparse
import json
import logging
import secrets
import sys
import time
import uuid
from pathlib import Path
from typing import Callable, Dict, List, Sequence

from common.cli_helpers import (
    add_export_argument,
    add_json_output_argument,
    add_log_level_argument,
    setup_logging,
)
from common.exceptions import FileOperationError, ValidationError
from common.file_helpers import write_export

logger = logging.getLogger(__name__)


def uuid4() -> uuid.UUID:
    return uuid.uuid4()


def uuid7(unix_ms: int | None = None) -> uuid.UUID:
    """Build an RFC 9562 version 7 UUID.

    Layout: 48-bit Unix milliseconds, 4-bit version, 12 random bits,
    2-bit variant, 62 random bits.
    """
    if unix_ms is None:
        unix_ms = time.time_ns() // 1_000_000
    rand_a = secrets.randbits(12)
    rand_b = secrets.randbits(62)
    value = (unix_ms & 0xFFFF_FFFF_FFFF) << 80
    value |= 0x7 << 76
    value |= rand_a << 64
    value |= 0b10 << 62
    value |= rand_b
    return uuid.UUID(int=value)


GENERATORS: Dict[int, Callable[[], uuid.UUID]] = {4: uuid4, 7: uuid7}


def generate_uuids(version: int, count: int = 1) -> List[str]:
    """Generate ``count`` UUID strings; counts below 1 yield one UUID."""
    if version not in GENERATORS:
        raise ValidationError(f"Unsupported UUID version: {version}")
    make = GENERATORS[version]
    return [str(make()) for _ in range(max(1, count))]


class UuidBatch:
    """Holds the requested count and the last generated v4/v7 batches."""

    def __init__(self, count: int = 1) -> None:
        self.count = max(1, count)
        self.v4: List[str] = []
        self.v7: List[str] = []

    def increase_count(self) -> None:
        self.count += 1

    def decrease_count(self) -> None:
        if self.count > 1:
            self.count -= 1

    def generate(self, version: int) -> List[str]:
        ids = generate_uuids(version, self.count)
        if version == 4:
            self.v4 = ids
        else:
            self.v7 = ids
        return ids

    def clear(self) -> None:
        self.v4 = []
        self.v7 = []
        self.count = 1

    def export(self, export_dir: Path | None = None) -> Path:
        return export_uuids(self.v4, self.v7, export_dir)


def export_uuids(
    v4: Sequence[str], v7: Sequence[str], export_dir: Path | None = None
) -> Path:
    lines = ["UUID v4:", *v4, "", "UUID v7:", *v7]
    return write_export("uuid.txt", lines, export_dir)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate version 4 or version 7 UUIDs.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version", type=int, choices=sorted(GENERATORS), default=4, help="UUID version"
    )
    parser.add_argument("--count", type=int, default=1, help="How many to generate")
    add_json_output_argument(parser)
    add_export_argument(parser)
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    batch = UuidBatch(args.count)
    ids = batch.generate(args.version)
    if args.json:
        print(json.dumps(ids))
    else:
        for value in ids:
            print(value)

    if args.export:
        try:
            target = batch.export()
        except FileOperationError as ex:
            logger.error(str(ex))
            return 1
        logger.info(f"Successfully exported to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
