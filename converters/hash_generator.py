"""Text hash generator: SHA-1, SHA-256, SHA-384 and SHA-512 digests.

Examples:
  python -m converters.hash_generator --text "Hello, World!"
  python -m converters.hash_generator --file notes.txt --json
"""

from __future__ import annotations

import argparse
import hashlib
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Sequence

from common.cli_helpers import (
    add_export_argument,
    add_input_arguments,
    add_json_output_argument,
    add_log_level_argument,
    read_input,
    setup_logging,
)
from common.exceptions import FileOperationError
from common.file_helpers import write_export

logger = logging.getLogger(__name__)


SUPPORTED_ALGOS = ("sha1", "sha256", "sha384", "sha512")


def hash_text(text: str, algo: str) -> str:
    h = hashlib.new(algo)
    h.update(text.encode("utf-8"))
    return h.hexdigest()


def hash_all(text: str) -> Dict[str, str]:
    """Return every supported digest of ``text`` keyed by algorithm name."""
    return {algo: hash_text(text, algo) for algo in SUPPORTED_ALGOS}


def export_hashes(
    text: str, digests: Dict[str, str], export_dir: Path | None = None
) -> Path:
    lines = [f"Input: {text}"]
    lines.extend(f"{algo.upper()}: {digest}" for algo, digest in digests.items())
    return write_export("hash.txt", lines, export_dir)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute SHA digests of text.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    add_input_arguments(parser)
    add_json_output_argument(parser)
    add_export_argument(parser)
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    text = read_input(args.text, args.file)
    digests = hash_all(text)

    if args.json:
        print(json.dumps(digests))
    else:
        for algo, digest in digests.items():
            print(f"{algo.upper():<7} {digest}")

    if args.export:
        try:
            target = export_hashes(text, digests)
        except FileOperationError as ex:
            logger.error(str(ex))
            return 1
        logger.info(f"Successfully exported to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
