"""Shared CLI utilities for consistent argument parsing."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add standard --log-level argument.

    Args:
        parser: ArgumentParser to add the argument to
    """
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging verbosity",
    )


def setup_logging(level: str) -> None:
    """Configure logging with consistent format.

    Args:
        level: Logging level (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        stream=sys.stdout,
    )


def read_input(
    text: Optional[str] = None,
    file_path: Optional[Path] = None,
    stdin_marker: str = "-",
) -> str:
    """Return literal text, or read it from a file or stdin.

    Args:
        text: Literal text; wins when given
        file_path: Path to file, or stdin_marker for stdin
        stdin_marker: String that indicates stdin should be used (default: "-")

    Returns:
        Content as string
    """
    if text is not None:
        return text
    if file_path is None:
        return ""

    if str(file_path) == stdin_marker:
        return sys.stdin.read()

    return Path(file_path).read_text(encoding="utf-8")


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Add mutually exclusive --text / --file input arguments."""
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", type=str, help="Input text")
    src.add_argument(
        "--file", type=Path, help="Read input from UTF-8 file ('-' for stdin)"
    )


def add_json_output_argument(parser: argparse.ArgumentParser) -> None:
    """Add standard --json output flag.

    Args:
        parser: ArgumentParser to add the argument to
    """
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )


def add_export_argument(parser: argparse.ArgumentParser) -> None:
    """Add standard --export flag."""
    parser.add_argument(
        "--export",
        action="store_true",
        help="Also write the result under export/",
    )
