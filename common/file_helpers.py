"""Shared export helpers: every tool writes its results under ``export/``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from common.exceptions import FileOperationError

logger = logging.getLogger(__name__)

EXPORT_DIR = Path("export")


def safe_filename(name: str, replacement: str = "_") -> str:
    """Sanitize filename by replacing invalid characters.

    Args:
        name: Original filename
        replacement: Character to use for invalid chars

    Returns:
        Safe filename
    """
    invalid_chars = '<>:"/\\|?*'
    for char in invalid_chars:
        name = name.replace(char, replacement)
    return name.strip(". ")


def export_path(name: str, export_dir: Path | None = None) -> Path:
    """Resolve the target path for an export, creating the directory.

    Args:
        name: File name inside the export directory
        export_dir: Override for the default ``export/`` directory

    Returns:
        Path of the file to write

    Raises:
        FileOperationError: If the name is empty or the directory cannot be made
    """
    cleaned = safe_filename(name)
    if not cleaned:
        raise FileOperationError(f"Invalid export file name: {name!r}")
    target_dir = export_dir or EXPORT_DIR
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
    except OSError as ex:
        raise FileOperationError(f"Failed to create {target_dir}: {ex}") from ex
    return target_dir / cleaned


def write_export(name: str, lines: List[str], export_dir: Path | None = None) -> Path:
    """Write lines of text to an export file, overwriting it.

    Returns:
        Path that was written
    """
    target = export_path(name, export_dir)
    try:
        with target.open("w", encoding="utf-8") as f:
            for line in lines:
                f.write(f"{line}\n")
    except OSError as ex:
        raise FileOperationError(f"Failed to export to {target}: {ex}") from ex
    logger.debug(f"Wrote {len(lines)} line(s) to {target}")
    return target
