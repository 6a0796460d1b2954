"""Tests for common.file_helpers module."""

from __future__ import annotations

from pathlib import Path

import pytest

from common.exceptions import FileOperationError
from common.file_helpers import export_path, safe_filename, write_export


@pytest.mark.parametrize(
    "name,expected",
    [
        ("password.txt", "password.txt"),
        ("a/b:c.png", "a_b_c.png"),
        (" .hidden. ", "hidden"),
    ],
)
def test_safe_filename(name: str, expected: str):
    """Test invalid characters are replaced."""
    assert safe_filename(name) == expected


def test_export_path_creates_directory(export_dir: Path):
    """Test the export directory is created on demand."""
    target = export_path("x.txt", export_dir)
    assert export_dir.is_dir()
    assert target == export_dir / "x.txt"


def test_export_path_rejects_empty_name(export_dir: Path):
    """Test names that sanitize to nothing are rejected."""
    with pytest.raises(FileOperationError):
        export_path(" . ", export_dir)


def test_write_export_overwrites(export_dir: Path):
    """Test each export replaces the previous file."""
    write_export("out.txt", ["one", "two"], export_dir)
    target = write_export("out.txt", ["three"], export_dir)
    assert target.read_text(encoding="utf-8") == "three\n"


def test_write_export_default_directory(in_tmp_cwd: Path):
    """Test the default directory is export/ under the working directory."""
    target = write_export("out.txt", ["x"])
    assert (in_tmp_cwd / target).read_text(encoding="utf-8") == "x\n"
    assert target.parent.name == "export"


def test_write_export_failure(tmp_path: Path):
    """Test a file blocking the directory surfaces as FileOperationError."""
    blocker = tmp_path / "export"
    blocker.write_text("not a directory")
    with pytest.raises(FileOperationError):
        write_export("out.txt", ["x"], blocker)
