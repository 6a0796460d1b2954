"""Tests for qrcode_generator module."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from qrcode_generator import (
    QRCodeError,
    build_qr,
    default_export_name,
    export_qr_code,
    generate_qr_code,
    qr_to_text,
    render_text,
)


def test_render_text_half_blocks():
    """Test two matrix rows collapse into one text line."""
    matrix = [
        [True, True, False, False],
        [True, False, True, False],
        [False, True, False, False],
    ]
    assert render_text(matrix) == "█▀▄ \n ▀  "


def test_qr_to_text_dimensions():
    """Test a version 1 code renders 21 modules wide on 11 lines."""
    text = qr_to_text("hi")
    lines = text.split("\n")
    assert len(lines) == 11
    assert all(len(line) == 21 for line in lines)


def test_build_qr_empty_data():
    """Test empty data is rejected."""
    with pytest.raises(QRCodeError, match="Data is empty"):
        build_qr("   ")


def test_build_qr_invalid_version():
    """Test out-of-range versions are rejected."""
    with pytest.raises(QRCodeError, match="between 1 and 40"):
        build_qr("hello", version=41)


@pytest.mark.parametrize(
    "data,name",
    [
        ("Hello World from QR", "hello_worl.png"),
        ("abc", "abc.png"),
    ],
)
def test_default_export_name(data: str, name: str):
    """Test file names use the first ten characters."""
    assert default_export_name(data) == name


def test_generate_qr_code_png(tmp_path: Path):
    """Test a PNG is written and readable."""
    target = generate_qr_code("https://example.com", tmp_path / "out" / "qr.png")
    with Image.open(target) as img:
        assert img.format == "PNG"
        assert img.size[0] == img.size[1]


def test_export_qr_code(export_dir: Path):
    """Test export lands in the export directory."""
    target = export_qr_code("Hello World", export_dir)
    assert target == export_dir / "hello_worl.png"
    assert target.exists()


def test_export_qr_code_without_data(export_dir: Path):
    """Test exporting with no data is an error."""
    with pytest.raises(QRCodeError, match="not been generated"):
        export_qr_code("", export_dir)
