"""Tests for converters.color_converter module."""

from __future__ import annotations

from pathlib import Path

import pytest

from converters.color_converter import (
    RGB,
    ColorFormatError,
    convert_all,
    export_codes,
    parse_color,
    to_cmyk,
    to_hex,
    to_hsl,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("#FF0000", RGB(255, 0, 0)),
        ("1e90ff", RGB(30, 144, 255)),
        ("255, 0, 0", RGB(255, 0, 0)),
        ("0%, 100%, 100%, 0%", RGB(255, 0, 0)),
        ("0, 0, 0, 100", RGB(0, 0, 0)),
        ("0°, 100%, 50%", RGB(255, 0, 0)),
        ("120°, 100%, 50%", RGB(0, 255, 0)),
    ],
)
def test_parse_color(text: str, expected: RGB):
    """Test every accepted notation."""
    assert parse_color(text) == expected


@pytest.mark.parametrize("bad", ["", "red", "#12345", "#GGGGGG", "1, 2"])
def test_parse_color_invalid(bad: str):
    """Test invalid notations raise ColorFormatError."""
    with pytest.raises(ColorFormatError, match="Invalid color format"):
        parse_color(bad)


@pytest.mark.parametrize("bad", ["-00001", "0x00FF", "+FFFFF", "12_345", "#1E 90F"])
def test_parse_color_rejects_non_hex_digits(bad: str):
    """Test six-character input with signs, prefixes or separators is rejected."""
    with pytest.raises(ColorFormatError, match="Invalid color format"):
        convert_all(bad)


def test_convert_all_red():
    """Test all outputs for pure red."""
    codes = convert_all("#FF0000")
    assert codes.cmyk == "0%, 100%, 100%, 0%"
    assert codes.rgb == "255, 0, 0"
    assert codes.hex == "#FF0000"
    assert codes.hsl == "0°, 100%, 50%"


def test_convert_all_dodger_blue():
    """Test a color with fractional components."""
    codes = convert_all("30, 144, 255")
    assert codes.hex == "#1E90FF"
    assert codes.cmyk == "88%, 44%, 0%, 0%"
    assert codes.hsl == "210°, 100%, 56%"


def test_black_and_white():
    """Test the achromatic extremes, including black's CMYK."""
    assert to_cmyk(RGB(0, 0, 0)) == "0%, 0%, 0%, 100%"
    assert to_hsl(RGB(0, 0, 0)) == "0°, 0%, 0%"
    assert to_hsl(RGB(255, 255, 255)) == "0°, 0%, 100%"
    assert to_hex(RGB(255, 255, 255)) == "#FFFFFF"


def test_export_codes(export_dir: Path):
    """Test export layout."""
    target = export_codes("#FF0000", convert_all("#FF0000"), export_dir)
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Entered Color Code: #FF0000"
    assert lines[3] == "HEX: #FF0000"
