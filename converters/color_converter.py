"""Color code converter between HEX, RGB, CMYK and HSL notations.

Accepted input forms (auto-detected in this order):
  #FF8800 or FF8800        hex
  255, 136, 0              rgb
  0%, 47%, 100%, 0%        cmyk (percent signs optional)
  32°, 100%, 50%           hsl (degree and percent signs optional)

Examples:
  python -m converters.color_converter "#1E90FF"
  python -m converters.color_converter "210, 100%, 56%" --json
"""

from __future__ import annotations

import argparse
import json
import logging
import string
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from common.cli_helpers import (
    add_export_argument,
    add_json_output_argument,
    add_log_level_argument,
    setup_logging,
)
from common.exceptions import FileOperationError, ToolkitError
from common.file_helpers import write_export

logger = logging.getLogger(__name__)


class ColorFormatError(ToolkitError):
    """Raised when input is not a recognised color notation."""


@dataclass(frozen=True)
class RGB:
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class ColorCodes:
    cmyk: str
    rgb: str
    hex: str
    hsl: str


def _channel(value: float) -> int:
    # Truncate like an integer cast, saturating at the byte range
    return max(0, min(255, int(value)))


def _split(text: str, count: int) -> Optional[List[str]]:
    parts = [p.strip() for p in text.split(",")]
    return parts if len(parts) == count else None


def parse_hex(text: str) -> Optional[RGB]:
    value = text.strip().lstrip("#")
    if len(value) != 6 or not all(c in string.hexdigits for c in value):
        return None
    rgb = int(value, 16)
    return RGB((rgb >> 16) & 0xFF, (rgb >> 8) & 0xFF, rgb & 0xFF)


def parse_rgb(text: str) -> Optional[RGB]:
    parts = _split(text, 3)
    if parts is None:
        return None
    try:
        values = [int(p) for p in parts]
    except ValueError:
        return None
    if any(not 0 <= v <= 255 for v in values):
        return None
    return RGB(*values)


def parse_cmyk(text: str) -> Optional[RGB]:
    parts = _split(text, 4)
    if parts is None:
        return None
    try:
        c, m, y, k = (float(p.rstrip("%")) for p in parts)
    except ValueError:
        return None
    return RGB(
        _channel(255.0 * (1.0 - c / 100.0) * (1.0 - k / 100.0)),
        _channel(255.0 * (1.0 - m / 100.0) * (1.0 - k / 100.0)),
        _channel(255.0 * (1.0 - y / 100.0) * (1.0 - k / 100.0)),
    )


def parse_hsl(text: str) -> Optional[RGB]:
    parts = _split(text, 3)
    if parts is None:
        return None
    try:
        h = float(parts[0].rstrip("°"))
        s = float(parts[1].rstrip("%")) / 100.0
        l = float(parts[2].rstrip("%")) / 100.0  # noqa: E741
    except ValueError:
        return None

    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = l - c / 2.0

    if h < 60.0:
        r, g, b = c, x, 0.0
    elif h < 120.0:
        r, g, b = x, c, 0.0
    elif h < 180.0:
        r, g, b = 0.0, c, x
    elif h < 240.0:
        r, g, b = 0.0, x, c
    elif h < 300.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return RGB(
        _channel((r + m) * 255.0),
        _channel((g + m) * 255.0),
        _channel((b + m) * 255.0),
    )


PARSERS: List[Callable[[str], Optional[RGB]]] = [
    parse_hex,
    parse_rgb,
    parse_cmyk,
    parse_hsl,
]


def parse_color(text: str) -> RGB:
    """Parse any supported notation into RGB.

    Raises:
        ColorFormatError: If no parser accepts the input
    """
    for parser in PARSERS:
        color = parser(text)
        if color is not None:
            return color
    raise ColorFormatError("Invalid color format")


def to_cmyk(color: RGB) -> str:
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    k = 1.0 - max(r, g, b)
    if k >= 1.0:
        c = m = y = 0.0
    else:
        c = (1.0 - r - k) / (1.0 - k)
        m = (1.0 - g - k) / (1.0 - k)
        y = (1.0 - b - k) / (1.0 - k)
    return f"{c * 100:.0f}%, {m * 100:.0f}%, {y * 100:.0f}%, {k * 100:.0f}%"


def to_rgb(color: RGB) -> str:
    return f"{color.r}, {color.g}, {color.b}"


def to_hex(color: RGB) -> str:
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def to_hsl(color: RGB) -> str:
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    hi = max(r, g, b)
    lo = min(r, g, b)
    diff = hi - lo

    if hi == lo:
        h = 0.0
    elif hi == r:
        h = (60.0 * ((g - b) / diff) + 360.0) % 360.0
    elif hi == g:
        h = 60.0 * ((b - r) / diff) + 120.0
    else:
        h = 60.0 * ((r - g) / diff) + 240.0

    light = (hi + lo) / 2.0
    if light == 0.0 or hi == lo:
        s = 0.0
    elif light <= 0.5:
        s = diff / (hi + lo)
    else:
        s = diff / (2.0 - hi - lo)

    return f"{h:.0f}°, {s * 100:.0f}%, {light * 100:.0f}%"


def convert_all(text: str) -> ColorCodes:
    color = parse_color(text)
    return ColorCodes(
        cmyk=to_cmyk(color), rgb=to_rgb(color), hex=to_hex(color), hsl=to_hsl(color)
    )


def export_codes(text: str, codes: ColorCodes, export_dir: Path | None = None) -> Path:
    lines = [
        f"Entered Color Code: {text}",
        f"CMYK: {codes.cmyk}",
        f"RGB: {codes.rgb}",
        f"HEX: {codes.hex}",
        f"HSL: {codes.hsl}",
    ]
    return write_export("color_codes.txt", lines, export_dir)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert a color between HEX, RGB, CMYK and HSL.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("color", help="Color in any supported notation")
    add_json_output_argument(parser)
    add_export_argument(parser)
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    try:
        codes = convert_all(args.color)
    except ColorFormatError as ex:
        logger.error(f"{ex}: {args.color!r}")
        return 1

    if args.json:
        print(json.dumps(asdict(codes), ensure_ascii=False))
    else:
        for name, value in asdict(codes).items():
            print(f"{name.upper():<5} {value}")

    if args.export:
        try:
            target = export_codes(args.color, codes)
        except FileOperationError as ex:
            logger.error(str(ex))
            return 1
        logger.info(f"Successfully exported to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
