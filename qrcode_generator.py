"""QR code generator: terminal rendering and PNG export.

Requires `qrcode[pil]` (installs Pillow backend). Example:
  pip install qrcode[pil]
  python qrcode_generator.py --data "https://example.com"
  python qrcode_generator.py --file note.txt --output export/note.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence

import qrcode
from qrcode.constants import (
    ERROR_CORRECT_H,
    ERROR_CORRECT_L,
    ERROR_CORRECT_M,
    ERROR_CORRECT_Q,
)

from common.cli_helpers import add_log_level_argument, setup_logging
from common.exceptions import ToolkitError
from common.file_helpers import export_path

logger = logging.getLogger(__name__)


ERROR_LEVELS = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}

class QRCodeError(ToolkitError):
    """Raised when QR code generation fails."""


def read_data(data: Optional[str], file: Optional[Path]) -> str:
    if data is not None:
        return data
    assert file is not None
    try:
        return file.read_text(encoding="utf-8")
    except OSError as ex:
        raise QRCodeError(f"Failed to read data file '{file}': {ex}") from ex


def build_qr(
    data: str,
    version: Optional[int] = None,
    error_level: str = "M",
    box_size: int = 10,
    border: int = 4,
) -> Any:
    """Build a fitted ``qrcode.QRCode`` for ``data``.

    Raises:
        QRCodeError: If data is empty, options are invalid or data does not fit
    """
    if not data.strip():
        raise QRCodeError("Data is empty")
    if version is not None and not (1 <= version <= 40):
        raise QRCodeError("--version must be between 1 and 40")
    if error_level not in ERROR_LEVELS:
        raise QRCodeError(f"Unknown error correction level: {error_level}")

    try:
        qr = qrcode.QRCode(
            version=version,
            error_correction=ERROR_LEVELS[error_level],
            box_size=box_size,
            border=border,
        )
        qr.add_data(data)
        qr.make(fit=True)
    except Exception as ex:  # noqa: BLE001
        raise QRCodeError(f"Failed to generate QR code: {ex}") from ex
    return qr


def render_text(matrix: List[List[bool]]) -> str:
    """Render a module matrix with half blocks, two rows per text line."""
    lines: List[str] = []
    for top in range(0, len(matrix), 2):
        upper = matrix[top]
        lower = matrix[top + 1] if top + 1 < len(matrix) else [False] * len(upper)
        chars = []
        for dark_top, dark_bottom in zip(upper, lower):
            if dark_top and dark_bottom:
                chars.append("█")
            elif dark_top:
                chars.append("▀")
            elif dark_bottom:
                chars.append("▄")
            else:
                chars.append(" ")
        lines.append("".join(chars))
    return "\n".join(lines)


def qr_to_text(data: str, error_level: str = "M") -> str:
    """Build a QR code without quiet zone and render it for the terminal."""
    qr = build_qr(data, error_level=error_level, border=0)
    return render_text(qr.get_matrix())


def default_export_name(data: str) -> str:
    """File name from the first ten characters of the data."""
    return f"{data[:10].replace(' ', '_').lower()}.png"


def generate_qr_code(
    data: str,
    output_path: Path,
    version: Optional[int] = None,
    error_level: str = "M",
    box_size: int = 10,
    border: int = 4,
    fill: str = "black",
    back: str = "white",
) -> Path:
    qr = build_qr(data, version, error_level, box_size, border)
    try:
        img = qr.make_image(fill_color=fill, back_color=back)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "wb") as f:
            img.save(f)
    except Exception as ex:  # noqa: BLE001
        raise QRCodeError(f"Failed to save QR code: {ex}") from ex
    return output_path


def export_qr_code(data: str, export_dir: Path | None = None) -> Path:
    """Save ``data`` as a PNG under the export directory."""
    if not data.strip():
        raise QRCodeError("QR code has not been generated yet")
    target = export_path(default_export_name(data), export_dir)
    return generate_qr_code(data, target)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a QR code from text or file.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--data", type=str, help="Text/data to encode")
    src.add_argument("--file", type=Path, help="Read data to encode from UTF-8 file")

    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output image path (default: export/<first 10 chars>.png)",
    )
    parser.add_argument(
        "--terminal", action="store_true", help="Print the QR code instead of saving"
    )
    parser.add_argument(
        "--version",
        type=int,
        default=None,
        help="QR version (1-40); default auto based on data",
    )
    parser.add_argument(
        "--error",
        choices=sorted(ERROR_LEVELS),
        default="M",
        help="Error correction level",
    )
    parser.add_argument(
        "--box-size", type=int, default=10, help="Pixel size of each box"
    )
    parser.add_argument(
        "--border", type=int, default=4, help="Border boxes around the code"
    )
    parser.add_argument("--fill", type=str, default="black", help="Foreground color")
    parser.add_argument("--back", type=str, default="white", help="Background color")
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    try:
        data = read_data(args.data, args.file)
        if args.terminal:
            print(qr_to_text(data, args.error))
            return 0
        output = args.output or export_path(default_export_name(data))
        generate_qr_code(
            data=data,
            output_path=output,
            version=args.version,
            error_level=args.error,
            box_size=args.box_size,
            border=args.border,
            fill=args.fill,
            back=args.back,
        )
    except ToolkitError as ex:
        logger.error(str(ex))
        return 1

    logger.info(f"Saved QR code to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
