"""Terminal toolbox: every converter and generator behind one Typer CLI.

Examples:
  python toolbox.py password --length 16 --count 3
  python toolbox.py password-session
  python toolbox.py color "#1E90FF"
  python toolbox.py qr "https://example.com" --export
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Callable, Dict, List, Optional

import typer

import password_generator as pwgen
import qrcode_generator
from common.cli_helpers import setup_logging
from common.exceptions import ToolkitError
from converters import (
    base64_codec,
    color_converter,
    date_converter,
    hash_generator,
    number_base_converter,
    uuid_generator,
)

app = typer.Typer(help="Converters and generators for the terminal.")
logger = logging.getLogger(__name__)


def _fail(ex: Exception, code: int = 1) -> None:
    typer.secho(f"Error: {ex}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=code)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging verbosity", case_sensitive=False
    ),
) -> None:
    """Global options for the toolbox."""
    setup_logging(log_level)


# --- password ---


@app.command()
def password(
    length: int = typer.Option(12, "--length", min=1, help="Password length"),
    count: int = typer.Option(1, "--count", min=1, help="How many passwords"),
    upper: bool = typer.Option(True, "--upper/--no-upper", help="Uppercase A-Z"),
    lower: bool = typer.Option(True, "--lower/--no-lower", help="Lowercase a-z"),
    numbers: bool = typer.Option(True, "--numbers/--no-numbers", help="Digits 0-9"),
    symbols: bool = typer.Option(True, "--symbols/--no-symbols", help="Symbols"),
    exclude_similar: bool = typer.Option(
        False, "--exclude-similar", help="Skip look-alike characters"
    ),
    allow_duplicates: bool = typer.Option(
        False, "--allow-duplicates", help="Allow repeated characters"
    ),
    allow_sequential: bool = typer.Option(
        False, "--allow-sequential", help="Allow neighbours like 'ab'"
    ),
    export: bool = typer.Option(False, "--export", help="Write export/password.txt"),
) -> None:
    """Generate passwords under the given rules."""
    settings = pwgen.GenerationSettings(
        length=length,
        quantity=count,
        include_uppercase=upper,
        include_lowercase=lower,
        include_numbers=numbers,
        include_symbols=symbols,
        exclude_similar=exclude_similar,
        allow_duplicates=allow_duplicates,
        allow_sequential=allow_sequential,
    )
    generator = pwgen.PasswordGenerator(settings)
    try:
        passwords = generator.generate_batch()
    except pwgen.PasswordGenerationError as ex:
        _fail(ex, code=2)
    for pw in passwords:
        typer.echo(pw)
    if export:
        try:
            target = pwgen.export_passwords(passwords)
        except ToolkitError as ex:
            _fail(ex)
        typer.echo(f"Successfully exported to {target}")


class PasswordSession:
    """Keystroke-driven front end for a ``PasswordGenerator``.

    Each key maps to one named operation on the generator; ``handle``
    returns a status message for the caller to show.
    """

    HELP = [
        ("g", "Generate password"),
        ("m", "Generate multiple passwords"),
        ("c", "Clear password"),
        ("x", "Export generated password"),
        ("i", "Increase password length"),
        ("d", "Decrease password length"),
        ("k", "Increase password quantity"),
        ("j", "Decrease password quantity"),
        ("u", "Toggle uppercase"),
        ("l", "Toggle lowercase"),
        ("n", "Toggle numbers"),
        ("s", "Toggle symbols"),
        ("z", "Toggle similar character exclusion"),
        ("q", "Toggle duplicate characters"),
        ("v", "Toggle sequential characters"),
        ("h", "Show this help"),
        ("exit", "Leave the session"),
    ]

    def __init__(self, generator: Optional[pwgen.PasswordGenerator] = None) -> None:
        self.generator = generator or pwgen.PasswordGenerator()
        g = self.generator
        self.actions: Dict[str, Callable[[], Optional[str]]] = {
            "g": self._generate_one,
            "m": self._generate_batch,
            "c": self._clear,
            "x": self._export,
            "i": g.increase_length,
            "d": g.decrease_length,
            "k": g.increase_quantity,
            "j": g.decrease_quantity,
            "u": lambda: g.toggle_class("uppercase"),
            "l": lambda: g.toggle_class("lowercase"),
            "n": lambda: g.toggle_class("numbers"),
            "s": lambda: g.toggle_class("symbols"),
            "z": g.toggle_similar_exclusion,
            "q": g.toggle_duplicates,
            "v": g.toggle_sequential,
            "h": self.help_text,
        }

    def _generate_one(self) -> str:
        self.generator.generate_one()
        return "Generated 1 password"

    def _generate_batch(self) -> str:
        passwords = self.generator.generate_batch()
        return f"Generated {len(passwords)} password(s)"

    def _clear(self) -> str:
        self.generator.clear()
        return "Cleared"

    def _export(self) -> str:
        target = pwgen.export_passwords(self.generator.snapshot().passwords)
        return f"Successfully exported to {target}"

    def help_text(self) -> str:
        return "\n".join(f"  {key:<5} {label}" for key, label in self.HELP)

    def handle(self, key: str) -> Optional[str]:
        """Run the action bound to ``key``; errors become messages."""
        action = self.actions.get(key.strip())
        if action is None:
            return f"Unknown key {key!r}, press h for help"
        try:
            return action()
        except ToolkitError as ex:
            logger.debug(f"Action {key!r} failed: {ex}")
            if isinstance(ex, pwgen.PasswordGenerationError):
                return f"Generation failed: {ex}"
            return f"Failed to export: {ex}"

    def render(self) -> str:
        snap = self.generator.snapshot()
        lines: List[str] = [
            f"{name.replace('_', ' ').capitalize():<18} {value}"
            for name, value in asdict(snap.settings).items()
        ]
        lines.append("")
        lines.append("Generated:")
        lines.extend(f"  {pw}" for pw in snap.passwords)
        return "\n".join(lines)


@app.command("password-session")
def password_session() -> None:
    """Interactive password generator driven by single-key commands."""
    session = PasswordSession()
    typer.echo(session.help_text())
    while True:
        try:
            key = typer.prompt(">", default="", show_default=False)
        except typer.Abort:
            break
        if key.strip() in {"exit", "quit"}:
            break
        if not key.strip():
            continue
        message = session.handle(key)
        typer.echo(session.render())
        if message:
            typer.echo(message)


# --- converters ---


@app.command("base64")
def base64_cmd(
    text: str = typer.Argument(..., help="Text to encode or decode"),
    decode: bool = typer.Option(False, "--decode", "-d", help="Decode instead"),
    export: bool = typer.Option(False, "--export", help="Write export/base64.txt"),
) -> None:
    """Encode or decode base64."""
    mode = "decode" if decode else "encode"
    try:
        result = (
            base64_codec.decode(text) if decode else base64_codec.encode(text)
        )
        typer.echo(result)
        if export:
            target = base64_codec.export_result(text, result, mode)
            typer.echo(f"Successfully exported to {target}")
    except ToolkitError as ex:
        _fail(ex)


@app.command()
def color(
    value: str = typer.Argument(..., help="HEX, RGB, CMYK or HSL color"),
    export: bool = typer.Option(False, "--export", help="Write export/color_codes.txt"),
) -> None:
    """Convert a color between notations."""
    try:
        codes = color_converter.convert_all(value)
        for name, code in asdict(codes).items():
            typer.echo(f"{name.upper():<5} {code}")
        if export:
            target = color_converter.export_codes(value, codes)
            typer.echo(f"Successfully exported to {target}")
    except ToolkitError as ex:
        _fail(ex)


@app.command()
def date(
    value: str = typer.Argument(..., help="Unix timestamp or date string"),
    export: bool = typer.Option(False, "--export", help="Write export/date.txt"),
) -> None:
    """Render a date in common formats."""
    try:
        formats = date_converter.convert_all(value)
        for name, text in asdict(formats).items():
            typer.echo(f"{name:<15} {text}")
        if export:
            target = date_converter.export_formats(value, formats)
            typer.echo(f"Successfully exported to {target}")
    except ToolkitError as ex:
        _fail(ex)


@app.command("hash")
def hash_cmd(
    text: str = typer.Argument(..., help="Text to hash"),
    export: bool = typer.Option(False, "--export", help="Write export/hash.txt"),
) -> None:
    """Print SHA-1/256/384/512 digests."""
    digests = hash_generator.hash_all(text)
    for algo, digest in digests.items():
        typer.echo(f"{algo.upper():<7} {digest}")
    if export:
        try:
            target = hash_generator.export_hashes(text, digests)
        except ToolkitError as ex:
            _fail(ex)
        typer.echo(f"Successfully exported to {target}")


@app.command("number-base")
def number_base(
    value: str = typer.Argument(..., help="Number to convert"),
    base_from: int = typer.Option(10, "--from", help="Input base (2, 10, 16)"),
    base_to: int = typer.Option(2, "--to", help="Output base (2, 10, 16)"),
    export: bool = typer.Option(
        False, "--export", help="Write export/number_conversion.txt"
    ),
) -> None:
    """Convert a number between bases 2, 10 and 16."""
    try:
        result = number_base_converter.convert(value, base_from, base_to)
        table = number_base_converter.conversion_table(value)
        typer.echo(result)
        if export:
            target = number_base_converter.export_conversion(
                value, base_from, base_to, result, table
            )
            typer.echo(f"Successfully exported to {target}")
    except ToolkitError as ex:
        _fail(ex)


@app.command()
def qr(
    data: str = typer.Argument(..., help="Text to encode"),
    export: bool = typer.Option(False, "--export", help="Save a PNG under export/"),
) -> None:
    """Show a QR code in the terminal."""
    try:
        typer.echo(qrcode_generator.qr_to_text(data))
        if export:
            target = qrcode_generator.export_qr_code(data)
            typer.echo(f"Successfully exported to {target}")
    except ToolkitError as ex:
        _fail(ex)


@app.command()
def uuid(
    version: int = typer.Option(4, "--version", help="UUID version (4 or 7)"),
    count: int = typer.Option(1, "--count", min=1, help="How many UUIDs"),
    export: bool = typer.Option(False, "--export", help="Write export/uuid.txt"),
) -> None:
    """Generate UUIDs."""
    try:
        batch = uuid_generator.UuidBatch(count)
        for value in batch.generate(version):
            typer.echo(value)
        if export:
            target = batch.export()
            typer.echo(f"Successfully exported to {target}")
    except ToolkitError as ex:
        _fail(ex)


if __name__ == "__main__":
    app()
