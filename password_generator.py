"""Constrained password generator with toggleable character rules.

Builds passwords by rejection sampling over an alphabet assembled from the
enabled character classes. Each candidate character is checked against the
active rules (no duplicates, no sequential neighbours, no similar-looking
glyphs) and redrawn until accepted. Every position has a bounded retry
budget so impossible rule combinations fail with an error instead of
looping forever.

Examples:
  python password_generator.py --length 16 --count 5
  python password_generator.py --no-symbols --exclude-similar --json
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import secrets
import string
import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

from common.cli_helpers import (
    add_json_output_argument,
    add_log_level_argument,
    setup_logging,
)
from common.exceptions import FileOperationError, ToolkitError, ValidationError
from common.file_helpers import write_export

logger = logging.getLogger(__name__)


SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Fixed order: uppercase, lowercase, numbers, symbols
CHARACTER_CLASSES: Dict[str, str] = {
    "uppercase": string.ascii_uppercase,
    "lowercase": string.ascii_lowercase,
    "numbers": string.digits,
    "symbols": SYMBOLS,
}

SIMILAR_CHARS = frozenset("iIlL1oO0")

MAX_ATTEMPTS_PER_POSITION = 500


class PasswordGenerationError(ToolkitError, ValueError):
    """Raised when password generation constraints cannot be satisfied."""


class EmptyAlphabetError(PasswordGenerationError):
    """Raised when the enabled classes leave no candidate characters."""


class UnsatisfiableError(PasswordGenerationError):
    """Raised when a position exhausts its retry budget."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class BatchAbortedError(PasswordGenerationError):
    """Raised when one password in a batch fails; the batch is discarded."""

    def __init__(self, at_index: int, cause: PasswordGenerationError) -> None:
        super().__init__(f"batch aborted at password {at_index + 1}: {cause}")
        self.at_index = at_index
        self.cause = cause


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class GenerationSettings:
    length: int = 12
    quantity: int = 1
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    allow_duplicates: bool = False
    allow_sequential: bool = False

    def enabled_classes(self) -> List[str]:
        flags = {
            "uppercase": self.include_uppercase,
            "lowercase": self.include_lowercase,
            "numbers": self.include_numbers,
            "symbols": self.include_symbols,
        }
        return [name for name in CHARACTER_CLASSES if flags[name]]


@dataclass(frozen=True)
class PasswordSnapshot:
    """Read-only view of the generator state for rendering."""

    settings: GenerationSettings
    passwords: Tuple[str, ...] = field(default_factory=tuple)


def build_alphabet(settings: GenerationSettings) -> str:
    """Assemble the candidate alphabet from the enabled classes.

    Raises:
        EmptyAlphabetError: If no class is enabled or exclusion empties it
    """
    seen: List[str] = []
    for name in settings.enabled_classes():
        for ch in CHARACTER_CLASSES[name]:
            if ch not in seen:
                seen.append(ch)

    if settings.exclude_similar:
        seen = [ch for ch in seen if ch not in SIMILAR_CHARS]

    if not seen:
        if not settings.enabled_classes():
            raise EmptyAlphabetError("No character classes selected")
        raise EmptyAlphabetError("Similar-character exclusion removed every candidate")
    return "".join(seen)


def is_acceptable(
    candidate: str, password: Sequence[str], settings: GenerationSettings
) -> bool:
    """Check a candidate character against the active rules."""
    if not settings.allow_duplicates and candidate in password:
        return False
    if not settings.allow_sequential and password:
        if abs(ord(candidate) - ord(password[-1])) == 1:
            return False
    # build_alphabet already strips these; enforced here as well
    if settings.exclude_similar and candidate in SIMILAR_CHARS:
        return False
    return True


def _default_rng() -> RandomSource:
    return secrets.SystemRandom()


def generate_password(
    settings: GenerationSettings,
    rng: Optional[RandomSource] = None,
    max_attempts: int = MAX_ATTEMPTS_PER_POSITION,
) -> str:
    """Generate one password satisfying every active rule.

    Args:
        settings: Rules and length to honour
        rng: Object with ``randrange``; defaults to ``secrets.SystemRandom``
        max_attempts: Draws allowed per position before giving up

    Returns:
        Password of exactly ``settings.length`` characters

    Raises:
        EmptyAlphabetError: If no candidate characters exist
        UnsatisfiableError: If a position cannot be filled

    Positions are filled left to right and never revisited, so a rule set
    that admits some valid password can still reach a dead end; that run is
    reported as ``UnsatisfiableError`` too.
    """
    if settings.length < 1:
        raise ValidationError("length must be >= 1")

    alphabet = build_alphabet(settings)
    if not settings.allow_duplicates and settings.length > len(alphabet):
        raise UnsatisfiableError(
            f"length {settings.length} exceeds the {len(alphabet)} distinct "
            "characters available without duplicates",
            position=len(alphabet),
        )

    rng = rng or _default_rng()
    chars: List[str] = []
    for position in range(settings.length):
        for attempt in range(1, max_attempts + 1):
            candidate = alphabet[rng.randrange(len(alphabet))]
            if is_acceptable(candidate, chars, settings):
                chars.append(candidate)
                break
        else:
            logger.debug(
                f"Position {position} rejected {max_attempts} candidates, giving up"
            )
            raise UnsatisfiableError(
                f"could not fill position {position + 1} of {settings.length} "
                f"after {max_attempts} attempts",
                position=position,
            )
        if attempt > 1:
            logger.debug(f"Position {position} accepted after {attempt} draws")

    return "".join(chars)


def generate_passwords(
    settings: GenerationSettings,
    rng: Optional[RandomSource] = None,
    max_attempts: int = MAX_ATTEMPTS_PER_POSITION,
) -> List[str]:
    """Generate ``settings.quantity`` passwords, all or nothing.

    Raises:
        BatchAbortedError: On the first failing password
    """
    rng = rng or _default_rng()
    passwords: List[str] = []
    for index in range(max(1, settings.quantity)):
        try:
            passwords.append(generate_password(settings, rng, max_attempts))
        except PasswordGenerationError as ex:
            logger.debug(f"Batch aborted at {index}: {ex}")
            raise BatchAbortedError(index, ex) from ex
    return passwords


class PasswordGenerator:
    """Owns the generation settings and the last generated output.

    Every mutation is a named method; nothing here touches files or the
    terminal. Randomness is only consumed by the ``generate_*`` methods.
    """

    def __init__(
        self,
        settings: Optional[GenerationSettings] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.settings = settings or GenerationSettings()
        self.rng = rng
        self.passwords: List[str] = []

    # --- toggles ---

    def toggle_class(self, name: str) -> None:
        if name not in CHARACTER_CLASSES:
            raise ValidationError(
                f"Unknown character class '{name}'; "
                f"expected one of {', '.join(CHARACTER_CLASSES)}"
            )
        attr = f"include_{name}"
        setattr(self.settings, attr, not getattr(self.settings, attr))

    def toggle_similar_exclusion(self) -> None:
        self.settings.exclude_similar = not self.settings.exclude_similar

    def toggle_duplicates(self) -> None:
        self.settings.allow_duplicates = not self.settings.allow_duplicates

    def toggle_sequential(self) -> None:
        self.settings.allow_sequential = not self.settings.allow_sequential

    # --- length / quantity ---

    def set_length(self, n: int) -> None:
        self.settings.length = max(1, int(n))

    def increase_length(self) -> None:
        self.settings.length += 1

    def decrease_length(self) -> None:
        if self.settings.length > 1:
            self.settings.length -= 1

    def set_quantity(self, n: int) -> None:
        self.settings.quantity = max(1, int(n))

    def increase_quantity(self) -> None:
        self.settings.quantity += 1

    def decrease_quantity(self) -> None:
        if self.settings.quantity > 1:
            self.settings.quantity -= 1

    # --- generation ---

    def generate_one(self) -> str:
        password = generate_password(self.settings, self.rng)
        self.passwords = [password]
        return password

    def generate_batch(self) -> List[str]:
        passwords = generate_passwords(self.settings, self.rng)
        self.passwords = passwords
        return list(passwords)

    def clear(self) -> None:
        self.passwords = []

    def snapshot(self) -> PasswordSnapshot:
        return PasswordSnapshot(
            settings=GenerationSettings(**asdict(self.settings)),
            passwords=tuple(self.passwords),
        )


def export_passwords(passwords: Sequence[str], export_dir: Path | None = None) -> Path:
    """Write passwords to ``export/password.txt``, one per line."""
    if not passwords:
        raise FileOperationError("No password generated yet")
    return write_export("password.txt", list(passwords), export_dir=export_dir)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate passwords with configurable character rules.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--length", type=int, default=12, help="Password length")
    parser.add_argument(
        "--count", type=int, default=1, help="Number of passwords to generate"
    )

    classes = parser.add_argument_group("Character classes")
    classes.add_argument(
        "--no-upper",
        dest="use_upper",
        action="store_false",
        help="Exclude uppercase letters",
    )
    classes.add_argument(
        "--no-lower",
        dest="use_lower",
        action="store_false",
        help="Exclude lowercase letters",
    )
    classes.add_argument(
        "--no-digits", dest="use_digits", action="store_false", help="Exclude digits"
    )
    classes.add_argument(
        "--no-symbols", dest="use_symbols", action="store_false", help="Exclude symbols"
    )

    rules = parser.add_argument_group("Rules")
    rules.add_argument(
        "--exclude-similar",
        action="store_true",
        help=f"Never use look-alike characters ({''.join(sorted(SIMILAR_CHARS))})",
    )
    rules.add_argument(
        "--allow-duplicates",
        action="store_true",
        help="Allow a character to appear more than once",
    )
    rules.add_argument(
        "--allow-sequential",
        action="store_true",
        help="Allow neighbours like 'ab' or '32'",
    )

    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible output (testing)"
    )
    parser.add_argument(
        "--export", action="store_true", help="Also write export/password.txt"
    )
    add_json_output_argument(parser)
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> GenerationSettings:
    return GenerationSettings(
        length=max(1, args.length),
        quantity=max(1, args.count),
        include_uppercase=args.use_upper,
        include_lowercase=args.use_lower,
        include_numbers=args.use_digits,
        include_symbols=args.use_symbols,
        exclude_similar=args.exclude_similar,
        allow_duplicates=args.allow_duplicates,
        allow_sequential=args.allow_sequential,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)

    rng: Optional[RandomSource] = None
    if args.seed is not None:
        rng = random.Random(args.seed)

    generator = PasswordGenerator(settings_from_args(args), rng=rng)
    try:
        passwords = generator.generate_batch()
    except PasswordGenerationError as ex:
        logger.error(str(ex))
        return 2

    if args.json:
        print(json.dumps(passwords))
    else:
        for pw in passwords:
            print(pw)

    if args.export:
        try:
            target = export_passwords(passwords)
        except FileOperationError as ex:
            logger.error(str(ex))
            return 1
        logger.info(f"Exported to {target}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
