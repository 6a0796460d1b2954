"""Tests for the PasswordGenerator settings/state container."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from common.exceptions import FileOperationError, ValidationError
from password_generator import (
    BatchAbortedError,
    EmptyAlphabetError,
    PasswordGenerator,
    export_passwords,
)


@pytest.mark.parametrize(
    "name,attr",
    [
        ("uppercase", "include_uppercase"),
        ("lowercase", "include_lowercase"),
        ("numbers", "include_numbers"),
        ("symbols", "include_symbols"),
    ],
)
def test_toggle_class(generator: PasswordGenerator, name: str, attr: str):
    """Test each class toggle flips exactly its flag."""
    generator.toggle_class(name)
    assert getattr(generator.settings, attr) is False
    generator.toggle_class(name)
    assert getattr(generator.settings, attr) is True


def test_toggle_unknown_class(generator: PasswordGenerator):
    """Test unknown class names are rejected."""
    with pytest.raises(ValidationError, match="Unknown character class"):
        generator.toggle_class("emoji")


def test_rule_toggles(generator: PasswordGenerator):
    """Test similar/duplicate/sequential toggles."""
    generator.toggle_similar_exclusion()
    generator.toggle_duplicates()
    generator.toggle_sequential()
    s = generator.settings
    assert s.exclude_similar and s.allow_duplicates and s.allow_sequential
    generator.toggle_duplicates()
    assert s.allow_duplicates is False


def test_length_adjustments(generator: PasswordGenerator):
    """Test increase/decrease/set of the length."""
    generator.increase_length()
    assert generator.settings.length == 13
    generator.set_length(3)
    generator.decrease_length()
    generator.decrease_length()
    assert generator.settings.length == 1
    generator.decrease_length()
    assert generator.settings.length == 1


def test_set_length_clamps(generator: PasswordGenerator):
    """Test setters never go below 1."""
    generator.set_length(0)
    assert generator.settings.length == 1
    generator.set_quantity(-4)
    assert generator.settings.quantity == 1


def test_quantity_adjustments(generator: PasswordGenerator):
    """Test quantity floor at 1."""
    generator.decrease_quantity()
    assert generator.settings.quantity == 1
    generator.increase_quantity()
    generator.increase_quantity()
    assert generator.settings.quantity == 3
    generator.decrease_quantity()
    assert generator.settings.quantity == 2


def test_generate_one_stores_output(generator: PasswordGenerator):
    """Test generate_one overwrites the stored output."""
    first = generator.generate_one()
    assert generator.snapshot().passwords == (first,)
    second = generator.generate_one()
    assert generator.snapshot().passwords == (second,)


def test_generate_batch_stores_output(generator: PasswordGenerator):
    """Test generate_batch stores every password in order."""
    generator.set_quantity(4)
    passwords = generator.generate_batch()
    assert len(passwords) == 4
    assert generator.snapshot().passwords == tuple(passwords)


def test_failed_generation_keeps_previous_output(generator: PasswordGenerator):
    """Test a failure leaves the last good output untouched."""
    previous = generator.generate_one()
    for name in ("uppercase", "lowercase", "numbers", "symbols"):
        generator.toggle_class(name)
    with pytest.raises(EmptyAlphabetError):
        generator.generate_one()
    with pytest.raises(BatchAbortedError):
        generator.generate_batch()
    assert generator.snapshot().passwords == (previous,)


def test_clear_keeps_settings(generator: PasswordGenerator):
    """Test clear empties output but not toggles."""
    generator.toggle_class("symbols")
    generator.set_length(20)
    generator.generate_one()
    generator.clear()
    snap = generator.snapshot()
    assert snap.passwords == ()
    assert snap.settings.length == 20
    assert snap.settings.include_symbols is False


def test_snapshot_is_detached(generator: PasswordGenerator):
    """Test snapshots do not change when the generator does."""
    snap = generator.snapshot()
    generator.increase_length()
    assert snap.settings.length == 12
    with pytest.raises(FrozenInstanceError):
        snap.passwords = ("x",)  # type: ignore[misc]


def test_export_passwords(export_dir: Path):
    """Test export writes one password per line."""
    target = export_passwords(["abc", "def"], export_dir=export_dir)
    assert target == export_dir / "password.txt"
    assert target.read_text(encoding="utf-8") == "abc\ndef\n"


def test_export_without_passwords(export_dir: Path):
    """Test exporting nothing is an error."""
    with pytest.raises(FileOperationError, match="No password generated yet"):
        export_passwords([], export_dir=export_dir)
