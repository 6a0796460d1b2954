"""Shared pytest fixtures for termtools tests."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterator

import pytest

from password_generator import GenerationSettings, PasswordGenerator


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so generation traces are reproducible.

    Returns:
        random.Random seeded with a fixed value
    """
    return random.Random(1234)


@pytest.fixture
def settings() -> GenerationSettings:
    """Default generation settings.

    Returns:
        Fresh GenerationSettings instance
    """
    return GenerationSettings()


@pytest.fixture
def generator(rng: random.Random) -> PasswordGenerator:
    """Password generator with default settings and a seeded source.

    Args:
        rng: Seeded random fixture

    Returns:
        PasswordGenerator instance
    """
    return PasswordGenerator(rng=rng)


@pytest.fixture
def export_dir(tmp_path: Path) -> Path:
    """Directory to receive exported files.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to a not-yet-created export directory
    """
    return tmp_path / "export"


@pytest.fixture
def in_tmp_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run the test from a temporary working directory.

    Exports default to ``export/`` relative to the working directory, so CLI
    tests change into a scratch directory.

    Yields:
        The temporary working directory
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture
def sample_text_file(tmp_path: Path) -> Path:
    """Create a sample text file for testing.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / "sample.txt"
    file_path.write_text("Hello, World!", encoding="utf-8")
    return file_path
