"""Tests for converters.hash_generator module."""

from __future__ import annotations

import hashlib
import json
from pathlib import Path

import pytest

from converters.hash_generator import (
    SUPPORTED_ALGOS,
    export_hashes,
    hash_all,
    hash_text,
    main,
)


@pytest.mark.parametrize(
    "algo,expected",
    [
        ("sha256", "dffd6021bb2bd5b0af676290809ec3a53191dd81c7f70a4b28688a362182986f"),
        ("sha1", "0a0a9f2a6772942557ab5355d76af442f8f65e01"),
    ],
)
def test_hash_text_known(algo: str, expected: str):
    """Test known digests of "Hello, World!"."""
    assert hash_text("Hello, World!", algo) == expected


def test_hash_all():
    """Test every supported algorithm is computed."""
    digests = hash_all("abc")
    assert list(digests) == list(SUPPORTED_ALGOS)
    assert digests["sha384"] == hashlib.sha384(b"abc").hexdigest()
    assert digests["sha512"] == hashlib.sha512(b"abc").hexdigest()


def test_hash_empty_text():
    """Test hashing empty input."""
    assert hash_text("", "sha256") == hashlib.sha256(b"").hexdigest()


def test_export_hashes(export_dir: Path):
    """Test export layout."""
    target = export_hashes("abc", hash_all("abc"), export_dir)
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Input: abc"
    assert lines[1].startswith("SHA1: ")
    assert len(lines) == 5


def test_main_json(capsys: pytest.CaptureFixture[str]):
    """Test JSON output."""
    assert main(["--text", "abc", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["sha256"] == hashlib.sha256(b"abc").hexdigest()
