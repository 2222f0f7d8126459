"""Shared fixtures for the SafePass test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shared.config import SafePassConfig

COMMON_WORDS = ["password", "password123", "qwerty", "letmein", "Dragon2020"]


@pytest.fixture
def wordlist_dir(tmp_path: Path) -> Path:
    """Directory holding a small 10k list and a corrupt 100k list."""
    data_dir = tmp_path / "lists"
    data_dir.mkdir()
    (data_dir / "common-passwords-10k.json").write_text(
        json.dumps(COMMON_WORDS), encoding="utf-8"
    )
    (data_dir / "common-passwords-100k.json").write_text("{not json", encoding="utf-8")
    return data_dir


@pytest.fixture
def config(wordlist_dir: Path) -> SafePassConfig:
    cfg = SafePassConfig()
    cfg.wordlist.data_dir = str(wordlist_dir)
    cfg.wordlist.default_size = "10k"
    return cfg


@pytest.fixture
def config_file(tmp_path: Path, wordlist_dir: Path) -> Path:
    path = tmp_path / "safepass.toml"
    path.write_text(
        "[global]\n"
        'log_level = "ERROR"\n'
        "\n"
        "[wordlist]\n"
        f'data_dir = "{wordlist_dir.as_posix()}"\n'
        'default_size = "10k"\n'
        "\n"
        "[generator]\n"
        "length = 12\n"
        "include_symbols = false\n",
        encoding="utf-8",
    )
    return path
