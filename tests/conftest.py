"""Shared test fixtures for daily notes tests."""

from datetime import datetime
from pathlib import Path

import pytest

from settings import DEFAULT_SETTINGS


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary Obsidian vault with sample content."""
    (tmp_path / ".obsidian").mkdir()

    # Folders
    (tmp_path / "Projects").mkdir()
    (tmp_path / "Daily Notes").mkdir()
    (tmp_path / "Templates").mkdir()

    # Sample notes
    (tmp_path / "Projects" / "plan.md").write_text(
        "# Plan\n\nToday: [[Journal/Daily Notes/DDMMYYYY-daily|today]]\n"
    )
    (tmp_path / "README.md").write_text("# My Vault\n\nWelcome to my vault.\n")

    # Template
    (tmp_path / "Templates" / "Daily.md").write_text("# {{date}}\n\n## Log\n")

    return tmp_path


@pytest.fixture
def settings() -> dict:
    return dict(DEFAULT_SETTINGS)


@pytest.fixture
def when() -> datetime:
    return datetime(2024, 3, 7, 9, 30, 15)
