"""Shared fixtures for building vault trees on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

from obsidian_notes.data_models import NotesConfiguration


def write_file(root: Path, relative: str, content: str = "") -> Path:
    """Create ``root/relative`` (and its folders) with ``content``."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """An empty vault directory, symlink-resolved."""
    vault_path = tmp_path / "vault"
    vault_path.mkdir()
    return vault_path.resolve()


@pytest.fixture
def outside(tmp_path: Path) -> Path:
    """A directory next to the vault holding a note that must stay unreachable."""
    outside_path = tmp_path / "outside"
    outside_path.mkdir()
    write_file(outside_path, "secret.md", "top secret")
    return outside_path.resolve()


@pytest.fixture
def config(vault: Path) -> NotesConfiguration:
    return NotesConfiguration.from_paths([vault], enable_write=True)
