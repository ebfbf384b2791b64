"""Pytest fixtures for caseconv tests."""

from pathlib import Path

import pytest


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory (no caseconv.yaml) for CLI and config tests."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
