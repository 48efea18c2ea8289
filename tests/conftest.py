"""Shared test fixtures."""

from pathlib import Path

import pytest

from strategic_claude.config.loader import ENV_LANGUAGE, ENV_TEMPLATE


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from real ~/.strategic-claude and ./.strategic-claude."""
    home = tmp_path / "home"
    project = tmp_path / "project"
    home.mkdir()
    project.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(project)
    monkeypatch.delenv(ENV_TEMPLATE, raising=False)
    monkeypatch.delenv(ENV_LANGUAGE, raising=False)
    return project
