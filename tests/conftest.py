"""Shared fixtures."""

from pathlib import Path

import pytest
from pytest import MonkeyPatch


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: MonkeyPatch) -> Path:
    """An empty working directory with no config files."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def dash_config(project_dir: Path) -> Path:
    """A nibver.toml that sets the separator to '-'."""
    config_file = project_dir / "nibver.toml"
    config_file.write_text('[nibver]\nseparator = "-"\n')
    return config_file
