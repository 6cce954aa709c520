"""Tests for config.py."""

from pathlib import Path

import pytest

from nibver import CodecConfig, ConfigError, load_config
from nibver.config import find_config_file


def test_defaults_without_config(project_dir: Path) -> None:
    """Test that defaults are used when no config file exists."""
    assert find_config_file() is None
    assert load_config() == CodecConfig(separator=".")


def test_load_nibver_toml(dash_config: Path) -> None:
    """Test loading the [nibver] table from nibver.toml."""
    assert find_config_file() == dash_config
    assert load_config().separator == "-"


def test_load_pyproject_toml(project_dir: Path) -> None:
    """Test loading the [tool.nibver] table from pyproject.toml."""
    (project_dir / "pyproject.toml").write_text(
        '[project]\nname = "demo"\n\n[tool.nibver]\nseparator = "_"\n'
    )
    assert load_config().separator == "_"


def test_nibver_toml_takes_precedence(dash_config: Path, project_dir: Path) -> None:
    """Test that nibver.toml wins over pyproject.toml."""
    (project_dir / "pyproject.toml").write_text('[tool.nibver]\nseparator = "_"\n')
    assert find_config_file() == dash_config
    assert load_config().separator == "-"


def test_pyproject_without_section(project_dir: Path) -> None:
    """Test that a pyproject.toml without [tool.nibver] gives defaults."""
    (project_dir / "pyproject.toml").write_text('[project]\nname = "demo"\n')
    assert load_config() == CodecConfig()


def test_explicit_path(tmp_path: Path) -> None:
    """Test loading from an explicit path."""
    config_file = tmp_path / "custom" / "nibver.toml"
    config_file.parent.mkdir()
    config_file.write_text('[nibver]\nseparator = "::"\n')
    assert load_config(config_file).separator == "::"


def test_explicit_path_missing(tmp_path: Path) -> None:
    """Test that a missing explicit path is an error."""
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml(project_dir: Path) -> None:
    """Test that malformed TOML raises ConfigError."""
    (project_dir / "nibver.toml").write_text("[nibver\nseparator = ")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config()


def test_empty_separator_rejected(project_dir: Path) -> None:
    """Test that an empty separator is invalid."""
    (project_dir / "nibver.toml").write_text('[nibver]\nseparator = ""\n')
    with pytest.raises(ConfigError, match="separator must not be empty"):
        load_config()


def test_unknown_key_rejected(project_dir: Path) -> None:
    """Test that unknown settings are rejected."""
    (project_dir / "nibver.toml").write_text('[nibver]\nwidth = 32\n')
    with pytest.raises(ConfigError, match="width"):
        load_config()


def test_section_not_a_table(project_dir: Path) -> None:
    """Test that a non-table section is rejected."""
    (project_dir / "pyproject.toml").write_text('[tool]\nnibver = "dots"\n')
    with pytest.raises(ConfigError, match="expected a table"):
        load_config()


def test_merged_override() -> None:
    """Test applying a separator override."""
    config = CodecConfig(separator="-")
    assert config.merged(None) is config
    assert config.merged("/").separator == "/"
    assert config.separator == "-"


def test_merged_rejects_empty_override() -> None:
    """Test that an empty override raises ConfigError."""
    with pytest.raises(ConfigError, match="separator must not be empty"):
        CodecConfig().merged("")
