"""Configuration loading from nibver.toml or pyproject.toml."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Final, Self

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .codec import DEFAULT_SEPARATOR
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

NIBVER_TOML: Final = "nibver.toml"
PYPROJECT_TOML: Final = "pyproject.toml"


class CodecConfig(BaseModel):
    """Settings applied to encode and decode calls made through the CLI.

    Attributes:
        separator: String placed between version components.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    separator: str = DEFAULT_SEPARATOR

    @field_validator("separator")
    @classmethod
    def _separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must not be empty")
        return value

    def merged(self: Self, separator: str | None = None) -> Self:
        """Return a copy with command-line overrides applied.

        Args:
            separator: Override for the separator, or None to keep the
                configured one.

        Returns:
            A new config instance.

        Raises:
            ConfigError: If an override is invalid.
        """
        if separator is None:
            return self
        try:
            return self.model_validate({**self.model_dump(), "separator": separator})
        except ValidationError as e:
            raise ConfigError(_format_validation_error(e)) from e


def _format_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def find_config_file(start: Path | None = None) -> Path | None:
    """Find a configuration file in the given directory.

    nibver.toml takes precedence over pyproject.toml.

    Args:
        start: Directory to search. Defaults to the current directory.

    Returns:
        Path to the config file, or None if neither exists.
    """
    directory = start or Path.cwd()
    for name in (NIBVER_TOML, PYPROJECT_TOML):
        candidate = directory / name
        if candidate.is_file():
            logger.debug("Found config file %s", candidate)
            return candidate
    return None


def _extract_table(path: Path, document: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == PYPROJECT_TOML:
        table = document.get("tool", {}).get("nibver")
    else:
        table = document.get("nibver")

    if table is not None and not isinstance(table, dict):
        raise ConfigError(f"Invalid [nibver] section in {path}: expected a table")
    return table


def load_config(path: Path | None = None) -> CodecConfig:
    """Load codec configuration.

    Args:
        path: Explicit config file. If None, the current directory is searched.

    Returns:
        The loaded configuration, or defaults when no file or section exists.

    Raises:
        ConfigError: If the file is missing, is not valid TOML, or holds
            invalid settings.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No config file found, using defaults")
            return CodecConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            document = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    table = _extract_table(path, document)
    if table is None:
        logger.debug("No nibver section in %s, using defaults", path)
        return CodecConfig()

    try:
        config = CodecConfig.model_validate(table)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid configuration in {path}: {_format_validation_error(e)}"
        ) from e

    logger.debug("Loaded config from %s: %s", path, config)
    return config
