"""Configuration loading for the dotver CLI."""

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)

DOTVER_TOML = "dotver.toml"
PYPROJECT_TOML = "pyproject.toml"

OutputFormat = Literal["text", "json", "table"]

__all__ = ["ConfigError", "DotverConfig", "OutputFormat", "load_config"]


class DotverConfig(BaseModel):
    """Settings read from ``[dotver]`` or ``[tool.dotver]``.

    Attributes:
        max_range_size: Largest number of versions ``dotver list`` will print.
        output_format: Default output format for ``dotver list``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_range_size: int = Field(default=1000, ge=1)
    output_format: OutputFormat = "text"


def _read_table(path: Path) -> dict[str, Any] | None:
    """Read the dotver table from a TOML file.

    Args:
        path: Path to ``dotver.toml`` or ``pyproject.toml``.

    Returns:
        The table contents, or None if the file has no dotver table.

    Raises:
        ConfigError: If the file cannot be parsed.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    if path.name == PYPROJECT_TOML:
        table = data.get("tool", {}).get("dotver")
    else:
        table = data.get("dotver")

    if table is not None and not isinstance(table, dict):
        raise ConfigError(f"dotver configuration in {path} must be a table")
    return table


def _find_config_file() -> Path | None:
    cwd = Path.cwd()
    for name in (DOTVER_TOML, PYPROJECT_TOML):
        candidate = cwd / name
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Path | None = None) -> DotverConfig:
    """Load CLI configuration.

    Without an explicit path, ``dotver.toml`` and then ``pyproject.toml`` are
    searched for in the current directory. Missing files or tables fall back
    to defaults.

    Args:
        config_path: Optional explicit path to a configuration file.

    Returns:
        Validated configuration.

    Raises:
        ConfigError: If an explicit file is missing, a file cannot be parsed,
            or its values are invalid.
    """
    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    path = config_path or _find_config_file()
    if path is None:
        logger.debug("No config file found, using defaults")
        return DotverConfig()

    table = _read_table(path)
    if table is None:
        logger.debug("No dotver table in %s, using defaults", path)
        return DotverConfig()

    try:
        config = DotverConfig.model_validate(table)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid configuration in {path}: {errors}") from e

    logger.debug("Loaded config from %s: %s", path, config)
    return config
