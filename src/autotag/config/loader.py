"""Loading autotag configuration from pyproject.toml."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from autotag.config.models import AutotagConfig
from autotag.exceptions import ConfigNotFoundError, ConfigValidationError
from autotag.logging import get_logger

log = get_logger(__name__)

TOOL_KEY = "autotag"


def find_pyproject_toml(start: Path | None = None) -> Path:
    """Find pyproject.toml in ``start`` or any of its parents.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the nearest pyproject.toml

    Raises:
        ConfigNotFoundError: If no pyproject.toml exists up to the root
    """
    current = (start or Path.cwd()).resolve()

    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate

    raise ConfigNotFoundError(f"No pyproject.toml found in {current} or any parent directory")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"File not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_autotag_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the ``[tool.autotag]`` table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_KEY, {})


def load_config(path: Path | None = None) -> AutotagConfig:
    """Load configuration for the project at ``path``.

    A missing pyproject.toml is not an error: defaults are used.

    Args:
        path: Project directory (defaults to cwd)

    Returns:
        Validated AutotagConfig

    Raises:
        ConfigValidationError: If the configuration is invalid
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        log.debug("no pyproject.toml found, using defaults", path=str(path or Path.cwd()))
        return AutotagConfig()

    raw = extract_autotag_config(load_pyproject_toml(pyproject_path))

    try:
        return AutotagConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_KEY}] in {pyproject_path}:\n{e}") from e
