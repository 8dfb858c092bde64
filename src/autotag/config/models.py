"""Pydantic models for autotag configuration.

Configuration lives under ``[tool.autotag]`` in pyproject.toml:

    [tool.autotag]
    tag_prefix = "v"
    initial_version = "0.0.0"
    strict_versions = false
    max_collision_attempts = 1000
    skip_release_patterns = ["[skip release]", "[release skip]", "[no release]"]

skip_release_patterns is empty by default, so every commit since the
latest tag counts towards the increment.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autotag.core.version import DEFAULT_MAX_ATTEMPTS, DEFAULT_TAG_PREFIX, Version, parse_version
from autotag.exceptions import MalformedVersionError


class AutotagConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tag_prefix: str = Field(
        default=DEFAULT_TAG_PREFIX,
        description="Prefix for version tags (e.g. 'v' for v1.0.0)",
    )
    initial_version: str = Field(
        default="0.0.0",
        description="Baseline version used when no version tag exists",
    )
    strict_versions: bool = Field(
        default=False,
        description="Ignore tags that are not exactly MAJOR.MINOR.PATCH",
    )
    max_collision_attempts: int = Field(
        default=DEFAULT_MAX_ATTEMPTS,
        ge=1,
        description="Maximum patch skips when the next version is already tagged",
    )
    skip_release_patterns: list[str] = Field(
        default_factory=list,
        description="Commits containing any of these markers are ignored (none by default)",
    )

    @field_validator("initial_version")
    @classmethod
    def _validate_initial_version(cls, value: str) -> str:
        try:
            parse_version(value, prefix="", strict=True)
        except MalformedVersionError as e:
            raise ValueError(str(e)) from e
        return value

    @property
    def baseline(self) -> Version:
        """initial_version as a Version."""
        return parse_version(self.initial_version, prefix="", strict=True)
