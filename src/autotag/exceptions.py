"""Exception hierarchy for autotag.

Every error raised on purpose by autotag derives from AutotagError,
so callers (the CLI included) can catch a single type and decide
whether to abort the surrounding release process.
"""

from __future__ import annotations


class AutotagError(Exception):
    """Base class for all autotag errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(AutotagError):
    """Configuration could not be loaded or is invalid."""


class ConfigNotFoundError(ConfigError):
    """pyproject.toml could not be located or read."""


class ConfigValidationError(ConfigError):
    """[tool.autotag] contains invalid values."""


# =============================================================================
# Version control
# =============================================================================


class GitError(AutotagError):
    """A git command failed."""

    def __init__(self, message: str, *, stderr: str | None = None) -> None:
        super().__init__(message)
        self.stderr = stderr

    def __str__(self) -> str:
        base = super().__str__()
        if self.stderr:
            return f"{base}: {self.stderr.strip()}"
        return base


class NotARepositoryError(GitError):
    """The given path is not inside a git work tree."""


# =============================================================================
# Versions
# =============================================================================


class VersionError(AutotagError):
    """Base class for version parsing and resolution errors."""


class MalformedVersionError(VersionError):
    """A version string is not three non-negative integers."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed version: {text!r}. Expected MAJOR.MINOR.PATCH.")
        self.text = text


class VersionSpaceExhaustedError(VersionError):
    """Collision avoidance gave up before finding an unused version."""

    def __init__(self, start: object, attempts: int) -> None:
        super().__init__(
            f"No free version found after {attempts} patch increments starting from {start}"
        )
        self.start = start
        self.attempts = attempts
