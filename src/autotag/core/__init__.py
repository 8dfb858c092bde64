"""Core business logic for autotag.

This module contains the fundamental building blocks:
- Commit message classification (semantic-release default rules)
- Aggregation of commits into one version increment
- Version parsing, bumping and collision-free resolution

The end-to-end pipeline lives in autotag.core.release.
"""

from __future__ import annotations

from autotag.core.commits import (
    RELEASE_RULES,
    ReleaseRule,
    aggregate,
    classify,
    filter_skip_release_commits,
    normalize_message,
)
from autotag.core.version import BumpType, Version, next_version, parse_version

__all__ = [
    # Commits
    "RELEASE_RULES",
    # Version
    "BumpType",
    "ReleaseRule",
    "Version",
    "aggregate",
    "classify",
    "filter_skip_release_commits",
    "next_version",
    "normalize_message",
    "parse_version",
]
