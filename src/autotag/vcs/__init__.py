"""Version control access for autotag."""

from __future__ import annotations

from autotag.vcs.git import GitRepository

__all__ = ["GitRepository"]
