"""Shared pytest fixtures for autotag tests."""

from __future__ import annotations

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import pytest

from autotag.logging import use_library_defaults

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path


@dataclass
class FakeRepository:
    """In-memory stand-in for GitRepository."""

    tags: list[str] = field(default_factory=list)
    commits: list[str] = field(default_factory=list)
    commits_since: dict[str, list[str]] = field(default_factory=dict)
    since_calls: list[str | None] = field(default_factory=list)
    # Tags that resolve but are not returned by list_version_tags().
    unlisted_tags: list[str] = field(default_factory=list)

    def list_version_tags(self) -> list[str]:
        return list(self.tags)

    def tag_exists(self, tag: str) -> bool:
        return tag in self.tags or tag in self.unlisted_tags

    def list_commit_messages(self, since: str | None = None) -> list[str]:
        self.since_calls.append(since)
        if since is None:
            return list(self.commits)
        return list(self.commits_since.get(since, []))


@pytest.fixture
def fake_repo() -> FakeRepository:
    return FakeRepository()


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout


@pytest.fixture
def git() -> Callable[..., str]:
    """Helper for running git in a directory: git(path, *args)."""
    return _git


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """Create an empty git repository with a committer identity."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    _git(tmp_path, "init", "-q")
    _git(tmp_path, "config", "user.name", "Test User")
    _git(tmp_path, "config", "user.email", "test@example.com")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    _git(tmp_path, "config", "tag.gpgsign", "false")
    return tmp_path


@pytest.fixture
def temp_git_repo_with_pyproject(temp_git_repo: Path) -> Path:
    """Git repository with a pyproject.toml carrying [tool.autotag]."""
    (temp_git_repo / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.autotag]
tag_prefix = "v"
"""
    )
    return temp_git_repo


@pytest.fixture
def commit() -> Callable[[Path, str], None]:
    """Helper for creating empty commits: commit(path, message)."""

    def _commit(path: Path, message: str) -> None:
        _git(path, "commit", "-q", "--allow-empty", "-m", message)

    return _commit


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers bound to streams that CliRunner closes after each invoke."""
    yield
    use_library_defaults()
    for handler in list(logging.root.handlers):
        logging.root.removeHandler(handler)
