"""Integration tests for GitRepository against real git repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from autotag.core.release import compute_next_version
from autotag.core.version import BumpType, Version
from autotag.exceptions import NotARepositoryError
from autotag.vcs.git import GitRepository

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


class TestGitRepository:
    """Tests for the read-only git wrapper."""

    def test_not_a_repository(self, tmp_path: Path):
        """A plain directory is rejected."""
        with pytest.raises(NotARepositoryError):
            GitRepository(tmp_path)

    def test_empty_repository(self, temp_git_repo: Path):
        """A repository without commits has no tags and no commits."""
        repo = GitRepository(temp_git_repo)

        assert repo.list_version_tags() == []
        assert repo.list_commit_messages() == []
        assert not repo.has_commits()

    def test_resolves_toplevel(self, temp_git_repo: Path):
        subdir = temp_git_repo / "src"
        subdir.mkdir()

        repo = GitRepository(subdir)
        assert repo.path.resolve() == temp_git_repo.resolve()

    def test_commit_messages_oldest_first(
        self, temp_git_repo: Path, commit: Callable[[Path, str], None]
    ):
        commit(temp_git_repo, "first")
        commit(temp_git_repo, "second")

        repo = GitRepository(temp_git_repo)
        assert repo.list_commit_messages() == ["first", "second"]

    def test_commit_messages_since_tag(
        self,
        temp_git_repo: Path,
        git: Callable[..., str],
        commit: Callable[[Path, str], None],
    ):
        """Only commits after the tag are listed."""
        commit(temp_git_repo, "feat: before")
        git(temp_git_repo, "tag", "v1.0.0")
        commit(temp_git_repo, "fix: after")

        repo = GitRepository(temp_git_repo)
        assert repo.list_commit_messages(since="v1.0.0") == ["fix: after"]

    def test_tags_sorted_by_version(
        self,
        temp_git_repo: Path,
        git: Callable[..., str],
        commit: Callable[[Path, str], None],
    ):
        commit(temp_git_repo, "init")
        for tag in ("v1.2.0", "v1.10.0", "v1.9.0"):
            git(temp_git_repo, "tag", tag)

        repo = GitRepository(temp_git_repo)
        assert repo.list_version_tags() == ["v1.10.0", "v1.9.0", "v1.2.0"]

    def test_tag_exists(
        self,
        temp_git_repo: Path,
        git: Callable[..., str],
        commit: Callable[[Path, str], None],
    ):
        commit(temp_git_repo, "init")
        git(temp_git_repo, "tag", "v0.1.0")

        repo = GitRepository(temp_git_repo)
        assert repo.tag_exists("v0.1.0")
        assert not repo.tag_exists("v0.2.0")


class TestPipelineOnGit:
    """compute_next_version() against a real repository."""

    def test_first_release(self, temp_git_repo: Path, commit: Callable[[Path, str], None]):
        commit(temp_git_repo, "initial commit")
        commit(temp_git_repo, "feat: add parser")

        plan = compute_next_version(GitRepository(temp_git_repo))

        assert plan.tag == "v0.1.0"
        assert plan.commits == ["initial commit", "feat: add parser"]

    def test_release_after_tag(
        self,
        temp_git_repo: Path,
        git: Callable[..., str],
        commit: Callable[[Path, str], None],
    ):
        commit(temp_git_repo, "feat: add parser")
        git(temp_git_repo, "tag", "v0.1.0")
        commit(temp_git_repo, ":bug: fix crash")
        commit(temp_git_repo, "docs: explain usage")

        plan = compute_next_version(GitRepository(temp_git_repo))

        assert plan.latest == Version(0, 1, 0)
        assert plan.bump == BumpType.PATCH
        assert plan.tag == "v0.1.1"
