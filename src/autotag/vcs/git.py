"""Read-only git access via subprocess.

Only the queries needed to resolve the next version are implemented:
listing tags, listing commit subjects and checking tag existence.
autotag never writes to the repository.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from autotag.exceptions import GitError, NotARepositoryError
from autotag.logging import get_logger

log = get_logger(__name__)


class GitRepository:
    """A git work tree on disk."""

    def __init__(self, path: Path | str | None = None) -> None:
        start = Path(path) if path else Path.cwd()
        try:
            toplevel = self._run_in(start, "rev-parse", "--show-toplevel")
        except GitError as e:
            raise NotARepositoryError(f"Not a git repository: {start}", stderr=e.stderr) from e
        self.path = Path(toplevel)

    @staticmethod
    def _run_in(cwd: Path, *args: str) -> str:
        cmd = ["git", *args]
        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout.strip()

    def _run(self, *args: str) -> str:
        return self._run_in(self.path, *args)

    def has_commits(self) -> bool:
        try:
            self._run("rev-parse", "--verify", "--quiet", "HEAD")
        except GitError:
            return False
        return True

    def list_version_tags(self) -> list[str]:
        """List tags, highest version first (sorted by ``-v:refname``)."""
        output = self._run("tag", "--list", "--sort=-v:refname")
        return [line for line in output.splitlines() if line]

    def list_commit_messages(self, since: str | None = None) -> list[str]:
        """List commit subject lines, oldest first.

        Args:
            since: Tag or ref; only commits after it are listed. All
                history when None.

        Returns:
            Commit subjects; empty for a repository without commits
        """
        if not self.has_commits():
            return []

        args = ["log", "--format=%s", "--reverse"]
        if since:
            args.append(f"{since}..HEAD")
        output = self._run(*args)
        log.debug("listed commits", since=since, count=len(output.splitlines()))
        return [line for line in output.splitlines() if line]

    def tag_exists(self, tag: str) -> bool:
        """Check whether ``tag`` resolves, like ``git rev-parse <tag>``."""
        try:
            self._run("rev-parse", "--verify", "--quiet", f"refs/tags/{tag}")
        except GitError:
            return False
        return True

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"
