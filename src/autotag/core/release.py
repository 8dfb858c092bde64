"""End-to-end next-version resolution.

Ties the classifier, the aggregator and the version resolver to a
version-control collaborator:

    tags -> latest + existing versions
    commits since latest -> aggregate bump
    latest + bump - existing -> next version
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from autotag.config.models import AutotagConfig
from autotag.core.commits import aggregate, filter_skip_release_commits
from autotag.core.version import BumpType, Version, next_version, parse_version
from autotag.exceptions import MalformedVersionError
from autotag.logging import get_logger

log = get_logger(__name__)


class VersionControl(Protocol):
    """What the pipeline needs from the repository."""

    def list_version_tags(self) -> list[str]: ...

    def list_commit_messages(self, since: str | None = None) -> list[str]: ...

    def tag_exists(self, tag: str) -> bool: ...


@dataclass(frozen=True)
class ReleasePlan:
    """Outcome of compute_next_version()."""

    latest: Version | None
    latest_tag: str | None
    bump: BumpType
    next_version: Version
    tag: str
    commits: list[str] = field(default_factory=list)

    @property
    def is_first_release(self) -> bool:
        return self.latest is None

    def to_dict(self) -> dict[str, object]:
        return {
            "latest": str(self.latest) if self.latest else None,
            "latest_tag": self.latest_tag,
            "bump": str(self.bump),
            "next_version": str(self.next_version),
            "tag": self.tag,
            "commits": list(self.commits),
        }


class ExistingVersions:
    """Versions that are already taken.

    A version is taken when it was parsed from a listed tag, or when
    its rendered tag name resolves in the repository.
    """

    def __init__(self, versions: frozenset[Version], vcs: VersionControl, prefix: str) -> None:
        self.versions = versions
        self._vcs = vcs
        self._prefix = prefix

    def __contains__(self, version: object) -> bool:
        if version in self.versions:
            return True
        if not isinstance(version, Version):
            return False
        return self._vcs.tag_exists(version.to_tag(self._prefix))


def collect_versions(tags: list[str], config: AutotagConfig) -> dict[Version, str]:
    """Parse version tags, keeping the first tag name seen per version.

    Tags that do not look like ``<prefix>MAJOR.MINOR.PATCH`` are
    ignored. With ``strict_versions`` set, tags carrying anything
    beyond the triple (pre-release suffixes etc.) are ignored too.
    """
    tag_re = re.compile(rf"^(?:{re.escape(config.tag_prefix)})?\d+\.\d+\.\d+")
    versions: dict[Version, str] = {}

    for tag in tags:
        if not tag_re.match(tag):
            continue
        try:
            version = parse_version(tag, prefix=config.tag_prefix, strict=config.strict_versions)
        except MalformedVersionError:
            log.debug("ignoring non-semver tag", tag=tag)
            continue
        versions.setdefault(version, tag)

    return versions


def compute_next_version(vcs: VersionControl, config: AutotagConfig | None = None) -> ReleasePlan:
    """Resolve the next release version for a repository.

    Args:
        vcs: Version-control collaborator
        config: Configuration (defaults when None)

    Returns:
        ReleasePlan describing the decision

    Raises:
        VersionSpaceExhaustedError: If collision avoidance gives up
        GitError: If the collaborator fails
    """
    config = config or AutotagConfig()

    versions = collect_versions(vcs.list_version_tags(), config)
    if versions:
        latest: Version | None = max(versions)
        latest_tag = versions[latest]
    else:
        latest = None
        latest_tag = None

    commits = vcs.list_commit_messages(since=latest_tag)
    commits = filter_skip_release_commits(commits, config.skip_release_patterns)

    bump = aggregate(commits)
    resolved = next_version(
        latest or config.baseline,
        bump,
        ExistingVersions(frozenset(versions), vcs, config.tag_prefix),
        max_attempts=config.max_collision_attempts,
    )

    plan = ReleasePlan(
        latest=latest,
        latest_tag=latest_tag,
        bump=bump,
        next_version=resolved,
        tag=resolved.to_tag(config.tag_prefix),
        commits=commits,
    )
    log.info(
        "resolved next version",
        latest=latest_tag,
        bump=str(bump),
        commits=len(commits),
        next=plan.tag,
    )
    return plan


__all__ = [
    "ExistingVersions",
    "ReleasePlan",
    "VersionControl",
    "collect_versions",
    "compute_next_version",
]
