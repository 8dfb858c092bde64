"""Semantic version parsing, bumping and collision-free resolution.

Versions are plain ``MAJOR.MINOR.PATCH`` triples. Tags in the
repository carry an optional prefix (``v`` by default) which is
stripped before parsing and added back when rendering a tag.

Parsing is tolerant by default: real-world tags are not always full
triples, so missing trailing components read as zero and junk after
the leading digits of a component is ignored. Pass ``strict=True`` to
reject anything that is not exactly three non-negative integers.
"""

from __future__ import annotations

import functools
import re
from collections.abc import Container
from dataclasses import dataclass
from enum import Enum

from autotag.exceptions import MalformedVersionError, VersionSpaceExhaustedError
from autotag.logging import get_logger

log = get_logger(__name__)

DEFAULT_TAG_PREFIX = "v"
DEFAULT_MAX_ATTEMPTS = 1000

_STRICT_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")
_LEADING_DIGITS_RE = re.compile(r"^\d+")


@functools.total_ordering
class BumpType(Enum):
    """Semantic-versioning impact, ordered NONE < PATCH < MINOR < MAJOR."""

    NONE = "none"
    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"

    @property
    def rank(self) -> int:
        return _BUMP_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BumpType):
            return NotImplemented
        return self.rank < other.rank

    def __str__(self) -> str:
        return self.value


_BUMP_RANK = {
    BumpType.NONE: 0,
    BumpType.PATCH: 1,
    BumpType.MINOR: 2,
    BumpType.MAJOR: 3,
}


@dataclass(frozen=True, order=True)
class Version:
    """An immutable ``MAJOR.MINOR.PATCH`` version.

    Ordering and equality compare ``(major, minor, patch)``
    lexicographically.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for part in (self.major, self.minor, self.patch):
            if part < 0:
                raise MalformedVersionError(f"{self.major}.{self.minor}.{self.patch}")

    @classmethod
    def parse(cls, text: str, *, prefix: str = DEFAULT_TAG_PREFIX, strict: bool = False) -> Version:
        """Parse a version string. See parse_version()."""
        return parse_version(text, prefix=prefix, strict=strict)

    def bump(self, bump_type: BumpType) -> Version:
        """Return the version after applying ``bump_type``.

        NONE bumps the patch component like PATCH does, so a release
        always produces a new version.
        """
        if bump_type == BumpType.MAJOR:
            return Version(self.major + 1, 0, 0)
        if bump_type == BumpType.MINOR:
            return Version(self.major, self.minor + 1, 0)
        return Version(self.major, self.minor, self.patch + 1)

    def to_tag(self, prefix: str = DEFAULT_TAG_PREFIX) -> str:
        """Render as a tag name, e.g. ``v1.2.3``."""
        return f"{prefix}{self}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def strip_prefix(text: str, prefix: str = DEFAULT_TAG_PREFIX) -> str:
    """Remove a tag prefix from a version string.

    The default ``v`` prefix is matched case-insensitively so that
    ``V1.0.0`` parses as well.
    """
    text = text.strip()
    if prefix and text.startswith(prefix):
        return text[len(prefix) :]
    if prefix.lower() == "v" and text[:1] in ("v", "V"):
        return text[1:]
    return text


def _tolerant_component(part: str) -> int:
    match = _LEADING_DIGITS_RE.match(part.strip())
    return int(match.group(0)) if match else 0


def parse_version(
    text: str,
    *,
    prefix: str = DEFAULT_TAG_PREFIX,
    strict: bool = False,
) -> Version:
    """Parse a version or tag string into a Version.

    Args:
        text: Version string such as ``"1.2.3"`` or ``"v1.2"``
        prefix: Tag prefix to strip before parsing
        strict: Reject anything that is not exactly three integers

    Returns:
        Parsed Version

    Raises:
        MalformedVersionError: If ``strict`` is set and the text is malformed
    """
    bare = strip_prefix(text, prefix)

    if strict:
        match = _STRICT_RE.match(bare)
        if not match:
            raise MalformedVersionError(text)
        return Version(*(int(g) for g in match.groups()))

    parts = bare.split(".") if bare else []
    numbers = [_tolerant_component(p) for p in parts[:3]]
    numbers.extend([0] * (3 - len(numbers)))
    return Version(*numbers)


def next_version(
    latest: Version,
    bump_type: BumpType,
    exists: Container[Version],
    *,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Version:
    """Compute the next version that does not collide with an existing one.

    The bump is applied to ``latest``; while the candidate is already
    in ``exists`` only its patch component is incremented.

    Args:
        latest: Most recent released version (``0.0.0`` if none)
        bump_type: Aggregated increment
        exists: Versions already recorded as tags
        max_attempts: Maximum number of collision skips

    Returns:
        The first unused version

    Raises:
        VersionSpaceExhaustedError: If every candidate within
            ``max_attempts`` skips is taken
    """
    start = latest.bump(bump_type)
    candidate = start
    attempts = 0

    while candidate in exists:
        if attempts >= max_attempts:
            raise VersionSpaceExhaustedError(start, attempts)
        log.debug("version already tagged, skipping", version=str(candidate))
        candidate = Version(candidate.major, candidate.minor, candidate.patch + 1)
        attempts += 1

    return candidate


__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_TAG_PREFIX",
    "BumpType",
    "Version",
    "next_version",
    "parse_version",
    "strip_prefix",
]
