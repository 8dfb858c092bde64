"""Commit message classification.

Commit messages are mapped to a BumpType using the keyword table of
semantic-release's default release rules. Matching is plain,
case-sensitive substring containment with first-match-wins priority,
so ``"prefix handling"`` counts as a fix. This mirrors the upstream
rules and must not be tightened to word boundaries.

Gitmoji-style shortcodes (``:bug:``, ``:racehorse:`` ...) are
rewritten to bare words before matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from autotag.core.version import BumpType
from autotag.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = get_logger(__name__)

EMOJI_SHORTCODES: dict[str, str] = {
    ":racehorse:": "racehorse",
    ":bug:": "bug",
    ":penguin:": "penguin",
    ":apple:": "apple",
    ":checkered_flag:": "checkered_flag",
}

# Markers commonly used to keep a commit out of a release. Filtering is
# opt-in through the skip_release_patterns setting.
COMMON_SKIP_RELEASE_MARKERS: tuple[str, ...] = (
    "[skip release]",
    "[release skip]",
    "[no release]",
)


@dataclass(frozen=True)
class ReleaseRule:
    """One row of the priority table: any keyword present yields ``bump``."""

    keywords: tuple[str, ...]
    bump: BumpType

    def matches(self, message: str) -> bool:
        return any(keyword in message for keyword in self.keywords)


# Evaluated top to bottom, first match wins.
RELEASE_RULES: tuple[ReleaseRule, ...] = (
    ReleaseRule(("breaking", "Breaking"), BumpType.MAJOR),
    ReleaseRule(("revert", "Revert"), BumpType.PATCH),
    ReleaseRule(("feat", "FEAT"), BumpType.MINOR),
    ReleaseRule(
        (
            "fix",
            "FIX",
            "bug",
            "BUGFIX",
            "perf",
            "Perf",
            "deps",
            "Deps",
            "racehorse",
            "penguin",
            "apple",
            "checkered_flag",
        ),
        BumpType.PATCH,
    ),
    ReleaseRule(("FEATURE", "Update", "New"), BumpType.MINOR),
    ReleaseRule(("SECURITY",), BumpType.PATCH),
)


def normalize_message(message: str) -> str:
    """Replace emoji shortcodes with their plain-word equivalents."""
    for shortcode, word in EMOJI_SHORTCODES.items():
        message = message.replace(shortcode, word)
    return message


def classify(message: str, rules: Sequence[ReleaseRule] = RELEASE_RULES) -> BumpType:
    """Classify a single commit message.

    Args:
        message: Commit subject line (any string, including empty)
        rules: Ordered rule table, first match wins

    Returns:
        The BumpType of the first matching rule, or BumpType.NONE
    """
    normalized = normalize_message(message)
    for rule in rules:
        if rule.matches(normalized):
            return rule.bump
    return BumpType.NONE


def aggregate(messages: Iterable[str], rules: Sequence[ReleaseRule] = RELEASE_RULES) -> BumpType:
    """Reduce commit messages to a single version increment.

    The result starts at PATCH, so a release ships at least a patch
    even when nothing matches. MINOR upgrades it, MAJOR wins outright
    and ends the scan. PATCH and NONE never change it.

    Args:
        messages: Commit messages in any order
        rules: Ordered rule table passed through to classify()

    Returns:
        BumpType.MAJOR, BumpType.MINOR or BumpType.PATCH
    """
    increment = BumpType.PATCH

    for message in messages:
        bump_type = classify(message, rules)
        log.debug("classified commit", message=message, bump=str(bump_type))
        if bump_type == BumpType.MAJOR:
            return BumpType.MAJOR
        if bump_type == BumpType.MINOR:
            increment = BumpType.MINOR

    return increment


def filter_skip_release_commits(messages: Iterable[str], skip_patterns: Iterable[str]) -> list[str]:
    """Drop commits that carry a skip-release marker.

    Markers are matched case-insensitively anywhere in the message.

    Args:
        messages: Commit messages
        skip_patterns: Markers such as ``"[skip release]"``

    Returns:
        Messages without any marker, in their original order
    """
    patterns = [p.lower() for p in skip_patterns]
    if not patterns:
        return list(messages)

    kept: list[str] = []
    for message in messages:
        lowered = message.lower()
        if any(p in lowered for p in patterns):
            log.debug("skipping commit with release marker", message=message)
            continue
        kept.append(message)
    return kept


__all__ = [
    "COMMON_SKIP_RELEASE_MARKERS",
    "EMOJI_SHORTCODES",
    "RELEASE_RULES",
    "ReleaseRule",
    "aggregate",
    "classify",
    "filter_skip_release_commits",
    "normalize_message",
]
