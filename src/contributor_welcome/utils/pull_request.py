"""Derive the pull request a pushed commit was merged from."""

import re
from typing import Protocol

from contributor_welcome.models.event import PushCommit

# Squash merges end the title with "(#123)"
SQUASH_REFERENCE = re.compile(r"\(#(\d+)\)$", re.MULTILINE)

# Merge commits start with "Merge pull request #123 from owner/branch"
MERGE_REFERENCE = re.compile(r"^Merge pull request #(\d+) from ", re.MULTILINE)


class PullRequestResolver(Protocol):
    """Protocol for deriving a pull request number from commit metadata."""

    def resolve(self, commit: PushCommit) -> int | None:
        """Return the associated pull request number, or None if unknown."""
        ...


class MergeMessageResolver:
    """Resolve pull request numbers by matching commit message patterns.

    The match closest to the start of the message wins, whichever pattern
    produced it.
    """

    def __init__(self, patterns: tuple[re.Pattern[str], ...] = (SQUASH_REFERENCE, MERGE_REFERENCE)):
        self.patterns = patterns

    def resolve(self, commit: PushCommit) -> int | None:
        matches = [
            match
            for match in (pattern.search(commit.message) for pattern in self.patterns)
            if match
        ]
        if not matches:
            return None
        return int(min(matches, key=lambda match: match.start()).group(1))


_default_resolver = MergeMessageResolver()


def get_associated_pull_request(commit: PushCommit) -> int | None:
    """Get the pull request number associated with a commit, if any."""
    return _default_resolver.resolve(commit)
