"""Data models for Contributor Welcome."""

from contributor_welcome.models.event import (
    CommitAuthor,
    PushCommit,
    PushEvent,
    PushRepository,
    RepositoryOwner,
)

__all__ = [
    "CommitAuthor",
    "PushCommit",
    "PushEvent",
    "PushRepository",
    "RepositoryOwner",
]
