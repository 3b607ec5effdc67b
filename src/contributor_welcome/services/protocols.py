"""Protocols (interfaces) for the external services automations talk to."""

from typing import Any, Iterable, Protocol


class HostingApiClient(Protocol):
    """Protocol for the source-control hosting API."""

    async def list_commits_by_author(
        self, owner: str, repo: str, author: str
    ) -> list[dict[str, Any]]:
        """List commits in owner/repo authored by the given login."""
        ...

    async def add_labels(
        self, owner: str, repo: str, issue_number: int, labels: Iterable[str]
    ) -> None:
        """Add labels to an issue or pull request."""
        ...

    async def create_comment(
        self, owner: str, repo: str, issue_number: int, body: str
    ) -> None:
        """Post a comment on an issue or pull request."""
        ...


class ProfileLookupService(Protocol):
    """Protocol for the contributor profile lookup service."""

    async def has_profile(self, username: str) -> bool:
        """Check whether a GitHub login is linked to a profile.

        Raises:
            ProfileLookupError: If the service cannot answer
        """
        ...
