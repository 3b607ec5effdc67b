"""Contributor Welcome - GitHub automations for greeting new contributors.

Reacts to push events on the main branch: when the pushed commit comes from
a contributor's first merged pull request, the pull request is labelled
"First-time Contributor" and, if the contributor has no linked WordPress.org
profile, a comment explains how to link one.

Example usage:
    ```python
    from contributor_welcome import ContributorWelcome

    async with ContributorWelcome(token="ghp_xxx") as bot:
        await bot.handle_event("push", payload)
    ```
"""

from contributor_welcome._version import __version__
from contributor_welcome.config import Config
from contributor_welcome.exceptions import (
    ContributorWelcomeError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    MalformedEventError,
    ProfileLookupError,
    RateLimitExceededError,
)
from contributor_welcome.models import (
    CommitAuthor,
    PushCommit,
    PushEvent,
    PushRepository,
    RepositoryOwner,
)
from contributor_welcome.sdk import ContributorWelcome
from contributor_welcome.services.notifier import (
    ACCOUNT_LINK_PROMPT,
    FIRST_TIME_CONTRIBUTOR_LABEL,
    FirstTimeContributorNotifier,
)

__all__ = [
    "__version__",
    # Main entry point
    "ContributorWelcome",
    "FirstTimeContributorNotifier",
    "FIRST_TIME_CONTRIBUTOR_LABEL",
    "ACCOUNT_LINK_PROMPT",
    # Configuration
    "Config",
    # Exceptions
    "ContributorWelcomeError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "RateLimitExceededError",
    "ProfileLookupError",
    "MalformedEventError",
    # Models
    "CommitAuthor",
    "PushCommit",
    "PushEvent",
    "PushRepository",
    "RepositoryOwner",
]
