"""Contributor Welcome SDK - High-level API for running the automations."""

import logging
from typing import Any

from contributor_welcome.config import Config
from contributor_welcome.exceptions import ContributorWelcomeError
from contributor_welcome.services.automations import AutomationRunner
from contributor_welcome.services.github_rest_client import GitHubRestClient
from contributor_welcome.services.profile_client import WordPressProfileClient
from contributor_welcome.utils.rate_limiter import get_rate_limiter

logger = logging.getLogger(__name__)


class ContributorWelcome:
    """High-level entry point wiring the GitHub and WordPress.org clients.

    Example usage:
        ```python
        from contributor_welcome import ContributorWelcome

        async with ContributorWelcome(token="ghp_xxx") as bot:
            await bot.handle_event("push", payload)
        ```

    Args:
        token: GitHub token with permission to label and comment on issues.
        config: Full configuration; overrides ``token`` when given.
    """

    def __init__(self, token: str | None = None, config: Config | None = None):
        self._config = config or Config(github_token=token)
        self._rest_client: GitHubRestClient | None = None
        self._profile_client: WordPressProfileClient | None = None
        self._runner: AutomationRunner | None = None
        self._initialized = False

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._config.is_authenticated

    async def __aenter__(self) -> "ContributorWelcome":
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _initialize(self) -> None:
        """Initialize clients."""
        if self._initialized:
            return

        self._rest_client = GitHubRestClient(
            config=self._config,
            rate_limiter=get_rate_limiter(),
        )
        self._profile_client = WordPressProfileClient(config=self._config)
        self._runner = AutomationRunner(
            self._rest_client,
            self._profile_client,
            config=self._config,
        )
        self._initialized = True
        logger.debug(
            "ContributorWelcome initialized (authenticated=%s)",
            self.is_authenticated,
        )

    async def close(self) -> None:
        """Close all HTTP connections."""
        if self._rest_client:
            await self._rest_client.close()
        if self._profile_client:
            await self._profile_client.close()
        self._initialized = False
        logger.debug("ContributorWelcome closed")

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            raise ContributorWelcomeError(
                "Client not initialized. Use 'async with ContributorWelcome(...) as bot:'"
            )

    async def handle_event(self, event_name: str, payload: dict[str, Any]) -> bool:
        """Run the automations registered for a webhook event.

        Returns:
            True if the event was handled, False if no automation applies
        """
        self._ensure_initialized()
        logger.info("Handling '%s' event", event_name)
        return await self._runner.run(event_name, payload)

    async def has_profile(self, username: str) -> bool:
        """Check whether a GitHub login has a linked WordPress.org profile.

        Raises:
            ProfileLookupError: If the profile service cannot answer
        """
        self._ensure_initialized()
        return await self._profile_client.has_profile(username)
