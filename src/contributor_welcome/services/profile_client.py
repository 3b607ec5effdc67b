"""WordPress.org profile lookup client."""

import logging
from typing import Optional

import httpx

from contributor_welcome._version import __version__
from contributor_welcome.config import Config, get_config
from contributor_welcome.exceptions import ProfileLookupError

logger = logging.getLogger(__name__)

LOOKUP_ENDPOINT = "/wp-json/wporg-github/v1/lookup/{username}"


class WordPressProfileClient:
    """Async client checking whether a GitHub login has a linked WordPress.org profile."""

    def __init__(
        self,
        config: Optional[Config] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or get_config()
        self._client = http_client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.profiles_api_url,
                headers={"User-Agent": f"contributor-welcome/{__version__}"},
                timeout=self.config.request_timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "WordPressProfileClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def has_profile(self, username: str) -> bool:
        """Check whether a GitHub login is linked from a WordPress.org profile.

        Args:
            username: GitHub login

        Returns:
            True if the lookup returns a profile slug, False if no profile is linked

        Raises:
            ProfileLookupError: On transport errors, unexpected status codes or
                an undecodable response body
        """
        client = await self._get_client()
        try:
            response = await client.get(LOOKUP_ENDPOINT.format(username=username))
        except httpx.HTTPError as e:
            raise ProfileLookupError(username, str(e) or type(e).__name__) from e

        if response.status_code == 404:
            return False
        if response.status_code != 200:
            raise ProfileLookupError(
                username,
                f"unexpected status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ProfileLookupError(username, "response is not valid JSON") from e

        slug = data.get("slug") if isinstance(data, dict) else None
        logger.debug("Profile lookup for %s returned slug %r", username, slug)
        return bool(slug)
