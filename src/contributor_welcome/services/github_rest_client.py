"""GitHub REST API client."""

import asyncio
import logging
from typing import Any, Iterable, Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from contributor_welcome._version import __version__
from contributor_welcome.config import Config, get_config
from contributor_welcome.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from contributor_welcome.utils.pagination import get_next_page_url, with_query
from contributor_welcome.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)


class GitHubRestClient:
    """Async client for GitHub REST API."""

    def __init__(
        self,
        config: Optional[Config] = None,
        rate_limiter: Optional[RateLimiter] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or get_config()
        self.rate_limiter = rate_limiter or get_rate_limiter()
        self._client = http_client

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"contributor-welcome/{__version__}",
        }
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                timeout=self.config.request_timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @staticmethod
    def _body(response: httpx.Response) -> dict:
        if not response.content:
            return {}
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}

    async def _request(
        self,
        method: str,
        endpoint: str,
        **kwargs,
    ) -> httpx.Response:
        """Make an API request with rate limiting and error mapping."""
        await self.rate_limiter.acquire_rest()

        client = await self._get_client()
        response = await client.request(
            method, endpoint, headers=self._get_headers(), **kwargs
        )

        self.rate_limiter.update_rest_from_headers(dict(response.headers))

        if response.status_code == 404:
            raise GitHubNotFoundError(
                f"Resource not found: {endpoint}",
                response_body=self._body(response),
            )
        elif response.status_code == 403:
            body = self._body(response)
            if "rate limit" in body.get("message", "").lower():
                reset = response.headers.get("x-ratelimit-reset")
                raise GitHubRateLimitError(
                    "Rate limit exceeded",
                    response_body=body,
                    reset_time=float(reset) if reset else None,
                )
            raise GitHubAPIError(
                f"Forbidden: {body.get('message', 'Unknown error')}",
                status_code=403,
                response_body=body,
            )
        elif response.status_code >= 500:
            raise GitHubAPIError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
            )
        elif response.status_code >= 400:
            body = self._body(response)
            raise GitHubAPIError(
                f"API error: {body.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_body=body,
            )

        return response

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _get(self, endpoint: str) -> httpx.Response:
        """GET with retries on timeouts and connection failures."""
        return await self._request("GET", endpoint)

    # A POST that timed out may already have been applied, so only retry
    # when the connection was never established.
    @retry(
        retry=retry_if_exception_type((httpx.ConnectError, httpx.ConnectTimeout)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _post(self, endpoint: str, payload: dict[str, Any]) -> httpx.Response:
        return await self._request("POST", endpoint, json=payload)

    async def post(self, endpoint: str, payload: dict[str, Any]) -> Any:
        """Make a POST request with a JSON body and return JSON response."""
        response = await self._post(endpoint, payload)
        return response.json() if response.content else None

    async def get_paginated(
        self,
        endpoint: str,
        max_pages: Optional[int] = None,
        per_page: int = 100,
    ) -> list[dict[str, Any]]:
        """Fetch all pages of a paginated endpoint.

        Args:
            endpoint: API endpoint (pagination params are appended)
            max_pages: Maximum number of pages to fetch (None for all)
            per_page: Items per page (max 100)

        Returns:
            List of all items across all pages
        """
        all_items: list[dict[str, Any]] = []
        page = 1
        url: Optional[str] = with_query(endpoint, {"per_page": per_page, "page": page})

        while url and (max_pages is None or page <= max_pages):
            response = await self._get(url)
            data = response.json()

            if not isinstance(data, list):
                all_items.append(data)
                break

            all_items.extend(data)

            url = get_next_page_url(response.headers.get("Link"))
            page += 1

            # Small delay to be nice to the API
            if url and (max_pages is None or page <= max_pages):
                await asyncio.sleep(0.1)

        return all_items

    # Endpoints used by automations

    async def list_commits_by_author(
        self,
        owner: str,
        repo: str,
        author: str,
    ) -> list[dict[str, Any]]:
        """List commits in a repository by an author.

        Only the first page is fetched; callers distinguish one commit from
        several, so `author_commits_per_page` only needs to be above one.
        """
        endpoint = with_query(f"/repos/{owner}/{repo}/commits", {"author": author})
        return await self.get_paginated(
            endpoint,
            max_pages=1,
            per_page=self.config.author_commits_per_page,
        )

    async def add_labels(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        labels: Iterable[str],
    ) -> None:
        """Add labels to an issue or pull request."""
        labels = list(labels)
        logger.debug("Adding labels %s to %s/%s#%d", labels, owner, repo, issue_number)
        await self.post(
            f"/repos/{owner}/{repo}/issues/{issue_number}/labels",
            {"labels": labels},
        )

    async def create_comment(
        self,
        owner: str,
        repo: str,
        issue_number: int,
        body: str,
    ) -> None:
        """Post a comment on an issue or pull request."""
        logger.debug("Commenting on %s/%s#%d", owner, repo, issue_number)
        await self.post(
            f"/repos/{owner}/{repo}/issues/{issue_number}/comments",
            {"body": body},
        )
