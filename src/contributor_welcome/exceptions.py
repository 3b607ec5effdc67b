"""Exceptions for Contributor Welcome.

Exception Hierarchy:
    ContributorWelcomeError (base)
    ├── GitHubAPIError (HTTP API errors with status codes)
    │   ├── GitHubRateLimitError (403 rate limit from API response)
    │   └── GitHubNotFoundError (404 not found)
    ├── RateLimitExceededError (local rate limit tracking, before making request)
    ├── ProfileLookupError (WordPress.org profile service unreachable or broken)
    └── MalformedEventError (webhook payload missing required fields)

Usage:
    - ProfileLookupError is the only error the first-time contributor
      notifier catches itself; everything else reaches the caller.
"""

__all__ = [
    "ContributorWelcomeError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "RateLimitExceededError",
    "ProfileLookupError",
    "MalformedEventError",
]


class ContributorWelcomeError(Exception):
    """Base exception for all Contributor Welcome errors."""

    pass


class GitHubAPIError(ContributorWelcomeError):
    """Base exception for GitHub API errors (HTTP responses with error status codes)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API returns a rate limit error (HTTP 403).

    For preemptive rate limiting (before making requests), see RateLimitExceededError.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = 403,
        response_body: dict | None = None,
        reset_time: float | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.reset_time = reset_time


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class RateLimitExceededError(ContributorWelcomeError):
    """Raised by local rate limiter when limits are exhausted.

    Unlike GitHubRateLimitError, this does not involve an actual API call.
    """

    pass


class ProfileLookupError(ContributorWelcomeError):
    """Raised when the WordPress.org profile lookup cannot give an answer."""

    def __init__(self, username: str, reason: str, status_code: int | None = None):
        super().__init__(f"Profile lookup failed for {username}: {reason}")
        self.username = username
        self.status_code = status_code


class MalformedEventError(ContributorWelcomeError):
    """Raised when a webhook payload lacks fields a handler needs."""

    pass
