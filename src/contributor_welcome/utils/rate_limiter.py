"""Rate limiter for GitHub REST API requests."""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from contributor_welcome.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

# Warn once remaining requests drop below this
LOW_REMAINING_THRESHOLD = 10


def format_time_remaining(seconds: float) -> str:
    """Format seconds into a human-friendly string."""
    if seconds <= 0:
        return "now"

    seconds = int(seconds)

    if seconds < 60:
        return f"{seconds} second{'s' if seconds != 1 else ''}"
    elif seconds < 3600:
        minutes = seconds // 60
        secs = seconds % 60
        if secs > 0:
            return f"{minutes} min {secs} sec"
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    else:
        hours = seconds // 3600
        minutes = (seconds % 3600) // 60
        if minutes > 0:
            return f"{hours} hr {minutes} min"
        return f"{hours} hour{'s' if hours != 1 else ''}"


def format_reset_time(reset_timestamp: float) -> str:
    """Format reset timestamp to a human-readable local time."""
    return datetime.fromtimestamp(reset_timestamp).strftime("%H:%M:%S")


@dataclass
class RateLimitState:
    """Track rate limit state for an API."""

    limit: int
    remaining: int
    reset_time: float  # Unix timestamp

    @property
    def is_exhausted(self) -> bool:
        return self.remaining <= 0

    @property
    def seconds_until_reset(self) -> float:
        return max(0, self.reset_time - time.time())

    def update_from_headers(self, headers: dict) -> None:
        """Update state from GitHub API response headers."""
        if "x-ratelimit-limit" in headers:
            self.limit = int(headers["x-ratelimit-limit"])
        if "x-ratelimit-remaining" in headers:
            self.remaining = int(headers["x-ratelimit-remaining"])
        if "x-ratelimit-reset" in headers:
            self.reset_time = float(headers["x-ratelimit-reset"])


@dataclass
class RateLimiter:
    """Local tracker of the GitHub REST API budget."""

    rest: RateLimitState = field(
        default_factory=lambda: RateLimitState(
            limit=5000, remaining=5000, reset_time=time.time() + 3600
        )
    )

    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def acquire_rest(self, cost: int = 1) -> None:
        """Acquire permission for a REST API request.

        Raises:
            RateLimitExceededError: If the budget is spent and has not reset yet
        """
        async with self._lock:
            state = self.rest
            if state.remaining < cost:
                wait_time = state.seconds_until_reset
                if wait_time > 0:
                    human_time = format_time_remaining(wait_time)
                    reset_at = format_reset_time(state.reset_time)
                    logger.warning(
                        "GitHub REST rate limit exceeded, resets in %s (at %s)",
                        human_time,
                        reset_at,
                    )
                    raise RateLimitExceededError(
                        f"Rate limit exceeded. Resets in {human_time} (at {reset_at})"
                    )

            state.remaining -= cost

    def update_rest_from_headers(self, headers: dict) -> None:
        """Update REST rate limit state from response headers."""
        self.rest.update_from_headers(headers)
        if 0 < self.rest.remaining < LOW_REMAINING_THRESHOLD:
            logger.warning(
                "Only %d/%d GitHub API requests remaining",
                self.rest.remaining,
                self.rest.limit,
            )


# Global rate limiter instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the global rate limiter instance."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Reset the global rate limiter (useful for testing)."""
    global _rate_limiter
    _rate_limiter = None
