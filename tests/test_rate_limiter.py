"""Tests for rate limiter module."""

import time

import pytest

from contributor_welcome.exceptions import RateLimitExceededError
from contributor_welcome.utils.rate_limiter import (
    LOW_REMAINING_THRESHOLD,
    RateLimiter,
    RateLimitState,
    format_reset_time,
    format_time_remaining,
    get_rate_limiter,
    reset_rate_limiter,
)


class TestFormatTimeRemaining:
    """Tests for format_time_remaining function."""

    def test_zero_and_negative(self):
        assert format_time_remaining(0) == "now"
        assert format_time_remaining(-10) == "now"

    def test_seconds_only(self):
        assert format_time_remaining(1) == "1 second"
        assert format_time_remaining(59) == "59 seconds"

    def test_minutes(self):
        assert format_time_remaining(60) == "1 minute"
        assert format_time_remaining(90) == "1 min 30 sec"

    def test_hours(self):
        assert format_time_remaining(7200) == "2 hours"
        assert format_time_remaining(5400) == "1 hr 30 min"


class TestFormatResetTime:
    """Tests for format_reset_time function."""

    def test_formats_timestamp(self):
        """Test that timestamp is formatted as HH:MM:SS."""
        assert len(format_reset_time(1700000000).split(":")) == 3


class TestRateLimitState:
    """Tests for header tracking."""

    def test_update_from_headers(self):
        state = RateLimitState(limit=60, remaining=60, reset_time=0)
        state.update_from_headers(
            {
                "x-ratelimit-limit": "5000",
                "x-ratelimit-remaining": "4321",
                "x-ratelimit-reset": "1700000000",
            }
        )

        assert state.limit == 5000
        assert state.remaining == 4321
        assert state.reset_time == 1700000000.0

    def test_missing_headers_keep_state(self):
        state = RateLimitState(limit=60, remaining=12, reset_time=5)
        state.update_from_headers({})
        assert (state.limit, state.remaining, state.reset_time) == (60, 12, 5)


class TestRateLimiter:
    """Tests for REST budget acquisition."""

    @pytest.mark.asyncio
    async def test_acquire_deducts(self):
        limiter = RateLimiter()
        await limiter.acquire_rest()
        assert limiter.rest.remaining == 4999

    @pytest.mark.asyncio
    async def test_acquire_exhausted_raises(self):
        """Test that an exhausted budget fails before requesting."""
        limiter = RateLimiter(
            rest=RateLimitState(limit=60, remaining=0, reset_time=time.time() + 600)
        )

        with pytest.raises(RateLimitExceededError, match="Rate limit exceeded"):
            await limiter.acquire_rest()

    @pytest.mark.asyncio
    async def test_acquire_after_reset_passes(self):
        """Test that a budget past its reset time is not blocked."""
        limiter = RateLimiter(
            rest=RateLimitState(limit=60, remaining=0, reset_time=time.time() - 1)
        )
        await limiter.acquire_rest()

    def test_global_instance(self):
        limiter = get_rate_limiter()
        assert get_rate_limiter() is limiter
        reset_rate_limiter()
        assert get_rate_limiter() is not limiter

    def test_threshold_is_reasonable(self):
        assert 0 < LOW_REMAINING_THRESHOLD <= 100
