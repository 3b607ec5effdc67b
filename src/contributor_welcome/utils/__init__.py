"""Utility modules for Contributor Welcome."""

from contributor_welcome.utils.pagination import (
    get_next_page_url,
    parse_link_header,
    with_query,
)
from contributor_welcome.utils.pull_request import (
    MergeMessageResolver,
    PullRequestResolver,
    get_associated_pull_request,
)
from contributor_welcome.utils.rate_limiter import RateLimiter, get_rate_limiter, reset_rate_limiter

__all__ = [
    "RateLimiter",
    "get_rate_limiter",
    "reset_rate_limiter",
    "parse_link_header",
    "get_next_page_url",
    "with_query",
    "PullRequestResolver",
    "MergeMessageResolver",
    "get_associated_pull_request",
]
