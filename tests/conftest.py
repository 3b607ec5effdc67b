"""Pytest configuration and fixtures."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from contributor_welcome.config import Config, set_config
from contributor_welcome.utils.rate_limiter import reset_rate_limiter


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    reset_rate_limiter()
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(
        github_token="test_token",
        github_api_url="https://api.github.test",
        profiles_api_url="https://profiles.wordpress.test",
        main_branch_ref="refs/heads/master",
    )
    set_config(config)
    return config


@pytest.fixture
def make_push_payload():
    """Build push webhook payloads with sensible defaults."""

    def _make(
        ref: str = "refs/heads/master",
        message: str = "Fix block toolbar focus (#42)",
        username: str | None = "alice",
        commits: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        if commits is None:
            commits = [
                {
                    "id": "0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
                    "message": message,
                    "author": {
                        "name": "Alice",
                        "email": "alice@example.com",
                        "username": username,
                    },
                    "url": "https://github.com/WordPress/gutenberg/commit/0d1a26e",
                }
            ]
        return {
            "ref": ref,
            "before": "9049f1265b7d61be4a8904a9a27120d2064dab3b",
            "after": "0d1a26e67d8f5eaf1f6ba5c57fc3c7d91ac0fd1c",
            "commits": commits,
            "repository": {
                "name": "gutenberg",
                "full_name": "WordPress/gutenberg",
                "default_branch": "master",
                "owner": {"name": "WordPress", "login": "WordPress"},
            },
            "pusher": {"name": "alice", "email": "alice@example.com"},
        }

    return _make


@pytest.fixture
def api():
    """Hosting API double recording every call."""
    mock = AsyncMock()
    mock.list_commits_by_author.return_value = [{"sha": "0d1a26e"}]
    mock.add_labels.return_value = None
    mock.create_comment.return_value = None
    return mock


@pytest.fixture
def profiles():
    """Profile lookup double, defaults to "no profile linked"."""
    mock = AsyncMock()
    mock.has_profile.return_value = False
    return mock
