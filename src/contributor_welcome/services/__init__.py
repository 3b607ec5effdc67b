"""Services for GitHub event automations."""

from contributor_welcome.services.automations import AutomationRunner
from contributor_welcome.services.github_rest_client import GitHubRestClient
from contributor_welcome.services.notifier import (
    ACCOUNT_LINK_PROMPT,
    FIRST_TIME_CONTRIBUTOR_LABEL,
    FirstTimeContributorNotifier,
)
from contributor_welcome.services.profile_client import WordPressProfileClient
from contributor_welcome.services.protocols import HostingApiClient, ProfileLookupService

__all__ = [
    "AutomationRunner",
    "GitHubRestClient",
    "WordPressProfileClient",
    "FirstTimeContributorNotifier",
    "FIRST_TIME_CONTRIBUTOR_LABEL",
    "ACCOUNT_LINK_PROMPT",
    "HostingApiClient",
    "ProfileLookupService",
]
