"""First-time contributor labelling and onboarding prompt."""

import logging
from typing import Optional

from contributor_welcome.config import Config, get_config
from contributor_welcome.exceptions import MalformedEventError, ProfileLookupError
from contributor_welcome.models.event import PushEvent
from contributor_welcome.services.protocols import HostingApiClient, ProfileLookupService
from contributor_welcome.utils.pull_request import MergeMessageResolver, PullRequestResolver

logger = logging.getLogger(__name__)

FIRST_TIME_CONTRIBUTOR_LABEL = "First-time Contributor"

# Asks the contributor to link their GitHub account from their WordPress.org
# profile so they can be credited in release announcements.
ACCOUNT_LINK_PROMPT = (
    "Congratulations on your first merged pull request! We'd like to credit "
    "you for your contribution in the post announcing the next WordPress "
    "release, but we can't find a WordPress.org profile associated with your "
    "GitHub account. When you have a moment, visit the following URL and "
    'click "link your GitHub account" under "GitHub Username" to link your '
    "accounts:\n\nhttps://profiles.wordpress.org/me/profile/edit/\n\nAnd if "
    "you don't have a WordPress.org account, you can create one on this page:"
    "\n\nhttps://login.wordpress.org/register\n\nKudos!"
)


class FirstTimeContributorNotifier:
    """Labels pull requests merged for first-time contributors.

    After labelling, the contributor is prompted to link a WordPress.org
    profile unless one is already linked. The prompt is best effort: a failed
    profile lookup is logged and skips the comment, while every earlier
    failure reaches the caller.
    """

    def __init__(
        self,
        profiles: ProfileLookupService,
        resolver: Optional[PullRequestResolver] = None,
        config: Optional[Config] = None,
    ):
        self.profiles = profiles
        self.resolver = resolver or MergeMessageResolver()
        self.config = config or get_config()

    async def process(self, event: PushEvent, api: HostingApiClient) -> None:
        """Handle a push event.

        Args:
            event: Parsed push event payload
            api: Hosting API used for commit listing, labelling and commenting

        Raises:
            MalformedEventError: If the event has no commits or no author login
        """
        if event.ref != self.config.main_branch_ref:
            logger.debug("Commit is not to `%s`. Aborting", self.config.main_branch_ref)
            return

        commit = event.head_commit
        if commit is None:
            raise MalformedEventError("Push event has no commits")

        pull_request = self.resolver.resolve(commit)
        if not pull_request:
            logger.debug("Cannot determine pull request associated with commit. Aborting")
            return

        repo = event.repository.name
        owner = event.repository.owner.login
        author = commit.author.username
        if not author:
            raise MalformedEventError(f"Commit {commit.id} has no author username")

        logger.debug("Searching for commits in %s/%s by @%s", owner, repo, author)
        commits = await api.list_commits_by_author(owner, repo, author)

        if len(commits) > 1:
            logger.debug("Not the first commit for author. Aborting")
            return

        logger.debug(
            "Adding '%s' label to issue #%d", FIRST_TIME_CONTRIBUTOR_LABEL, pull_request
        )
        await api.add_labels(owner, repo, pull_request, [FIRST_TIME_CONTRIBUTOR_LABEL])

        logger.debug("Checking for WordPress username associated with @%s", author)
        try:
            has_profile = await self.profiles.has_profile(author)
        except ProfileLookupError as e:
            logger.warning("Error retrieving from profile API: %s", e)
            return

        if has_profile:
            logger.debug("User already known. No need to prompt for account link!")
            return

        await api.create_comment(owner, repo, pull_request, ACCOUNT_LINK_PROMPT)
