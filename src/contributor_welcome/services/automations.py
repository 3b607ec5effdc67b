"""Route GitHub events to the automations that handle them."""

import logging
from typing import Any, Awaitable, Callable, Optional

from contributor_welcome.config import Config, get_config
from contributor_welcome.models.event import PushEvent
from contributor_welcome.services.notifier import FirstTimeContributorNotifier
from contributor_welcome.services.protocols import HostingApiClient, ProfileLookupService

logger = logging.getLogger(__name__)

Automation = Callable[[dict[str, Any]], Awaitable[None]]


class AutomationRunner:
    """Dispatches webhook payloads by event name."""

    def __init__(
        self,
        api: HostingApiClient,
        profiles: ProfileLookupService,
        config: Optional[Config] = None,
    ):
        self.api = api
        self.config = config or get_config()
        self.notifier = FirstTimeContributorNotifier(profiles, config=self.config)
        self._automations: dict[str, list[Automation]] = {
            "push": [self._first_time_contributor],
        }

    @property
    def event_names(self) -> list[str]:
        """Event names with at least one automation."""
        return sorted(self._automations)

    async def _first_time_contributor(self, payload: dict[str, Any]) -> None:
        await self.notifier.process(PushEvent.from_payload(payload), self.api)

    async def run(self, event_name: str, payload: dict[str, Any]) -> bool:
        """Run every automation registered for an event.

        Args:
            event_name: GitHub event name (e.g. "push")
            payload: Raw webhook payload

        Returns:
            True if at least one automation ran, False if the event is unhandled
        """
        automations = self._automations.get(event_name)
        if not automations:
            logger.info("No automations for event '%s'. Skipping", event_name)
            return False

        for automation in automations:
            logger.debug("Running %s for '%s'", automation.__name__, event_name)
            await automation(payload)
        return True
