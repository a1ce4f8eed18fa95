"""Fan-out of lifecycle events to every registered notifier."""

import asyncio
import logging
from typing import List, Optional, Sequence

from safe_watcher.config import Config
from safe_watcher.lib.logger import configure_logger
from safe_watcher.services.communication.base import BaseNotifier, Event
from safe_watcher.services.communication.slack import create_slack_notifier


class NotificationDispatcher:
    """Delivers each event to all notifiers concurrently.

    A notifier that raises is logged and skipped; the others still run.
    """

    def __init__(
        self,
        notifiers: Sequence[BaseNotifier],
        logger: Optional[logging.Logger] = None,
    ):
        self.notifiers = list(notifiers)
        self.logger = logger or configure_logger(self.__class__.__name__)

    async def dispatch(self, event: Event) -> int:
        """Send an event to every notifier.

        Args:
            event: The lifecycle event to deliver

        Returns:
            Number of notifiers that delivered the event
        """
        if not self.notifiers:
            self.logger.debug("No notifiers registered")
            return 0

        results = await asyncio.gather(
            *(notifier.send(event) for notifier in self.notifiers),
            return_exceptions=True,
        )

        delivered = 0
        for notifier, result in zip(self.notifiers, results):
            if isinstance(result, Exception):
                self.logger.error(
                    "Notifier failed",
                    extra={
                        "notifier": notifier.__class__.__name__,
                        "event_type": str(event.type),
                        "safe_tx_hash": event.tx.safe_tx_hash,
                        "error": repr(result),
                    },
                )
            elif isinstance(result, BaseException):
                raise result
            elif result:
                delivered += 1

        self.logger.info(
            "Event dispatched",
            extra={
                "event_type": str(event.type),
                "safe_tx_hash": event.tx.safe_tx_hash,
                "delivered": delivered,
                "notifiers": len(self.notifiers),
            },
        )
        return delivered


def create_notifiers(config: Optional[Config] = None) -> List[BaseNotifier]:
    """Build the notifiers enabled by configuration."""
    return [create_slack_notifier(config)]
