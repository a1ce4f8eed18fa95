"""
Notification channels for Safe transaction lifecycle events.
"""

from safe_watcher.services.communication.base import (
    BaseNotifier,
    Event,
    EventType,
    UnknownChainPrefixError,
)
from safe_watcher.services.communication.dispatcher import (
    NotificationDispatcher,
    create_notifiers,
)

__all__ = [
    "BaseNotifier",
    "Event",
    "EventType",
    "NotificationDispatcher",
    "UnknownChainPrefixError",
    "create_notifiers",
]
