"""Lifecycle events and the notifier interface."""

from abc import ABC, abstractmethod
from enum import Enum

from safe_watcher.services.integrations.safe.models import (
    CustomBaseModel,
    SafeTx,
    Signer,
)


class EventType(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    EXECUTED = "executed"
    MALICIOUS = "malicious"

    def __str__(self):
        return self.value


class Event(CustomBaseModel):
    """A lifecycle change of one Safe transaction."""

    type: EventType
    chain_prefix: str
    safe: str
    tx: SafeTx[Signer]


class UnknownChainPrefixError(KeyError):
    """Raised when a chain prefix has no display name configured."""

    pass


class BaseNotifier(ABC):
    """A channel that lifecycle events are delivered to."""

    @abstractmethod
    async def send(self, event: Event) -> bool:
        """Render and deliver one event.

        Delivery failures are logged, not raised.

        Returns:
            True if the channel accepted the message
        """
