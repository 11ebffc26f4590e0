"""Port for publishing domain events.

Publishing is fire-and-forget: an implementation must not raise for
transport problems, because the mutation it reports is already committed.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from catalog.domain.events import DomainEvent


class EventPublisher(ABC):

    @abstractmethod
    def publish(self, event: DomainEvent, cancel: threading.Event | None = None) -> None:
        """Hand an event to whoever listens.

        The mutation behind *event* is already committed, so a set
        *cancel* must not drop the event; implementations may use it
        only to stop waiting on slow transports.
        """
