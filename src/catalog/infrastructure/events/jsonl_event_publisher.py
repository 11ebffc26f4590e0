"""Event publisher that appends events to a JSON-lines file.

Good enough for a single-process catalog: downstream tools can tail the
file. Publishing is fire-and-forget; a write failure is logged and the
already-committed mutation stands.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from catalog.domain.event_publisher import EventPublisher
from catalog.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class JsonlEventPublisher(EventPublisher):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def publish(self, event: DomainEvent, cancel: threading.Event | None = None) -> None:
        line = json.dumps(event.to_dict(), default=str)
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            with self._file_path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError:
            logger.exception("Could not publish %s for %s", event.event_type, event.aggregate_id)
            return

        logger.info("Published %s for %s", event.event_type, event.aggregate_id)
