"""Booking form events for a presentation layer.

Every field edit and submission step is published to the subscribers'
queues. Only submission lifecycle events are kept in ``history``, capped
at the last ``history_size`` entries; keystrokes are delivered but not
retained.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from dataclasses import asdict, dataclass, field

log = logging.getLogger("consultation.events")

FIELD_CHANGED = "field_changed"
SUBMISSION_STARTED = "submission_started"
SUBMISSION_SUCCEEDED = "submission_succeeded"
SUBMISSION_FAILED = "submission_failed"
SUBMISSION_REJECTED = "submission_rejected"

LIFECYCLE_EVENTS = frozenset({
    SUBMISSION_STARTED,
    SUBMISSION_SUCCEEDED,
    SUBMISSION_FAILED,
    SUBMISSION_REJECTED,
})


@dataclass(frozen=True)
class BookingEvent:
    type: str
    provider_id: str
    status: str  # submission status right after the event
    data: dict = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    @property
    def is_lifecycle(self) -> bool:
        return self.type in LIFECYCLE_EVENTS

    def to_dict(self) -> dict:
        return asdict(self)


class BookingEventBroadcaster:
    """Publishes one booking form's events to any number of queues."""

    def __init__(self, provider_id: str, maxsize: int = 200, history_size: int = 50) -> None:
        self._provider_id = provider_id
        self._maxsize = maxsize
        self._queues: list[asyncio.Queue[BookingEvent]] = []
        self._history: deque[BookingEvent] = deque(maxlen=history_size)

    def subscribe(self) -> asyncio.Queue[BookingEvent]:
        q: asyncio.Queue[BookingEvent] = asyncio.Queue(maxsize=self._maxsize)
        self._queues.append(q)
        log.debug("Booking events for %s: %d subscriber(s)",
                  self._provider_id, len(self._queues))
        return q

    def unsubscribe(self, q: asyncio.Queue[BookingEvent]) -> None:
        if q in self._queues:
            self._queues.remove(q)

    def emit(self, event_type: str, status: str, data: dict | None = None) -> BookingEvent:
        event = BookingEvent(
            type=event_type,
            provider_id=self._provider_id,
            status=status,
            data=data or {},
        )
        if event.is_lifecycle:
            self._history.append(event)
        for q in self._queues:
            self._deliver(q, event)
        return event

    @staticmethod
    def _deliver(q: asyncio.Queue[BookingEvent], event: BookingEvent) -> None:
        # A slow reader loses its oldest pending event, never the newest
        if q.full():
            q.get_nowait()
        q.put_nowait(event)

    @property
    def history(self) -> list[BookingEvent]:
        """Recent submission lifecycle events, oldest first."""
        return list(self._history)

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)
