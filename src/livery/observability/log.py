"""Event log — bounded, thread-safe store of locator events.

Thread Safety:
    All methods are protected by a ``threading.Lock``.

"""

import threading
from collections import deque

from livery.observability.events import LocatorEvent


class EventLog:
    """Ring buffer of the most recent locator events.

    Args:
        max_events: Maximum number of events to retain; older ones drop off.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[LocatorEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: LocatorEvent) -> None:
        with self._lock:
            self._events.append(event)

    def query(
        self,
        *,
        event_type: type | None = None,
        name: str | None = None,
        limit: int = 100,
    ) -> list[LocatorEvent]:
        """Return up to *limit* events, newest first.

        Args:
            event_type: Only events of this class.
            name: Only events whose resource name contains this string.
            limit: Maximum number of events to return.

        """
        with self._lock:
            events = list(self._events)

        found: list[LocatorEvent] = []
        for event in reversed(events):
            if event_type is not None and not isinstance(event, event_type):
                continue
            if name is not None and name not in getattr(event, "name", ""):
                continue
            found.append(event)
            if len(found) == limit:
                break
        return found

    def recent(self, n: int = 20) -> list[LocatorEvent]:
        """Return the N most recent events, oldest first."""
        with self._lock:
            return list(self._events)[-n:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
