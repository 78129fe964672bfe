"""Locator observability — what was looked up, where it was found, and when
the active theme changed.

All events are frozen dataclasses with nanosecond timestamps, safe for
concurrent production from multiple threads.

Quick Start:
    >>> from livery.observability import EventLog, LocatorCollector
    >>> log = EventLog()
    >>> collector = LocatorCollector(log)
    >>> # Pass collector to ThemeFileLocator(..., collector=collector)

"""

from livery.observability.collector import LocatorCollector
from livery.observability.events import (
    LocatorEvent,
    ResourceLocated,
    ResourceMissed,
    ThemeSwitched,
    now_ns,
)
from livery.observability.log import EventLog

__all__ = [
    "EventLog",
    "LocatorCollector",
    "LocatorEvent",
    "ResourceLocated",
    "ResourceMissed",
    "ThemeSwitched",
    "now_ns",
]
