"""Event model for locator observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass

from livery._types import Strategy


@dataclass(frozen=True, slots=True)
class ThemeSwitched:
    """A locator observed a new active theme and rebuilt its search paths.

    Attributes:
        previous: Theme observed before the switch (empty on first use).
        current: Newly observed theme.
        search_paths: The rebuilt search directories, highest priority first.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    previous: str
    current: str
    search_paths: tuple[str, ...]
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ResourceLocated:
    """A resource name resolved to one or more files.

    Attributes:
        name: The resource name that was located.
        strategy: How the name was dispatched.
        theme: Active theme during the lookup.
        paths: Returned file paths, highest priority first.
        duration_ms: Time spent resolving in milliseconds.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    name: str
    strategy: Strategy
    theme: str
    paths: tuple[str, ...]
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ResourceMissed:
    """A lookup failed.

    Attributes:
        name: The resource name that was being located.
        strategy: How the name was dispatched.
        theme: Active theme during the lookup.
        reason: Error class name (``ResourceNotFoundError``, ...).
        message: Error message.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    name: str
    strategy: Strategy
    theme: str
    reason: str
    message: str
    timestamp_ns: int


type LocatorEvent = ThemeSwitched | ResourceLocated | ResourceMissed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
