"""Locator collector — records lookups and theme switches into an EventLog.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.
    Safe for concurrent use from multiple threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from livery._types import Strategy
from livery.observability.events import (
    ResourceLocated,
    ResourceMissed,
    ThemeSwitched,
    now_ns,
)
from livery.observability.log import EventLog


class LocatorCollector:
    """Event collector for ``ThemeFileLocator``.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_theme_switch(
        self,
        previous: str,
        current: str,
        search_paths: Iterable[Path],
    ) -> None:
        """Record that a locator rebuilt its search paths for a new theme."""
        self._log.append(
            ThemeSwitched(
                previous=previous,
                current=current,
                search_paths=tuple(str(p) for p in search_paths),
                timestamp_ns=now_ns(),
            )
        )

    def record_located(
        self,
        name: str,
        strategy: Strategy,
        theme: str,
        paths: Iterable[Path],
        *,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a successful lookup."""
        self._log.append(
            ResourceLocated(
                name=name,
                strategy=strategy,
                theme=theme,
                paths=tuple(str(p) for p in paths),
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_missed(
        self,
        name: str,
        strategy: Strategy,
        theme: str,
        error: Exception,
    ) -> None:
        """Record a failed lookup."""
        self._log.append(
            ResourceMissed(
                name=name,
                strategy=strategy,
                theme=theme,
                reason=type(error).__name__,
                message=str(error),
                timestamp_ns=now_ns(),
            )
        )
