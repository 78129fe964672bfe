"""Livery themes — active theme state and the search-path fallback chain.

Application overrides take priority.  When a resource is not found there,
the active theme's directory is searched, then the plain resource root::

    [*override_paths, root/themes/<theme>, root]

Thread Safety:
    ``ActiveTheme`` guards its name with a lock; ``build_search_paths``
    returns an immutable tuple.  Safe for free-threading.

"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from livery._errors import UnknownThemeError

THEMES_DIR = "themes"


@runtime_checkable
class ThemeSource(Protocol):
    """Anything that can report the currently active theme name."""

    def get_name(self) -> str: ...


class ActiveTheme:
    """The currently selected theme, restricted to a list of known themes.

    Args:
        name: Initial theme name.
        themes: Allowed theme names.  The initial name must be one of them.

    Raises:
        UnknownThemeError: If *name* is not in *themes*.

    """

    __slots__ = ("_lock", "_name", "_themes")

    def __init__(self, name: str, themes: Sequence[str]) -> None:
        self._lock = threading.Lock()
        self._themes: tuple[str, ...] = tuple(themes)
        self._name = ""
        self.set_name(name)

    @property
    def themes(self) -> tuple[str, ...]:
        return self._themes

    def set_themes(self, themes: Sequence[str]) -> None:
        """Replace the allowed themes; the active name must stay allowed."""
        themes = tuple(themes)
        with self._lock:
            if self._name not in themes:
                raise UnknownThemeError(self._name, themes)
            self._themes = themes

    def get_name(self) -> str:
        with self._lock:
            return self._name

    def set_name(self, name: str) -> None:
        with self._lock:
            if name not in self._themes:
                raise UnknownThemeError(name, self._themes)
            self._name = name

    def __repr__(self) -> str:
        return f"ActiveTheme(name={self._name!r}, themes={self._themes!r})"


def theme_path(root: Path, theme: str) -> Path:
    """Return the override directory for *theme* under *root*."""
    return root / THEMES_DIR / theme


def build_search_paths(
    base_paths: Iterable[Path],
    root: Path,
    theme: str,
) -> tuple[Path, ...]:
    """Return search directories in priority order.

    Returns:
        ``(*base_paths, root/themes/<theme>, root)``

    Directories are included even if they do not exist yet.  A directory
    listed twice keeps only its first (highest priority) position.

    """
    dirs: list[Path] = []
    for path in (*base_paths, theme_path(root, theme), root):
        if path not in dirs:
            dirs.append(path)
    return tuple(dirs)
