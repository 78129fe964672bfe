"""Livery error hierarchy.

All livery-specific errors inherit from LiveryError for easy catching.
"""

from collections.abc import Sequence
from pathlib import Path


class LiveryError(Exception):
    """Base error for all livery operations."""


class ConfigError(LiveryError):
    """Invalid or missing configuration."""


class InvalidIdentifierError(LiveryError):
    """A resource name is malformed or escapes its allowed tree."""


class AmbiguousResourceError(LiveryError):
    """Two distinct bundles both provide a candidate for the same resource.

    Attributes:
        name: The resource name that was being located.
        locations: The conflicting paths, earliest match first.

    """

    def __init__(self, name: str, locations: Sequence[Path], message: str) -> None:
        super().__init__(message)
        self.name = name
        self.locations = tuple(locations)


class ResourceNotFoundError(LiveryError):
    """No candidate file exists for a resource name.

    Attributes:
        name: The resource name that was being located.
        searched: Directories (or candidate files) that were checked.

    """

    def __init__(self, name: str, searched: Sequence[Path] = ()) -> None:
        self.name = name
        self.searched = tuple(searched)
        msg = f"Unable to find file {name!r}"
        if self.searched:
            msg += " in: " + ", ".join(str(p) for p in self.searched)
        super().__init__(msg + ".")


class UnknownBundleError(LiveryError):
    """A bundle name is not registered."""

    def __init__(self, bundle: str) -> None:
        super().__init__(f"Bundle {bundle!r} does not exist or it is not enabled.")
        self.bundle = bundle


class UnknownThemeError(LiveryError):
    """A theme is not in the list of allowed themes."""

    def __init__(self, theme: str, themes: Sequence[str]) -> None:
        self.theme = theme
        self.themes = tuple(themes)
        super().__init__(
            f"The active theme {theme!r} must be in the themes list "
            f"({', '.join(self.themes)})."
        )
