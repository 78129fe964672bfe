"""File locator — search an ordered list of directories for a relative path.

The generic building block behind every livery lookup that is not a bundle
reference.  Directories are checked in order; the first existing
``<dir>/<name>`` wins, or every existing one is returned when ``first`` is
false.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from livery._errors import InvalidIdentifierError, ResourceNotFoundError


def collect_matches(
    name: str,
    matches: Iterator[Path],
    first: bool,
    searched: Sequence[Path] = (),
) -> Path | list[Path]:
    """Take the first match, or exhaust *matches* into a list.

    Raises:
        ResourceNotFoundError: If *matches* yields nothing.

    """
    if first:
        path = next(matches, None)
        if path is not None:
            return path
    else:
        found = list(matches)
        if found:
            return found
    raise ResourceNotFoundError(name, searched)


class FileLocator:
    """Locate files across ordered base directories.

    Args:
        paths: Directories to search, highest priority first.

    """

    __slots__ = ("_paths",)

    def __init__(self, paths: Iterable[Path | str] = ()) -> None:
        self._paths: tuple[Path, ...] = tuple(Path(p) for p in paths)

    @property
    def paths(self) -> tuple[Path, ...]:
        return self._paths

    def locate(
        self,
        name: str,
        current_path: Path | str | None = None,
        first: bool = True,
    ) -> Path | list[Path]:
        """Return the path of *name*, or every matching path if not *first*.

        Args:
            name: Relative (or absolute) file name.
            current_path: Directory searched before the configured ones.
            first: Return only the highest-priority match.

        Raises:
            InvalidIdentifierError: If *name* is empty.
            ResourceNotFoundError: If no directory contains *name*.

        """
        matches = self.iter_locations(name, current_path)
        searched = () if Path(name).is_absolute() else self.search_dirs(current_path)
        return collect_matches(name, matches, first, searched)

    def iter_locations(
        self,
        name: str,
        current_path: Path | str | None = None,
    ) -> Iterator[Path]:
        """Return a lazy iterator over existing locations of *name*.

        Raises:
            InvalidIdentifierError: If *name* is empty.

        """
        if not name:
            msg = "An empty file name is not valid to be located."
            raise InvalidIdentifierError(msg)
        return self._iter_locations(name, self.search_dirs(current_path))

    def search_dirs(self, current_path: Path | str | None = None) -> tuple[Path, ...]:
        """Return the directories a lookup from *current_path* checks, in order."""
        dirs: list[Path] = [Path(current_path)] if current_path else []
        for path in self._paths:
            if path not in dirs:
                dirs.append(path)
        return tuple(dirs)

    @staticmethod
    def _iter_locations(name: str, dirs: Sequence[Path]) -> Iterator[Path]:
        path = Path(name)
        if path.is_absolute():
            if path.exists():
                yield path
            return

        for directory in dirs:
            candidate = directory / name
            if candidate.exists():
                yield candidate

    def __repr__(self) -> str:
        return f"{type(self).__name__}(paths={[str(p) for p in self._paths]!r})"
