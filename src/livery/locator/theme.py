"""Theme-aware locator — resolve resource names against the active theme.

Three kinds of names are understood:

``@BundleName/Resources/<kind>/<path>``
    Bundle resource.  For every bundle in the name's inheritance chain the
    candidates are, in order::

        <override>/<Bundle>/<kind>/<path>                each configured override path
        <base>/themes/<theme>/<Bundle>/<kind>/<path>     application + theme override
        <base>/<Bundle>/<kind>/<path>                    application override
        <bundle>/Resources/themes/<theme>/<path>         bundle theme
        <bundle>/Resources/<kind>/<path>                 bundle default

    An override or theme match from a bundle after a different bundle of the
    chain already matched is ambiguous and raises.  Defaults from several
    bundles never conflict.  When ``first`` is false only the defaults are
    returned; override and theme matches are used for the ambiguity check.

``views/<path>``
    Application view.  ``<base>/themes/<theme>/<path>`` first, then the
    generic search below.

anything else
    Generic search over ``[*override_paths, root/themes/<theme>, root]``.

Names other than bundle references must not contain a ``..`` segment.

The active theme is read from a ``ThemeSource`` on every lookup; when it
changed since the previous lookup the search paths are rebuilt before
resolving.

Thread Safety:
    Theme refresh and the snapshot of theme + search paths a lookup resolves
    against happen under one ``threading.RLock``.  Matching itself runs on
    that immutable snapshot.

"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from livery._errors import AmbiguousResourceError, LiveryError
from livery._types import Strategy
from livery.bundles import BundleDescriptor, BundleResolver
from livery.locator.file import FileLocator, collect_matches
from livery.locator.reference import (
    RESOURCES_DIR,
    VIEWS_PREFIX,
    BundleReference,
    is_bundle_reference,
    is_view_reference,
    parse_bundle_reference,
    reject_traversal,
)
from livery.observability.collector import LocatorCollector
from livery.observability.events import now_ns
from livery.theme import ThemeSource, build_search_paths, theme_path


class ThemeFileLocator:
    """Locate resources across override, theme and bundle directories.

    Args:
        bundles: Resolves bundle names to their inheritance chain.
        active_theme: Reports the theme to resolve against.
        root: Application resource root.
        paths: Override directories, highest priority first.
        collector: Optional event collector for lookups and theme switches.

    """

    __slots__ = (
        "_active_theme",
        "_base_paths",
        "_bundles",
        "_collector",
        "_fallback",
        "_last_theme",
        "_lock",
        "_root",
    )

    def __init__(
        self,
        bundles: BundleResolver,
        active_theme: ThemeSource,
        root: Path | str,
        paths: Iterable[Path | str] = (),
        *,
        collector: LocatorCollector | None = None,
    ) -> None:
        self._bundles = bundles
        self._active_theme = active_theme
        self._root = Path(root)
        self._base_paths: tuple[Path, ...] = tuple(Path(p) for p in paths)
        self._collector = collector
        self._lock = threading.RLock()
        self._last_theme = ""
        self._fallback = FileLocator()

        self.set_current_theme(active_theme.get_name())

    # ----- Theme state -----

    @property
    def root(self) -> Path:
        return self._root

    @property
    def current_theme(self) -> str:
        """Theme the search paths were last built for."""
        with self._lock:
            return self._last_theme

    @property
    def search_paths(self) -> tuple[Path, ...]:
        with self._lock:
            return self._fallback.paths

    def set_current_theme(self, theme: str) -> None:
        """Rebuild the search paths for *theme*.

        Called automatically by ``refresh_if_changed``.  A theme set here
        only lasts until a lookup sees the theme source report another name.
        """
        with self._lock:
            previous = self._last_theme
            self._last_theme = theme
            self._fallback = FileLocator(build_search_paths(self._base_paths, self._root, theme))
            if self._collector is not None:
                self._collector.record_theme_switch(previous, theme, self._fallback.paths)

    def refresh_if_changed(self) -> bool:
        """Rebuild the search paths if the active theme changed.

        Returns:
            True if the paths were rebuilt.

        """
        with self._lock:
            theme = self._active_theme.get_name()
            if theme == self._last_theme:
                return False
            self.set_current_theme(theme)
            return True

    # ----- Lookup -----

    def locate(
        self,
        name: str,
        base_dir: Path | str | None = None,
        first: bool = True,
    ) -> Path | list[Path]:
        """Return the file for *name*, or all matching files if not *first*.

        Args:
            name: ``@Bundle/Resources/...``, ``views/...`` or a relative path.
            base_dir: Application directory holding overrides.  Bundle and
                view lookups fall back to the resource root when omitted;
                generic lookups search it before the search paths.
            first: Return only the highest-priority match.

        Raises:
            InvalidIdentifierError: If *name* is empty, contains ``..``, or
                points outside a bundle's Resources.
            AmbiguousResourceError: If two bundles of one chain both match.
            ResourceNotFoundError: If nothing matches.
            UnknownBundleError: If the referenced bundle is not registered.

        """
        started = now_ns()
        strategy = _strategy(name)
        with self._lock:
            self.refresh_if_changed()
            theme = self._last_theme
            fallback = self._fallback

        try:
            matches, searched = self._prepare(name, base_dir, theme, fallback, first)
            result = collect_matches(name, matches, first, searched)
        except LiveryError as exc:
            if self._collector is not None:
                self._collector.record_missed(name, strategy, theme, exc)
            raise

        if self._collector is not None:
            self._collector.record_located(
                name,
                strategy,
                theme,
                [result] if isinstance(result, Path) else result,
                duration_ms=(now_ns() - started) / 1_000_000,
            )
        return result

    def iter_matches(self, name: str, base_dir: Path | str | None = None) -> Iterator[Path]:
        """Return a lazy iterator over every match for *name*, best first.

        The theme is refreshed and the name validated immediately; files
        are checked as the iterator is consumed.  For bundle references this
        is the priority order ``locate(first=True)`` takes its result from.

        """
        with self._lock:
            self.refresh_if_changed()
            theme = self._last_theme
            fallback = self._fallback
        matches, _ = self._prepare(name, base_dir, theme, fallback, first=True)
        return matches

    def _prepare(
        self,
        name: str,
        base_dir: Path | str | None,
        theme: str,
        fallback: FileLocator,
        first: bool,
    ) -> tuple[Iterator[Path], tuple[Path, ...]]:
        """Validate *name* and return its lazy matches plus the searched dirs."""
        if is_bundle_reference(name):
            ref = parse_bundle_reference(name)
            bundles = tuple(self._bundles.resolve_bundles(ref.bundle))
            base = Path(base_dir) if base_dir else self._root
            searched = tuple(b.path for b in bundles)
            matches = self._iter_bundle_matches(
                ref, bundles, base, theme, defaults_only=not first
            )
            return matches, searched

        reject_traversal(name)

        if is_view_reference(name):
            base = Path(base_dir) if base_dir else self._root
            view = theme_path(base, theme) / name[len(VIEWS_PREFIX):]
            rest = fallback.iter_locations(name, base_dir)
            searched = (view.parent, *fallback.search_dirs(base_dir))
            return _chain_unique(_existing(view), rest), searched

        matches = fallback.iter_locations(name, base_dir)
        searched = () if Path(name).is_absolute() else fallback.search_dirs(base_dir)
        return matches, searched

    def _iter_bundle_matches(
        self,
        ref: BundleReference,
        bundles: Sequence[BundleDescriptor],
        base: Path,
        theme: str,
        *,
        defaults_only: bool = False,
    ) -> Iterator[Path]:
        """Yield bundle matches in priority order.

        With *defaults_only* the override and theme matches still take part
        in the ambiguity check but only bundle defaults are yielded.
        """
        # (bundle name, path) of the first match in the chain
        claimed: tuple[str, Path] | None = None

        for bundle in bundles:
            override = _first_existing(
                _override_candidates(ref, bundle, self._base_paths, base, theme)
            )
            if override is not None:
                if claimed is not None and claimed[0] != bundle.name:
                    msg = (
                        f"{ref.path!r} resource is hidden by a resource from the "
                        f"{claimed[0]!r} derived bundle ({claimed[1]}). Create a "
                        f"{str(override)!r} file to override the bundle resource."
                    )
                    raise AmbiguousResourceError(ref.name, (claimed[1], override), msg)
                if claimed is None:
                    claimed = (bundle.name, override)
                if not defaults_only:
                    yield override

            default = bundle.path / ref.path
            if default.exists():
                if claimed is None:
                    claimed = (bundle.name, default)
                yield default

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(root={str(self._root)!r}, "
            f"theme={self._last_theme!r})"
        )


def _override_candidates(
    ref: BundleReference,
    bundle: BundleDescriptor,
    base_paths: Sequence[Path],
    base: Path,
    theme: str,
) -> list[Path]:
    """Application and theme overrides for one bundle, highest priority first."""
    override = ref.override_path.lstrip("/")
    sub = ref.sub_path.lstrip("/")
    candidates = [_join(p / bundle.name, override) for p in base_paths]
    candidates += [
        _join(theme_path(base, theme) / bundle.name, override),
        _join(base / bundle.name, override),
        _join(theme_path(bundle.path / RESOURCES_DIR, theme), sub),
    ]
    return candidates


def _join(directory: Path, relative: str) -> Path:
    return directory / relative if relative else directory


def _first_existing(candidates: Iterable[Path]) -> Path | None:
    for path in candidates:
        if path.exists():
            return path
    return None


def _existing(path: Path) -> Iterator[Path]:
    if path.exists():
        yield path


def _chain_unique(*iterators: Iterator[Path]) -> Iterator[Path]:
    seen: set[Path] = set()
    for iterator in iterators:
        for path in iterator:
            if path not in seen:
                seen.add(path)
                yield path


def _strategy(name: str) -> Strategy:
    if is_bundle_reference(name):
        return "bundle"
    if is_view_reference(name):
        return "view"
    return "fallback"
