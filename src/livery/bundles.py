"""Bundle registry — named resource roots with single inheritance.

A bundle is a directory holding a ``Resources/`` tree.  A bundle may extend
another bundle; looking up the parent's name then yields the whole chain,
most-derived first, so the derived bundle can shadow the parent's files::

    registry.register(BundleDescriptor("CoreBundle", Path("/b/core")))
    registry.register(BundleDescriptor("SiteBundle", Path("/b/site"), parent="CoreBundle"))
    registry.resolve_bundles("CoreBundle")  # (SiteBundle, CoreBundle)

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from livery._errors import ConfigError, UnknownBundleError


@dataclass(frozen=True, slots=True)
class BundleDescriptor:
    """A registered bundle.

    Attributes:
        name: Bundle name used in ``@Name/...`` references.
        path: Absolute filesystem root of the bundle.
        parent: Name of the bundle this one extends, if any.

    """

    name: str
    path: Path
    parent: str | None = None


class BundleResolver(Protocol):
    """Resolves a bundle name to its inheritance chain."""

    def resolve_bundles(self, name: str) -> Sequence[BundleDescriptor]: ...


class BundleRegistry:
    """In-memory ``BundleResolver``.

    Args:
        bundles: Descriptors to register up front.

    """

    __slots__ = ("_bundles",)

    def __init__(self, bundles: Iterable[BundleDescriptor] = ()) -> None:
        self._bundles: dict[str, BundleDescriptor] = {}
        for bundle in bundles:
            self.register(bundle)

    def register(self, bundle: BundleDescriptor) -> None:
        """Add *bundle*.

        Raises:
            ConfigError: If a bundle with the same name is already registered.

        """
        if bundle.name in self._bundles:
            msg = f"Bundle {bundle.name!r} is already registered"
            raise ConfigError(msg)
        self._bundles[bundle.name] = bundle

    def get(self, name: str) -> BundleDescriptor:
        try:
            return self._bundles[name]
        except KeyError:
            raise UnknownBundleError(name) from None

    def resolve_bundles(self, name: str) -> tuple[BundleDescriptor, ...]:
        """Return *name* and every bundle deriving from it, most-derived first.

        Raises:
            UnknownBundleError: If *name* is not registered.
            ConfigError: If the inheritance graph is not a simple chain.

        """
        chain = [self.get(name)]
        seen = {name}
        while True:
            children = [b for b in self._bundles.values() if b.parent == chain[0].name]
            if not children:
                break
            if len(children) > 1:
                names = ", ".join(sorted(b.name for b in children))
                msg = f"Bundle {chain[0].name!r} is extended by more than one bundle: {names}"
                raise ConfigError(msg)
            child = children[0]
            if child.name in seen:
                msg = f"Bundle inheritance cycle through {child.name!r}"
                raise ConfigError(msg)
            seen.add(child.name)
            chain.insert(0, child)
        return tuple(chain)

    def __contains__(self, name: object) -> bool:
        return name in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)
