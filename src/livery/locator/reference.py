"""Bundle resource references — ``@BundleName/Resources/<kind>/<path>``.

Parsing is pure string work; nothing here touches the filesystem.

    ``@AppBundle/Resources/views/layout.html``
        bundle         AppBundle
        path           Resources/views/layout.html
        override_path  /views/layout.html   (kept under an override dir)
        sub_path       /layout.html         (kept under a theme dir)

"""

from __future__ import annotations

from dataclasses import dataclass

from livery._errors import InvalidIdentifierError

BUNDLE_SIGIL = "@"
VIEWS_PREFIX = "views/"
RESOURCES_DIR = "Resources"


@dataclass(frozen=True, slots=True)
class BundleReference:
    """A validated bundle resource reference.

    Attributes:
        name: The original resource name, sigil included.
        bundle: Bundle name.
        path: Path relative to the bundle root, starting with ``Resources``.

    """

    name: str
    bundle: str
    path: str

    @property
    def override_path(self) -> str:
        """*path* without the leading ``Resources`` segment."""
        return self.path[len(RESOURCES_DIR):]

    @property
    def sub_path(self) -> str:
        """*path* without the leading ``Resources/<kind>`` segments."""
        rest = self.override_path.lstrip("/")
        _, sep, tail = rest.partition("/")
        return sep + tail


def is_bundle_reference(name: str) -> bool:
    return name.startswith(BUNDLE_SIGIL)


def is_view_reference(name: str) -> bool:
    return name.startswith(VIEWS_PREFIX)


def parse_bundle_reference(name: str) -> BundleReference:
    """Split a ``@Bundle/Resources/...`` name into its parts.

    Raises:
        InvalidIdentifierError: If *name* is not a bundle reference, contains
            ``..``, or points outside the bundle's ``Resources`` tree.

    """
    if not is_bundle_reference(name):
        msg = f"Resource name {name!r} is not a bundle reference (must start with {BUNDLE_SIGIL!r})."
        raise InvalidIdentifierError(msg)

    if ".." in name:
        msg = f"File name {name!r} contains invalid characters (..)."
        raise InvalidIdentifierError(msg)

    bundle, _, path = name[len(BUNDLE_SIGIL):].partition("/")
    if not bundle:
        msg = f"Resource name {name!r} does not name a bundle."
        raise InvalidIdentifierError(msg)

    if path != RESOURCES_DIR and not path.startswith(RESOURCES_DIR + "/"):
        msg = f"Resource {name!r} is outside the bundle Resources directory."
        raise InvalidIdentifierError(msg)

    return BundleReference(name=name, bundle=bundle, path=path)


def reject_traversal(name: str) -> None:
    """Raise if a view or plain resource name has a ``..`` segment.

    Raises:
        InvalidIdentifierError: If *name* would climb out of a search directory.

    """
    if ".." in name.replace("\\", "/").split("/"):
        msg = f"File name {name!r} contains invalid characters (..)."
        raise InvalidIdentifierError(msg)
