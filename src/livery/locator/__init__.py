"""Resource locators.

``FileLocator`` searches an ordered list of directories; ``ThemeFileLocator``
adds bundle references, theme overrides and the ambiguity policy on top.
"""

from livery.locator.file import FileLocator
from livery.locator.reference import BundleReference, parse_bundle_reference
from livery.locator.theme import ThemeFileLocator

__all__ = [
    "BundleReference",
    "FileLocator",
    "ThemeFileLocator",
    "parse_bundle_reference",
]
