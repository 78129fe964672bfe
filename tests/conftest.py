"""Shared test fixtures for livery."""

from __future__ import annotations

from pathlib import Path

import pytest

from livery.bundles import BundleDescriptor, BundleRegistry
from livery.theme import ActiveTheme


def touch(path: Path, content: str = "") -> Path:
    """Create *path* (and its parents) and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content or path.name)
    return path


@pytest.fixture
def resources(tmp_path: Path) -> Path:
    """Application resource root (``<tmp>/app/Resources``), created empty."""
    root = tmp_path / "app" / "Resources"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def theme() -> ActiveTheme:
    """Active theme switchable between ``light`` and ``dark``, starting on ``dark``."""
    return ActiveTheme("dark", ["light", "dark"])


@pytest.fixture
def registry(tmp_path: Path) -> BundleRegistry:
    """Registry with ``AppBundle`` and a ``SiteBundle`` -> ``CoreBundle`` chain.

    Bundle roots live under ``<tmp>/bundles/<Name>`` and are not created.
    """
    bundles = tmp_path / "bundles"
    return BundleRegistry([
        BundleDescriptor("AppBundle", bundles / "AppBundle"),
        BundleDescriptor("CoreBundle", bundles / "CoreBundle"),
        BundleDescriptor("SiteBundle", bundles / "SiteBundle", parent="CoreBundle"),
    ])
