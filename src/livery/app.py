"""Livery application wiring — build a ready-to-use locator from config.

The two public functions are the primary entry points::

    locator = livery.load_locator("my-project/", theme="dark")
    locator = livery.create_locator(config, active_theme=theme)

"""

from pathlib import Path

from livery.bundles import BundleRegistry
from livery.config import LiveryConfig
from livery.config_loader import load_config
from livery.locator.theme import ThemeFileLocator
from livery.observability.collector import LocatorCollector
from livery.theme import ActiveTheme, ThemeSource


def create_locator(
    config: LiveryConfig,
    *,
    active_theme: ThemeSource | None = None,
    collector: LocatorCollector | None = None,
) -> ThemeFileLocator:
    """Create a ThemeFileLocator for *config*.

    Args:
        config: Frozen livery configuration.
        active_theme: Shared theme state.  Defaults to a new ``ActiveTheme``
            built from ``config.theme`` and ``config.themes``; pass your own
            to switch themes at runtime from elsewhere in the application.
        collector: Optional event collector.

    Raises:
        ConfigError: If the configured bundles are inconsistent.

    """
    if active_theme is None:
        active_theme = ActiveTheme(config.theme, config.themes)

    return ThemeFileLocator(
        BundleRegistry(config.bundles),
        active_theme,
        config.resource_path,
        config.override_paths,
        collector=collector,
    )


def load_locator(root: str | Path = ".", **kwargs: object) -> ThemeFileLocator:
    """Load configuration from *root* and create a locator for it.

    Keyword arguments override values from ``livery.yaml`` / ``livery.toml``;
    ``collector`` and ``active_theme`` are passed to ``create_locator``.
    """
    collector = kwargs.pop("collector", None)
    active_theme = kwargs.pop("active_theme", None)
    config = load_config(Path(root), **kwargs)
    return create_locator(
        config,
        active_theme=active_theme,  # type: ignore[arg-type]
        collector=collector,  # type: ignore[arg-type]
    )
