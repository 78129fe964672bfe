"""Tests for livery.app — locator wiring from configuration."""

from __future__ import annotations

from pathlib import Path

from livery.app import create_locator, load_locator
from livery.bundles import BundleDescriptor
from livery.config import LiveryConfig
from livery.observability.collector import LocatorCollector
from livery.observability.events import ThemeSwitched
from livery.theme import ActiveTheme

from tests.conftest import touch


class TestCreateLocator:
    """create_locator — config to ThemeFileLocator."""

    def test_uses_config(self, tmp_path: Path) -> None:
        config = LiveryConfig(
            root=tmp_path,
            paths=("overrides",),
            themes=("light", "dark"),
            theme="dark",
            bundles=(BundleDescriptor("AppBundle", Path("bundles/app")),),
        )
        locator = create_locator(config)
        assert locator.root == tmp_path / "Resources"
        assert locator.current_theme == "dark"
        assert locator.search_paths == (
            tmp_path / "overrides",
            tmp_path / "Resources" / "themes" / "dark",
            tmp_path / "Resources",
        )

        default = touch(tmp_path / "bundles" / "app" / "Resources" / "views" / "a.html")
        assert locator.locate("@AppBundle/Resources/views/a.html") == default

    def test_shared_active_theme(self, tmp_path: Path) -> None:
        theme = ActiveTheme("light", ["light", "dark"])
        locator = create_locator(LiveryConfig(root=tmp_path), active_theme=theme)
        themed = touch(tmp_path / "Resources" / "themes" / "dark" / "a.css")

        theme.set_name("dark")
        assert locator.locate("a.css") == themed

    def test_collector_passed_through(self, tmp_path: Path) -> None:
        collector = LocatorCollector()
        create_locator(LiveryConfig(root=tmp_path), collector=collector)
        assert len(collector.log.query(event_type=ThemeSwitched)) == 1


class TestLoadLocator:
    """load_locator — read livery.yaml then create the locator."""

    def test_reads_config_file(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("themes: [light, dark]\ntheme: dark\n")
        locator = load_locator(tmp_path)
        assert locator.current_theme == "dark"

    def test_keyword_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("themes: [light, dark]\n")
        collector = LocatorCollector()
        locator = load_locator(tmp_path, theme="dark", collector=collector)
        assert locator.current_theme == "dark"
        assert len(collector.log) == 1
