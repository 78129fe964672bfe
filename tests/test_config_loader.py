"""Tests for livery.config_loader — livery.yaml / livery.toml."""

from __future__ import annotations

from pathlib import Path

import pytest

from livery._errors import ConfigError
from livery.config_loader import load_config


class TestLoadConfig:
    """load_config — file values merged with keyword overrides."""

    def test_no_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)
        assert config.root == tmp_path
        assert config.theme == "default"

    def test_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text(
            "resources_dir: app/Resources\n"
            "paths: [overrides]\n"
            "themes: [light, dark]\n"
            "theme: dark\n"
            "bundles:\n"
            "  CoreBundle: bundles/core\n"
            "  SiteBundle:\n"
            "    path: bundles/site\n"
            "    parent: CoreBundle\n"
        )
        config = load_config(tmp_path)
        assert config.resource_path == tmp_path / "app" / "Resources"
        assert config.override_paths == (tmp_path / "overrides",)
        assert config.themes == ("light", "dark")
        assert config.theme == "dark"
        assert [(b.name, b.path, b.parent) for b in config.bundles] == [
            ("CoreBundle", tmp_path / "bundles" / "core", None),
            ("SiteBundle", tmp_path / "bundles" / "site", "CoreBundle"),
        ]

    def test_yml_with_livery_section(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yml").write_text(
            "livery:\n  themes: [a, b]\n  theme: b\nunrelated: 1\n"
        )
        config = load_config(tmp_path)
        assert config.theme == "b"

    def test_toml(self, tmp_path: Path) -> None:
        (tmp_path / "livery.toml").write_text(
            'themes = ["light", "dark"]\n'
            "\n"
            "[bundles]\n"
            'AppBundle = "bundles/app"\n'
        )
        config = load_config(tmp_path)
        assert config.theme == "light"
        assert config.bundles[0].path == tmp_path / "bundles" / "app"

    def test_yaml_preferred_over_toml(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("theme: from-yaml\n")
        (tmp_path / "livery.toml").write_text('theme = "from-toml"\n')
        assert load_config(tmp_path).theme == "from-yaml"

    def test_overrides_win(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("themes: [light, dark]\ntheme: light\n")
        assert load_config(tmp_path, theme="dark").theme == "dark"

    def test_none_overrides_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("theme: dark\n")
        assert load_config(tmp_path, theme=None).theme == "dark"

    def test_single_path_string(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("paths: overrides\n")
        assert load_config(tmp_path).paths == ("overrides",)

    def test_empty_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("")
        assert load_config(tmp_path).theme == "default"

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("themes: [light\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(tmp_path)

    def test_malformed_toml(self, tmp_path: Path) -> None:
        (tmp_path / "livery.toml").write_text("themes = [\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_config(tmp_path)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_bundle_without_path(self, tmp_path: Path) -> None:
        (tmp_path / "livery.yaml").write_text("bundles:\n  AppBundle:\n    parent: X\n")
        with pytest.raises(ConfigError, match="needs a path"):
            load_config(tmp_path)

    def test_unknown_override_key(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Invalid livery configuration"):
            load_config(tmp_path, colour="blue")
