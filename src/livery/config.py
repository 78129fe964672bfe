"""Livery configuration.

LiveryConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path

from livery._errors import ConfigError
from livery.bundles import BundleDescriptor

DEFAULT_THEME = "default"


@dataclass(frozen=True, slots=True)
class LiveryConfig:
    """Configuration for a theme-aware locator.

    Attributes:
        root: Path to the project root.  Always resolved to an absolute path
              on construction.
        resources_dir: Application resource root, relative to ``root``.
        paths: Override directories searched before the theme and resource
            root, highest priority first.  Relative entries resolve from
            ``root``.
        themes: Allowed theme names.  Defaults to ``(theme,)``.
        theme: Initially active theme.  Defaults to the first of ``themes``,
            or ``"default"``.
        bundles: Registered bundles.  Relative bundle paths resolve from
            ``root``.

    """

    root: Path = field(default_factory=Path.cwd)
    resources_dir: str = "Resources"
    paths: tuple[str, ...] = ()
    themes: tuple[str, ...] = ()
    theme: str = ""
    bundles: tuple[BundleDescriptor, ...] = ()

    def __post_init__(self) -> None:
        if not self.root.is_absolute():
            object.__setattr__(self, "root", self.root.resolve())

        # Loaders hand over lists; keep the config hashable and immutable.
        object.__setattr__(self, "paths", tuple(str(p) for p in self.paths))
        object.__setattr__(self, "themes", tuple(self.themes))

        theme = self.theme or (self.themes[0] if self.themes else DEFAULT_THEME)
        object.__setattr__(self, "theme", theme)
        if not self.themes:
            object.__setattr__(self, "themes", (theme,))
        if theme not in self.themes:
            msg = f"Active theme {theme!r} is not in the themes list ({', '.join(self.themes)})"
            raise ConfigError(msg)

        bundles = tuple(
            b if b.path.is_absolute() else replace(b, path=self.root / b.path)
            for b in self.bundles
        )
        object.__setattr__(self, "bundles", bundles)

    @property
    def resource_path(self) -> Path:
        """Absolute path to the application resource root."""
        return self.root / self.resources_dir

    @property
    def override_paths(self) -> tuple[Path, ...]:
        """Absolute override directories, highest priority first."""
        return tuple(
            Path(p) if Path(p).is_absolute() else self.root / p for p in self.paths
        )
