"""Load LiveryConfig from livery.yaml or livery.toml if present.

Merges file config with keyword overrides. Overrides take precedence.

    # livery.yaml
    resources_dir: Resources
    paths: [overrides]
    themes: [light, dark]
    theme: dark
    bundles:
      CoreBundle: bundles/core
      SiteBundle:
        path: bundles/site
        parent: CoreBundle

"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from livery._errors import ConfigError
from livery.bundles import BundleDescriptor
from livery.config import LiveryConfig

_KEYS = frozenset({"resources_dir", "paths", "themes", "theme", "bundles"})


def load_config(root: Path, **overrides: object) -> LiveryConfig:
    """Load LiveryConfig from root, optionally merging livery.yaml.

    Looks for livery.yaml, livery.yml, or livery.toml in root. If found,
    loads and merges with overrides. Overrides take precedence; ``None``
    overrides are ignored so CLI defaults do not mask file values.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.

    """
    file_config = _read_livery_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    if "bundles" in merged:
        merged["bundles"] = _parse_bundles(merged["bundles"])
    for key in ("paths", "themes"):
        if key in merged and isinstance(merged[key], str):
            merged[key] = (merged[key],)
    try:
        return LiveryConfig(root=root, **merged)
    except TypeError as exc:
        msg = f"Invalid livery configuration in {root}: {exc}"
        raise ConfigError(msg) from exc


def _read_livery_config(root: Path) -> dict[str, object]:
    """Read livery config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("livery.yaml", "livery.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "livery.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Failed to parse {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_livery_section(data, path)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Failed to parse {path}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_livery_section(data, path)


def _flatten_livery_section(data: object, path: Path) -> dict[str, object]:
    """Extract livery.* keys into top-level config."""
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping at the top level"
        raise ConfigError(msg)

    result: dict[str, object] = {k: v for k, v in data.items() if k in _KEYS}
    section = data.get("livery")
    if isinstance(section, dict):
        result.update({k: v for k, v in section.items() if k in _KEYS})
    return result


def _parse_bundles(raw: object) -> tuple[BundleDescriptor, ...]:
    """Normalize the ``bundles`` mapping into descriptors.

    Accepts ``{name: path}`` or ``{name: {path: ..., parent: ...}}``, or an
    already-built sequence of descriptors.
    """
    if isinstance(raw, (list, tuple)) and all(isinstance(b, BundleDescriptor) for b in raw):
        return tuple(raw)
    if not isinstance(raw, dict):
        msg = "'bundles' must be a mapping of bundle name to path"
        raise ConfigError(msg)

    bundles: list[BundleDescriptor] = []
    for name, spec in raw.items():
        if isinstance(spec, str):
            bundles.append(BundleDescriptor(str(name), Path(spec)))
        elif isinstance(spec, dict) and isinstance(spec.get("path"), str):
            parent = spec.get("parent")
            bundles.append(
                BundleDescriptor(str(name), Path(spec["path"]), str(parent) if parent else None)
            )
        else:
            msg = f"Bundle {name!r} needs a path"
            raise ConfigError(msg)
    return tuple(bundles)
