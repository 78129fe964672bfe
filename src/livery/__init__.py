"""Livery — theme-aware layered resource lookup.

Resolve ``@Bundle/Resources/...``, ``views/...`` and plain relative names
to files on disk, searching override directories, the active theme and
bundle defaults in a fixed priority order.  Switching the active theme
takes effect on the next lookup.

Quick start::

    import livery

    locator = livery.load_locator("my-project/", theme="dark")
    locator.locate("@AppBundle/Resources/views/index.html")
    locator.locate("views/layout.html")
    locator.locate("css/site.css", first=False)

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ActiveTheme",
    "BundleDescriptor",
    "BundleRegistry",
    "FileLocator",
    "LiveryConfig",
    "ThemeFileLocator",
    "__version__",
    "create_locator",
    "load_locator",
]

_LAZY = {
    "ActiveTheme": "livery.theme",
    "BundleDescriptor": "livery.bundles",
    "BundleRegistry": "livery.bundles",
    "FileLocator": "livery.locator.file",
    "LiveryConfig": "livery.config",
    "ThemeFileLocator": "livery.locator.theme",
    "create_locator": "livery.app",
    "load_locator": "livery.app",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import livery`` fast while providing a clean top-level API.
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
