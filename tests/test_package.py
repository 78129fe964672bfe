"""Tests for livery package exports and metadata."""

import livery


class TestPackageMetadata:
    """Package-level exports and metadata."""

    def test_version_string(self) -> None:
        assert isinstance(livery.__version__, str)
        assert "0.1.0" in livery.__version__

    def test_free_threading_declaration(self) -> None:
        assert livery._Py_mod_gil == 0

    def test_all_exports_resolvable(self) -> None:
        for name in livery.__all__:
            getattr(livery, name)

    def test_lazy_export_identity(self) -> None:
        from livery.locator.theme import ThemeFileLocator

        assert livery.ThemeFileLocator is ThemeFileLocator

    def test_invalid_attribute_raises(self) -> None:
        import pytest

        with pytest.raises(AttributeError, match="no attribute"):
            livery.nonexistent_thing  # type: ignore[attr-defined]  # noqa: B018
