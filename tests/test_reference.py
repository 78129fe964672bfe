"""Tests for livery.locator.reference — bundle reference parsing."""

from __future__ import annotations

import pytest

from livery._errors import InvalidIdentifierError
from livery.locator.reference import (
    is_bundle_reference,
    is_view_reference,
    parse_bundle_reference,
)


class TestParseBundleReference:
    """parse_bundle_reference — split and validate ``@Bundle/Resources/...``."""

    def test_views_reference(self) -> None:
        ref = parse_bundle_reference("@AppBundle/Resources/views/Default/index.html")
        assert ref.bundle == "AppBundle"
        assert ref.path == "Resources/views/Default/index.html"
        assert ref.override_path == "/views/Default/index.html"
        assert ref.sub_path == "/Default/index.html"

    def test_other_kind(self) -> None:
        ref = parse_bundle_reference("@AppBundle/Resources/public/css/app.css")
        assert ref.override_path == "/public/css/app.css"
        assert ref.sub_path == "/css/app.css"

    def test_resources_root(self) -> None:
        ref = parse_bundle_reference("@AppBundle/Resources")
        assert ref.override_path == ""
        assert ref.sub_path == ""

    def test_kind_only(self) -> None:
        ref = parse_bundle_reference("@AppBundle/Resources/views")
        assert ref.override_path == "/views"
        assert ref.sub_path == ""

    def test_traversal(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="invalid characters"):
            parse_bundle_reference("@AppBundle/Resources/views/../../secret")

    def test_missing_resources(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="outside"):
            parse_bundle_reference("@AppBundle/views/index.html")

    def test_missing_bundle_name(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="does not name a bundle"):
            parse_bundle_reference("@/Resources/views/index.html")

    def test_not_a_reference(self) -> None:
        with pytest.raises(InvalidIdentifierError, match="not a bundle reference"):
            parse_bundle_reference("views/index.html")


class TestReferenceKinds:
    """Prefix checks used for dispatch."""

    def test_bundle(self) -> None:
        assert is_bundle_reference("@AppBundle/Resources/views/a.html")
        assert not is_bundle_reference("views/a.html")

    def test_view(self) -> None:
        assert is_view_reference("views/a.html")
        assert not is_view_reference("plain/views/a.html")
        assert not is_view_reference("viewsx/a.html")
