"""Unit tests for the snippet catalog."""

import json

import pytest

from pagecomposer.catalog import (
    Catalog,
    CatalogError,
    CatalogItem,
    default_catalog,
    load_catalog,
    parse_catalog,
)


class TestCatalogItem:
    """Tests for CatalogItem model."""

    @pytest.mark.unit
    def test_code_alias(self):
        """Items accept the `code` key used by catalog files."""
        item = CatalogItem.model_validate({"name": "Btn", "code": "<button/>"})
        assert item.fragment_template == "<button/>"

    @pytest.mark.unit
    def test_field_name(self):
        """Items accept the field name too."""
        item = CatalogItem(name="Btn", fragment_template="<a/>")
        assert item.fragment_template == "<a/>"

    @pytest.mark.unit
    def test_preview_not_serialized(self):
        """Previews are front-end objects and never dumped."""
        item = CatalogItem(name="Btn", code="<a/>", preview=object())
        assert item.model_dump(by_alias=True) == {"name": "Btn", "code": "<a/>"}

    @pytest.mark.unit
    def test_empty_name_rejected(self):
        """Names are required."""
        with pytest.raises(ValueError):
            CatalogItem(name="", code="<a/>")


class TestCatalog:
    """Tests for Catalog registry."""

    @pytest.mark.unit
    def test_preserves_category_order(self):
        """Categories keep registration order."""
        catalog = Catalog()
        catalog.add("Forms", CatalogItem(name="a", code="<form/>"))
        catalog.add("Buttons", CatalogItem(name="b", code="<button/>"))
        assert catalog.categories() == ["Forms", "Buttons"]
        assert "Forms" in catalog
        assert len(catalog) == 2

    @pytest.mark.unit
    def test_add_replaces_same_name(self):
        """Re-adding a name replaces the item in place."""
        catalog = Catalog()
        catalog.add("Buttons", CatalogItem(name="a", code="<one/>"))
        catalog.add("Buttons", CatalogItem(name="b", code="<two/>"))
        catalog.add("Buttons", CatalogItem(name="a", code="<three/>"))
        assert [i.fragment_template for i in catalog.items("Buttons")] == [
            "<three/>",
            "<two/>",
        ]

    @pytest.mark.unit
    def test_get_item(self):
        """Items are found by category and name."""
        catalog = default_catalog()
        item = catalog.get_item("Buttons", "PrimaryButton")
        assert item.fragment_template.startswith("<button")

    @pytest.mark.unit
    def test_get_item_unknown(self):
        """Unknown items raise KeyError listing what exists."""
        with pytest.raises(KeyError, match="PrimaryButton"):
            default_catalog().get_item("Buttons", "Nope")

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown categories have no items."""
        assert Catalog().items("Nothing") == []

    @pytest.mark.unit
    def test_to_dict_round_trip(self):
        """Serialized catalogs parse back to the same items."""
        catalog = default_catalog()
        restored = parse_catalog(catalog.to_dict())
        assert restored.to_dict() == catalog.to_dict()


class TestLoadCatalog:
    """Tests for catalog file loading."""

    @pytest.mark.unit
    def test_load(self, tmp_path):
        """Valid files load."""
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps({"Cards": [{"name": "Card", "code": "<div>c</div>"}]})
        )
        catalog = load_catalog(path)
        assert catalog.categories() == ["Cards"]

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        """Missing files raise CatalogError."""
        with pytest.raises(CatalogError, match="Cannot read"):
            load_catalog(tmp_path / "missing.json")

    @pytest.mark.unit
    def test_invalid_json(self, tmp_path):
        """Broken JSON raises CatalogError."""
        path = tmp_path / "catalog.json"
        path.write_text("{not json")
        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(path)

    @pytest.mark.unit
    def test_wrong_shape(self):
        """Non-object and non-list shapes are rejected."""
        with pytest.raises(CatalogError):
            parse_catalog(["Buttons"])
        with pytest.raises(CatalogError):
            parse_catalog({"Buttons": {"name": "x"}})

    @pytest.mark.unit
    def test_invalid_item(self):
        """Items without code are rejected."""
        with pytest.raises(CatalogError, match="Buttons"):
            parse_catalog({"Buttons": [{"name": "x"}]})
