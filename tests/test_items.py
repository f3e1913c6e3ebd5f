"""Tests for item variants and the catalog."""

from __future__ import annotations

import pytest

from list_select.items import InvalidItemError, ItemCatalog, Labeled, Primitive, coerce_item


class TestCoerceItem:
    def test_string_becomes_primitive(self) -> None:
        assert coerce_item("Apple") == Primitive("Apple")

    def test_mapping_becomes_labeled(self) -> None:
        item = coerce_item({"name": "Apple", "value": 42})
        assert item == Labeled("Apple", 42)
        assert item.display_text == "Apple"

    def test_mapping_without_value(self) -> None:
        assert coerce_item({"name": "Pear"}) == Labeled("Pear", None)

    def test_existing_items_pass_through(self) -> None:
        p = Primitive("x")
        lab = Labeled("y", 1)
        assert coerce_item(p) is p
        assert coerce_item(lab) is lab

    def test_rejects_malformed_item_instances(self) -> None:
        with pytest.raises(InvalidItemError, match="'text' must be a string"):
            coerce_item(Primitive(None), 1)  # type: ignore[arg-type]
        with pytest.raises(InvalidItemError, match="'name' must be a string"):
            coerce_item(Labeled(5, "v"), 0)  # type: ignore[arg-type]

    def test_catalog_rejects_malformed_instances_up_front(self) -> None:
        with pytest.raises(InvalidItemError) as info:
            ItemCatalog.from_values([Primitive("ok"), Labeled(5, "v")])  # type: ignore[arg-type]
        assert info.value.position == 1

    @pytest.mark.parametrize("raw", [42, None, 3.5, ["a"], object()])
    def test_rejects_unknown_shapes(self, raw: object) -> None:
        with pytest.raises(InvalidItemError):
            coerce_item(raw, 3)

    def test_rejects_mapping_without_name(self) -> None:
        with pytest.raises(InvalidItemError, match="'name'"):
            coerce_item({"value": 1})

    def test_rejects_non_string_name(self) -> None:
        with pytest.raises(InvalidItemError, match="must be a string"):
            coerce_item({"name": 7})

    def test_error_names_position(self) -> None:
        with pytest.raises(InvalidItemError) as info:
            ItemCatalog.from_values(["ok", "fine", 12])
        assert info.value.position == 2
        assert "item 2" in str(info.value)
        assert isinstance(info.value, ValueError)


class TestDisplayText:
    def test_labeled_falls_back_to_value(self) -> None:
        assert Labeled("", 99).display_text == "99"
        assert Labeled("", None).display_text == ""

    def test_search_text_uses_name_only(self) -> None:
        assert Labeled("", "hidden").search_text == ""
        assert Primitive("Plain").search_text == "Plain"


class TestItemCatalog:
    def test_bounds(self) -> None:
        catalog = ItemCatalog.from_values(["a", "b", "c"])
        assert len(catalog) == 3
        assert catalog.last_index == 2
        assert catalog.has_index(0)
        assert catalog.has_index(2)
        assert not catalog.has_index(3)
        assert not catalog.has_index(-1)
        assert not catalog.has_index(None)
        assert not catalog.has_index(True)

    def test_get_out_of_range_is_none(self) -> None:
        catalog = ItemCatalog.from_values(["a"])
        assert catalog.get(0) == Primitive("a")
        assert catalog.get(5) is None
        assert catalog.get(None) is None
        assert catalog.display_text(5) == ""

    def test_empty(self) -> None:
        catalog = ItemCatalog.from_values(None)
        assert len(catalog) == 0
        assert catalog.last_index is None
        assert not catalog

    def test_display_texts_mixed(self) -> None:
        catalog = ItemCatalog.from_values(["Apple", {"name": "Banana", "value": "b"}])
        assert catalog.display_texts() == ["Apple", "Banana"]
