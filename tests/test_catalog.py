from __future__ import annotations

import dataclasses

import pytest

from restaurant_order.data import MENU_BY_CATEGORY, MENU_ENTRIES, menu_by_category, menu_entry_by_id
from restaurant_order.models import CATEGORIES, LineItem, Totals
from restaurant_order.rendering import badge_style, format_category_tabs, format_line_item, format_totals


def test_entry_ids_are_unique() -> None:
    ids = [entry.entry_id for entry in MENU_ENTRIES]
    assert len(ids) == len(set(ids))


def test_every_entry_has_known_category_and_price() -> None:
    for entry in MENU_ENTRIES:
        assert entry.category in CATEGORIES
        assert entry.price >= 0


def test_lookup_by_category() -> None:
    desserts = menu_by_category("dessert")

    assert [entry.name for entry in desserts] == ["Chocolate Lava Cake", "New York Cheesecake"]
    assert sum(len(entries) for entries in MENU_BY_CATEGORY.values()) == len(MENU_ENTRIES)
    assert menu_by_category("brunch") == ()


def test_lookup_by_id() -> None:
    entry = menu_entry_by_id("5")

    assert entry is not None
    assert entry.name == "Filet Mignon"
    assert entry.price == pytest.approx(42.95)
    assert menu_entry_by_id("missing") is None


def test_entries_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        MENU_ENTRIES[0].price = 0.0  # type: ignore[misc]


def test_category_tabs_highlight_active() -> None:
    text = format_category_tabs(list(CATEGORIES), "dinner")

    assert "3 Dinner" in text.plain
    assert any(span.style == badge_style("dinner") for span in text.spans)


def test_line_item_label() -> None:
    text = format_line_item(LineItem(entry_id="1", name="Eggs Benedict", price=16.95, quantity=2))

    assert text.plain == "2 x Eggs Benedict  $16.95  = $33.90"


def test_totals_block() -> None:
    text = format_totals(Totals(subtotal=20.0, tax=1.6, total=21.6), 0.08)

    assert text.plain.splitlines() == ["Subtotal  $20.00", "Tax (8%)  $1.60", "Total  $21.60"]
