"""Static menu catalog built from the editable rows in constant.py."""

from __future__ import annotations

from restaurant_order.constant import MENU_ROWS
from restaurant_order.models import CATEGORIES, MenuEntry

MENU_ENTRIES: tuple[MenuEntry, ...] = tuple(
    MenuEntry(
        entry_id=str(row["entry_id"]),
        name=str(row["name"]),
        description=str(row["description"]),
        price=float(row["price"]),  # type: ignore[arg-type]
        category=str(row["category"]),
        image=str(row.get("image", "")),
    )
    for row in MENU_ROWS
)

MENU_BY_CATEGORY: dict[str, tuple[MenuEntry, ...]] = {
    category: tuple(entry for entry in MENU_ENTRIES if entry.category == category) for category in CATEGORIES
}

_MENU_BY_ID: dict[str, MenuEntry] = {entry.entry_id: entry for entry in MENU_ENTRIES}


def menu_by_category(category: str) -> tuple[MenuEntry, ...]:
    """Return catalog entries for a category, empty for unknown categories."""
    return MENU_BY_CATEGORY.get(category, ())


def menu_entry_by_id(entry_id: str) -> MenuEntry | None:
    """Look up a catalog entry by its identifier."""
    return _MENU_BY_ID.get(entry_id)
