"""Rendering helpers for menu rows, cart lines and totals."""

from __future__ import annotations

from rich.text import Text

from restaurant_order.constant import CATEGORY_LABELS
from restaurant_order.models import LineItem, MenuEntry, Totals
from restaurant_order.receipt import format_money

_CATEGORY_STYLES: dict[str, str] = {
    "breakfast": "bold #1b1b1b on #f2c14e",
    "lunch": "bold #0b1f0f on #5fbf72",
    "dinner": "bold #ffffff on #b23a48",
    "dessert": "bold #ffffff on #8e5bb5",
    "beverage": "bold #ffffff on #2f6db5",
}


def badge_style(category: str) -> str:
    """Return a consistent badge style for category tags."""
    return _CATEGORY_STYLES.get(category, "bold #ffffff on #555555")


def format_category_tabs(categories: list[str], active: str) -> Text:
    text = Text()
    for idx, category in enumerate(categories):
        if idx > 0:
            text.append(" ")
        label = f" {idx + 1} {CATEGORY_LABELS.get(category, category)} "
        if category == active:
            text.append(label, style=badge_style(category))
        else:
            text.append(label, style="dim")
    return text


def format_menu_entry(entry: MenuEntry, show_description: bool = False) -> Text:
    """Render a menu row as name and price, optionally with a dimmed description."""
    text = Text()
    text.append(entry.name, style="bold")
    text.append(f"  {format_money(entry.price)}", style="#f2c14e")
    if show_description and entry.description:
        text.append(f"\n    {entry.description}", style="dim")
    return text


def format_line_item(item: LineItem) -> Text:
    text = Text()
    text.append(f"{item.quantity} x ", style="bold")
    text.append(item.name)
    text.append(f"  {format_money(item.price)}", style="dim")
    text.append(f"  = {format_money(item.amount)}")
    return text


def format_totals(totals: Totals, tax_rate: float) -> Text:
    """Render the totals block shown under the cart."""
    text = Text()
    text.append(f"Subtotal  {format_money(totals.subtotal)}\n")
    text.append(f"Tax ({tax_rate * 100:.0f}%)  {format_money(totals.tax)}\n")
    text.append(f"Total  {format_money(totals.total)}", style="bold")
    return text
