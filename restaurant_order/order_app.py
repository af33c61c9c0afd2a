"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from restaurant_order.checkout import CheckoutFlow
from restaurant_order.data import menu_by_category
from restaurant_order.ledger import OrderLedger
from restaurant_order.log import get_logger
from restaurant_order.models import CATEGORIES, MenuEntry, ReceiptRecord
from restaurant_order.payment_modal import PaymentModal
from restaurant_order.rendering import format_category_tabs, format_line_item, format_menu_entry, format_totals

_log = get_logger("ui")

# Keys that mutate the ledger; refused while the current order is paid.
_LEDGER_KEYS = frozenset({"a", "+", "=", "-", "x", "c"})


class OrderApp(App):
    """A Textual app for browsing the menu, building an order and paying for it."""

    TITLE = "Restaurant Order"
    SUB_TITLE = "Menu / Cart / Checkout"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #cart-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #category-bar {
        height: 1;
        margin-bottom: 1;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-totals {
        height: auto;
        margin-top: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    category_index = reactive(0)
    menu_selected_index = reactive(0)
    cart_selected_index = reactive(None)

    BINDINGS = [
        ("left", "cycle_category(-1)", "Previous category"),
        ("right", "cycle_category(1)", "Next category"),
        ("up", "move_menu(-1)", "Previous item"),
        ("down", "move_menu(1)", "Next item"),
        ("enter", "add_selected", "Add to order"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, ledger: OrderLedger | None = None, checkout: CheckoutFlow | None = None) -> None:
        super().__init__()
        self.ledger = ledger if ledger is not None else OrderLedger()
        self.checkout = checkout if checkout is not None else CheckoutFlow(self.ledger)
        self.checkout.on_paid = self._on_paid
        self.system_status = ""
        _log.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Our Menu", classes="pane-title")
                yield Static(id="category-bar")
                yield Static(id="menu-list")
            with Vertical(id="cart-pane"):
                yield Static("Your Order", classes="pane-title")
                yield Static("Your cart is empty", id="cart-list")
                yield Static(id="cart-totals")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._refresh_all()

    @property
    def active_category(self) -> str:
        return CATEGORIES[self.category_index]

    def on_key(self, event: Key) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        if not event.is_printable or not event.character or len(event.character) != 1:
            return

        char = event.character.lower()
        _log.debug("on_key", key=event.key, char=char)

        if char in _LEDGER_KEYS and self._order_locked():
            event.stop()
            return

        if char.isdigit() and 1 <= int(char) <= len(CATEGORIES):
            self._select_category(int(char) - 1)
        elif char == "a":
            self.action_add_selected()
        elif char == "j":
            self._move_cart_selection(1)
        elif char == "k":
            self._move_cart_selection(-1)
        elif char in {"+", "="}:
            self._change_selected_quantity(1)
        elif char == "-":
            self._change_selected_quantity(-1)
        elif char == "x":
            self._remove_selected_line()
        elif char == "c":
            self._clear_cart()
        elif char == "p":
            self._open_payment()
        else:
            return
        event.stop()

    def action_cycle_category(self, delta: int) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        self._select_category((self.category_index + delta) % len(CATEGORIES))

    def action_move_menu(self, delta: int) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        entries = self._menu_entries()
        if not entries:
            return
        self.menu_selected_index = (self.menu_selected_index + delta) % len(entries)
        self._refresh_menu()

    def action_add_selected(self) -> None:
        if isinstance(self.screen, PaymentModal):
            return
        if self._order_locked():
            return
        entries = self._menu_entries()
        if not entries:
            return
        entry = entries[self.menu_selected_index]
        self.ledger.add(entry)
        self.cart_selected_index = self._cart_index_of(entry.entry_id)
        self.system_status = f"Added {entry.name} to cart"
        self.notify(self.system_status)
        self._refresh_cart()
        self._refresh_status()

    def _select_category(self, index: int) -> None:
        self.category_index = index
        self.menu_selected_index = 0
        self._refresh_menu()

    def _menu_entries(self) -> tuple[MenuEntry, ...]:
        return menu_by_category(self.active_category)

    def _cart_index_of(self, entry_id: str) -> int | None:
        for idx, line in enumerate(self.ledger.items):
            if line.entry_id == entry_id:
                return idx
        return None

    def _selected_line_id(self) -> str | None:
        items = self.ledger.items
        if self.cart_selected_index is None or not (0 <= self.cart_selected_index < len(items)):
            return None
        return items[self.cart_selected_index].entry_id

    def _move_cart_selection(self, delta: int) -> None:
        count = len(self.ledger)
        if not count:
            return

        if self.cart_selected_index is None:
            self.cart_selected_index = 0 if delta > 0 else count - 1
        else:
            self.cart_selected_index = (self.cart_selected_index + delta) % count
        self._refresh_cart()

    def _change_selected_quantity(self, delta: int) -> None:
        entry_id = self._selected_line_id()
        if entry_id is None:
            return
        line = self.ledger.get(entry_id)
        if line is None:
            return
        self.ledger.set_quantity(entry_id, line.quantity + delta)
        self._refresh_cart()

    def _remove_selected_line(self) -> None:
        entry_id = self._selected_line_id()
        if entry_id is None:
            return
        self.ledger.remove(entry_id)
        self._refresh_cart()

    def _clear_cart(self) -> None:
        if self.ledger.clear():
            self.system_status = "Cart cleared"
        self._refresh_cart()
        self._refresh_status()

    def _order_locked(self) -> bool:
        """Refuse cart edits once paid; the order must be reset from the payment modal."""
        if not self.checkout.is_paid:
            return False
        self.system_status = f"Order {self.checkout.order_number} is paid. Press P for the receipt or a new order"
        self._refresh_status()
        _log.debug("ledger_edit_blocked", reason="paid", order_number=self.checkout.order_number)
        return True

    def _open_payment(self) -> None:
        if self.ledger.is_empty and not self.checkout.is_paid:
            self.system_status = "Your cart is empty"
            self._refresh_status()
            return
        _log.debug("open_payment", order_number=self.checkout.order_number)
        self.push_screen(PaymentModal(self.checkout), callback=self._on_payment_closed)

    def _on_payment_closed(self, new_order: bool | None) -> None:
        if new_order:
            self.cart_selected_index = None
            self.system_status = f"New order {self.checkout.order_number}"
        self._refresh_all()

    def _on_paid(self, record: ReceiptRecord) -> None:
        self.system_status = f"Paid {record.order_number}"
        self.notify("Your order has been processed.", title="Payment successful!")
        self._refresh_cart()
        self._refresh_status()

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_cart()
        self._refresh_status()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        """Pick the visible slice so that it plus its "⋮" markers fits in `rows` lines."""
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        body = rows
        while True:
            if selected is None:
                start = 0
            else:
                start = max(0, selected - body // 2)
                start = min(start, total - body)
            end = start + body
            markers = int(start > 0) + int(end < total)
            if body + markers <= rows or body == 1:
                return (start, end)
            body -= 1

    def _refresh_menu(self) -> None:
        try:
            tabs = self.query_one("#category-bar", Static)
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        tabs.update(format_category_tabs(list(CATEGORIES), self.active_category))

        entries = self._menu_entries()
        if not entries:
            menu_widget.update("No items")
            return
        if self.menu_selected_index >= len(entries):
            self.menu_selected_index = 0

        lines = Text()
        for idx, entry in enumerate(entries):
            if idx > 0:
                lines.append("\n")
            selected = idx == self.menu_selected_index
            lines.append("➤ " if selected else "  ")
            lines.append_text(format_menu_entry(entry, show_description=selected))
        menu_widget.update(lines)

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
            totals_widget = self.query_one("#cart-totals", Static)
        except NoMatches:
            return

        record = self.checkout.receipt_record
        if record is not None:
            totals_widget.update(format_totals(record.totals, self.ledger.tax_rate))
            paid = Text()
            paid.append(f"Order {record.order_number} paid\n", style="bold #5fbf72")
            for item in record.items:
                paid.append("  ")
                paid.append_text(format_line_item(item))
                paid.append("\n")
            paid.append("Press P to download the receipt or start a new order", style="dim")
            cart_widget.update(paid)
            return

        items = self.ledger.items
        totals_widget.update(format_totals(self.ledger.totals(), self.ledger.tax_rate))
        if not items:
            self.cart_selected_index = None
            cart_widget.update("Your cart is empty\nAdd items from the menu to get started")
            return

        if self.cart_selected_index is not None and self.cart_selected_index >= len(items):
            self.cart_selected_index = len(items) - 1

        visible_rows = self._visible_rows(cart_widget)
        start, end = self._window_bounds(len(items), visible_rows, self.cart_selected_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append("➤ " if idx == self.cart_selected_index else "  ")
            lines.append_text(format_line_item(items[idx]))
        if end < len(items):
            lines.append("\n⋮", style="dim")
        cart_widget.update(lines)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        bar.update(
            f"←/→ or 1-5 category, ↑/↓ + Enter/A add. J/K select, +/- qty, X remove, C clear, P pay. "
            f"Cart: {self.ledger.item_count}\n{status}"
        )
