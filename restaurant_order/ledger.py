"""In-memory order ledger for the active session."""

from __future__ import annotations

from typing import Iterator

from restaurant_order.config import TAX_RATE
from restaurant_order.log import get_logger
from restaurant_order.models import LineItem, MenuEntry, Totals

_log = get_logger("ledger")


class OrderLedger:
    """
    Ordered collection of line items keyed by menu entry id.

    Mutations are tolerant: unknown ids and non-positive quantities never
    raise. Each mutation returns True when the ledger changed and False for
    a no-op, so callers can tell the two apart.
    """

    def __init__(self, tax_rate: float = TAX_RATE) -> None:
        self.tax_rate = tax_rate
        self._lines: dict[str, LineItem] = {}

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self.items)

    def __contains__(self, entry_id: object) -> bool:
        return entry_id in self._lines

    @property
    def items(self) -> tuple[LineItem, ...]:
        """Copies of the current lines in insertion order."""
        return tuple(
            LineItem(entry_id=line.entry_id, name=line.name, price=line.price, quantity=line.quantity)
            for line in self._lines.values()
        )

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def get(self, entry_id: str) -> LineItem | None:
        line = self._lines.get(entry_id)
        if line is None:
            return None
        return LineItem(entry_id=line.entry_id, name=line.name, price=line.price, quantity=line.quantity)

    def add(self, entry: MenuEntry) -> bool:
        """Add one of `entry`, copying its name and price on first insert."""
        line = self._lines.get(entry.entry_id)
        if line is not None:
            line.quantity += 1
        else:
            line = LineItem(entry_id=entry.entry_id, name=entry.name, price=entry.price, quantity=1)
            self._lines[entry.entry_id] = line
        _log.debug("ledger_add", entry_id=entry.entry_id, quantity=line.quantity)
        return True

    def remove(self, entry_id: str) -> bool:
        if self._lines.pop(entry_id, None) is None:
            _log.debug("ledger_remove_noop", entry_id=entry_id)
            return False
        _log.debug("ledger_remove", entry_id=entry_id)
        return True

    def set_quantity(self, entry_id: str, quantity: int) -> bool:
        """Replace a line's quantity; zero or below removes the line."""
        if quantity <= 0:
            return self.remove(entry_id)
        line = self._lines.get(entry_id)
        if line is None:
            _log.debug("ledger_set_quantity_noop", entry_id=entry_id, quantity=quantity)
            return False
        line.quantity = quantity
        _log.debug("ledger_set_quantity", entry_id=entry_id, quantity=quantity)
        return True

    def clear(self) -> bool:
        had_lines = bool(self._lines)
        self._lines.clear()
        _log.debug("ledger_clear", had_lines=had_lines)
        return had_lines

    def totals(self) -> Totals:
        """Compute subtotal, tax and total from the current lines, unrounded."""
        subtotal = sum((line.price * line.quantity for line in self._lines.values()), 0.0)
        tax = subtotal * self.tax_rate
        return Totals(subtotal=subtotal, tax=tax, total=subtotal + tax)
