"""Domain models for restaurant-order."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

CATEGORIES: tuple[str, ...] = ("breakfast", "lunch", "dinner", "dessert", "beverage")


@dataclass(frozen=True)
class MenuEntry:
    """A read-only catalog item."""

    entry_id: str
    name: str
    description: str
    price: float
    category: str
    image: str = ""


@dataclass
class LineItem:
    """One catalog item plus its selected quantity."""

    entry_id: str
    name: str
    price: float
    quantity: int = 1

    @property
    def amount(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class Totals:
    """Derived subtotal/tax/total triple."""

    subtotal: float
    tax: float
    total: float


@dataclass(frozen=True)
class ReceiptRecord:
    """Write-once snapshot of a paid order, consumed by the receipt formatter."""

    items: tuple[LineItem, ...]
    totals: Totals
    order_number: str
    created_at: datetime
    payment_method: str | None = None
