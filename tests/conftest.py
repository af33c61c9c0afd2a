from __future__ import annotations

import pytest

from restaurant_order.ledger import OrderLedger
from restaurant_order.models import MenuEntry


def make_entry(entry_id: str, price: float, name: str | None = None, category: str = "lunch") -> MenuEntry:
    return MenuEntry(
        entry_id=entry_id,
        name=name or f"Item {entry_id}",
        description="",
        price=price,
        category=category,
    )


@pytest.fixture()
def ledger() -> OrderLedger:
    return OrderLedger()


@pytest.fixture()
def receipt_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    target = tmp_path / "receipts"
    monkeypatch.setenv("RESTAURANT_ORDER_RECEIPT_DIR", str(target))
    return target
