from __future__ import annotations

import pytest

from conftest import make_entry
from restaurant_order.ledger import OrderLedger
from restaurant_order.models import Totals


def test_repeated_add_increments_quantity(ledger: OrderLedger) -> None:
    entry = make_entry("a", 4.5)
    for _ in range(7):
        assert ledger.add(entry) is True

    line = ledger.get("a")
    assert line is not None
    assert line.quantity == 7
    assert len(ledger) == 1


def test_add_copies_name_and_price_at_add_time(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 5.0, name="Soup"))
    # A later entry with the same id but a different price does not re-price the line.
    ledger.add(make_entry("a", 99.0, name="Renamed"))

    line = ledger.get("a")
    assert line is not None
    assert (line.name, line.price, line.quantity) == ("Soup", 5.0, 2)


def test_insertion_order_is_preserved(ledger: OrderLedger) -> None:
    for entry_id in ("c", "a", "b"):
        ledger.add(make_entry(entry_id, 1.0))
    ledger.add(make_entry("a", 1.0))

    assert [line.entry_id for line in ledger.items] == ["c", "a", "b"]


def test_remove_excludes_price_from_subtotal(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 5.0))
    ledger.add(make_entry("b", 15.0))

    assert ledger.remove("a") is True
    assert "a" not in ledger
    assert ledger.totals().subtotal == pytest.approx(15.0)


def test_remove_missing_is_noop(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 5.0))

    assert ledger.remove("missing") is False
    assert [line.entry_id for line in ledger.items] == ["a"]


@pytest.mark.parametrize("quantity", [0, -5])
def test_non_positive_quantity_removes_line(ledger: OrderLedger, quantity: int) -> None:
    ledger.add(make_entry("a", 5.0))
    ledger.add(make_entry("b", 2.0))

    assert ledger.set_quantity("a", quantity) is True
    assert "a" not in ledger
    assert ledger.get("a") is None
    assert ledger.totals().subtotal == pytest.approx(2.0)


def test_set_quantity_on_missing_id_is_noop(ledger: OrderLedger) -> None:
    assert ledger.set_quantity("missing", 3) is False
    assert ledger.set_quantity("missing", 0) is False
    assert ledger.is_empty


def test_items_are_copies(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 5.0))
    ledger.items[0].quantity = 50

    line = ledger.get("a")
    assert line is not None
    assert line.quantity == 1


def test_clear_resets_totals(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 5.0))
    ledger.add(make_entry("b", 7.25))

    assert ledger.clear() is True
    assert ledger.totals() == Totals(subtotal=0.0, tax=0.0, total=0.0)
    assert ledger.clear() is False


def test_item_count_sums_quantities(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 1.0))
    ledger.add(make_entry("a", 1.0))
    ledger.add(make_entry("b", 1.0))

    assert ledger.item_count == 3


def test_add_same_item_twice_scenario(ledger: OrderLedger) -> None:
    entry = make_entry("a", 10.0)
    ledger.add(entry)
    ledger.add(entry)

    totals = ledger.totals()
    assert ledger.get("a").quantity == 2
    assert totals.subtotal == pytest.approx(20.0)
    assert totals.tax == pytest.approx(1.6)
    assert totals.total == pytest.approx(21.6)


def test_set_quantity_scenario(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 5.0))
    ledger.add(make_entry("b", 15.0))

    assert ledger.set_quantity("a", 3) is True

    totals = ledger.totals()
    assert totals.subtotal == pytest.approx(30.0)
    assert totals.tax == pytest.approx(2.4)
    assert totals.total == pytest.approx(32.4)


@pytest.mark.parametrize(
    "lines",
    [
        [(18.95, 1)],
        [(16.95, 3), (6.95, 2)],
        [(42.95, 1), (0.0, 4), (11.95, 9)],
    ],
)
def test_total_is_subtotal_plus_eight_percent(ledger: OrderLedger, lines: list[tuple[float, int]]) -> None:
    for idx, (price, quantity) in enumerate(lines):
        entry = make_entry(str(idx), price)
        ledger.add(entry)
        ledger.set_quantity(entry.entry_id, quantity)

    totals = ledger.totals()
    assert totals.total == pytest.approx(totals.subtotal * 1.08)
    assert totals.tax == pytest.approx(totals.subtotal * 0.08)


def test_totals_are_not_rounded(ledger: OrderLedger) -> None:
    ledger.add(make_entry("a", 0.125))

    assert ledger.totals().tax == pytest.approx(0.01)
    assert ledger.totals().total == pytest.approx(0.135)
