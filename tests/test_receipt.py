from __future__ import annotations

from datetime import datetime

import pytest

from restaurant_order.constant import BUSINESS_NAME, RECEIPT_FOOTER
from restaurant_order.models import LineItem, ReceiptRecord, Totals
from restaurant_order.receipt import (
    LineOp,
    TextOp,
    format_money,
    layout_receipt,
    receipt_filename,
    render_receipt,
    save_receipt,
)


class RecordingCanvas:
    """Canvas that keeps the calls it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def text(self, x, y, text, *, size, weight, align) -> None:
        self.calls.append(("text", x, y, text))

    def line(self, x0, y0, x1, y1) -> None:
        self.calls.append(("line", x0, y0, x1, y1))

    def to_bytes(self) -> bytes:
        return b"recorded"


def _record(payment_method: str | None = "Credit Card") -> ReceiptRecord:
    items = (
        LineItem(entry_id="a", name="Dal Bhat", price=5.0, quantity=3),
        LineItem(entry_id="b", name="Masala Tea", price=15.0, quantity=1),
    )
    return ReceiptRecord(
        items=items,
        totals=Totals(subtotal=30.0, tax=2.4000000000000004, total=32.400000000000006),
        order_number="ORD-123456",
        created_at=datetime(2026, 10, 19, 14, 5, 9),
        payment_method=payment_method,
    )


def _texts(ops) -> list[TextOp]:
    return [op for op in ops if isinstance(op, TextOp)]


def _value_beside(ops, label: str) -> str:
    texts = _texts(ops)
    label_op = next(op for op in texts if op.text == label)
    return next(op.text for op in texts if op.y == label_op.y and op.x > label_op.x)


def test_format_money_rounds_to_two_places() -> None:
    assert format_money(32.400000000000006) == "$32.40"
    assert format_money(0) == "$0.00"


def test_total_line_matches_supplied_total() -> None:
    ops = layout_receipt(_record())

    assert _value_beside(ops, "Total:") == "$32.40"
    assert _value_beside(ops, "Subtotal:") == "$30.00"
    assert _value_beside(ops, "Tax:") == "$2.40"


def test_sections_render_in_fixed_vertical_order() -> None:
    texts = _texts(layout_receipt(_record()))
    ys = {op.text: op.y for op in texts}

    assert ys[BUSINESS_NAME] < ys["RECEIPT"] < ys["Date: 10/19/2026"] < ys["Item"]
    assert ys["Item"] < ys["Dal Bhat"] < ys["Masala Tea"] < ys["Subtotal:"] < ys["Total:"] < ys[RECEIPT_FOOTER]
    assert ys["Time: 02:05:09 PM"] == ys["Date: 10/19/2026"] + 5
    assert "Order #: ORD-123456" in ys


def test_item_rows_advance_by_fixed_step() -> None:
    texts = _texts(layout_receipt(_record()))
    first = next(op for op in texts if op.text == "Dal Bhat")
    second = next(op for op in texts if op.text == "Masala Tea")
    row = [op.text for op in texts if op.y == first.y]

    assert second.y - first.y == 8
    assert row == ["Dal Bhat", "3", "$5.00", "$15.00"]


def test_table_is_bracketed_by_rules() -> None:
    ops = layout_receipt(_record())
    lines = [op for op in ops if isinstance(op, LineOp)]

    assert len(lines) == 2
    assert all(op.y0 == op.y1 for op in lines)


def test_payment_method_is_optional() -> None:
    with_method = [op.text for op in _texts(layout_receipt(_record()))]
    without_method = [op.text for op in _texts(layout_receipt(_record(payment_method=None)))]

    assert "Payment Method: Credit Card" in with_method
    assert not any(text.startswith("Payment Method") for text in without_method)


def test_render_uses_supplied_canvas() -> None:
    canvas = RecordingCanvas()

    assert render_receipt(_record(), canvas) == b"recorded"
    assert any(call[0] == "text" and call[1] == 180 and call[3] == "$32.40" for call in canvas.calls)
    assert sum(1 for call in canvas.calls if call[0] == "line") == 2


def test_render_receipt_produces_pdf() -> None:
    data = render_receipt(_record())

    assert data.startswith(b"%PDF")


def test_save_receipt_writes_named_file(receipt_dir) -> None:
    record = _record()

    path = save_receipt(record)

    assert path == receipt_dir / "receipt-ORD-123456.pdf"
    assert path.name == receipt_filename(record)
    assert path.read_bytes().startswith(b"%PDF")


def test_save_receipt_propagates_filesystem_errors(tmp_path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(OSError):
        save_receipt(_record(), directory=blocker)
