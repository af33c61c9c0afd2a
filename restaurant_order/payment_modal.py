"""Payment modal screen: choose a method, pay, then download or start over."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from restaurant_order.checkout import CheckoutFlow, PaymentHandle
from restaurant_order.constant import PAYMENT_METHOD_LABELS
from restaurant_order.receipt import format_money, save_receipt

_METHOD_KEYS: dict[str, str] = {"1": "card", "2": "wallet", "3": "phone"}


class PaymentModal(ModalScreen[bool]):
    """Centered modal driving the checkout flow; dismisses True after a new order starts."""

    CSS = """
    PaymentModal {
        align: center middle;
        background: $background 60%;
    }

    #payment-dialog {
        width: 60;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #payment-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #payment-body {
        margin-bottom: 1;
        color: white;
    }

    #payment-status {
        color: #ffd28a;
    }

    #payment-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    def __init__(self, checkout: CheckoutFlow) -> None:
        super().__init__()
        self.checkout = checkout
        self.status = ""

    def compose(self) -> ComposeResult:
        with Container(id="payment-dialog"):
            yield Static("Complete Your Payment", id="payment-title")
            yield Static(id="payment-body")
            yield Static(id="payment-status")
            yield Static(id="payment-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        key = event.key
        if self.checkout.is_processing:
            # Nothing is actionable until the simulated payment settles.
            event.stop()
            return

        if self.checkout.is_paid:
            if key == "d":
                self._download_receipt()
            elif key == "n":
                self._start_new_order()
                event.stop()
                return
            elif key in {"escape", "q"}:
                self.dismiss(False)
            event.stop()
            return

        if key in _METHOD_KEYS:
            self.checkout.select_payment_method(_METHOD_KEYS[key])
        elif key == "tab":
            methods = list(PAYMENT_METHOD_LABELS)
            idx = methods.index(self.checkout.payment_method)
            self.checkout.select_payment_method(methods[(idx + 1) % len(methods)])
        elif key == "enter":
            self._pay()
        elif key in {"escape", "q"}:
            self.dismiss(False)
            event.stop()
            return
        event.stop()
        self._refresh_content()

    def _pay(self) -> None:
        handle = self.checkout.begin_payment()
        if handle is None:
            self.status = "Nothing to pay for"
            return
        self.status = ""
        self.run_worker(self._await_payment(handle), exclusive=True)

    async def _await_payment(self, handle: PaymentHandle) -> None:
        await handle.wait()
        self._refresh_content()

    def _download_receipt(self) -> None:
        record = self.checkout.receipt_record
        if record is None:
            return
        try:
            path = save_receipt(record)
        except Exception as exc:
            self.status = f"Receipt export failed: {exc}"
        else:
            self.status = f"Receipt saved to {path}"
        self._refresh_content()

    def _start_new_order(self) -> None:
        if self.checkout.start_new_order():
            self.dismiss(True)

    def _refresh_content(self) -> None:
        body = self.query_one("#payment-body", Static)
        status = self.query_one("#payment-status", Static)
        help_text = self.query_one("#payment-help", Static)

        content = Text(style="white")
        if self.checkout.is_paid:
            record = self.checkout.receipt_record
            content.append("Payment Successful!\n", style="bold #5fbf72")
            if record is not None:
                content.append(f"Order #: {record.order_number}\n")
                content.append(f"Paid with {record.payment_method}\n")
                content.append(f"Total {format_money(record.totals.total)}", style="bold")
            help_text.update("D download receipt, N start new order, Esc close")
        else:
            totals = self.checkout.ledger.totals()
            content.append(f"Amount due {format_money(totals.total)}\n\n", style="bold")
            for idx, (method, label) in enumerate(PAYMENT_METHOD_LABELS.items()):
                if idx > 0:
                    content.append("\n")
                selected = method == self.checkout.payment_method
                pointer = "➤ " if selected else "  "
                content.append(f"{pointer}{idx + 1}. {label}", style="bold white" if selected else "white")
            if self.checkout.is_processing:
                help_text.update("Processing payment...")
            else:
                help_text.update("1-3/Tab choose method, Enter pay, Esc/q cancel")

        body.update(content)
        status.update(self.status)
