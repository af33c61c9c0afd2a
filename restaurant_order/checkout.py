"""Simulated payment flow: IDLE -> PROCESSING -> PAID, reset back to IDLE."""

from __future__ import annotations

import asyncio
import random
from datetime import datetime
from enum import Enum
from typing import Callable

from restaurant_order.config import PAYMENT_DELAY_SECONDS
from restaurant_order.constant import PAYMENT_METHOD_LABELS
from restaurant_order.ledger import OrderLedger
from restaurant_order.log import get_logger
from restaurant_order.models import ReceiptRecord

_log = get_logger("checkout")

DEFAULT_PAYMENT_METHOD = "card"


class CheckoutState(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    PAID = "paid"


def generate_order_number() -> str:
    """Return an order number like ORD-123456."""
    return f"ORD-{random.randint(100000, 999999)}"


class PaymentHandle:
    """Handle on a pending simulated payment."""

    def __init__(self, task: asyncio.Task[None]) -> None:
        self._task = task

    def cancel(self) -> bool:
        return self._task.cancel()

    def done(self) -> bool:
        return self._task.done()

    def cancelled(self) -> bool:
        return self._task.cancelled()

    async def wait(self) -> None:
        """Wait for the payment to settle; a cancelled payment returns quietly."""
        try:
            await self._task
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise


class CheckoutFlow:
    """
    Payment simulation over an injected ledger.

    The simulated payment always succeeds after `delay_seconds`. The returned
    PaymentHandle can cancel the pending completion, which drops the flow back
    to IDLE; the UI never does this, it is the hook for a real gateway.
    """

    def __init__(
        self,
        ledger: OrderLedger,
        *,
        delay_seconds: float = PAYMENT_DELAY_SECONDS,
        on_paid: Callable[[ReceiptRecord], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.ledger = ledger
        self.delay_seconds = delay_seconds
        self.on_paid = on_paid
        self._clock = clock
        self.state = CheckoutState.IDLE
        self.payment_method = DEFAULT_PAYMENT_METHOD
        self.order_number = generate_order_number()
        self._receipt: ReceiptRecord | None = None
        self._handle: PaymentHandle | None = None

    @property
    def is_processing(self) -> bool:
        return self.state is CheckoutState.PROCESSING

    @property
    def is_paid(self) -> bool:
        return self.state is CheckoutState.PAID

    @property
    def payment_label(self) -> str:
        return PAYMENT_METHOD_LABELS[self.payment_method]

    @property
    def receipt_record(self) -> ReceiptRecord | None:
        """Snapshot of the paid order; None until the payment completes."""
        if self.state is not CheckoutState.PAID:
            return None
        return self._receipt

    def select_payment_method(self, method: str) -> bool:
        if method not in PAYMENT_METHOD_LABELS:
            raise ValueError(f"Unknown payment method: {method!r}")
        if self.state is not CheckoutState.IDLE:
            return False
        self.payment_method = method
        _log.debug("checkout_method_selected", method=method)
        return True

    def begin_payment(self) -> PaymentHandle | None:
        """Start the simulated payment; must be called with a running event loop."""
        if self.state is not CheckoutState.IDLE:
            _log.debug("checkout_begin_blocked", reason="not_idle", state=self.state.value)
            return None
        if self.ledger.is_empty:
            _log.debug("checkout_begin_blocked", reason="empty_ledger")
            return None

        self.state = CheckoutState.PROCESSING
        task = asyncio.get_running_loop().create_task(self._complete_after_delay())
        task.add_done_callback(self._settle_cancelled)
        self._handle = PaymentHandle(task)
        _log.info(
            "checkout_processing",
            order_number=self.order_number,
            method=self.payment_method,
            delay_seconds=self.delay_seconds,
        )
        return self._handle

    async def _complete_after_delay(self) -> None:
        await asyncio.sleep(self.delay_seconds)
        self._complete()

    def _settle_cancelled(self, task: asyncio.Task[None]) -> None:
        if not task.cancelled() or self.state is not CheckoutState.PROCESSING:
            return
        self.state = CheckoutState.IDLE
        self._handle = None
        _log.info("checkout_cancelled", order_number=self.order_number)

    def _complete(self) -> None:
        self._receipt = ReceiptRecord(
            items=self.ledger.items,
            totals=self.ledger.totals(),
            order_number=self.order_number,
            created_at=self._clock(),
            payment_method=self.payment_label,
        )
        self.state = CheckoutState.PAID
        self._handle = None
        _log.info("checkout_paid", order_number=self.order_number, total=self._receipt.totals.total)
        if self.on_paid is not None:
            self.on_paid(self._receipt)

    def start_new_order(self) -> bool:
        """Clear the ledger and reset the flow; only valid once paid."""
        if self.state is not CheckoutState.PAID:
            return False
        self.ledger.clear()
        self.state = CheckoutState.IDLE
        self.payment_method = DEFAULT_PAYMENT_METHOD
        self.order_number = generate_order_number()
        self._receipt = None
        _log.info("checkout_new_order", order_number=self.order_number)
        return True
