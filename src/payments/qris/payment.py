"""QRIS payment session aggregate and the checkout services around it.

State Machine:
    PENDING → PAID
    PENDING → EXPIRED   (countdown ran out)
    PENDING → FAILED    (gateway declined)
"""

import re
from datetime import UTC, datetime, timedelta
from enum import Enum
from typing import ClassVar
from uuid import uuid4

from pydantic import Field, computed_field

from ordering.cart.management import clear_cart, get_cart_view
from ordering.cart.pricing import CartSummary, DerivedCartLine
from ordering.order.creation import place_order
from ordering.order.order import CustomerInfo, PaymentMethod
from ordering.order.order import PaymentStatus as OrderPaymentStatus
from payments.domain import logger
from payments.gateway import get_gateway
from seating.table.qr import qr_data_url
from shared.config import get_settings
from shared.exceptions import ValidationError
from shared.model import DomainModel
from shared.repository import repository_for

EMPTY_CART_MESSAGE = "Keranjang masih kosong"
INACTIVE_TABLE_MESSAGE = "QR meja sementara tidak aktif. Silakan hubungi kasir atau pindah ke meja lain."
EXPIRED_MESSAGE = "Waktu pembayaran telah habis. Silakan ulangi pembayaran."
CART_CHANGED_MESSAGE = "Keranjang berubah setelah QRIS dibuat. Silakan ulangi pembayaran."


class QrisStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    EXPIRED = "expired"
    FAILED = "failed"


_VALID_TRANSITIONS = {
    QrisStatus.PENDING: {QrisStatus.PAID, QrisStatus.EXPIRED, QrisStatus.FAILED},
    QrisStatus.PAID: set(),
    QrisStatus.EXPIRED: set(),
    QrisStatus.FAILED: set(),
}


def qris_reference(total_label: str) -> str:
    """``SPM-`` plus the last six digits of the total, zero-padded."""
    digits = re.sub(r"\D", "", total_label or "")
    return f"SPM-{digits[-6:].rjust(6, '0')}"


def countdown_label(remaining_seconds) -> str:
    remaining = max(0, int(remaining_seconds))
    minutes, seconds = divmod(remaining, 60)
    return f"{minutes:02d}:{seconds:02d}"


class QrisPayment(DomainModel):
    identity_field: ClassVar[str] = "id"

    id: str = Field(default_factory=lambda: uuid4().hex)
    cart_id: str
    amount: float
    amount_label: str
    reference: str
    qr_payload: str
    gateway_transaction_id: str | None = None
    status: str = QrisStatus.PENDING.value
    customer_info: CustomerInfo | None = None
    failure_reason: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    expires_at: datetime
    order_id: str | None = None
    table_id: str | None = None
    lines: list[DerivedCartLine] = Field(default_factory=list, exclude=True)
    summary: CartSummary | None = Field(default=None, exclude=True)

    @computed_field
    @property
    def qr_image(self) -> str:
        return qr_data_url(self.qr_payload)

    def remaining_seconds(self, now: datetime | None = None) -> int:
        now = now or datetime.now(UTC)
        return max(0, int((self.expires_at - now).total_seconds()))

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.remaining_seconds(now) <= 0

    def _transition_to(self, target: QrisStatus) -> None:
        current = QrisStatus(self.status)
        if target not in _VALID_TRANSITIONS[current]:
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})
        self.status = target.value

    def mark_paid(self, order_id: str) -> None:
        self._transition_to(QrisStatus.PAID)
        self.order_id = order_id

    def mark_expired(self) -> None:
        self._transition_to(QrisStatus.EXPIRED)

    def mark_failed(self, reason: str | None) -> None:
        self._transition_to(QrisStatus.FAILED)
        self.failure_reason = reason

    def to_view(self, now: datetime | None = None) -> dict:
        data = self.to_dict()
        remaining = self.remaining_seconds(now) if self.status == QrisStatus.PENDING.value else 0
        data["remainingSeconds"] = remaining
        data["countdownLabel"] = countdown_label(remaining)
        return data


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------
def _repo():
    return repository_for(QrisPayment)


def get_payment(payment_id: str) -> QrisPayment:
    payment = _repo().get(payment_id)
    expire(payment)
    return payment


def start_qris_payment(cart_id: str, customer_info: CustomerInfo | None = None) -> QrisPayment:
    view = get_cart_view(cart_id)
    if not view.lines:
        raise ValidationError({"cart": [EMPTY_CART_MESSAGE]})
    if not view.cart.table_active:
        raise ValidationError({"table": [INACTIVE_TABLE_MESSAGE]})

    now = datetime.now(UTC)
    expires_at = now + timedelta(seconds=get_settings().qris_expiry_seconds)
    reference = qris_reference(view.summary.total_label)
    result = get_gateway().create_qr(reference, view.summary.total, expires_at)
    if not result.success:
        raise ValidationError({"payment": [result.failure_reason or "QRIS tidak dapat dibuat"]})

    payment = QrisPayment(
        cart_id=cart_id,
        amount=view.summary.total,
        amount_label=view.summary.total_label,
        reference=reference,
        qr_payload=result.qr_payload,
        gateway_transaction_id=result.gateway_transaction_id,
        customer_info=customer_info,
        created_at=now,
        expires_at=expires_at,
        table_id=view.cart.table_id,
        lines=view.lines,
        summary=view.summary,
    )
    _repo().add(payment)
    logger.info("qris_payment_started", payment_id=payment.id, cart_id=cart_id, amount=payment.amount, reference=reference)
    return payment


def expire(payment: QrisPayment, now: datetime | None = None) -> bool:
    """Close a pending session whose countdown has run out."""
    if payment.status != QrisStatus.PENDING.value or not payment.is_expired(now):
        return False
    payment.mark_expired()
    logger.info("qris_payment_expired", payment_id=payment.id, cart_id=payment.cart_id)
    return True


def confirm_qris_payment(payment_id: str) -> str:
    """Settle the payment, place the order and empty the cart. Returns the order id."""
    payment = get_payment(payment_id)
    if payment.status == QrisStatus.PAID.value:
        return payment.order_id
    if payment.status == QrisStatus.EXPIRED.value:
        raise ValidationError({"payment": [EXPIRED_MESSAGE]})
    if payment.status == QrisStatus.FAILED.value:
        raise ValidationError({"payment": [payment.failure_reason or "Pembayaran gagal"]})

    view = get_cart_view(payment.cart_id)
    if not view.lines:
        raise ValidationError({"cart": [EMPTY_CART_MESSAGE]})
    if view.summary.total != payment.amount:
        payment.mark_failed(CART_CHANGED_MESSAGE)
        logger.warning(
            "qris_payment_cart_changed", payment_id=payment.id, amount=payment.amount, cart_total=view.summary.total
        )
        raise ValidationError({"cart": [CART_CHANGED_MESSAGE]})

    result = get_gateway().confirm_payment(payment.gateway_transaction_id, payment.amount)
    if not result.success:
        payment.mark_failed(result.failure_reason)
        logger.warning("qris_payment_failed", payment_id=payment.id, reason=result.failure_reason)
        raise ValidationError({"payment": [result.failure_reason or "Pembayaran gagal"]})

    order = place_order(
        payment.lines,
        payment.summary,
        table_id=payment.table_id,
        customer_info=payment.customer_info,
        payment_method=PaymentMethod.QRIS,
        payment_status=OrderPaymentStatus.PAID,
    )
    payment.mark_paid(order.id)
    clear_cart(payment.cart_id)
    logger.info("qris_payment_confirmed", payment_id=payment.id, order_id=order.id, amount=payment.amount)
    return order.id
