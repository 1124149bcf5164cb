"""Order aggregate — a placed order and its kitchen lifecycle.

State Machine:
    PENDING → PREPARING → READY → SERVED
    PENDING / PREPARING → CANCELLED
    PENDING / PREPARING / READY → SERVED   (mark served)
"""

import time
from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar

from pydantic import ConfigDict, Field, computed_field

from shared.exceptions import ValidationError
from shared.model import DomainModel


class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"
    CANCELLED = "cancelled"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.PREPARING, OrderStatus.SERVED, OrderStatus.CANCELLED},
    OrderStatus.PREPARING: {OrderStatus.READY, OrderStatus.SERVED, OrderStatus.CANCELLED},
    OrderStatus.READY: {OrderStatus.SERVED},
    OrderStatus.SERVED: set(),
    OrderStatus.CANCELLED: set(),
}

STATUS_LABELS = {
    OrderStatus.PENDING.value: "Pesanan Masuk",
    OrderStatus.PREPARING.value: "Sedang Dibuat",
    OrderStatus.READY.value: "Siap Diambil",
    OrderStatus.SERVED.value: "Sudah Diantar",
    OrderStatus.CANCELLED.value: "Dibatalkan",
}


class PaymentMethod(Enum):
    QRIS = "qris"
    CASH = "cash"
    CARD = "card"


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, status)


def new_order_id(now: datetime | None = None) -> str:
    millis = int(now.timestamp() * 1000) if now else time.time_ns() // 1_000_000
    return f"ORD-{millis}"


class CustomerInfo(DomainModel):
    name: str | None = None
    phone: str | None = None
    email: str | None = None
    notes: str | None = None


class OrderItem(DomainModel):
    """One ordered line. Backend clients may post partial items; unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    name: str = ""
    quantity: int | None = None
    product_id: str | None = None
    unit_price: float | None = None
    unit_price_label: str | None = None
    line_price_label: str = ""
    category: str | None = None
    image: str | None = None
    options: list[str] = Field(default_factory=list)


class OrderEntry(DomainModel):
    identity_field: ClassVar[str] = "id"

    id: str
    created_at: datetime
    updated_at: datetime | None = None
    table_id: str | None = None
    customer_info: CustomerInfo | None = None
    subtotal: float | None = None
    service_charge: float | None = None
    tax: float | None = None
    total: float | None = None
    subtotal_label: str | None = None
    service_charge_label: str | None = None
    tax_label: str | None = None
    total_label: str | None = None
    status: str = OrderStatus.PENDING.value
    payment_method: str | None = None
    payment_status: str | None = None
    estimated_time: int | None = None
    notes: str | None = None
    items: list[OrderItem] = Field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return self.status not in (OrderStatus.SERVED.value, OrderStatus.CANCELLED.value)

    @computed_field
    @property
    def status_label(self) -> str:
        return status_label(self.status)

    # -------------------------------------------------------------------
    # State machine
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target: OrderStatus) -> None:
        current = OrderStatus(self.status)
        if target not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target.value}"]})

    def transition_to(self, target: OrderStatus) -> None:
        self._assert_can_transition(target)
        self.status = target.value
        self.updated_at = datetime.now(UTC)

    def start_preparing(self) -> None:
        self.transition_to(OrderStatus.PREPARING)

    def mark_ready(self) -> None:
        self.transition_to(OrderStatus.READY)

    def mark_served(self) -> None:
        self.transition_to(OrderStatus.SERVED)

    def cancel(self) -> None:
        self.transition_to(OrderStatus.CANCELLED)
