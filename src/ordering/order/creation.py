"""Order creation — turn a priced cart into an order entry."""

from datetime import UTC, datetime

import pydantic

from menu.product.catalog import category_title
from menu.product.options import CartOptionSelection
from ordering.cart.pricing import CartSummary, DerivedCartLine
from ordering.domain import logger
from ordering.order.order import (
    CustomerInfo,
    OrderEntry,
    OrderItem,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
)
from ordering.order.status import add_order, next_order_id
from shared.exceptions import ValidationError
from shared.model import as_validation_error
from shared.money import format_price_delta


def option_label(option: CartOptionSelection) -> str:
    """``Boba (+Rp 8.000)`` for priced options, the bare label otherwise."""
    if option.price_delta:
        return f"{option.label} ({format_price_delta(option.price_delta)})"
    return option.label


def order_item_from_line(line: DerivedCartLine) -> OrderItem:
    return OrderItem(
        name=line.product.name,
        quantity=line.quantity,
        product_id=line.product_id,
        unit_price=line.unit_price,
        unit_price_label=line.unit_price_label,
        line_price_label=line.line_total_label,
        category=category_title(line.category),
        image=line.product.image,
        options=[option_label(option) for option in line.options],
    )


def place_order(
    lines: list[DerivedCartLine],
    summary: CartSummary,
    table_id: str | None = None,
    customer_info: CustomerInfo | None = None,
    payment_method: PaymentMethod = PaymentMethod.QRIS,
    payment_status: PaymentStatus = PaymentStatus.PAID,
    notes: str | None = None,
    now: datetime | None = None,
) -> OrderEntry:
    """Record a new ``pending`` order for the given cart lines."""
    if not lines:
        raise ValidationError({"items": ["Keranjang masih kosong"]})

    now = now or datetime.now(UTC)
    order = OrderEntry(
        id=next_order_id(now),
        created_at=now,
        updated_at=now,
        table_id=table_id,
        customer_info=customer_info,
        subtotal=summary.subtotal,
        service_charge=summary.service_charge,
        tax=summary.tax,
        total=summary.total,
        subtotal_label=summary.subtotal_label,
        service_charge_label=summary.service_charge_label,
        tax_label=summary.tax_label,
        total_label=summary.total_label,
        status=OrderStatus.PENDING.value,
        payment_method=payment_method.value,
        payment_status=payment_status.value,
        notes=notes,
        items=[order_item_from_line(line) for line in lines],
    )
    add_order(order)
    logger.info(
        "order_placed",
        order_id=order.id,
        table_id=table_id,
        total=order.total,
        items=len(order.items),
        payment_method=order.payment_method,
    )
    return order


def create_order(id=None, table_id=None, items=None, total=None, **details) -> OrderEntry:
    """Store an order submitted as-is by another client (backend ``POST``)."""
    if not id:
        raise ValidationError({"id": ["id wajib diisi"]})
    try:
        order = OrderEntry(
            id=str(id),
            created_at=datetime.now(UTC),
            table_id=table_id,
            items=items or [],
            total=total,
            **{field: value for field, value in details.items() if field in OrderEntry.model_fields and field != "created_at"},
        )
    except pydantic.ValidationError as exc:
        raise as_validation_error(exc) from exc
    add_order(order)
    logger.info("order_created", order_id=order.id, table_id=table_id, total=total)
    return order
