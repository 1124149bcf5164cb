"""Demonstration orders for the admin order board's "sample data" button."""

from datetime import UTC, datetime, timedelta

from ordering.domain import logger
from ordering.order.order import CustomerInfo, OrderEntry, OrderItem, new_order_id
from ordering.order.status import add_order
from shared.money import format_currency

# (minutes ago, order fields)
_SAMPLES = (
    (
        15,
        {
            "table_id": "M-01",
            "customer_info": CustomerInfo(
                name="Budi Santoso",
                phone="0812-3456-7890",
                email="budi.santoso@email.com",
                notes="Alergi kacang, mohon diperhatikan",
            ),
            "subtotal": 73000,
            "tax": 7300,
            "total": 80300,
            "status": "preparing",
            "estimated_time": 15,
            "notes": "Extra hot untuk latte",
            "items": [
                OrderItem(
                    name="Pistachio Latte",
                    quantity=2,
                    unit_price=25000,
                    unit_price_label="Rp 25.000",
                    line_price_label="Rp 58.000",
                    category="Pistachio Series",
                    image="/images/pistachio-latte.jpg",
                    options=["Large (+Rp 5.000)", "Extra Hot", "Oat Milk (+Rp 4.000)"],
                ),
                OrderItem(
                    name="Matcha Cake",
                    quantity=1,
                    unit_price=15000,
                    unit_price_label="Rp 15.000",
                    line_price_label="Rp 15.000",
                    category="Matcha Club",
                    image="/images/matcha-cake.jpg",
                    options=["Tanpa gula tambahan"],
                ),
            ],
        },
    ),
    (
        5,
        {
            "table_id": "M-05",
            "customer_info": CustomerInfo(name="Sari Dewi", phone="0856-7890-1234", email="", notes=""),
            "subtotal": 72000,
            "tax": 7200,
            "total": 79200,
            "status": "pending",
            "estimated_time": 12,
            "notes": "",
            "items": [
                OrderItem(
                    name="Iced Pistachio Coffee",
                    quantity=1,
                    unit_price=28000,
                    unit_price_label="Rp 28.000",
                    line_price_label="Rp 28.000",
                    category="Pistachio Series",
                    image="/images/iced-pistachio.jpg",
                    options=["Regular Size", "Normal Ice", "Less Sugar"],
                ),
                OrderItem(
                    name="Matcha Latte",
                    quantity=2,
                    unit_price=22000,
                    unit_price_label="Rp 22.000",
                    line_price_label="Rp 44.000",
                    category="Matcha Club",
                    image="/images/matcha-latte.jpg",
                    options=["Hot", "Extra Foam"],
                ),
            ],
        },
    ),
    (
        2,
        {
            "table_id": None,
            "customer_info": CustomerInfo(name="", phone="0821-9876-5432", email="", notes="Tolong siapkan sedotan kertas"),
            "subtotal": 85000,
            "tax": 8500,
            "total": 93500,
            "status": "ready",
            "estimated_time": 10,
            "notes": "",
            "items": [
                OrderItem(
                    name="Pistachio Choco",
                    quantity=1,
                    unit_price=32000,
                    unit_price_label="Rp 32.000",
                    line_price_label="Rp 37.000",
                    category="Pistachio Series",
                    image="/images/pistachio-choco.jpg",
                    options=["Large (+Rp 5.000)", "Hot", "Whipped Cream", "Caramel Drizzle"],
                ),
                OrderItem(
                    name="Iced Matcha",
                    quantity=2,
                    unit_price=24000,
                    unit_price_label="Rp 24.000",
                    line_price_label="Rp 48.000",
                    category="Matcha Club",
                    image="/images/iced-matcha.jpg",
                    options=["Less Sugar", "Extra Ice", "Oat Milk (+Rp 0)"],
                ),
            ],
        },
    ),
)


def seed_sample_orders(now: datetime | None = None) -> list[OrderEntry]:
    now = now or datetime.now(UTC)
    base_id = new_order_id(now)
    orders = []
    for position, (minutes_ago, fields) in enumerate(_SAMPLES, start=1):
        order = OrderEntry(
            id=f"{base_id}-{position}",
            created_at=now - timedelta(minutes=minutes_ago),
            updated_at=now,
            subtotal_label=format_currency(fields["subtotal"]),
            tax_label=format_currency(fields["tax"]),
            total_label=format_currency(fields["total"]),
            payment_method="qris",
            payment_status="paid",
            **fields,
        )
        orders.append(add_order(order.model_copy(deep=True)))
    logger.info("sample_orders_seeded", count=len(orders))
    return orders
