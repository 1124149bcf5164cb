"""Order board projection — what the admin order list and the status banner show."""

from datetime import UTC, datetime

from ordering.order.order import OrderEntry, OrderStatus, status_label

__all__ = [
    "active_orders",
    "filter_orders",
    "latest_active_order",
    "order_stats",
    "status_label",
    "time_since_label",
]


def _newest_first(orders) -> list[OrderEntry]:
    return sorted(orders, key=lambda order: order.created_at, reverse=True)


def _matches(order: OrderEntry, term: str) -> bool:
    customer = order.customer_info
    return (
        term in order.id.lower()
        or term in (order.table_id or "").lower()
        or (customer is not None and term in (customer.name or "").lower())
        or (customer is not None and term in (customer.phone or ""))
        or any(term in item.name.lower() for item in order.items)
    )


def filter_orders(orders, status: str = "all", term: str = "") -> list[OrderEntry]:
    """Orders with ``status`` (or any, for ``all``) matching ``term``, newest first.

    The search covers the order id, table, customer name and phone, and item
    names; it is case-insensitive except for the phone number.
    """
    filtered = list(orders)
    if status and status != "all":
        filtered = [order for order in filtered if order.status == status]

    term = (term or "").strip().lower()
    if term:
        filtered = [order for order in filtered if _matches(order, term)]

    return _newest_first(filtered)


def order_stats(orders) -> dict:
    stats = {"total": 0, **{status.value: 0 for status in OrderStatus}, "totalRevenue": 0.0}
    for order in orders:
        stats["total"] += 1
        if order.status in stats:
            stats[order.status] += 1
        if order.status == OrderStatus.SERVED.value:
            stats["totalRevenue"] += order.total or 0
    return stats


def active_orders(orders) -> list[OrderEntry]:
    return _newest_first(order for order in orders if order.is_active)


def latest_active_order(orders) -> OrderEntry | None:
    return next(iter(active_orders(orders)), None)


def time_since_label(created_at: datetime, now: datetime | None = None) -> str:
    now = now or datetime.now(UTC)
    minutes = int((now - created_at).total_seconds() // 60)
    if minutes < 1:
        return "Baru saja"
    if minutes < 60:
        return f"{minutes} menit lalu"
    if minutes < 1440:
        return f"{minutes // 60} jam lalu"
    return f"{minutes // 1440} hari lalu"
