"""Orders store — the list of placed orders and their status changes."""

from datetime import UTC, datetime

from ordering.domain import logger
from ordering.order.order import OrderEntry, OrderStatus, new_order_id
from shared.exceptions import ValidationError
from shared.repository import repository_for


def _repo():
    return repository_for(OrderEntry)


def add_order(order: OrderEntry) -> OrderEntry:
    return _repo().add(order)


def next_order_id(now: datetime | None = None) -> str:
    """``ORD-<ms>``, suffixed with ``-2``, ``-3`` ... while that id is taken."""
    base = new_order_id(now)
    candidate, suffix = base, 1
    while _repo().exists(candidate):
        suffix += 1
        candidate = f"{base}-{suffix}"
    return candidate


def get_order(order_id: str) -> OrderEntry:
    return _repo().get(order_id)


def find_order(order_id: str | None) -> OrderEntry | None:
    if not order_id:
        return None
    return _repo().find(order_id)


def list_orders() -> list[OrderEntry]:
    """All orders, newest first."""
    return sorted(_repo().all(), key=lambda order: order.created_at, reverse=True)


def mark_served(order_id: str) -> OrderEntry:
    order = get_order(order_id)
    order.mark_served()
    logger.info("order_served", order_id=order_id)
    return order


def update_status(order_id: str, status: str) -> OrderEntry:
    try:
        target = OrderStatus(status)
    except ValueError:
        raise ValidationError({"status": [f"Status `{status}` tidak dikenal"]}) from None

    order = get_order(order_id)
    previous = order.status
    if target.value != previous:
        order.transition_to(target)
    logger.info("order_status_updated", order_id=order_id, previous=previous, status=order.status)
    return order


def clear_orders() -> int:
    repo = _repo()
    count = len(repo)
    repo.reset()
    logger.info("orders_cleared", count=count)
    return count
