"""Table management — backend CRUD plus the admin's numbered tables."""

from dataclasses import dataclass

import pydantic

from seating.domain import logger
from seating.slugs import is_cashier_card_slug, is_takeaway_slug
from seating.table.qr import qr_data_url
from seating.table.table import Table
from shared.config import get_settings
from shared.exceptions import ObjectNotFoundError
from shared.model import as_validation_error
from shared.repository import repository_for

DEFAULT_TABLE_NUMBERS = (1, 2, 3)


def _repo():
    return repository_for(Table)


def list_tables() -> list[Table]:
    return sorted(_repo().all(), key=lambda table: (table.number is None, table.number or 0, table.slug))


def get_table(slug: str) -> Table:
    table = _repo().find(slug)
    if table is None:
        raise ObjectNotFoundError("Meja tidak ditemukan")
    return table


def create_table(slug=None, name=None, active=True, **details) -> Table:
    table = Table.create(slug=slug, name=name, active=active, **details)
    _repo().add(table)
    logger.info("table_created", slug=table.slug, active=table.active)
    return table


def update_table(slug: str, changes: dict) -> Table:
    table = get_table(slug)
    try:
        table.merge(changes)
    except pydantic.ValidationError as exc:
        raise as_validation_error(exc) from exc
    logger.info("table_updated", slug=slug, fields=sorted(changes))
    return table


def delete_table(slug: str) -> None:
    if _repo().remove(slug):
        logger.info("table_deleted", slug=slug)


def toggle_table(slug: str) -> Table:
    table = get_table(slug)
    table.toggle()
    logger.info("table_toggled", slug=slug, active=table.active)
    return table


def next_table_number() -> int:
    return max((table.number or 0 for table in _repo().all()), default=0) + 1


def add_next_table(origin: str | None = None) -> Table:
    origin = origin or get_settings().public_origin
    table = Table.numbered(next_table_number(), origin, qr_renderer=qr_data_url)
    _repo().add(table)
    logger.info("table_added", slug=table.slug, url=table.url)
    return table


def bootstrap_tables(origin: str | None = None) -> list[Table]:
    """Seed the default tables when none exist yet."""
    if len(_repo()) == 0:
        origin = origin or get_settings().public_origin
        for number in DEFAULT_TABLE_NUMBERS:
            _repo().add(Table.numbered(number, origin, qr_renderer=qr_data_url))
        logger.info("tables_bootstrapped", count=len(DEFAULT_TABLE_NUMBERS))
    return list_tables()


# ---------------------------------------------------------------------------
# Access check for customer carts
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TableAccess:
    requested_slug: str | None
    table_id: str | None
    active: bool


def check_table_access(slug: str | None) -> TableAccess:
    """Decide which table a customer cart may be attached to.

    Without a slug the cart has no table and may order. A slug that names an
    unknown or deactivated table yields no usable table and blocks ordering.
    Before any table has been configured every slug is accepted, and cashier
    cards and take-away slots are always accepted.
    """
    if not slug or not slug.strip():
        return TableAccess(requested_slug=None, table_id=None, active=True)

    if is_cashier_card_slug(slug) or is_takeaway_slug(slug) or len(_repo()) == 0:
        return TableAccess(requested_slug=slug, table_id=slug, active=True)

    table = _repo().find(slug)
    if table is None or not table.active:
        return TableAccess(requested_slug=slug, table_id=None, active=False)
    return TableAccess(requested_slug=slug, table_id=slug, active=True)
