"""Pydantic request/response schemas for the Seating API."""

from seating.cashier.board import CashierCard
from shared.api import CamelModel


class AddCardRequest(CamelModel):
    code: str | None = None

    model_config = {"json_schema_extra": {"examples": [{"code": "A-11"}]}}


class TableAccessResponse(CamelModel):
    requested_slug: str | None
    table_id: str | None
    active: bool
    label: str


class CashierBoardResponse(CamelModel):
    cards: list[CashierCard]
    availability: dict
    next_suggestion: str
    active_orders: dict
