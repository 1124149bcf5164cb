"""Cashier board — the cards a cashier hands to walk-in customers.

The board always starts with a take-away tile and cards ``A-01``..``A-10``.
Staff can add more cards, remove unused ones and flip a card between
available and occupied; an occupied card remembers when it was first taken so
the board can list cards in the order they went out.
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import ClassVar

from pydantic import Field

from seating.domain import logger
from seating.slugs import (
    format_table_label,
    format_takeaway_label,
    format_takeaway_slug,
    is_cashier_card_slug,
    is_takeaway_slug,
    normalize_table_slug,
    parse_takeaway_index,
)
from shared.exceptions import ValidationError
from shared.model import DomainModel
from shared.repository import repository_for

TAKEAWAY_CARD = "takeaway"
BASE_SEAT_COUNT = 10
DEFAULT_SEAT_DESCRIPTION = (
    "Kasir gunakan kartu ini saat memesan untuk pelanggan; kartu menjadi penanda meja dan tidak perlu dipindai."
)
TAKEAWAY_DESCRIPTION = "Pesanan dibawa pulang tanpa nomor meja."

_CARD_CODE_PATTERN = re.compile(r"^A-(\d{2,})$")

# Order statuses that no longer hold a card or a take-away slot.
_CLOSED_STATUSES = ("served", "cancelled")


class CardStatus(Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"


BASE_CARD_SLUGS = (TAKEAWAY_CARD, *(f"A-{str(n).zfill(2)}" for n in range(1, BASE_SEAT_COUNT + 1)))


class CashierCard(DomainModel):
    slug: str
    label: str
    description: str = DEFAULT_SEAT_DESCRIPTION
    base: bool = False
    status: str = CardStatus.AVAILABLE.value
    occupied_since: datetime | None = None

    @property
    def is_takeaway(self) -> bool:
        return self.slug == TAKEAWAY_CARD


def _base_card(slug: str) -> CashierCard:
    if slug == TAKEAWAY_CARD:
        return CashierCard(slug=slug, label="Take Away", description=TAKEAWAY_DESCRIPTION, base=True)
    return CashierCard(slug=slug, label=slug, base=True)


class CashierBoard(DomainModel):
    identity_field: ClassVar[str] = "id"

    id: str = "default"
    cards: list[CashierCard] = Field(default_factory=lambda: [_base_card(slug) for slug in BASE_CARD_SLUGS])
    removed_base_cards: list[str] = Field(default_factory=list)

    def card(self, slug: str) -> CashierCard | None:
        return next((c for c in self.cards if c.slug == slug), None)

    def _require(self, slug: str) -> CashierCard:
        card = self.card(slug)
        if card is None:
            raise ValidationError({"slug": [f"Kartu {slug} tidak ditemukan."]})
        return card

    @property
    def seat_cards(self) -> list[CashierCard]:
        return [card for card in self.cards if not card.is_takeaway]

    # -------------------------------------------------------------------
    # Card configuration
    # -------------------------------------------------------------------
    def next_card_suggestion(self) -> str:
        numbers = [int(match.group(1)) for card in self.seat_cards if (match := _CARD_CODE_PATTERN.match(card.slug))]
        return f"A-{str(max(numbers, default=0) + 1).zfill(2)}"

    def add_card(self, code: str | None) -> CashierCard:
        normalized = (code or "").strip().upper()
        if not normalized:
            raise ValidationError({"slug": ["Masukkan kode kartu terlebih dahulu."]})
        if is_takeaway_slug(normalized):
            raise ValidationError({"slug": ["Kode ini sudah dipakai untuk opsi Take Away."]})
        if not _CARD_CODE_PATTERN.match(normalized):
            raise ValidationError({"slug": ["Gunakan format seperti A-11 dengan awalan A-."]})
        if self.card(normalized) is not None:
            raise ValidationError({"slug": ["Kode kartu sudah tersedia. Pilih kode lain."]})

        if normalized in BASE_CARD_SLUGS:
            card = _base_card(normalized)
            self.removed_base_cards = [slug for slug in self.removed_base_cards if slug != normalized]
        else:
            card = CashierCard(slug=normalized, label=normalized)
        self.cards = [*self.cards, card]
        return card

    def remove_card(self, slug: str) -> None:
        card = self._require(slug)
        if card.is_takeaway:
            raise ValidationError({"slug": ["Kartu Take Away tidak dapat dihapus."]})
        if card.status == CardStatus.OCCUPIED.value:
            raise ValidationError({"slug": ["Kartu tidak boleh dalam status sedang dipakai."]})
        self.cards = [c for c in self.cards if c.slug != slug]
        if card.base:
            self.removed_base_cards = [*self.removed_base_cards, slug]

    # -------------------------------------------------------------------
    # Card status
    # -------------------------------------------------------------------
    def set_status(self, slug: str, status: CardStatus, at: datetime | None = None) -> CashierCard:
        card = self._require(slug)
        if card.is_takeaway:
            return card
        card.status = status.value
        if status == CardStatus.OCCUPIED:
            if card.occupied_since is None:
                card.occupied_since = at or datetime.now(UTC)
        else:
            card.occupied_since = None
        return card

    def toggle_status(self, slug: str, at: datetime | None = None) -> CashierCard:
        card = self._require(slug)
        if card.status == CardStatus.AVAILABLE.value:
            return self.set_status(slug, CardStatus.OCCUPIED, at)
        return self.set_status(slug, CardStatus.AVAILABLE, at)

    def occupied_seat_slugs(self) -> list[str]:
        """Occupied cards in the order they were taken, then by code."""
        occupied = [card for card in self.seat_cards if card.status == CardStatus.OCCUPIED.value]
        latest = datetime.max.replace(tzinfo=UTC)
        occupied.sort(key=lambda card: (card.occupied_since or latest, card.slug))
        return [card.slug for card in occupied]

    def availability(self, active_takeaway_count: int = 0) -> dict:
        statuses = [
            (CardStatus.OCCUPIED.value if active_takeaway_count > 0 else CardStatus.AVAILABLE.value)
            if card.is_takeaway
            else card.status
            for card in self.cards
        ]
        available = statuses.count(CardStatus.AVAILABLE.value)
        return {"available": available, "occupied": len(statuses) - available, "total": len(statuses)}


# ---------------------------------------------------------------------------
# Active orders per slot
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SlotOrder:
    slug: str
    label: str
    order_id: str | None
    href: str | None


@dataclass(frozen=True)
class ActiveOrdersInfo:
    occupied_takeaway_indexes: list[int]
    occupied_labels: list[str]
    next_takeaway_slug: str
    takeaway_cards: list[SlotOrder]
    table_cards: list[SlotOrder]
    latest_by_card: dict

    @property
    def active_count(self) -> int:
        return len(self.occupied_takeaway_indexes)

    def to_dict(self) -> dict:
        return {
            "occupiedLabels": self.occupied_labels,
            "activeCount": self.active_count,
            "nextSlug": self.next_takeaway_slug,
            "takeawayCards": [_slot_dict(card) for card in self.takeaway_cards],
            "tableCards": [_slot_dict(card) for card in self.table_cards],
        }


def _slot_dict(slot: SlotOrder) -> dict:
    return {"slug": slot.slug, "label": slot.label, "orderId": slot.order_id, "href": slot.href}


def _status_href(order_id: str, slug: str) -> str:
    return f"/status?orderId={order_id}&cards={slug}"


def _is_newer(order, existing) -> bool:
    return existing is None or order.created_at > existing.created_at


def active_orders_info(orders, board: CashierBoard | None = None) -> ActiveOrdersInfo:
    """Which take-away slots and cards are held by open orders.

    ``orders`` are order entries (anything with ``id``, ``table_id``,
    ``status`` and ``created_at``).
    """
    board = board or get_board()
    latest_takeaway: dict[int, object] = {}
    latest_card: dict[str, object] = {}

    for order in orders:
        if order.status in _CLOSED_STATUSES:
            continue
        normalized = normalize_table_slug(order.table_id)
        if not normalized:
            continue
        if is_takeaway_slug(normalized):
            index = parse_takeaway_index(normalized)
            if _is_newer(order, latest_takeaway.get(index)):
                latest_takeaway[index] = order
        if is_takeaway_slug(normalized) or is_cashier_card_slug(normalized):
            if _is_newer(order, latest_card.get(normalized)):
                latest_card[normalized] = order

    occupied = sorted(latest_takeaway)
    next_index = 1
    while next_index in latest_takeaway:
        next_index += 1

    takeaway_cards = []
    for index in occupied:
        slug = format_takeaway_slug(index)
        order = latest_takeaway[index]
        takeaway_cards.append(
            SlotOrder(slug=slug, label=format_takeaway_label(slug), order_id=order.id, href=_status_href(order.id, slug))
        )

    table_cards = []
    for slug in board.occupied_seat_slugs():
        order = latest_card.get(slug)
        table_cards.append(
            SlotOrder(
                slug=slug,
                label=format_table_label(slug),
                order_id=order.id if order else None,
                href=_status_href(order.id, slug) if order else None,
            )
        )

    return ActiveOrdersInfo(
        occupied_takeaway_indexes=occupied,
        occupied_labels=[format_takeaway_label(format_takeaway_slug(index)) for index in occupied],
        next_takeaway_slug=format_takeaway_slug(next_index),
        takeaway_cards=takeaway_cards,
        table_cards=table_cards,
        latest_by_card=latest_card,
    )


# ---------------------------------------------------------------------------
# Board services
# ---------------------------------------------------------------------------
def get_board() -> CashierBoard:
    repo = repository_for(CashierBoard)
    board = repo.find("default")
    if board is None:
        board = repo.add(CashierBoard())
    return board


def add_card(code: str | None) -> CashierCard:
    card = get_board().add_card(code)
    logger.info("cashier_card_added", slug=card.slug)
    return card


def remove_card(slug: str) -> None:
    get_board().remove_card(slug)
    logger.info("cashier_card_removed", slug=slug)


def toggle_card(slug: str) -> CashierCard:
    card = get_board().toggle_status(slug)
    logger.info("cashier_card_toggled", slug=slug, status=card.status)
    return card

