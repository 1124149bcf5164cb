"""Shopping cart aggregate.

A cart is a list of lines. Two lines are the same line when they are for the
same product with the same set of options, regardless of the order the
options were picked in; adding such a line again only raises the quantity.
Lines are addressed by their position in the cart.
"""

import json
from datetime import UTC, datetime
from typing import ClassVar
from uuid import uuid4

from pydantic import Field

from menu.product.options import CartOptionSelection
from shared.exceptions import ValidationError
from shared.model import DomainModel


def _normalized_options(options: list[CartOptionSelection]) -> list[tuple[str, str, int]]:
    return sorted((option.group, option.label, option.price_delta or 0) for option in options)


def line_identity(product_id: str, options: list[CartOptionSelection]) -> str:
    """Merge key for a cart line: product id plus its options in canonical order."""
    return json.dumps([product_id, _normalized_options(options)], ensure_ascii=False)


def same_options(left: list[CartOptionSelection], right: list[CartOptionSelection]) -> bool:
    return _normalized_options(left) == _normalized_options(right)


class CartItem(DomainModel):
    product_id: str
    quantity: int = Field(default=1, ge=1)
    options: list[CartOptionSelection] = Field(default_factory=list)
    notes: str | None = None

    @property
    def identity(self) -> str:
        return line_identity(self.product_id, self.options)


class Cart(DomainModel):
    identity_field: ClassVar[str] = "id"

    id: str = Field(default_factory=lambda: uuid4().hex)
    items: list[CartItem] = Field(default_factory=list)
    table_id: str | None = None
    table_active: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, table_id=None, table_active=True, items=None):
        now = datetime.now(UTC)
        return cls(
            table_id=table_id,
            table_active=table_active,
            items=list(items or []),
            created_at=now,
            updated_at=now,
        )

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise ValidationError({"index": [f"Item ke-{index} tidak ada di keranjang"]})

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, item: CartItem) -> int:
        """Add a line, merging into an identical one. Returns the line's index."""
        identity = item.identity
        existing = next((i for i, line in enumerate(self.items) if line.identity == identity), None)

        if existing is None:
            self.items = [*self.items, item.model_copy(deep=True)]
            index = len(self.items) - 1
        else:
            line = self.items[existing]
            line.quantity += item.quantity
            if item.notes and item.notes.strip():
                line.notes = item.notes
            index = existing

        self._touch()
        return index

    def update_quantity(self, index: int, quantity: int) -> None:
        self._check_index(index)
        self.items[index].quantity = max(1, int(quantity))
        self._touch()

    def replace_item(self, index: int, item: CartItem) -> None:
        self._check_index(index)
        items = list(self.items)
        items[index] = item.model_copy(deep=True)
        self.items = items
        self._touch()

    def insert_item_after(self, index: int, item: CartItem) -> int:
        """Insert right after ``index`` (clamped to the end). Returns the new index."""
        target = min(len(self.items), max(0, index + 1))
        items = list(self.items)
        items.insert(target, item.model_copy(deep=True))
        self.items = items
        self._touch()
        return target

    def remove_item(self, index: int) -> None:
        self._check_index(index)
        self.items = [line for position, line in enumerate(self.items) if position != index]
        self._touch()

    def clear(self) -> None:
        self.items = []
        self._touch()

    def edit_item(
        self,
        index: int,
        item: CartItem,
        original_quantity: int | None = None,
        original_options: list[CartOptionSelection] | None = None,
    ) -> None:
        """Apply an edit made on the product detail screen.

        Lowering the quantity while changing the options splits the line: the
        original line keeps the remainder with its old options and the edited
        item is inserted right after it.
        """
        self._check_index(index)

        if original_quantity is not None and original_options is not None and item.quantity < original_quantity:
            if not same_options(original_options, item.options):
                remaining = original_quantity - item.quantity
                if remaining > 0:
                    current = self.items[index]
                    self.replace_item(
                        index,
                        CartItem(
                            product_id=item.product_id,
                            quantity=remaining,
                            options=[option.model_copy() for option in original_options],
                            notes=current.notes,
                        ),
                    )
                    self.insert_item_after(index, item)
                    return

        self.replace_item(index, item)

    # -------------------------------------------------------------------
    # Table
    # -------------------------------------------------------------------
    def assign_table(self, table_id: str | None, active: bool = True) -> None:
        self.table_id = table_id
        self.table_active = active
        self._touch()

    @property
    def is_empty(self) -> bool:
        return not self.items
