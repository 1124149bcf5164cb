"""Pydantic request/response schemas for the Ordering API.

These are external contracts, separate from the cart and order aggregates.
"""

from pydantic import Field

from menu.product.options import CartOptionSelection
from ordering.cart.cart import CartItem
from shared.api import CamelModel


# ---------------------------------------------------------------------------
# Cart Request Schemas
# ---------------------------------------------------------------------------
class CreateCartRequest(CamelModel):
    table_slug: str | None = None

    model_config = {"json_schema_extra": {"examples": [{"tableSlug": "M-01"}]}}


class CartItemRequest(CamelModel):
    product_id: str
    quantity: int = Field(ge=1, default=1)
    options: list[CartOptionSelection] = Field(default_factory=list)
    notes: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "productId": "pistachio-latte",
                    "quantity": 2,
                    "options": [
                        {"group": "Ukuran", "label": "Large", "priceDelta": 5000},
                        {"group": "Tambahan", "label": "Boba", "priceDelta": 8000},
                    ],
                    "notes": "Less sweet",
                }
            ]
        }
    }

    def to_item(self) -> CartItem:
        return CartItem(product_id=self.product_id, quantity=self.quantity, options=self.options, notes=self.notes)


class UpdateQuantityRequest(CamelModel):
    quantity: int


class EditItemRequest(CamelModel):
    item: CartItemRequest
    original_quantity: int | None = None
    original_options: list[CartOptionSelection] | None = None


class AssignTableRequest(CamelModel):
    table_slug: str | None = None


class AddItemResponse(CamelModel):
    index: int
    cart: dict


# ---------------------------------------------------------------------------
# Order Schemas
# ---------------------------------------------------------------------------
class UpdateOrderStatusRequest(CamelModel):
    status: str

    model_config = {"json_schema_extra": {"examples": [{"status": "preparing"}]}}
