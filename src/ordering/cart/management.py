"""Cart management — services behind the customer cart screens.

Every service loads the cart, applies one aggregate method and logs the
change. ``get_cart_view`` prices the cart against the effective catalog and
the store's charge rates.
"""

from dataclasses import dataclass

from menu.product.catalog import effective_catalog
from menu.product.options import CartOptionSelection
from ordering.cart.cart import Cart, CartItem
from ordering.cart.pricing import CartSummary, DerivedCartLine, compute_cart_summary, derive_cart_lines
from ordering.domain import logger
from seating.slugs import normalize_table_slug
from seating.table.management import check_table_access
from shared.exceptions import ObjectNotFoundError
from shared.repository import repository_for
from store.settings import charge_config


@dataclass(frozen=True)
class CartView:
    cart: Cart
    lines: list[DerivedCartLine]
    summary: CartSummary

    def to_dict(self) -> dict:
        data = self.cart.to_dict()
        data["lines"] = [line.to_dict() for line in self.lines]
        data["summary"] = self.summary.to_dict()
        return data


def _repo():
    return repository_for(Cart)


def get_cart(cart_id: str) -> Cart:
    return _repo().get(cart_id)


def _require_product(item: CartItem) -> None:
    if effective_catalog().get_product_by_id(item.product_id) is None:
        raise ObjectNotFoundError(f"Produk `{item.product_id}` tidak ditemukan")


def create_cart(table_slug: str | None = None, items: list[CartItem] | None = None) -> Cart:
    access = check_table_access(normalize_table_slug(table_slug))
    cart = Cart.create(table_id=access.table_id, table_active=access.active, items=items)
    _repo().add(cart)
    logger.info("cart_created", cart_id=cart.id, table_id=cart.table_id, table_active=cart.table_active)
    return cart


def get_cart_view(cart_id: str) -> CartView:
    cart = get_cart(cart_id)
    lines = derive_cart_lines(cart.items)
    summary = compute_cart_summary(lines, **charge_config())
    return CartView(cart=cart, lines=lines, summary=summary)


# ---------------------------------------------------------------------------
# Item changes
# ---------------------------------------------------------------------------
def add_item(cart_id: str, item: CartItem) -> int:
    cart = get_cart(cart_id)
    _require_product(item)
    index = cart.add_item(item)
    logger.info("cart_item_added", cart_id=cart_id, product_id=item.product_id, quantity=item.quantity, index=index)
    return index


def update_quantity(cart_id: str, index: int, quantity: int) -> Cart:
    cart = get_cart(cart_id)
    cart.update_quantity(index, quantity)
    logger.info("cart_quantity_updated", cart_id=cart_id, index=index, quantity=cart.items[index].quantity)
    return cart


def replace_item(cart_id: str, index: int, item: CartItem) -> Cart:
    cart = get_cart(cart_id)
    _require_product(item)
    cart.replace_item(index, item)
    logger.info("cart_item_replaced", cart_id=cart_id, index=index, product_id=item.product_id)
    return cart


def insert_item_after(cart_id: str, index: int, item: CartItem) -> int:
    cart = get_cart(cart_id)
    _require_product(item)
    position = cart.insert_item_after(index, item)
    logger.info("cart_item_inserted", cart_id=cart_id, index=position, product_id=item.product_id)
    return position


def edit_item(
    cart_id: str,
    index: int,
    item: CartItem,
    original_quantity: int | None = None,
    original_options: list[CartOptionSelection] | None = None,
) -> Cart:
    cart = get_cart(cart_id)
    _require_product(item)
    cart.edit_item(index, item, original_quantity=original_quantity, original_options=original_options)
    logger.info("cart_item_edited", cart_id=cart_id, index=index, lines=len(cart.items))
    return cart


def remove_item(cart_id: str, index: int) -> Cart:
    cart = get_cart(cart_id)
    cart.remove_item(index)
    logger.info("cart_item_removed", cart_id=cart_id, index=index)
    return cart


def clear_cart(cart_id: str) -> Cart:
    cart = get_cart(cart_id)
    cart.clear()
    logger.info("cart_cleared", cart_id=cart_id)
    return cart


def assign_table(cart_id: str, table_slug: str | None) -> Cart:
    cart = get_cart(cart_id)
    access = check_table_access(normalize_table_slug(table_slug))
    cart.assign_table(access.table_id, access.active)
    logger.info("cart_table_assigned", cart_id=cart_id, table_id=cart.table_id, table_active=cart.table_active)
    return cart
