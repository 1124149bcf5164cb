"""Derived cart lines and the cart summary (subtotal, charges, total)."""

from decimal import Decimal

from pydantic import Field

from menu.product.catalog import Catalog, Product, effective_catalog
from menu.product.options import CartOptionSelection, add_on_total
from ordering.cart.cart import CartItem
from shared.model import DomainModel
from shared.money import clamp_percentage, format_currency

DEFAULT_SERVICE_CHARGE_RATE = 5
DEFAULT_TAX_RATE = 10


class DerivedCartLine(DomainModel):
    cart_index: int
    product_id: str
    quantity: int
    options: list[CartOptionSelection] = Field(default_factory=list)
    notes: str | None = None
    product: Product
    category: str
    add_on_total: int
    unit_price: int
    unit_price_label: str
    line_total: int
    line_total_label: str


class CartSummary(DomainModel):
    subtotal: float
    service_charge: float
    tax: float
    total: float
    subtotal_label: str
    service_charge_label: str
    tax_label: str
    total_label: str
    service_charge_rate: float
    tax_rate: float


def derive_cart_lines(items: list[CartItem], catalog: Catalog | None = None) -> list[DerivedCartLine]:
    """Price each cart line against the catalog; lines for unknown products are dropped."""
    catalog = catalog or effective_catalog()
    lines = []
    for index, item in enumerate(items):
        found = catalog.get_product_by_id(item.product_id)
        if found is None:
            continue
        product, category = found
        add_ons = add_on_total(item.options)
        unit_price = product.price + add_ons
        line_total = unit_price * item.quantity
        lines.append(
            DerivedCartLine(
                cart_index=index,
                product_id=item.product_id,
                quantity=item.quantity,
                options=item.options,
                notes=item.notes,
                product=product,
                category=category,
                add_on_total=add_ons,
                unit_price=unit_price,
                unit_price_label=format_currency(unit_price),
                line_total=line_total,
                line_total_label=format_currency(line_total),
            )
        )
    return lines


def compute_cart_summary(
    lines: list[DerivedCartLine],
    service_charge_rate=DEFAULT_SERVICE_CHARGE_RATE,
    tax_rate=DEFAULT_TAX_RATE,
) -> CartSummary:
    """Service charge is levied on the subtotal; tax on subtotal plus service charge."""
    subtotal = sum(line.line_total for line in lines)
    service_rate = clamp_percentage(
        DEFAULT_SERVICE_CHARGE_RATE if service_charge_rate is None else service_charge_rate,
        DEFAULT_SERVICE_CHARGE_RATE,
    )
    tax_rate = clamp_percentage(DEFAULT_TAX_RATE if tax_rate is None else tax_rate, DEFAULT_TAX_RATE)

    base = Decimal(subtotal)
    service_charge = base * Decimal(str(service_rate)) / 100
    tax = (base + service_charge) * Decimal(str(tax_rate)) / 100
    total = base + service_charge + tax

    return CartSummary(
        subtotal=subtotal,
        service_charge=float(service_charge),
        tax=float(tax),
        total=float(total),
        subtotal_label=format_currency(subtotal),
        service_charge_label=format_currency(service_charge),
        tax_label=format_currency(tax),
        total_label=format_currency(total),
        service_charge_rate=service_rate,
        tax_rate=tax_rate,
    )
