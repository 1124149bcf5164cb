"""Read side of the menu: categories and orderable products.

The default catalog is what customers see until staff manage products
themselves; once any admin product record exists the orderable catalog is
built from those records instead (see ``effective_catalog``).
"""

from dataclasses import dataclass, field

from pydantic import computed_field

from shared.model import DomainModel
from shared.money import format_currency

BEVERAGE_CATEGORIES = ("pistachio-series", "matcha-club", "master-soe-series")

CATEGORY_TITLES = {
    "pistachio-series": "Pistachio Series",
    "matcha-club": "Matcha Club",
    "master-soe-series": "Master SOE Series",
    "merchandise": "Merchandise",
}

FALLBACK_CATEGORY = "lainnya"


class Product(DomainModel):
    id: str
    name: str
    description: str = ""
    price: int
    image: str = ""
    category: str

    @computed_field
    @property
    def price_label(self) -> str:
        return format_currency(self.price)


def _product(category: str, product_id: str, name: str, description: str, price: int) -> Product:
    return Product(
        id=product_id,
        name=name,
        description=description,
        price=price,
        image=f"/images/products/{product_id}.jpg",
        category=category,
    )


DEFAULT_PRODUCTS: tuple[Product, ...] = (
    _product("pistachio-series", "pistachio-latte", "Pistachio Latte", "Creamy pistachio flavor with espresso", 55000),
    _product("pistachio-series", "pistachio-frappe", "Pistachio Frappe", "Blended pistachio and coffee delight", 60000),
    _product(
        "pistachio-series",
        "iced-pistachio-coffee",
        "Iced Pistachio Coffee",
        "Refreshing iced coffee with pistachio",
        57500,
    ),
    _product("pistachio-series", "pistachio-choco", "Pistachio Choco", "Warm chocolate with a hint of pistachio", 52500),
    _product("matcha-club", "matcha-latte", "Matcha Latte", "Creamy matcha flavor with milk", 50000),
    _product("matcha-club", "matcha-frappe", "Matcha Frappe", "Blended matcha delight", 55000),
    _product("matcha-club", "iced-matcha", "Iced Matcha", "Refreshing iced matcha", 52500),
    _product("matcha-club", "matcha-cake", "Matcha Cake", "Delicious matcha flavored cake", 45000),
    _product("master-soe-series", "ethiopia-yirgacheffe", "Ethiopia Yirgacheffe", "Fruity and floral notes", 150000),
    _product("master-soe-series", "colombia-supremo", "Colombia Supremo", "Rich and nutty flavor", 120000),
    _product("master-soe-series", "kenya-aa", "Kenya AA", "Bright and acidic with berry notes", 135000),
    _product("master-soe-series", "brazil-santos", "Brazil Santos", "Smooth and mild with a nutty flavor", 110000),
    _product("merchandise", "spm-cafe-t-shirt", "SPM Café T-Shirt", "High quality cotton t-shirt", 250000),
    _product("merchandise", "spm-cafe-mug", "SPM Café Mug", "Ceramic mug with SPM Café logo", 150000),
    _product("merchandise", "spm-cafe-tote-bag", "SPM Café Tote Bag", "Canvas tote bag with SPM Café logo", 200000),
    _product("merchandise", "spm-cafe-cap", "SPM Café Cap", "Cotton cap with SPM Café logo", 180000),
)


def is_beverage_category(category: str | None) -> bool:
    return category in BEVERAGE_CATEGORIES


def category_title(slug: str) -> str:
    if slug in CATEGORY_TITLES:
        return CATEGORY_TITLES[slug]
    return " ".join(part.capitalize() for part in slug.split("-") if part) or "Lainnya"


@dataclass
class Catalog:
    """Products grouped by category slug, in display order."""

    categories: dict[str, list[Product]] = field(default_factory=dict)

    @classmethod
    def from_products(cls, products) -> "Catalog":
        catalog = cls()
        for product in products:
            catalog.categories.setdefault(product.category, []).append(product)
        return catalog

    def products(self, category: str | None = None) -> list[Product]:
        if category is not None:
            return list(self.categories.get(category, []))
        return [product for products in self.categories.values() for product in products]

    def get_product_by_id(self, product_id: str) -> tuple[Product, str] | None:
        for category, products in self.categories.items():
            product = next((p for p in products if p.id == product_id), None)
            if product is not None:
                return product, category
        return None

    def search(self, term: str) -> list[Product]:
        needle = (term or "").strip().lower()
        if not needle:
            return []
        return [
            product
            for product in self.products()
            if needle in product.name.lower() or needle in product.description.lower()
        ]

    def category_summaries(self) -> list[dict]:
        return [
            {"slug": slug, "title": category_title(slug), "productCount": len(products)}
            for slug, products in self.categories.items()
        ]


DEFAULT_CATALOG = Catalog.from_products(DEFAULT_PRODUCTS)


def effective_catalog() -> Catalog:
    """The catalog customers can order from right now."""
    from menu.product.management import catalog_from_records, list_product_records

    records = list_product_records()
    if not records:
        return DEFAULT_CATALOG
    return catalog_from_records(records)


def get_product_by_id(product_id: str) -> tuple[Product, str] | None:
    return effective_catalog().get_product_by_id(product_id)


def list_products(category: str | None = None) -> list[Product]:
    return effective_catalog().products(category)


def search_products(term: str) -> list[Product]:
    return effective_catalog().search(term)
