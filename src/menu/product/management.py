"""Product management — create, update and remove admin product records."""

from menu.domain import logger
from menu.product.catalog import FALLBACK_CATEGORY, Catalog, Product
from menu.product.product import ProductRecord
from shared.repository import repository_for


def list_product_records() -> list[ProductRecord]:
    return sorted(repository_for(ProductRecord).all(), key=lambda record: record.created_at)


def get_product_record(product_id: str) -> ProductRecord:
    return repository_for(ProductRecord).get(product_id)


def create_product_record(id=None, name=None, price=None, **details) -> ProductRecord:
    record = ProductRecord.create(id=id, name=name, price=price, **details)
    repository_for(ProductRecord).add(record)
    logger.info("product_record_created", product_id=record.id, price=record.price)
    return record


def update_product_record(product_id: str, **changes) -> ProductRecord:
    record = get_product_record(product_id)
    record.update(**changes)
    logger.info("product_record_updated", product_id=product_id, fields=sorted(changes))
    return record


def delete_product_record(product_id: str) -> bool:
    removed = repository_for(ProductRecord).remove(product_id)
    if removed:
        logger.info("product_record_deleted", product_id=product_id)
    return removed


def catalog_from_records(records: list[ProductRecord]) -> Catalog:
    """Orderable catalog built from admin records (available, not sold out)."""
    return Catalog.from_products(
        Product(
            id=record.id,
            name=record.name,
            description=record.description,
            price=record.price,
            image=record.image_url or f"/images/products/{record.id}.jpg",
            category=record.category or FALLBACK_CATEGORY,
        )
        for record in records
        if record.is_orderable
    )
