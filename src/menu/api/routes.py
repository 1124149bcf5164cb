"""FastAPI routes for the Menu domain — browsing and product records."""

from fastapi import APIRouter, Request

from menu.api.schemas import ProductDetailResponse, ResolveSelectionRequest, ResolveSelectionResponse
from menu.product.catalog import category_title, effective_catalog
from menu.product.management import (
    create_product_record,
    delete_product_record,
    list_product_records,
    update_product_record,
)
from menu.product.options import add_on_total, build_option_groups, resolve_selection
from shared.api import read_payload
from shared.exceptions import ObjectNotFoundError

# ---------------------------------------------------------------------------
# Customer-facing menu
# ---------------------------------------------------------------------------
menu_router = APIRouter(prefix="/menu", tags=["menu"])


def _lookup(product_id: str):
    found = effective_catalog().get_product_by_id(product_id)
    if found is None:
        raise ObjectNotFoundError(f"Produk `{product_id}` tidak ditemukan")
    return found


@menu_router.get("/categories")
async def list_categories():
    return {"data": effective_catalog().category_summaries()}


@menu_router.get("/products")
async def list_menu_products(category: str | None = None):
    products = effective_catalog().products(category)
    return {"data": [product.to_dict() for product in products]}


@menu_router.get("/search")
async def search_menu(q: str = ""):
    return {"data": [product.to_dict() for product in effective_catalog().search(q)]}


@menu_router.get("/products/{product_id}", response_model=ProductDetailResponse)
async def get_menu_product(product_id: str) -> ProductDetailResponse:
    product, category = _lookup(product_id)
    return ProductDetailResponse(
        product=product,
        category=category,
        category_title=category_title(category),
        option_groups=build_option_groups(category),
    )


@menu_router.post("/products/{product_id}/selection", response_model=ResolveSelectionResponse)
async def resolve_product_selection(product_id: str, body: ResolveSelectionRequest) -> ResolveSelectionResponse:
    _, category = _lookup(product_id)
    options = resolve_selection(build_option_groups(category), body.singles, body.multiples)
    return ResolveSelectionResponse(options=options, add_on_total=add_on_total(options))


# ---------------------------------------------------------------------------
# Product records (backend CRUD)
# ---------------------------------------------------------------------------
product_admin_router = APIRouter(prefix="/api/products", tags=["products"])


@product_admin_router.get("")
async def list_products():
    return {"data": [record.to_dict() for record in list_product_records()]}


@product_admin_router.post("", status_code=201)
async def create_product(request: Request):
    payload = await read_payload(request)
    record = create_product_record(**payload)
    return {"message": "Produk ditambahkan", "product": record.to_dict()}


@product_admin_router.patch("/{product_id}")
async def update_product(product_id: str, request: Request):
    payload = await read_payload(request)
    record = update_product_record(product_id, **payload)
    return {"message": "Produk diperbarui", "product": record.to_dict()}


@product_admin_router.delete("/{product_id}")
async def delete_product(product_id: str):
    delete_product_record(product_id)
    return {"message": "Produk dihapus"}
