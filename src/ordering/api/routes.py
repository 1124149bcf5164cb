"""FastAPI routes for the Ordering domain — carts, orders and reports."""

from fastapi import APIRouter, Depends, Request

from ordering.api.schemas import (
    AddItemResponse,
    AssignTableRequest,
    CartItemRequest,
    CreateCartRequest,
    EditItemRequest,
    UpdateOrderStatusRequest,
    UpdateQuantityRequest,
)
from ordering.cart import management as carts
from ordering.order.creation import create_order
from ordering.order.samples import seed_sample_orders
from ordering.order.status import clear_orders, get_order, list_orders, mark_served, update_status
from ordering.projections.order_board import filter_orders, order_stats
from ordering.projections.sales_report import sales_insights
from shared.api import StatusResponse, read_payload
from staff.api.dependencies import require_screen, require_staff
from staff.session.session import StaffSession

# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/carts", tags=["carts"])


def _cart_view(cart_id: str) -> dict:
    return carts.get_cart_view(cart_id).to_dict()


@cart_router.post("", status_code=201)
async def create_cart(body: CreateCartRequest):
    cart = carts.create_cart(body.table_slug)
    return _cart_view(cart.id)


@cart_router.get("/{cart_id}")
async def read_cart(cart_id: str):
    return _cart_view(cart_id)


@cart_router.post("/{cart_id}/items", status_code=201, response_model=AddItemResponse)
async def add_cart_item(cart_id: str, body: CartItemRequest) -> AddItemResponse:
    index = carts.add_item(cart_id, body.to_item())
    return AddItemResponse(index=index, cart=_cart_view(cart_id))


@cart_router.patch("/{cart_id}/items/{index}")
async def update_cart_item_quantity(cart_id: str, index: int, body: UpdateQuantityRequest):
    carts.update_quantity(cart_id, index, body.quantity)
    return _cart_view(cart_id)


@cart_router.put("/{cart_id}/items/{index}")
async def edit_cart_item(cart_id: str, index: int, body: EditItemRequest):
    carts.edit_item(
        cart_id,
        index,
        body.item.to_item(),
        original_quantity=body.original_quantity,
        original_options=body.original_options,
    )
    return _cart_view(cart_id)


@cart_router.post("/{cart_id}/items/{index}/after", status_code=201, response_model=AddItemResponse)
async def insert_cart_item_after(cart_id: str, index: int, body: CartItemRequest) -> AddItemResponse:
    position = carts.insert_item_after(cart_id, index, body.to_item())
    return AddItemResponse(index=position, cart=_cart_view(cart_id))


@cart_router.delete("/{cart_id}/items/{index}")
async def remove_cart_item(cart_id: str, index: int):
    carts.remove_item(cart_id, index)
    return _cart_view(cart_id)


@cart_router.delete("/{cart_id}/items")
async def clear_cart(cart_id: str):
    carts.clear_cart(cart_id)
    return _cart_view(cart_id)


@cart_router.put("/{cart_id}/table")
async def assign_cart_table(cart_id: str, body: AssignTableRequest):
    carts.assign_table(cart_id, body.table_slug)
    return _cart_view(cart_id)


# ---------------------------------------------------------------------------
# Order status (customer)
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("/{order_id}")
async def read_order(order_id: str):
    return get_order(order_id).to_dict()


# ---------------------------------------------------------------------------
# Backend order records
# ---------------------------------------------------------------------------
order_records_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_records_router.get("")
async def list_order_records():
    return {"data": [order.to_dict() for order in list_orders()]}


@order_records_router.post("", status_code=201)
async def create_order_record(request: Request):
    payload = await read_payload(request)
    order = create_order(**payload)
    return {"message": "Pesanan dibuat", "order": order.to_dict()}


# ---------------------------------------------------------------------------
# Admin order board
# ---------------------------------------------------------------------------
admin_order_router = APIRouter(prefix="/admin/orders", tags=["admin"])


@admin_order_router.get("")
async def order_board(status: str = "all", q: str = "", session: StaffSession = Depends(require_staff)):
    orders = list_orders()
    return {
        "data": [order.to_dict() for order in filter_orders(orders, status, q)],
        "stats": order_stats(orders),
    }


@admin_order_router.get("/stats")
async def order_board_stats(session: StaffSession = Depends(require_staff)):
    return order_stats(list_orders())


@admin_order_router.patch("/{order_id}/status")
async def change_order_status(
    order_id: str, body: UpdateOrderStatusRequest, session: StaffSession = Depends(require_staff)
):
    return update_status(order_id, body.status).to_dict()


@admin_order_router.post("/{order_id}/served")
async def serve_order(order_id: str, session: StaffSession = Depends(require_staff)):
    return mark_served(order_id).to_dict()


@admin_order_router.delete("", response_model=StatusResponse)
async def clear_order_board(session: StaffSession = Depends(require_screen("/admin"))) -> StatusResponse:
    clear_orders()
    return StatusResponse()


@admin_order_router.post("/sample", status_code=201)
async def add_sample_orders(session: StaffSession = Depends(require_screen("/admin"))):
    return {"data": [order.to_dict() for order in seed_sample_orders()]}


# ---------------------------------------------------------------------------
# Sales report
# ---------------------------------------------------------------------------
sales_report_router = APIRouter(prefix="/admin/sales-report", tags=["admin"])


@sales_report_router.get("")
async def sales_report(
    range: str = "daily",
    start: str | None = None,
    end: str | None = None,
    session: StaffSession = Depends(require_screen("/admin")),
):
    return sales_insights(list_orders(), range=range, custom_start=start, custom_end=end).to_dict()
