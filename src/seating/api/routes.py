"""FastAPI routes for the Seating domain — tables, cashier cards and QR access."""

from fastapi import APIRouter, Depends, Request, Response

from ordering.order.status import list_orders
from seating.api.schemas import AddCardRequest, CashierBoardResponse, TableAccessResponse
from seating.cashier.board import active_orders_info, add_card, get_board, remove_card, toggle_card
from seating.slugs import format_table_label, normalize_table_slug
from seating.table.management import (
    add_next_table,
    bootstrap_tables,
    check_table_access,
    create_table,
    delete_table,
    get_table,
    list_tables,
    toggle_table,
    update_table,
)
from seating.table.qr import render_qr_png
from shared.api import StatusResponse, read_payload
from staff.api.dependencies import require_screen
from staff.session.session import StaffSession

# ---------------------------------------------------------------------------
# Table records (backend CRUD)
# ---------------------------------------------------------------------------
table_records_router = APIRouter(prefix="/api/tables", tags=["tables"])


@table_records_router.get("")
async def list_table_records():
    return {"data": [table.to_dict() for table in list_tables()]}


@table_records_router.post("", status_code=201)
async def create_table_record(request: Request):
    payload = await read_payload(request)
    table = create_table(**payload)
    return {"message": "Meja ditambahkan", "table": table.to_dict()}


@table_records_router.patch("/{slug}")
async def update_table_record(slug: str, request: Request):
    payload = await read_payload(request)
    table = update_table(slug, payload)
    return {"message": "Meja diperbarui", "table": table.to_dict()}


@table_records_router.delete("/{slug}")
async def delete_table_record(slug: str):
    delete_table(slug)
    return {"message": "Meja dihapus"}


# ---------------------------------------------------------------------------
# Admin tables
# ---------------------------------------------------------------------------
admin_table_router = APIRouter(prefix="/admin/tables", tags=["admin"])


@admin_table_router.get("")
async def admin_list_tables(session: StaffSession = Depends(require_screen("/admin"))):
    return {"data": [table.to_dict() for table in list_tables()]}


@admin_table_router.post("/bootstrap")
async def admin_bootstrap_tables(session: StaffSession = Depends(require_screen("/admin"))):
    return {"data": [table.to_dict() for table in bootstrap_tables()]}


@admin_table_router.post("", status_code=201)
async def admin_add_table(session: StaffSession = Depends(require_screen("/admin"))):
    return add_next_table().to_dict()


@admin_table_router.post("/{slug}/toggle")
async def admin_toggle_table(slug: str, session: StaffSession = Depends(require_screen("/admin"))):
    return toggle_table(slug).to_dict()


@admin_table_router.delete("/{slug}", response_model=StatusResponse)
async def admin_delete_table(slug: str, session: StaffSession = Depends(require_screen("/admin"))) -> StatusResponse:
    get_table(slug)
    delete_table(slug)
    return StatusResponse()


@admin_table_router.get("/{slug}/qr.png")
async def admin_table_qr(slug: str, session: StaffSession = Depends(require_screen("/admin"))):
    table = get_table(slug)
    return Response(
        content=render_qr_png(table.url or slug),
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{table.slug}-qr.png"'},
    )


# ---------------------------------------------------------------------------
# Table access (customer)
# ---------------------------------------------------------------------------
table_access_router = APIRouter(prefix="/tables", tags=["tables"])


@table_access_router.get("/{slug}/access", response_model=TableAccessResponse)
async def read_table_access(slug: str) -> TableAccessResponse:
    normalized = normalize_table_slug(slug)
    access = check_table_access(normalized)
    return TableAccessResponse(
        requested_slug=access.requested_slug,
        table_id=access.table_id,
        active=access.active,
        label=format_table_label(normalized),
    )


# ---------------------------------------------------------------------------
# Cashier cards
# ---------------------------------------------------------------------------
cashier_router = APIRouter(prefix="/cashier", tags=["cashier"])


@cashier_router.get("/cards", response_model=CashierBoardResponse)
async def cashier_board(session: StaffSession = Depends(require_screen("/cashier"))) -> CashierBoardResponse:
    board = get_board()
    info = active_orders_info(list_orders(), board)
    return CashierBoardResponse(
        cards=board.cards,
        availability=board.availability(info.active_count),
        next_suggestion=board.next_card_suggestion(),
        active_orders=info.to_dict(),
    )


@cashier_router.post("/cards", status_code=201)
async def cashier_add_card(body: AddCardRequest, session: StaffSession = Depends(require_screen("/cashier"))):
    return add_card(body.code).to_dict()


@cashier_router.delete("/cards/{slug}", response_model=StatusResponse)
async def cashier_remove_card(slug: str, session: StaffSession = Depends(require_screen("/cashier"))) -> StatusResponse:
    remove_card(slug)
    return StatusResponse()


@cashier_router.post("/cards/{slug}/toggle")
async def cashier_toggle_card(slug: str, session: StaffSession = Depends(require_screen("/cashier"))):
    return toggle_card(slug).to_dict()


@cashier_router.get("/active-orders")
async def cashier_active_orders(session: StaffSession = Depends(require_screen("/cashier"))):
    return active_orders_info(list_orders()).to_dict()
