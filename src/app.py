"""SPM Café FastAPI application.

Serves the customer ordering flow, the staff dashboard API and the backend
CRUD endpoints from a single process. All state is held in memory.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 5000 --reload
"""

import time
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from menu.api import menu_router, product_admin_router
from ordering.api import (
    admin_order_router,
    cart_router,
    order_records_router,
    order_router,
    sales_report_router,
)
from payments.api import checkout_router, payment_router
from seating.api import admin_table_router, cashier_router, table_access_router, table_records_router
from shared.api import register_exception_handlers
from shared.config import get_settings
from shared.logging import add_context, clear_context, configure_logging
from staff.api import router as staff_router
from store.api import router as settings_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    settings = get_settings()
    logger.info("app_started", env=settings.env, public_origin=settings.public_origin)
    yield
    logger.info("app_stopped")


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="SPM Café API",
    description="Café ordering platform — menu, carts, QRIS checkout, tables and staff dashboard",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_middleware(request: Request, call_next):
    """Bind a request id to every log line emitted while handling the request."""
    if get_settings().is_production:
        return await call_next(request)

    clear_context()
    add_context(request_id=request.headers.get("X-Request-ID") or uuid4().hex[:12])
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    clear_context()
    return response


register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
for router in (
    menu_router,
    product_admin_router,
    cart_router,
    order_router,
    order_records_router,
    admin_order_router,
    sales_report_router,
    checkout_router,
    payment_router,
    table_records_router,
    admin_table_router,
    table_access_router,
    cashier_router,
    staff_router,
    settings_router,
):
    app.include_router(router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "timestamp": datetime.now(UTC).isoformat()})
