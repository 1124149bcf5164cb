"""FastAPI routes for the Payments domain — checkout and QRIS sessions."""

from fastapi import APIRouter, HTTPException

from payments.api.schemas import (
    CheckoutRequest,
    ConfigureGatewayRequest,
    ConfirmPaymentResponse,
    GatewayConfigResponse,
    StartQrisRequest,
)
from payments.gateway import get_gateway
from payments.gateway.fake_adapter import FakeGateway
from payments.qris.payment import confirm_qris_payment, get_payment, start_qris_payment
from shared.config import get_settings

# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.post("/{cart_id}", status_code=201)
async def checkout_cart(cart_id: str, body: CheckoutRequest):
    """Validate the cart, keep the customer's details and open a QRIS session."""
    payment = start_qris_payment(cart_id, body.customer_info)
    return payment.to_view()


# ---------------------------------------------------------------------------
# QRIS Router
# ---------------------------------------------------------------------------
payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.post("/qris", status_code=201)
async def start_payment(body: StartQrisRequest):
    return start_qris_payment(body.cart_id, body.customer_info).to_view()


@payment_router.get("/qris/{payment_id}")
async def read_payment(payment_id: str):
    return get_payment(payment_id).to_view()


@payment_router.post("/qris/{payment_id}/confirm", response_model=ConfirmPaymentResponse)
async def confirm_payment(payment_id: str) -> ConfirmPaymentResponse:
    order_id = confirm_qris_payment(payment_id)
    return ConfirmPaymentResponse(order_id=order_id, status_href=f"/status?orderId={order_id}")


@payment_router.post("/gateway/configure", response_model=GatewayConfigResponse)
async def configure_gateway(body: ConfigureGatewayRequest) -> GatewayConfigResponse:
    """Configure the FakeGateway behavior (non-production only)."""
    if get_settings().is_production:
        raise HTTPException(status_code=403, detail="Gateway configuration not available in production")

    gateway = get_gateway()
    if not isinstance(gateway, FakeGateway):
        raise HTTPException(status_code=400, detail="Gateway configuration only available for FakeGateway")

    gateway.configure(
        should_succeed=body.should_succeed,
        failure_reason=body.failure_reason,
    )
    return GatewayConfigResponse(
        gateway=type(gateway).__name__,
        should_succeed=gateway.should_succeed,
        failure_reason=gateway.failure_reason,
    )
