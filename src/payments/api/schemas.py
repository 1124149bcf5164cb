"""Pydantic request/response schemas for the Payments API."""

from ordering.order.order import CustomerInfo
from shared.api import CamelModel


class CheckoutRequest(CamelModel):
    customer_info: CustomerInfo | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customerInfo": {
                        "name": "Budi Santoso",
                        "phone": "0812-3456-7890",
                        "notes": "Tanpa sedotan",
                    }
                }
            ]
        }
    }


class StartQrisRequest(CheckoutRequest):
    cart_id: str


class ConfirmPaymentResponse(CamelModel):
    order_id: str
    status_href: str


class ConfigureGatewayRequest(CamelModel):
    should_succeed: bool = True
    failure_reason: str = "Pembayaran ditolak"


class GatewayConfigResponse(CamelModel):
    gateway: str
    should_succeed: bool
    failure_reason: str
