"""Configurable fake QRIS gateway for development and testing.

No money moves: the adapter builds a QR payload locally and reports payments
as settled (or declined, when configured to fail). It can be reconfigured at
runtime through ``/payments/gateway/configure`` for manual testing.
"""

from collections import deque
from datetime import datetime
from uuid import uuid4

from payments.gateway.port import ConfirmationResult, QrisGateway, QrResult

MERCHANT_NAME = "SPM CAFE"
MAX_RECORDED_CALLS = 100


class FakeGateway(QrisGateway):
    """Configurable fake QRIS gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Pembayaran ditolak"
        self.calls: deque[dict] = deque(maxlen=MAX_RECORDED_CALLS)

    def configure(self, should_succeed: bool, failure_reason: str = "Pembayaran ditolak") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_qr(self, reference: str, amount: float, expires_at: datetime) -> QrResult:
        self.calls.append(
            {"method": "create_qr", "reference": reference, "amount": amount, "expires_at": expires_at}
        )
        transaction_id = f"fake_qris_{uuid4().hex[:12]}"
        payload = f"QRIS|{MERCHANT_NAME}|{reference}|{round(amount)}|{transaction_id}"
        return QrResult(success=True, qr_payload=payload, gateway_transaction_id=transaction_id)

    def confirm_payment(self, gateway_transaction_id: str, amount: float) -> ConfirmationResult:
        self.calls.append(
            {"method": "confirm_payment", "gateway_transaction_id": gateway_transaction_id, "amount": amount}
        )
        if self.should_succeed:
            return ConfirmationResult(success=True, gateway_status="settled")
        return ConfirmationResult(success=False, gateway_status="declined", failure_reason=self.failure_reason)
