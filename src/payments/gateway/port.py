"""QRIS gateway port (abstract interface).

Defines the contract every QRIS gateway adapter implements, so the checkout
flow can run against the fake adapter in development and tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class QrResult:
    """Result of asking the gateway for a dynamic QRIS code."""

    success: bool
    qr_payload: str | None = None
    gateway_transaction_id: str | None = None
    failure_reason: str | None = None


@dataclass(frozen=True)
class ConfirmationResult:
    """Result of checking whether a QRIS payment was settled."""

    success: bool
    gateway_status: str | None = None
    failure_reason: str | None = None


class QrisGateway(ABC):
    """Abstract QRIS gateway interface."""

    @abstractmethod
    def create_qr(self, reference: str, amount: float, expires_at: datetime) -> QrResult:
        """Issue the QR payload the customer scans."""
        ...

    @abstractmethod
    def confirm_payment(self, gateway_transaction_id: str, amount: float) -> ConfirmationResult:
        """Report whether the payment for a previously issued QR was received."""
        ...
