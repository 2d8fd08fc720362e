from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import replace
from decimal import Decimal
from typing import Callable

from storefront.application.exceptions import CheckoutInProgressError, PhoneNumberRequiredError
from storefront.application.ports.payment_gateway import PaymentGatewayPort
from storefront.domain.entities.payment_attempt import PaymentAttempt, PaymentStatus


def new_transaction_id() -> str:
    return f"TXN{uuid.uuid4().hex.upper()}"


class SimulatedMpesaGateway(PaymentGatewayPort):
    """
    Stand-in for an M-Pesa STK push.

    input -> processing -> success, strictly forward. The processing and
    success intervals are asyncio sleeps so the event loop keeps serving
    other requests while a payment is "in flight".
    """

    def __init__(
        self,
        processing_seconds: float = 3.0,
        success_display_seconds: float = 2.0,
        transaction_id_factory: Callable[[], str] = new_transaction_id,
    ) -> None:
        self._processing_seconds = processing_seconds
        self._success_display_seconds = success_display_seconds
        self._transaction_id_factory = transaction_id_factory
        self._attempt = PaymentAttempt()
        self._logger = logging.getLogger(__name__)

    @property
    def attempt(self) -> PaymentAttempt:
        return self._attempt

    def open(self, amount: Decimal) -> None:
        if self._attempt.status != PaymentStatus.input:
            raise CheckoutInProgressError("A payment is already being processed")
        self._attempt = PaymentAttempt(amount=amount)

    def submit(self, phone_number: str) -> None:
        if self._attempt.status != PaymentStatus.input:
            raise CheckoutInProgressError("A payment is already being processed")
        phone = (phone_number or "").strip()
        if not phone:
            raise PhoneNumberRequiredError("Enter your M-Pesa phone number")
        self._attempt = replace(self._attempt, phone_number=phone, status=PaymentStatus.processing)
        self._logger.info("Payment prompt sent", extra={"amount": str(self._attempt.amount)})

    async def settle(self) -> PaymentAttempt:
        if self._attempt.status != PaymentStatus.processing:
            raise CheckoutInProgressError(f"Cannot settle a payment in state {self._attempt.status.value}")
        await asyncio.sleep(self._processing_seconds)
        self._attempt = replace(
            self._attempt,
            status=PaymentStatus.success,
            transaction_id=self._transaction_id_factory(),
        )
        self._logger.info("Payment succeeded", extra={"transaction_id": self._attempt.transaction_id})
        return self._attempt

    async def hold_success(self) -> None:
        await asyncio.sleep(self._success_display_seconds)

    def close(self) -> None:
        if self._attempt.status != PaymentStatus.input:
            raise CheckoutInProgressError("Payment cannot be cancelled while it is being processed")
        self.reset()

    def reset(self) -> None:
        self._attempt = PaymentAttempt()
