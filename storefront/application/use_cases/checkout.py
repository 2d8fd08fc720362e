from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum

from storefront.application.exceptions import (
    CheckoutInProgressError,
    EmptyCartError,
    InvalidCheckoutStateError,
)
from storefront.application.ports.payment_gateway import PaymentGatewayPort
from storefront.application.use_cases.submit_order import SubmissionResult, SubmitOrderUseCase
from storefront.domain.entities.cart import Cart
from storefront.domain.entities.payment_attempt import PaymentAttempt, PaymentStatus
from storefront.domain.entities.service import Service
from storefront.domain.entities.session_context import SessionContext


class CheckoutView(str, Enum):
    catalog = "catalog"
    cart = "cart"
    payment = "payment"


@dataclass(frozen=True)
class CheckoutSnapshot:
    session: SessionContext
    view: CheckoutView
    services: list[Service]
    total: Decimal
    payment: PaymentAttempt
    last_result: SubmissionResult | None


class CheckoutOrchestrator:
    """
    One shopper's checkout: cart -> simulated payment -> order submission.

    At most one payment runs per session. While the payment view is open the
    cart is frozen, so the order always matches the amount that was paid.
    Sync routes run in a threadpool, so every state change holds `_lock`.
    """

    def __init__(
        self,
        context: SessionContext,
        gateway: PaymentGatewayPort,
        submit_order: SubmitOrderUseCase,
        cart: Cart | None = None,
    ) -> None:
        self._context = context
        self._gateway = gateway
        self._submit_order = submit_order
        self._cart = cart if cart is not None else Cart()
        self._view = CheckoutView.catalog
        self._payment_task: asyncio.Task | None = None
        self._last_result: SubmissionResult | None = None
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    @property
    def context(self) -> SessionContext:
        return self._context

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def view(self) -> CheckoutView:
        return self._view

    def login_admin(self, email: str) -> None:
        with self._lock:
            self._context = replace(self._context, admin_logged_in=True, admin_email=email)

    def logout_admin(self) -> None:
        with self._lock:
            self._context = replace(self._context, admin_logged_in=False, admin_email=None)

    def admin_actions_available(self) -> bool:
        return self._context.admin_logged_in

    def payment_in_progress(self) -> bool:
        return self._view == CheckoutView.payment or self._payment_running()

    def add_service(self, service: Service) -> None:
        with self._lock:
            self._ensure_cart_editable()
            self._cart.add(service)

    def remove_service(self, service_id: str) -> None:
        with self._lock:
            self._ensure_cart_editable()
            self._cart.remove(service_id)

    def toggle_service(self, service: Service) -> bool:
        with self._lock:
            self._ensure_cart_editable()
            return self._cart.toggle(service)

    def open_cart(self) -> None:
        with self._lock:
            self._ensure_cart_editable()
            self._view = CheckoutView.cart

    def close_cart(self) -> None:
        with self._lock:
            if self._view == CheckoutView.cart:
                self._view = CheckoutView.catalog

    def begin_checkout(self) -> Decimal:
        """Close the cart and open the payment step seeded with the cart total."""
        with self._lock:
            if self.payment_in_progress():
                raise CheckoutInProgressError("A checkout is already in progress")
            if self._cart.count() == 0:
                raise EmptyCartError("Your cart is empty")

            total = self._cart.total()
            self._gateway.open(total)
            self._view = CheckoutView.payment
            self._last_result = None
        self._logger.info(
            "Checkout started",
            extra={"session_id": self._context.session_id, "amount": str(total)},
        )
        return total

    async def start_payment(self, phone_number: str) -> None:
        """
        Submit the phone number and schedule the rest of the payment.

        Returns as soon as the attempt is processing; completion runs as a
        background task on the current event loop.
        """
        with self._lock:
            if self._view != CheckoutView.payment:
                raise InvalidCheckoutStateError("Checkout has not been started")
            if self._payment_running():
                raise CheckoutInProgressError("A payment is already being processed")

            self._gateway.submit(phone_number)
            self._payment_task = asyncio.create_task(self._complete_payment())

    def close_payment(self) -> None:
        with self._lock:
            if self._view != CheckoutView.payment:
                raise InvalidCheckoutStateError("No payment to close")
            self._gateway.close()
            self._view = CheckoutView.catalog
        self._logger.info("Checkout cancelled", extra={"session_id": self._context.session_id})

    async def wait_for_payment(self) -> SubmissionResult | None:
        if self._payment_task is not None:
            await self._payment_task
        return self._last_result

    def snapshot(self) -> CheckoutSnapshot:
        with self._lock:
            return CheckoutSnapshot(
                session=self._context,
                view=self._view,
                services=self._cart.services(),
                total=self._cart.total(),
                payment=self._gateway.attempt,
                last_result=self._last_result,
            )

    async def _complete_payment(self) -> None:
        try:
            attempt = await self._gateway.settle()
            await self._gateway.hold_success()
            # store adapters are blocking httpx clients
            self._last_result = await asyncio.to_thread(self._submit_order.execute, self._cart, attempt)
        except Exception as e:
            self._logger.exception(
                "Checkout completion failed",
                extra={"session_id": self._context.session_id, "error": str(e)},
            )
        finally:
            with self._lock:
                self._gateway.reset()
                self._view = CheckoutView.catalog

    def _payment_running(self) -> bool:
        return self._payment_task is not None and not self._payment_task.done()

    def _ensure_cart_editable(self) -> None:
        if self._view == CheckoutView.payment or self._gateway.attempt.status != PaymentStatus.input:
            raise CheckoutInProgressError("The cart cannot change during checkout")
