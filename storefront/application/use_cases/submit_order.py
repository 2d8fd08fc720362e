from __future__ import annotations

import logging
from dataclasses import dataclass

from storefront.application.ports.notification import NotificationPort
from storefront.application.ports.order_repository import OrderRepositoryPort
from storefront.domain.entities.cart import Cart
from storefront.domain.entities.order import Order, OrderDraft, OrderNotification
from storefront.domain.entities.payment_attempt import PaymentAttempt, PaymentStatus


@dataclass(frozen=True)
class SubmissionResult:
    draft: OrderDraft
    order: Order | None  # None when persistence failed
    title: str
    description: str

    @property
    def persisted(self) -> bool:
        return self.order is not None


class SubmitOrderUseCase:
    """
    Turns a paid cart into an order.

    Persisting the order and notifying the shop are two independent steps,
    not one transaction. Once the payment has succeeded the customer always
    gets a confirmation and an empty cart, even when the write to the store
    fails. A failed notification is only logged.
    """

    def __init__(self, orders: OrderRepositoryPort, notifier: NotificationPort) -> None:
        self._orders = orders
        self._notifier = notifier
        self._logger = logging.getLogger(__name__)

    def execute(self, cart: Cart, payment: PaymentAttempt) -> SubmissionResult:
        if payment.status != PaymentStatus.success or not payment.transaction_id:
            raise ValueError("Order submission requires a successful payment")

        services = cart.services()
        draft = OrderDraft(
            customer_phone=payment.phone_number,
            service_names=tuple(s.name for s in services),
            total_amount=cart.total(),
            transaction_id=payment.transaction_id,
        )

        order: Order | None = None
        try:
            order = self._orders.create_order(draft)
        except Exception as e:
            self._logger.error(
                "Error saving order",
                extra={"transaction_id": draft.transaction_id, "error": str(e)},
            )

        if order is not None:
            self._notify(order)

        cart.clear()

        if order is None:
            return SubmissionResult(
                draft=draft,
                order=None,
                title="Order Saved Locally",
                description="Your order has been processed. You'll receive updates soon.",
            )

        self._logger.info("Order placed", extra={"order_id": order.id, "transaction_id": order.transaction_id})
        return SubmissionResult(
            draft=draft,
            order=order,
            title="Order Placed Successfully!",
            description=f"Your order #{order.id} has been placed. You'll receive updates on your phone.",
        )

    def _notify(self, order: Order) -> None:
        try:
            self._notifier.send_order_notification(
                OrderNotification(
                    order_id=order.id,
                    customer_phone=order.customer_phone,
                    service_names=order.service_names,
                    total=order.total_amount,
                    transaction_id=order.transaction_id,
                )
            )
        except Exception as e:
            self._logger.warning(
                "Order email sending failed",
                extra={"order_id": order.id, "error": str(e)},
            )
