from __future__ import annotations

from decimal import Decimal

import pytest

from storefront.application.exceptions import StoreUpstreamError
from storefront.application.ports.order_repository import OrderRepositoryPort
from storefront.application.use_cases.checkout import CheckoutOrchestrator
from storefront.application.use_cases.submit_order import SubmitOrderUseCase
from storefront.domain.entities.cart import Cart
from storefront.domain.entities.order import Order, OrderDraft, OrderStatus
from storefront.domain.entities.service import Service
from storefront.domain.entities.session_context import SessionContext
from storefront.infrastructure.email.mock_notifier import MockOrderNotifier
from storefront.infrastructure.payments.mpesa_simulator import SimulatedMpesaGateway
from storefront.infrastructure.store.memory_store import MemoryOrderRepository


class BrokenOrderRepository(OrderRepositoryPort):
    def create_order(self, draft: OrderDraft) -> Order:
        raise StoreUpstreamError("orders table unavailable")

    def list_orders(self) -> list[Order]:
        raise StoreUpstreamError("orders table unavailable")

    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        raise StoreUpstreamError("orders table unavailable")


def make_checkout(
    orders: OrderRepositoryPort | None = None,
    notifier: MockOrderNotifier | None = None,
    session_id: str = "session-1",
    cart: Cart | None = None,
) -> CheckoutOrchestrator:
    return CheckoutOrchestrator(
        context=SessionContext(session_id=session_id),
        gateway=SimulatedMpesaGateway(processing_seconds=0, success_display_seconds=0),
        submit_order=SubmitOrderUseCase(
            orders=orders or MemoryOrderRepository(),
            notifier=notifier or MockOrderNotifier(),
        ),
        cart=cart,
    )


@pytest.fixture
def good_conduct() -> Service:
    return Service(
        id="1",
        name="Good Conduct Certificate",
        price=Decimal(1500),
        category="Government & E-Citizen Services",
        description="Certificate of good conduct application",
        estimated_days=7,
    )


@pytest.fixture
def web_development() -> Service:
    return Service(
        id="6",
        name="Web Development",
        price=Decimal(15000),
        category="IT Services",
        description="Custom website development",
        estimated_days=21,
    )


@pytest.fixture
def checkout_factory():
    return make_checkout


@pytest.fixture
def broken_orders() -> BrokenOrderRepository:
    return BrokenOrderRepository()
