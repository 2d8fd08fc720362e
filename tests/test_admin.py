"""
Tests for the admin console use cases.
"""

from __future__ import annotations

from decimal import Decimal
from urllib.parse import unquote

import pytest

from storefront.application.exceptions import AdminAccessDenied, InvalidCredentialsError
from storefront.application.use_cases.admin import AdminAuthUseCase, AdminConsoleUseCase
from storefront.domain.entities.home_content import HomeContent
from storefront.domain.entities.order import OrderDraft, OrderStatus
from storefront.domain.entities.session_context import SessionContext
from storefront.infrastructure.catalog.fallback_catalog import FALLBACK_SERVICES
from storefront.infrastructure.store.memory_store import MemoryCatalog, MemoryContentStore, MemoryOrderRepository


ADMIN = SessionContext(session_id="s", admin_logged_in=True, admin_email="admin@connex.local")
GUEST = SessionContext(session_id="g")


def _console(orders: MemoryOrderRepository | None = None) -> AdminConsoleUseCase:
    return AdminConsoleUseCase(
        catalog=MemoryCatalog(FALLBACK_SERVICES),
        orders=orders or MemoryOrderRepository(),
        content=MemoryContentStore([HomeContent(id="1", section_name="hero_title", title="Hero", content="CONNEX")]),
        business_name="CONNEX CYBER SERVICES",
    )


def test_login_checks_credentials():
    auth = AdminAuthUseCase(admin_email="admin@connex.local", admin_password="secret")
    assert auth.verify(" Admin@Connex.local ", "secret") == "admin@connex.local"
    with pytest.raises(InvalidCredentialsError):
        auth.verify("admin@connex.local", "wrong")


def test_login_disabled_without_password():
    with pytest.raises(InvalidCredentialsError):
        AdminAuthUseCase(admin_email="admin@connex.local", admin_password=None).verify("admin@connex.local", "")


def test_guest_is_denied():
    console = _console()
    with pytest.raises(AdminAccessDenied):
        console.list_orders(GUEST)
    with pytest.raises(AdminAccessDenied):
        console.save_service(GUEST, {"name": "x"})


def test_new_service_gets_defaults():
    console = _console()
    service = console.save_service(ADMIN, {"name": "Scanning", "price": Decimal(50)})

    assert service.category == "IT Services"
    assert service.estimated_days == 1
    assert service.is_active is True
    assert service.id not in {s.id for s in FALLBACK_SERVICES}
    assert service in console.list_services(ADMIN)


def test_update_and_delete_service():
    console = _console()
    updated = console.save_service(ADMIN, {"price": Decimal(1800), "is_active": False}, service_id="1")
    assert updated.price == Decimal(1800)
    assert updated.is_active is False
    assert updated.name == "Good Conduct Certificate"

    console.delete_service(ADMIN, "1")
    assert "1" not in {s.id for s in console.list_services(ADMIN)}


def test_order_status_update():
    orders = MemoryOrderRepository()
    order = orders.create_order(
        OrderDraft(customer_phone="0712345678", service_names=("P9 Forms",), total_amount=Decimal(1500), transaction_id="T")
    )
    updated = _console(orders).update_order_status(ADMIN, order.id, OrderStatus.in_progress)
    assert updated.status == OrderStatus.in_progress
    assert orders.list_orders()[0].status == OrderStatus.in_progress


def test_whatsapp_link_strips_non_digits():
    link = _console().whatsapp_link(ADMIN, "+254 712-345-678", "42")
    assert link.startswith("https://wa.me/254712345678?text=")
    assert "Your order #42 is being processed" in unquote(link)
    assert "CONNEX CYBER SERVICES" in unquote(link)


def test_update_content_defaults_to_active():
    console = _console()
    updated = console.update_content(ADMIN, "1", title=None, content="New headline", is_active=None)
    assert updated.content == "New headline"
    assert updated.title == "Hero"
    assert updated.is_active is True
