from __future__ import annotations

import hmac
import logging
import re
from decimal import Decimal
from typing import Any
from urllib.parse import quote

from storefront.application.exceptions import AdminAccessDenied, InvalidCredentialsError
from storefront.application.ports.catalog import CatalogPort
from storefront.application.ports.content_store import ContentStorePort
from storefront.application.ports.order_repository import OrderRepositoryPort
from storefront.domain.entities.home_content import HomeContent
from storefront.domain.entities.order import Order, OrderStatus
from storefront.domain.entities.service import Service
from storefront.domain.entities.session_context import SessionContext


DEFAULT_CATEGORY = "IT Services"


class AdminAuthUseCase:
    def __init__(self, admin_email: str, admin_password: str | None) -> None:
        self._admin_email = admin_email
        self._admin_password = admin_password
        self._logger = logging.getLogger(__name__)

    def verify(self, email: str, password: str) -> str:
        """Return the normalized admin email, or raise InvalidCredentialsError."""
        if not self._admin_password:
            self._logger.warning("Admin login attempted but ADMIN_PASSWORD is not configured")
            raise InvalidCredentialsError("Admin login is disabled")

        normalized = (email or "").strip().lower()
        email_ok = hmac.compare_digest(normalized, self._admin_email.strip().lower())
        password_ok = hmac.compare_digest(password or "", self._admin_password)
        if not (email_ok and password_ok):
            raise InvalidCredentialsError("Invalid email or password")
        return normalized


class AdminConsoleUseCase:
    """Catalog, order and homepage management behind the admin session flag."""

    def __init__(
        self,
        catalog: CatalogPort,
        orders: OrderRepositoryPort,
        content: ContentStorePort,
        business_name: str,
    ) -> None:
        self._catalog = catalog
        self._orders = orders
        self._content = content
        self._business_name = business_name
        self._logger = logging.getLogger(__name__)

    def list_services(self, session: SessionContext) -> list[Service]:
        _require_admin(session)
        return self._catalog.list_services()

    def save_service(self, session: SessionContext, fields: dict[str, Any], service_id: str | None = None) -> Service:
        _require_admin(session)
        if service_id:
            service = self._catalog.update_service(service_id, fields)
            self._logger.info("Service updated", extra={"service_id": service_id})
            return service

        insert = {
            "name": fields.get("name") or "",
            "description": fields.get("description") or "",
            "price": fields.get("price") or Decimal(0),
            "category": fields.get("category") or DEFAULT_CATEGORY,
            "estimated_days": fields.get("estimated_days") or 1,
            "is_active": True if fields.get("is_active") is None else fields["is_active"],
        }
        service = self._catalog.create_service(insert)
        self._logger.info("Service added", extra={"service_id": service.id})
        return service

    def delete_service(self, session: SessionContext, service_id: str) -> None:
        _require_admin(session)
        self._catalog.delete_service(service_id)
        self._logger.info("Service deleted", extra={"service_id": service_id})

    def list_orders(self, session: SessionContext) -> list[Order]:
        _require_admin(session)
        return self._orders.list_orders()

    def update_order_status(self, session: SessionContext, order_id: str, status: OrderStatus) -> Order:
        _require_admin(session)
        order = self._orders.update_status(order_id, status)
        self._logger.info("Order status updated", extra={"order_id": order_id, "status": status.value})
        return order

    def whatsapp_link(self, session: SessionContext, customer_phone: str, order_id: str) -> str:
        """wa.me deep link that tells the customer their order is being processed."""
        _require_admin(session)
        message = (
            f"Hello! Your order #{order_id} is being processed. We will notify you once it's ready. "
            f"Thank you for choosing {self._business_name}!"
        )
        digits = re.sub(r"\D", "", customer_phone)
        return f"https://wa.me/{digits}?text={quote(message)}"

    def list_content(self, session: SessionContext) -> list[HomeContent]:
        _require_admin(session)
        return self._content.list_content()

    def update_content(
        self,
        session: SessionContext,
        content_id: str,
        title: str | None,
        content: str | None,
        is_active: bool | None,
    ) -> HomeContent:
        _require_admin(session)
        updated = self._content.update_content(
            content_id,
            title=title,
            content=content,
            is_active=True if is_active is None else is_active,
        )
        self._logger.info("Content updated", extra={"content_id": content_id})
        return updated


def _require_admin(session: SessionContext) -> None:
    if not session.admin_logged_in:
        raise AdminAccessDenied("Admin login required")
