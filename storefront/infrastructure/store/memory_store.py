from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from storefront.application.ports.catalog import CatalogPort
from storefront.application.ports.content_store import ContentStorePort
from storefront.application.ports.order_repository import OrderRepositoryPort
from storefront.domain.entities.home_content import HomeContent
from storefront.domain.entities.order import Order, OrderDraft, OrderStatus
from storefront.domain.entities.service import Service


class MemoryCatalog(CatalogPort):
    def __init__(self, services: tuple[Service, ...] | list[Service] = ()) -> None:
        self._services: dict[str, Service] = {s.id: s for s in services}
        self._ids = itertools.count(len(self._services) + 1)

    def list_active_services(self) -> list[Service]:
        return [s for s in self.list_services() if s.is_active]

    def list_services(self) -> list[Service]:
        # stable sort keeps insertion order inside a category
        return sorted(self._services.values(), key=lambda s: s.category)

    def get_service(self, service_id: str) -> Service | None:
        return self._services.get(service_id)

    def create_service(self, fields: dict[str, Any]) -> Service:
        service_id = str(next(self._ids))
        while service_id in self._services:
            service_id = str(next(self._ids))
        service = Service.from_row({**fields, "id": service_id})
        self._services[service_id] = service
        return service

    def update_service(self, service_id: str, fields: dict[str, Any]) -> Service:
        current = self._require(service_id)
        changes = {k: v for k, v in fields.items() if v is not None and k != "id"}
        if "price" in changes:
            changes["price"] = Decimal(str(changes["price"]))
        updated = replace(current, **changes)
        self._services[service_id] = updated
        return updated

    def delete_service(self, service_id: str) -> None:
        self._require(service_id)
        del self._services[service_id]

    def _require(self, service_id: str) -> Service:
        service = self._services.get(service_id)
        if service is None:
            raise KeyError(service_id)
        return service


class MemoryOrderRepository(OrderRepositoryPort):
    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._ids = itertools.count(1)

    def create_order(self, draft: OrderDraft) -> Order:
        order = Order(
            id=str(next(self._ids)),
            customer_phone=draft.customer_phone,
            service_names=draft.service_names,
            total_amount=draft.total_amount,
            payment_status=draft.payment_status,
            transaction_id=draft.transaction_id,
            created_at=datetime.now(timezone.utc),
        )
        self._orders[order.id] = order
        return order

    def list_orders(self) -> list[Order]:
        return list(reversed(self._orders.values()))

    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise KeyError(order_id)
        updated = replace(order, status=status)
        self._orders[order_id] = updated
        return updated


class MemoryContentStore(ContentStorePort):
    def __init__(self, sections: list[HomeContent] | None = None) -> None:
        self._sections: dict[str, HomeContent] = {c.id: c for c in (sections or [])}

    def list_content(self, active_only: bool = False) -> list[HomeContent]:
        sections = sorted(self._sections.values(), key=lambda c: c.section_name)
        if active_only:
            return [c for c in sections if c.is_active]
        return sections

    def update_content(
        self,
        content_id: str,
        title: str | None = None,
        content: str | None = None,
        is_active: bool | None = None,
    ) -> HomeContent:
        current = self._sections.get(content_id)
        if current is None:
            raise KeyError(content_id)
        updated = replace(
            current,
            title=current.title if title is None else title,
            content=current.content if content is None else content,
            is_active=current.is_active if is_active is None else is_active,
        )
        self._sections[content_id] = updated
        return updated

