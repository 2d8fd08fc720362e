from __future__ import annotations

from decimal import Decimal

from storefront.domain.entities.service import Service


class Cart:
    """Ordered selection of services, unique by service id."""

    def __init__(self) -> None:
        self._services: list[Service] = []

    def add(self, service: Service) -> None:
        if not self.contains(service.id):
            self._services.append(service)

    def remove(self, service_id: str) -> None:
        self._services = [s for s in self._services if s.id != service_id]

    def toggle(self, service: Service) -> bool:
        """Add the service if absent, remove it otherwise. Returns True if now selected."""
        if self.contains(service.id):
            self.remove(service.id)
            return False
        self.add(service)
        return True

    def contains(self, service_id: str) -> bool:
        return any(s.id == service_id for s in self._services)

    def total(self) -> Decimal:
        return sum((s.price for s in self._services), Decimal(0))

    def count(self) -> int:
        return len(self._services)

    def services(self) -> list[Service]:
        return list(self._services)

    def clear(self) -> None:
        self._services = []
