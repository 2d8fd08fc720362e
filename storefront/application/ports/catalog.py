from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from storefront.domain.entities.service import Service


class CatalogPort(ABC):
    @abstractmethod
    def list_active_services(self) -> list[Service]:
        """Services visible on the storefront, ordered by category."""
        raise NotImplementedError

    @abstractmethod
    def list_services(self) -> list[Service]:
        """All services, active or not, ordered by category."""
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        raise NotImplementedError

    @abstractmethod
    def create_service(self, fields: dict[str, Any]) -> Service:
        raise NotImplementedError

    @abstractmethod
    def update_service(self, service_id: str, fields: dict[str, Any]) -> Service:
        raise NotImplementedError

    @abstractmethod
    def delete_service(self, service_id: str) -> None:
        raise NotImplementedError
