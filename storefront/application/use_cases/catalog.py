from __future__ import annotations

import logging

from storefront.application.ports.catalog import CatalogPort
from storefront.application.ports.content_store import ContentStorePort
from storefront.domain.entities.home_content import HeroContent
from storefront.domain.entities.service import Service


class ListCatalogUseCase:
    def __init__(self, catalog: CatalogPort, fallback: tuple[Service, ...]) -> None:
        if not fallback:
            raise ValueError("A non-empty fallback catalog is required")
        self._catalog = catalog
        self._fallback = fallback
        self._logger = logging.getLogger(__name__)

    def execute(self) -> list[Service]:
        """Active services ordered by category, or the built-in list when the store is unreachable."""
        try:
            return self._catalog.list_active_services()
        except Exception as e:
            self._logger.error("Error fetching services", extra={"error": str(e)})
            return list(self._fallback)

    def find(self, service_id: str) -> Service | None:
        """An active service by id, resolved from the built-in list when the store is unreachable."""
        try:
            service = self._catalog.get_service(service_id)
        except Exception as e:
            self._logger.error("Error fetching service", extra={"service_id": service_id, "error": str(e)})
            return next((s for s in self._fallback if s.id == service_id), None)
        if service is None or not service.is_active:
            return None
        return service

    @staticmethod
    def categories(services: list[Service]) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(s.category for s in services))


class HeroContentUseCase:
    def __init__(self, content: ContentStorePort, default: HeroContent) -> None:
        self._content = content
        self._default = default
        self._logger = logging.getLogger(__name__)

    def execute(self) -> HeroContent:
        try:
            sections = {c.section_name: c for c in self._content.list_content(active_only=True)}
        except Exception as e:
            self._logger.error("Error fetching hero content", extra={"error": str(e)})
            return self._default

        title = sections.get("hero_title")
        subtitle = sections.get("hero_subtitle")
        return HeroContent(
            title=(title.content if title and title.content else self._default.title),
            subtitle=(subtitle.content if subtitle and subtitle.content else self._default.subtitle),
        )
