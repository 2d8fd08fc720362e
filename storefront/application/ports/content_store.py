from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.entities.home_content import HomeContent


class ContentStorePort(ABC):
    @abstractmethod
    def list_content(self, active_only: bool = False) -> list[HomeContent]:
        """Homepage content sections ordered by section name."""
        raise NotImplementedError

    @abstractmethod
    def update_content(
        self,
        content_id: str,
        title: str | None = None,
        content: str | None = None,
        is_active: bool | None = None,
    ) -> HomeContent:
        raise NotImplementedError
