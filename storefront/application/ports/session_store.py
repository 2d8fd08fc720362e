from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.application.use_cases.checkout import CheckoutOrchestrator


class CheckoutSessionStorePort(ABC):
    @abstractmethod
    def get_or_create(self, session_id: str | None) -> str:
        raise NotImplementedError

    @abstractmethod
    def get(self, session_id: str) -> "CheckoutOrchestrator | None":
        raise NotImplementedError
