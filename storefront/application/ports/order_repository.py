from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.entities.order import Order, OrderDraft, OrderStatus


class OrderRepositoryPort(ABC):
    @abstractmethod
    def create_order(self, draft: OrderDraft) -> Order:
        """
        Persist an order and return it with its assigned id and creation time.

        Raises StoreUpstreamError when the write fails. Callers in the
        checkout path treat this as recoverable.
        """
        raise NotImplementedError

    @abstractmethod
    def list_orders(self) -> list[Order]:
        """All orders, newest first."""
        raise NotImplementedError

    @abstractmethod
    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        raise NotImplementedError
