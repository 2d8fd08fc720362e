from abc import ABC, abstractmethod

from storefront.domain.entities.order import OrderNotification


class NotificationPort(ABC):
    @abstractmethod
    def send_order_notification(self, notification: OrderNotification) -> None:
        """Fire-and-forget. May raise NotificationError; callers only log it."""
        raise NotImplementedError
