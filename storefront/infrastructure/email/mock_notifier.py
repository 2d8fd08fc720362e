from __future__ import annotations

import logging

from storefront.application.ports.notification import NotificationPort
from storefront.domain.entities.order import OrderNotification


class MockOrderNotifier(NotificationPort):
    def __init__(self) -> None:
        self.sent: list[OrderNotification] = []
        self._logger = logging.getLogger(__name__)

    def send_order_notification(self, notification: OrderNotification) -> None:
        self.sent.append(notification)
        self._logger.info(
            "Mock order email",
            extra={"order_id": notification.order_id, "transaction_id": notification.transaction_id},
        )
