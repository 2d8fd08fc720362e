from __future__ import annotations

import html
import logging

import httpx

from storefront.application.exceptions import NotificationError
from storefront.application.ports.notification import NotificationPort
from storefront.domain.entities.order import OrderNotification


class ResendOrderNotifier(NotificationPort):
    """Emails the shop about each new order through the Resend API."""

    def __init__(
        self,
        api_key: str,
        sender: str,
        recipients: list[str],
        base_url: str = "https://api.resend.com",
        currency: str = "KSh",
        client: httpx.Client | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("RESEND_API_KEY is required for order emails")
        self._api_key = api_key
        self._sender = sender
        self._recipients = recipients
        self._url = f"{base_url.rstrip('/')}/emails"
        self._currency = currency
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

    def send_order_notification(self, notification: OrderNotification) -> None:
        payload = {
            "from": self._sender,
            "to": self._recipients,
            "subject": f"New Order Received - #{notification.order_id}",
            "html": render_order_email(notification, self._currency),
        }
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            response = self._client.post(self._url, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise NotificationError(f"Resend request failed: {e}") from e

        self._logger.info(
            "Order email sent",
            extra={"order_id": notification.order_id, "email_id": response.json().get("id")},
        )


def render_order_email(notification: OrderNotification, currency: str = "KSh") -> str:
    items = "".join(f"<li>{html.escape(name)}</li>" for name in notification.service_names)
    return (
        "<h1>New Order Received</h1>"
        f"<p><strong>Order ID:</strong> {html.escape(notification.order_id)}</p>"
        f"<p><strong>Customer Phone:</strong> {html.escape(notification.customer_phone)}</p>"
        f"<p><strong>Transaction ID:</strong> {html.escape(notification.transaction_id)}</p>"
        "<p><strong>Services:</strong></p>"
        f"<ul>{items}</ul>"
        f"<p><strong>Total Amount:</strong> {currency} {notification.total:,}</p>"
        "<p><strong>Status:</strong> Payment Received</p>"
        "<hr>"
        "<p>Please log in to the admin dashboard to manage this order.</p>"
    )
