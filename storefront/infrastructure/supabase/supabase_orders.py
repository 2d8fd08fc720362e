from __future__ import annotations

from storefront.application.ports.order_repository import OrderRepositoryPort
from storefront.domain.entities.order import Order, OrderDraft, OrderStatus
from storefront.infrastructure.supabase.supabase_client import SupabaseClient


TABLE = "orders"


class SupabaseOrderRepository(OrderRepositoryPort):
    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    def create_order(self, draft: OrderDraft) -> Order:
        row = self._client.insert(
            TABLE,
            {
                "customer_phone": draft.customer_phone,
                "services": list(draft.service_names),
                "total_amount": str(draft.total_amount),
                "payment_status": draft.payment_status,
                "transaction_id": draft.transaction_id,
                "mpesa_receipt": draft.transaction_id,
            },
        )
        return Order.from_row(row)

    def list_orders(self) -> list[Order]:
        rows = self._client.select(TABLE, order="created_at.desc")
        return [Order.from_row(row) for row in rows]

    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        return Order.from_row(self._client.update(TABLE, order_id, {"status": status.value}))
