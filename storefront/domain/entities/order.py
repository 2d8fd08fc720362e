from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class OrderStatus(str, Enum):
    pending = "pending"
    in_progress = "in-progress"
    completed = "completed"


@dataclass(frozen=True)
class OrderDraft:
    customer_phone: str
    service_names: tuple[str, ...]
    total_amount: Decimal
    transaction_id: str
    payment_status: str = "completed"


@dataclass(frozen=True)
class Order:
    id: str
    customer_phone: str
    service_names: tuple[str, ...]
    total_amount: Decimal
    payment_status: str
    transaction_id: str
    created_at: datetime
    status: OrderStatus = OrderStatus.pending

    @staticmethod
    def from_row(row: dict) -> "Order":
        services = row.get("services") or []
        created_raw = row.get("created_at")
        if isinstance(created_raw, datetime):
            created_at = created_raw
        else:
            created_at = datetime.fromisoformat(str(created_raw).replace("Z", "+00:00"))
        return Order(
            id=str(row["id"]),
            customer_phone=str(row.get("customer_phone") or ""),
            service_names=tuple(str(s) for s in services) if isinstance(services, list) else (),
            total_amount=Decimal(str(row.get("total_amount") or 0)),
            payment_status=str(row.get("payment_status") or ""),
            transaction_id=str(row.get("transaction_id") or ""),
            created_at=created_at,
            status=OrderStatus(row.get("status") or OrderStatus.pending.value),
        )


@dataclass(frozen=True)
class OrderNotification:
    order_id: str
    customer_phone: str
    service_names: tuple[str, ...]
    total: Decimal
    transaction_id: str
