from __future__ import annotations

import json
import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from storefront.application.exceptions import StoreUpstreamError
from storefront.application.ports.order_repository import OrderRepositoryPort
from storefront.domain.entities.order import Order, OrderDraft, OrderStatus


class JsonOrderRepository(OrderRepositoryPort):
    """Orders kept in a single JSON file so they survive dev server restarts."""

    def __init__(self, data_dir: str = "./data") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / "orders.json"
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def create_order(self, draft: OrderDraft) -> Order:
        with self._lock:
            data = self._load()
            data["last_id"] += 1
            order = Order(
                id=str(data["last_id"]),
                customer_phone=draft.customer_phone,
                service_names=draft.service_names,
                total_amount=draft.total_amount,
                payment_status=draft.payment_status,
                transaction_id=draft.transaction_id,
                created_at=datetime.now(timezone.utc),
            )
            data["orders"].append(self._serialize(order))
            self._save(data)
            return order

    def list_orders(self) -> list[Order]:
        with self._lock:
            rows = self._load()["orders"]
        # file order is creation order
        return [self._deserialize(row) for row in reversed(rows)]

    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        with self._lock:
            data = self._load()
            for i, row in enumerate(data["orders"]):
                if str(row.get("id")) == order_id:
                    updated = replace(self._deserialize(row), status=status)
                    data["orders"][i] = self._serialize(updated)
                    self._save(data)
                    return updated
        raise KeyError(order_id)

    def _load(self) -> dict[str, Any]:
        """Load the order file, return an empty book if missing."""
        if not self._file_path.exists():
            return {"last_id": 0, "orders": [], "version": 1}
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise StoreUpstreamError(f"Order file unreadable: {e}") from e
        data.setdefault("last_id", len(data.get("orders", [])))
        data.setdefault("orders", [])
        return data

    def _save(self, data: dict[str, Any]) -> None:
        """Write to a temp file, then rename over the real one."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            self._logger.error("Failed to write order file", extra={"error": str(e)})
            raise StoreUpstreamError(f"Order file not writable: {e}") from e

    def _serialize(self, order: Order) -> dict[str, Any]:
        return {
            "id": order.id,
            "customer_phone": order.customer_phone,
            "services": list(order.service_names),
            "total_amount": str(order.total_amount),
            "payment_status": order.payment_status,
            "transaction_id": order.transaction_id,
            "mpesa_receipt": order.transaction_id,
            "created_at": order.created_at.isoformat(),
            "status": order.status.value,
        }

    def _deserialize(self, row: dict[str, Any]) -> Order:
        return Order.from_row(row)
