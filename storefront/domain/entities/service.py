from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Service:
    id: str
    name: str
    price: Decimal
    category: str
    description: str = ""
    estimated_days: int = 1
    is_active: bool = True

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Service price must be non-negative: {self.price}")
        if self.estimated_days < 1:
            raise ValueError(f"Service estimated_days must be positive: {self.estimated_days}")

    @staticmethod
    def from_row(row: dict) -> "Service":
        """Build a Service from a database row (snake_case columns)."""
        return Service(
            id=str(row["id"]),
            name=str(row.get("name") or ""),
            price=Decimal(str(row.get("price") or 0)),
            category=str(row.get("category") or ""),
            description=row.get("description") or "",
            estimated_days=int(row.get("estimated_days") or 1),
            is_active=bool(row.get("is_active", True)),
        )
