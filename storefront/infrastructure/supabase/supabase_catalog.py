from __future__ import annotations

from typing import Any

from storefront.application.ports.catalog import CatalogPort
from storefront.domain.entities.service import Service
from storefront.infrastructure.supabase.supabase_client import SupabaseClient


TABLE = "services"


class SupabaseCatalog(CatalogPort):
    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    def list_active_services(self) -> list[Service]:
        rows = self._client.select(TABLE, filters={"is_active": "eq.true"}, order="category")
        return [Service.from_row(row) for row in rows]

    def list_services(self) -> list[Service]:
        return [Service.from_row(row) for row in self._client.select(TABLE, order="category")]

    def get_service(self, service_id: str) -> Service | None:
        rows = self._client.select(TABLE, filters={"id": f"eq.{service_id}"})
        return Service.from_row(rows[0]) if rows else None

    def create_service(self, fields: dict[str, Any]) -> Service:
        return Service.from_row(self._client.insert(TABLE, _to_row(fields)))

    def update_service(self, service_id: str, fields: dict[str, Any]) -> Service:
        return Service.from_row(self._client.update(TABLE, service_id, _to_row(fields)))

    def delete_service(self, service_id: str) -> None:
        self._client.delete(TABLE, service_id)


def _to_row(fields: dict[str, Any]) -> dict[str, Any]:
    row = dict(fields)
    if "price" in row and row["price"] is not None:
        row["price"] = str(row["price"])
    return row
