from __future__ import annotations

from typing import Any

from storefront.application.ports.content_store import ContentStorePort
from storefront.domain.entities.home_content import HomeContent
from storefront.infrastructure.supabase.supabase_client import SupabaseClient


TABLE = "home_content"


class SupabaseContentStore(ContentStorePort):
    def __init__(self, client: SupabaseClient) -> None:
        self._client = client

    def list_content(self, active_only: bool = False) -> list[HomeContent]:
        filters = {"is_active": "eq.true"} if active_only else None
        rows = self._client.select(TABLE, filters=filters, order="section_name")
        return [_from_row(row) for row in rows]

    def update_content(
        self,
        content_id: str,
        title: str | None = None,
        content: str | None = None,
        is_active: bool | None = None,
    ) -> HomeContent:
        values: dict[str, Any] = {}
        if title is not None:
            values["title"] = title
        if content is not None:
            values["content"] = content
        if is_active is not None:
            values["is_active"] = is_active
        return _from_row(self._client.update(TABLE, content_id, values))


def _from_row(row: dict[str, Any]) -> HomeContent:
    return HomeContent(
        id=str(row["id"]),
        section_name=str(row.get("section_name") or ""),
        title=row.get("title") or "",
        content=row.get("content") or "",
        is_active=bool(row.get("is_active", True)),
    )
