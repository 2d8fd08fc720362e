from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront.application.exceptions import StoreUpstreamError


class SupabaseClient:
    """Thin PostgREST client for the Supabase tables the storefront uses."""

    def __init__(self, url: str, api_key: str, client: httpx.Client | None = None) -> None:
        if not url or not api_key:
            raise ValueError("SUPABASE_URL and SUPABASE_ANON_KEY are required for Supabase")
        self._rest_url = f"{url.rstrip('/')}/rest/v1"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._client = client or httpx.Client(timeout=10.0)
        self._logger = logging.getLogger(__name__)

    def select(self, table: str, filters: dict[str, str] | None = None, order: str | None = None) -> list[dict[str, Any]]:
        params = {"select": "*", **(filters or {})}
        if order:
            params["order"] = order
        return self._request("GET", table, params=params)

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        rows = self._request(
            "POST",
            table,
            json=[row],
            headers={"Prefer": "return=representation"},
        )
        return _single(rows, table)

    def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        """PATCH one row by id. Raises KeyError when no row has that id."""
        rows = self._request(
            "PATCH",
            table,
            params={"id": f"eq.{row_id}"},
            json=values,
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise KeyError(row_id)
        return rows[0]

    def delete(self, table: str, row_id: str) -> None:
        rows = self._request(
            "DELETE",
            table,
            params={"id": f"eq.{row_id}"},
            headers={"Prefer": "return=representation"},
        )
        if not rows:
            raise KeyError(row_id)

    def _request(
        self,
        method: str,
        table: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> list[dict[str, Any]]:
        url = f"{self._rest_url}/{table}"
        try:
            response = self._client.request(
                method,
                url,
                params=params,
                json=json,
                headers={**self._headers, **(headers or {})},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Supabase request failed",
                extra={
                    "table": table,
                    "method": method,
                    "status": e.response.status_code,
                    "error": e.response.text,
                },
            )
            raise StoreUpstreamError(f"Supabase {method} {table} failed: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error("Supabase unreachable", extra={"table": table, "method": method, "error": str(e)})
            raise StoreUpstreamError(f"Supabase {method} {table} failed: {e}") from e

        if not response.content:
            return []
        data = response.json()
        return data if isinstance(data, list) else [data]


def _single(rows: list[dict[str, Any]], table: str) -> dict[str, Any]:
    if not rows:
        raise StoreUpstreamError(f"Supabase returned no row for {table}")
    return rows[0]
