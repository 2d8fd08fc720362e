"""
Tests for the Supabase and Resend adapters against a mocked HTTP transport.
"""

from __future__ import annotations

import json
from decimal import Decimal

import httpx
import pytest

from storefront.application.exceptions import NotificationError, StoreUpstreamError
from storefront.application.use_cases.catalog import ListCatalogUseCase
from storefront.domain.entities.order import OrderDraft, OrderNotification, OrderStatus
from storefront.infrastructure.catalog.fallback_catalog import FALLBACK_SERVICES
from storefront.infrastructure.email.resend_notifier import ResendOrderNotifier
from storefront.infrastructure.supabase.supabase_catalog import SupabaseCatalog
from storefront.infrastructure.supabase.supabase_client import SupabaseClient
from storefront.infrastructure.supabase.supabase_content import SupabaseContentStore
from storefront.infrastructure.supabase.supabase_orders import SupabaseOrderRepository


SERVICE_ROW = {
    "id": "b1d2",
    "name": "PIN Registration",
    "price": "500.00",
    "category": "Tax Services",
    "description": None,
    "estimated_days": None,
    "is_active": True,
}


def _client(handler, requests: list[httpx.Request]) -> SupabaseClient:
    def record(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    http = httpx.Client(transport=httpx.MockTransport(record))
    return SupabaseClient(url="https://demo.supabase.co", api_key="anon-key", client=http)


def test_active_services_query():
    requests: list[httpx.Request] = []
    client = _client(lambda r: httpx.Response(200, json=[SERVICE_ROW]), requests)

    services = SupabaseCatalog(client).list_active_services()

    assert len(services) == 1
    assert services[0].price == Decimal("500.00")
    assert services[0].description == ""
    assert services[0].estimated_days == 1
    request = requests[0]
    assert request.url.path == "/rest/v1/services"
    assert request.url.params["is_active"] == "eq.true"
    assert request.url.params["order"] == "category"
    assert request.headers["apikey"] == "anon-key"
    assert request.headers["authorization"] == "Bearer anon-key"


def test_create_order_row():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        row = json.loads(request.content)[0]
        return httpx.Response(201, json=[{**row, "id": "42", "created_at": "2024-06-01T10:00:00Z"}])

    repo = SupabaseOrderRepository(_client(handler, requests))
    order = repo.create_order(
        OrderDraft(
            customer_phone="0712345678",
            service_names=("Good Conduct Certificate", "Web Development"),
            total_amount=Decimal(16500),
            transaction_id="TXN1",
        )
    )

    sent = json.loads(requests[0].content)[0]
    assert requests[0].method == "POST"
    assert requests[0].headers["prefer"] == "return=representation"
    assert sent["services"] == ["Good Conduct Certificate", "Web Development"]
    assert sent["mpesa_receipt"] == "TXN1"
    assert sent["payment_status"] == "completed"
    assert order.id == "42"
    assert order.total_amount == Decimal(16500)
    assert order.status == OrderStatus.pending


def test_update_order_status_patches_by_id():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json=[
                {
                    "id": "42",
                    "customer_phone": "0712345678",
                    "services": ["PIN Registration"],
                    "total_amount": 500,
                    "payment_status": "completed",
                    "transaction_id": "TXN1",
                    "created_at": "2024-06-01T10:00:00+00:00",
                    "status": "in-progress",
                }
            ],
        )

    order = SupabaseOrderRepository(_client(handler, requests)).update_status("42", OrderStatus.in_progress)

    assert requests[0].method == "PATCH"
    assert requests[0].url.params["id"] == "eq.42"
    assert json.loads(requests[0].content) == {"status": "in-progress"}
    assert order.status == OrderStatus.in_progress


def test_unknown_id_raises_key_error_like_the_local_stores():
    requests: list[httpx.Request] = []
    client = _client(lambda r: httpx.Response(200, json=[]), requests)

    with pytest.raises(KeyError):
        SupabaseOrderRepository(client).update_status("404", OrderStatus.completed)
    with pytest.raises(KeyError):
        SupabaseCatalog(client).update_service("404", {"name": "Scanning"})
    with pytest.raises(KeyError):
        SupabaseCatalog(client).delete_service("404")

    assert [r.method for r in requests] == ["PATCH", "PATCH", "DELETE"]
    assert requests[2].headers["prefer"] == "return=representation"


def test_find_queries_one_service_by_id():
    requests: list[httpx.Request] = []
    client = _client(lambda r: httpx.Response(200, json=[SERVICE_ROW]), requests)

    service = ListCatalogUseCase(catalog=SupabaseCatalog(client), fallback=FALLBACK_SERVICES).find("b1d2")

    assert service.name == "PIN Registration"
    assert requests[0].url.params["id"] == "eq.b1d2"


def test_http_error_becomes_store_upstream_error():
    requests: list[httpx.Request] = []
    client = _client(lambda r: httpx.Response(500, json={"message": "boom"}), requests)

    with pytest.raises(StoreUpstreamError):
        SupabaseCatalog(client).list_active_services()


def test_transport_error_falls_back_to_builtin_catalog():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    catalog = SupabaseCatalog(_client(handler, []))
    services = ListCatalogUseCase(catalog=catalog, fallback=FALLBACK_SERVICES).execute()
    assert [s.id for s in services] == [s.id for s in FALLBACK_SERVICES]


def test_content_update_sends_only_given_fields():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        return httpx.Response(200, json=[{"id": "7", "section_name": "hero_title", "title": "Hero", **body}])

    updated = SupabaseContentStore(_client(handler, requests)).update_content("7", content="New title")

    assert json.loads(requests[0].content) == {"content": "New title"}
    assert updated.content == "New title"
    assert updated.is_active is True


def test_resend_notifier_payload():
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": "email_1"})

    notifier = ResendOrderNotifier(
        api_key="re_test",
        sender="Connex <onboarding@resend.dev>",
        recipients=["owner@example.com"],
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    notifier.send_order_notification(
        OrderNotification(
            order_id="42",
            customer_phone="0712345678",
            service_names=("Good Conduct Certificate", "Web Development"),
            total=Decimal(16500),
            transaction_id="TXN1",
        )
    )

    payload = json.loads(requests[0].content)
    assert requests[0].url == "https://api.resend.com/emails"
    assert requests[0].headers["authorization"] == "Bearer re_test"
    assert payload["subject"] == "New Order Received - #42"
    assert payload["to"] == ["owner@example.com"]
    assert "<li>Web Development</li>" in payload["html"]
    assert "KSh 16,500" in payload["html"]


def test_resend_failure_raises_notification_error():
    notifier = ResendOrderNotifier(
        api_key="re_test",
        sender="Connex <onboarding@resend.dev>",
        recipients=["owner@example.com"],
        client=httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(422, json={}))),
    )
    with pytest.raises(NotificationError):
        notifier.send_order_notification(
            OrderNotification(
                order_id="1",
                customer_phone="0712345678",
                service_names=("PIN Registration",),
                total=Decimal(500),
                transaction_id="TXN2",
            )
        )
