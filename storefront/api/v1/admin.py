from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException, Response

from storefront.api.v1.schemas import (
    HomeContentSchema,
    HomeContentUpdateSchema,
    NotifyLinkSchema,
    OrderSchema,
    OrderStatusUpdateSchema,
    ServiceSchema,
    ServiceWriteSchema,
)
from storefront.application.exceptions import AdminAccessDenied, StoreUpstreamError
from storefront.application.ports.session_store import CheckoutSessionStorePort
from storefront.application.use_cases.admin import AdminConsoleUseCase
from storefront.domain.entities.session_context import SessionContext
from storefront.wiring.dependencies import get_admin_console_use_case, get_session_store

router = APIRouter()


def get_admin_session(
    x_session_id: str | None = Header(None),
    store: CheckoutSessionStorePort = Depends(get_session_store),
) -> SessionContext:
    checkout = store.get(x_session_id) if x_session_id else None
    if checkout is None or not checkout.admin_actions_available():
        raise HTTPException(status_code=403, detail="Admin login required")
    return checkout.context


def _raise_for(e: Exception) -> None:
    if isinstance(e, AdminAccessDenied):
        raise HTTPException(status_code=403, detail=str(e))
    if isinstance(e, KeyError):
        raise HTTPException(status_code=404, detail="Not found")
    if isinstance(e, StoreUpstreamError):
        raise HTTPException(status_code=502, detail=str(e))
    raise e


@router.get("/services", response_model=list[ServiceSchema])
def list_services(
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        return [ServiceSchema.from_entity(s) for s in uc.list_services(session)]
    except (AdminAccessDenied, StoreUpstreamError) as e:
        _raise_for(e)


@router.post("/services", response_model=ServiceSchema, status_code=201)
def create_service(
    req: ServiceWriteSchema,
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        return ServiceSchema.from_entity(uc.save_service(session, req.model_dump()))
    except (AdminAccessDenied, StoreUpstreamError) as e:
        _raise_for(e)


@router.patch("/services/{service_id}", response_model=ServiceSchema)
def update_service(
    service_id: str,
    req: ServiceWriteSchema,
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        return ServiceSchema.from_entity(uc.save_service(session, req.model_dump(exclude_none=True), service_id))
    except (AdminAccessDenied, KeyError, StoreUpstreamError) as e:
        _raise_for(e)


@router.delete("/services/{service_id}", status_code=204)
def delete_service(
    service_id: str,
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
) -> Response:
    try:
        uc.delete_service(session, service_id)
    except (AdminAccessDenied, KeyError, StoreUpstreamError) as e:
        _raise_for(e)
    return Response(status_code=204)


@router.get("/orders", response_model=list[OrderSchema])
def list_orders(
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        return [OrderSchema.from_entity(o) for o in uc.list_orders(session)]
    except (AdminAccessDenied, StoreUpstreamError) as e:
        _raise_for(e)


@router.patch("/orders/{order_id}", response_model=OrderSchema)
def update_order_status(
    order_id: str,
    req: OrderStatusUpdateSchema,
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        return OrderSchema.from_entity(uc.update_order_status(session, order_id, req.status))
    except (AdminAccessDenied, KeyError, StoreUpstreamError) as e:
        _raise_for(e)


@router.get("/orders/{order_id}/notify-link", response_model=NotifyLinkSchema)
def order_notify_link(
    order_id: str,
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        order = next((o for o in uc.list_orders(session) if o.id == order_id), None)
        if order is None:
            raise KeyError(order_id)
        return NotifyLinkSchema(url=uc.whatsapp_link(session, order.customer_phone, order.id))
    except (AdminAccessDenied, KeyError, StoreUpstreamError) as e:
        _raise_for(e)


@router.get("/content", response_model=list[HomeContentSchema])
def list_content(
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        return [HomeContentSchema.from_entity(c) for c in uc.list_content(session)]
    except (AdminAccessDenied, StoreUpstreamError) as e:
        _raise_for(e)


@router.patch("/content/{content_id}", response_model=HomeContentSchema)
def update_content(
    content_id: str,
    req: HomeContentUpdateSchema,
    session: SessionContext = Depends(get_admin_session),
    uc: AdminConsoleUseCase = Depends(get_admin_console_use_case),
):
    try:
        updated = uc.update_content(session, content_id, req.title, req.content, req.is_active)
        return HomeContentSchema.from_entity(updated)
    except (AdminAccessDenied, KeyError, StoreUpstreamError) as e:
        _raise_for(e)
