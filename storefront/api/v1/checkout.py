from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from storefront.api.v1.schemas import (
    AddToCartRequestSchema,
    AdminLoginRequestSchema,
    CheckoutStateSchema,
    PaymentRequestSchema,
    SessionResponseSchema,
)
from storefront.application.exceptions import (
    CheckoutInProgressError,
    EmptyCartError,
    InvalidCheckoutStateError,
    InvalidCredentialsError,
    PhoneNumberRequiredError,
)
from storefront.application.ports.session_store import CheckoutSessionStorePort
from storefront.application.use_cases.admin import AdminAuthUseCase
from storefront.application.use_cases.catalog import ListCatalogUseCase
from storefront.application.use_cases.checkout import CheckoutOrchestrator
from storefront.wiring.dependencies import (
    get_admin_auth_use_case,
    get_list_catalog_use_case,
    get_session_store,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def get_checkout(
    session_id: str,
    store: CheckoutSessionStorePort = Depends(get_session_store),
) -> CheckoutOrchestrator:
    checkout = store.get(session_id)
    if checkout is None:
        raise HTTPException(status_code=404, detail="Unknown session")
    return checkout


def _state(checkout: CheckoutOrchestrator) -> CheckoutStateSchema:
    return CheckoutStateSchema.from_snapshot(checkout.snapshot())


@router.post("/sessions", response_model=SessionResponseSchema, status_code=201)
def create_session(store: CheckoutSessionStorePort = Depends(get_session_store)):
    return SessionResponseSchema(session_id=store.get_or_create(None))


@router.get("/sessions/{session_id}/checkout", response_model=CheckoutStateSchema)
def checkout_state(checkout: CheckoutOrchestrator = Depends(get_checkout)):
    return _state(checkout)


@router.post("/sessions/{session_id}/cart/items", response_model=CheckoutStateSchema)
def add_to_cart(
    req: AddToCartRequestSchema,
    checkout: CheckoutOrchestrator = Depends(get_checkout),
    catalog: ListCatalogUseCase = Depends(get_list_catalog_use_case),
):
    service = catalog.find(req.service_id)
    if service is None:
        raise HTTPException(status_code=404, detail="Unknown service")
    try:
        checkout.add_service(service)
    except CheckoutInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _state(checkout)


@router.delete("/sessions/{session_id}/cart/items/{service_id}", response_model=CheckoutStateSchema)
def remove_from_cart(service_id: str, checkout: CheckoutOrchestrator = Depends(get_checkout)):
    try:
        checkout.remove_service(service_id)
    except CheckoutInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _state(checkout)


@router.post("/sessions/{session_id}/cart/open", response_model=CheckoutStateSchema)
def open_cart(checkout: CheckoutOrchestrator = Depends(get_checkout)):
    try:
        checkout.open_cart()
    except CheckoutInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _state(checkout)


@router.post("/sessions/{session_id}/cart/close", response_model=CheckoutStateSchema)
def close_cart(checkout: CheckoutOrchestrator = Depends(get_checkout)):
    checkout.close_cart()
    return _state(checkout)


@router.post("/sessions/{session_id}/checkout", response_model=CheckoutStateSchema)
def begin_checkout(checkout: CheckoutOrchestrator = Depends(get_checkout)):
    try:
        checkout.begin_checkout()
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CheckoutInProgressError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _state(checkout)


@router.post("/sessions/{session_id}/checkout/pay", response_model=CheckoutStateSchema, status_code=202)
async def pay(req: PaymentRequestSchema, checkout: CheckoutOrchestrator = Depends(get_checkout)):
    try:
        await checkout.start_payment(req.phone_number)
    except PhoneNumberRequiredError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (CheckoutInProgressError, InvalidCheckoutStateError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _state(checkout)


@router.post("/sessions/{session_id}/checkout/close", response_model=CheckoutStateSchema)
def close_checkout(checkout: CheckoutOrchestrator = Depends(get_checkout)):
    try:
        checkout.close_payment()
    except (CheckoutInProgressError, InvalidCheckoutStateError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _state(checkout)


@router.post("/sessions/{session_id}/admin/login", response_model=CheckoutStateSchema)
def admin_login(
    req: AdminLoginRequestSchema,
    checkout: CheckoutOrchestrator = Depends(get_checkout),
    auth: AdminAuthUseCase = Depends(get_admin_auth_use_case),
):
    try:
        email = auth.verify(req.email, req.password)
    except InvalidCredentialsError as e:
        logger.warning("Admin login failed", extra={"session_id": checkout.context.session_id})
        raise HTTPException(status_code=401, detail=str(e))
    checkout.login_admin(email)
    logger.info("Admin logged in", extra={"session_id": checkout.context.session_id})
    return _state(checkout)


@router.post("/sessions/{session_id}/admin/logout", status_code=204)
def admin_logout(checkout: CheckoutOrchestrator = Depends(get_checkout)) -> Response:
    checkout.logout_admin()
    return Response(status_code=204)
