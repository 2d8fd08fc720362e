from functools import lru_cache
import logging

from storefront.core.config import settings
from storefront.application.ports.catalog import CatalogPort
from storefront.application.ports.content_store import ContentStorePort
from storefront.application.ports.notification import NotificationPort
from storefront.application.ports.order_repository import OrderRepositoryPort
from storefront.application.ports.session_store import CheckoutSessionStorePort
from storefront.application.use_cases.admin import AdminAuthUseCase, AdminConsoleUseCase
from storefront.application.use_cases.catalog import HeroContentUseCase, ListCatalogUseCase
from storefront.application.use_cases.checkout import CheckoutOrchestrator
from storefront.application.use_cases.submit_order import SubmitOrderUseCase
from storefront.domain.entities.home_content import HeroContent, HomeContent
from storefront.domain.entities.session_context import SessionContext
from storefront.infrastructure.catalog.fallback_catalog import FALLBACK_SERVICES
from storefront.infrastructure.email.mock_notifier import MockOrderNotifier
from storefront.infrastructure.email.resend_notifier import ResendOrderNotifier
from storefront.infrastructure.payments.mpesa_simulator import SimulatedMpesaGateway
from storefront.infrastructure.store.json_order_store import JsonOrderRepository
from storefront.infrastructure.store.memory_sessions import MemoryCheckoutSessionStore
from storefront.infrastructure.store.memory_store import (
    MemoryCatalog,
    MemoryContentStore,
    MemoryOrderRepository,
)
from storefront.infrastructure.supabase.supabase_catalog import SupabaseCatalog
from storefront.infrastructure.supabase.supabase_client import SupabaseClient
from storefront.infrastructure.supabase.supabase_content import SupabaseContentStore
from storefront.infrastructure.supabase.supabase_orders import SupabaseOrderRepository


logger = logging.getLogger(__name__)

_session_store: CheckoutSessionStorePort | None = None


def _supabase_configured() -> bool:
    return bool(settings.SUPABASE_URL and settings.SUPABASE_ANON_KEY)


@lru_cache
def get_supabase_client() -> SupabaseClient:
    return SupabaseClient(url=settings.SUPABASE_URL or "", api_key=settings.SUPABASE_ANON_KEY or "")


@lru_cache
def get_catalog() -> CatalogPort:
    if _supabase_configured():
        return SupabaseCatalog(get_supabase_client())
    logger.info("Using MemoryCatalog (Supabase not configured)")
    return MemoryCatalog(FALLBACK_SERVICES)


@lru_cache
def get_order_repository() -> OrderRepositoryPort:
    if _supabase_configured():
        return SupabaseOrderRepository(get_supabase_client())
    if settings.ENV.lower() in {"dev", "local"}:
        return JsonOrderRepository()
    return MemoryOrderRepository()


@lru_cache
def get_content_store() -> ContentStorePort:
    if _supabase_configured():
        return SupabaseContentStore(get_supabase_client())
    return MemoryContentStore(
        [
            HomeContent(id="1", section_name="hero_subtitle", title="Hero subtitle", content=settings.BUSINESS_TAGLINE),
            HomeContent(id="2", section_name="hero_title", title="Hero title", content=settings.BUSINESS_NAME),
        ]
    )


@lru_cache
def get_notifier() -> NotificationPort:
    if not settings.RESEND_API_KEY:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockOrderNotifier (RESEND_API_KEY missing, ENV=dev/local)")
        else:
            logger.warning("RESEND_API_KEY missing; order emails will only be logged")
        return MockOrderNotifier()
    return ResendOrderNotifier(
        api_key=settings.RESEND_API_KEY,
        sender=settings.ORDER_EMAIL_FROM,
        recipients=[r.strip() for r in settings.ORDER_EMAIL_TO.split(",") if r.strip()],
        base_url=settings.RESEND_BASE_URL,
        currency=settings.CURRENCY,
    )


def get_list_catalog_use_case() -> ListCatalogUseCase:
    return ListCatalogUseCase(catalog=get_catalog(), fallback=FALLBACK_SERVICES)


def get_hero_content_use_case() -> HeroContentUseCase:
    return HeroContentUseCase(
        content=get_content_store(),
        default=HeroContent(title=settings.BUSINESS_NAME, subtitle=settings.BUSINESS_TAGLINE),
    )


def get_submit_order_use_case() -> SubmitOrderUseCase:
    return SubmitOrderUseCase(orders=get_order_repository(), notifier=get_notifier())


def build_checkout(context: SessionContext) -> CheckoutOrchestrator:
    return CheckoutOrchestrator(
        context=context,
        gateway=SimulatedMpesaGateway(
            processing_seconds=settings.PAYMENT_PROCESSING_SECONDS,
            success_display_seconds=settings.PAYMENT_SUCCESS_DISPLAY_SECONDS,
        ),
        submit_order=get_submit_order_use_case(),
    )


def get_session_store() -> CheckoutSessionStorePort:
    global _session_store
    if _session_store is None:
        _session_store = MemoryCheckoutSessionStore(factory=build_checkout, max_sessions=settings.MAX_CHECKOUT_SESSIONS)
    return _session_store


def get_admin_auth_use_case() -> AdminAuthUseCase:
    return AdminAuthUseCase(admin_email=settings.ADMIN_EMAIL, admin_password=settings.ADMIN_PASSWORD)


def get_admin_console_use_case() -> AdminConsoleUseCase:
    return AdminConsoleUseCase(
        catalog=get_catalog(),
        orders=get_order_repository(),
        content=get_content_store(),
        business_name=settings.BUSINESS_NAME,
    )
