from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from storefront.application.use_cases.checkout import CheckoutSnapshot, CheckoutView
from storefront.domain.entities.home_content import HomeContent
from storefront.domain.entities.order import Order, OrderStatus
from storefront.domain.entities.payment_attempt import PaymentStatus
from storefront.domain.entities.service import Service


class ServiceSchema(BaseModel):
    id: str
    name: str
    price: Decimal
    category: str
    description: str = ""
    estimated_days: int = 1
    is_active: bool = True

    @staticmethod
    def from_entity(service: Service) -> "ServiceSchema":
        return ServiceSchema(
            id=service.id,
            name=service.name,
            price=service.price,
            category=service.category,
            description=service.description,
            estimated_days=service.estimated_days,
            is_active=service.is_active,
        )


class CatalogResponseSchema(BaseModel):
    categories: list[str]
    services: list[ServiceSchema]


class HeroSchema(BaseModel):
    title: str
    subtitle: str


class SessionResponseSchema(BaseModel):
    session_id: str


class AddToCartRequestSchema(BaseModel):
    service_id: str


class PaymentRequestSchema(BaseModel):
    phone_number: str = ""


class PaymentSchema(BaseModel):
    status: PaymentStatus
    phone_number: str
    amount: Decimal
    transaction_id: str | None = None


class ConfirmationSchema(BaseModel):
    title: str
    description: str
    persisted: bool
    order_id: str | None = None


class CheckoutStateSchema(BaseModel):
    session_id: str
    admin_logged_in: bool
    view: CheckoutView
    items: list[ServiceSchema]
    count: int
    total: Decimal
    payment: PaymentSchema
    confirmation: ConfirmationSchema | None = None

    @staticmethod
    def from_snapshot(snapshot: CheckoutSnapshot) -> "CheckoutStateSchema":
        result = snapshot.last_result
        return CheckoutStateSchema(
            session_id=snapshot.session.session_id,
            admin_logged_in=snapshot.session.admin_logged_in,
            view=snapshot.view,
            items=[ServiceSchema.from_entity(s) for s in snapshot.services],
            count=len(snapshot.services),
            total=snapshot.total,
            payment=PaymentSchema(
                status=snapshot.payment.status,
                phone_number=snapshot.payment.phone_number,
                amount=snapshot.payment.amount,
                transaction_id=snapshot.payment.transaction_id,
            ),
            confirmation=(
                ConfirmationSchema(
                    title=result.title,
                    description=result.description,
                    persisted=result.persisted,
                    order_id=result.order.id if result.order else None,
                )
                if result else None
            ),
        )


class AdminLoginRequestSchema(BaseModel):
    email: str
    password: str


class ServiceWriteSchema(BaseModel):
    name: str | None = None
    description: str | None = None
    price: Decimal | None = Field(default=None, ge=0)
    category: str | None = None
    estimated_days: int | None = Field(default=None, ge=1)
    is_active: bool | None = None


class OrderSchema(BaseModel):
    id: str
    customer_phone: str
    services: list[str]
    total_amount: Decimal
    payment_status: str
    transaction_id: str
    status: OrderStatus
    created_at: datetime

    @staticmethod
    def from_entity(order: Order) -> "OrderSchema":
        return OrderSchema(
            id=order.id,
            customer_phone=order.customer_phone,
            services=list(order.service_names),
            total_amount=order.total_amount,
            payment_status=order.payment_status,
            transaction_id=order.transaction_id,
            status=order.status,
            created_at=order.created_at,
        )


class OrderStatusUpdateSchema(BaseModel):
    status: OrderStatus


class NotifyLinkSchema(BaseModel):
    url: str


class HomeContentSchema(BaseModel):
    id: str
    section_name: str
    title: str
    content: str
    is_active: bool

    @staticmethod
    def from_entity(content: HomeContent) -> "HomeContentSchema":
        return HomeContentSchema(
            id=content.id,
            section_name=content.section_name,
            title=content.title,
            content=content.content,
            is_active=content.is_active,
        )


class HomeContentUpdateSchema(BaseModel):
    title: str | None = None
    content: str | None = None
    is_active: bool | None = None
