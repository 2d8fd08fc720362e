import logging

from fastapi import FastAPI

from storefront.api.v1.admin import router as admin_router
from storefront.api.v1.checkout import router as checkout_router
from storefront.api.v1.storefront import router as storefront_router
from storefront.core.config import settings

class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in (
            "session_id",
            "order_id",
            "transaction_id",
            "service_id",
            "content_id",
            "email_id",
            "table",
            "method",
            "amount",
            "status",
            "reason",
            "error",
        ):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


handler = logging.StreamHandler()
handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

root = logging.getLogger()
root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
root.handlers.clear()
root.addHandler(handler)

app = FastAPI(title=f"{settings.BUSINESS_NAME} Storefront", version="1.0.0")

app.include_router(storefront_router, prefix="/api/v1", tags=["storefront"])
app.include_router(checkout_router, prefix="/api/v1", tags=["checkout"])
app.include_router(admin_router, prefix="/api/v1/admin", tags=["admin"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
