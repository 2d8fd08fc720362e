from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SUPABASE_URL: str | None = None
    SUPABASE_ANON_KEY: str | None = None

    RESEND_API_KEY: str | None = None
    RESEND_BASE_URL: str = "https://api.resend.com"
    ORDER_EMAIL_FROM: str = "Connex Cyber Services <onboarding@resend.dev>"
    ORDER_EMAIL_TO: str = "orders@example.com"

    PAYMENT_PROCESSING_SECONDS: float = 3.0
    PAYMENT_SUCCESS_DISPLAY_SECONDS: float = 2.0
    MAX_CHECKOUT_SESSIONS: int = 10_000

    ADMIN_EMAIL: str = "admin@connex.local"
    ADMIN_PASSWORD: str | None = None

    BUSINESS_NAME: str = "CONNEX CYBER SERVICES"
    BUSINESS_TAGLINE: str = "Your trusted partner for Government Services, IT Solutions, and Tax Services"
    CURRENCY: str = "KSh"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
