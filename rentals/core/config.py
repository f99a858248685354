"""Application configuration settings."""

import os
from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_default_database_url() -> str:
    """Get the default database URL, using Fly Volume path if available."""
    if os.path.isdir("/data"):
        return "sqlite:////data/rentals.db"
    return "sqlite:///./rentals.db"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

    PROJECT_NAME: str = "Rentals"
    VERSION: str = "0.1.0"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Database - defaults to Fly Volume path if /data exists
    DATABASE_URL: str = _get_default_database_url()

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "standard"  # "standard" or "json"

    # Platform subscription: fee charged per owned property
    SUBSCRIPTION_UNIT_RATE: Decimal = Decimal("100000")

    # Mercado Pago
    MERCADO_PAGO_API_URL: str = "https://api.mercadopago.com"
    MERCADO_PAGO_ACCESS_TOKEN: str | None = None
    MP_CLIENT_ID: str | None = None
    MP_CLIENT_SECRET: str | None = None
    MP_REDIRECT_URI: str = "http://localhost:8000/api/mercado-pago/callback"
    MERCADO_PAGO_TIMEOUT: float = 10.0
    CURRENCY_ID: str = "COP"
    MARKETPLACE_NAME: str = "Limitless Holdings"

    # Frontend used for checkout back URLs and OAuth redirects
    FRONTEND_URL: str = "http://localhost:3000"


settings = Settings()
