from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Club Cash Register"
    ENVIRONMENT: str = "local"
    CORS_ALLOW_ORIGINS: str = "*"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./club_pos.db"
    DATABASE_ECHO: bool = False
    DATABASE_POOL_SIZE: int = 20
    DATABASE_POOL_TIMEOUT_SECONDS: float = 2.0
    DATABASE_MAX_OVERFLOW: int = 10
    DATABASE_BUSY_TIMEOUT_SECONDS: float = 5.0

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ==============================
    # Security
    # ==============================
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_PASSWORD_HEADER: str = "X-Admin-Password"

    # ==============================
    # Point of sale
    # ==============================
    HOUSE_EVENT_NAME: str = "Hausintern"
    DEFAULT_DRINK_COLOR: str = "#667eea"
    TRANSACTIONS_DEFAULT_LIMIT: int = 50

    # ==============================
    # Inventory
    # ==============================
    LOW_STOCK_THRESHOLD: int = 10
    HISTORY_DEFAULT_LIMIT: int = 100


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
