"""
Centralized configuration for the storefront customer API.

All settings are loaded from environment variables with sensible defaults.
Related settings share a prefix (e.g., SESSION_*, SUPABASE_*, TOKEN_*).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront Customer API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    locale: str = "en"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (customer and token storage)
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres DSN, used by run_migrations.py

    # Session channel (signed cookie)
    session_secret_key: str = "change-me-in-production"
    session_cookie: str = "storefront_session"
    session_lifetime_minutes: int = 120
    session_https_only: bool = False

    # Customer authentication
    customer_guard: str = "customer"
    token_name: str = "customer-api"
    token_expiration_minutes: Optional[int] = None  # None = tokens never expire
    login_url: str = "/customer/login"
    resend_cookie_minutes: int = 1

    # Paths excluded from CSRF verification (no leading slash, "*" wildcards)
    csrf_except: list[str] = ["api/customer/login"]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
