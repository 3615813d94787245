"""Runtime configuration for stripe_bindings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_BASE = "https://api.stripe.com"
DEFAULT_API_VERSION = "2020-08-27"
TLS_BACKENDS = {"certifi", "system"}
EXECUTION_MODES = {"blocking", "async"}


class Settings(BaseSettings):
    """Client settings loaded from ``STRIPE_*`` environment variables."""

    api_key: str = ""
    api_base: str = DEFAULT_API_BASE
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = 80.0
    connect_timeout_seconds: float = 30.0
    max_connections: int = 10
    tls_backend: str = "certifi"
    execution_mode: str = "blocking"
    webhook_secret: str = ""
    webhook_tolerance_seconds: int = 300
    log_level: str = "INFO"
    app_name: str = ""
    app_version: str = ""
    app_url: str = ""

    model_config = SettingsConfigDict(
        env_prefix="STRIPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def _validate(settings: Settings) -> Settings:
    if not settings.api_base.strip().startswith(("http://", "https://")):
        raise ValueError("STRIPE_API_BASE must be an http(s) URL.")
    if not settings.api_version.strip():
        raise ValueError("STRIPE_API_VERSION must not be empty.")
    if settings.timeout_seconds <= 0:
        raise ValueError("STRIPE_TIMEOUT_SECONDS must be positive.")
    if settings.connect_timeout_seconds <= 0:
        raise ValueError("STRIPE_CONNECT_TIMEOUT_SECONDS must be positive.")
    if settings.max_connections <= 0:
        raise ValueError("STRIPE_MAX_CONNECTIONS must be positive.")
    if settings.webhook_tolerance_seconds <= 0:
        raise ValueError("STRIPE_WEBHOOK_TOLERANCE_SECONDS must be positive.")
    if settings.tls_backend.strip().lower() not in TLS_BACKENDS:
        raise ValueError("STRIPE_TLS_BACKEND must be one of: certifi, system.")
    if settings.execution_mode.strip().lower() not in EXECUTION_MODES:
        raise ValueError("STRIPE_EXECUTION_MODE must be one of: blocking, async.")
    if settings.app_version and not settings.app_name:
        raise ValueError("STRIPE_APP_NAME is required when STRIPE_APP_VERSION is set.")
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return validated settings as a cached singleton."""

    return _validate(Settings())
