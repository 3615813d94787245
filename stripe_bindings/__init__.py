"""Typed Stripe API bindings with blocking and asyncio clients."""

from stripe_bindings.client import AsyncClient, Client, create_client
from stripe_bindings.core.config import Settings, get_settings
from stripe_bindings.core.errors import (
    ApiError,
    ConfigurationError,
    DeserializationError,
    HttpStatusError,
    StripeError,
    StripeTimeoutError,
    TransportError,
    UnsupportedError,
    WebhookVerificationError,
)
from stripe_bindings.params.base import RequestOptions
from stripe_bindings.transport.base import BINDINGS_VERSION, AppInfo, TransportConfig
from stripe_bindings.webhooks import WebhookVerifier, construct_event

__version__ = BINDINGS_VERSION

__all__ = [
    "ApiError",
    "AppInfo",
    "AsyncClient",
    "Client",
    "ConfigurationError",
    "DeserializationError",
    "HttpStatusError",
    "RequestOptions",
    "Settings",
    "StripeError",
    "StripeTimeoutError",
    "TransportConfig",
    "TransportError",
    "UnsupportedError",
    "WebhookVerificationError",
    "WebhookVerifier",
    "__version__",
    "construct_event",
    "create_client",
    "get_settings",
]
