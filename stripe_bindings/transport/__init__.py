"""HTTP transports for the blocking and asynchronous clients."""

from stripe_bindings.transport.async_transport import AsyncHttpxTransport
from stripe_bindings.transport.base import (
    AppInfo,
    AsyncTransport,
    RawResponse,
    Transport,
    TransportConfig,
    build_headers,
    build_target,
)
from stripe_bindings.transport.httpx_transport import HttpxTransport
from stripe_bindings.transport.tls import CertifiTlsBackend, SystemTlsBackend, TlsBackend, get_tls_backend

__all__ = [
    "AppInfo",
    "AsyncHttpxTransport",
    "AsyncTransport",
    "CertifiTlsBackend",
    "HttpxTransport",
    "RawResponse",
    "SystemTlsBackend",
    "TlsBackend",
    "Transport",
    "TransportConfig",
    "build_headers",
    "build_target",
    "get_tls_backend",
]
