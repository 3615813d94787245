"""TLS trust backends; exactly one is chosen when a transport is built."""

from __future__ import annotations

import ssl
from typing import Protocol

import certifi

from stripe_bindings.core.errors import ConfigurationError


class TlsBackend(Protocol):
    name: str

    def ssl_context(self) -> ssl.SSLContext:
        raise NotImplementedError


class CertifiTlsBackend(TlsBackend):
    """Verifies against the Mozilla CA bundle shipped by certifi."""

    name = "certifi"

    def ssl_context(self) -> ssl.SSLContext:
        return ssl.create_default_context(cafile=certifi.where())


class SystemTlsBackend(TlsBackend):
    """Verifies against the operating system's trust store."""

    name = "system"

    def ssl_context(self) -> ssl.SSLContext:
        return ssl.create_default_context()


_BACKENDS = {
    CertifiTlsBackend.name: CertifiTlsBackend,
    SystemTlsBackend.name: SystemTlsBackend,
}


def get_tls_backend(name: str) -> TlsBackend:
    backend = _BACKENDS.get(name.strip().lower())
    if backend is None:
        raise ConfigurationError(f"unknown_tls_backend name={name}")
    return backend()
