"""Blocking transport backed by a pooled ``httpx.Client``."""

from __future__ import annotations

import time
from typing import Optional

import httpx

from stripe_bindings.core.errors import StripeTimeoutError, TransportError
from stripe_bindings.core.logger import get_logger
from stripe_bindings.params.base import RequestOptions
from stripe_bindings.transport.base import (
    RawResponse,
    Transport,
    TransportConfig,
    build_headers,
    build_target,
)
from stripe_bindings.transport.tls import get_tls_backend


log = get_logger("stripe_bindings.transport")


def call_timeout_seconds(config: TransportConfig, options: Optional[RequestOptions]) -> float:
    if options is not None and options.timeout_seconds is not None:
        return options.timeout_seconds
    return config.timeout_seconds


def build_timeout(config: TransportConfig, options: Optional[RequestOptions]) -> httpx.Timeout:
    """Per-phase httpx limits; the whole call is bounded by ``enforce_deadline``."""

    total = call_timeout_seconds(config, options)
    return httpx.Timeout(total, connect=min(total, config.connect_timeout_seconds))


def enforce_deadline(deadline: float, method: str, path: str) -> None:
    if time.monotonic() > deadline:
        log.warning("stripe_request_failed", method=method, path=path, error="deadline")
        raise StripeTimeoutError(f"stripe_request_timeout method={method} path={path}")


def build_limits(config: TransportConfig) -> httpx.Limits:
    return httpx.Limits(
        max_connections=config.max_connections,
        max_keepalive_connections=config.max_connections,
    )


def to_raw_response(response: httpx.Response, body: bytes) -> RawResponse:
    return RawResponse(
        status_code=response.status_code,
        body=body,
        headers={key.lower(): value for key, value in response.headers.items()},
    )


class HttpxTransport(Transport):
    """Issues each call on the calling thread; safe to share across threads."""

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._owns_client = client is None
        if client is None:
            client = httpx.Client(
                timeout=build_timeout(self._config, None),
                limits=build_limits(self._config),
                verify=get_tls_backend(self._config.tls_backend).ssl_context(),
            )
        self._client = client

    @property
    def config(self) -> TransportConfig:
        return self._config

    def execute(
        self,
        method: str,
        path: str,
        encoded_params: str,
        api_key: str,
        *,
        options: Optional[RequestOptions] = None,
    ) -> RawResponse:
        url, body = build_target(self._config.api_base, method, path, encoded_params)
        headers = build_headers(self._config, api_key, method, options)
        started = time.monotonic()
        deadline = started + call_timeout_seconds(self._config, options)
        log.debug("stripe_request_sent", method=method, path=path)
        try:
            with self._client.stream(
                method,
                url,
                content=body,
                headers=headers,
                timeout=build_timeout(self._config, options),
            ) as response:
                chunks = []
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    enforce_deadline(deadline, method, path)
                enforce_deadline(deadline, method, path)
                raw = to_raw_response(response, b"".join(chunks))
        except httpx.TimeoutException as exc:
            log.warning("stripe_request_failed", method=method, path=path, error="timeout")
            raise StripeTimeoutError(f"stripe_request_timeout method={method} path={path}") from exc
        except httpx.TransportError as exc:
            log.warning("stripe_request_failed", method=method, path=path, error=exc.__class__.__name__)
            raise TransportError(f"stripe_request_failed method={method} path={path} error={exc}") from exc

        log.debug(
            "stripe_response_received",
            method=method,
            path=path,
            status=raw.status_code,
            request_id=raw.request_id,
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )
        return raw

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
