"""Non-blocking transport backed by a pooled ``httpx.AsyncClient``."""

from __future__ import annotations

import time
from typing import Optional

import httpx

from stripe_bindings.core.errors import StripeTimeoutError, TransportError
from stripe_bindings.core.logger import get_logger
from stripe_bindings.params.base import RequestOptions
from stripe_bindings.transport.base import (
    AsyncTransport,
    RawResponse,
    TransportConfig,
    build_headers,
    build_target,
)
from stripe_bindings.transport.httpx_transport import (
    build_limits,
    build_timeout,
    call_timeout_seconds,
    enforce_deadline,
    to_raw_response,
)
from stripe_bindings.transport.tls import get_tls_backend


log = get_logger("stripe_bindings.transport")


class AsyncHttpxTransport(AsyncTransport):
    """Suspends the calling task at the network boundary.

    Cancelling the awaiting task abandons the in-flight request and returns
    its connection to the pool.
    """

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        *,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._config = config or TransportConfig()
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(
                timeout=build_timeout(self._config, None),
                limits=build_limits(self._config),
                verify=get_tls_backend(self._config.tls_backend).ssl_context(),
            )
        self._client = client

    @property
    def config(self) -> TransportConfig:
        return self._config

    async def execute(
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
            async with self._client.stream(
                method,
                url,
                content=body,
                headers=headers,
                timeout=build_timeout(self._config, options),
            ) as response:
                chunks = []
                async for chunk in response.aiter_bytes():
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

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
