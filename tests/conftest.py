from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from urllib.parse import parse_qsl

import httpx
import pytest

from stripe_bindings.client import AsyncClient, Client
from stripe_bindings.core.config import get_settings
from stripe_bindings.transport import AsyncHttpxTransport, HttpxTransport, TransportConfig


TEST_API_KEY = "sk_test_4eC39HqLyjWDarjtT1zdp7dc"

Reply = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


def json_response(status_code: int, payload: Any, *, request_id: str = "req_test_1") -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json", "Request-Id": request_id},
    )


class StripeMock:
    """In-process stand-in for the Stripe API that records every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], List[Reply]] = {}

    def add(self, method: str, path: str, reply: Reply) -> None:
        self._routes.setdefault((method.upper(), path), []).append(reply)

    def add_json(self, method: str, path: str, payload: Any, status_code: int = 200) -> None:
        self.add(method, path, json_response(status_code, payload))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        replies = self._routes.get((request.method, request.url.path))
        if not replies:
            return json_response(404, {"error": {"type": "invalid_request_error", "message": "no route"}})
        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if callable(reply):
            return reply(request)
        return reply

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def form(self, request: Optional[httpx.Request] = None) -> List[Tuple[str, str]]:
        target = request or self.last
        return parse_qsl(target.content.decode("utf-8"), keep_blank_values=True)

    def query(self, request: Optional[httpx.Request] = None) -> List[Tuple[str, str]]:
        target = request or self.last
        return parse_qsl(target.url.query.decode("utf-8"), keep_blank_values=True)


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch) -> None:
    for key in ("STRIPE_API_KEY", "STRIPE_EXECUTION_MODE", "STRIPE_TLS_BACKEND", "STRIPE_WEBHOOK_SECRET"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def stripe_mock() -> StripeMock:
    return StripeMock()


@pytest.fixture
def transport_config() -> TransportConfig:
    return TransportConfig(api_base="https://stripe.test")


@pytest.fixture
def client(stripe_mock: StripeMock, transport_config: TransportConfig) -> Client:
    http_client = httpx.Client(transport=httpx.MockTransport(stripe_mock.handler))
    return Client(TEST_API_KEY, transport_config, transport=HttpxTransport(transport_config, client=http_client))


@pytest.fixture
def async_client(stripe_mock: StripeMock, transport_config: TransportConfig) -> AsyncClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(stripe_mock.handler))
    transport = AsyncHttpxTransport(transport_config, client=http_client)
    return AsyncClient(TEST_API_KEY, transport_config, transport=transport)


def charge_payload(charge_id: str = "ch_123", **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": charge_id,
        "object": "charge",
        "amount": 2000,
        "currency": "usd",
        "status": "succeeded",
        "captured": True,
        "customer": "cus_123",
        "metadata": {},
    }
    payload.update(overrides)
    return payload
