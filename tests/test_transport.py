from __future__ import annotations

import json
import ssl

import httpx
import pytest

from stripe_bindings.core.errors import ConfigurationError, StripeTimeoutError, TransportError
from stripe_bindings.params import RequestOptions
from stripe_bindings.transport import httpx_transport
from stripe_bindings.transport import (
    AppInfo,
    HttpxTransport,
    TransportConfig,
    build_headers,
    build_target,
    get_tls_backend,
)

from conftest import TEST_API_KEY, json_response


def test_build_target_puts_params_in_body_or_query() -> None:
    url, body = build_target("https://api.stripe.com/", "POST", "/charges", "amount=100")
    assert url == "https://api.stripe.com/v1/charges"
    assert body == b"amount=100"

    url, body = build_target("https://api.stripe.com", "GET", "/charges", "limit=3")
    assert url == "https://api.stripe.com/v1/charges?limit=3"
    assert body is None

    url, body = build_target("https://api.stripe.com", "DELETE", "/customers/cus_1", "")
    assert url == "https://api.stripe.com/v1/customers/cus_1"
    assert body is None


def test_build_headers_carries_auth_version_and_options() -> None:
    config = TransportConfig(app_info=AppInfo(name="shop", version="1.2", url="https://shop.example"))
    options = RequestOptions(idempotency_key="order-6735", stripe_account="acct_123")

    headers = build_headers(config, TEST_API_KEY, "POST", options)

    assert headers["Authorization"] == f"Bearer {TEST_API_KEY}"
    assert headers["Stripe-Version"] == config.api_version
    assert headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert headers["Idempotency-Key"] == "order-6735"
    assert headers["Stripe-Account"] == "acct_123"
    assert headers["User-Agent"].endswith("shop/1.2 (https://shop.example)")
    client_agent = json.loads(headers["X-Stripe-Client-User-Agent"])
    assert client_agent["lang"] == "python"
    assert client_agent["application"]["name"] == "shop"


def test_build_headers_omits_optional_headers_on_get() -> None:
    headers = build_headers(TransportConfig(), TEST_API_KEY, "GET")

    assert "Content-Type" not in headers
    assert "Idempotency-Key" not in headers
    assert "Stripe-Account" not in headers


def test_build_headers_requires_api_key() -> None:
    with pytest.raises(ConfigurationError):
        build_headers(TransportConfig(), "  ", "GET")


def test_transport_config_rejects_bad_limits() -> None:
    with pytest.raises(ConfigurationError):
        TransportConfig(timeout_seconds=0)
    with pytest.raises(ConfigurationError):
        TransportConfig(max_connections=0)


def test_tls_backends_yield_ssl_contexts() -> None:
    system = get_tls_backend("system").ssl_context()
    bundled = get_tls_backend("CERTIFI").ssl_context()

    assert isinstance(system, ssl.SSLContext)
    assert isinstance(bundled, ssl.SSLContext)
    assert system.verify_mode == ssl.CERT_REQUIRED

    with pytest.raises(ConfigurationError):
        get_tls_backend("schannel")


def _transport(handler) -> HttpxTransport:
    config = TransportConfig(api_base="https://stripe.test")
    return HttpxTransport(config, client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_execute_returns_raw_response_with_request_id() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return json_response(200, {"id": "cus_1"}, request_id="req_abc")

    raw = _transport(handler).execute("GET", "/customers/cus_1", "expand[0]=sources", TEST_API_KEY)

    assert raw.status_code == 200
    assert raw.request_id == "req_abc"
    assert json.loads(raw.body) == {"id": "cus_1"}
    assert seen[0].url.path == "/v1/customers/cus_1"
    assert seen[0].url.params["expand[0]"] == "sources"


def test_timeout_is_reported_as_timeout_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(StripeTimeoutError, match="stripe_request_timeout"):
        _transport(handler).execute("GET", "/charges", "", TEST_API_KEY)


def test_connection_failure_is_reported_as_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError, match="stripe_request_failed"):
        _transport(handler).execute("POST", "/charges", "amount=1", TEST_API_KEY)


def test_per_call_timeout_reaches_httpx() -> None:
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.extensions["timeout"])
        return json_response(200, {})

    transport = _transport(handler)
    transport.execute("GET", "/balance", "", TEST_API_KEY, options=RequestOptions(timeout_seconds=2.5))

    assert seen[0]["read"] == 2.5
    assert seen[0]["connect"] == 2.5


def test_close_leaves_injected_client_open() -> None:
    http_client = httpx.Client(transport=httpx.MockTransport(lambda request: json_response(200, {})))
    transport = HttpxTransport(TransportConfig(), client=http_client)

    transport.close()

    assert http_client.is_closed is False
    http_client.close()


class _FakeClock:
    def __init__(self, step: float) -> None:
        self.now = 0.0
        self.step = step

    def monotonic(self) -> float:
        current = self.now
        self.now += self.step
        return current


def test_slow_body_exceeds_call_deadline(monkeypatch) -> None:
    # Every clock read advances one second against a 1.5 second budget.
    monkeypatch.setattr(httpx_transport, "time", _FakeClock(step=1.0))

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=iter([b'{"id":', b' "cus_1"', b"}"]))

    with pytest.raises(StripeTimeoutError, match="stripe_request_timeout"):
        _transport(handler).execute(
            "GET",
            "/customers/cus_1",
            "",
            TEST_API_KEY,
            options=RequestOptions(timeout_seconds=1.5),
        )


def test_body_within_call_deadline_is_returned(monkeypatch) -> None:
    monkeypatch.setattr(httpx_transport, "time", _FakeClock(step=0.1))

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=iter([b'{"id":', b' "cus_1"', b"}"]))

    raw = _transport(handler).execute(
        "GET",
        "/customers/cus_1",
        "",
        TEST_API_KEY,
        options=RequestOptions(timeout_seconds=1.5),
    )

    assert json.loads(raw.body) == {"id": "cus_1"}
