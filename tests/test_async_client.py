from __future__ import annotations

import httpx
import pytest

from stripe_bindings.client import AsyncClient
from stripe_bindings.core.errors import ApiError, StripeTimeoutError
from stripe_bindings.params import CreateCharge, ListCustomers, RequestOptions
from stripe_bindings.resources import ChargeStatus

from conftest import StripeMock, charge_payload, json_response


@pytest.mark.asyncio
async def test_async_create_charge(async_client: AsyncClient, stripe_mock: StripeMock) -> None:
    stripe_mock.add_json("POST", "/v1/charges", charge_payload())

    async with async_client:
        charge = await async_client.create_charge(
            CreateCharge(amount=2000, currency="usd", source="tok_visa"),
            RequestOptions(idempotency_key="async-order-1"),
        )

    assert charge.id == "ch_123"
    assert charge.status is ChargeStatus.SUCCEEDED
    assert stripe_mock.last.headers["Idempotency-Key"] == "async-order-1"


@pytest.mark.asyncio
async def test_async_api_error(async_client: AsyncClient, stripe_mock: StripeMock) -> None:
    stripe_mock.add(
        "GET",
        "/v1/customers/cus_missing",
        json_response(404, {"error": {"type": "invalid_request_error", "code": "resource_missing", "param": "id"}}),
    )

    with pytest.raises(ApiError) as exc_info:
        await async_client.retrieve_customer("cus_missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == "resource_missing"
    assert exc_info.value.message == "stripe_api_error status=404"


@pytest.mark.asyncio
async def test_async_auto_paging_iter(async_client: AsyncClient, stripe_mock: StripeMock) -> None:
    def _customers(ids, has_more):
        return {
            "object": "list",
            "data": [{"id": customer_id, "object": "customer"} for customer_id in ids],
            "has_more": has_more,
            "url": "/v1/customers",
        }

    stripe_mock.add_json("GET", "/v1/customers", _customers(["cus_1", "cus_2"], True))
    stripe_mock.add_json("GET", "/v1/customers", _customers(["cus_3"], False))

    first = await async_client.list_customers(ListCustomers(email="a@example.com", limit=2))
    ids = [customer.id async for customer in async_client.auto_paging_iter(first)]

    assert ids == ["cus_1", "cus_2", "cus_3"]
    assert ("email", "a@example.com") in stripe_mock.query(stripe_mock.requests[1])
    await async_client.aclose()


@pytest.mark.asyncio
async def test_async_timeout(transport_config) -> None:
    from stripe_bindings.transport import AsyncHttpxTransport

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("connect timed out", request=request)

    transport = AsyncHttpxTransport(
        transport_config,
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    client = AsyncClient("sk_test_async_timeout", transport_config, transport=transport)

    with pytest.raises(StripeTimeoutError):
        await client.retrieve_charge("ch_1")
