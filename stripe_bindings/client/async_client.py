"""Asynchronous Stripe client."""

from __future__ import annotations

from typing import AsyncIterator, Optional, Type, TypeVar

from pydantic import BaseModel

from stripe_bindings.client.base import (
    ClientCore,
    decode_response,
    empty_next_page,
    encode_params,
    next_page_target,
    resource_path,
)
from stripe_bindings.core.config import Settings
from stripe_bindings.params import (
    AttachPaymentMethod,
    CancelSubscription,
    CancelSubscriptionSchedule,
    CaptureCharge,
    CreateBillingPortalSession,
    CreateCharge,
    CreateCheckoutSession,
    CreateCustomer,
    CreateRefund,
    CreateSubscription,
    CreateUsageRecord,
    ListCharges,
    ListCustomers,
    ListEvents,
    ListPaymentMethods,
    ListSubscriptions,
    ListUsageRecordSummaries,
    ReleaseSubscriptionSchedule,
    RequestOptions,
    RequestParams,
    RetrieveParams,
    UpdateCharge,
    UpdateCustomer,
    UpdateSubscription,
)
from stripe_bindings.resources import (
    BillingPortalSession,
    Charge,
    CheckoutSession,
    Customer,
    Deleted,
    Event,
    ListObject,
    PaymentMethod,
    Refund,
    Subscription,
    SubscriptionSchedule,
    UsageRecord,
    UsageRecordSummary,
)
from stripe_bindings.transport.async_transport import AsyncHttpxTransport
from stripe_bindings.transport.base import AsyncTransport, TransportConfig


ModelT = TypeVar("ModelT", bound=BaseModel)


class AsyncClient(ClientCore):
    """Non-blocking client; each call suspends the awaiting task, never the thread.

    The handle is immutable and may be shared across tasks. Calls are made
    exactly once: retries are left to the caller.
    """

    def __init__(
        self,
        api_key: str,
        config: Optional[TransportConfig] = None,
        *,
        transport: Optional[AsyncTransport] = None,
    ) -> None:
        super().__init__(api_key, config)
        self._transport = transport or AsyncHttpxTransport(self._config)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AsyncClient":
        api_key, config = cls._settings_config(settings)
        return cls(api_key, config)

    async def _request(
        self,
        method: str,
        path: str,
        model: Type[ModelT],
        params: Optional[RequestParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> ModelT:
        raw = await self._transport.execute(method, path, encode_params(params), self._api_key, options=options)
        return decode_response(raw, model)

    async def _list(
        self,
        path: str,
        model: Type[ModelT],
        params: Optional[RequestParams],
        options: Optional[RequestOptions],
    ) -> ListObject[ModelT]:
        page = await self._request("GET", path, ListObject[model], params, options)
        return page.with_params(encode_params(params))

    # Charges

    async def create_charge(self, params: CreateCharge, options: Optional[RequestOptions] = None) -> Charge:
        return await self._request("POST", "/charges", Charge, params, options)

    async def retrieve_charge(
        self,
        charge_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> Charge:
        return await self._request("GET", resource_path("/charges/{}", charge_id), Charge, params, options)

    async def update_charge(
        self,
        charge_id: str,
        params: UpdateCharge,
        options: Optional[RequestOptions] = None,
    ) -> Charge:
        return await self._request("POST", resource_path("/charges/{}", charge_id), Charge, params, options)

    async def capture_charge(
        self,
        charge_id: str,
        params: Optional[CaptureCharge] = None,
        options: Optional[RequestOptions] = None,
    ) -> Charge:
        return await self._request("POST", resource_path("/charges/{}/capture", charge_id), Charge, params, options)

    async def list_charges(
        self,
        params: Optional[ListCharges] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Charge]:
        return await self._list("/charges", Charge, params, options)

    # Customers

    async def create_customer(
        self,
        params: Optional[CreateCustomer] = None,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        return await self._request("POST", "/customers", Customer, params, options)

    async def retrieve_customer(
        self,
        customer_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        return await self._request("GET", resource_path("/customers/{}", customer_id), Customer, params, options)

    async def update_customer(
        self,
        customer_id: str,
        params: UpdateCustomer,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        return await self._request("POST", resource_path("/customers/{}", customer_id), Customer, params, options)

    async def delete_customer(self, customer_id: str, options: Optional[RequestOptions] = None) -> Deleted:
        return await self._request("DELETE", resource_path("/customers/{}", customer_id), Deleted, None, options)

    async def list_customers(
        self,
        params: Optional[ListCustomers] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Customer]:
        return await self._list("/customers", Customer, params, options)

    # Events

    async def retrieve_event(self, event_id: str, options: Optional[RequestOptions] = None) -> Event:
        return await self._request("GET", resource_path("/events/{}", event_id), Event, None, options)

    async def list_events(
        self,
        params: Optional[ListEvents] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Event]:
        return await self._list("/events", Event, params, options)

    # Payment methods

    async def retrieve_payment_method(
        self,
        payment_method_id: str,
        options: Optional[RequestOptions] = None,
    ) -> PaymentMethod:
        path = resource_path("/payment_methods/{}", payment_method_id)
        return await self._request("GET", path, PaymentMethod, None, options)

    async def attach_payment_method(
        self,
        payment_method_id: str,
        params: AttachPaymentMethod,
        options: Optional[RequestOptions] = None,
    ) -> PaymentMethod:
        path = resource_path("/payment_methods/{}/attach", payment_method_id)
        return await self._request("POST", path, PaymentMethod, params, options)

    async def detach_payment_method(
        self,
        payment_method_id: str,
        options: Optional[RequestOptions] = None,
    ) -> PaymentMethod:
        path = resource_path("/payment_methods/{}/detach", payment_method_id)
        return await self._request("POST", path, PaymentMethod, None, options)

    async def list_payment_methods(
        self,
        params: ListPaymentMethods,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[PaymentMethod]:
        return await self._list("/payment_methods", PaymentMethod, params, options)

    # Checkout and customer portal

    async def create_checkout_session(
        self,
        params: CreateCheckoutSession,
        options: Optional[RequestOptions] = None,
    ) -> CheckoutSession:
        return await self._request("POST", "/checkout/sessions", CheckoutSession, params, options)

    async def retrieve_checkout_session(
        self,
        session_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> CheckoutSession:
        path = resource_path("/checkout/sessions/{}", session_id)
        return await self._request("GET", path, CheckoutSession, params, options)

    async def create_billing_portal_session(
        self,
        params: CreateBillingPortalSession,
        options: Optional[RequestOptions] = None,
    ) -> BillingPortalSession:
        return await self._request("POST", "/billing_portal/sessions", BillingPortalSession, params, options)

    # Subscriptions

    async def create_subscription(
        self,
        params: CreateSubscription,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        return await self._request("POST", "/subscriptions", Subscription, params, options)

    async def retrieve_subscription(
        self,
        subscription_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        path = resource_path("/subscriptions/{}", subscription_id)
        return await self._request("GET", path, Subscription, params, options)

    async def update_subscription(
        self,
        subscription_id: str,
        params: UpdateSubscription,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        path = resource_path("/subscriptions/{}", subscription_id)
        return await self._request("POST", path, Subscription, params, options)

    async def cancel_subscription(
        self,
        subscription_id: str,
        params: Optional[CancelSubscription] = None,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        path = resource_path("/subscriptions/{}", subscription_id)
        return await self._request("DELETE", path, Subscription, params, options)

    async def list_subscriptions(
        self,
        params: Optional[ListSubscriptions] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Subscription]:
        return await self._list("/subscriptions", Subscription, params, options)

    # Usage records

    async def create_usage_record(
        self,
        subscription_item_id: str,
        params: CreateUsageRecord,
        options: Optional[RequestOptions] = None,
    ) -> UsageRecord:
        path = resource_path("/subscription_items/{}/usage_records", subscription_item_id)
        return await self._request("POST", path, UsageRecord, params, options)

    async def list_usage_record_summaries(
        self,
        subscription_item_id: str,
        params: Optional[ListUsageRecordSummaries] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[UsageRecordSummary]:
        path = resource_path("/subscription_items/{}/usage_record_summaries", subscription_item_id)
        return await self._list(path, UsageRecordSummary, params, options)

    # Subscription schedules

    async def retrieve_subscription_schedule(
        self,
        schedule_id: str,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionSchedule:
        path = resource_path("/subscription_schedules/{}", schedule_id)
        return await self._request("GET", path, SubscriptionSchedule, None, options)

    async def cancel_subscription_schedule(
        self,
        schedule_id: str,
        params: Optional[CancelSubscriptionSchedule] = None,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionSchedule:
        path = resource_path("/subscription_schedules/{}/cancel", schedule_id)
        return await self._request("POST", path, SubscriptionSchedule, params, options)

    async def release_subscription_schedule(
        self,
        schedule_id: str,
        params: Optional[ReleaseSubscriptionSchedule] = None,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionSchedule:
        path = resource_path("/subscription_schedules/{}/release", schedule_id)
        return await self._request("POST", path, SubscriptionSchedule, params, options)

    # Refunds

    async def create_refund(self, params: CreateRefund, options: Optional[RequestOptions] = None) -> Refund:
        return await self._request("POST", "/refunds", Refund, params, options)

    async def retrieve_refund(self, refund_id: str, options: Optional[RequestOptions] = None) -> Refund:
        return await self._request("GET", resource_path("/refunds/{}", refund_id), Refund, None, options)

    # Pagination

    async def next_page(
        self,
        page: ListObject[ModelT],
        options: Optional[RequestOptions] = None,
    ) -> ListObject[ModelT]:
        target = next_page_target(page)
        if target is None:
            return empty_next_page(page)
        path, encoded = target
        raw = await self._transport.execute("GET", path, encoded, self._api_key, options=options)
        return decode_response(raw, type(page)).with_params(page.params)

    async def auto_paging_iter(
        self,
        page: ListObject[ModelT],
        options: Optional[RequestOptions] = None,
    ) -> AsyncIterator[ModelT]:
        """Yield every object from ``page`` onward, awaiting each further page."""

        current = page
        while True:
            for item in current.data:
                yield item
            if not current.has_more or not current.data:
                return
            current = await self.next_page(current, options)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
