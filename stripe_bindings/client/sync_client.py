"""Blocking Stripe client."""

from __future__ import annotations

from typing import Iterator, Optional, Type, TypeVar

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
from stripe_bindings.transport.base import Transport, TransportConfig
from stripe_bindings.transport.httpx_transport import HttpxTransport


ModelT = TypeVar("ModelT", bound=BaseModel)


class Client(ClientCore):
    """Blocking client; each call occupies the calling thread for one round-trip.

    The handle is immutable and may be shared across threads. Calls are made
    exactly once: retries are left to the caller.
    """

    def __init__(
        self,
        api_key: str,
        config: Optional[TransportConfig] = None,
        *,
        transport: Optional[Transport] = None,
    ) -> None:
        super().__init__(api_key, config)
        self._transport = transport or HttpxTransport(self._config)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Client":
        api_key, config = cls._settings_config(settings)
        return cls(api_key, config)

    def _request(
        self,
        method: str,
        path: str,
        model: Type[ModelT],
        params: Optional[RequestParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> ModelT:
        raw = self._transport.execute(method, path, encode_params(params), self._api_key, options=options)
        return decode_response(raw, model)

    def _list(
        self,
        path: str,
        model: Type[ModelT],
        params: Optional[RequestParams],
        options: Optional[RequestOptions],
    ) -> ListObject[ModelT]:
        page = self._request("GET", path, ListObject[model], params, options)
        return page.with_params(encode_params(params))

    # Charges

    def create_charge(self, params: CreateCharge, options: Optional[RequestOptions] = None) -> Charge:
        return self._request("POST", "/charges", Charge, params, options)

    def retrieve_charge(
        self,
        charge_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> Charge:
        return self._request("GET", resource_path("/charges/{}", charge_id), Charge, params, options)

    def update_charge(
        self,
        charge_id: str,
        params: UpdateCharge,
        options: Optional[RequestOptions] = None,
    ) -> Charge:
        return self._request("POST", resource_path("/charges/{}", charge_id), Charge, params, options)

    def capture_charge(
        self,
        charge_id: str,
        params: Optional[CaptureCharge] = None,
        options: Optional[RequestOptions] = None,
    ) -> Charge:
        return self._request("POST", resource_path("/charges/{}/capture", charge_id), Charge, params, options)

    def list_charges(
        self,
        params: Optional[ListCharges] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Charge]:
        return self._list("/charges", Charge, params, options)

    # Customers

    def create_customer(
        self,
        params: Optional[CreateCustomer] = None,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        return self._request("POST", "/customers", Customer, params, options)

    def retrieve_customer(
        self,
        customer_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        return self._request("GET", resource_path("/customers/{}", customer_id), Customer, params, options)

    def update_customer(
        self,
        customer_id: str,
        params: UpdateCustomer,
        options: Optional[RequestOptions] = None,
    ) -> Customer:
        return self._request("POST", resource_path("/customers/{}", customer_id), Customer, params, options)

    def delete_customer(self, customer_id: str, options: Optional[RequestOptions] = None) -> Deleted:
        return self._request("DELETE", resource_path("/customers/{}", customer_id), Deleted, None, options)

    def list_customers(
        self,
        params: Optional[ListCustomers] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Customer]:
        return self._list("/customers", Customer, params, options)

    # Events

    def retrieve_event(self, event_id: str, options: Optional[RequestOptions] = None) -> Event:
        return self._request("GET", resource_path("/events/{}", event_id), Event, None, options)

    def list_events(
        self,
        params: Optional[ListEvents] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Event]:
        return self._list("/events", Event, params, options)

    # Payment methods

    def retrieve_payment_method(
        self,
        payment_method_id: str,
        options: Optional[RequestOptions] = None,
    ) -> PaymentMethod:
        path = resource_path("/payment_methods/{}", payment_method_id)
        return self._request("GET", path, PaymentMethod, None, options)

    def attach_payment_method(
        self,
        payment_method_id: str,
        params: AttachPaymentMethod,
        options: Optional[RequestOptions] = None,
    ) -> PaymentMethod:
        path = resource_path("/payment_methods/{}/attach", payment_method_id)
        return self._request("POST", path, PaymentMethod, params, options)

    def detach_payment_method(
        self,
        payment_method_id: str,
        options: Optional[RequestOptions] = None,
    ) -> PaymentMethod:
        path = resource_path("/payment_methods/{}/detach", payment_method_id)
        return self._request("POST", path, PaymentMethod, None, options)

    def list_payment_methods(
        self,
        params: ListPaymentMethods,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[PaymentMethod]:
        return self._list("/payment_methods", PaymentMethod, params, options)

    # Checkout and customer portal

    def create_checkout_session(
        self,
        params: CreateCheckoutSession,
        options: Optional[RequestOptions] = None,
    ) -> CheckoutSession:
        return self._request("POST", "/checkout/sessions", CheckoutSession, params, options)

    def retrieve_checkout_session(
        self,
        session_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> CheckoutSession:
        path = resource_path("/checkout/sessions/{}", session_id)
        return self._request("GET", path, CheckoutSession, params, options)

    def create_billing_portal_session(
        self,
        params: CreateBillingPortalSession,
        options: Optional[RequestOptions] = None,
    ) -> BillingPortalSession:
        return self._request("POST", "/billing_portal/sessions", BillingPortalSession, params, options)

    # Subscriptions

    def create_subscription(
        self,
        params: CreateSubscription,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        return self._request("POST", "/subscriptions", Subscription, params, options)

    def retrieve_subscription(
        self,
        subscription_id: str,
        params: Optional[RetrieveParams] = None,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        path = resource_path("/subscriptions/{}", subscription_id)
        return self._request("GET", path, Subscription, params, options)

    def update_subscription(
        self,
        subscription_id: str,
        params: UpdateSubscription,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        path = resource_path("/subscriptions/{}", subscription_id)
        return self._request("POST", path, Subscription, params, options)

    def cancel_subscription(
        self,
        subscription_id: str,
        params: Optional[CancelSubscription] = None,
        options: Optional[RequestOptions] = None,
    ) -> Subscription:
        path = resource_path("/subscriptions/{}", subscription_id)
        return self._request("DELETE", path, Subscription, params, options)

    def list_subscriptions(
        self,
        params: Optional[ListSubscriptions] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[Subscription]:
        return self._list("/subscriptions", Subscription, params, options)

    # Usage records

    def create_usage_record(
        self,
        subscription_item_id: str,
        params: CreateUsageRecord,
        options: Optional[RequestOptions] = None,
    ) -> UsageRecord:
        path = resource_path("/subscription_items/{}/usage_records", subscription_item_id)
        return self._request("POST", path, UsageRecord, params, options)

    def list_usage_record_summaries(
        self,
        subscription_item_id: str,
        params: Optional[ListUsageRecordSummaries] = None,
        options: Optional[RequestOptions] = None,
    ) -> ListObject[UsageRecordSummary]:
        path = resource_path("/subscription_items/{}/usage_record_summaries", subscription_item_id)
        return self._list(path, UsageRecordSummary, params, options)

    # Subscription schedules

    def retrieve_subscription_schedule(
        self,
        schedule_id: str,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionSchedule:
        path = resource_path("/subscription_schedules/{}", schedule_id)
        return self._request("GET", path, SubscriptionSchedule, None, options)

    def cancel_subscription_schedule(
        self,
        schedule_id: str,
        params: Optional[CancelSubscriptionSchedule] = None,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionSchedule:
        path = resource_path("/subscription_schedules/{}/cancel", schedule_id)
        return self._request("POST", path, SubscriptionSchedule, params, options)

    def release_subscription_schedule(
        self,
        schedule_id: str,
        params: Optional[ReleaseSubscriptionSchedule] = None,
        options: Optional[RequestOptions] = None,
    ) -> SubscriptionSchedule:
        path = resource_path("/subscription_schedules/{}/release", schedule_id)
        return self._request("POST", path, SubscriptionSchedule, params, options)

    # Refunds

    def create_refund(self, params: CreateRefund, options: Optional[RequestOptions] = None) -> Refund:
        return self._request("POST", "/refunds", Refund, params, options)

    def retrieve_refund(self, refund_id: str, options: Optional[RequestOptions] = None) -> Refund:
        return self._request("GET", resource_path("/refunds/{}", refund_id), Refund, None, options)

    # Pagination

    def next_page(
        self,
        page: ListObject[ModelT],
        options: Optional[RequestOptions] = None,
    ) -> ListObject[ModelT]:
        target = next_page_target(page)
        if target is None:
            return empty_next_page(page)
        path, encoded = target
        raw = self._transport.execute("GET", path, encoded, self._api_key, options=options)
        return decode_response(raw, type(page)).with_params(page.params)

    def auto_paging_iter(
        self,
        page: ListObject[ModelT],
        options: Optional[RequestOptions] = None,
    ) -> Iterator[ModelT]:
        """Yield every object from ``page`` onward, fetching pages as needed."""

        current = page
        while True:
            yield from current.data
            if not current.has_more or not current.data:
                return
            current = self.next_page(current, options)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
