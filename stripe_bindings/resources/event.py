"""Event resource, delivered by the events API and by webhooks."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional, Union

from stripe_bindings.resources.base import StripeEnum, StripeModel, StripeObject, Timestamp


class EventType(StripeEnum):
    ACCOUNT_UPDATED = "account.updated"
    CHARGE_CAPTURED = "charge.captured"
    CHARGE_FAILED = "charge.failed"
    CHARGE_PENDING = "charge.pending"
    CHARGE_REFUNDED = "charge.refunded"
    CHARGE_SUCCEEDED = "charge.succeeded"
    CHARGE_UPDATED = "charge.updated"
    CHECKOUT_SESSION_COMPLETED = "checkout.session.completed"
    CUSTOMER_CREATED = "customer.created"
    CUSTOMER_DELETED = "customer.deleted"
    CUSTOMER_UPDATED = "customer.updated"
    CUSTOMER_SUBSCRIPTION_CREATED = "customer.subscription.created"
    CUSTOMER_SUBSCRIPTION_DELETED = "customer.subscription.deleted"
    CUSTOMER_SUBSCRIPTION_TRIAL_WILL_END = "customer.subscription.trial_will_end"
    CUSTOMER_SUBSCRIPTION_UPDATED = "customer.subscription.updated"
    INVOICE_CREATED = "invoice.created"
    INVOICE_FINALIZED = "invoice.finalized"
    INVOICE_PAID = "invoice.paid"
    INVOICE_PAYMENT_FAILED = "invoice.payment_failed"
    INVOICE_PAYMENT_SUCCEEDED = "invoice.payment_succeeded"
    PAYMENT_INTENT_CREATED = "payment_intent.created"
    PAYMENT_INTENT_PAYMENT_FAILED = "payment_intent.payment_failed"
    PAYMENT_INTENT_SUCCEEDED = "payment_intent.succeeded"
    PAYMENT_METHOD_ATTACHED = "payment_method.attached"
    PAYMENT_METHOD_DETACHED = "payment_method.detached"
    SUBSCRIPTION_SCHEDULE_CANCELED = "subscription_schedule.canceled"
    SUBSCRIPTION_SCHEDULE_RELEASED = "subscription_schedule.released"


class EventData(StripeModel):
    object: Dict[str, Any]
    previous_attributes: Optional[Dict[str, Any]] = None

    def to_resource(self) -> Any:
        """Return ``object`` as a typed model when its ``object`` tag is known.

        Unknown tags come back as the raw dict; a payload that does not fit
        its model raises ``DeserializationError``.
        """

        from stripe_bindings.resources.registry import construct_resource

        return construct_resource(self.object)


class EventRequest(StripeModel):
    id: Optional[str] = None
    idempotency_key: Optional[str] = None


class Event(StripeObject):
    OBJECT_NAME: ClassVar[str] = "event"

    type: EventType
    data: EventData
    created: Optional[Timestamp] = None
    api_version: Optional[str] = None
    account: Optional[str] = None
    livemode: Optional[bool] = None
    pending_webhooks: Optional[int] = None
    # Older API versions send the request id as a bare string.
    request: Optional[Union[EventRequest, str]] = None

    @property
    def previous_attributes(self) -> Dict[str, Any]:
        return dict(self.data.previous_attributes or {})
