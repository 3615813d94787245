"""Typed models for Stripe API objects."""

from stripe_bindings.resources.base import (
    Deleted,
    Expandable,
    ListObject,
    Metadata,
    StripeEnum,
    StripeModel,
    StripeObject,
    Timestamp,
    expandable_id,
)
from stripe_bindings.resources.charge import BillingDetails, Charge, ChargeStatus, Outcome, OutcomeType
from stripe_bindings.resources.checkout import (
    BillingPortalSession,
    CheckoutSession,
    CheckoutSessionLocale,
    CheckoutSessionMode,
    CheckoutSessionPaymentStatus,
    CheckoutSessionSubmitType,
)
from stripe_bindings.resources.customer import Address, Customer, Shipping
from stripe_bindings.resources.enums import ApiErrorType, Currency
from stripe_bindings.resources.event import Event, EventData, EventRequest, EventType
from stripe_bindings.resources.payment_method import Card, CardBrand, PaymentMethod, PaymentMethodType
from stripe_bindings.resources.refund import Refund, RefundReason, RefundStatus
from stripe_bindings.resources.registry import construct_resource, resource_class_for
from stripe_bindings.resources.subscription import (
    Period,
    Price,
    Subscription,
    SubscriptionItem,
    SubscriptionSchedule,
    SubscriptionScheduleStatus,
    SubscriptionStatus,
    UsageRecord,
    UsageRecordAction,
    UsageRecordSummary,
)

__all__ = [
    "Address",
    "ApiErrorType",
    "BillingDetails",
    "BillingPortalSession",
    "Card",
    "CardBrand",
    "Charge",
    "ChargeStatus",
    "CheckoutSession",
    "CheckoutSessionLocale",
    "CheckoutSessionMode",
    "CheckoutSessionPaymentStatus",
    "CheckoutSessionSubmitType",
    "Currency",
    "Customer",
    "Deleted",
    "Event",
    "EventData",
    "EventRequest",
    "EventType",
    "Expandable",
    "ListObject",
    "Metadata",
    "Outcome",
    "OutcomeType",
    "PaymentMethod",
    "PaymentMethodType",
    "Period",
    "Price",
    "Refund",
    "RefundReason",
    "RefundStatus",
    "Shipping",
    "StripeEnum",
    "StripeModel",
    "StripeObject",
    "Subscription",
    "SubscriptionItem",
    "SubscriptionSchedule",
    "SubscriptionScheduleStatus",
    "SubscriptionStatus",
    "Timestamp",
    "UsageRecord",
    "UsageRecordAction",
    "UsageRecordSummary",
    "construct_resource",
    "expandable_id",
    "resource_class_for",
]
