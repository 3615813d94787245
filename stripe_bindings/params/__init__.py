"""Request parameter models, one per API operation."""

from stripe_bindings.params.base import (
    AddressParams,
    ListParams,
    RangeBounds,
    RangeQuery,
    RequestOptions,
    RequestParams,
    RetrieveParams,
    ShippingParams,
)
from stripe_bindings.params.charges import CaptureCharge, CreateCharge, ListCharges, UpdateCharge
from stripe_bindings.params.checkout import (
    CheckoutSessionLineItem,
    CreateBillingPortalSession,
    CreateCheckoutSession,
)
from stripe_bindings.params.customers import CreateCustomer, ListCustomers, UpdateCustomer
from stripe_bindings.params.encoding import encode_form, to_form_pairs
from stripe_bindings.params.events import ListEvents
from stripe_bindings.params.payment_methods import AttachPaymentMethod, ListPaymentMethods
from stripe_bindings.params.refunds import CreateRefund
from stripe_bindings.params.subscriptions import (
    BillingThresholdsParams,
    CancelSubscription,
    CancelSubscriptionSchedule,
    CreateSubscription,
    CreateSubscriptionItems,
    CreateUsageRecord,
    ListSubscriptions,
    ListUsageRecordSummaries,
    PriceDataParams,
    RecurringParams,
    ReleaseSubscriptionSchedule,
    UpdateSubscription,
    UpdateSubscriptionItems,
)

__all__ = [
    "AddressParams",
    "AttachPaymentMethod",
    "BillingThresholdsParams",
    "CancelSubscription",
    "CancelSubscriptionSchedule",
    "CaptureCharge",
    "CheckoutSessionLineItem",
    "CreateBillingPortalSession",
    "CreateCharge",
    "CreateCheckoutSession",
    "CreateCustomer",
    "CreateRefund",
    "CreateSubscription",
    "CreateSubscriptionItems",
    "CreateUsageRecord",
    "ListCharges",
    "ListCustomers",
    "ListEvents",
    "ListParams",
    "ListPaymentMethods",
    "ListSubscriptions",
    "ListUsageRecordSummaries",
    "PriceDataParams",
    "RangeBounds",
    "RangeQuery",
    "RecurringParams",
    "ReleaseSubscriptionSchedule",
    "RequestOptions",
    "RequestParams",
    "RetrieveParams",
    "ShippingParams",
    "UpdateCharge",
    "UpdateCustomer",
    "UpdateSubscription",
    "UpdateSubscriptionItems",
    "encode_form",
    "to_form_pairs",
]
