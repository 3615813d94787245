"""Checkout and customer portal sessions."""

from __future__ import annotations

from typing import ClassVar, List, Optional

from pydantic import Field

from stripe_bindings.resources.base import Expandable, Metadata, StripeEnum, StripeObject, Timestamp
from stripe_bindings.resources.customer import Customer
from stripe_bindings.resources.enums import Currency


class CheckoutSessionMode(StripeEnum):
    PAYMENT = "payment"
    SETUP = "setup"
    SUBSCRIPTION = "subscription"


class CheckoutSessionSubmitType(StripeEnum):
    AUTO = "auto"
    BOOK = "book"
    DONATE = "donate"
    PAY = "pay"


class CheckoutSessionLocale(StripeEnum):
    AUTO = "auto"
    DA = "da"
    DE = "de"
    EN = "en"
    ES = "es"
    FI = "fi"
    FR = "fr"
    IT = "it"
    JA = "ja"
    MS = "ms"
    NB = "nb"
    NL = "nl"
    PL = "pl"
    PT = "pt"
    SV = "sv"
    ZH = "zh"


class CheckoutSessionPaymentStatus(StripeEnum):
    PAID = "paid"
    UNPAID = "unpaid"
    NO_PAYMENT_REQUIRED = "no_payment_required"


class CheckoutSession(StripeObject):
    OBJECT_NAME: ClassVar[str] = "checkout.session"

    amount_subtotal: Optional[int] = None
    amount_total: Optional[int] = None
    billing_address_collection: Optional[str] = None
    cancel_url: Optional[str] = None
    client_reference_id: Optional[str] = None
    currency: Optional[Currency] = None
    customer: Optional[Expandable[Customer]] = None
    customer_email: Optional[str] = None
    livemode: Optional[bool] = None
    locale: Optional[CheckoutSessionLocale] = None
    metadata: Metadata = Field(default_factory=dict)
    mode: Optional[CheckoutSessionMode] = None
    payment_intent: Optional[str] = None
    payment_method_types: List[str] = Field(default_factory=list)
    payment_status: Optional[CheckoutSessionPaymentStatus] = None
    setup_intent: Optional[str] = None
    submit_type: Optional[CheckoutSessionSubmitType] = None
    subscription: Optional[str] = None
    success_url: Optional[str] = None
    url: Optional[str] = None


class BillingPortalSession(StripeObject):
    """A short-lived customer portal session; send the customer to ``url``."""

    OBJECT_NAME: ClassVar[str] = "billing_portal.session"

    customer: str
    url: str
    configuration: Optional[str] = None
    created: Optional[Timestamp] = None
    livemode: Optional[bool] = None
    return_url: Optional[str] = None
