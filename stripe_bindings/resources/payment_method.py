"""PaymentMethod resource."""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from stripe_bindings.resources.base import Expandable, Metadata, StripeEnum, StripeModel, StripeObject, Timestamp
from stripe_bindings.resources.charge import BillingDetails
from stripe_bindings.resources.customer import Customer


class PaymentMethodType(StripeEnum):
    AU_BECS_DEBIT = "au_becs_debit"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    CARD = "card"
    CARD_PRESENT = "card_present"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    IDEAL = "ideal"
    P24 = "p24"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"


class CardBrand(StripeEnum):
    AMEX = "amex"
    DINERS = "diners"
    DISCOVER = "discover"
    JCB = "jcb"
    MASTERCARD = "mastercard"
    UNIONPAY = "unionpay"
    VISA = "visa"
    UNKNOWN_BRAND = "unknown"


class Card(StripeModel):
    brand: Optional[CardBrand] = None
    country: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    fingerprint: Optional[str] = None
    funding: Optional[str] = None
    last4: Optional[str] = None


class PaymentMethod(StripeObject):
    OBJECT_NAME: ClassVar[str] = "payment_method"

    type: PaymentMethodType
    billing_details: Optional[BillingDetails] = None
    card: Optional[Card] = None
    created: Optional[Timestamp] = None
    customer: Optional[Expandable[Customer]] = None
    livemode: Optional[bool] = None
    metadata: Metadata = Field(default_factory=dict)
