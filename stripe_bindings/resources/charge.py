"""Charge resource and its nested shapes."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from pydantic import Field

from stripe_bindings.resources.base import (
    Expandable,
    ListObject,
    Metadata,
    StripeEnum,
    StripeModel,
    StripeObject,
    Timestamp,
)
from stripe_bindings.resources.customer import Address, Customer, Shipping
from stripe_bindings.resources.enums import Currency
from stripe_bindings.resources.refund import Refund


class ChargeStatus(StripeEnum):
    SUCCEEDED = "succeeded"
    PENDING = "pending"
    FAILED = "failed"


class OutcomeType(StripeEnum):
    AUTHORIZED = "authorized"
    MANUAL_REVIEW = "manual_review"
    ISSUER_DECLINED = "issuer_declined"
    BLOCKED = "blocked"
    INVALID = "invalid"


class BillingDetails(StripeModel):
    address: Optional[Address] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class Outcome(StripeModel):
    network_status: Optional[str] = None
    reason: Optional[str] = None
    risk_level: Optional[str] = None
    risk_score: Optional[int] = None
    seller_message: Optional[str] = None
    type: Optional[OutcomeType] = None


class Charge(StripeObject):
    """A payment attempt against a card or other source.

    ``customer`` is expandable: it holds the customer id unless the request
    asked for ``expand[]=customer``, in which case it is a ``Customer``.
    """

    OBJECT_NAME: ClassVar[str] = "charge"

    amount: int
    currency: Currency
    status: ChargeStatus
    amount_captured: Optional[int] = None
    amount_refunded: Optional[int] = None
    application_fee_amount: Optional[int] = None
    balance_transaction: Optional[str] = None
    billing_details: Optional[BillingDetails] = None
    captured: Optional[bool] = None
    created: Optional[Timestamp] = None
    customer: Optional[Expandable[Customer]] = None
    description: Optional[str] = None
    failure_code: Optional[str] = None
    failure_message: Optional[str] = None
    invoice: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Metadata = Field(default_factory=dict)
    outcome: Optional[Outcome] = None
    paid: Optional[bool] = None
    payment_intent: Optional[str] = None
    payment_method: Optional[str] = None
    receipt_email: Optional[str] = None
    receipt_url: Optional[str] = None
    refunded: Optional[bool] = None
    refunds: Optional[ListObject[Refund]] = None
    shipping: Optional[Shipping] = None
    source: Optional[Dict[str, Any]] = None
    statement_descriptor: Optional[str] = None
