"""Refund resource."""

from __future__ import annotations

from typing import ClassVar, Optional

from pydantic import Field

from stripe_bindings.resources.base import Metadata, StripeEnum, StripeObject, Timestamp
from stripe_bindings.resources.enums import Currency


class RefundStatus(StripeEnum):
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"


class RefundReason(StripeEnum):
    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"
    EXPIRED_UNCAPTURED_CHARGE = "expired_uncaptured_charge"


class Refund(StripeObject):
    OBJECT_NAME: ClassVar[str] = "refund"

    amount: int
    currency: Currency
    balance_transaction: Optional[str] = None
    charge: Optional[str] = None
    created: Optional[Timestamp] = None
    failure_reason: Optional[str] = None
    metadata: Metadata = Field(default_factory=dict)
    payment_intent: Optional[str] = None
    reason: Optional[RefundReason] = None
    receipt_number: Optional[str] = None
    status: Optional[RefundStatus] = None
