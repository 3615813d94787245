"""Parameters for the charges API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from stripe_bindings.params.base import ListParams, RangeQuery, RequestParams, ShippingParams
from stripe_bindings.resources.base import Metadata
from stripe_bindings.resources.enums import Currency


class CreateCharge(RequestParams):
    """``POST /v1/charges``. ``amount`` is in the currency's smallest unit."""

    amount: int = Field(ge=0)
    currency: Currency
    application_fee_amount: Optional[int] = Field(default=None, ge=0)
    capture: Optional[bool] = None
    customer: Optional[str] = None
    description: Optional[str] = None
    expand: Optional[List[str]] = None
    metadata: Optional[Metadata] = None
    on_behalf_of: Optional[str] = None
    receipt_email: Optional[str] = None
    shipping: Optional[ShippingParams] = None
    source: Optional[str] = None
    statement_descriptor: Optional[str] = Field(default=None, max_length=22)
    statement_descriptor_suffix: Optional[str] = Field(default=None, max_length=22)
    transfer_group: Optional[str] = None


class UpdateCharge(RequestParams):
    customer: Optional[str] = None
    description: Optional[str] = None
    expand: Optional[List[str]] = None
    metadata: Optional[Metadata] = None
    receipt_email: Optional[str] = None
    shipping: Optional[ShippingParams] = None
    transfer_group: Optional[str] = None


class CaptureCharge(RequestParams):
    amount: Optional[int] = Field(default=None, ge=0)
    application_fee_amount: Optional[int] = Field(default=None, ge=0)
    expand: Optional[List[str]] = None
    receipt_email: Optional[str] = None
    statement_descriptor: Optional[str] = Field(default=None, max_length=22)
    statement_descriptor_suffix: Optional[str] = Field(default=None, max_length=22)
    transfer_group: Optional[str] = None


class ListCharges(ListParams):
    created: Optional[RangeQuery] = None
    customer: Optional[str] = None
    payment_intent: Optional[str] = None
    transfer_group: Optional[str] = None
