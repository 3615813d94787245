"""Parameters for Checkout and customer portal sessions."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from stripe_bindings.params.base import RequestParams
from stripe_bindings.resources.base import Metadata
from stripe_bindings.resources.checkout import (
    CheckoutSessionLocale,
    CheckoutSessionMode,
    CheckoutSessionSubmitType,
)
from stripe_bindings.resources.enums import Currency


class CheckoutSessionLineItem(RequestParams):
    """A line item given either as a ``price`` id or as ad-hoc amount/currency/name."""

    quantity: int = Field(ge=1)
    amount: Optional[int] = Field(default=None, ge=0)
    currency: Optional[Currency] = None
    description: Optional[str] = None
    images: Optional[List[str]] = Field(default=None, max_length=8)
    name: Optional[str] = None
    price: Optional[str] = None

    @model_validator(mode="after")
    def _check_pricing(self) -> "CheckoutSessionLineItem":
        ad_hoc = (self.amount, self.currency, self.name)
        if self.price is not None:
            if any(value is not None for value in ad_hoc):
                raise ValueError("line_item_price_excludes_amount_currency_name")
        elif any(value is None for value in ad_hoc):
            raise ValueError("line_item_requires_price_or_amount_currency_name")
        return self


class CreateCheckoutSession(RequestParams):
    cancel_url: str = Field(min_length=1)
    success_url: str = Field(min_length=1)
    payment_method_types: List[str] = Field(min_length=1)
    billing_address_collection: Optional[str] = None
    client_reference_id: Optional[str] = Field(default=None, max_length=200)
    customer: Optional[str] = None
    customer_email: Optional[str] = None
    expand: Optional[List[str]] = None
    line_items: Optional[List[CheckoutSessionLineItem]] = None
    locale: Optional[CheckoutSessionLocale] = None
    metadata: Optional[Metadata] = None
    mode: Optional[CheckoutSessionMode] = None
    submit_type: Optional[CheckoutSessionSubmitType] = None

    @model_validator(mode="after")
    def _check_exclusive_options(self) -> "CreateCheckoutSession":
        if self.customer is not None and self.customer_email is not None:
            raise ValueError("customer_and_customer_email_are_exclusive")
        if self.submit_type is not None and self.mode == CheckoutSessionMode.SUBSCRIPTION:
            raise ValueError("submit_type_not_allowed_in_subscription_mode")
        if self.billing_address_collection not in (None, "auto", "required"):
            raise ValueError("billing_address_collection_must_be_auto_or_required")
        return self


class CreateBillingPortalSession(RequestParams):
    customer: str = Field(min_length=1)
    configuration: Optional[str] = None
    return_url: Optional[str] = None
