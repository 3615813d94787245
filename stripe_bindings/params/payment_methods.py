"""Parameters for the payment methods API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from stripe_bindings.params.base import ListParams, RequestParams
from stripe_bindings.resources.payment_method import PaymentMethodType


class AttachPaymentMethod(RequestParams):
    customer: str = Field(min_length=1)
    expand: Optional[List[str]] = None


class ListPaymentMethods(ListParams):
    customer: str = Field(min_length=1)
    type: PaymentMethodType
