"""Parameters for the refunds API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from stripe_bindings.params.base import RequestParams
from stripe_bindings.resources.base import Metadata
from stripe_bindings.resources.refund import RefundReason


class CreateRefund(RequestParams):
    amount: Optional[int] = Field(default=None, ge=1)
    charge: Optional[str] = None
    expand: Optional[List[str]] = None
    metadata: Optional[Metadata] = None
    payment_intent: Optional[str] = None
    reason: Optional[RefundReason] = None
    refund_application_fee: Optional[bool] = None
    reverse_transfer: Optional[bool] = None

    @model_validator(mode="after")
    def _check_target(self) -> "CreateRefund":
        if (self.charge is None) == (self.payment_intent is None):
            raise ValueError("refund_requires_exactly_one_of_charge_or_payment_intent")
        return self
