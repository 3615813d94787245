"""Base request parameter types shared by every operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stripe_bindings.params.encoding import FormPairs, encode_form, to_form_pairs


class RequestParams(BaseModel):
    """Parameters of a single API call.

    Unset optional fields are left out of the encoded request entirely so
    that Stripe's server-side defaults apply.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump(exclude_none=True)
        # Empty containers encode as `key=` to clear a field; an empty expand
        # list has nothing to clear and is dropped.
        if data.get("expand") == []:
            del data["expand"]
        return data

    def to_form_pairs(self) -> FormPairs:
        return to_form_pairs(self.to_dict())

    def encode(self) -> str:
        return encode_form(self.to_dict())


class RetrieveParams(RequestParams):
    expand: Optional[List[str]] = None


class RangeBounds(RequestParams):
    """Bounds for a timestamp filter, e.g. ``created[gte]=1600000000``."""

    gt: Optional[int] = None
    gte: Optional[int] = None
    lt: Optional[int] = None
    lte: Optional[int] = None

    @model_validator(mode="after")
    def _check_bounds(self) -> "RangeBounds":
        if self.gt is None and self.gte is None and self.lt is None and self.lte is None:
            raise ValueError("range_bounds_empty")
        if self.gt is not None and self.gte is not None:
            raise ValueError("range_bounds_gt_and_gte_are_exclusive")
        if self.lt is not None and self.lte is not None:
            raise ValueError("range_bounds_lt_and_lte_are_exclusive")
        return self


# Either an exact timestamp or a set of bounds.
RangeQuery = Union[int, RangeBounds]


class ListParams(RequestParams):
    ending_before: Optional[str] = None
    expand: Optional[List[str]] = None
    limit: Optional[int] = Field(default=None, ge=1, le=100)
    starting_after: Optional[str] = None

    @model_validator(mode="after")
    def _check_cursor(self) -> "ListParams":
        if self.starting_after is not None and self.ending_before is not None:
            raise ValueError("starting_after_and_ending_before_are_exclusive")
        return self


class AddressParams(RequestParams):
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class ShippingParams(RequestParams):
    address: AddressParams
    name: str = Field(min_length=1)
    carrier: Optional[str] = None
    phone: Optional[str] = None
    tracking_number: Optional[str] = None


@dataclass(frozen=True)
class RequestOptions:
    """Per-call options that travel as headers or transport settings."""

    idempotency_key: Optional[str] = None
    stripe_account: Optional[str] = None
    timeout_seconds: Optional[float] = None

    def __post_init__(self) -> None:
        if self.idempotency_key is not None:
            if not self.idempotency_key.strip():
                raise ValueError("idempotency_key_blank")
            if len(self.idempotency_key) > 255:
                raise ValueError("idempotency_key_too_long")
        if self.stripe_account is not None and not self.stripe_account.strip():
            raise ValueError("stripe_account_blank")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds_must_be_positive")
