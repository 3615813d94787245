"""Customer resource."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import Field

from stripe_bindings.resources.base import Metadata, StripeModel, StripeObject, Timestamp
from stripe_bindings.resources.enums import Currency


class Address(StripeModel):
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None


class Shipping(StripeModel):
    address: Optional[Address] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class Customer(StripeObject):
    OBJECT_NAME: ClassVar[str] = "customer"

    address: Optional[Address] = None
    balance: Optional[int] = None
    created: Optional[Timestamp] = None
    currency: Optional[Currency] = None
    default_source: Optional[Union[str, Dict[str, Any]]] = None
    delinquent: Optional[bool] = None
    description: Optional[str] = None
    email: Optional[str] = None
    invoice_prefix: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Metadata = Field(default_factory=dict)
    name: Optional[str] = None
    phone: Optional[str] = None
    preferred_locales: List[str] = Field(default_factory=list)
    shipping: Optional[Shipping] = None
    tax_exempt: Optional[str] = None
    # Only present on objects returned by a delete call.
    deleted: Optional[bool] = None
