"""Parameters for the customers API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from stripe_bindings.params.base import AddressParams, ListParams, RangeQuery, RequestParams, ShippingParams
from stripe_bindings.resources.base import Metadata


class CreateCustomer(RequestParams):
    address: Optional[AddressParams] = None
    balance: Optional[int] = None
    description: Optional[str] = None
    email: Optional[str] = Field(default=None, max_length=512)
    expand: Optional[List[str]] = None
    invoice_prefix: Optional[str] = Field(default=None, min_length=3, max_length=12)
    metadata: Optional[Metadata] = None
    name: Optional[str] = None
    payment_method: Optional[str] = None
    phone: Optional[str] = None
    preferred_locales: Optional[List[str]] = None
    shipping: Optional[ShippingParams] = None
    source: Optional[str] = None
    tax_exempt: Optional[str] = None


class UpdateCustomer(RequestParams):
    address: Optional[AddressParams] = None
    balance: Optional[int] = None
    default_source: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = Field(default=None, max_length=512)
    expand: Optional[List[str]] = None
    invoice_prefix: Optional[str] = Field(default=None, min_length=3, max_length=12)
    metadata: Optional[Metadata] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    preferred_locales: Optional[List[str]] = None
    shipping: Optional[ShippingParams] = None
    source: Optional[str] = None
    tax_exempt: Optional[str] = None


class ListCustomers(ListParams):
    created: Optional[RangeQuery] = None
    email: Optional[str] = Field(default=None, max_length=512)
