"""Billing resources: subscriptions, their items, schedules and usage records."""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional

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
from stripe_bindings.resources.customer import Customer
from stripe_bindings.resources.enums import Currency


class SubscriptionStatus(StripeEnum):
    ACTIVE = "active"
    CANCELED = "canceled"
    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    PAST_DUE = "past_due"
    TRIALING = "trialing"
    UNPAID = "unpaid"


class SubscriptionScheduleStatus(StripeEnum):
    ACTIVE = "active"
    CANCELED = "canceled"
    COMPLETED = "completed"
    NOT_STARTED = "not_started"
    RELEASED = "released"


class UsageRecordAction(StripeEnum):
    INCREMENT = "increment"
    SET = "set"


class Period(StripeModel):
    """A usage period; either bound may be open."""

    start: Optional[Timestamp] = None
    end: Optional[Timestamp] = None


class Price(StripeObject):
    OBJECT_NAME: ClassVar[str] = "price"

    active: Optional[bool] = None
    currency: Optional[Currency] = None
    lookup_key: Optional[str] = None
    nickname: Optional[str] = None
    product: Optional[str] = None
    recurring: Optional[Dict[str, Any]] = None
    unit_amount: Optional[int] = None


class SubscriptionItem(StripeObject):
    OBJECT_NAME: ClassVar[str] = "subscription_item"

    created: Optional[Timestamp] = None
    metadata: Metadata = Field(default_factory=dict)
    price: Optional[Price] = None
    quantity: Optional[int] = None
    subscription: Optional[str] = None
    tax_rates: List[Dict[str, Any]] = Field(default_factory=list)


class Subscription(StripeObject):
    OBJECT_NAME: ClassVar[str] = "subscription"

    customer: Expandable[Customer]
    status: SubscriptionStatus
    cancel_at: Optional[Timestamp] = None
    cancel_at_period_end: Optional[bool] = None
    canceled_at: Optional[Timestamp] = None
    collection_method: Optional[str] = None
    created: Optional[Timestamp] = None
    current_period_end: Optional[Timestamp] = None
    current_period_start: Optional[Timestamp] = None
    default_payment_method: Optional[str] = None
    ended_at: Optional[Timestamp] = None
    items: Optional[ListObject[SubscriptionItem]] = None
    latest_invoice: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Metadata = Field(default_factory=dict)
    schedule: Optional[str] = None
    start_date: Optional[Timestamp] = None
    trial_end: Optional[Timestamp] = None
    trial_start: Optional[Timestamp] = None


class SubscriptionSchedule(StripeObject):
    OBJECT_NAME: ClassVar[str] = "subscription_schedule"

    customer: Expandable[Customer]
    status: SubscriptionScheduleStatus
    canceled_at: Optional[Timestamp] = None
    completed_at: Optional[Timestamp] = None
    created: Optional[Timestamp] = None
    end_behavior: Optional[str] = None
    livemode: Optional[bool] = None
    metadata: Metadata = Field(default_factory=dict)
    phases: List[Dict[str, Any]] = Field(default_factory=list)
    released_at: Optional[Timestamp] = None
    released_subscription: Optional[str] = None
    subscription: Optional[str] = None


class UsageRecord(StripeObject):
    OBJECT_NAME: ClassVar[str] = "usage_record"

    quantity: int
    subscription_item: str
    timestamp: Timestamp
    livemode: Optional[bool] = None


class UsageRecordSummary(StripeObject):
    OBJECT_NAME: ClassVar[str] = "usage_record_summary"

    period: Period
    subscription_item: str
    total_usage: int
    invoice: Optional[str] = None
    livemode: Optional[bool] = None
