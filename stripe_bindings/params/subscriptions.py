"""Parameters for subscriptions, usage records and subscription schedules."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import Field, model_validator

from stripe_bindings.params.base import ListParams, RangeQuery, RequestParams
from stripe_bindings.resources.base import Metadata, Timestamp
from stripe_bindings.resources.enums import Currency
from stripe_bindings.resources.subscription import UsageRecordAction


ProrationBehavior = Literal["always_invoice", "create_prorations", "none"]


class RecurringParams(RequestParams):
    interval: Literal["day", "week", "month", "year"]
    interval_count: Optional[int] = Field(default=None, ge=1)


class PriceDataParams(RequestParams):
    currency: Currency
    product: str = Field(min_length=1)
    recurring: RecurringParams
    unit_amount: Optional[int] = Field(default=None, ge=0)
    unit_amount_decimal: Optional[str] = None


class BillingThresholdsParams(RequestParams):
    usage_gte: int = Field(ge=1)


class CreateSubscriptionItems(RequestParams):
    """One item of a new subscription; exactly one of plan, price or price_data."""

    billing_thresholds: Optional[BillingThresholdsParams] = None
    metadata: Optional[Metadata] = None
    plan: Optional[str] = None
    price: Optional[str] = None
    price_data: Optional[PriceDataParams] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    tax_rates: Optional[List[str]] = None

    @model_validator(mode="after")
    def _check_pricing(self) -> "CreateSubscriptionItems":
        chosen = [value for value in (self.plan, self.price, self.price_data) if value is not None]
        if len(chosen) != 1:
            raise ValueError("subscription_item_requires_exactly_one_of_plan_price_price_data")
        return self


class UpdateSubscriptionItems(RequestParams):
    id: Optional[str] = None
    deleted: Optional[bool] = None
    metadata: Optional[Metadata] = None
    price: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_deleted(self) -> "UpdateSubscriptionItems":
        if self.deleted and self.id is None:
            raise ValueError("deleted_subscription_item_requires_id")
        return self


class CreateSubscription(RequestParams):
    customer: str = Field(min_length=1)
    items: List[CreateSubscriptionItems] = Field(min_length=1, max_length=20)
    cancel_at_period_end: Optional[bool] = None
    collection_method: Optional[Literal["charge_automatically", "send_invoice"]] = None
    coupon: Optional[str] = None
    days_until_due: Optional[int] = Field(default=None, ge=0)
    default_payment_method: Optional[str] = None
    expand: Optional[List[str]] = None
    metadata: Optional[Metadata] = None
    proration_behavior: Optional[ProrationBehavior] = None
    trial_end: Optional[Union[Timestamp, Literal["now"]]] = None
    trial_period_days: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_exclusive_options(self) -> "CreateSubscription":
        if self.trial_end is not None and self.trial_period_days is not None:
            raise ValueError("trial_end_and_trial_period_days_are_exclusive")
        if self.days_until_due is not None and self.collection_method != "send_invoice":
            raise ValueError("days_until_due_requires_send_invoice")
        return self


class UpdateSubscription(RequestParams):
    cancel_at_period_end: Optional[bool] = None
    default_payment_method: Optional[str] = None
    expand: Optional[List[str]] = None
    items: Optional[List[UpdateSubscriptionItems]] = None
    metadata: Optional[Metadata] = None
    proration_behavior: Optional[ProrationBehavior] = None
    trial_end: Optional[Union[Timestamp, Literal["now"]]] = None


class CancelSubscription(RequestParams):
    invoice_now: Optional[bool] = None
    prorate: Optional[bool] = None


class ListSubscriptions(ListParams):
    created: Optional[RangeQuery] = None
    customer: Optional[str] = None
    price: Optional[str] = None
    # Any SubscriptionStatus value, or "all" / "ended".
    status: Optional[str] = None


class CreateUsageRecord(RequestParams):
    quantity: int = Field(ge=0)
    timestamp: Timestamp
    action: Optional[UsageRecordAction] = None


class ListUsageRecordSummaries(ListParams):
    pass


class CancelSubscriptionSchedule(RequestParams):
    invoice_now: Optional[bool] = None
    prorate: Optional[bool] = None


class ReleaseSubscriptionSchedule(RequestParams):
    preserve_cancel_date: Optional[bool] = None
