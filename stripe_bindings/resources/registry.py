"""Map the wire ``object`` tag to the model that represents it."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Type

from pydantic import ValidationError

from stripe_bindings.resources.base import StripeObject
from stripe_bindings.resources.charge import Charge
from stripe_bindings.resources.checkout import BillingPortalSession, CheckoutSession
from stripe_bindings.resources.customer import Customer
from stripe_bindings.resources.event import Event
from stripe_bindings.resources.payment_method import PaymentMethod
from stripe_bindings.resources.refund import Refund
from stripe_bindings.resources.subscription import (
    Price,
    Subscription,
    SubscriptionItem,
    SubscriptionSchedule,
    UsageRecord,
    UsageRecordSummary,
)


_RESOURCE_CLASSES: Dict[str, Type[StripeObject]] = {
    model.OBJECT_NAME: model
    for model in (
        BillingPortalSession,
        Charge,
        CheckoutSession,
        Customer,
        Event,
        PaymentMethod,
        Price,
        Refund,
        Subscription,
        SubscriptionItem,
        SubscriptionSchedule,
        UsageRecord,
        UsageRecordSummary,
    )
}


def resource_class_for(object_name: str) -> Optional[Type[StripeObject]]:
    return _RESOURCE_CLASSES.get(object_name)


def construct_resource(payload: Dict[str, Any]) -> Any:
    """Validate ``payload`` against the model named by its ``object`` tag.

    Unknown tags come back as the raw dict; a known tag whose payload does not
    fit the model raises ``DeserializationError``.
    """

    # core.errors imports this package, so the import is deferred.
    from stripe_bindings.core.errors import DeserializationError

    model = resource_class_for(str(payload.get("object") or ""))
    if model is None:
        return payload
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DeserializationError(
            f"stripe_event_object_schema_mismatch model={model.__name__} errors={exc.error_count()}",
            body=json.dumps(payload, default=str),
        ) from exc
