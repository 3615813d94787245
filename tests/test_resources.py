from __future__ import annotations

import pydantic
import pytest

from stripe_bindings.core.errors import DeserializationError
from stripe_bindings.resources import (
    Charge,
    ChargeStatus,
    CheckoutSession,
    Currency,
    Customer,
    Event,
    EventType,
    ListObject,
    PaymentMethod,
    Refund,
    Subscription,
    SubscriptionItem,
    SubscriptionSchedule,
    SubscriptionStatus,
    construct_resource,
)
from stripe_bindings.resources.base import expandable_id


def test_charge_keeps_unknown_fields() -> None:
    charge = Charge.model_validate(
        {
            "id": "ch_123",
            "object": "charge",
            "amount": 2000,
            "currency": "usd",
            "status": "succeeded",
            "radar_options": {"session": "rs_1"},
        }
    )

    assert charge.status is ChargeStatus.SUCCEEDED
    assert charge.currency is Currency.USD
    assert charge.unknown_fields == {"radar_options": {"session": "rs_1"}}
    assert charge.metadata == {}


def test_unknown_enum_value_is_preserved() -> None:
    charge = Charge.model_validate(
        {"id": "ch_1", "amount": 100, "currency": "xts", "status": "requires_review"}
    )

    assert charge.status.is_known is False
    assert charge.status.value == "requires_review"
    assert str(charge.status) == "requires_review"
    assert charge.currency.is_known is False
    assert ChargeStatus.SUCCEEDED.is_known is True


def test_missing_required_field_fails_validation() -> None:
    with pytest.raises(pydantic.ValidationError):
        Charge.model_validate({"id": "ch_1", "currency": "usd", "status": "succeeded"})


def test_expandable_holds_id_or_object() -> None:
    plain = Charge.model_validate(
        {"id": "ch_1", "amount": 1, "currency": "usd", "status": "pending", "customer": "cus_9"}
    )
    expanded = Charge.model_validate(
        {
            "id": "ch_2",
            "amount": 1,
            "currency": "usd",
            "status": "pending",
            "customer": {"id": "cus_9", "object": "customer", "email": "a@example.com"},
        }
    )

    assert plain.customer == "cus_9"
    assert isinstance(expanded.customer, Customer)
    assert expanded.customer.email == "a@example.com"
    assert expandable_id(plain.customer) == expandable_id(expanded.customer) == "cus_9"


def test_models_are_immutable() -> None:
    customer = Customer.model_validate({"id": "cus_1", "email": "a@example.com"})

    with pytest.raises(pydantic.ValidationError):
        customer.email = "b@example.com"


def test_nested_list_object() -> None:
    subscription = Subscription.model_validate(
        {
            "id": "sub_1",
            "object": "subscription",
            "customer": "cus_1",
            "status": "active",
            "items": {
                "object": "list",
                "data": [{"id": "si_1", "object": "subscription_item", "price": {"id": "price_1", "lookup_key": "pro"}}],
                "has_more": False,
                "url": "/v1/subscription_items?subscription=sub_1",
            },
        }
    )

    assert subscription.status is SubscriptionStatus.ACTIVE
    assert isinstance(subscription.items, ListObject)
    assert subscription.items.data[0].price.lookup_key == "pro"
    assert subscription.items.last_id() == "si_1"


def test_event_resolves_object_by_tag() -> None:
    event = Event.model_validate(
        {
            "id": "evt_1",
            "object": "event",
            "type": "charge.succeeded",
            "request": "req_legacy",
            "data": {
                "object": {"id": "ch_1", "object": "charge", "amount": 5, "currency": "eur", "status": "succeeded"},
                "previous_attributes": {"status": "pending"},
            },
        }
    )

    resource = event.data.to_resource()
    assert event.type is EventType.CHARGE_SUCCEEDED
    assert isinstance(resource, Charge)
    assert resource.currency is Currency.EUR
    assert event.previous_attributes == {"status": "pending"}
    assert event.request == "req_legacy"


def test_construct_resource_returns_raw_dict_for_unknown_tag() -> None:
    payload = {"id": "tok_1", "object": "token"}

    assert construct_resource(payload) == payload


@pytest.mark.parametrize(
    ("model", "payload", "field", "empty"),
    [
        (Customer, {"id": "cus_1", "object": "customer"}, "preferred_locales", []),
        (Customer, {"id": "cus_1", "object": "customer"}, "metadata", {}),
        (CheckoutSession, {"id": "cs_1", "object": "checkout.session"}, "metadata", {}),
        (CheckoutSession, {"id": "cs_1", "object": "checkout.session"}, "payment_method_types", []),
        (PaymentMethod, {"id": "pm_1", "object": "payment_method", "type": "card"}, "metadata", {}),
        (Refund, {"id": "re_1", "object": "refund", "amount": 100, "currency": "usd"}, "metadata", {}),
        (Charge, {"id": "ch_1", "amount": 1, "currency": "usd", "status": "pending"}, "metadata", {}),
        (SubscriptionItem, {"id": "si_1", "object": "subscription_item"}, "tax_rates", []),
        (
            SubscriptionSchedule,
            {"id": "sub_sched_1", "customer": "cus_1", "status": "active"},
            "phases",
            [],
        ),
    ],
)
def test_null_collections_decode_as_empty(model, payload, field: str, empty) -> None:
    decoded = model.model_validate(dict(payload, **{field: None}))

    assert getattr(decoded, field) == empty
    assert field not in decoded.unknown_fields


def test_null_list_data_decodes_as_empty_page() -> None:
    page = ListObject[Charge].model_validate({"object": "list", "data": None, "has_more": False, "url": "/v1/charges"})

    assert page.data == []


def test_event_object_with_wrong_shape_raises_deserialization_error() -> None:
    event = Event.model_validate(
        {
            "id": "evt_2",
            "object": "event",
            "type": "charge.succeeded",
            "data": {"object": {"id": "ch_1", "object": "charge"}},
        }
    )

    with pytest.raises(DeserializationError, match="stripe_event_object_schema_mismatch model=Charge"):
        event.data.to_resource()
