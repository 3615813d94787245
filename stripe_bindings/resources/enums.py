"""Enum-like string fields shared across resources."""

from __future__ import annotations

from stripe_bindings.resources.base import StripeEnum


class Currency(StripeEnum):
    AUD = "aud"
    BRL = "brl"
    CAD = "cad"
    CHF = "chf"
    CNY = "cny"
    DKK = "dkk"
    EUR = "eur"
    GBP = "gbp"
    HKD = "hkd"
    INR = "inr"
    JPY = "jpy"
    MXN = "mxn"
    NOK = "nok"
    NZD = "nzd"
    PLN = "pln"
    SEK = "sek"
    SGD = "sgd"
    USD = "usd"


class ApiErrorType(StripeEnum):
    API_ERROR = "api_error"
    CARD_ERROR = "card_error"
    IDEMPOTENCY_ERROR = "idempotency_error"
    INVALID_REQUEST_ERROR = "invalid_request_error"
    AUTHENTICATION_ERROR = "authentication_error"
    RATE_LIMIT_ERROR = "rate_limit_error"
