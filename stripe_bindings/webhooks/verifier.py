"""Turn a signed webhook delivery into a typed ``Event``."""

from __future__ import annotations

import json
from typing import Optional

from pydantic import ValidationError

from stripe_bindings.core.config import Settings, get_settings
from stripe_bindings.core.errors import WebhookVerificationError
from stripe_bindings.core.logger import get_logger
from stripe_bindings.resources.event import Event
from stripe_bindings.webhooks.signature import (
    DEFAULT_TOLERANCE_SECONDS,
    Payload,
    payload_text,
    verify_signature,
)


log = get_logger("stripe_bindings.webhooks")


def construct_event(
    payload: Payload,
    signature_header: str,
    secret: str,
    *,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    now: Optional[int] = None,
) -> Event:
    """Verify ``payload`` and only then decode it.

    Nothing from the body is parsed before the signature has been checked.
    """

    try:
        verify_signature(
            payload=payload,
            signature_header=signature_header,
            secret=secret,
            tolerance_seconds=tolerance_seconds,
            now=now,
        )
    except WebhookVerificationError as exc:
        log.warning("stripe_webhook_rejected", reason=exc.message)
        raise

    try:
        body = json.loads(payload_text(payload))
    except ValueError as exc:
        raise WebhookVerificationError("stripe_webhook_invalid_json") from exc
    if not isinstance(body, dict):
        raise WebhookVerificationError("stripe_webhook_payload_not_an_object")

    try:
        event = Event.model_validate(body)
    except ValidationError as exc:
        raise WebhookVerificationError(
            f"stripe_webhook_event_invalid errors={exc.error_count()}"
        ) from exc

    log.debug("stripe_webhook_verified", event_id=event.id, event_type=str(event.type))
    return event


class WebhookVerifier:
    """Holds a signing secret and tolerance for repeated verification."""

    def __init__(self, secret: str, tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS) -> None:
        if not secret:
            raise WebhookVerificationError("stripe_webhook_secret_missing")
        if tolerance_seconds < 0:
            raise WebhookVerificationError("stripe_webhook_tolerance_negative")
        self._secret = secret
        self._tolerance_seconds = tolerance_seconds

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "WebhookVerifier":
        resolved = settings or get_settings()
        return cls(resolved.webhook_secret, resolved.webhook_tolerance_seconds)

    @property
    def tolerance_seconds(self) -> int:
        return self._tolerance_seconds

    def verify(self, payload: Payload, signature_header: str, *, now: Optional[int] = None) -> None:
        verify_signature(
            payload=payload,
            signature_header=signature_header,
            secret=self._secret,
            tolerance_seconds=self._tolerance_seconds,
            now=now,
        )

    def construct_event(self, payload: Payload, signature_header: str, *, now: Optional[int] = None) -> Event:
        return construct_event(
            payload,
            signature_header,
            self._secret,
            tolerance_seconds=self._tolerance_seconds,
            now=now,
        )

    def __repr__(self) -> str:
        return f"WebhookVerifier(secret='***', tolerance_seconds={self._tolerance_seconds})"
