"""Stripe-Signature header parsing and HMAC-SHA256 verification."""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import List, Optional, Union

from stripe_bindings.core.errors import WebhookVerificationError


SIGNATURE_SCHEME = "v1"
DEFAULT_TOLERANCE_SECONDS = 300

Payload = Union[bytes, str]


@dataclass(frozen=True)
class SignatureHeader:
    timestamp: int
    signatures: List[str]


def payload_text(payload: Payload) -> str:
    if isinstance(payload, str):
        return payload
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise WebhookVerificationError("stripe_webhook_payload_not_utf8") from exc


def parse_signature_header(signature_header: str) -> SignatureHeader:
    """Read ``t=`` and every ``v1=`` entry; other schemes are ignored."""

    timestamp: Optional[int] = None
    signatures: List[str] = []

    for part in (signature_header or "").split(","):
        part = part.strip()
        if not part or "=" not in part:
            continue
        key, value = part.split("=", 1)
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError as exc:
                raise WebhookVerificationError("stripe_signature_timestamp_invalid") from exc
        elif key == SIGNATURE_SCHEME:
            signatures.append(value)

    if timestamp is None:
        raise WebhookVerificationError("stripe_signature_timestamp_missing")
    if not signatures:
        raise WebhookVerificationError("stripe_signature_missing_v1")

    return SignatureHeader(timestamp=timestamp, signatures=signatures)


def compute_signature(payload: Payload, secret: str, timestamp: int) -> str:
    signed_payload = f"{timestamp}.{payload_text(payload)}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), signed_payload, digestmod=hashlib.sha256).hexdigest()


def verify_signature(
    *,
    payload: Payload,
    signature_header: str,
    secret: str,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    now: Optional[int] = None,
) -> SignatureHeader:
    if not secret:
        raise WebhookVerificationError("stripe_webhook_secret_missing")

    header = parse_signature_header(signature_header)
    current_time = int(time.time()) if now is None else now
    # Timestamps from the future are rejected the same way as stale ones.
    if abs(current_time - header.timestamp) > tolerance_seconds:
        raise WebhookVerificationError("stripe_signature_timestamp_outside_tolerance")

    expected = compute_signature(payload, secret, header.timestamp)
    if not any(hmac.compare_digest(expected, candidate) for candidate in header.signatures):
        raise WebhookVerificationError("stripe_signature_mismatch")
    return header


def generate_signature_header(payload: Payload, secret: str, timestamp: Optional[int] = None) -> str:
    """Build a header the way Stripe would; intended for tests and local tooling."""

    ts = int(time.time()) if timestamp is None else timestamp
    return f"t={ts},{SIGNATURE_SCHEME}={compute_signature(payload, secret, ts)}"
