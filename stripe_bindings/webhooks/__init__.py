"""Webhook signature verification, independent of the API client."""

from stripe_bindings.webhooks.signature import (
    SignatureHeader,
    compute_signature,
    generate_signature_header,
    parse_signature_header,
    verify_signature,
)
from stripe_bindings.webhooks.verifier import WebhookVerifier, construct_event

__all__ = [
    "SignatureHeader",
    "WebhookVerifier",
    "compute_signature",
    "construct_event",
    "generate_signature_header",
    "parse_signature_header",
    "verify_signature",
]
