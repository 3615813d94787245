"""Error taxonomy shared by the client, transports and webhook verifier."""

from __future__ import annotations

from typing import Any, Dict, Optional

from stripe_bindings.resources.enums import ApiErrorType


class StripeError(RuntimeError):
    """Base class for every error raised by stripe_bindings."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(StripeError, ValueError):
    """Raised when the client or settings are unusable as configured."""


class TransportError(StripeError):
    """Raised when the HTTP round-trip itself fails (connection, DNS, TLS)."""


class HttpStatusError(TransportError):
    """Raised on a non-2xx response whose body is not a Stripe error object."""

    def __init__(self, message: str, *, status_code: int, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class StripeTimeoutError(StripeError, TimeoutError):
    """Raised when a call exceeds its configured deadline."""


class DeserializationError(StripeError):
    """Raised when a 2xx body does not match the expected resource shape."""

    def __init__(self, message: str, *, body: Optional[str] = None) -> None:
        super().__init__(message)
        self.body = body


class UnsupportedError(StripeError):
    """Raised for operations the bindings cannot perform, e.g. cross-version paging."""


class WebhookVerificationError(StripeError, ValueError):
    """Raised when a webhook payload or its signature is invalid."""


class ApiError(StripeError):
    """Structured error returned by the Stripe API on a non-2xx response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        error_type: Optional[ApiErrorType] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        decline_code: Optional[str] = None,
        doc_url: Optional[str] = None,
        request_id: Optional[str] = None,
        raw: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.param = param
        self.decline_code = decline_code
        self.doc_url = doc_url
        self.request_id = request_id
        self.raw = raw or {}

    @classmethod
    def from_body(
        cls,
        error: Dict[str, Any],
        *,
        status_code: int,
        request_id: Optional[str] = None,
    ) -> "ApiError":
        error_type = error.get("type")
        message = str(error.get("message") or "") or f"stripe_api_error status={status_code}"
        return cls(
            message,
            status_code=status_code,
            error_type=ApiErrorType(error_type) if isinstance(error_type, str) else None,
            code=_optional_str(error.get("code")),
            param=_optional_str(error.get("param")),
            decline_code=_optional_str(error.get("decline_code")),
            doc_url=_optional_str(error.get("doc_url")),
            request_id=request_id,
            raw=error,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(status_code={self.status_code}, "
            f"code={self.code!r}, message={self.message!r}, param={self.param!r})"
        )


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)
