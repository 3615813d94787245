"""Transport contracts and the request conventions every transport shares."""

from __future__ import annotations

import json
import platform
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Protocol, Tuple

from stripe_bindings.core.config import DEFAULT_API_BASE, DEFAULT_API_VERSION, Settings
from stripe_bindings.core.errors import ConfigurationError
from stripe_bindings.params.base import RequestOptions


BINDINGS_VERSION = "0.1.0"
API_PREFIX = "/v1"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class AppInfo:
    """Identifies the application built on top of the bindings in User-Agent."""

    name: str
    version: Optional[str] = None
    url: Optional[str] = None

    def user_agent_token(self) -> str:
        token = self.name
        if self.version:
            token = f"{token}/{self.version}"
        if self.url:
            token = f"{token} ({self.url})"
        return token


@dataclass(frozen=True)
class TransportConfig:
    api_base: str = DEFAULT_API_BASE
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = 80.0
    connect_timeout_seconds: float = 30.0
    max_connections: int = 10
    tls_backend: str = "certifi"
    app_info: Optional[AppInfo] = None

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0 or self.connect_timeout_seconds <= 0:
            raise ConfigurationError("transport_timeouts_must_be_positive")
        if self.max_connections <= 0:
            raise ConfigurationError("transport_max_connections_must_be_positive")

    @classmethod
    def from_settings(cls, settings: Settings) -> "TransportConfig":
        app_info = None
        if settings.app_name.strip():
            app_info = AppInfo(
                name=settings.app_name.strip(),
                version=settings.app_version.strip() or None,
                url=settings.app_url.strip() or None,
            )
        return cls(
            api_base=settings.api_base.strip(),
            api_version=settings.api_version.strip(),
            timeout_seconds=settings.timeout_seconds,
            connect_timeout_seconds=settings.connect_timeout_seconds,
            max_connections=settings.max_connections,
            tls_backend=settings.tls_backend.strip().lower(),
            app_info=app_info,
        )


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def header(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def request_id(self) -> Optional[str]:
        return self.header("request-id")


class Transport(Protocol):
    def execute(
        self,
        method: str,
        path: str,
        encoded_params: str,
        api_key: str,
        *,
        options: Optional[RequestOptions] = None,
    ) -> RawResponse:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError


class AsyncTransport(Protocol):
    async def execute(
        self,
        method: str,
        path: str,
        encoded_params: str,
        api_key: str,
        *,
        options: Optional[RequestOptions] = None,
    ) -> RawResponse:
        raise NotImplementedError

    async def aclose(self) -> None:
        raise NotImplementedError


def build_target(
    api_base: str,
    method: str,
    path: str,
    encoded_params: str,
) -> Tuple[str, Optional[bytes]]:
    """Return the URL and form body for a call.

    GET and DELETE carry their params in the query string, POST in the body.
    """

    url = f"{api_base.rstrip('/')}{API_PREFIX}/{path.lstrip('/')}"
    if method.upper() == "POST":
        return url, encoded_params.encode("utf-8")
    if encoded_params:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{encoded_params}"
    return url, None


def _client_user_agent(config: TransportConfig) -> str:
    payload: Dict[str, object] = {
        "bindings_version": BINDINGS_VERSION,
        "lang": "python",
        "lang_version": platform.python_version(),
        "publisher": "stripe_bindings",
        "httplib": "httpx",
    }
    if config.app_info is not None:
        payload["application"] = {
            "name": config.app_info.name,
            "version": config.app_info.version,
            "url": config.app_info.url,
        }
    return json.dumps(payload, separators=(",", ":"), sort_keys=True)


def build_headers(
    config: TransportConfig,
    api_key: str,
    method: str,
    options: Optional[RequestOptions] = None,
) -> Dict[str, str]:
    key = api_key.strip()
    if not key:
        raise ConfigurationError("stripe_api_key_missing")

    user_agent = f"stripe_bindings/{BINDINGS_VERSION}"
    if config.app_info is not None:
        user_agent = f"{user_agent} {config.app_info.user_agent_token()}"

    headers = {
        "Authorization": f"Bearer {key}",
        "Stripe-Version": config.api_version,
        "User-Agent": user_agent,
        "X-Stripe-Client-User-Agent": _client_user_agent(config),
        "Accept": "application/json",
    }
    if method.upper() == "POST":
        headers["Content-Type"] = FORM_CONTENT_TYPE
    if options is not None:
        if options.idempotency_key:
            headers["Idempotency-Key"] = options.idempotency_key
        if options.stripe_account:
            headers["Stripe-Account"] = options.stripe_account
    return headers
