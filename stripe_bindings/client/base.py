"""Request preparation and response decoding shared by both clients."""

from __future__ import annotations

import json
from typing import Any, Optional, Tuple, Type, TypeVar
from urllib.parse import parse_qsl, quote, urlencode

from pydantic import BaseModel, ValidationError

from stripe_bindings.core.config import Settings, get_settings
from stripe_bindings.core.errors import (
    ApiError,
    ConfigurationError,
    DeserializationError,
    HttpStatusError,
    StripeError,
    UnsupportedError,
)
from stripe_bindings.params.base import RequestParams
from stripe_bindings.resources.base import ListObject
from stripe_bindings.transport.base import API_PREFIX, RawResponse, TransportConfig


ModelT = TypeVar("ModelT", bound=BaseModel)

_CURSOR_KEYS = {"starting_after", "ending_before"}


def validate_api_key(api_key: str) -> str:
    key = (api_key or "").strip()
    if not key:
        raise ConfigurationError("stripe_api_key_missing")
    if any(char.isspace() for char in key):
        raise ConfigurationError("stripe_api_key_contains_whitespace")
    if key.startswith("pk_"):
        raise ConfigurationError("stripe_publishable_key_not_allowed")
    return key


def mask_api_key(api_key: str) -> str:
    if len(api_key) <= 12:
        return "***"
    return f"{api_key[:8]}...{api_key[-4:]}"


def resource_path(template: str, *ids: str) -> str:
    """Format ``template`` with path-escaped object ids."""

    cleaned = []
    for object_id in ids:
        if not isinstance(object_id, str) or not object_id.strip():
            raise ValueError("stripe_object_id_missing")
        cleaned.append(quote(object_id.strip(), safe=""))
    return template.format(*cleaned)


def encode_params(params: Optional[RequestParams]) -> str:
    if params is None:
        return ""
    return params.encode()


def _truncate(text: str, limit: int = 200) -> str:
    text = text.strip()
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def error_from_response(raw: RawResponse) -> StripeError:
    """Turn a non-2xx response into ``ApiError`` when the body allows it."""

    try:
        payload: Any = json.loads(raw.body)
    except ValueError:
        payload = None

    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        return ApiError.from_body(error, status_code=raw.status_code, request_id=raw.request_id)

    return HttpStatusError(
        f"stripe_http_error status={raw.status_code} detail={_truncate(raw.text)}",
        status_code=raw.status_code,
        body=raw.text,
    )


def decode_response(raw: RawResponse, model: Type[ModelT]) -> ModelT:
    if not raw.is_success:
        raise error_from_response(raw)

    try:
        payload = json.loads(raw.body)
    except ValueError as exc:
        raise DeserializationError("stripe_response_invalid_json", body=raw.text) from exc
    if not isinstance(payload, dict):
        raise DeserializationError("stripe_response_not_an_object", body=raw.text)

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise DeserializationError(
            f"stripe_response_schema_mismatch model={model.__name__} errors={exc.error_count()}",
            body=raw.text,
        ) from exc


def next_page_target(page: ListObject[Any]) -> Optional[Tuple[str, str]]:
    """Return ``(path, encoded_params)`` for the page after ``page``.

    The filters of the original request are repeated and the cursor is moved
    to the last object of ``page``. ``None`` means the page was empty.
    """

    last_id = page.last_id()
    if last_id is None:
        return None

    prefix = f"{API_PREFIX}/"
    if not page.url.startswith(prefix):
        raise UnsupportedError("stripe_next_page_url_uses_different_api_version")

    path, _, url_query = page.url[len(API_PREFIX):].partition("?")
    pairs = parse_qsl(url_query, keep_blank_values=True)
    pairs.extend(parse_qsl(page.params or "", keep_blank_values=True))
    query = [(key, value) for key, value in pairs if key not in _CURSOR_KEYS]
    query.append(("starting_after", last_id))
    return path, urlencode(query, safe="[]")


def empty_next_page(page: ListObject[ModelT]) -> ListObject[ModelT]:
    return type(page)(
        data=[],
        has_more=False,
        total_count=page.total_count,
        url=page.url,
    ).with_params(page.params)


class ClientCore:
    """Holds the immutable state shared by ``Client`` and ``AsyncClient``."""

    def __init__(self, api_key: str, config: Optional[TransportConfig] = None) -> None:
        self._api_key = validate_api_key(api_key)
        self._config = config or TransportConfig()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def config(self) -> TransportConfig:
        return self._config

    @staticmethod
    def _settings_config(settings: Optional[Settings]) -> Tuple[str, TransportConfig]:
        resolved = settings or get_settings()
        return resolved.api_key, TransportConfig.from_settings(resolved)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dict__:
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot reassign {name}")
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(api_key={mask_api_key(self._api_key)!r}, "
            f"api_base={self._config.api_base!r})"
        )
