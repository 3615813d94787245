"""Form encoding with Stripe's bracketed nesting convention.

``{"metadata": {"order": "6735"}, "expand": ["customer"]}`` encodes as
``metadata[order]=6735&expand[0]=customer``. Keys keep their insertion order,
so the same input always yields the same string.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterator, List, Mapping, Tuple
from urllib.parse import urlencode

from pydantic import BaseModel


FormPairs = List[Tuple[str, str]]


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _flatten(key: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)
    if isinstance(value, Mapping):
        if not value:
            # An explicitly empty mapping clears the field server-side.
            yield key, ""
            return
        for sub_key, sub_value in value.items():
            yield from _flatten(f"{key}[{sub_key}]", sub_value)
        return
    if isinstance(value, (list, tuple)):
        if not value:
            yield key, ""
            return
        for index, item in enumerate(value):
            yield from _flatten(f"{key}[{index}]", item)
        return
    yield key, _scalar(value)


def to_form_pairs(params: Mapping[str, Any]) -> FormPairs:
    pairs: FormPairs = []
    for key, value in params.items():
        pairs.extend(_flatten(str(key), value))
    return pairs


def encode_form(params: Mapping[str, Any] | None) -> str:
    if not params:
        return ""
    return urlencode(to_form_pairs(params), safe="[]")
