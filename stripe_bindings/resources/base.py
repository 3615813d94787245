"""Shared building blocks for Stripe resource models."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


UNKNOWN_MEMBER_NAME = "UNKNOWN"

Metadata = Dict[str, str]
Timestamp = int

T = TypeVar("T")


class StripeEnum(str, Enum):
    """String enum that accepts values it has never seen.

    Stripe adds enum values without notice, so an unrecognized value becomes
    an ``UNKNOWN`` pseudo-member carrying the raw string instead of failing.
    """

    @classmethod
    def _missing_(cls, value: object) -> Optional["StripeEnum"]:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNKNOWN_MEMBER_NAME
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        return self._name_ != UNKNOWN_MEMBER_NAME

    def __str__(self) -> str:
        return str(self.value)


class StripeModel(BaseModel):
    """Immutable model that keeps every field of the payload, known or not."""

    model_config = ConfigDict(extra="allow", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _null_collections_to_empty(cls, data: Any) -> Any:
        # Stripe sends null for list and map fields it has nothing to put in.
        if not isinstance(data, dict):
            return data
        nulls = {
            name
            for name, info in cls.model_fields.items()
            if info.default_factory is not None and name in data and data[name] is None
        }
        if not nulls:
            return data
        return {key: value for key, value in data.items() if key not in nulls}

    @property
    def unknown_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class StripeObject(StripeModel):
    """A top-level Stripe object identified by an opaque string id."""

    OBJECT_NAME: ClassVar[str] = ""

    id: str
    object: Optional[str] = None


# An id, or the full object when the field was expanded.
Expandable = Union[str, T]


def expandable_id(value: Union[str, StripeObject, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return value.id


class Deleted(StripeModel):
    id: str
    object: Optional[str] = None
    deleted: bool = True


class ListObject(StripeModel, Generic[T]):
    """A single page of a cursor-paginated list."""

    object: str = "list"
    data: List[T] = Field(default_factory=list)
    has_more: bool = False
    total_count: Optional[int] = None
    url: str = ""

    # Encoded filter params of the request that produced this page.
    _params: Optional[str] = PrivateAttr(default=None)

    @property
    def params(self) -> Optional[str]:
        return self._params

    def with_params(self, params: Optional[str]) -> "ListObject[T]":
        self._params = params or None
        return self

    def last_id(self) -> Optional[str]:
        if not self.data:
            return None
        return getattr(self.data[-1], "id", None)
