"""Parameters for the events API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field, model_validator

from stripe_bindings.params.base import ListParams, RangeQuery


class ListEvents(ListParams):
    created: Optional[RangeQuery] = None
    delivery_success: Optional[bool] = None
    type: Optional[str] = None
    types: Optional[List[str]] = Field(default=None, max_length=20)

    @model_validator(mode="after")
    def _check_type_filters(self) -> "ListEvents":
        if self.type is not None and self.types is not None:
            raise ValueError("type_and_types_are_exclusive")
        return self
