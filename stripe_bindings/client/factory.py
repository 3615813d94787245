"""Resolve the client class for the configured execution mode."""

from __future__ import annotations

from typing import Optional, Union

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.sync_client import Client
from stripe_bindings.core.config import Settings, get_settings


def create_client(settings: Optional[Settings] = None) -> Union[Client, AsyncClient]:
    resolved = settings or get_settings()
    mode = resolved.execution_mode.strip().lower()
    if mode == "async":
        return AsyncClient.from_settings(resolved)
    return Client.from_settings(resolved)
