"""Blocking and asynchronous Stripe API clients."""

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.factory import create_client
from stripe_bindings.client.sync_client import Client

__all__ = ["AsyncClient", "Client", "create_client"]
