import pytest

from stripe_bindings.client import AsyncClient, Client, create_client
from stripe_bindings.core.config import DEFAULT_API_BASE, DEFAULT_API_VERSION, get_settings
from stripe_bindings.transport import TransportConfig


def test_defaults_without_environment() -> None:
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.api_base == DEFAULT_API_BASE
    assert settings.api_version == DEFAULT_API_VERSION
    assert settings.timeout_seconds == 80.0
    assert settings.tls_backend == "certifi"
    assert settings.execution_mode == "blocking"
    assert settings.webhook_tolerance_seconds == 300

    get_settings.cache_clear()


def test_loads_environment_values(monkeypatch) -> None:
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env_key_123456")
    monkeypatch.setenv("STRIPE_API_BASE", "http://localhost:12111")
    monkeypatch.setenv("STRIPE_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("STRIPE_TLS_BACKEND", "system")
    monkeypatch.setenv("STRIPE_APP_NAME", "billing-worker")
    monkeypatch.setenv("STRIPE_APP_VERSION", "2.1.0")
    get_settings.cache_clear()

    settings = get_settings()
    assert settings.api_key == "sk_test_env_key_123456"
    assert settings.api_base == "http://localhost:12111"
    assert settings.timeout_seconds == 12.5

    config = TransportConfig.from_settings(settings)
    assert config.tls_backend == "system"
    assert config.app_info is not None
    assert config.app_info.user_agent_token() == "billing-worker/2.1.0"

    get_settings.cache_clear()


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("STRIPE_TIMEOUT_SECONDS", "0"),
        ("STRIPE_CONNECT_TIMEOUT_SECONDS", "-1"),
        ("STRIPE_MAX_CONNECTIONS", "0"),
        ("STRIPE_WEBHOOK_TOLERANCE_SECONDS", "0"),
        ("STRIPE_TLS_BACKEND", "openssl-legacy"),
        ("STRIPE_EXECUTION_MODE", "threads"),
        ("STRIPE_API_BASE", "ftp://api.stripe.com"),
    ],
)
def test_rejects_invalid_values(monkeypatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)
    get_settings.cache_clear()

    with pytest.raises(ValueError, match=name):
        get_settings()

    get_settings.cache_clear()


def test_app_version_requires_app_name(monkeypatch) -> None:
    monkeypatch.setenv("STRIPE_APP_VERSION", "1.0.0")
    get_settings.cache_clear()

    with pytest.raises(ValueError, match="STRIPE_APP_NAME"):
        get_settings()

    get_settings.cache_clear()


def test_create_client_follows_execution_mode(monkeypatch) -> None:
    monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env_key_123456")
    get_settings.cache_clear()

    blocking = create_client()
    assert isinstance(blocking, Client)
    blocking.close()

    monkeypatch.setenv("STRIPE_EXECUTION_MODE", "async")
    get_settings.cache_clear()

    non_blocking = create_client()
    assert isinstance(non_blocking, AsyncClient)

    get_settings.cache_clear()
