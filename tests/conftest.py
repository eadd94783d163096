"""Root-level pytest configuration and shared fixtures.

Key exports:
    - test_settings: default Settings for a test run
    - make_client: builds a TestClient for any registered service
"""

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient

from app import create_app
from app.services import ServiceDefinition, get_service
from config import Settings
from tests.helpers import make_settings


@pytest.fixture
def test_settings() -> Settings:
    return make_settings()


@pytest.fixture
def make_client(test_settings: Settings) -> Callable[..., TestClient]:
    """Factory fixture: ``make_client("quiz-service", health_check_enabled=True)``."""

    def _make(service: str | ServiceDefinition = "api-gateway", **overrides: Any) -> TestClient:
        definition = get_service(service) if isinstance(service, str) else service
        settings = make_settings(**overrides) if overrides else test_settings
        return TestClient(create_app(definition, settings))

    return _make


SETTINGS_ENV_VARS = (
    "ENVIRONMENT",
    "LOG_LEVEL",
    "HOST",
    "PORT",
    "ALLOWED_ORIGINS",
    "HEALTH_CHECK_ENABLED",
)


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's environment out of Settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
