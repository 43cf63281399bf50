"""Root conftest.py for the auth server test suite.

This file contains project-wide fixtures and pytest configuration.
"""

import os
from collections.abc import Generator

import pytest

from src.core.config import get_settings

APP_ENV_VARS = (
    "AUTH_PORT",
    "INSTANCE_DOMAIN",
    "API_HOST",
    "APP_NAME",
    "APP_VERSION",
    "ENVIRONMENT",
    "DEBUG",
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that test multiple components"
    )


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch]:
    """Remove app-specific environment variables and reset the settings cache.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Yields:
        pytest.MonkeyPatch: The monkeypatch instance for env manipulation.
    """
    for key in list(os.environ):
        if key in APP_ENV_VARS or key.startswith("LOG_CONFIG__"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()

    yield monkeypatch

    get_settings.cache_clear()
