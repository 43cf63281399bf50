"""Shared fixtures for integration tests."""

from collections.abc import AsyncGenerator, Generator

import pytest
from fastapi import APIRouter, FastAPI
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient
from pytest_mock import MockerFixture

from src.api.server import create_app
from src.core.config import Settings


@pytest.fixture(autouse=True)
def skip_logging_setup(mocker: MockerFixture) -> None:
    """Leave Loguru sinks as pytest configured them."""
    mocker.patch("src.api.server.setup_logging")


@pytest.fixture
def app() -> FastAPI:
    """Provide the fully assembled application.

    A failing route is added to the public controller's area so that the
    error path of the pipeline can be exercised.
    """
    application = create_app(Settings(_env_file=None))

    router = APIRouter()

    @router.get("/public/explode")
    async def explode() -> None:
        raise RuntimeError("controller exploded")

    application.include_router(router)
    return application


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    """Synchronous client that surfaces server errors as 500 responses."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Asynchronous client for concurrent request tests."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://testserver"
    ) as http_client:
        yield http_client
