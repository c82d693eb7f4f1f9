"""
Employee Service Tests - Test Configuration.

Provides pytest fixtures for building isolated applications, each
owning a freshly seeded repository.
"""

from typing import Any, Dict, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from app.repositories import InMemoryEmployeeRepository


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings for the test environment.

    Built explicitly so host environment variables cannot change
    authorization or routing behaviour under test.
    """
    return Settings(
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        LOG_JSON=False,
        DELETE_AUTH_TOKEN="frank",
        ENFORCE_UNIQUE_IDS=False,
        ENABLE_HEADER_LOOKUP=True,
    )


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Application with its own seeded repository."""
    return create_app(test_settings)


@pytest.fixture
def repository(app: FastAPI) -> InMemoryEmployeeRepository:
    """The repository owned by the app under test."""
    return app.state.repository


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client running the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def new_employee() -> Dict[str, Any]:
    """An employee whose id is not in the seed set."""
    return {"id": 4, "name": "Alex", "position": "Clerk", "salary": 40000}


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "asyncio: mark test as async",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )
