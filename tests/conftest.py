"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from inventory_backend.api import create_api
from inventory_backend.database import BaseSchema, DatabaseService
from inventory_backend.settings import BackendSettings, get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator

SQLITE_MEMORY_URL = "sqlite+pysqlite://"


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", SQLITE_MEMORY_URL)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> BackendSettings:
    return BackendSettings(database_url=SQLITE_MEMORY_URL)


@pytest.fixture
def database(settings: BackendSettings) -> Iterator[DatabaseService]:
    """In-memory SQLite shared by every connection of the pool."""
    service = DatabaseService(
        settings=settings,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    BaseSchema.metadata.create_all(service.engine)
    yield service
    service.close()


@pytest.fixture
def client(settings: BackendSettings, database: DatabaseService) -> Iterator[TestClient]:
    app = create_api(settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def product_payload() -> dict[str, object]:
    return {"name": "Widget", "category": "Tools", "price": 10, "stock": 1}


@pytest.fixture
def create_product(client: TestClient, product_payload: dict[str, object]):
    """Return a helper that creates a product through the API."""

    def _create(**overrides: object) -> dict[str, object]:
        response = client.post("/api/products", json={**product_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _create
