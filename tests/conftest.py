"""Shared test fixtures for pytest.

Every test gets a fresh in-memory SQLite store, so tests never need a live
PostgreSQL server.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from project_manager.api.main import create_app
from project_manager.config import Settings
from project_manager.db.store import Store

SQLITE_MEMORY_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=SQLITE_MEMORY_URL,
        LOG_FILE=str(tmp_path / "logs" / "test.log"),
        LOG_LEVEL="DEBUG",
        CORS_ALLOW_ORIGINS=["http://localhost:3000"],
    )


@pytest.fixture
def store() -> Store:
    store = Store(SQLITE_MEMORY_URL)
    store.create_schema()
    yield store
    store.dispose()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def project_payload() -> dict:
    return {
        "name": "Demo",
        "imageUrl": "http://x/im.png",
        "link": "http://x",
        "description": "d",
    }


@pytest.fixture
def package_payload() -> dict:
    return {
        "name": "fastapi-crud",
        "link": "https://pypi.org/project/fastapi-crud/",
        "description": "Generic CRUD routers",
        "stacks": ["python", "fastapi"],
    }


@pytest.fixture
def client_payload() -> dict:
    return {
        "name": "Acme Corp",
        "link": "https://acme.example",
        "imageUrl": "https://acme.example/logo.png",
    }
