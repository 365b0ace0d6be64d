"""Tests for app-wide behaviour: health, CORS, Swagger and store lifecycle."""

from __future__ import annotations

from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from project_manager.api.main import create_app
from project_manager.db.models import Project


def test_health_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "database": "ok"}


def test_health_database_down(client, store):
    with patch.object(store, "ping", return_value=False):
        response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["database"] == "error"


def test_cors_preflight_allowed_origin(client):
    response = client.options(
        "/api/projects/new",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-max-age"] == "86400"
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_cors_preflight_unknown_origin(client):
    response = client.options(
        "/api/projects",
        headers={
            "Origin": "https://evil.example",
            "Access-Control-Request-Method": "GET",
        },
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


def test_cors_simple_request_headers(client):
    response = client.get("/api/clients", headers={"Origin": "http://localhost:3000"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_swagger_ui_served(client):
    response = client.get("/swagger/")
    assert response.status_code == 200
    assert "swagger-ui" in response.text


def test_openapi_lists_resource_routes(client):
    openapi = client.get("/swagger/openapi.json").json()
    for resource in ("projects", "packages", "clients"):
        assert f"/api/{resource}/new" in openapi["paths"]
        assert f"/api/{resource}" in openapi["paths"]
        item_path = openapi["paths"][f"/api/{resource}/{{{resource[:-1]}_id}}"]
        assert set(item_path) == {"get", "put", "delete"}
        assert "multipart/form-data" in item_path["put"]["requestBody"]["content"]


def test_app_opens_and_disposes_its_own_store(settings):
    app = create_app(settings)
    assert app.state.store is None

    with TestClient(app) as client:
        assert app.state.store is not None
        response = client.post("/api/packages/new", json={"name": "lifespan"})
        assert response.status_code == 201

    assert app.state.store is None


def test_injected_store_is_not_disposed(app, store):
    with TestClient(app):
        pass
    assert app.state.store is store
    assert store.ping() is True


def test_store_failure_is_json_500(client, store):
    Project.__table__.drop(store.engine)

    response = client.get("/api/projects")

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["detail"].startswith("Database error")


def test_store_failure_on_write_is_json_500(client, project_payload):
    failure = OperationalError("INSERT INTO projects", {}, Exception("disk I/O error"))
    with patch.object(Session, "flush", side_effect=failure):
        response = client.post("/api/projects/new", json=project_payload)

    assert response.status_code == 500
    assert response.json() == {"detail": "Database error: OperationalError"}
