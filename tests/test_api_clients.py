"""Tests for the /api/clients endpoints."""

from __future__ import annotations

import pytest


def test_create_client(client, client_payload):
    response = client.post("/api/clients/new", json=client_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == client_payload["name"]
    assert body["link"] == client_payload["link"]
    assert body["imageUrl"] == client_payload["imageUrl"]
    assert "stacks" not in body


def test_create_client_accepts_snake_case(client):
    response = client.post(
        "/api/clients/new",
        json={"name": "Snake", "link": "https://s.example", "image_url": "https://s.example/i.png"},
    )
    assert response.status_code == 201
    assert response.json()["imageUrl"] == "https://s.example/i.png"


@pytest.mark.parametrize("field", ["name", "link", "imageUrl"])
def test_create_client_requires_field(client, client_payload, field):
    client_payload[field] = ""
    response = client.post("/api/clients/new", json=client_payload)
    assert response.status_code == 400
    assert client.get("/api/clients").json() == []


def test_duplicate_client_name_conflicts(client, client_payload):
    assert client.post("/api/clients/new", json=client_payload).status_code == 201

    response = client.post("/api/clients/new", json=client_payload)

    assert response.status_code == 409
    assert len(client.get("/api/clients").json()) == 1


def test_rename_client_onto_existing_name(client, client_payload):
    client.post("/api/clients/new", json=client_payload)
    other = client.post("/api/clients/new", json=dict(client_payload, name="Other")).json()

    response = client.put(f"/api/clients/{other['id']}", json={"name": client_payload["name"]})

    assert response.status_code == 409
    assert client.get(f"/api/clients/{other['id']}").json()["name"] == "Other"


def test_client_name_too_long(client, client_payload):
    client_payload["name"] = "n" * 101
    response = client.post("/api/clients/new", json=client_payload)
    assert response.status_code == 400


def test_update_client_with_form(client, client_payload):
    created = client.post("/api/clients/new", json=client_payload).json()

    response = client.put(
        f"/api/clients/{created['id']}",
        data={"link": "https://acme.example/new"},
        files={"logo": ("logo.png", b"\x89PNG", "image/png")},
    )

    assert response.status_code == 200
    assert response.json()["link"] == "https://acme.example/new"
    assert response.json()["imageUrl"] == client_payload["imageUrl"]


def test_update_client_with_file_in_text_field(client, client_payload):
    created = client.post("/api/clients/new", json=client_payload).json()

    response = client.put(
        f"/api/clients/{created['id']}",
        files={"imageUrl": ("logo.png", b"\x89PNG", "image/png")},
    )

    assert response.status_code == 400


def test_delete_client(client, client_payload):
    created = client.post("/api/clients/new", json=client_payload).json()

    response = client.delete(f"/api/clients/{created['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Client deleted successfully"}
    assert client.get(f"/api/clients/{created['id']}").status_code == 404


def test_rename_client_too_long(client, client_payload):
    created = client.post("/api/clients/new", json=client_payload).json()

    response = client.put(f"/api/clients/{created['id']}", json={"name": "n" * 101})

    assert response.status_code == 400
    assert client.get(f"/api/clients/{created['id']}").json()["name"] == client_payload["name"]


@pytest.mark.parametrize("client_id", ["0", "-1", "2147483648", "99999999999999999999999"])
def test_client_id_out_of_range(client, client_id):
    assert client.get(f"/api/clients/{client_id}").status_code == 400
    assert client.put(f"/api/clients/{client_id}", json={"name": "x"}).status_code == 400
    response = client.delete(f"/api/clients/{client_id}")
    assert response.status_code == 400
    assert "detail" in response.json()
