"""Tests for service provider endpoints."""

from __future__ import annotations

import pytest


@pytest.fixture
async def providers(client):
    """Three providers: two taxis and a coach company, created out of name order."""
    created = []
    for payload in [
        {"name": "Weald Cars", "phone_number": "01580 111222", "vehicle_type": "taxi",
         "license_number": "TW-0091", "rating": 4},
        {"name": "Abbey Coaches", "phone_number": "01494 333444", "vehicle_type": "school-coach"},
        {"name": "Kent Airport Taxis", "phone_number": "01622 555666", "vehicle_type": "taxi",
         "email": "bookings@kat.example.com"},
    ]:
        resp = await client.post("/api/service-providers", json=payload)
        assert resp.status_code == 201
        created.append(resp.json())
    return created


class TestServiceProvidersAPI:
    async def test_list_sorted_by_name(self, client, providers):
        resp = await client.get("/api/service-providers")
        assert resp.status_code == 200
        assert [p["name"] for p in resp.json()] == [
            "Abbey Coaches", "Kent Airport Taxis", "Weald Cars",
        ]
        assert all(p["is_active"] for p in resp.json())

    async def test_search(self, client, providers):
        resp = await client.get("/api/service-providers/search", params={"q": "taxis"})
        assert [p["name"] for p in resp.json()] == ["Kent Airport Taxis"]

        resp = await client.get("/api/service-providers/search", params={"q": "tw-00"})
        assert [p["name"] for p in resp.json()] == ["Weald Cars"]

        resp = await client.get("/api/service-providers/search", params={"q": "01494"})
        assert [p["name"] for p in resp.json()] == ["Abbey Coaches"]

    async def test_search_requires_query(self, client):
        resp = await client.get("/api/service-providers/search")
        assert resp.status_code == 400

    async def test_by_vehicle_type(self, client, providers):
        resp = await client.get("/api/service-providers/type/taxi")
        assert [p["name"] for p in resp.json()] == ["Kent Airport Taxis", "Weald Cars"]

        resp = await client.get("/api/service-providers/type/helicopter")
        assert resp.status_code == 422

    async def test_invalid_rating_rejected(self, client):
        resp = await client.post("/api/service-providers", json={
            "name": "X", "phone_number": "1", "vehicle_type": "taxi", "rating": 6,
        })
        assert resp.status_code == 422

    async def test_invalid_email_rejected(self, client):
        resp = await client.post("/api/service-providers", json={
            "name": "X", "phone_number": "1", "vehicle_type": "taxi", "email": "not-an-email",
        })
        assert resp.status_code == 422

    async def test_update(self, client, providers):
        provider_id = providers[0]["id"]
        resp = await client.put(
            f"/api/service-providers/{provider_id}", json={"rating": 5, "notes": "Always early"}
        )
        assert resp.status_code == 200
        assert resp.json()["rating"] == 5
        assert resp.json()["name"] == "Weald Cars"

    async def test_soft_delete(self, client, providers):
        provider_id = providers[0]["id"]

        resp = await client.delete(f"/api/service-providers/{provider_id}")
        assert resp.status_code == 200
        assert resp.json()["is_active"] is False

        names = [p["name"] for p in (await client.get("/api/service-providers")).json()]
        assert "Weald Cars" not in names

        # Still resolvable by id
        resp = await client.get(f"/api/service-providers/{provider_id}")
        assert resp.status_code == 200
        assert resp.json()["is_active"] is False

    async def test_not_found(self, client):
        assert (await client.get("/api/service-providers/nope")).status_code == 404
        assert (await client.put("/api/service-providers/nope", json={})).status_code == 404
        assert (await client.delete("/api/service-providers/nope")).status_code == 404
