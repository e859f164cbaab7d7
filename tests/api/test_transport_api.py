"""Tests for ground transport API endpoints."""

from __future__ import annotations

COACH = {
    "term_id": "ben-autumn-2026",
    "direction": "return",
    "vehicle_type": "school-coach",
    "pickup_time": "14:00",
}


class TestTransportAPI:
    async def test_create_coach_without_driver(self, client):
        resp = await client.post("/api/transport", json=COACH)
        assert resp.status_code == 201
        data = resp.json()
        assert data["vehicle_type"] == "school-coach"
        assert data["driver_name"] == ""
        assert "id" in data

    async def test_create_taxi(self, client, taxi_payload):
        resp = await client.post("/api/transport", json=taxi_payload)
        assert resp.status_code == 201
        assert resp.json()["license_number"] == "PH-4471"

    async def test_taxi_without_licence_rejected(self, client, taxi_payload):
        resp = await client.post(
            "/api/transport", json={**taxi_payload, "license_number": ""}
        )
        assert resp.status_code == 422
        assert "license number" in resp.text

    async def test_missing_direction_rejected(self, client):
        payload = {k: v for k, v in COACH.items() if k != "direction"}
        resp = await client.post("/api/transport", json=payload)
        assert resp.status_code == 422

    async def test_legacy_type_field_accepted(self, client):
        payload = {k: v for k, v in COACH.items() if k != "vehicle_type"}
        payload["type"] = "school-coach"
        resp = await client.post("/api/transport", json=payload)
        assert resp.status_code == 201
        assert resp.json()["vehicle_type"] == "school-coach"

    async def test_list_newest_first(self, client, taxi_payload):
        first = (await client.post("/api/transport", json={
            **COACH, "created_at": "2026-08-01T10:00:00Z",
        })).json()
        second = (await client.post("/api/transport", json={
            **taxi_payload, "created_at": "2026-08-02T10:00:00Z",
        })).json()

        resp = await client.get("/api/transport")
        assert [t["id"] for t in resp.json()] == [second["id"], first["id"]]

    async def test_list_by_term(self, client):
        await client.post("/api/transport", json=COACH)
        await client.post("/api/transport", json={**COACH, "term_id": "wyc-autumn-2026"})

        resp = await client.get("/api/transport/term/wyc-autumn-2026")
        assert [t["term_id"] for t in resp.json()] == ["wyc-autumn-2026"]

        resp = await client.get("/api/transport", params={"term_id": "ben-autumn-2026"})
        assert [t["term_id"] for t in resp.json()] == ["ben-autumn-2026"]

    async def test_switch_to_taxi_requires_driver(self, client):
        created = (await client.post("/api/transport", json=COACH)).json()

        resp = await client.put(
            f"/api/transport/{created['id']}", json={"vehicle_type": "taxi"}
        )
        assert resp.status_code == 422

        # Record left untouched
        resp = await client.get(f"/api/transport/{created['id']}")
        assert resp.json()["vehicle_type"] == "school-coach"

    async def test_update_pickup_time(self, client, taxi_payload):
        created = (await client.post("/api/transport", json=taxi_payload)).json()

        resp = await client.put(
            f"/api/transport/{created['id']}", json={"pickup_time": "13:15"}
        )
        assert resp.status_code == 200
        assert resp.json()["pickup_time"] == "13:15"
        assert resp.json()["driver_name"] == "Sam Driver"

    async def test_not_found(self, client):
        assert (await client.get("/api/transport/nope")).status_code == 404
        assert (await client.put("/api/transport/nope", json={})).status_code == 404
        resp = await client.delete("/api/transport/nope")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Transport record not found"

    async def test_delete(self, client):
        created = (await client.post("/api/transport", json=COACH)).json()
        resp = await client.delete(f"/api/transport/{created['id']}")
        assert resp.status_code == 204
        assert (await client.get("/api/transport")).json() == []
