"""Tests for the journey overview endpoint."""

from __future__ import annotations

TERM = "ben-autumn-2026"
AS_OF = "2026-08-15"


def _pair(data: dict, term_id: str) -> dict:
    return next(p for p in data["journey_pairs"] if p["term"]["id"] == term_id)


class TestJourneysAPI:
    async def test_nothing_booked(self, client):
        resp = await client.get("/api/journeys", params={"as_of": AS_OF, "school": "benenden"})
        assert resp.status_code == 200
        data = resp.json()

        pair = _pair(data, TERM)
        assert pair["status"] == "empty"
        assert pair["outbound"]["status"] == "empty"
        assert pair["return"]["status"] == "empty"
        assert pair["outbound"]["departure_date"] == "2026-09-02"
        assert pair["return"]["departure_date"] == "2026-12-10"
        assert data["stats"]["total"] == len(data["all_journeys"])

    async def test_flight_only_outbound(self, client, flight_payload):
        await client.post("/api/flights", json=flight_payload)

        data = (await client.get("/api/journeys", params={"as_of": AS_OF})).json()
        pair = _pair(data, TERM)
        assert pair["status"] == "partial"
        assert pair["outbound"]["status"] == "flight-only"
        assert pair["outbound"]["needs_attention"] is True
        assert pair["outbound"]["flight"]["flight_number"] == "BA2490"
        assert pair["return"]["status"] == "empty"

        assert data["next_journey"]["id"] == f"{TERM}-outbound"
        assert data["next_journey"]["departure_date"] == "2026-09-01"
        assert f"{TERM}-outbound" in [j["id"] for j in data["journeys_needing_attention"]]

    async def test_complete_pair(self, client, flight_payload, taxi_payload):
        await client.post("/api/flights", json=flight_payload)
        await client.post("/api/flights", json={
            **flight_payload,
            "direction": "return",
            "departure_airport": "LGW",
            "departure_date": "2026-12-10",
            "arrival_airport": "LIS",
            "arrival_date": "2026-12-10",
        })
        await client.post("/api/transport", json=taxi_payload)
        await client.post("/api/transport", json={**taxi_payload, "direction": "return"})

        data = (await client.get("/api/journeys", params={"as_of": AS_OF})).json()
        pair = _pair(data, TERM)
        assert pair["status"] == "complete"
        assert pair["outbound"]["transport"]["driver_name"] == "Sam Driver"
        assert data["stats"]["complete"] == 2

    async def test_not_travelling(self, client):
        await client.post("/api/not-travelling", json={"term_id": TERM, "no_flights": True})

        data = (await client.get("/api/journeys", params={"as_of": AS_OF})).json()
        pair = _pair(data, TERM)
        assert pair["status"] == "not-travelling"
        assert pair["outbound"] is None
        assert pair["return"] is None

    async def test_upcoming_only_drops_past_terms(self, client):
        data = (await client.get("/api/journeys", params={"as_of": "2026-10-01"})).json()
        ids = {p["term"]["id"] for p in data["journey_pairs"]}
        assert "ben-summer-2026" not in ids
        assert TERM in ids

        data = (await client.get(
            "/api/journeys", params={"as_of": "2026-10-01", "upcoming_only": "false"}
        )).json()
        ids = {p["term"]["id"] for p in data["journey_pairs"]}
        assert "ben-summer-2026" in ids

    async def test_school_filter(self, client):
        data = (await client.get("/api/journeys", params={"as_of": AS_OF, "school": "wycombe"})).json()
        assert data["journey_pairs"]
        assert {p["term"]["school"] for p in data["journey_pairs"]} == {"wycombe"}

    async def test_timeline_sorted(self, client):
        data = (await client.get("/api/journeys", params={"as_of": AS_OF})).json()
        dates = [j["departure_date"] for j in data["all_journeys"]]
        assert dates == sorted(dates)

    async def test_bad_school_rejected(self, client):
        resp = await client.get("/api/journeys", params={"school": "eton"})
        assert resp.status_code == 422
