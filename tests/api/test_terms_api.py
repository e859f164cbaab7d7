"""Tests for term calendar endpoints."""

from __future__ import annotations


class TestTermsAPI:
    async def test_list_all(self, client):
        resp = await client.get("/api/terms")
        assert resp.status_code == 200
        terms = resp.json()
        assert {t["school"] for t in terms} == {"benenden", "wycombe"}
        starts = [t["start_date"] for t in terms]
        assert starts == sorted(starts)

    async def test_filter_by_school(self, client):
        resp = await client.get("/api/terms", params={"school": "wycombe"})
        assert resp.status_code == 200
        assert {t["school"] for t in resp.json()} == {"wycombe"}

    async def test_unknown_school_rejected(self, client):
        resp = await client.get("/api/terms", params={"school": "eton"})
        assert resp.status_code == 422

    async def test_get_term(self, client):
        resp = await client.get("/api/terms/ben-autumn-2026")
        assert resp.status_code == 200
        data = resp.json()
        assert data["start_date"] == "2026-09-02"
        assert data["end_date"] == "2026-12-10"
        assert data["type"] == "term"
        assert data["academic_year"] == "2026-2027"

    async def test_get_term_not_found(self, client):
        resp = await client.get("/api/terms/ben-autumn-1999")
        assert resp.status_code == 404
