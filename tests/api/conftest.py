"""Shared fixtures for API tests."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest

from flightsync.api.app import app
from flightsync.api.deps import get_current_family
from tests.persistence.fake_firestore import FakeFirestoreClient

TEST_FAMILY_ID = "api-test-family"


@pytest.fixture
def fake_client():
    """In-memory Firestore fake, shared across all repos in a single test."""
    return FakeFirestoreClient()


@pytest.fixture
def test_app(fake_client):
    """FastAPI app with dependency overrides for testing."""
    # Skip the shared-secret check and act for a fixed family
    app.dependency_overrides[get_current_family] = lambda: TEST_FAMILY_ID

    with patch(
        "flightsync.persistence.repositories.base.get_firestore_client",
        return_value=fake_client,
    ):
        yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """httpx AsyncClient wired to the test app."""
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def flight_payload():
    return {
        "term_id": "ben-autumn-2026",
        "direction": "outbound",
        "airline": "British Airways",
        "flight_number": "BA2490",
        "departure_airport": "LIS",
        "departure_date": "2026-09-01",
        "departure_time": "09:40",
        "arrival_airport": "LGW",
        "arrival_date": "2026-09-01",
        "arrival_time": "12:15",
    }


@pytest.fixture
def taxi_payload():
    return {
        "term_id": "ben-autumn-2026",
        "direction": "outbound",
        "vehicle_type": "taxi",
        "driver_name": "Sam Driver",
        "phone_number": "+44 7700 900123",
        "license_number": "PH-4471",
        "pickup_time": "12:45",
    }
