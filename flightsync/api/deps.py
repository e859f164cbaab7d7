"""FastAPI dependency injection wiring."""

from __future__ import annotations

from fastapi import Depends

from flightsync.api.auth import FamilyClaims, verify_family_secret
from flightsync.persistence.repositories.flight_repo import FlightRepository
from flightsync.persistence.repositories.not_travelling_repo import NotTravellingRepository
from flightsync.persistence.repositories.service_provider_repo import ServiceProviderRepository
from flightsync.persistence.repositories.transport_repo import TransportRepository


# ------------------------------------------------------------------
# Current family
# ------------------------------------------------------------------


def get_current_family(
    claims: FamilyClaims = Depends(verify_family_secret),
) -> str:
    """Return the authenticated family ID."""
    return claims.family_id


# ------------------------------------------------------------------
# Repositories (stateless, new instance per request)
# ------------------------------------------------------------------


def get_flight_repo() -> FlightRepository:
    return FlightRepository()


def get_transport_repo() -> TransportRepository:
    return TransportRepository()


def get_not_travelling_repo() -> NotTravellingRepository:
    return NotTravellingRepository()


def get_service_provider_repo() -> ServiceProviderRepository:
    return ServiceProviderRepository()
