"""Repository for flights."""

from __future__ import annotations

from flightsync.contracts.flight import FlightRecord
from flightsync.persistence.repositories.base import BaseRepository


def _departure_key(flight: FlightRecord):
    return (flight.departure_date, flight.departure_time.zfill(5))


class FlightRepository(BaseRepository[FlightRecord]):
    def __init__(self):
        super().__init__(FlightRecord, "flights")

    async def list_all(self, family_id: str) -> list[FlightRecord]:
        """Every flight, earliest departure first."""
        return sorted(await super().list_all(family_id), key=_departure_key)

    async def list_by_term(self, family_id: str, term_id: str) -> list[FlightRecord]:
        """Flights booked for one term, earliest departure first."""
        items = await self.list_where(family_id, "term_id", term_id)
        return sorted(items, key=_departure_key)
