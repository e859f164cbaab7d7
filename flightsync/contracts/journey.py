"""Journeys: the derived travel view over terms, flights and transport.

Calculated (never persisted)
----------------------------
Every structure here is rebuilt from the stored records on each read by
``flightsync.services.journeys``. They are frozen so a view handed to the
API layer cannot drift from the records it was built from.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from flightsync.contracts.common import ViewModel
from flightsync.contracts.enums import Direction, JourneyStatus, PairStatus, School
from flightsync.contracts.flight import FlightRecord
from flightsync.contracts.term import Term
from flightsync.contracts.transport import TransportRecord


class Journey(ViewModel):
    """One direction of travel for a term: a flight and/or ground transport."""

    id: str = Field(..., description="'{term_id}-{direction}'")
    term_id: str
    direction: Direction
    school: School
    term: Term
    flight: FlightRecord | None = None
    transport: TransportRecord | None = None
    status: JourneyStatus
    departure_date: date = Field(
        ..., description="Flight departure, else term start (outbound) or end (return)"
    )
    needs_attention: bool = Field(
        ..., description="A flight is booked but nobody is collecting"
    )


class JourneyPair(ViewModel):
    """Outbound and return journeys of a single term."""

    term: Term
    outbound: Journey | None = None
    return_: Journey | None = Field(default=None, alias="return")
    status: PairStatus


class JourneyStats(ViewModel):
    """Journey counts per status. Every journey lands in exactly one bucket."""

    total: int = 0
    complete: int = 0
    needs_transport: int = 0
    needs_flight: int = 0
    not_booked: int = 0
    not_travelling: int = 0


class JourneyOverview(ViewModel):
    """Everything the dashboard needs, derived in one pass."""

    journey_pairs: list[JourneyPair] = Field(default_factory=list)
    all_journeys: list[Journey] = Field(default_factory=list)
    journeys_needing_attention: list[Journey] = Field(default_factory=list)
    next_journey: Journey | None = None
    stats: JourneyStats = Field(default_factory=JourneyStats)
