"""Journey overview endpoint: the derived travel status per term."""

from __future__ import annotations

import logging
from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends

from flightsync.api.deps import (
    get_current_family,
    get_flight_repo,
    get_not_travelling_repo,
    get_transport_repo,
)
from flightsync.persistence.repositories.flight_repo import FlightRepository
from flightsync.persistence.repositories.not_travelling_repo import NotTravellingRepository
from flightsync.persistence.repositories.transport_repo import TransportRepository
from flightsync.services.journeys import build_journey_overview
from flightsync.services.term_calendar import get_terms

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/journeys", tags=["journeys"])


@router.get("")
async def get_journeys(
    school: Literal["benenden", "wycombe", "both"] = "both",
    upcoming_only: bool = True,
    as_of: date | None = None,
    family_id: str = Depends(get_current_family),
    flight_repo: FlightRepository = Depends(get_flight_repo),
    transport_repo: TransportRepository = Depends(get_transport_repo),
    not_travelling_repo: NotTravellingRepository = Depends(get_not_travelling_repo),
) -> dict:
    """Rebuild the journey view from the stored records.

    Returns journey pairs per term, the chronological timeline, the
    journeys still needing action, the next departure and summary counts.
    ``as_of`` replaces today's date, e.g. to preview next term.
    """
    flights = await flight_repo.list_all(family_id)
    transport = await transport_repo.list_all(family_id)
    flags = await not_travelling_repo.list_all(family_id)

    overview = build_journey_overview(
        get_terms(),
        flights,
        transport,
        flags,
        school=school,
        upcoming_only=upcoming_only,
        today=as_of,
    )
    logger.debug(
        "Journey overview for %s: %d pairs, %d need attention",
        family_id,
        len(overview.journey_pairs),
        len(overview.journeys_needing_attention),
    )
    return overview.to_json()
