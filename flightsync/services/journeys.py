"""Journey derivation: reconcile terms with flights, transport and flags.

Pure and synchronous. Nothing here performs I/O or keeps state between
calls, so the same inputs always produce equal outputs and the API can
rebuild the whole view on every request.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Literal

from flightsync.contracts.enums import Direction, JourneyStatus, PairStatus, School
from flightsync.contracts.flight import FlightRecord
from flightsync.contracts.journey import Journey, JourneyOverview, JourneyPair, JourneyStats
from flightsync.contracts.not_travelling import NotTravellingFlag
from flightsync.contracts.term import Term
from flightsync.contracts.transport import TransportRecord

SchoolFilter = Literal["benenden", "wycombe", "both"]

STATUS_LABELS: dict[JourneyStatus, str] = {
    JourneyStatus.COMPLETE: "Ready",
    JourneyStatus.FLIGHT_ONLY: "Needs Transport",
    JourneyStatus.TRANSPORT_ONLY: "Needs Flight",
    JourneyStatus.EMPTY: "Not Booked",
    JourneyStatus.NOT_TRAVELLING: "Not Travelling",
}

# Journeys a parent still has to act on
_ATTENTION_STATUSES = (JourneyStatus.EMPTY, JourneyStatus.TRANSPORT_ONLY)


# ------------------------------------------------------------------
# Status helpers
# ------------------------------------------------------------------


def get_journey_status(
    flight: FlightRecord | None,
    transport: TransportRecord | None,
    not_travelling: bool | None = False,
) -> JourneyStatus:
    """Derive the status of one direction of travel.

    The not-travelling flag wins over anything that happens to be booked.
    """
    if not_travelling:
        return JourneyStatus.NOT_TRAVELLING
    if flight is not None and transport is not None:
        return JourneyStatus.COMPLETE
    if flight is not None:
        return JourneyStatus.FLIGHT_ONLY
    if transport is not None:
        return JourneyStatus.TRANSPORT_ONLY
    return JourneyStatus.EMPTY


def get_journey_status_label(status: JourneyStatus | str) -> str:
    return STATUS_LABELS[JourneyStatus(status)]


def needs_transport(journey: Journey) -> bool:
    return journey.status == JourneyStatus.FLIGHT_ONLY


def needs_flight(journey: Journey) -> bool:
    return journey.status in (JourneyStatus.TRANSPORT_ONLY, JourneyStatus.EMPTY)


def get_pair_status(
    outbound: JourneyStatus | str | None,
    return_: JourneyStatus | str | None,
) -> PairStatus:
    """Combine both directions of a term into one status.

    A missing journey counts as ``empty``. A complete outbound leg with
    nothing booked for the return still counts as complete.
    """
    out = JourneyStatus(outbound or JourneyStatus.EMPTY)
    ret = JourneyStatus(return_ or JourneyStatus.EMPTY)

    if out == JourneyStatus.COMPLETE and ret in (
        JourneyStatus.COMPLETE,
        JourneyStatus.EMPTY,
        JourneyStatus.NOT_TRAVELLING,
    ):
        return PairStatus.COMPLETE
    if out == JourneyStatus.NOT_TRAVELLING and ret in (
        JourneyStatus.NOT_TRAVELLING,
        JourneyStatus.EMPTY,
    ):
        return PairStatus.NOT_TRAVELLING
    if out != JourneyStatus.EMPTY or ret != JourneyStatus.EMPTY:
        return PairStatus.PARTIAL
    return PairStatus.EMPTY


# ------------------------------------------------------------------
# Journey builder
# ------------------------------------------------------------------


def _first(records: Iterable, direction: Direction):
    return next((r for r in records if r.direction == direction.value), None)


def build_journeys(
    term: Term,
    flights: Iterable[FlightRecord],
    transport: Iterable[TransportRecord],
    not_travelling: NotTravellingFlag | None = None,
) -> dict[Direction, Journey]:
    """Build the outbound and return journeys of a term.

    ``flights`` and ``transport`` may hold records of other terms; only
    those whose ``term_id`` matches ``term.id`` are considered. When several
    records share a direction the first one wins.

    A direction is left out only when nothing is booked for it and the
    family has declared they are not flying that term.
    """
    term_flights = [f for f in flights if f.term_id == term.id]
    term_transport = [t for t in transport if t.term_id == term.id]
    no_flights = bool(not_travelling and not_travelling.no_flights)

    journeys: dict[Direction, Journey] = {}
    for direction in (Direction.OUTBOUND, Direction.RETURN):
        flight = _first(term_flights, direction)
        ride = _first(term_transport, direction)
        if flight is None and ride is None and no_flights:
            continue

        if flight is not None:
            departure = flight.departure_date
        elif direction == Direction.OUTBOUND:
            departure = term.start_date
        else:
            departure = term.end_date

        journeys[direction] = Journey(
            id=f"{term.id}-{direction.value}",
            term_id=term.id,
            direction=direction,
            school=term.school,
            term=term,
            flight=flight,
            transport=ride,
            status=get_journey_status(flight, ride, no_flights),
            departure_date=departure,
            needs_attention=flight is not None and ride is None,
        )
    return journeys


# ------------------------------------------------------------------
# Aggregation
# ------------------------------------------------------------------


def _stats(journeys: list[Journey]) -> JourneyStats:
    counts = {status: 0 for status in JourneyStatus}
    for journey in journeys:
        counts[JourneyStatus(journey.status)] += 1
    return JourneyStats(
        total=len(journeys),
        complete=counts[JourneyStatus.COMPLETE],
        needs_transport=counts[JourneyStatus.FLIGHT_ONLY],
        needs_flight=counts[JourneyStatus.TRANSPORT_ONLY],
        not_booked=counts[JourneyStatus.EMPTY],
        not_travelling=counts[JourneyStatus.NOT_TRAVELLING],
    )


def build_journey_overview(
    terms: Iterable[Term],
    flights: Iterable[FlightRecord],
    transport: Iterable[TransportRecord],
    not_travelling: Iterable[NotTravellingFlag],
    *,
    school: SchoolFilter | School = "both",
    upcoming_only: bool = True,
    today: date | None = None,
) -> JourneyOverview:
    """Derive journey pairs, a chronological timeline and dashboard stats.

    With ``upcoming_only`` a term is dropped once its end date is before
    ``today``. ``today`` defaults to the current date and is also the cut
    off for ``next_journey``.
    """
    if today is None:
        today = date.today()
    school = School(school).value if school != "both" else "both"

    flights = list(flights)
    transport = list(transport)
    flags: dict[str, NotTravellingFlag] = {}
    for nt in not_travelling:
        flags.setdefault(nt.term_id, nt)

    selected = [
        t for t in terms
        if (school == "both" or t.school == school)
        and not (upcoming_only and t.end_date < today)
    ]
    selected.sort(key=lambda t: t.start_date)

    pairs: list[JourneyPair] = []
    for term in selected:
        flag = flags.get(term.id)
        journeys = build_journeys(
            term,
            [f for f in flights if f.term_id == term.id],
            [t for t in transport if t.term_id == term.id],
            flag,
        )
        # A direction dropped by the flag is not travelling, not unbooked
        missing = JourneyStatus.NOT_TRAVELLING if flag and flag.no_flights else None
        outbound = journeys.get(Direction.OUTBOUND)
        return_ = journeys.get(Direction.RETURN)
        pairs.append(JourneyPair(
            term=term,
            outbound=outbound,
            return_=return_,
            status=get_pair_status(
                outbound.status if outbound else missing,
                return_.status if return_ else missing,
            ),
        ))

    timeline: list[Journey] = []
    for pair in pairs:
        if pair.outbound is not None:
            timeline.append(pair.outbound)
        if pair.return_ is not None:
            timeline.append(pair.return_)
    timeline.sort(key=lambda j: j.departure_date)

    return JourneyOverview(
        journey_pairs=pairs,
        all_journeys=timeline,
        journeys_needing_attention=[
            j for j in timeline
            if j.needs_attention or j.status in _ATTENTION_STATUSES
        ],
        next_journey=next((j for j in timeline if j.departure_date >= today), None),
        stats=_stats(timeline),
    )
