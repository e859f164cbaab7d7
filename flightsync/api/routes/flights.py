"""Flight CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from flightsync.api.deps import get_current_family, get_flight_repo
from flightsync.api.errors import delete_or_404, patch_or_404
from flightsync.contracts.flight import FlightRecord, FlightUpdate
from flightsync.persistence.repositories.flight_repo import FlightRepository

router = APIRouter(prefix="/flights", tags=["flights"])


@router.get("")
async def list_flights(
    term_id: str | None = None,
    family_id: str = Depends(get_current_family),
    repo: FlightRepository = Depends(get_flight_repo),
) -> list[dict]:
    if term_id is not None:
        items = await repo.list_by_term(family_id, term_id)
    else:
        items = await repo.list_all(family_id)
    return [f.to_firestore() for f in items]


@router.get("/term/{term_id}")
async def list_term_flights(
    term_id: str,
    family_id: str = Depends(get_current_family),
    repo: FlightRepository = Depends(get_flight_repo),
) -> list[dict]:
    items = await repo.list_by_term(family_id, term_id)
    return [f.to_firestore() for f in items]


@router.post("", status_code=201)
async def create_flight(
    flight: FlightRecord,
    family_id: str = Depends(get_current_family),
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    flight.id = None
    doc_id = await repo.create(family_id, flight)
    data = flight.to_firestore()
    data["id"] = doc_id
    return data


@router.get("/{flight_id}")
async def get_flight(
    flight_id: str,
    family_id: str = Depends(get_current_family),
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    item = await repo.get(family_id, flight_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Flight not found")
    return item.to_firestore()


@router.put("/{flight_id}")
async def update_flight(
    flight_id: str,
    changes: FlightUpdate,
    family_id: str = Depends(get_current_family),
    repo: FlightRepository = Depends(get_flight_repo),
) -> dict:
    return await patch_or_404(
        repo,
        family_id,
        flight_id,
        changes.model_dump(mode="json", exclude_unset=True),
        not_found="Flight not found",
    )


@router.delete("/{flight_id}", status_code=204, response_class=Response)
async def delete_flight(
    flight_id: str,
    family_id: str = Depends(get_current_family),
    repo: FlightRepository = Depends(get_flight_repo),
) -> Response:
    await delete_or_404(repo, family_id, flight_id, not_found="Flight not found")
    return Response(status_code=204)
