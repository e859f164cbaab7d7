"""Ground transport CRUD endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from flightsync.api.deps import get_current_family, get_transport_repo
from flightsync.api.errors import delete_or_404, patch_or_404
from flightsync.contracts.transport import TransportRecord, TransportUpdate
from flightsync.persistence.repositories.transport_repo import TransportRepository

router = APIRouter(prefix="/transport", tags=["transport"])


@router.get("")
async def list_transport(
    term_id: str | None = None,
    family_id: str = Depends(get_current_family),
    repo: TransportRepository = Depends(get_transport_repo),
) -> list[dict]:
    if term_id is not None:
        items = await repo.list_by_term(family_id, term_id)
    else:
        items = await repo.list_all(family_id)
    return [t.to_firestore() for t in items]


@router.get("/term/{term_id}")
async def list_term_transport(
    term_id: str,
    family_id: str = Depends(get_current_family),
    repo: TransportRepository = Depends(get_transport_repo),
) -> list[dict]:
    items = await repo.list_by_term(family_id, term_id)
    return [t.to_firestore() for t in items]


@router.post("", status_code=201)
async def create_transport(
    transport: TransportRecord,
    family_id: str = Depends(get_current_family),
    repo: TransportRepository = Depends(get_transport_repo),
) -> dict:
    transport.id = None
    doc_id = await repo.create(family_id, transport)
    data = transport.to_firestore()
    data["id"] = doc_id
    return data


@router.get("/{transport_id}")
async def get_transport(
    transport_id: str,
    family_id: str = Depends(get_current_family),
    repo: TransportRepository = Depends(get_transport_repo),
) -> dict:
    item = await repo.get(family_id, transport_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Transport record not found")
    return item.to_firestore()


@router.put("/{transport_id}")
async def update_transport(
    transport_id: str,
    changes: TransportUpdate,
    family_id: str = Depends(get_current_family),
    repo: TransportRepository = Depends(get_transport_repo),
) -> dict:
    return await patch_or_404(
        repo,
        family_id,
        transport_id,
        changes.model_dump(mode="json", exclude_unset=True),
        not_found="Transport record not found",
    )


@router.delete("/{transport_id}", status_code=204, response_class=Response)
async def delete_transport(
    transport_id: str,
    family_id: str = Depends(get_current_family),
    repo: TransportRepository = Depends(get_transport_repo),
) -> Response:
    await delete_or_404(repo, family_id, transport_id, not_found="Transport record not found")
    return Response(status_code=204)
