"""Not-travelling flag endpoints.

Flags are addressed by term id rather than by their own id, since a term
has at most one.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from flightsync.api.deps import get_current_family, get_not_travelling_repo
from flightsync.api.errors import delete_or_404
from flightsync.contracts.enums import ClearScope
from flightsync.contracts.not_travelling import NotTravellingUpsert
from flightsync.persistence.errors import DocumentNotFoundError
from flightsync.persistence.repositories.not_travelling_repo import NotTravellingRepository

router = APIRouter(prefix="/not-travelling", tags=["not-travelling"])

_NOT_FOUND = "Not travelling record not found"


@router.get("")
async def list_not_travelling(
    term_id: str | None = None,
    family_id: str = Depends(get_current_family),
    repo: NotTravellingRepository = Depends(get_not_travelling_repo),
) -> list[dict]:
    if term_id is not None:
        flag = await repo.get_by_term(family_id, term_id)
        items = [flag] if flag is not None else []
    else:
        items = await repo.list_all(family_id)
    return [nt.to_firestore() for nt in items]


@router.get("/term/{term_id}")
async def get_not_travelling(
    term_id: str,
    family_id: str = Depends(get_current_family),
    repo: NotTravellingRepository = Depends(get_not_travelling_repo),
) -> dict:
    flag = await repo.get_by_term(family_id, term_id)
    if flag is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return flag.to_firestore()


@router.post("")
async def upsert_not_travelling(
    request: NotTravellingUpsert,
    family_id: str = Depends(get_current_family),
    repo: NotTravellingRepository = Depends(get_not_travelling_repo),
) -> dict:
    """Create or update the flag for a term.

    Omitted flags keep their stored value.
    """
    flag = await repo.upsert(family_id, request)
    return flag.to_firestore()


@router.put("/term/{term_id}/clear")
async def clear_not_travelling(
    term_id: str,
    type: ClearScope = ClearScope.BOTH,
    family_id: str = Depends(get_current_family),
    repo: NotTravellingRepository = Depends(get_not_travelling_repo),
) -> dict:
    """Reset the flights flag, the transport flag, or both."""
    try:
        flag = await repo.clear(family_id, term_id, type)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return flag.to_firestore()


@router.delete("/term/{term_id}", status_code=204, response_class=Response)
async def delete_not_travelling(
    term_id: str,
    family_id: str = Depends(get_current_family),
    repo: NotTravellingRepository = Depends(get_not_travelling_repo),
) -> Response:
    await delete_or_404(repo, family_id, term_id, not_found=_NOT_FOUND)
    return Response(status_code=204)
