"""School term calendar endpoints (read-only reference data)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from flightsync.api.deps import get_current_family
from flightsync.contracts.enums import School
from flightsync.contracts.term import Term
from flightsync.services.term_calendar import get_term, get_terms

router = APIRouter(prefix="/terms", tags=["terms"])


@router.get("")
async def list_terms(
    school: School | None = None,
    _family_id: str = Depends(get_current_family),
) -> list[Term]:
    return get_terms(school)


@router.get("/{term_id}")
async def get_term_by_id(
    term_id: str,
    _family_id: str = Depends(get_current_family),
) -> Term:
    term = get_term(term_id)
    if term is None:
        raise HTTPException(status_code=404, detail=f"Term {term_id} not found")
    return term
