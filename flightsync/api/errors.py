"""Translate persistence and validation failures into HTTP errors."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException
from pydantic import ValidationError

from flightsync.persistence.errors import DocumentNotFoundError
from flightsync.persistence.repositories.base import BaseRepository


async def patch_or_404(
    repo: BaseRepository,
    family_id: str,
    doc_id: str,
    changes: dict[str, Any],
    not_found: str,
) -> dict:
    """Apply a partial update and return the stored document.

    404 when the document is missing, 422 when the merged document breaks
    a contract rule (e.g. switching a coach booking to a taxi without a
    driver).
    """
    try:
        item = await repo.patch(family_id, doc_id, changes)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=not_found)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False),
        ) from exc
    data = item.to_firestore()
    data["id"] = doc_id
    return data


async def delete_or_404(
    repo: BaseRepository, family_id: str, doc_id: str, not_found: str
) -> None:
    try:
        await repo.delete(family_id, doc_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=not_found)
