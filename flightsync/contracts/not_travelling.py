"""Explicit "not travelling" declarations.

Stored at: ``/families/{family_id}/not_travelling/{term_id}``

The term id is the document id, so there is at most one flag per term.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from flightsync.contracts.common import FirestoreModel


class NotTravellingFlag(FirestoreModel):
    """Family declaration that flights and/or transport are not needed."""

    term_id: str = Field(..., min_length=1)
    no_flights: bool = False
    no_transport: bool = False

    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None

    def to_firestore(self) -> dict:
        """Override to use term_id as document ID."""
        data = super().to_firestore()
        data["id"] = self.term_id
        return data


class NotTravellingUpsert(BaseModel):
    """Upsert payload. Omitted flags keep their stored value."""

    term_id: str = Field(..., min_length=1)
    no_flights: bool | None = None
    no_transport: bool | None = None
