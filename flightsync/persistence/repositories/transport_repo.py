"""Repository for ground transport."""

from __future__ import annotations

from flightsync.contracts.transport import TransportRecord
from flightsync.persistence.repositories.base import BaseRepository


class TransportRepository(BaseRepository[TransportRecord]):
    def __init__(self):
        super().__init__(TransportRecord, "transport")

    async def list_all(self, family_id: str) -> list[TransportRecord]:
        """Every transport record, most recently created first."""
        items = await super().list_all(family_id)
        return sorted(items, key=lambda t: t.created_at, reverse=True)

    async def list_by_term(self, family_id: str, term_id: str) -> list[TransportRecord]:
        return await self.list_where(family_id, "term_id", term_id)
