"""Repository for not-travelling flags."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from flightsync.contracts.enums import ClearScope
from flightsync.contracts.not_travelling import NotTravellingFlag, NotTravellingUpsert
from flightsync.persistence.errors import DocumentNotFoundError
from flightsync.persistence.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class NotTravellingRepository(BaseRepository[NotTravellingFlag]):
    """CRUD for flags stored under /families/{family_id}/not_travelling/{term_id}.

    The document ID is the term id, so a term can never carry two flags.
    """

    def __init__(self):
        super().__init__(NotTravellingFlag, "not_travelling")

    async def list_all(self, family_id: str) -> list[NotTravellingFlag]:
        """Every flag, most recently created first."""
        items = await super().list_all(family_id)
        return sorted(items, key=lambda nt: nt.created_at, reverse=True)

    async def get_by_term(self, family_id: str, term_id: str) -> NotTravellingFlag | None:
        return await self.get(family_id, term_id)

    async def upsert(self, family_id: str, request: NotTravellingUpsert) -> NotTravellingFlag:
        """Create or update the flag for a term.

        Only the flags present in ``request`` are written, in one merge, so
        overlapping upserts of different flags both land. Flags never
        written read back as ``False``.
        """
        await self.create_if_absent(family_id, request.term_id, {
            "term_id": request.term_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        })
        fields = request.model_dump(exclude_none=True)
        await self.merge_fields(family_id, request.term_id, fields, upsert=True)

        flag = await self.get_by_term(family_id, request.term_id)
        if flag is None:
            # Deleted between the write and the read back
            raise DocumentNotFoundError(self._collection_name, request.term_id)
        logger.info(
            "Not-travelling flag for %s: no_flights=%s no_transport=%s",
            flag.term_id, flag.no_flights, flag.no_transport,
        )
        return flag

    async def clear(
        self, family_id: str, term_id: str, scope: ClearScope = ClearScope.BOTH
    ) -> NotTravellingFlag:
        """Reset one or both flags of a term to ``False``.

        Raises ``DocumentNotFoundError`` if the term has no flag.
        """
        changes: dict[str, bool] = {}
        if scope in (ClearScope.FLIGHTS, ClearScope.BOTH):
            changes["no_flights"] = False
        if scope in (ClearScope.TRANSPORT, ClearScope.BOTH):
            changes["no_transport"] = False
        await self.merge_fields(family_id, term_id, changes)

        flag = await self.get_by_term(family_id, term_id)
        if flag is None:
            raise DocumentNotFoundError(self._collection_name, term_id)
        return flag
