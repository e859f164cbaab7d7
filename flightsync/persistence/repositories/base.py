"""Generic async Firestore repository for family-scoped collections."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar, Type

from google.api_core.exceptions import AlreadyExists, NotFound

from flightsync.contracts.common import FirestoreModel
from flightsync.persistence.errors import DocumentNotFoundError
from flightsync.persistence.firestore_client import get_firestore_client

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=FirestoreModel)


class BaseRepository(Generic[T]):
    """CRUD for a Firestore subcollection under ``/families/{family_id}/``.

    Serialization relies entirely on the contract's ``to_firestore()``
    and ``from_firestore()`` methods. There is no extra mapping layer.
    """

    def __init__(self, model_class: Type[T], collection_name: str):
        self._model_class = model_class
        self._collection_name = collection_name

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collection_ref(self, family_id: str):
        db = get_firestore_client()
        return (
            db.collection("families")
            .document(family_id)
            .collection(self._collection_name)
        )

    def _hydrate(self, doc) -> T:
        data = doc.to_dict()
        data["id"] = doc.id
        return self._model_class.from_firestore(data)

    async def _stream(self, query) -> list[T]:
        return [self._hydrate(doc) async for doc in query.stream()]

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, family_id: str, doc_id: str) -> T | None:
        """Fetch a single document by ID. Returns *None* if missing."""
        doc = await self._collection_ref(family_id).document(doc_id).get()
        if not doc.exists:
            return None
        return self._hydrate(doc)

    async def list_all(self, family_id: str) -> list[T]:
        """Stream every document in the collection."""
        return await self._stream(self._collection_ref(family_id))

    async def list_where(self, family_id: str, field: str, value: Any) -> list[T]:
        """Return documents whose ``field`` equals ``value``."""
        query = self._collection_ref(family_id).where(field, "==", value)
        return await self._stream(query)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, family_id: str, entity: T) -> str:
        """Create a document.

        If ``to_firestore()`` includes an ``id`` key (e.g. the term id of a
        NotTravellingFlag), it is used as the document ID, giving natural
        deduplication.  Otherwise Firestore auto-generates one.

        Returns the document ID.
        """
        data = entity.to_firestore()
        doc_id = data.pop("id", None)
        if doc_id:
            await self._collection_ref(family_id).document(doc_id).set(data)
        else:
            _, ref = await self._collection_ref(family_id).add(data)
            doc_id = ref.id
        logger.debug("Created %s/%s", self._collection_name, doc_id)
        return doc_id

    async def create_if_absent(self, family_id: str, doc_id: str, data: dict[str, Any]) -> bool:
        """Create ``doc_id`` with ``data`` unless it already exists.

        Returns ``True`` if this call created the document.
        """
        try:
            await self._collection_ref(family_id).document(doc_id).create(data)
        except AlreadyExists:
            return False
        logger.debug("Created %s/%s", self._collection_name, doc_id)
        return True

    async def merge_fields(
        self, family_id: str, doc_id: str, fields: dict[str, Any], *, upsert: bool = False
    ) -> None:
        """Write only ``fields`` in a single store call, leaving the rest untouched.

        Concurrent calls touching different fields never overwrite each
        other. With ``upsert`` a missing document is created, otherwise
        ``DocumentNotFoundError`` is raised.
        """
        fields = {**fields, "updated_at": datetime.now(timezone.utc).isoformat()}
        ref = self._collection_ref(family_id).document(doc_id)
        if upsert:
            await ref.set(fields, merge=True)
        else:
            try:
                await ref.update(fields)
            except NotFound:
                raise DocumentNotFoundError(self._collection_name, doc_id)
        logger.debug("Merged %s/%s: %s", self._collection_name, doc_id, sorted(fields))

    async def patch(self, family_id: str, doc_id: str, changes: dict[str, Any]) -> T:
        """Apply ``changes`` to an existing document and return the result.

        The merged document is validated as a whole, so cross-field rules
        on the contract still hold after a partial update. The document is
        rewritten without merging so that fields set to ``None`` disappear.
        Two overlapping patches of one document are last-writer-wins; use
        ``merge_fields`` where concurrent writers are expected.

        Raises ``DocumentNotFoundError`` if the document does not exist.
        """
        current = await self.get(family_id, doc_id)
        if current is None:
            raise DocumentNotFoundError(self._collection_name, doc_id)

        data = current.to_firestore()
        data.update(changes)
        data["updated_at"] = datetime.now(timezone.utc).isoformat()
        entity = self._model_class.from_firestore(data)

        stored = entity.to_firestore()
        stored.pop("id", None)
        await self._collection_ref(family_id).document(doc_id).set(stored)
        logger.debug("Patched %s/%s: %s", self._collection_name, doc_id, sorted(changes))
        return entity

    async def delete(self, family_id: str, doc_id: str) -> None:
        """Delete a document.

        Raises ``DocumentNotFoundError`` if the document does not exist.
        """
        ref = self._collection_ref(family_id).document(doc_id)
        doc = await ref.get()
        if not doc.exists:
            raise DocumentNotFoundError(self._collection_name, doc_id)
        await ref.delete()
        logger.debug("Deleted %s/%s", self._collection_name, doc_id)
