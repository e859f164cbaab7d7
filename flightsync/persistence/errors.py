"""Errors raised by the family-scoped repositories."""


class PersistenceError(Exception):
    """Base class for storage failures."""


class DocumentNotFoundError(PersistenceError):
    """A flight, transport record, flag or provider is not in the family's collection."""

    def __init__(self, collection: str, doc_id: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"No document {doc_id!r} in {collection}")
