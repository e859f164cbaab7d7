"""Base classes and shared types for School Flight Sync contracts.

Conventions (all contracts and API responses):
- **Field names**: snake_case, both on the wire and in Firestore
- **Calendar dates**: ISO 8601 ``YYYY-MM-DD`` (``datetime.date``)
- **Clock times**: local ``H:MM`` / ``HH:MM`` strings, as printed on tickets
- **Audit timestamps**: always UTC, ISO 8601 in serialized form
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

TIME_PATTERN = r"^\d{1,2}:\d{2}$"


class FirestoreModel(BaseModel):
    """Base model with Firestore-friendly serialization.

    - Enums serialize as string values (Firestore stores strings).
    - ``to_firestore()`` produces a JSON-safe dict (dates as ISO 8601).
    - ``from_firestore()`` hydrates from a Firestore document dict.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_firestore(self) -> dict[str, Any]:
        """Dump to Firestore-compatible dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_firestore(cls, data: dict[str, Any]) -> "FirestoreModel":
        """Create model instance from Firestore document dict."""
        return cls.model_validate(data)


class ViewModel(BaseModel):
    """Immutable, derived structure that is recomputed on every read.

    Never persisted. Serializes with aliases so ``return`` keys survive
    the trip to JSON.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
    )

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
