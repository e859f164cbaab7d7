"""Address book of coach companies and taxi drivers.

Stored at: ``/families/{family_id}/service_providers/{provider_id}``
"""

from datetime import datetime, timezone

from pydantic import Field

from flightsync.contracts.common import FirestoreModel
from flightsync.contracts.enums import VehicleType

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class ServiceProvider(FirestoreModel):
    """A driver or operator the family has used before.

    Providers are never hard-deleted: deactivating one hides it from the
    lists but keeps it resolvable by id.
    """

    id: str | None = None
    name: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1)
    license_number: str | None = None
    vehicle_type: VehicleType
    email: str | None = Field(default=None, pattern=_EMAIL_PATTERN)
    notes: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    is_active: bool = True

    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, phone and licence."""
        needle = query.lower()
        return any(
            needle in value.lower()
            for value in (self.name, self.phone_number, self.license_number or "")
        )


class ServiceProviderUpdate(FirestoreModel):
    """Partial update payload."""

    name: str | None = Field(default=None, min_length=1)
    phone_number: str | None = Field(default=None, min_length=1)
    license_number: str | None = None
    vehicle_type: VehicleType | None = None
    email: str | None = Field(default=None, pattern=_EMAIL_PATTERN)
    notes: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    is_active: bool | None = None
