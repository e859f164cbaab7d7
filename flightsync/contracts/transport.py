"""Ground transport between the airport and school.

Stored at: ``/families/{family_id}/transport/{transport_id}``
"""

from datetime import datetime, timezone

from pydantic import AliasChoices, Field, model_validator

from flightsync.contracts.common import FirestoreModel
from flightsync.contracts.enums import Direction, VehicleType


class TransportRecord(FirestoreModel):
    """A school coach seat or a booked taxi for one direction of a term.

    A taxi must carry the driver's name, phone number and licence number so
    the family can check who is collecting. A school coach only needs a
    pickup time.
    """

    id: str | None = None
    term_id: str = Field(..., min_length=1, description="Reference to Term.id")
    direction: Direction
    vehicle_type: VehicleType = Field(
        ...,
        validation_alias=AliasChoices("vehicle_type", "type"),
        description="'type' is accepted for records exported by the legacy app",
    )
    driver_name: str = ""
    phone_number: str = ""
    license_number: str = ""
    pickup_time: str = Field(..., min_length=1, description="e.g. '14:30'")
    notes: str | None = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None

    @model_validator(mode="after")
    def _taxi_needs_driver(self) -> "TransportRecord":
        if self.vehicle_type == VehicleType.TAXI.value and not (
            self.driver_name and self.phone_number and self.license_number
        ):
            raise ValueError(
                "For taxi transport, driver name, phone number, "
                "and license number are required"
            )
        return self


class TransportUpdate(FirestoreModel):
    """Partial update payload. The merged record is re-validated."""

    term_id: str | None = Field(default=None, min_length=1)
    direction: Direction | None = None
    vehicle_type: VehicleType | None = Field(
        default=None, validation_alias=AliasChoices("vehicle_type", "type")
    )
    driver_name: str | None = None
    phone_number: str | None = None
    license_number: str | None = None
    pickup_time: str | None = Field(default=None, min_length=1)
    notes: str | None = None
