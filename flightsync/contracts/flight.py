"""Booked flights for a school term.

Stored at: ``/families/{family_id}/flights/{flight_id}``
"""

from datetime import date, datetime, timezone

from pydantic import AliasChoices, Field

from flightsync.contracts.common import TIME_PATTERN, FirestoreModel
from flightsync.contracts.enums import Direction


class FlightRecord(FirestoreModel):
    """One flight leg booked for a term.

    A term normally has at most one outbound and one return flight; when
    several exist the journey builder uses the first of each direction.
    """

    id: str | None = None
    term_id: str = Field(..., min_length=1, description="Reference to Term.id")
    direction: Direction = Field(
        ...,
        validation_alias=AliasChoices("direction", "type"),
        description="'type' is accepted for records exported by the legacy app",
    )
    airline: str = Field(..., min_length=1)
    flight_number: str = Field(..., min_length=1, description="e.g. 'BA2490'")

    departure_airport: str = Field(..., min_length=1)
    departure_date: date
    departure_time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM local time")

    arrival_airport: str = Field(..., min_length=1)
    arrival_date: date
    arrival_time: str = Field(..., pattern=TIME_PATTERN, description="HH:MM local time")

    confirmation_code: str | None = None
    notes: str | None = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    updated_at: datetime | None = None


class FlightUpdate(FirestoreModel):
    """Partial update payload: only the fields sent are changed."""

    term_id: str | None = Field(default=None, min_length=1)
    direction: Direction | None = Field(
        default=None, validation_alias=AliasChoices("direction", "type")
    )
    airline: str | None = Field(default=None, min_length=1)
    flight_number: str | None = Field(default=None, min_length=1)
    departure_airport: str | None = Field(default=None, min_length=1)
    departure_date: date | None = None
    departure_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    arrival_airport: str | None = Field(default=None, min_length=1)
    arrival_date: date | None = None
    arrival_time: str | None = Field(default=None, pattern=TIME_PATTERN)
    confirmation_code: str | None = None
    notes: str | None = None
