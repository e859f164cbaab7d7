"""School calendar periods.

Reference data only: terms are published by the schools and shipped with
the application (see ``flightsync.services.term_calendar``). They are never
written to Firestore.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from flightsync.contracts.enums import School, TermType


class Term(BaseModel):
    """A term, half term, holiday, exeat or leave period for one school."""

    id: str = Field(..., min_length=1, description="e.g. 'ben-autumn-2026'")
    school: School
    name: str = Field(..., min_length=1, description="e.g. 'Autumn Term Start'")
    type: TermType
    start_date: date
    end_date: date
    academic_year: str = Field(..., pattern=r"^\d{4}-\d{4}$", description="e.g. '2026-2027'")

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    @model_validator(mode="after")
    def _check_dates(self) -> "Term":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self
