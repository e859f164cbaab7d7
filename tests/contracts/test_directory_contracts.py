"""Tests for term and service provider contracts."""

import pytest
from pydantic import ValidationError

from flightsync.contracts.service_provider import ServiceProvider
from flightsync.contracts.term import Term


class TestTerm:
    def test_valid(self):
        term = Term(
            id="t1",
            school="benenden",
            name="Autumn Term Start",
            type="term",
            start_date="2026-09-02",
            end_date="2026-12-10",
            academic_year="2026-2027",
        )
        assert term.school == "benenden"

    def test_end_before_start(self):
        with pytest.raises(ValidationError):
            Term(
                id="t1",
                school="wycombe",
                name="Backwards",
                type="exeat",
                start_date="2026-09-10",
                end_date="2026-09-02",
                academic_year="2026-2027",
            )

    def test_frozen(self):
        term = Term(
            id="t1",
            school="wycombe",
            name="Short Leave",
            type="short-leave",
            start_date="2026-09-26",
            end_date="2026-09-28",
            academic_year="2026-2027",
        )
        with pytest.raises(ValidationError):
            term.name = "Changed"


class TestServiceProvider:
    def test_defaults_active(self):
        provider = ServiceProvider(name="Weald Cars", phone_number="01580 111222", vehicle_type="taxi")
        assert provider.is_active is True
        assert provider.rating is None

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_bounds(self, rating):
        with pytest.raises(ValidationError):
            ServiceProvider(name="X", phone_number="1", vehicle_type="taxi", rating=rating)

    def test_matches(self):
        provider = ServiceProvider(
            name="Weald Cars", phone_number="01580 111222", vehicle_type="taxi", license_number="TW-0091"
        )
        assert provider.matches("weald")
        assert provider.matches("111222")
        assert provider.matches("tw-0091")
        assert not provider.matches("abbey")
