"""Tests for the shipped school term calendar."""

from __future__ import annotations

from datetime import date

from flightsync.contracts.enums import School, TermType
from flightsync.services.term_calendar import TERMS, get_term, get_terms


class TestTermCalendar:
    def test_ids_unique(self):
        ids = [t.id for t in TERMS]
        assert len(ids) == len(set(ids))

    def test_sorted_by_start(self):
        starts = [t.start_date for t in get_terms()]
        assert starts == sorted(starts)

    def test_filter_by_school(self):
        assert {t.school for t in get_terms(School.WYCOMBE)} == {"wycombe"}
        assert {t.school for t in get_terms("benenden")} == {"benenden"}
        assert len(get_terms()) == len(TERMS)

    def test_get_term(self):
        term = get_term("ben-autumn-2026")
        assert term.start_date == date(2026, 9, 2)
        assert term.end_date == date(2026, 12, 10)
        assert term.type == TermType.TERM
        assert get_term("missing") is None

    def test_wycombe_uses_leave_names(self):
        types = {t.type for t in get_terms(School.WYCOMBE)}
        assert TermType.SHORT_LEAVE.value in types
        assert TermType.LONG_LEAVE.value in types
        assert TermType.EXEAT.value not in types
