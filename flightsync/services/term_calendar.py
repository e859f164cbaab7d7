"""Published term dates for Benenden School and Wycombe Abbey.

Dates are transcribed from the schools' term-date pages. A term's
``start_date`` is the day boarders return; ``end_date`` is the day they
break up. Holidays run from the end of one term to the start of the next.
"""

from __future__ import annotations

from datetime import date

from flightsync.contracts.enums import School, TermType
from flightsync.contracts.term import Term

_B = School.BENENDEN
_W = School.WYCOMBE


def _term(
    term_id: str,
    school: School,
    name: str,
    term_type: TermType,
    start: str,
    end: str,
    academic_year: str,
) -> Term:
    return Term(
        id=term_id,
        school=school,
        name=name,
        type=term_type,
        start_date=date.fromisoformat(start),
        end_date=date.fromisoformat(end),
        academic_year=academic_year,
    )


TERMS: tuple[Term, ...] = (
    # Benenden 2025-2026
    _term("ben-autumn-2025", _B, "Autumn Term Start", TermType.TERM, "2025-09-02", "2025-12-10", "2025-2026"),
    _term("ben-autumn-exeat1-2025", _B, "Fixed Exeat", TermType.EXEAT, "2025-09-26", "2025-09-28", "2025-2026"),
    _term("ben-autumn-half-2025", _B, "Half Term", TermType.HALF_TERM, "2025-10-17", "2025-11-02", "2025-2026"),
    _term("ben-autumn-exeat2-2025", _B, "Fixed Exeat", TermType.EXEAT, "2025-11-21", "2025-11-23", "2025-2026"),
    _term("ben-christmas-2025", _B, "Christmas Holiday", TermType.HOLIDAY, "2025-12-10", "2026-01-05", "2025-2026"),
    _term("ben-spring-2026", _B, "Spring Term Start", TermType.TERM, "2026-01-05", "2026-03-27", "2025-2026"),
    _term("ben-spring-exeat1-2026", _B, "Fixed Exeat", TermType.EXEAT, "2026-01-23", "2026-01-25", "2025-2026"),
    _term("ben-spring-half-2026", _B, "Half Term", TermType.HALF_TERM, "2026-02-13", "2026-02-22", "2025-2026"),
    _term("ben-spring-exeat2-2026", _B, "Fixed Exeat", TermType.EXEAT, "2026-03-13", "2026-03-15", "2025-2026"),
    _term("ben-easter-2026", _B, "Easter Holiday", TermType.HOLIDAY, "2026-03-27", "2026-04-20", "2025-2026"),
    _term("ben-summer-2026", _B, "Summer Term Start", TermType.TERM, "2026-04-20", "2026-07-04", "2025-2026"),
    _term("ben-summer-exeat1-2026", _B, "Fixed Exeat", TermType.EXEAT, "2026-05-01", "2026-05-04", "2025-2026"),
    _term("ben-summer-half-2026", _B, "Half Term", TermType.HALF_TERM, "2026-05-22", "2026-05-31", "2025-2026"),
    _term("ben-summer-exeat2-2026", _B, "Fixed Exeat", TermType.EXEAT, "2026-06-19", "2026-06-21", "2025-2026"),
    _term("ben-summer-holiday-2026", _B, "Summer Holiday", TermType.HOLIDAY, "2026-07-04", "2026-09-02", "2025-2026"),
    # Benenden 2026-2027
    _term("ben-autumn-2026", _B, "Autumn Term Start", TermType.TERM, "2026-09-02", "2026-12-10", "2026-2027"),
    _term("ben-autumn-exeat1-2026", _B, "Fixed Exeat", TermType.EXEAT, "2026-09-25", "2026-09-27", "2026-2027"),
    _term("ben-autumn-half-2026", _B, "Half Term", TermType.HALF_TERM, "2026-10-16", "2026-11-01", "2026-2027"),
    _term("ben-autumn-exeat2-2026", _B, "Fixed Exeat", TermType.EXEAT, "2026-11-20", "2026-11-22", "2026-2027"),
    _term("ben-christmas-2026", _B, "Christmas Holiday", TermType.HOLIDAY, "2026-12-10", "2027-01-05", "2026-2027"),
    _term("ben-spring-2027", _B, "Spring Term Start", TermType.TERM, "2027-01-05", "2027-03-24", "2026-2027"),
    _term("ben-spring-exeat1-2027", _B, "Fixed Exeat", TermType.EXEAT, "2027-01-22", "2027-01-24", "2026-2027"),
    _term("ben-spring-half-2027", _B, "Half Term", TermType.HALF_TERM, "2027-02-12", "2027-02-21", "2026-2027"),
    _term("ben-spring-exeat2-2027", _B, "Fixed Exeat", TermType.EXEAT, "2027-03-12", "2027-03-14", "2026-2027"),
    _term("ben-easter-2027", _B, "Easter Holiday", TermType.HOLIDAY, "2027-03-24", "2027-04-19", "2026-2027"),
    _term("ben-summer-2027", _B, "Summer Term Start", TermType.TERM, "2027-04-19", "2027-07-03", "2026-2027"),
    _term("ben-summer-exeat1-2027", _B, "Fixed Exeat", TermType.EXEAT, "2027-04-30", "2027-05-03", "2026-2027"),
    _term("ben-summer-half-2027", _B, "Half Term", TermType.HALF_TERM, "2027-05-28", "2027-06-06", "2026-2027"),
    _term("ben-summer-exeat2-2027", _B, "Fixed Exeat", TermType.EXEAT, "2027-06-18", "2027-06-20", "2026-2027"),
    # Wycombe Abbey 2025-2026
    _term("wyc-autumn-2025", _W, "Autumn Term Start", TermType.TERM, "2025-09-01", "2025-12-10", "2025-2026"),
    _term("wyc-autumn-short1-2025", _W, "Short Leave", TermType.SHORT_LEAVE, "2025-09-27", "2025-09-29", "2025-2026"),
    _term("wyc-autumn-long-2025", _W, "Long Leave (Half Term)", TermType.LONG_LEAVE, "2025-10-17", "2025-11-02", "2025-2026"),
    _term("wyc-autumn-short2-2025", _W, "Short Leave", TermType.SHORT_LEAVE, "2025-11-19", "2025-11-23", "2025-2026"),
    _term("wyc-christmas-2025", _W, "Christmas Holiday", TermType.HOLIDAY, "2025-12-10", "2026-01-06", "2025-2026"),
    _term("wyc-spring-2026", _W, "Spring Term Start", TermType.TERM, "2026-01-06", "2026-03-26", "2025-2026"),
    _term("wyc-spring-short1-2026", _W, "Short Leave", TermType.SHORT_LEAVE, "2026-01-23", "2026-01-25", "2025-2026"),
    _term("wyc-spring-long-2026", _W, "Long Leave (Half Term)", TermType.LONG_LEAVE, "2026-02-13", "2026-02-22", "2025-2026"),
    _term("wyc-spring-short2-2026", _W, "Short Leave", TermType.SHORT_LEAVE, "2026-03-14", "2026-03-16", "2025-2026"),
    _term("wyc-easter-2026", _W, "Easter Holiday", TermType.HOLIDAY, "2026-03-26", "2026-04-21", "2025-2026"),
    _term("wyc-summer-2026", _W, "Summer Term Start", TermType.TERM, "2026-04-21", "2026-06-26", "2025-2026"),
    _term("wyc-summer-short1-2026", _W, "Short Leave", TermType.SHORT_LEAVE, "2026-05-01", "2026-05-04", "2025-2026"),
    _term("wyc-summer-long-2026", _W, "Long Leave (Half Term)", TermType.LONG_LEAVE, "2026-05-22", "2026-05-31", "2025-2026"),
    _term("wyc-summer-short2-2026", _W, "Short Leave", TermType.SHORT_LEAVE, "2026-06-12", "2026-06-14", "2025-2026"),
    _term("wyc-summer-holiday-2026", _W, "Summer Holiday", TermType.HOLIDAY, "2026-06-26", "2026-09-07", "2025-2026"),
    # Wycombe Abbey 2026-2027
    _term("wyc-autumn-2026", _W, "Autumn Term Start", TermType.TERM, "2026-09-07", "2026-12-11", "2026-2027"),
    _term("wyc-autumn-short1-2026", _W, "Short Leave", TermType.SHORT_LEAVE, "2026-09-26", "2026-09-28", "2026-2027"),
    _term("wyc-autumn-long-2026", _W, "Long Leave (Half Term)", TermType.LONG_LEAVE, "2026-10-16", "2026-11-01", "2026-2027"),
    _term("wyc-autumn-short2-2026", _W, "Short Leave", TermType.SHORT_LEAVE, "2026-11-18", "2026-11-22", "2026-2027"),
    _term("wyc-christmas-2026", _W, "Christmas Holiday", TermType.HOLIDAY, "2026-12-11", "2027-01-05", "2026-2027"),
    _term("wyc-spring-2027", _W, "Spring Term Start", TermType.TERM, "2027-01-05", "2027-03-24", "2026-2027"),
    _term("wyc-spring-short1-2027", _W, "Short Leave", TermType.SHORT_LEAVE, "2027-01-29", "2027-01-31", "2026-2027"),
    _term("wyc-spring-long-2027", _W, "Long Leave (Half Term)", TermType.LONG_LEAVE, "2027-02-12", "2027-02-21", "2026-2027"),
    _term("wyc-spring-short2-2027", _W, "Short Leave", TermType.SHORT_LEAVE, "2027-03-13", "2027-03-15", "2026-2027"),
    _term("wyc-easter-2027", _W, "Easter Holiday", TermType.HOLIDAY, "2027-03-24", "2027-04-20", "2026-2027"),
    _term("wyc-summer-2027", _W, "Summer Term Start", TermType.TERM, "2027-04-20", "2027-07-02", "2026-2027"),
    _term("wyc-summer-short1-2027", _W, "Short Leave", TermType.SHORT_LEAVE, "2027-04-30", "2027-05-03", "2026-2027"),
    _term("wyc-summer-long-2027", _W, "Long Leave (Half Term)", TermType.LONG_LEAVE, "2027-05-28", "2027-06-06", "2026-2027"),
    _term("wyc-summer-short2-2027", _W, "Short Leave", TermType.SHORT_LEAVE, "2027-06-18", "2027-06-20", "2026-2027"),
)

_BY_ID: dict[str, Term] = {t.id: t for t in TERMS}


def get_terms(school: School | str | None = None) -> list[Term]:
    """Return all terms, or one school's, in start-date order."""
    terms = [
        t for t in TERMS
        if school is None or t.school == School(school).value
    ]
    return sorted(terms, key=lambda t: t.start_date)


def get_term(term_id: str) -> Term | None:
    return _BY_ID.get(term_id)
