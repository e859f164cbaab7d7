"""Enumerations shared across all School Flight Sync contracts."""

from enum import Enum


class School(str, Enum):
    BENENDEN = "benenden"
    WYCOMBE = "wycombe"


class TermType(str, Enum):
    """Kind of calendar period published by a school."""
    TERM = "term"
    HALF_TERM = "half-term"
    HOLIDAY = "holiday"
    EXEAT = "exeat"
    SHORT_LEAVE = "short-leave"  # Wycombe Abbey's name for an exeat
    LONG_LEAVE = "long-leave"  # Wycombe Abbey's name for half term


class Direction(str, Enum):
    """Leg of travel relative to the school term."""
    OUTBOUND = "outbound"
    RETURN = "return"


class VehicleType(str, Enum):
    SCHOOL_COACH = "school-coach"
    TAXI = "taxi"


class JourneyStatus(str, Enum):
    """Booking state of one direction of travel."""
    COMPLETE = "complete"
    FLIGHT_ONLY = "flight-only"
    TRANSPORT_ONLY = "transport-only"
    EMPTY = "empty"
    NOT_TRAVELLING = "not-travelling"


class PairStatus(str, Enum):
    """Combined booking state of a term's outbound and return journeys."""
    COMPLETE = "complete"
    PARTIAL = "partial"
    EMPTY = "empty"
    NOT_TRAVELLING = "not-travelling"


class ClearScope(str, Enum):
    """Which not-travelling flags a clear request resets."""
    FLIGHTS = "flights"
    TRANSPORT = "transport"
    BOTH = "both"
