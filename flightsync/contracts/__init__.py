"""School Flight Sync data contracts (Pydantic v2 models).

Data authority
--------------

**Firestore** (source of truth for family-owned data):
- ``FlightRecord``: ``/families/{fid}/flights/{id}``
- ``TransportRecord``: ``/families/{fid}/transport/{id}``
- ``NotTravellingFlag``: ``/families/{fid}/not_travelling/{term_id}``
- ``ServiceProvider``: ``/families/{fid}/service_providers/{id}``

**Shipped with the code** (read-only reference data, updated each academic year):
- ``Term``: school calendars in ``flightsync.services.term_calendar``

Calculated (never persisted)
----------------------------
- ``Journey`` / ``JourneyPair``: per-term travel status
- ``JourneyStats`` / ``JourneyOverview``: dashboard aggregates
"""

from flightsync.contracts.enums import (
    ClearScope,
    Direction,
    JourneyStatus,
    PairStatus,
    School,
    TermType,
    VehicleType,
)
from flightsync.contracts.common import FirestoreModel, ViewModel
from flightsync.contracts.term import Term
from flightsync.contracts.flight import FlightRecord, FlightUpdate
from flightsync.contracts.transport import TransportRecord, TransportUpdate
from flightsync.contracts.not_travelling import NotTravellingFlag, NotTravellingUpsert
from flightsync.contracts.service_provider import ServiceProvider, ServiceProviderUpdate
from flightsync.contracts.journey import (
    Journey,
    JourneyOverview,
    JourneyPair,
    JourneyStats,
)

__all__ = [
    # Enums
    "ClearScope",
    "Direction",
    "JourneyStatus",
    "PairStatus",
    "School",
    "TermType",
    "VehicleType",
    # Common
    "FirestoreModel",
    "ViewModel",
    # Reference data
    "Term",
    # Stored records
    "FlightRecord",
    "FlightUpdate",
    "TransportRecord",
    "TransportUpdate",
    "NotTravellingFlag",
    "NotTravellingUpsert",
    "ServiceProvider",
    "ServiceProviderUpdate",
    # Derived views
    "Journey",
    "JourneyOverview",
    "JourneyPair",
    "JourneyStats",
]
