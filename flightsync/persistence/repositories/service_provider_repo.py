"""Repository for the transport service provider address book."""

from __future__ import annotations

from flightsync.contracts.enums import VehicleType
from flightsync.contracts.service_provider import ServiceProvider
from flightsync.persistence.errors import DocumentNotFoundError
from flightsync.persistence.repositories.base import BaseRepository


def _by_name(providers: list[ServiceProvider]) -> list[ServiceProvider]:
    return sorted(providers, key=lambda p: p.name.lower())


class ServiceProviderRepository(BaseRepository[ServiceProvider]):
    def __init__(self):
        super().__init__(ServiceProvider, "service_providers")

    async def list_active(self, family_id: str) -> list[ServiceProvider]:
        """Active providers sorted by name."""
        return _by_name(await self.list_where(family_id, "is_active", True))

    async def list_by_vehicle_type(
        self, family_id: str, vehicle_type: VehicleType
    ) -> list[ServiceProvider]:
        """Active providers operating one kind of vehicle."""
        items = await self.list_active(family_id)
        return [p for p in items if p.vehicle_type == vehicle_type.value]

    async def search(self, family_id: str, query: str) -> list[ServiceProvider]:
        """Active providers whose name, phone or licence contains ``query``."""
        items = await self.list_active(family_id)
        return [p for p in items if p.matches(query)]

    async def deactivate(self, family_id: str, provider_id: str) -> ServiceProvider:
        """Soft delete: hide the provider from lists but keep the document."""
        await self.merge_fields(family_id, provider_id, {"is_active": False})
        provider = await self.get(family_id, provider_id)
        if provider is None:
            raise DocumentNotFoundError(self._collection_name, provider_id)
        return provider
