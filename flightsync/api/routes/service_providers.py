"""Service provider address book endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from flightsync.api.deps import get_current_family, get_service_provider_repo
from flightsync.api.errors import patch_or_404
from flightsync.contracts.enums import VehicleType
from flightsync.contracts.service_provider import ServiceProvider, ServiceProviderUpdate
from flightsync.persistence.errors import DocumentNotFoundError
from flightsync.persistence.repositories.service_provider_repo import ServiceProviderRepository

router = APIRouter(prefix="/service-providers", tags=["service-providers"])

_NOT_FOUND = "Service provider not found"


@router.get("")
async def list_service_providers(
    family_id: str = Depends(get_current_family),
    repo: ServiceProviderRepository = Depends(get_service_provider_repo),
) -> list[dict]:
    """Active providers sorted by name."""
    items = await repo.list_active(family_id)
    return [p.to_firestore() for p in items]


@router.get("/search")
async def search_service_providers(
    q: str | None = None,
    family_id: str = Depends(get_current_family),
    repo: ServiceProviderRepository = Depends(get_service_provider_repo),
) -> list[dict]:
    """Match ``q`` against name, phone number and licence number."""
    if not q:
        raise HTTPException(status_code=400, detail='Query parameter "q" is required')
    items = await repo.search(family_id, q)
    return [p.to_firestore() for p in items]


@router.get("/type/{vehicle_type}")
async def list_service_providers_by_type(
    vehicle_type: VehicleType,
    family_id: str = Depends(get_current_family),
    repo: ServiceProviderRepository = Depends(get_service_provider_repo),
) -> list[dict]:
    items = await repo.list_by_vehicle_type(family_id, vehicle_type)
    return [p.to_firestore() for p in items]


@router.post("", status_code=201)
async def create_service_provider(
    provider: ServiceProvider,
    family_id: str = Depends(get_current_family),
    repo: ServiceProviderRepository = Depends(get_service_provider_repo),
) -> dict:
    provider.id = None
    doc_id = await repo.create(family_id, provider)
    data = provider.to_firestore()
    data["id"] = doc_id
    return data


@router.get("/{provider_id}")
async def get_service_provider(
    provider_id: str,
    family_id: str = Depends(get_current_family),
    repo: ServiceProviderRepository = Depends(get_service_provider_repo),
) -> dict:
    item = await repo.get(family_id, provider_id)
    if item is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return item.to_firestore()


@router.put("/{provider_id}")
async def update_service_provider(
    provider_id: str,
    changes: ServiceProviderUpdate,
    family_id: str = Depends(get_current_family),
    repo: ServiceProviderRepository = Depends(get_service_provider_repo),
) -> dict:
    return await patch_or_404(
        repo,
        family_id,
        provider_id,
        changes.model_dump(mode="json", exclude_unset=True),
        not_found=_NOT_FOUND,
    )


@router.delete("/{provider_id}")
async def deactivate_service_provider(
    provider_id: str,
    family_id: str = Depends(get_current_family),
    repo: ServiceProviderRepository = Depends(get_service_provider_repo),
) -> dict:
    """Soft delete. Returns the deactivated provider."""
    try:
        item = await repo.deactivate(family_id, provider_id)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    data = item.to_firestore()
    data["id"] = provider_id
    return data
