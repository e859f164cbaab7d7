"""Family shared-secret authentication."""

from __future__ import annotations

import hmac
import logging
import os
from dataclasses import dataclass

from fastapi import Header, HTTPException

logger = logging.getLogger(__name__)

DEFAULT_FAMILY_ID = "family"


@dataclass(frozen=True)
class FamilyClaims:
    """Who the request is acting for. Passed explicitly through ``Depends``."""

    family_id: str


def configured_family_id() -> str:
    """Firestore document id under ``/families`` holding this household."""
    return os.environ.get("FLIGHTSYNC_FAMILY_ID", DEFAULT_FAMILY_ID)


async def verify_family_secret(
    x_family_secret: str | None = Header(None, alias="X-Family-Secret"),
) -> FamilyClaims:
    """Check the ``X-Family-Secret`` header against ``FAMILY_SECRET``.

    In development, set ``FLIGHTSYNC_AUTH_DISABLED=1`` to bypass the check.
    If ``FAMILY_SECRET`` is not configured at all every request is let
    through with a warning.
    """
    if os.environ.get("FLIGHTSYNC_AUTH_DISABLED") == "1":
        return FamilyClaims(family_id=configured_family_id())

    expected = os.environ.get("FAMILY_SECRET")
    if not expected:
        logger.warning("FAMILY_SECRET not configured, allowing unauthenticated request")
        return FamilyClaims(family_id=configured_family_id())

    if not x_family_secret:
        raise HTTPException(status_code=401, detail="Missing family secret")

    if not hmac.compare_digest(x_family_secret.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="Unauthorized: Invalid family secret")

    return FamilyClaims(family_id=configured_family_id())
