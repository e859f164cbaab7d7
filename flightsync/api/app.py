"""FastAPI application factory."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

# Load .env file from project root (must be before other imports)
load_dotenv()
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from flightsync.api.auth import configured_family_id  # noqa: E402
from flightsync.api.routes import (  # noqa: E402
    flights,
    journeys,
    not_travelling,
    service_providers,
    terms,
    transport,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the effective auth configuration on startup."""
    if os.environ.get("FLIGHTSYNC_AUTH_DISABLED") == "1":
        logger.warning("Family secret check disabled (FLIGHTSYNC_AUTH_DISABLED=1)")
    elif not os.environ.get("FAMILY_SECRET"):
        logger.warning("FAMILY_SECRET not configured; API is open")
    else:
        logger.info("Family secret check enabled")
    logger.info("Serving family %s", configured_family_id())
    yield


app = FastAPI(
    title="School Flight Sync API",
    description="Flights, transport and term calendars for two boarding schools",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(terms.router, prefix="/api")
app.include_router(flights.router, prefix="/api")
app.include_router(transport.router, prefix="/api")
app.include_router(not_travelling.router, prefix="/api")
app.include_router(service_providers.router, prefix="/api")
app.include_router(journeys.router, prefix="/api")


@app.get("/api/health")
async def health():
    return {"status": "ok"}
