"""RME REST API — FastAPI application factory.

Run with::

    uvicorn rme.api:create_app --factory
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rme import __version__
from rme.api.deps import create_tables, dispose_engine, init_session_factory
from rme.api.errors import register_error_handlers
from rme.api.middleware.request_id import RequestIDMiddleware
from rme.api.routers import (
    appointments,
    doctors,
    files,
    insurances,
    medical_records,
    medicines,
    nurses,
    services,
)
from rme.core.logging import setup_logging

API_PREFIX = "/api/v1"

log = structlog.get_logger("rme")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: init engine, create tables. Shutdown: dispose engine."""
    init_session_factory()
    if os.environ.get("RME_CREATE_TABLES", "1") == "1":
        await create_tables()
    log.info("startup complete", version=__version__)
    yield
    await dispose_engine()


def include_routers(app: FastAPI) -> None:
    app.include_router(
        medical_records.router, prefix=f"{API_PREFIX}/medical-records", tags=["medical-records"]
    )
    app.include_router(doctors.router, prefix=f"{API_PREFIX}/doctors", tags=["doctors"])
    app.include_router(nurses.router, prefix=f"{API_PREFIX}/nurses", tags=["nurses"])
    app.include_router(medicines.router, prefix=f"{API_PREFIX}/medicines", tags=["medicines"])
    app.include_router(
        appointments.router, prefix=f"{API_PREFIX}/appointments", tags=["appointments"]
    )
    app.include_router(services.router, prefix=f"{API_PREFIX}/services", tags=["services"])
    app.include_router(insurances.router, prefix=f"{API_PREFIX}/insurances", tags=["insurances"])
    app.include_router(files.router, prefix=f"{API_PREFIX}/files", tags=["files"])


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title="RME API",
        version=__version__,
        docs_url=f"{API_PREFIX}/docs",
        openapi_url=f"{API_PREFIX}/openapi.json",
        lifespan=_lifespan,
    )

    register_error_handlers(app)

    cors_origins = os.environ.get("RME_CORS_ORIGINS", "*")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cors_origins.split(",")],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    include_routers(app)
    return app
