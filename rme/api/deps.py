"""Dependency injection — engine, per-request session, services, pagination.

The engine and the object-storage client are process-wide. DAOs and
services are cheap and stateless, so a fresh set is built for every request.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rme.core.database import Base
from rme.core.pagination import PaginationParams, parse_int
from rme.core.storage import ObjectStorage
from rme.dao.appointment_dao import AppointmentDAO
from rme.dao.doctor_dao import DoctorDAO
from rme.dao.file_dao import FileDAO
from rme.dao.insurance_dao import InsuranceDAO
from rme.dao.medical_record_dao import MedicalRecordDAO
from rme.dao.medicine_dao import MedicineDAO
from rme.dao.nurse_dao import NurseDAO
from rme.dao.service_dao import ServiceDAO
from rme.services.appointment_service import AppointmentService
from rme.services.doctor_service import DoctorService
from rme.services.file_service import FileService
from rme.services.insurance_service import InsuranceService
from rme.services.medical_record_service import MedicalRecordService
from rme.services.medicine_service import MedicineService
from rme.services.nurse_service import NurseService
from rme.services.service_service import ServiceService

# ---------------------------------------------------------------------------
# Engine / session factory (initialised by app lifespan)
# ---------------------------------------------------------------------------
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
_storage: ObjectStorage | None = None


def init_session_factory(database_url: str | None = None) -> async_sessionmaker[AsyncSession]:
    """Create the async engine and session factory. Called once at startup."""
    global _engine, _session_factory  # noqa: PLW0603
    url = database_url or os.environ.get(
        "RME_DATABASE_URL", "postgresql+asyncpg://localhost/rme"
    )
    options: dict = {"pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options.update(pool_size=10, max_overflow=20, pool_recycle=1800)
    _engine = create_async_engine(url, **options)
    _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _session_factory


async def create_tables() -> None:
    """Create any missing tables; existing ones are left untouched."""
    if _engine is None:
        raise RuntimeError("call init_session_factory() first")
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Dispose the async engine, closing all pooled connections."""
    global _engine  # noqa: PLW0603
    if _engine is not None:
        await _engine.dispose()
        _engine = None


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a per-request session with automatic commit/rollback."""
    if _session_factory is None:
        raise RuntimeError("call init_session_factory() before handling requests")
    async with _session_factory() as session:
        async with session.begin():
            yield session


def get_object_storage() -> ObjectStorage:
    global _storage  # noqa: PLW0603
    if _storage is None:
        _storage = ObjectStorage.from_env()
    return _storage


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


def get_pagination(
    page: str | None = Query(None, description="1-indexed page number (default 1)"),
    limit: str | None = Query(None, description="items per page (default 10, max 100)"),
) -> PaginationParams:
    """Non-numeric or out-of-range values are corrected, never rejected."""
    return PaginationParams.resolve(parse_int(page), parse_int(limit))


# ---------------------------------------------------------------------------
# Service factories (for Depends())
# ---------------------------------------------------------------------------


def get_medical_record_service() -> MedicalRecordService:
    return MedicalRecordService(MedicalRecordDAO())


def get_doctor_service() -> DoctorService:
    return DoctorService(DoctorDAO())


def get_nurse_service() -> NurseService:
    return NurseService(NurseDAO())


def get_medicine_service() -> MedicineService:
    return MedicineService(MedicineDAO())


def get_appointment_service() -> AppointmentService:
    return AppointmentService(AppointmentDAO())


def get_service_service() -> ServiceService:
    return ServiceService(ServiceDAO())


def get_insurance_service() -> InsuranceService:
    return InsuranceService(InsuranceDAO())


def get_file_service(storage: ObjectStorage = Depends(get_object_storage)) -> FileService:
    return FileService(FileDAO(), storage)
