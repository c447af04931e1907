"""Doctors router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_doctor_service, get_pagination, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.doctor import CreateDoctorRequest, DoctorResponse, UpdateDoctorRequest
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.doctor_service import DoctorService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[DoctorResponse])
async def list_doctors(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: DoctorService = Depends(get_doctor_service),
) -> PaginatedResponse[DoctorResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200,
        "Doctors retrieved successfully",
        [DoctorResponse.model_validate(d) for d in rows],
        meta,
    )


@router.post("/", status_code=201, response_model=ApiResponse[DoctorResponse])
async def create_doctor(
    body: CreateDoctorRequest,
    session: AsyncSession = Depends(get_session),
    svc: DoctorService = Depends(get_doctor_service),
) -> ApiResponse[DoctorResponse]:
    doctor = await svc.create(session, **body.model_dump())
    return success(201, "Doctor created successfully", DoctorResponse.model_validate(doctor))


@router.get("/{doctor_id}", response_model=ApiResponse[DoctorResponse])
async def get_doctor(
    doctor_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: DoctorService = Depends(get_doctor_service),
) -> ApiResponse[DoctorResponse]:
    doctor = await svc.get_by_id(session, doctor_id)
    if doctor is None:
        raise NotFoundError("Doctor not found")
    return success(200, "Doctor retrieved successfully", DoctorResponse.model_validate(doctor))


@router.put("/{doctor_id}", response_model=ApiResponse[DoctorResponse])
async def update_doctor(
    doctor_id: uuid.UUID,
    body: UpdateDoctorRequest,
    session: AsyncSession = Depends(get_session),
    svc: DoctorService = Depends(get_doctor_service),
) -> ApiResponse[DoctorResponse]:
    doctor = await svc.update(session, doctor_id, **body.model_dump(exclude_unset=True))
    return success(200, "Doctor updated successfully", DoctorResponse.model_validate(doctor))


@router.delete("/{doctor_id}", status_code=204, response_class=Response)
async def delete_doctor(
    doctor_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: DoctorService = Depends(get_doctor_service),
) -> Response:
    await svc.delete(session, doctor_id)
    return no_content()
