"""Medical records router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_medical_record_service, get_pagination, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.medical_record import (
    CreateMedicalRecordRequest,
    MedicalRecordResponse,
    UpdateMedicalRecordRequest,
)
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.medical_record_service import MedicalRecordService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[MedicalRecordResponse])
async def list_medical_records(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: MedicalRecordService = Depends(get_medical_record_service),
) -> PaginatedResponse[MedicalRecordResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200,
        "Medical records retrieved successfully",
        [MedicalRecordResponse.model_validate(r) for r in rows],
        meta,
    )


@router.post("/", status_code=201, response_model=ApiResponse[MedicalRecordResponse])
async def create_medical_record(
    body: CreateMedicalRecordRequest,
    session: AsyncSession = Depends(get_session),
    svc: MedicalRecordService = Depends(get_medical_record_service),
) -> ApiResponse[MedicalRecordResponse]:
    record = await svc.create(session, **body.model_dump())
    return success(
        201, "Medical record created successfully", MedicalRecordResponse.model_validate(record)
    )


@router.get("/{record_id}", response_model=ApiResponse[MedicalRecordResponse])
async def get_medical_record(
    record_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: MedicalRecordService = Depends(get_medical_record_service),
) -> ApiResponse[MedicalRecordResponse]:
    record = await svc.get_by_id(session, record_id)
    if record is None:
        raise NotFoundError("Medical record not found")
    return success(
        200, "Medical record retrieved successfully", MedicalRecordResponse.model_validate(record)
    )


@router.put("/{record_id}", response_model=ApiResponse[MedicalRecordResponse])
async def update_medical_record(
    record_id: uuid.UUID,
    body: UpdateMedicalRecordRequest,
    session: AsyncSession = Depends(get_session),
    svc: MedicalRecordService = Depends(get_medical_record_service),
) -> ApiResponse[MedicalRecordResponse]:
    record = await svc.update(session, record_id, **body.model_dump(exclude_unset=True))
    return success(
        200, "Medical record updated successfully", MedicalRecordResponse.model_validate(record)
    )


@router.delete("/{record_id}", status_code=204, response_class=Response)
async def delete_medical_record(
    record_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: MedicalRecordService = Depends(get_medical_record_service),
) -> Response:
    await svc.delete(session, record_id)
    return no_content()
