"""Medicines router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_medicine_service, get_pagination, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.medicine import (
    CreateMedicineRequest,
    MedicineResponse,
    UpdateMedicineRequest,
)
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.medicine_service import MedicineService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[MedicineResponse])
async def list_medicines(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: MedicineService = Depends(get_medicine_service),
) -> PaginatedResponse[MedicineResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200,
        "Medicines retrieved successfully",
        [MedicineResponse.model_validate(m) for m in rows],
        meta,
    )


@router.post("/", status_code=201, response_model=ApiResponse[MedicineResponse])
async def create_medicine(
    body: CreateMedicineRequest,
    session: AsyncSession = Depends(get_session),
    svc: MedicineService = Depends(get_medicine_service),
) -> ApiResponse[MedicineResponse]:
    medicine = await svc.create(session, **body.model_dump())
    return success(201, "Medicine created successfully", MedicineResponse.model_validate(medicine))


@router.get("/{medicine_id}", response_model=ApiResponse[MedicineResponse])
async def get_medicine(
    medicine_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: MedicineService = Depends(get_medicine_service),
) -> ApiResponse[MedicineResponse]:
    medicine = await svc.get_by_id(session, medicine_id)
    if medicine is None:
        raise NotFoundError("Medicine not found")
    return success(
        200, "Medicine retrieved successfully", MedicineResponse.model_validate(medicine)
    )


@router.put("/{medicine_id}", response_model=ApiResponse[MedicineResponse])
async def update_medicine(
    medicine_id: uuid.UUID,
    body: UpdateMedicineRequest,
    session: AsyncSession = Depends(get_session),
    svc: MedicineService = Depends(get_medicine_service),
) -> ApiResponse[MedicineResponse]:
    medicine = await svc.update(session, medicine_id, **body.model_dump(exclude_unset=True))
    return success(200, "Medicine updated successfully", MedicineResponse.model_validate(medicine))


@router.delete("/{medicine_id}", status_code=204, response_class=Response)
async def delete_medicine(
    medicine_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: MedicineService = Depends(get_medicine_service),
) -> Response:
    await svc.delete(session, medicine_id)
    return no_content()
