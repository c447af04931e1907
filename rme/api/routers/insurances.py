"""Insurances router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_insurance_service, get_pagination, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.insurance import (
    CreateInsuranceRequest,
    InsuranceResponse,
    UpdateInsuranceRequest,
)
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.insurance_service import InsuranceService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[InsuranceResponse])
async def list_insurances(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: InsuranceService = Depends(get_insurance_service),
) -> PaginatedResponse[InsuranceResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200,
        "Insurances retrieved successfully",
        [InsuranceResponse.model_validate(i) for i in rows],
        meta,
    )


@router.post("/", status_code=201, response_model=ApiResponse[InsuranceResponse])
async def create_insurance(
    body: CreateInsuranceRequest,
    session: AsyncSession = Depends(get_session),
    svc: InsuranceService = Depends(get_insurance_service),
) -> ApiResponse[InsuranceResponse]:
    insurance = await svc.create(session, **body.model_dump())
    return success(
        201, "Insurance created successfully", InsuranceResponse.model_validate(insurance)
    )


@router.get("/{insurance_id}", response_model=ApiResponse[InsuranceResponse])
async def get_insurance(
    insurance_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: InsuranceService = Depends(get_insurance_service),
) -> ApiResponse[InsuranceResponse]:
    insurance = await svc.get_by_id(session, insurance_id)
    if insurance is None:
        raise NotFoundError("Insurance not found")
    return success(
        200, "Insurance retrieved successfully", InsuranceResponse.model_validate(insurance)
    )


@router.put("/{insurance_id}", response_model=ApiResponse[InsuranceResponse])
async def update_insurance(
    insurance_id: uuid.UUID,
    body: UpdateInsuranceRequest,
    session: AsyncSession = Depends(get_session),
    svc: InsuranceService = Depends(get_insurance_service),
) -> ApiResponse[InsuranceResponse]:
    insurance = await svc.update(session, insurance_id, **body.model_dump(exclude_unset=True))
    return success(
        200, "Insurance updated successfully", InsuranceResponse.model_validate(insurance)
    )


@router.delete("/{insurance_id}", status_code=204, response_class=Response)
async def delete_insurance(
    insurance_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: InsuranceService = Depends(get_insurance_service),
) -> Response:
    await svc.delete(session, insurance_id)
    return no_content()
