"""Nurses router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_nurse_service, get_pagination, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.nurse import CreateNurseRequest, NurseResponse, UpdateNurseRequest
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.nurse_service import NurseService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[NurseResponse])
async def list_nurses(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: NurseService = Depends(get_nurse_service),
) -> PaginatedResponse[NurseResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200, "Nurses retrieved successfully", [NurseResponse.model_validate(n) for n in rows], meta
    )


@router.post("/", status_code=201, response_model=ApiResponse[NurseResponse])
async def create_nurse(
    body: CreateNurseRequest,
    session: AsyncSession = Depends(get_session),
    svc: NurseService = Depends(get_nurse_service),
) -> ApiResponse[NurseResponse]:
    nurse = await svc.create(session, **body.model_dump())
    return success(201, "Nurse created successfully", NurseResponse.model_validate(nurse))


@router.get("/{nurse_id}", response_model=ApiResponse[NurseResponse])
async def get_nurse(
    nurse_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: NurseService = Depends(get_nurse_service),
) -> ApiResponse[NurseResponse]:
    nurse = await svc.get_by_id(session, nurse_id)
    if nurse is None:
        raise NotFoundError("Nurse not found")
    return success(200, "Nurse retrieved successfully", NurseResponse.model_validate(nurse))


@router.put("/{nurse_id}", response_model=ApiResponse[NurseResponse])
async def update_nurse(
    nurse_id: uuid.UUID,
    body: UpdateNurseRequest,
    session: AsyncSession = Depends(get_session),
    svc: NurseService = Depends(get_nurse_service),
) -> ApiResponse[NurseResponse]:
    nurse = await svc.update(session, nurse_id, **body.model_dump(exclude_unset=True))
    return success(200, "Nurse updated successfully", NurseResponse.model_validate(nurse))


@router.delete("/{nurse_id}", status_code=204, response_class=Response)
async def delete_nurse(
    nurse_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: NurseService = Depends(get_nurse_service),
) -> Response:
    await svc.delete(session, nurse_id)
    return no_content()
