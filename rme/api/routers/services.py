"""Clinic services router (the billable services catalogue)."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_pagination, get_service_service, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.service import CreateServiceRequest, ServiceResponse, UpdateServiceRequest
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.service_service import ServiceService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[ServiceResponse])
async def list_services(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: ServiceService = Depends(get_service_service),
) -> PaginatedResponse[ServiceResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200,
        "Services retrieved successfully",
        [ServiceResponse.model_validate(s) for s in rows],
        meta,
    )


@router.post("/", status_code=201, response_model=ApiResponse[ServiceResponse])
async def create_service(
    body: CreateServiceRequest,
    session: AsyncSession = Depends(get_session),
    svc: ServiceService = Depends(get_service_service),
) -> ApiResponse[ServiceResponse]:
    service = await svc.create(session, **body.model_dump())
    return success(201, "Service created successfully", ServiceResponse.model_validate(service))


@router.get("/{service_id}", response_model=ApiResponse[ServiceResponse])
async def get_service(
    service_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: ServiceService = Depends(get_service_service),
) -> ApiResponse[ServiceResponse]:
    service = await svc.get_by_id(session, service_id)
    if service is None:
        raise NotFoundError("Service not found")
    return success(200, "Service retrieved successfully", ServiceResponse.model_validate(service))


@router.put("/{service_id}", response_model=ApiResponse[ServiceResponse])
async def update_service(
    service_id: uuid.UUID,
    body: UpdateServiceRequest,
    session: AsyncSession = Depends(get_session),
    svc: ServiceService = Depends(get_service_service),
) -> ApiResponse[ServiceResponse]:
    service = await svc.update(session, service_id, **body.model_dump(exclude_unset=True))
    return success(200, "Service updated successfully", ServiceResponse.model_validate(service))


@router.delete("/{service_id}", status_code=204, response_class=Response)
async def delete_service(
    service_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: ServiceService = Depends(get_service_service),
) -> Response:
    await svc.delete(session, service_id)
    return no_content()
