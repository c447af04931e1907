"""Appointments router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_appointment_service, get_pagination, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.appointment import (
    AppointmentResponse,
    CreateAppointmentRequest,
    UpdateAppointmentRequest,
)
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.appointment_service import AppointmentService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[AppointmentResponse])
async def list_appointments(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: AppointmentService = Depends(get_appointment_service),
) -> PaginatedResponse[AppointmentResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200,
        "Appointments retrieved successfully",
        [AppointmentResponse.model_validate(a) for a in rows],
        meta,
    )


@router.post("/", status_code=201, response_model=ApiResponse[AppointmentResponse])
async def create_appointment(
    body: CreateAppointmentRequest,
    session: AsyncSession = Depends(get_session),
    svc: AppointmentService = Depends(get_appointment_service),
) -> ApiResponse[AppointmentResponse]:
    appointment = await svc.create(session, **body.model_dump())
    return success(
        201, "Appointment created successfully", AppointmentResponse.model_validate(appointment)
    )


@router.get("/{appointment_id}", response_model=ApiResponse[AppointmentResponse])
async def get_appointment(
    appointment_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: AppointmentService = Depends(get_appointment_service),
) -> ApiResponse[AppointmentResponse]:
    appointment = await svc.get_by_id(session, appointment_id)
    if appointment is None:
        raise NotFoundError("Appointment not found")
    return success(
        200, "Appointment retrieved successfully", AppointmentResponse.model_validate(appointment)
    )


@router.put("/{appointment_id}", response_model=ApiResponse[AppointmentResponse])
async def update_appointment(
    appointment_id: uuid.UUID,
    body: UpdateAppointmentRequest,
    session: AsyncSession = Depends(get_session),
    svc: AppointmentService = Depends(get_appointment_service),
) -> ApiResponse[AppointmentResponse]:
    appointment = await svc.update(
        session, appointment_id, **body.model_dump(exclude_unset=True)
    )
    return success(
        200, "Appointment updated successfully", AppointmentResponse.model_validate(appointment)
    )


@router.delete("/{appointment_id}", status_code=204, response_class=Response)
async def delete_appointment(
    appointment_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: AppointmentService = Depends(get_appointment_service),
) -> Response:
    await svc.delete(session, appointment_id)
    return no_content()
