"""Files router — multipart upload to object storage plus metadata CRUD."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.responses import Response

from rme.api.deps import get_file_service, get_pagination, get_session
from rme.api.responses import ApiResponse, PaginatedResponse, no_content, paginated, success
from rme.api.schemas.file import FileResponse
from rme.core.pagination import PaginationParams
from rme.services import NotFoundError
from rme.services.file_service import FileService

router = APIRouter()


@router.get("/", response_model=PaginatedResponse[FileResponse])
async def list_files(
    params: PaginationParams = Depends(get_pagination),
    session: AsyncSession = Depends(get_session),
    svc: FileService = Depends(get_file_service),
) -> PaginatedResponse[FileResponse]:
    rows, meta = await svc.get_all_paginated(session, params)
    return paginated(
        200, "Files retrieved successfully", [FileResponse.model_validate(f) for f in rows], meta
    )


@router.post("/", status_code=201, response_model=ApiResponse[FileResponse])
async def upload_file(
    file: UploadFile = File(...),
    uploader: str = Form("unknown"),
    session: AsyncSession = Depends(get_session),
    svc: FileService = Depends(get_file_service),
) -> ApiResponse[FileResponse]:
    content = await file.read()
    stored = await svc.upload(
        session,
        filename=file.filename or "",
        content=content,
        uploader=uploader.strip() or "unknown",
    )
    return success(201, "File uploaded successfully", FileResponse.model_validate(stored))


@router.get("/{file_id}", response_model=ApiResponse[FileResponse])
async def get_file(
    file_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: FileService = Depends(get_file_service),
) -> ApiResponse[FileResponse]:
    stored = await svc.get_by_id(session, file_id)
    if stored is None:
        raise NotFoundError("File not found")
    return success(200, "File retrieved successfully", FileResponse.model_validate(stored))


@router.delete("/{file_id}", status_code=204, response_class=Response)
async def delete_file(
    file_id: uuid.UUID,
    session: AsyncSession = Depends(get_session),
    svc: FileService = Depends(get_file_service),
) -> Response:
    await svc.delete(session, file_id)
    return no_content()
