"""FileService — uploads to object storage plus metadata rows."""

from __future__ import annotations

import mimetypes
import uuid

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from rme.core.storage import ObjectStorage, ObjectStorageError, generate_object_key
from rme.dao.file_dao import FileDAO
from rme.models.file import File
from rme.services import NotFoundError, StorageError
from rme.services.base import CrudService, storage_errors
from rme.services.validation import file_extension, validate_upload

log = structlog.get_logger("rme.service.file")


class FileService(CrudService[File]):
    """File metadata CRUD backed by an S3-compatible bucket.

    Bytes are written before the metadata row. If the insert then fails the
    object stays in the bucket; nothing cleans it up.
    """

    entity = "file"

    def __init__(self, dao: FileDAO, storage: ObjectStorage) -> None:
        super().__init__(dao)
        self._storage = storage

    async def upload(
        self,
        session: AsyncSession,
        *,
        filename: str,
        content: bytes,
        uploader: str = "unknown",
    ) -> File:
        """Validate, store the bytes, then persist metadata.

        Raises :class:`ValidationError` for empty, oversized or disallowed
        files and :class:`StorageError` when the bucket or database fails.
        """
        validate_upload(filename, len(content))

        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        key = generate_object_key(filename)
        try:
            url = await self._storage.upload(key, content, content_type)
        except ObjectStorageError as exc:
            log.error("file.upload_failed", key=key, error=str(exc))
            raise StorageError(str(exc)) from exc

        with storage_errors():
            obj = await self._dao.create(
                session,
                name=filename,
                type=content_type,
                extension=file_extension(filename),
                size=len(content),
                path=key,
                url=url,
                uploader=uploader,
            )
        log.info("file.uploaded", id=str(obj.id), key=key, size=len(content))
        return obj

    async def delete(self, session: AsyncSession, pk: uuid.UUID) -> None:
        """Remove the object from the bucket, then the metadata row."""
        with storage_errors():
            obj = await self._dao.get_by_id(session, pk)
        if obj is None:
            raise NotFoundError("File not found")

        try:
            await self._storage.delete(obj.path)
        except ObjectStorageError as exc:
            log.error("file.delete_failed", key=obj.path, error=str(exc))
            raise StorageError(str(exc)) from exc

        await super().delete(session, pk)
