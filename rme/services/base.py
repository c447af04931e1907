"""CrudService — the shared get/list/create/update/delete pipeline."""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar, Generic

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from rme.core.pagination import PaginationMeta, PaginationParams
from rme.dao.base import BaseDAO, DataAccessError, ModelT
from rme.services import ConflictError, NotFoundError, StorageError

log = structlog.get_logger("rme.service")


@contextmanager
def storage_errors() -> Iterator[None]:
    """Translate a DAO failure into a 500-class :class:`StorageError`."""
    try:
        yield
    except DataAccessError as exc:
        log.error("storage.failed", error=str(exc))
        raise StorageError(str(exc)) from exc


class CrudService(Generic[ModelT]):
    """Stateless service over one DAO.

    Subclasses set ``entity`` (used in messages and log events). The natural
    key, if any, comes from the DAO's ``unique_key``. ``validate`` is the hook
    for format checks that pydantic cannot express per field.
    """

    entity: ClassVar[str]

    def __init__(self, dao: BaseDAO[ModelT]) -> None:
        self._dao = dao

    @property
    def _event(self) -> str:
        return self.entity.replace(" ", "_")

    # ── read ──────────────────────────────────────────────────────────────

    async def get_all(self, session: AsyncSession) -> list[ModelT]:
        with storage_errors():
            return await self._dao.find_all(session)

    async def get_all_paginated(
        self, session: AsyncSession, params: PaginationParams
    ) -> tuple[list[ModelT], PaginationMeta]:
        with storage_errors():
            rows, total = await self._dao.find_all_paginated(session, params)
        return rows, PaginationMeta.build(params, total)

    async def get_by_id(self, session: AsyncSession, pk: uuid.UUID) -> ModelT | None:
        """Return the row or None; the caller decides whether absence is a 404."""
        with storage_errors():
            return await self._dao.get_by_id(session, pk)

    # ── write ─────────────────────────────────────────────────────────────

    def validate(self, values: dict[str, Any]) -> None:
        """Raise :class:`ValidationError` for malformed *values*."""

    async def _ensure_unique(
        self, session: AsyncSession, values: dict[str, Any], exclude: uuid.UUID | None = None
    ) -> None:
        field = self._dao.unique_key
        if field is None or values.get(field) is None:
            return
        with storage_errors():
            existing = await self._dao.find_by_unique_key(session, values[field])
        if existing is not None and existing.id != exclude:
            raise ConflictError(f"{field.upper()} already exists")

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """Validate, run the uniqueness pre-check, then insert.

        Raises :class:`ConflictError` before any write when the natural key
        is taken.
        """
        self.validate(values)
        await self._ensure_unique(session, values)
        with storage_errors():
            obj = await self._dao.create(session, **values)
        log.info(f"{self._event}.created", id=str(obj.id))
        return obj

    async def update(self, session: AsyncSession, pk: uuid.UUID, **values: Any) -> ModelT:
        """Merge the provided fields. ``None`` values are treated as not sent."""
        values = {k: v for k, v in values.items() if v is not None}
        self.validate(values)
        await self._ensure_unique(session, values, exclude=pk)
        with storage_errors():
            obj = await self._dao.update(session, pk, **values)
        if obj is None:
            raise NotFoundError(f"{self.entity.capitalize()} not found")
        log.info(f"{self._event}.updated", id=str(pk), fields=sorted(values))
        return obj

    async def delete(self, session: AsyncSession, pk: uuid.UUID) -> None:
        with storage_errors():
            deleted = await self._dao.delete(session, pk)
        if not deleted:
            raise NotFoundError(f"{self.entity.capitalize()} not found")
        log.info(f"{self._event}.deleted", id=str(pk))
