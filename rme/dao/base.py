"""Generic base DAO — CRUD plus offset pagination over a single table."""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from rme.core.database import Base
from rme.core.pagination import PaginationParams

ModelT = TypeVar("ModelT", bound=Base)

_IMMUTABLE = frozenset({"id", "created_at", "updated_at"})


class DataAccessError(Exception):
    """Any storage failure. Carries the driver message, nothing more."""


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataAccessError(f"{action} failed: {exc}") from exc


class BaseDAO(Generic[ModelT]):
    """Base data-access object. Subclasses set ``model`` class attribute.

    Tables with a natural key (NIK, NIP, insurance code) also set
    ``unique_key`` to the column name.
    """

    model: type[ModelT]
    unique_key: str | None = None

    @staticmethod
    def _require_pk(pk: uuid.UUID) -> None:
        if pk is None:
            raise ValueError("pk must not be None")

    def _ordering(self):
        table = self.model.__table__
        return (table.c.created_at.asc(), table.c.id.asc())

    # ── read ──────────────────────────────────────────────────────────────

    async def find_all(self, session: AsyncSession) -> list[ModelT]:
        """Every row in the table; an empty table gives an empty list."""
        with _storage_errors("find"):
            result = await session.execute(select(self.model))
            return list(result.scalars().all())

    async def find_all_paginated(
        self, session: AsyncSession, params: PaginationParams
    ) -> tuple[list[ModelT], int]:
        """Return one page of rows and the total row count.

        Count and fetch use the same (empty) filter but run as two separate
        statements, so under concurrent writes ``total`` may be slightly off
        from the page it accompanies.
        """
        total = await self.count(session)
        stmt = select(self.model).order_by(*self._ordering()).offset(params.skip).limit(params.limit)
        with _storage_errors("find"):
            result = await session.execute(stmt)
            rows = list(result.scalars().all())
        return rows, total

    async def get_by_id(self, session: AsyncSession, pk: uuid.UUID) -> ModelT | None:
        self._require_pk(pk)
        with _storage_errors("find"):
            return await session.get(self.model, pk)

    async def get_by_field(self, session: AsyncSession, **filters: Any) -> ModelT | None:
        """Return the first row matching all *filters*, or None.

        Usage::

            record = await dao.get_by_field(session, nik="3171234567890001")

        Raises ``ValueError`` if called without any filters.
        """
        if not filters:
            raise ValueError("get_by_field() requires at least one filter")
        stmt = select(self.model)
        for key, val in filters.items():
            stmt = stmt.where(getattr(self.model, key) == val)
        with _storage_errors("find"):
            result = await session.execute(stmt.limit(1))
            return result.scalars().first()

    async def find_by_unique_key(self, session: AsyncSession, key: Any) -> ModelT | None:
        """Look a row up by its natural key; always None for tables without one."""
        if self.unique_key is None:
            return None
        return await self.get_by_field(session, **{self.unique_key: key})

    async def count(self, session: AsyncSession) -> int:
        stmt = select(func.count()).select_from(self.model.__table__)
        with _storage_errors("count"):
            result = await session.execute(stmt)
            return result.scalar_one()

    # ── write ─────────────────────────────────────────────────────────────

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """Insert a row. An ``id`` is generated unless the caller passes one."""
        if values.get("id") is None:
            values["id"] = uuid.uuid4()
        obj = self.model(**values)
        with _storage_errors("insert"):
            session.add(obj)
            await session.flush()
            await session.refresh(obj)
        return obj

    async def update(self, session: AsyncSession, pk: uuid.UUID, **values: Any) -> ModelT | None:
        """Merge *values* into the row; returns None when no row has *pk*."""
        self._require_pk(pk)
        column_keys = set(self.model.__mapper__.column_attrs.keys())
        for key in values:
            if key in _IMMUTABLE:
                raise AttributeError(f"'{key}' is immutable and cannot be updated")
            if key not in column_keys:
                raise AttributeError(f"{self.model.__name__} has no column '{key}'")
        with _storage_errors("update"):
            obj = await session.get(self.model, pk)
            if obj is None:
                return None
            for key, val in values.items():
                setattr(obj, key, val)
            await session.flush()
            await session.refresh(obj)
        return obj

    async def delete(self, session: AsyncSession, pk: uuid.UUID) -> bool:
        """Remove the row; False (not an error) when nothing matched."""
        self._require_pk(pk)
        with _storage_errors("delete"):
            obj = await session.get(self.model, pk)
            if obj is None:
                return False
            await session.delete(obj)
            await session.flush()
        return True
