"""Offset pagination: query parameter normalisation and page metadata."""

from __future__ import annotations

from dataclasses import dataclass

PAGE_DEFAULT = 1
LIMIT_DEFAULT = 10
LIMIT_MAX = 100
# Largest page whose row offset still fits a signed 64-bit OFFSET.
PAGE_MAX = (2**63 - 1) // LIMIT_MAX + 1


@dataclass(frozen=True)
class PaginationParams:
    """A normalised (page, limit) pair. ``page`` is 1-indexed."""

    page: int = PAGE_DEFAULT
    limit: int = LIMIT_DEFAULT

    @classmethod
    def resolve(cls, page: int | None = None, limit: int | None = None) -> PaginationParams:
        """Build params from raw query values, silently correcting bad input.

        The rules are applied independently. An invalid limit falls back to
        the default rather than to the minimum. Pages beyond ``PAGE_MAX`` are
        pinned to it; such a page is always past the end and comes back empty.
        """
        if page is None:
            page = PAGE_DEFAULT
        if limit is None:
            limit = LIMIT_DEFAULT
        if page < 1:
            page = 1
        if page > PAGE_MAX:
            page = PAGE_MAX
        if limit < 1:
            limit = LIMIT_DEFAULT
        if limit > LIMIT_MAX:
            limit = LIMIT_MAX
        return cls(page=page, limit=limit)

    @property
    def skip(self) -> int:
        """Number of rows to skip before the current page."""
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PaginationMeta:
    current_page: int
    per_page: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, params: PaginationParams, total: int) -> PaginationMeta:
        total_pages = (total + params.limit - 1) // params.limit
        return cls(
            current_page=params.page,
            per_page=params.limit,
            total=total,
            total_pages=total_pages,
            has_next=params.page < total_pages,
            has_prev=params.page > 1,
        )


def parse_int(raw: str | None) -> int | None:
    """Parse a query string value as an int, treating junk as absent."""
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None
