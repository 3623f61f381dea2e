"""Persistent catalog store backed by SQLAlchemy."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from ..database import Database
from ..db_models import Movie
from ..models import SeedRecord, StoreDocument

logger = logging.getLogger(__name__)

STORE_ID_PREFIX = "db-"


class StoreUnavailableError(RuntimeError):
    """Raised when the persistent store cannot serve a request."""


@dataclass(slots=True)
class StoreFilter:
    """Listing predicates applied by the store query."""

    search: str = ""
    category: str = ""
    type: str = ""
    featured: bool | None = None


def parse_document_id(raw_id: str) -> int | None:
    """Return the primary key encoded in ``raw_id`` (``db-12`` or ``12``)."""

    value = (raw_id or "").strip()
    if value.startswith(STORE_ID_PREFIX):
        value = value[len(STORE_ID_PREFIX):]
    if not (value.isascii() and value.isdigit()):
        return None
    parsed = int(value)
    return parsed if parsed > 0 else None


class CatalogStore:
    """Query and mutate catalog documents stored in the database."""

    def __init__(self, database: Database):
        self._database = database

    async def is_ready(self) -> bool:
        return await self._database.is_ready()

    async def find(self, filters: StoreFilter, *, limit: int) -> list[StoreDocument]:
        """Return documents matching ``filters``, newest first."""

        stmt = select(Movie)
        search_terms = filters.search.split()
        if search_terms:
            columns = (Movie.title, Movie.description, Movie.category)
            stmt = stmt.where(
                or_(
                    *(
                        func.lower(column).contains(term.lower(), autoescape=True)
                        for term in search_terms
                        for column in columns
                    )
                )
            )
        if filters.category:
            stmt = stmt.where(Movie.category == filters.category)
        if filters.type:
            stmt = stmt.where(Movie.type == filters.type)
        if filters.featured is not None:
            stmt = stmt.where(Movie.featured.is_(filters.featured))
        stmt = stmt.order_by(Movie.created_at.desc(), Movie.id.desc()).limit(limit)

        with self._translate_errors("query catalog documents"):
            async with self._database.session_factory() as session:
                result = await session.execute(stmt)
                rows = result.scalars().all()
        return [StoreDocument.from_row(row) for row in rows]

    async def get(self, document_id: int) -> StoreDocument | None:
        with self._translate_errors("load catalog document"):
            async with self._database.session_factory() as session:
                row = await session.get(Movie, document_id)
        if row is None:
            return None
        return StoreDocument.from_row(row)

    async def create(self, fields: dict[str, Any]) -> StoreDocument:
        with self._translate_errors("create catalog document"):
            async with self._database.session_factory() as session:
                row = Movie(**fields)
                session.add(row)
                await session.commit()
                await session.refresh(row)
        return StoreDocument.from_row(row)

    async def update(
        self, document_id: int, changes: dict[str, Any]
    ) -> StoreDocument | None:
        with self._translate_errors("update catalog document"):
            async with self._database.session_factory() as session:
                row = await session.get(Movie, document_id)
                if row is None:
                    return None
                for key, value in changes.items():
                    setattr(row, key, value)
                await session.commit()
                await session.refresh(row)
        return StoreDocument.from_row(row)

    async def delete(self, document_id: int) -> bool:
        with self._translate_errors("delete catalog document"):
            async with self._database.session_factory() as session:
                row = await session.get(Movie, document_id)
                if row is None:
                    return False
                await session.delete(row)
                await session.commit()
        return True

    async def replace_all(self, records: Iterable[SeedRecord]) -> int:
        """Drop every stored document and insert ``records`` in order."""

        rows = [Movie(**record.to_document_fields()) for record in records]
        with self._translate_errors("replace catalog documents"):
            async with self._database.session_factory() as session:
                await session.execute(delete(Movie))
                session.add_all(rows)
                await session.commit()
        return len(rows)

    @staticmethod
    @contextmanager
    def _translate_errors(action: str) -> Iterator[None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as exc:
            logger.warning("Unable to %s: %s", action, exc)
            raise StoreUnavailableError(f"Unable to {action}") from exc
