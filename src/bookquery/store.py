from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from fastapi import Request
from sqlalchemy import func
from sqlmodel import Session, col, select, text

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine
    from sqlalchemy.sql import Select

from .exceptions import StoreFailure
from .logging_config import get_logger
from .models import Book, BookRecord, DatedBookRecord
from .year import publication_year_guard

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 5.0


class BookStore:
    """
    Read-only client for the book collection.

    Each public coroutine performs a single store operation in a worker
    thread, bounded by ``timeout``. Any error from the store, including the
    timeout expiring, is logged here and re-raised as ``StoreFailure``.
    """

    def __init__(self, engine: Engine, timeout: float = DEFAULT_TIMEOUT_SECONDS):
        self.engine = engine
        self.timeout = timeout

    async def _run(self, operation: str, fn: Callable[[Session], T]) -> T:
        def call() -> T:
            with Session(self.engine) as session:
                return fn(session)

        try:
            result = await asyncio.wait_for(asyncio.to_thread(call), self.timeout)
        except TimeoutError as e:
            logger.error(
                "Store operation timed out", operation=operation, timeout=self.timeout
            )
            raise StoreFailure(operation) from e
        except Exception as e:
            logger.exception("Store operation failed", operation=operation)
            raise StoreFailure(operation) from e

        logger.debug("Store operation complete", operation=operation)
        return result

    async def find_one(self, statement: Select[Any]) -> BookRecord | None:
        def fn(session: Session) -> BookRecord | None:
            book = session.exec(statement).first()
            return book.to_record() if book else None

        return await self._run("find_one", fn)

    async def find_many(self, statement: Select[Any]) -> list[BookRecord]:
        def fn(session: Session) -> list[BookRecord]:
            return [book.to_record() for book in session.exec(statement).all()]

        return await self._run("find_many", fn)

    async def aggregate(self, statement: Select[Any]) -> list[DatedBookRecord]:
        """Run a statement selecting ``Book`` plus a derived publication year."""

        def fn(session: Session) -> list[DatedBookRecord]:
            return [
                DatedBookRecord(**book.to_record().model_dump(), publication_year=year)
                for book, year in session.exec(statement).all()
            ]

        return await self._run("aggregate", fn)

    async def ping(self) -> bool:
        def fn(session: Session) -> bool:
            session.connection().execute(text("SELECT 1"))
            return True

        return await self._run("ping", fn)

    async def catalog_summary(self) -> dict[str, int]:
        """Count all records and those whose publication date has no year."""

        def fn(session: Session) -> dict[str, int]:
            total = session.exec(select(func.count()).select_from(Book)).one()
            dated = session.exec(
                select(func.count())
                .select_from(Book)
                .where(publication_year_guard(col(Book.publication_date)))
            ).one()
            return {"total": total, "undated": total - dated}

        return await self._run("catalog_summary", fn)


def get_store(request: Request) -> BookStore:
    """Dependency returning the store created by the application lifespan."""
    store: BookStore = request.app.state.store
    return store
