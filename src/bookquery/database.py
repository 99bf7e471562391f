from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlmodel import SQLModel, create_engine

from .logging_config import get_logger

# Import models to register them with SQLModel metadata
from .models import Book  # noqa: F401

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from .config import Settings

logger = get_logger(__name__)


def create_store_engine(settings: Settings) -> Engine:
    connect_args: dict[str, Any] = {}
    if settings.db_url.startswith("sqlite"):
        # Requests are served from a thread pool
        connect_args = {"check_same_thread": False, "timeout": 30}
    if not settings.DATABASE_URL:
        settings.DATA_PATH.mkdir(parents=True, exist_ok=True)

    return create_engine(
        settings.db_url,
        echo=False,
        connect_args=connect_args,
        pool_pre_ping=True,
    )


def create_db_and_tables(engine: Engine) -> None:
    logger.info("Initializing database", db_url=engine.url.render_as_string())
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized successfully")
