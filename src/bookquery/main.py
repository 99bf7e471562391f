from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import __version__
from .api.books import router as books_router
from .api.health import router as health_router
from .config import Settings, get_settings
from .database import create_db_and_tables, create_store_engine
from .envelope import register_exception_handlers
from .exceptions import StoreFailure
from .logging_config import configure_logging, get_logger
from .store import BookStore

logger = get_logger(__name__)


def create_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        logger.info("bookquery starting", version=__version__, port=settings.PORT)

        engine = create_store_engine(settings)
        create_db_and_tables(engine)

        store = BookStore(engine, timeout=settings.STORE_TIMEOUT_SECONDS)
        app.state.store = store

        try:
            summary = await store.catalog_summary()
        except StoreFailure:
            logger.warning("Catalog summary unavailable, serving anyway")
        else:
            logger.info("Catalog loaded", records=summary["total"])
            if summary["undated"]:
                logger.warning(
                    "Records without a 4 digit publication year are excluded "
                    "from year queries",
                    count=summary["undated"],
                )

        logger.info("bookquery ready", host=settings.HOST, port=settings.PORT)

        yield

        logger.info("bookquery shutting down...")
        engine.dispose()
        logger.info("bookquery shutdown complete")

    app = FastAPI(
        title="bookquery",
        description="Read-only query API over a book catalog",
        version=__version__,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(books_router)

    return app


settings = get_settings()
configure_logging(level=settings.LOG_LEVEL)

app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookquery.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,
        log_level=settings.LOG_LEVEL.lower(),
    )
