from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..exceptions import StoreFailure
from ..logging_config import get_logger
from ..store import BookStore, get_store

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Hello World"


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/ready")
async def readiness_check(
    store: Annotated[BookStore, Depends(get_store)],
) -> dict[str, str | bool]:
    db_ok = False

    try:
        db_ok = await store.ping()
    except StoreFailure as e:
        logger.warning("Database health check failed", error=str(e))

    return {
        "status": "ready" if db_ok else "degraded",
        "database": db_ok,
    }
