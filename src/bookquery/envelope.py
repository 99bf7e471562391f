"""
Uniform response envelope.

Every response body is ``{"success": true, "data": ...}`` or
``{"success": false, "message": ...}``.
"""

from collections.abc import Sequence
from typing import Any, Final

import orjson
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from .exceptions import InvalidInput, StoreFailure
from .logging_config import get_logger

logger = get_logger(__name__)

SERVER_ERROR_MESSAGE: Final[str] = "Server Error"


class EnvelopeResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return orjson.dumps(content)


def _jsonable(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, Sequence) and not isinstance(data, str | bytes):
        return [_jsonable(item) for item in data]
    return data


def success(data: Any, status_code: int = 200) -> EnvelopeResponse:
    return EnvelopeResponse(
        {"success": True, "data": _jsonable(data)}, status_code=status_code
    )


def failure(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> EnvelopeResponse:
    return EnvelopeResponse(
        {"success": False, "message": message},
        status_code=status_code,
        headers=headers,
    )


def collection_or_not_found(
    records: Sequence[BaseModel], not_found_message: str
) -> EnvelopeResponse:
    if not records:
        return failure(404, not_found_message)
    return success(records)


def record_or_not_found(
    record: BaseModel | None, not_found_message: str
) -> EnvelopeResponse:
    if record is None:
        return failure(404, not_found_message)
    return success(record)


# ─────────────────────────────────────────────────────────────────────────────
# Exception Handlers
# ─────────────────────────────────────────────────────────────────────────────


async def _invalid_input_handler(
    request: Request, exc: InvalidInput
) -> EnvelopeResponse:
    logger.info("Rejected request", path=request.url.path, reason=exc.message)
    return failure(400, exc.message)


async def _store_failure_handler(
    request: Request, exc: StoreFailure
) -> EnvelopeResponse:
    # The cause was logged by the store; only the operation is repeated here.
    logger.warning(
        "Request failed on store", path=request.url.path, operation=exc.operation
    )
    return failure(500, SERVER_ERROR_MESSAGE)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> EnvelopeResponse:
    return failure(exc.status_code, str(exc.detail), headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidInput, _invalid_input_handler)
    app.add_exception_handler(StoreFailure, _store_failure_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
