from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tally.core.exceptions import CounterNotFoundError, InvalidCounterIdError

logger = logging.getLogger(__name__)

NOT_FOUND_REASON = "Resource was not found."


class ApiError(Exception):
    def __init__(self, code: str, message: str, status: int = 400, **extra: object) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status = status
        self.extra = extra


def error_body(reason: str, extra: dict[str, object] | None = None) -> dict[str, object]:
    # "status" and "reason" are fixed; extras cannot shadow them.
    return {**(extra or {}), "status": "error", "reason": reason}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    level = logging.WARNING if exc.status >= 500 else logging.INFO
    logger.log(level, "%s %s -> %s (%s)", request.method, request.url.path, exc.status, exc.code)
    return JSONResponse(status_code=exc.status, content=error_body(exc.message, exc.extra))


async def invalid_counter_id_handler(request: Request, exc: InvalidCounterIdError) -> JSONResponse:
    logger.warning("rejected counter id %r on %s %s", exc.raw, request.method, request.url.path)
    return await api_error_handler(request, ApiError(code="counter.invalid_id", message=str(exc), status=400))


async def counter_not_found_handler(request: Request, exc: CounterNotFoundError) -> JSONResponse:
    return await api_error_handler(request, ApiError(code="counter.not_found", message=NOT_FOUND_REASON, status=404))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unmatched paths and unmatched methods are both "no such route".
    if exc.status_code in (404, 405):
        err = ApiError(code="route.not_found", message=NOT_FOUND_REASON, status=404)
    else:
        err = ApiError(code="http.error", message=str(exc.detail), status=exc.status_code)
    return await api_error_handler(request, err)
