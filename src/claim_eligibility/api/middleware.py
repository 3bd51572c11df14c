"""Request middleware: request ids, access log lines, JSON 500s."""

from __future__ import annotations

import time
import uuid

from loguru import logger
from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

REQUEST_ID_HEADER = "X-Request-ID"


async def request_context(request: Request, call_next: RequestResponseEndpoint) -> Response:
    """Run one request under its id and log how it ended.

    The caller's ``X-Request-ID`` is kept when present and echoed back.
    Exceptions that escape the routes become ``{"detail": ..., "error": ...}``
    with status 500 instead of a bare text body.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    started = time.perf_counter()

    with logger.contextualize(request_id=request_id):
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.opt(exception=exc).error(
                "Unhandled error on {method} {path}",
                method=request.method,
                path=request.url.path,
            )
            response = JSONResponse(
                status_code=500,
                content={"detail": "Internal server error", "error": str(exc)},
            )
        logger.info(
            "{method} {path} → {status} ({ms:.0f}ms)",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            ms=(time.perf_counter() - started) * 1000,
        )

    response.headers[REQUEST_ID_HEADER] = request_id
    return response
