"""Exception handlers — every failure leaves the API as ``{"error": ...}``."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from edusphere.exceptions import EduSphereError, TooManyAttempts

logger = logging.getLogger(__name__)


async def _domain_error(request: Request, exc: EduSphereError) -> JSONResponse:
    headers = {}
    if isinstance(exc, TooManyAttempts):
        headers["Retry-After"] = str(exc.retry_after)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=headers)


async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        {"error": "Invalid request", "details": exc.errors()},
        status_code=422,
    )


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        {"error": "Something went wrong!", "details": str(exc)},
        status_code=500,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EduSphereError, _domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error)
