"""
HTTP plumbing around the routers: request ids, access timing and the
handlers that turn exceptions into ``{"error": {...}}`` responses.
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hostelmate.core.constants import HEADER_PROCESS_TIME, HEADER_REQUEST_ID
from hostelmate.core.exceptions import (
    BaseAppException,
    ErrorCode,
    ValidationError,
    field_errors_from_pydantic,
)

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tag every request with an id.

    An id sent by an upstream proxy is reused; otherwise a UUID4 is minted.
    It is exposed on ``request.state.request_id`` and echoed in the response.
    """

    def __init__(self, app: ASGIApp, header_name: str = HEADER_REQUEST_ID):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """Access log line per request, plus the elapsed seconds as a response header."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()

        response = await call_next(request)

        elapsed = time.perf_counter() - started
        response.headers[HEADER_PROCESS_TIME] = f"{elapsed:.4f}"

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "request_id": get_request_id(request),
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "elapsed": f"{elapsed:.4f}s",
                "client": request.client.host if request.client else None,
            },
        )
        return response


# -- exception handlers --

async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    """Render an application exception with its own status code."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"{exc.__class__.__name__}: {exc.message}",
        extra={
            "request_id": get_request_id(request),
            "error_code": exc.error_code.value,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed requests as 400 with per-field messages."""
    error = ValidationError(field_errors=field_errors_from_pydantic(exc.errors()))
    return await app_exception_handler(request, error)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log anything unexpected and hide the details from the client."""
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={"request_id": get_request_id(request)},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "message": "Server error",
                "code": ErrorCode.INTERNAL_ERROR.value,
                "details": {},
                "type": "InternalServerError",
            }
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


def register_middlewares(app: FastAPI) -> None:
    # Starlette runs the most recently added middleware first, so the id
    # exists before timing starts.
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)


def get_request_id(request: Request) -> Optional[str]:
    """Request ID assigned by RequestIDMiddleware, if any."""
    return getattr(request.state, "request_id", None)


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "register_exception_handlers",
    "register_middlewares",
    "get_request_id",
]
