"""
API error types and their JSON envelopes.

Handlers and the storage layer raise these; `register_exception_handlers`
turns them into responses:

- ValidationFailed -> 400 {"status": "error", "message": ...}
- NotFound         -> 404 {"status": "not_found", "message": ...}
- StorageError     -> 500 {"status": "error", "error": ...}
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def body(self) -> dict:
        return {"status": "error", "error": self.message}


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def body(self) -> dict:
        return {"status": "error", "message": self.message}


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND

    def body(self) -> dict:
        return {"status": "not_found", "message": self.message}


class StorageError(ApiError):
    """
    Any database failure: connectivity, constraint violation, bad query.
    The raw driver message is surfaced to the caller.
    """


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = str(err.get("msg") or "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "Invalid request: " + "; ".join(parts)


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error(
            "storage_error method=%s path=%s error=%s",
            request.method,
            request.url.path,
            exc.message,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.body())


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationFailed(_describe_validation_errors(exc))
    return JSONResponse(status_code=error.status_code, content=error.body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
