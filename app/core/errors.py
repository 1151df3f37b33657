"""HTTP error taxonomy and the exception handlers that render it.

Every failure leaves the API as ``{"error": "<message>"}``; validation
failures also carry a ``details`` list of ``{path, message}`` entries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.validation import Violation, violations_from_errors

logger = logging.getLogger(__name__)


class Unauthenticated(HTTPException):
    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class Forbidden(HTTPException):
    def __init__(self, detail: str = "Forbidden"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class NoSuchRequest(NotFound):
    def __init__(self, detail: str = "No merchant request found"):
        super().__init__(detail)


class Conflict(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ValidationFailed(HTTPException):
    def __init__(self, violations: List[Violation], detail: str = "Validation failed"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
        self.violations = violations


class ServerError(HTTPException):
    def __init__(self, detail: str = "Server error"):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
        )


def _error_body(message: str, details: Optional[List[Violation]] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = [v.model_dump() for v in details]
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    details = getattr(exc, "violations", None)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail), details),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    violations = violations_from_errors(exc.errors(), strip_location=True)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body("Validation failed", violations),
    )


async def persistence_exception_handler(request: Request, exc: PyMongoError):
    logger.exception("Database operation failed on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Server error"),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PyMongoError, persistence_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
