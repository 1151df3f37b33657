"""Request logging middleware to trace requests, durations and identity.

- Adds a unique X-Request-ID header to responses (and uses any incoming header)
- Logs method, path, status, duration, client IP and the caller's email
- Does not log request/response bodies to avoid leaking sensitive data
"""
from __future__ import annotations

import logging
import time
import uuid
from typing import Optional

from jose import jwt
from jose.exceptions import JOSEError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.auth import bearer_token
from ventech_common.logging import request_id_var


logger = logging.getLogger("app.request")


def caller_email(authorization: Optional[str]) -> Optional[str]:
    """Read the email claim for log correlation only.

    The signature is not checked here; the auth guards verify the token.
    """
    token = bearer_token(authorization)
    if not token:
        return None
    try:
        return jwt.get_unverified_claims(token).get("email")
    except JOSEError:
        return None


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:  # type: ignore[override]
        start = time.monotonic()

        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        fields = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
            "user_email": caller_email(request.headers.get("Authorization")),
        }

        try:
            response = await call_next(request)
        except Exception:  # pragma: no cover - we still want to log then reraise
            fields["duration_ms"] = int((time.monotonic() - start) * 1000)
            logger.exception("Unhandled exception during request", extra=fields)
            raise
        finally:
            request_id_var.reset(token)

        fields["status"] = response.status_code
        fields["duration_ms"] = int((time.monotonic() - start) * 1000)
        logger.info("Request finished", extra={**fields, "request_id": request_id})

        response.headers.setdefault("X-Request-ID", request_id)
        return response
