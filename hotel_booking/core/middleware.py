"""
HTTP middleware.

``RequestContextMiddleware`` wraps every request: it assigns (or reuses)
the request id, times the call and writes one access-log line.
``SecurityHeadersMiddleware`` adds the usual hardening headers.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable, Dict

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hotel_booking.core.logging import get_logger, request_id as request_id_var

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
PROCESS_TIME_HEADER = "X-Process-Time"

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request id, timing and access logging for each request."""

    def __init__(self, app: ASGIApp, header_name: str = REQUEST_ID_HEADER):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        req_id = request.headers.get(self.header_name) or uuid.uuid4().hex
        request.state.request_id = req_id
        token = request_id_var.set(req_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled error on {request.method} {request.url.path}",
                extra=self._describe(request, started, error_type=type(exc).__name__),
                exc_info=True,
            )
            raise
        else:
            elapsed = time.perf_counter() - started
            response.headers[self.header_name] = req_id
            response.headers[PROCESS_TIME_HEADER] = f"{elapsed:.4f}"

            log = logger.warning if response.status_code >= 400 else logger.info
            log(
                f"{request.method} {request.url.path} -> {response.status_code}",
                extra=self._describe(request, started, status_code=response.status_code),
            )
            return response
        finally:
            request_id_var.reset(token)

    @staticmethod
    def _describe(request: Request, started: float, **fields) -> dict:
        return {
            "method": request.method,
            "path": request.url.path,
            "query": request.url.query or None,
            "client_host": request.client.host if request.client else None,
            "duration": round(time.perf_counter() - started, 4),
            **fields,
        }


class SecurityHeadersMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response


def register_middlewares(app: FastAPI, include_security: bool = True) -> None:
    """
    Install the middlewares on ``app``.

    Starlette runs the last-added middleware first, so the request context
    is added last to cover everything else.
    """
    if include_security:
        app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestContextMiddleware)

    logger.debug("Middlewares registered", extra={"security_headers": include_security})


__all__ = [
    "RequestContextMiddleware",
    "SecurityHeadersMiddleware",
    "register_middlewares",
]
