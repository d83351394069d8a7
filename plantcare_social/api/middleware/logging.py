# 📄 File: plantcare_social/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a short diary line for every request: what was asked, how it ended and how
# long it took, tagged with an id so all log lines of one request can be found together.
# 🧪 Purpose (Technical Summary):
# Request logging middleware. Accepts or generates an X-Request-ID, binds it to the
# logging context for the duration of the request, logs request/response/error lines
# with status-dependent levels and echoes X-Request-ID / X-Response-Time headers.
# 🔗 Dependencies:
# Starlette BaseHTTPMiddleware, shared.utils.logging.log_context
# 🔄 Connected Modules / Calls From:
# plantcare_social.main (middleware registration)

import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from plantcare_social.shared.utils.logging import log_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
RESPONSE_TIME_HEADER = "X-Response-Time"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Structured per-request logging with correlation ids."""

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0, excluded_paths=("/health",)):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold
        self.excluded_paths = set(excluded_paths)

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = self._get_or_create_request_id(request)
        quiet = request.url.path in self.excluded_paths

        with log_context(request_id=request_id):
            start_time = time.time()
            if not quiet:
                logger.info(
                    f"HTTP Request: {request.method} {request.url.path}",
                    extra={"method": request.method, "path": request.url.path, "client_ip": self._client_ip(request)},
                )

            try:
                response = await call_next(request)
            except Exception as e:
                elapsed_ms = round((time.time() - start_time) * 1000, 2)
                logger.error(
                    f"HTTP Error: {request.method} {request.url.path} -> {type(e).__name__}: {e}",
                    extra={"exception_type": type(e).__name__, "processing_time_ms": elapsed_ms},
                )
                raise

            elapsed = time.time() - start_time
            elapsed_ms = round(elapsed * 1000, 2)
            if not quiet:
                logger.log(
                    self._level_for(response.status_code, elapsed),
                    f"HTTP Response: {request.method} {request.url.path} -> {response.status_code} ({elapsed_ms}ms)",
                    extra={"status_code": response.status_code, "processing_time_ms": elapsed_ms},
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers[RESPONSE_TIME_HEADER] = f"{elapsed_ms}ms"
        return response

    def _level_for(self, status_code: int, elapsed: float) -> int:
        if status_code >= 500:
            return logging.ERROR
        if status_code >= 400 or elapsed >= self.slow_request_threshold:
            return logging.WARNING
        return logging.INFO

    @staticmethod
    def _get_or_create_request_id(request: Request) -> str:
        request_id = request.headers.get(REQUEST_ID_HEADER.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        return request_id

    @staticmethod
    def _client_ip(request: Request) -> str:
        forwarded_for = request.headers.get("x-forwarded-for")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        return request.client.host if request.client else "unknown"


def get_request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "")
