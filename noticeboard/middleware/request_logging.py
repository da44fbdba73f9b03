"""
Request logging middleware: request IDs, access log lines and timing headers.
"""

from typing import Callable
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from noticeboard.services.error_handler import ErrorHandlerService
import logging
import time
import uuid

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Assigns every request a short ID, logs method, path, status and duration,
    and reports the ID and duration in ``X-Request-ID`` / ``X-Process-Time``.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 1.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            processing_time = time.perf_counter() - start_time
            logger.error(
                f"Request error [{request_id}]: {request.method} {request.url.path} "
                f"{type(exc).__name__} - {exc} ({processing_time:.3f}s)",
                exc_info=True
            )
            response = ErrorHandlerService.handle_unexpected_error(exc, request)

        processing_time = time.perf_counter() - start_time
        self._log_response(request, response, request_id, processing_time)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{processing_time:.3f}"
        return response

    def _log_response(self, request: Request, response: Response, request_id: str, processing_time: float) -> None:
        message = (
            f"[{request_id}] {request.method} {request.url.path} "
            f"{response.status_code} {processing_time:.3f}s"
        )
        extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "processing_time": processing_time
        }
        if processing_time > self.slow_request_threshold:
            logger.warning(f"SLOW REQUEST {message}", extra=extra)
        else:
            logger.info(message, extra=extra)
