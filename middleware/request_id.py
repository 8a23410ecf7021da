"""
Request ID Middleware for the UA document utilities API.

Generates a unique request_id (UUID) for each incoming request and:
1. Attaches it to request.state for use in handlers
2. Adds X-Request-ID header to all responses
3. Logs method, path, status and latency with the request_id attached
"""
import time
import uuid
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from utils.date_utils import format_duration


logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to generate and propagate request IDs."""

    async def dispatch(self, request: Request, call_next):
        # Generate or use existing request ID
        request_id = request.headers.get("X-Request-ID")
        if not request_id:
            request_id = str(uuid.uuid4())

        request.state.request_id = request_id

        start_ns = time.perf_counter_ns()
        response = await call_next(request)
        elapsed_ns = time.perf_counter_ns() - start_ns

        response.headers["X-Request-ID"] = request_id

        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "latency_ms": round(elapsed_ns / 1_000_000, 2),
                "elapsed": format_duration(elapsed_ns),
            }
        )
        return response


def get_request_id(request: Request) -> str:
    """Helper to get request ID from request state."""
    return getattr(request.state, "request_id", "unknown")
