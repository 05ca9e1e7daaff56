# access_tokens/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

One line per request, tagged with a request id that is echoed in the
X-Request-ID header. Headers and query values are never logged, so API
keys and user identifiers stay out of the logs.
"""

import time
import uuid
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from access_tokens.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = ("/health",)


def status_log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        start_time = time.time()
        response = await call_next(request)
        elapsed_ms = (time.time() - start_time) * 1000

        response.headers[REQUEST_ID_HEADER] = request_id

        if request.url.path in QUIET_PATHS:
            return response

        message = f"[{request_id}] {request.method} {request.url.path} -> {response.status_code}"
        if settings.ENVIRONMENT != "production":
            query_keys = sorted(request.query_params.keys())
            message += (
                f" | {elapsed_ms:.1f}ms | Query keys: {query_keys or 'N/A'} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
        logger.log(status_log_level(response.status_code), message)

        return response
