# access_tokens/shared/middleware/security_headers_middleware.py (async version)

"""
Middleware for adding HTTP security headers.

Token responses carry bearer secrets, so API routes are marked
non-cacheable on top of the usual hardening headers.
"""

import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

# Configure logger
logger = logging.getLogger(__name__)

DOCS_ROUTES = ("/docs", "/redoc", "/openapi.json")
CONSOLE_ROUTE = "/"


class AsyncSecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Middleware that adds security headers to all HTTP responses.
    """

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        path = request.url.path
        is_docs_route = path in DOCS_ROUTES or path.startswith(("/docs/", "/redoc/"))
        is_console = path == CONSOLE_ROUTE

        # Prevents MIME-type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Prevents clickjacking
        response.headers["X-Frame-Options"] = "SAMEORIGIN"

        # Referrer control - limits information sent to other sites
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # The console and the docs UI need inline scripts and CDN assets
        if not (is_docs_route or is_console):
            response.headers["Content-Security-Policy"] = (
                "default-src 'none'; "
                "frame-ancestors 'none'; "
                "base-uri 'none'"
            )

        if path.startswith("/api/") or is_console:
            response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
            response.headers["Pragma"] = "no-cache"
            response.headers["Expires"] = "0"

        return response
