"""
Application-wide middleware: permissive CORS headers and request logging.
"""
from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept, Authorization",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Add CORS headers to every response and answer preflight requests directly."""

    async def dispatch(self, request, call_next):
        if request.method == "OPTIONS":
            return JSONResponse({}, status_code=200, headers=CORS_HEADERS)
        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        logger.debug("Headers: %s", dict(request.headers))
        return await call_next(request)
