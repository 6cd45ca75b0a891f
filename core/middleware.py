import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from core.logging import logger


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs every request with its status and duration"""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        client = request.client.host if request.client else "unknown"
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.error(f"{client} {request.method} {request.url.path} failed after {elapsed_ms:.1f}ms")
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{client} {request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms")
        return response
