"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request and one per response.

    Method, path, client, status and duration are attached as ``extra``
    fields, so the JSON formatter writes them as separate keys.
    """

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or logging.getLogger("quicklink.web")

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        fields = {
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else "unknown",
        }

        self.logger.info(
            f"Request: {fields['method']} {fields['path']} from {fields['client']}",
            extra=fields,
        )

        response = await call_next(request)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        self.logger.info(
            f"Response: {fields['method']} {fields['path']} - Status: {response.status_code}",
            extra={**fields, "status": response.status_code, "duration_ms": duration_ms},
        )

        return response
