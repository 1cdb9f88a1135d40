"""Request logging middleware.

Assigns every HTTP request an id, binds it into the structlog context for
the duration of the request, and echoes it back in ``x-request-id``.
"""

import time
from typing import Callable

import structlog
from fastapi import Request

from ..utils.id_generator import generate_request_id

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "x-request-id"


class RequestLoggingMiddleware:
    """Logs method, path, status and duration of every HTTP request."""

    def __init__(self, app: Callable):
        self.app = app
        self.health_logged = False

    async def __call__(self, scope: dict, receive: Callable, send: Callable):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        request_id = generate_request_id()[:8]
        scope.setdefault("state", {})["request_id"] = request_id
        start_time = time.time()

        # Skip repeated health check logging
        skip_logging = request.url.path == "/health" and self.health_logged
        if request.url.path == "/health" and not self.health_logged:
            self.health_logged = True

        response_status = None

        async def send_wrapper(message):
            nonlocal response_status
            if message["type"] == "http.response.start":
                response_status = message["status"]
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER.encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            if not skip_logging:
                logger.error(
                    "Request failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e),
                )
            raise
        finally:
            if not skip_logging:
                logger.info(
                    "Request processed",
                    method=request.method,
                    path=request.url.path,
                    status=response_status,
                    duration_ms=round((time.time() - start_time) * 1000, 2),
                )
            structlog.contextvars.unbind_contextvars("request_id")
