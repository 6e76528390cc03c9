"""Request logging middleware."""
import time
from typing import Callable
from uuid import uuid4

from fastapi import Request

from football_api.app_logging import get_logger

REQUEST_ID_HEADER = "x-request-id"


class RequestLoggingMiddleware:
    """Log one access record per response and echo the request id back.

    The id comes from the ``X-Request-ID`` header when the client sends one and
    is generated otherwise; handlers read it from ``request.state.request_id``.
    """

    def __init__(self, app: Callable) -> None:
        self.app = app
        self.logger = get_logger("football_api.access")

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        request = Request(scope, receive=receive)
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                headers.append((REQUEST_ID_HEADER.encode("latin-1"), request_id.encode("latin-1")))
                message["headers"] = headers

                elapsed_ms = (time.perf_counter() - start) * 1000
                self.logger.info(
                    f"{request.method} {request.url.path} {message['status']}",
                    extra={
                        "request_id": request_id,
                        "method": request.method,
                        "path": request.url.path,
                        "query": request.url.query,
                        "status_code": message["status"],
                        "duration_ms": round(elapsed_ms, 2),
                        "client_ip": request.client.host if request.client else None,
                    },
                )
            await send(message)

        await self.app(scope, receive, send_wrapper)
