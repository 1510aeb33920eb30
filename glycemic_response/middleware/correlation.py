"""Correlation ID middleware.

Tags every request with a correlation ID (taken from the incoming
X-Correlation-ID header or freshly generated), exposes it to the
logging formatters through ``correlation_id_ctx`` and echoes it on the
response. Written as plain ASGI so streaming responses and async
database sessions are untouched.
"""

import time
import uuid

from starlette.types import ASGIApp, Message, Receive, Scope, Send

from glycemic_response.logging_config import correlation_id_ctx, get_logger

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"
_HEADER_KEY = CORRELATION_ID_HEADER.lower().encode()


class CorrelationIdMiddleware:
    """Attach a correlation ID and log start/end of each HTTP request."""

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        incoming = dict(scope.get("headers", [])).get(_HEADER_KEY, b"").decode()
        correlation_id = incoming or str(uuid.uuid4())
        token = correlation_id_ctx.set(correlation_id)

        method = scope.get("method", "")
        path = scope.get("path", "")
        started = time.perf_counter()
        status_code: int | None = None

        async def send_with_header(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message.get("status")
                headers = [*message.get("headers", []), (_HEADER_KEY, correlation_id.encode())]
                message = {**message, "headers": headers}
            await send(message)

        logger.info("Request started", method=method, path=path)
        try:
            await self.app(scope, receive, send_with_header)
        except Exception:
            logger.exception(
                "Request failed",
                method=method,
                path=path,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        else:
            logger.info(
                "Request completed",
                method=method,
                path=path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
        finally:
            correlation_id_ctx.reset(token)
