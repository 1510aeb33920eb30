"""ASGI middleware for the glycemic response API."""

from glycemic_response.middleware.correlation import (
    CORRELATION_ID_HEADER,
    CorrelationIdMiddleware,
)

__all__ = ["CORRELATION_ID_HEADER", "CorrelationIdMiddleware"]
