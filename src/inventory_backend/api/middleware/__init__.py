"""HTTP middleware for cross-cutting concerns."""

from inventory_backend.api.middleware.rate_limit import RateLimitMiddleware
from inventory_backend.api.middleware.request_logging import RequestLoggingMiddleware
from inventory_backend.api.middleware.security_headers import (
    DEFAULT_SECURITY_HEADERS,
    SecurityHeadersMiddleware,
)

__all__ = [
    "DEFAULT_SECURITY_HEADERS",
    "RateLimitMiddleware",
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
]
