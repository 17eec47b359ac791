"""Fixed-window request limiting per client address."""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from inventory_backend.api.models import error

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 100
DEFAULT_WINDOW_SECONDS = 15 * 60
RATE_LIMITED_MESSAGE = "Too many requests, please try again later."

# Expired windows are pruned once the table grows past this many clients.
_PRUNE_THRESHOLD = 10_000


@dataclass(slots=True)
class _Window:
    started_at: float
    hits: int = 0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Limits each client to ``limit`` requests per window on ``path_prefix``.

    Counters live in process memory and run on the event loop, so each worker
    process enforces its own budget.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        limit: int = DEFAULT_LIMIT,
        window_seconds: int = DEFAULT_WINDOW_SECONDS,
        path_prefix: str = "/api",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(app)
        self._limit = limit
        self._window_seconds = window_seconds
        self._path_prefix = path_prefix
        self._clock = clock
        self._windows: dict[str, _Window] = {}

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not request.url.path.startswith(self._path_prefix):
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        now = self._clock()
        window = self._current_window(client, now)
        window.hits += 1

        reset_in = max(math.ceil(window.started_at + self._window_seconds - now), 0)
        headers = {
            "RateLimit-Limit": str(self._limit),
            "RateLimit-Remaining": str(max(self._limit - window.hits, 0)),
            "RateLimit-Reset": str(reset_in),
        }

        if window.hits > self._limit:
            logger.warning("Rate limit exceeded for %s on %s", client, request.url.path)
            headers["Retry-After"] = str(reset_in)
            return error(RATE_LIMITED_MESSAGE).to_response(
                status.HTTP_429_TOO_MANY_REQUESTS, headers=headers
            )

        response = await call_next(request)
        response.headers.update(headers)
        return response

    def _current_window(self, client: str, now: float) -> _Window:
        window = self._windows.get(client)
        if window is not None and now - window.started_at < self._window_seconds:
            return window
        if len(self._windows) >= _PRUNE_THRESHOLD:
            self._prune(now)
        window = _Window(started_at=now)
        self._windows[client] = window
        return window

    def _prune(self, now: float) -> None:
        expired = [
            client
            for client, window in self._windows.items()
            if now - window.started_at >= self._window_seconds
        ]
        for client in expired:
            del self._windows[client]
