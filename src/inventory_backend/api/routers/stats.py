"""Dashboard statistics endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Response

from inventory_backend.api.services import StatsHandler


def create_stats_router(handler: StatsHandler) -> APIRouter:
    router = APIRouter(tags=["stats"])

    @router.get("/stats", summary="Product inventory statistics")
    def product_stats() -> Response:
        return handler.summary()

    return router


__all__ = ["create_stats_router"]
