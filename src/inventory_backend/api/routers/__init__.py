"""Route definitions for public HTTP endpoints."""

from inventory_backend.api.routers.resources import create_resource_router
from inventory_backend.api.routers.root import router as root_router
from inventory_backend.api.routers.stats import create_stats_router

__all__ = ["create_resource_router", "create_stats_router", "root_router"]
