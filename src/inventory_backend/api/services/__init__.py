"""Service layer orchestrating validation, persistence and responses."""

from inventory_backend.api.services.resources import (
    ResourceDefinition,
    ResourceHandler,
)
from inventory_backend.api.services.stats import LOW_STOCK_THRESHOLD, StatsHandler

__all__ = [
    "LOW_STOCK_THRESHOLD",
    "ResourceDefinition",
    "ResourceHandler",
    "StatsHandler",
]
