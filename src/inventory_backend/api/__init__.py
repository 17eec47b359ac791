"""API layer: application factory, routers, handlers and payload models."""

from inventory_backend.api.app import create_api

__all__ = ["create_api"]
