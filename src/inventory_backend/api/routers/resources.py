"""CRUD endpoints generated for a resource handler."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Response

from inventory_backend.api.services import ResourceHandler


def create_resource_router(handler: ResourceHandler) -> APIRouter:
    """Expose list/create/update/delete for ``handler`` under its resource path.

    Bodies are accepted as raw JSON so the handler's own validator decides
    between ``400`` and success rather than FastAPI's ``422``.
    """

    resource = handler.resource
    router = APIRouter(prefix=resource.path, tags=[resource.plural])

    @router.get("", summary=f"List {resource.plural}")
    def list_records() -> Response:
        return handler.list()

    @router.post("", summary=f"Create a {resource.name}")
    def create_record(payload: Any = Body(default=None)) -> Response:  # noqa: B008
        return handler.create(payload)

    @router.put("/{record_id}", summary=f"Update a {resource.name}")
    def update_record(
        record_id: str,
        payload: Any = Body(default=None),  # noqa: B008
    ) -> Response:
        return handler.update(record_id, payload)

    @router.delete("/{record_id}", summary=f"Delete a {resource.name}")
    def delete_record(record_id: str) -> Response:
        return handler.delete(record_id)

    return router


__all__ = ["create_resource_router"]
