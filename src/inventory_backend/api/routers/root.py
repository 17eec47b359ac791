"""Service banner served at the site root."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from inventory_backend.api.models import success

router = APIRouter(tags=["status"])


@router.get("/", summary="Service banner")
def service_banner() -> Response:
    """Report that the API is up."""

    return success(message="Inventory API running").to_response(status.HTTP_200_OK)
