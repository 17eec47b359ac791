"""Models used for API request and response payloads."""

from inventory_backend.api.models.envelope import (
    Envelope,
    EnvelopeStatus,
    FieldError,
    error,
    fail,
    success,
)
from inventory_backend.api.models.product import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
)
from inventory_backend.api.models.stats import ProductStatsResponse
from inventory_backend.api.models.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "Envelope",
    "EnvelopeStatus",
    "FieldError",
    "ProductCreateRequest",
    "ProductResponse",
    "ProductStatsResponse",
    "ProductUpdateRequest",
    "UserCreateRequest",
    "UserResponse",
    "UserUpdateRequest",
    "error",
    "fail",
    "success",
]
