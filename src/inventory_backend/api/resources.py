"""Definitions of the resources exposed under ``/api``."""

from inventory_backend.api.models import (
    ProductCreateRequest,
    ProductResponse,
    ProductUpdateRequest,
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)
from inventory_backend.api.services import ResourceDefinition
from inventory_backend.database import ProductRepository, ProductSchema, UserRepository

USER_RESOURCE = ResourceDefinition(
    name="user",
    plural="users",
    repository=UserRepository,
    create_schema=UserCreateRequest,
    update_schema=UserUpdateRequest,
    response_schema=UserResponse,
)

PRODUCT_RESOURCE = ResourceDefinition(
    name="product",
    plural="products",
    repository=ProductRepository,
    create_schema=ProductCreateRequest,
    update_schema=ProductUpdateRequest,
    response_schema=ProductResponse,
    list_order=ProductSchema.created_at,
    delete_message="Product deleted successfully",
)

__all__ = ["PRODUCT_RESOURCE", "USER_RESOURCE"]
