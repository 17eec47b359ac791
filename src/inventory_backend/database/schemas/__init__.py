"""SQLAlchemy table definitions."""

from inventory_backend.database.schemas.product import ProductSchema
from inventory_backend.database.schemas.user import UserSchema

__all__ = ["ProductSchema", "UserSchema"]
