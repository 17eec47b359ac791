"""Database connectivity helpers, schemas and repositories."""

from inventory_backend.database.base import BaseSchema
from inventory_backend.database.repositories import (
    ProductRepository,
    RecordNotFoundError,
    RecordRepository,
    UserRepository,
)
from inventory_backend.database.schemas import ProductSchema, UserSchema
from inventory_backend.database.service import DatabaseService
from inventory_backend.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "DatabaseService",
    "ProductRepository",
    "ProductSchema",
    "RecordNotFoundError",
    "RecordRepository",
    "UserRepository",
    "UserSchema",
    "get_settings",
]
