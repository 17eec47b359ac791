"""Table-level store adapters."""

from inventory_backend.database.repositories.base import (
    RecordNotFoundError,
    RecordRepository,
)
from inventory_backend.database.repositories.product import ProductRepository
from inventory_backend.database.repositories.user import UserRepository

__all__ = [
    "ProductRepository",
    "RecordNotFoundError",
    "RecordRepository",
    "UserRepository",
]
