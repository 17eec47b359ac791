"""Repository helpers for working with products."""

from inventory_backend.database.repositories.base import RecordRepository
from inventory_backend.database.schemas import ProductSchema


class ProductRepository(RecordRepository[ProductSchema]):
    """Encapsulates persistence operations for :class:`ProductSchema`."""

    schema = ProductSchema
