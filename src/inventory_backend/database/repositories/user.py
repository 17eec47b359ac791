"""Repository helpers for working with users."""

from inventory_backend.database.repositories.base import RecordRepository
from inventory_backend.database.schemas import UserSchema


class UserRepository(RecordRepository[UserSchema]):
    """Encapsulates persistence operations for :class:`UserSchema`."""

    schema = UserSchema
