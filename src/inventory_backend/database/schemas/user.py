"""User database schema."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from inventory_backend.database.base import BaseSchema


class UserSchema(BaseSchema):
    """SQLAlchemy model for API users."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
