"""Pydantic models for the user resource."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

NAME_MIN_LENGTH = 2


class UserResponse(BaseModel):
    """Public representation of a stored user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str | None = None


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    email: EmailStr
    name: str | None = Field(default=None, min_length=NAME_MIN_LENGTH)


class UserUpdateRequest(BaseModel):
    """Partial payload for ``PUT /api/users/{id}``; omitted fields stay as stored."""

    email: EmailStr | None = None
    name: str | None = Field(default=None, min_length=NAME_MIN_LENGTH)

    @field_validator("email", mode="before")
    @classmethod
    def reject_null_email(cls, value: object) -> object:
        if value is None:
            msg = "email cannot be null"
            raise ValueError(msg)
        return value
