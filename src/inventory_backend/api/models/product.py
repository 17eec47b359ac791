"""Pydantic models for the product resource."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100
CATEGORY_MIN_LENGTH = 2


class ProductResponse(BaseModel):
    """Public representation of a stored product."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    price: float
    stock: int
    description: str | None = None
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")


class ProductCreateRequest(BaseModel):
    """Payload for creating a new product."""

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    category: str = Field(min_length=CATEGORY_MIN_LENGTH)
    price: float = Field(gt=0, strict=True, allow_inf_nan=False)
    stock: int = Field(ge=0, strict=True)
    description: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        return value.strip()


class ProductUpdateRequest(BaseModel):
    """Partial payload for ``PUT /api/products/{id}``.

    Every field is optional, but a supplied field must satisfy the same
    constraint as on creation. Only ``description`` may be cleared with null.
    """

    name: str | None = Field(
        default=None, min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH
    )
    category: str | None = Field(default=None, min_length=CATEGORY_MIN_LENGTH)
    price: float | None = Field(
        default=None, gt=0, strict=True, allow_inf_nan=False
    )
    stock: int | None = Field(default=None, ge=0, strict=True)
    description: str | None = None

    @field_validator("name", "category", "price", "stock", mode="before")
    @classmethod
    def reject_null(cls, value: object) -> object:
        if value is None:
            msg = "Value cannot be null"
            raise ValueError(msg)
        return value

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str | None) -> str | None:
        return value.strip() if value is not None else value
