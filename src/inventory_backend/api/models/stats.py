"""Pydantic models for the product statistics endpoint."""

from pydantic import BaseModel, Field


class ProductStatsResponse(BaseModel):
    """Aggregate figures over the whole product table."""

    total_products: int = Field(serialization_alias="totalProducts")
    low_stock: int = Field(serialization_alias="lowStock")
    total_value: float = Field(serialization_alias="totalValue")
