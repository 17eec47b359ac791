"""Read-only aggregates over the product table."""

from __future__ import annotations

import logging

from fastapi import Response, status
from sqlalchemy.exc import SQLAlchemyError

from inventory_backend.api.models import ProductStatsResponse, error, success
from inventory_backend.database import (
    DatabaseService,
    ProductRepository,
    ProductSchema,
)

LOW_STOCK_THRESHOLD = 10


class StatsHandler:
    """Computes dashboard figures fresh on every call."""

    def __init__(self, *, database: DatabaseService, logger: logging.Logger) -> None:
        self._database = database
        self._logger = logger

    def summary(self) -> Response:
        try:
            with self._database.session() as session:
                repository = ProductRepository(session)
                total_products = repository.count()
                low_stock = repository.count(ProductSchema.stock < LOW_STOCK_THRESHOLD)
                rows = repository.aggregate(ProductSchema.price, ProductSchema.stock)
        except SQLAlchemyError:
            message = "Failed to load statistics"
            self._logger.exception(message)
            return error(message).to_response(status.HTTP_500_INTERNAL_SERVER_ERROR)

        stats = ProductStatsResponse(
            total_products=total_products,
            low_stock=low_stock,
            total_value=sum((row.price * row.stock for row in rows), 0.0),
        )
        return success(stats.model_dump(mode="json", by_alias=True)).to_response(
            status.HTTP_200_OK
        )
