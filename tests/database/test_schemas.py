"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from sqlalchemy import Table

from inventory_backend.database.schemas import ProductSchema, UserSchema


def test_user_email_has_unique_index() -> None:
    table = cast("Table", UserSchema.__table__)
    indexes = {index.name: index for index in table.indexes}

    assert indexes["ix_users_email"].unique


def test_product_required_columns_are_not_nullable() -> None:
    table = cast("Table", ProductSchema.__table__)

    for column in ("name", "category", "price", "stock", "created_at"):
        assert not table.c[column].nullable
    assert table.c.description.nullable
    assert table.c.created_at.server_default is not None
