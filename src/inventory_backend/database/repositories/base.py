"""Generic persistence operations shared by the resource repositories."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import ColumnElement, Row, delete, func, select, update
from sqlalchemy.orm import InstrumentedAttribute, Session

from inventory_backend.database.base import BaseSchema

SchemaT = TypeVar("SchemaT", bound=BaseSchema)


class RecordNotFoundError(Exception):
    """Raised when no row matches the requested identifier."""

    def __init__(self, table: str, record_id: int) -> None:
        super().__init__(f"{table} record {record_id} does not exist")
        self.table = table
        self.record_id = record_id


class RecordRepository(Generic[SchemaT]):
    """Encapsulates single-table persistence for one schema type.

    Subclasses only bind :attr:`schema`. Every write flushes immediately so
    constraint violations surface inside the caller's error handling rather
    than at commit time.
    """

    schema: ClassVar[type[BaseSchema]]

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(
        self, order_by: InstrumentedAttribute[Any] | None = None
    ) -> list[SchemaT]:
        """Return every row, newest first on ``order_by`` when given."""
        stmt = select(self.schema)
        if order_by is not None:
            stmt = stmt.order_by(order_by.desc(), self.schema.id.desc())
        else:
            stmt = stmt.order_by(self.schema.id)
        return list(self._session.scalars(stmt))

    def get_by_id(self, record_id: int) -> SchemaT | None:
        return self._session.get(self.schema, record_id)

    def create(self, values: Mapping[str, Any]) -> SchemaT:
        """Insert a row and return it with store-assigned columns loaded."""
        record = self.schema(**values)
        self._session.add(record)
        self._session.flush()
        self._session.refresh(record)
        return record

    def update_by_id(self, record_id: int, values: Mapping[str, Any]) -> SchemaT:
        """Apply only the supplied columns to an existing row.

        The UPDATE statement itself decides whether the row exists, so a row
        removed by a concurrent request is reported as not found.
        """
        if not values:
            return self._require(record_id)
        stmt = (
            update(self.schema)
            .where(self.schema.id == record_id)
            .values(**values)
            .returning(self.schema)
            .execution_options(populate_existing=True)
        )
        record = self._session.scalars(stmt).one_or_none()
        if record is None:
            raise RecordNotFoundError(self.schema.__tablename__, record_id)
        return record

    def delete_by_id(self, record_id: int) -> None:
        stmt = delete(self.schema).where(self.schema.id == record_id)
        result = self._session.execute(stmt)
        if not result.rowcount:
            raise RecordNotFoundError(self.schema.__tablename__, record_id)

    def count(self, *criteria: ColumnElement[bool]) -> int:
        """Count rows matching all ``criteria``."""
        stmt = select(func.count()).select_from(self.schema)
        if criteria:
            stmt = stmt.where(*criteria)
        return self._session.scalar(stmt) or 0

    def aggregate(self, *columns: InstrumentedAttribute[Any]) -> Sequence[Row[Any]]:
        """Return a projection of ``columns`` for every row."""
        return self._session.execute(select(*columns)).all()

    def _require(self, record_id: int) -> SchemaT:
        stmt = (
            select(self.schema)
            .where(self.schema.id == record_id)
            .execution_options(populate_existing=True)
        )
        record = self._session.scalars(stmt).one_or_none()
        if record is None:
            raise RecordNotFoundError(self.schema.__tablename__, record_id)
        return record
