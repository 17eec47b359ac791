"""Generic CRUD handler shared by every exposed resource."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from fastapi import Response, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import InstrumentedAttribute

from inventory_backend.api.models import error, fail, success
from inventory_backend.api.validation import parse_identifier, validate
from inventory_backend.database import (
    DatabaseService,
    RecordNotFoundError,
    RecordRepository,
)


@dataclass(frozen=True, slots=True)
class ResourceDefinition:
    """Everything that distinguishes one resource from another.

    ``delete_message`` selects the delete convention: ``None`` answers a
    successful delete with ``204 No Content``, otherwise with ``200`` and the
    message in the envelope.
    """

    name: str
    plural: str
    repository: type[RecordRepository[Any]]
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    list_order: InstrumentedAttribute[Any] | None = None
    delete_message: str | None = None

    @property
    def path(self) -> str:
        return f"/{self.plural}"

    @property
    def not_found_message(self) -> str:
        return f"{self.name.capitalize()} not found"


class ResourceHandler:
    """Runs validate -> persist -> respond for one resource."""

    def __init__(
        self,
        resource: ResourceDefinition,
        *,
        database: DatabaseService,
        logger: logging.Logger,
    ) -> None:
        self._resource = resource
        self._database = database
        self._logger = logger

    @property
    def resource(self) -> ResourceDefinition:
        return self._resource

    def list(self) -> Response:
        try:
            with self._database.session() as session:
                records = self._resource.repository(session).list_all(
                    order_by=self._resource.list_order
                )
                data = [self._serialize(record) for record in records]
        except SQLAlchemyError:
            return self._store_failure(f"Failed to load {self._resource.plural}")
        return success(data).to_response(status.HTTP_200_OK)

    def create(self, payload: Any) -> Response:
        result = validate(self._resource.create_schema, payload)
        if not result.ok:
            return fail(errors=result.errors).to_response(status.HTTP_400_BAD_REQUEST)

        try:
            with self._database.session() as session:
                record = self._resource.repository(session).create(result.value)
                data = self._serialize(record)
        except SQLAlchemyError:
            return self._store_failure(f"Failed to create {self._resource.name}")

        self._logger.info("%s created: id=%s", self._resource.name.capitalize(), data["id"])
        return success(data).to_response(status.HTTP_201_CREATED)

    def update(self, raw_id: str, payload: Any) -> Response:
        identifier = parse_identifier(raw_id)
        if not identifier.ok:
            return fail(errors=identifier.errors).to_response(
                status.HTTP_400_BAD_REQUEST
            )
        result = validate(self._resource.update_schema, payload)
        if not result.ok:
            return fail(errors=result.errors).to_response(status.HTTP_400_BAD_REQUEST)

        try:
            with self._database.session() as session:
                record = self._resource.repository(session).update_by_id(
                    identifier.value, result.value
                )
                data = self._serialize(record)
        except RecordNotFoundError:
            return self._not_found()
        except SQLAlchemyError:
            return self._store_failure(f"Failed to update {self._resource.name}")
        return success(data).to_response(status.HTTP_200_OK)

    def delete(self, raw_id: str) -> Response:
        identifier = parse_identifier(raw_id)
        if not identifier.ok:
            return fail(errors=identifier.errors).to_response(
                status.HTTP_400_BAD_REQUEST
            )

        try:
            with self._database.session() as session:
                self._resource.repository(session).delete_by_id(identifier.value)
        except RecordNotFoundError:
            return self._not_found()
        except SQLAlchemyError:
            return self._store_failure(f"Failed to delete {self._resource.name}")

        self._logger.info(
            "%s deleted: id=%s", self._resource.name.capitalize(), identifier.value
        )
        if self._resource.delete_message is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return success(message=self._resource.delete_message).to_response(
            status.HTTP_200_OK
        )

    def _serialize(self, record: Any) -> dict[str, Any]:
        model = self._resource.response_schema.model_validate(record)
        return model.model_dump(mode="json", by_alias=True)

    def _not_found(self) -> Response:
        return fail(message=self._resource.not_found_message).to_response(
            status.HTTP_404_NOT_FOUND
        )

    def _store_failure(self, message: str) -> Response:
        self._logger.exception(message)
        return error(message).to_response(status.HTTP_500_INTERNAL_SERVER_ERROR)
