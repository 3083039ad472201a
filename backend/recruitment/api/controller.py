"""
Base controller.

A controller owns one resource. ``dispatch`` maps the HTTP method to the
matching handler (``get``, ``post``, ``put``, ``patch``, ``delete``); every
handler receives the decoded JSON body and the optional row id and returns a
``JSONResponse``. Failures are raised as ``RecruitmentError`` subclasses and
rendered by the application's exception handler.
"""

from collections.abc import Mapping
from typing import Any, ClassVar, Optional, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator
from sqlalchemy.orm import Session

from recruitment.core.errors import (
    InvalidRequestError,
    MethodNotAllowedError,
    format_validation_error,
)
from recruitment.core.logging import get_logger

logger = get_logger("recruitment.controllers")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


# ============== Schema Bases ==============


class WireModel(BaseModel):
    """Schema using the Spanish wire names as aliases of English attributes."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        str_strip_whitespace=True,
    )


class PatchModel(WireModel):
    """
    Allow-list of updatable fields: unknown keys are rejected.

    Fields are optional only in the sense of "may be omitted"; an explicit
    null is rejected unless the attribute is listed in ``nullable_fields``.
    """

    model_config = ConfigDict(extra="forbid")

    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                alias = type(self).model_fields[name].alias or name
                raise ValueError(f"'{alias}' cannot be null")
        return self


# ============== Controller ==============


class ResourceController:
    """Dispatches one request on a resource to its handler."""

    label = "Resource"
    methods = ("GET", "POST", "PUT", "PATCH", "DELETE")

    def __init__(self, db: Session, query: Optional[Mapping[str, str]] = None):
        self.db = db
        self.query = query or {}

    def dispatch(
        self, method: str, payload: Optional[dict], row_id: Optional[int] = None
    ) -> JSONResponse:
        method = method.upper()
        handler = getattr(self, method.lower(), None) if method in self.methods else None
        if handler is None:
            raise MethodNotAllowedError("Method not supported")
        return handler(payload, row_id)

    # ============== Helpers ==============

    @staticmethod
    def parse(schema: type[SchemaT], payload: Optional[Mapping[str, Any]]) -> SchemaT:
        """Validate a request body against a schema; errors become 400."""
        if payload is None:
            raise InvalidRequestError("No data received in the request")
        try:
            return schema.model_validate(payload)
        except ValidationError as e:
            raise InvalidRequestError(format_validation_error(e)) from e

    def require_id(self, row_id: Optional[int]) -> int:
        if not row_id:
            raise InvalidRequestError(f"{self.label} ID is required")
        return row_id

    @staticmethod
    def serialize(schema: type[BaseModel], record) -> dict:
        return schema.model_validate(record).model_dump(mode="json", by_alias=True)

    @staticmethod
    def respond(content: Any, status_code: int = status.HTTP_200_OK) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=content)

    def created(self, record) -> JSONResponse:
        logger.info(f"{self.label} {record.id} created")
        return self.respond(
            {"message": f"{self.label} created", "id": record.id},
            status.HTTP_201_CREATED,
        )
