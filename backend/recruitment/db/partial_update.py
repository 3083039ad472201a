"""
Partial-update (PATCH) statement builder shared by every model.

Given a model, a row id and a mapping of attribute name to new value, builds a
single parameterized ``UPDATE <table> SET ... WHERE id = :id`` touching exactly
the supplied columns. Only non-primary-key columns of the model's table may be
named. The SET clause follows the table's column order, so two calls with the
same fields always produce the same SQL regardless of how the mapping was
built.
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Update, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recruitment.core.errors import InvalidRequestError, StoreError
from recruitment.core.logging import get_logger

logger = get_logger("recruitment.partial_update")


def updatable_columns(model) -> list[str]:
    """Names of the columns a partial update may touch, in table order."""
    return [column.name for column in model.__table__.columns if not column.primary_key]


def build_partial_update(model, row_id: int, fields: Mapping[str, Any]) -> Update:
    """
    Build the UPDATE statement for a subset of a row's columns.

    Args:
        model: Declarative model class owning the target table
        row_id: Primary key of the row to update
        fields: Attribute name -> new value, non-empty

    Returns:
        A Core ``Update`` with one bound parameter per field plus the id

    Raises:
        InvalidRequestError: empty mapping, unknown/primary-key column,
            or None for a non-nullable column
    """
    if not fields:
        raise InvalidRequestError("No data provided to update")

    table = model.__table__
    allowed = updatable_columns(model)

    unknown = sorted(name for name in fields if name not in allowed)
    if unknown:
        raise InvalidRequestError(f"Fields cannot be updated: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for name in allowed:
        if name not in fields:
            continue
        value = fields[name]
        if value is None and not table.c[name].nullable:
            raise InvalidRequestError(f"Field '{name}' cannot be null")
        values[name] = value

    return update(table).where(table.c.id == row_id).values(values)


def apply_partial_update(
    db: Session, model, row_id: int, fields: Mapping[str, Any]
) -> int:
    """
    Execute a partial update and commit it.

    Returns:
        Number of rows the statement matched (0 when the id has no row)

    Raises:
        InvalidRequestError: see ``build_partial_update``; nothing is executed
        StoreError: the database rejected the statement
    """
    statement = build_partial_update(model, row_id, fields)

    try:
        result = db.execute(statement)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        message = str(getattr(e, "orig", None) or e)
        logger.error(f"Partial update of {model.__tablename__}#{row_id} failed: {message}")
        raise StoreError(message) from e

    logger.info(
        f"Updated {model.__tablename__}#{row_id} fields={list(fields)} rows={result.rowcount}"
    )
    return result.rowcount
