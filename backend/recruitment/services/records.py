"""
Record operations shared by every resource.

Each entity exposes the same six operations: insert, get, get-all, replace
(full update), partial update and delete. Every write commits on its own;
a failing statement is rolled back and surfaced as ``StoreError``.
"""

from collections.abc import Mapping
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recruitment.core.errors import NotFoundError, StoreError
from recruitment.core.logging import get_logger
from recruitment.db.partial_update import apply_partial_update

logger = get_logger("recruitment.records")


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        message = str(getattr(e, "orig", None) or e)
        logger.error(f"{action} failed: {message}")
        raise StoreError(message) from e


def insert(db: Session, record):
    """Persist a new row and return it with its generated id."""
    db.add(record)
    _commit(db, f"Insert into {record.__tablename__}")
    db.refresh(record)
    logger.info(f"Inserted {record.__tablename__}#{record.id}")
    return record


def get(db: Session, model, row_id: int) -> Optional[Any]:
    return db.get(model, row_id)


def get_or_404(db: Session, model, row_id: int, label: str):
    """Fetch a row by id or raise ``NotFoundError`` naming the resource."""
    record = db.get(model, row_id)
    if record is None:
        raise NotFoundError(f"{label} {row_id} does not exist")
    return record


def get_all(db: Session, model, *criteria) -> list:
    """All rows of a model, optionally filtered, ordered by id."""
    statement = select(model)
    if criteria:
        statement = statement.where(*criteria)
    return list(db.scalars(statement.order_by(model.id)).all())


def replace(db: Session, record, values: Mapping[str, Any]):
    """Overwrite the given attributes of an existing row (PUT)."""
    for field, value in values.items():
        setattr(record, field, value)
    _commit(db, f"Update of {record.__tablename__}#{record.id}")
    db.refresh(record)
    logger.info(f"Replaced {record.__tablename__}#{record.id}")
    return record


def partial_update(db: Session, model, row_id: int, fields: Mapping[str, Any]) -> int:
    """Update only the supplied columns (PATCH); returns affected rows."""
    return apply_partial_update(db, model, row_id, fields)


def delete(db: Session, record) -> None:
    table, row_id = record.__tablename__, record.id
    db.delete(record)
    _commit(db, f"Delete of {table}#{row_id}")
    logger.info(f"Deleted {table}#{row_id}")
