"""Turn database failures into persistence errors."""

from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from sms.app.core.errors import PersistenceError


@contextmanager
def storage_errors(db: Session, action: str):
    """Roll back and re-raise any SQLAlchemy error as ``PersistenceError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        raise PersistenceError(f"Failed to {action}") from exc
