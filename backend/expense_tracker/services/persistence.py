"""
Mapping of storage failures onto PersistenceError.
"""

import logging
from contextlib import contextmanager
from decimal import InvalidOperation
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from expense_tracker.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

# LookupError: unknown enum value in a stored row.
# InvalidOperation: stored amount is not a decimal.
STORAGE_ERRORS = (SQLAlchemyError, LookupError, InvalidOperation)


@contextmanager
def storage_errors(db: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise any storage failure inside the block as PersistenceError."""
    try:
        yield
    except STORAGE_ERRORS as e:
        db.rollback()
        logger.error(f"Database error while trying to {action}: {e}")
        raise PersistenceError(
            f"Database error while trying to {action}",
            details={"error_type": type(e).__name__},
        ) from e
