"""
Commit helper shared by the service layer.

A failed write rolls the session back, so nothing is left half-written, and
surfaces as OperationFailedError chained to the database error.
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import OperationFailedError

logger = logging.getLogger(__name__)


def commit_or_fail(db: Session, action: str) -> None:
    """
    Commit the current unit of work.

    Args:
        db: Database session
        action: Short description used in the log line and error, e.g. "create test"

    Raises:
        OperationFailedError: If the commit fails
    """
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Failed to {action}: {e}", exc_info=True)
        raise OperationFailedError(f"Failed to {action}") from e
