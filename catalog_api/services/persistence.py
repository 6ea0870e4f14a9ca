"""
Persistence Helpers

Small helpers shared by the catalog services for the two things every
write has in common: checking the client's expected row version, and
committing the session while turning stale writes into conflicts.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from catalog_api.services.exceptions import ConcurrencyConflictError

logger = logging.getLogger(__name__)


def conflict_message(entity_name: str) -> str:
    return (
        f"The {entity_name} was updated by another user. "
        "Please refresh and try again."
    )


def check_version(entity, expected_version: int | None, entity_name: str) -> None:
    """
    Compare the version a client last read with the stored one.

    Args:
        entity: Loaded ORM instance with a version_id column
        expected_version: Version sent by the client, or None to skip
        entity_name: Label used in the error message ("book", "author", ...)

    Raises:
        ConcurrencyConflictError: If the versions differ
    """
    if expected_version is None or expected_version == entity.version_id:
        return

    logger.warning(
        f"Version mismatch on {entity_name} {entity.id}: "
        f"expected {expected_version}, stored {entity.version_id}"
    )
    raise ConcurrencyConflictError(conflict_message(entity_name))


def commit(db: Session, entity_name: str) -> None:
    """
    Commit the session as one unit of work.

    The ORM's version_id_col adds the loaded version to the WHERE clause of
    every UPDATE and DELETE; when another writer got there first no row
    matches and SQLAlchemy raises StaleDataError.

    Raises:
        ConcurrencyConflictError: On a stale UPDATE/DELETE
        SQLAlchemyError: Any other storage failure, after rolling back
    """
    try:
        db.commit()
    except StaleDataError as exc:
        db.rollback()
        logger.warning(f"Stale write on {entity_name}: {exc}")
        raise ConcurrencyConflictError(conflict_message(entity_name)) from exc
    except SQLAlchemyError:
        db.rollback()
        raise
