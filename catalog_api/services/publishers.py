"""
Publishers Service

CRUD operations for publishers.

A publisher may exist without books. Because every book needs a
publisher, deleting a publisher also deletes the books it owns (and their
author links) in the same commit.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from catalog_api.models import Book, Publisher
from catalog_api.schemas import (
    PublisherCreate,
    PublisherDetail,
    PublisherSummary,
    PublisherUpdate,
)
from catalog_api.services.exceptions import InvalidRequestError, NotFoundError
from catalog_api.services.persistence import check_version, commit

logger = logging.getLogger(__name__)


def get_publisher_with_books(db: Session, publisher_id: int) -> Publisher:
    """Load a publisher with its books, or raise NotFoundError."""
    stmt = (
        select(Publisher)
        .options(selectinload(Publisher.books).selectinload(Book.authors))
        .where(Publisher.id == publisher_id)
    )
    publisher = db.execute(stmt).scalar_one_or_none()

    if publisher is None:
        raise NotFoundError(f"Publisher with ID {publisher_id} not found.")
    return publisher


def to_publisher_summary(publisher: Publisher) -> PublisherSummary:
    return PublisherSummary(
        publisher_id=publisher.id,
        name=publisher.name,
        books=[book.title for book in publisher.books],
    )


def to_publisher_detail(publisher: Publisher) -> PublisherDetail:
    return PublisherDetail(
        publisher_id=publisher.id,
        name=publisher.name,
        books=[book.title for book in publisher.books],
        version_id=publisher.version_id,
    )


def list_publishers(db: Session) -> list[PublisherSummary]:
    """List all publishers with the titles they publish."""
    stmt = (
        select(Publisher)
        .options(selectinload(Publisher.books))
        .order_by(Publisher.id)
    )
    publishers = db.execute(stmt).scalars().all()
    return [to_publisher_summary(p) for p in publishers]


def get_publisher(db: Session, publisher_id: int) -> PublisherDetail:
    return to_publisher_detail(get_publisher_with_books(db, publisher_id))


def create_publisher(db: Session, data: PublisherCreate) -> PublisherDetail:
    """Create a new publisher with no books."""
    publisher = Publisher(name=data.name)

    db.add(publisher)
    commit(db, "publisher")
    db.refresh(publisher)

    logger.info(f"Created publisher {publisher.id} '{publisher.name}'")
    return to_publisher_detail(publisher)


def update_publisher(
    db: Session,
    publisher_id: int,
    data: PublisherUpdate,
) -> PublisherDetail:
    """
    Replace a publisher's name.

    Raises:
        InvalidRequestError: If the path ID and payload ID differ
        NotFoundError: If the publisher does not exist
        ConcurrencyConflictError: If the publisher changed since it was read
    """
    if publisher_id != data.publisher_id:
        raise InvalidRequestError("Publisher ID mismatch.")

    publisher = get_publisher_with_books(db, publisher_id)
    check_version(publisher, data.version_id, "publisher")

    publisher.name = data.name

    commit(db, "publisher")
    logger.info(f"Updated publisher {publisher_id}")
    return to_publisher_detail(get_publisher_with_books(db, publisher_id))


def delete_publisher(db: Session, publisher_id: int) -> None:
    """
    Delete a publisher, its books, and those books' author links.

    Everything is removed explicitly and committed as one unit.
    """
    publisher = get_publisher_with_books(db, publisher_id)
    books = list(publisher.books)

    for book in books:
        book.authors.clear()
        db.delete(book)
    db.delete(publisher)
    commit(db, "publisher")

    logger.info(f"Deleted publisher {publisher_id} and {len(books)} book(s)")
