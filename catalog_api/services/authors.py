"""
Authors Service

CRUD operations for authors.
Follows the same patterns as the books service.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from catalog_api.models import Author
from catalog_api.schemas import AuthorCreate, AuthorDetail, AuthorSummary, AuthorUpdate
from catalog_api.services.exceptions import InvalidRequestError, NotFoundError
from catalog_api.services.persistence import check_version, commit

logger = logging.getLogger(__name__)


def get_author_or_raise(db: Session, author_id: int) -> Author:
    """Load an author with their books, or raise NotFoundError."""
    stmt = (
        select(Author)
        .options(selectinload(Author.books))
        .where(Author.id == author_id)
    )
    author = db.execute(stmt).scalar_one_or_none()

    if author is None:
        raise NotFoundError(f"Author with ID {author_id} not found.")
    return author


def to_author_summary(author: Author) -> AuthorSummary:
    return AuthorSummary(author_id=author.id, name=author.name)


def to_author_detail(author: Author) -> AuthorDetail:
    return AuthorDetail(
        author_id=author.id,
        name=author.name,
        bio=author.bio,
        titles=[book.title for book in author.books],
        version_id=author.version_id,
    )


def list_authors(db: Session) -> list[AuthorSummary]:
    """List all authors, ordered by ID."""
    authors = db.execute(select(Author).order_by(Author.id)).scalars().all()
    return [to_author_summary(a) for a in authors]


def get_author(db: Session, author_id: int) -> AuthorDetail:
    """Get a single author with the titles of their books."""
    return to_author_detail(get_author_or_raise(db, author_id))


def create_author(db: Session, data: AuthorCreate) -> AuthorDetail:
    """Create a new author."""
    author = Author(
        name=data.name,
        bio=data.bio,
    )

    db.add(author)
    commit(db, "author")
    db.refresh(author)

    logger.info(f"Created author {author.id} '{author.name}'")
    return to_author_detail(author)


def update_author(db: Session, author_id: int, data: AuthorUpdate) -> AuthorDetail:
    """
    Replace an author's name and bio.

    Raises:
        InvalidRequestError: If the path ID and payload ID differ
        NotFoundError: If the author does not exist
        ConcurrencyConflictError: If the author changed since it was read
    """
    if author_id != data.author_id:
        raise InvalidRequestError("Author ID mismatch.")

    author = get_author_or_raise(db, author_id)
    check_version(author, data.version_id, "author")

    author.name = data.name
    author.bio = data.bio

    commit(db, "author")
    logger.info(f"Updated author {author_id}")
    return to_author_detail(get_author_or_raise(db, author_id))


def delete_author(db: Session, author_id: int) -> None:
    """Delete an author and every book link that references them."""
    author = get_author_or_raise(db, author_id)
    unlinked = len(author.books)

    author.books.clear()
    db.delete(author)
    commit(db, "author")

    logger.info(f"Deleted author {author_id} and {unlinked} book link(s)")
