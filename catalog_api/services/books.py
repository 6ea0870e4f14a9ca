"""
Books Service

CRUD operations for books. Every function receives the request's database
session explicitly and returns Pydantic result schemas, never ORM objects.

Referential rules enforced here:
- A new book must reference an existing publisher and existing authors;
  nothing is inserted when any reference is missing.
- Deleting a book removes its book_authors rows in the same commit.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload, selectinload

from catalog_api.models import Author, Book, Publisher
from catalog_api.schemas import BookCreate, BookDetail, BookSummary, BookUpdate
from catalog_api.services.exceptions import InvalidRequestError, NotFoundError
from catalog_api.services.persistence import check_version, commit

logger = logging.getLogger(__name__)


# =============================================================================
# Lookups and Mapping
# =============================================================================
def get_book_or_raise(db: Session, book_id: int) -> Book:
    """
    Load a book with its publisher and authors, or raise NotFoundError.

    Uses eager loading so building a BookDetail does not trigger
    additional lazy loads per relation.
    """
    stmt = (
        select(Book)
        .options(selectinload(Book.authors), joinedload(Book.publisher))
        .where(Book.id == book_id)
    )
    book = db.execute(stmt).scalar_one_or_none()

    if book is None:
        raise NotFoundError(f"Book with ID {book_id} not found.")
    return book


def get_publisher_or_raise(db: Session, publisher_id: int) -> Publisher:
    """Resolve a publisher reference, raising NotFoundError if it is missing."""
    publisher = db.get(Publisher, publisher_id)
    if publisher is None:
        raise NotFoundError(f"Publisher with ID {publisher_id} not found.")
    return publisher


def resolve_authors(db: Session, author_ids: list[int]) -> list[Author]:
    """
    Resolve a list of author IDs to Author instances.

    Duplicate IDs are collapsed. The result is ordered by ID.

    Raises:
        NotFoundError: If one or more IDs do not exist
    """
    unique_ids = list(dict.fromkeys(author_ids))
    if not unique_ids:
        return []

    authors = db.execute(
        select(Author).where(Author.id.in_(unique_ids)).order_by(Author.id)
    ).scalars().all()

    if len(authors) != len(unique_ids):
        missing = sorted(set(unique_ids) - {a.id for a in authors})
        raise NotFoundError(f"One or more authors were not found: {missing}")
    return list(authors)


def to_book_summary(book: Book) -> BookSummary:
    return BookSummary(book_id=book.id, title=book.title, year=book.year)


def to_book_detail(book: Book) -> BookDetail:
    """Project a book and its resolved relations into a BookDetail."""
    return BookDetail(
        book_id=book.id,
        title=book.title,
        year=book.year,
        synopsis=book.synopsis,
        publisher_id=book.publisher_id,
        publisher_name=book.publisher.name,
        author_ids=[author.id for author in book.authors],
        author_names=[author.name for author in book.authors],
        version_id=book.version_id,
    )


# =============================================================================
# Operations
# =============================================================================
def list_books(db: Session) -> list[BookSummary]:
    """Return every book as a summary, ordered by ID."""
    books = db.execute(select(Book).order_by(Book.id)).scalars().all()
    return [to_book_summary(book) for book in books]


def get_book(db: Session, book_id: int) -> BookDetail:
    """Return a single book with author names and publisher name."""
    return to_book_detail(get_book_or_raise(db, book_id))


def create_book(db: Session, data: BookCreate) -> BookDetail:
    """
    Create a book and link it to its authors.

    The publisher and all authors are validated before anything is added
    to the session, so a failed validation leaves the database untouched.

    Args:
        db: Database session
        data: Validated book payload

    Returns:
        The created book with resolved publisher and author names

    Raises:
        NotFoundError: If the publisher or any author does not exist
    """
    publisher = get_publisher_or_raise(db, data.publisher_id)
    authors = resolve_authors(db, data.author_ids)

    book = Book(
        title=data.title,
        year=data.year,
        synopsis=data.synopsis,
        publisher=publisher,
        authors=authors,
    )

    db.add(book)
    commit(db, "book")
    db.refresh(book)

    logger.info(
        f"Created book {book.id} '{book.title}' "
        f"(publisher={publisher.id}, authors={[a.id for a in authors]})"
    )
    return to_book_detail(book)


def create_books(db: Session, items: list[BookCreate]) -> list[BookDetail]:
    """
    Create several books one after another.

    Each book is committed on its own. The first item that fails validation
    aborts the batch with its error; books created before it stay saved.
    """
    created = []
    for index, item in enumerate(items):
        try:
            created.append(create_book(db, item))
        except NotFoundError:
            logger.warning(
                f"Batch create aborted at item {index}; "
                f"{len(created)} book(s) already saved"
            )
            raise
    return created


def update_book(db: Session, book_id: int, data: BookUpdate) -> BookDetail:
    """
    Replace a book's mutable fields.

    Raises:
        InvalidRequestError: If the path ID and payload ID differ
        NotFoundError: If the book or the new publisher does not exist
        ConcurrencyConflictError: If the book changed since it was read
    """
    if book_id != data.book_id:
        raise InvalidRequestError("The provided ID does not match the book ID.")

    book = get_book_or_raise(db, book_id)
    check_version(book, data.version_id, "book")

    if data.publisher_id is not None and data.publisher_id != book.publisher_id:
        book.publisher = get_publisher_or_raise(db, data.publisher_id)

    book.title = data.title
    book.year = data.year
    book.synopsis = data.synopsis

    commit(db, "book")
    logger.info(f"Updated book {book_id}")
    return to_book_detail(get_book_or_raise(db, book_id))


def delete_book(db: Session, book_id: int) -> None:
    """
    Delete a book together with its author links.

    The links are cleared explicitly before the book row is deleted; both
    deletes go out in a single commit.
    """
    book = get_book_or_raise(db, book_id)
    unlinked = len(book.authors)

    book.authors.clear()
    db.delete(book)
    commit(db, "book")

    logger.info(f"Deleted book {book_id} and {unlinked} author link(s)")
