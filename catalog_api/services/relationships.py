"""
Relationships Service

Maintains the many-to-many association between books and authors, plus
read access to the publisher -> books relation.

Rules:
- Linking requires both the book and the author to exist (NotFoundError).
- A (book, author) pair can be linked only once (AlreadyLinkedError).
- Unlinking requires an existing link (NotLinkedError).
- Listing related records requires the anchor record to exist
  (NotFoundError). An anchor with no related records yields an empty list.

Guard-not-apply semantics: repeating a successful link or unlink fails
instead of silently succeeding, so callers can tell whether their call
changed anything.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog_api.models import Author, Book, Publisher
from catalog_api.schemas import AuthorSummary, BookSummary
from catalog_api.services.authors import get_author_or_raise, to_author_summary
from catalog_api.services.books import get_book_or_raise, to_book_summary
from catalog_api.services.exceptions import (
    AlreadyLinkedError,
    NotFoundError,
    NotLinkedError,
)
from catalog_api.services.persistence import commit

logger = logging.getLogger(__name__)


def is_linked(book: Book, author_id: int) -> bool:
    return any(author.id == author_id for author in book.authors)


def link_author(db: Session, book_id: int, author_id: int) -> None:
    """
    Link an author to a book.

    Args:
        db: Database session
        book_id: Book to link to
        author_id: Author to link

    Raises:
        NotFoundError: If the book or the author does not exist
        AlreadyLinkedError: If the pair is already linked
    """
    book = get_book_or_raise(db, book_id)
    author = get_author_or_raise(db, author_id)

    if is_linked(book, author_id):
        raise AlreadyLinkedError("Author is already linked to this book.")

    book.authors.append(author)
    try:
        commit(db, "book")
    except IntegrityError as exc:
        # Another request inserted the same pair after our check
        raise AlreadyLinkedError("Author is already linked to this book.") from exc

    logger.info(f"Linked author {author_id} to book {book_id}")


def unlink_author(db: Session, book_id: int, author_id: int) -> None:
    """
    Remove the link between an author and a book.

    Raises:
        NotFoundError: If the book or the author does not exist
        NotLinkedError: If the pair is not linked
    """
    book = get_book_or_raise(db, book_id)
    author = get_author_or_raise(db, author_id)

    if not is_linked(book, author_id):
        raise NotLinkedError("Author is not linked to this book.")

    book.authors.remove(author)
    commit(db, "book")

    logger.info(f"Unlinked author {author_id} from book {book_id}")


def list_authors_of_book(db: Session, book_id: int) -> list[AuthorSummary]:
    """
    List the authors linked to a book, ordered by author ID.

    Raises:
        NotFoundError: If the book does not exist
    """
    get_book_or_raise(db, book_id)

    stmt = (
        select(Author)
        .join(Author.books)
        .where(Book.id == book_id)
        .order_by(Author.id)
    )
    authors = db.execute(stmt).scalars().all()
    return [to_author_summary(a) for a in authors]


def list_books_of_author(db: Session, author_id: int) -> list[BookSummary]:
    """
    List the books linked to an author, ordered by book ID.

    Raises:
        NotFoundError: If the author does not exist
    """
    get_author_or_raise(db, author_id)

    stmt = (
        select(Book)
        .join(Book.authors)
        .where(Author.id == author_id)
        .order_by(Book.id)
    )
    books = db.execute(stmt).scalars().all()
    return [to_book_summary(b) for b in books]


def list_books_of_publisher(db: Session, publisher_id: int) -> list[BookSummary]:
    """
    List the books owned by a publisher, ordered by book ID.

    Raises:
        NotFoundError: If the publisher does not exist
    """
    if db.get(Publisher, publisher_id) is None:
        raise NotFoundError(f"Publisher with ID {publisher_id} not found.")

    stmt = select(Book).where(Book.publisher_id == publisher_id).order_by(Book.id)
    books = db.execute(stmt).scalars().all()
    return [to_book_summary(b) for b in books]
