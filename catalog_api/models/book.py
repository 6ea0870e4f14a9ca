"""
Book Model

The central model of the Catalog API.

This file also contains the association table for the many-to-many
relationship between books and authors (book_authors).

WHY an Association Table?
=========================
In relational databases, many-to-many relationships require a "junction"
table holding a foreign key to each side. The composite primary key
(book_id, author_id) makes every pair unique, so the same author can never
be linked to the same book twice.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.database import Base

if TYPE_CHECKING:
    from catalog_api.models.author import Author
    from catalog_api.models.publisher import Publisher


# =============================================================================
# Association Table
# =============================================================================
# Rows are only created and removed through the relationship services
# (link/unlink, book creation) and by the explicit deletes in the catalog
# services. ondelete="CASCADE" backs that up at the database level.

book_authors = Table(
    "book_authors",
    Base.metadata,
    Column(
        "book_id",
        Integer,
        ForeignKey("books.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "author_id",
        Integer,
        ForeignKey("authors.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Association table linking books to their authors",
)


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - year: Publication year (required)
    - synopsis: Short summary (optional)
    - publisher_id: Owning publisher (required)

    Relationships:
    - publisher: Many-to-One (every book has exactly one publisher)
    - authors: Many-to-Many through book_authors

    Example:
        book = Book(
            title="1984",
            year=1949,
            synopsis="A dystopian novel...",
            publisher_id=publisher.id,
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        index=True,
        nullable=False,
        comment="Year of publication"
    )

    synopsis: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Book synopsis"
    )

    # -------------------------------------------------------------------------
    # Foreign Keys
    # -------------------------------------------------------------------------
    publisher_id: Mapped[int] = mapped_column(
        ForeignKey("publishers.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
        comment="Publisher that owns this book"
    )

    version_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=1,
        comment="Row version used for optimistic concurrency checks"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    publisher: Mapped["Publisher"] = relationship(
        "Publisher",
        back_populates="books",
    )

    # back_populates creates a bidirectional relationship:
    #   book.authors  -> list of authors
    #   author.books  -> list of books
    authors: Mapped[list["Author"]] = relationship(
        "Author",
        secondary=book_authors,
        back_populates="books",
        order_by="Author.id",
    )

    __mapper_args__ = {"version_id_col": version_id}

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', year={self.year})"
