"""
Book Pydantic Schemas

The most involved schemas, handling:
- The publisher and author references accepted on creation
- Resolved relation names (publisherName, authorNames) in responses
- Whole-record replace on update
"""

from pydantic import Field, field_validator

from catalog_api.schemas.common import CatalogSchema


class BookBase(CatalogSchema):
    """
    Base schema with shared book fields.

    Contains validation for:
    - Title (not blank, stripped)
    - Year (a plausible calendar year)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    year: int = Field(
        ...,
        ge=0,
        le=9999,
        description="Year of publication",
        examples=[1949, 1813],
    )

    synopsis: str | None = Field(
        default=None,
        max_length=5000,
        description="Book synopsis",
        examples=["A dystopian novel set in a totalitarian society..."],
    )

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    The publisher must exist, and so must every author listed. Authors are
    linked to the book as part of the same insert.

    Example request body:
    {
        "title": "1984",
        "year": 1949,
        "publisherId": 1,
        "authorIds": [1, 2]
    }
    """

    publisher_id: int = Field(
        ...,
        description="ID of the publisher that owns the book",
        examples=[1],
    )

    author_ids: list[int] = Field(
        default_factory=list,
        description="IDs of the authors to link to this book",
        examples=[[1, 2]],
    )


class BookUpdate(BookBase):
    """
    Schema for replacing a book's mutable fields.

    title, year and synopsis are always written (an omitted synopsis clears
    it). publisherId is optional and moves the book to another publisher.
    Author links are managed through the link/unlink endpoints, not here.
    """

    book_id: int = Field(
        ...,
        description="ID of the book being updated (must match the path)",
        examples=[1],
    )

    publisher_id: int | None = Field(
        default=None,
        description="New publisher for the book, if it changes",
    )

    version_id: int | None = Field(
        default=None,
        description="Version the client last read, for conflict detection",
    )


class BookSummary(CatalogSchema):
    """List projection of a book."""

    book_id: int = Field(..., description="Unique identifier", examples=[1])
    title: str = Field(..., description="Book title")
    year: int = Field(..., description="Year of publication")


class BookDetail(BookSummary):
    """
    Full book record with resolved relation names.

    Example:
    {
        "bookId": 1,
        "title": "1984",
        "year": 1949,
        "synopsis": "A dystopian novel...",
        "publisherId": 1,
        "publisherName": "Secker & Warburg",
        "authorIds": [1],
        "authorNames": ["George Orwell"],
        "versionId": 1
    }
    """

    synopsis: str | None = Field(default=None, description="Book synopsis")

    publisher_id: int = Field(..., description="Owning publisher ID")
    publisher_name: str = Field(..., description="Owning publisher name")

    author_ids: list[int] = Field(
        default_factory=list,
        description="IDs of the linked authors",
    )

    author_names: list[str] = Field(
        default_factory=list,
        description="Names of the linked authors",
    )

    version_id: int = Field(..., description="Current row version")
