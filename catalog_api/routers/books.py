"""
Books Router

Endpoints for books, including linking authors to books.

Every handler is a thin adapter: it hands the injected session and the
validated payload to the books/relationships services and wraps the result
in the {message, data} envelope. Service exceptions are turned into
{error, message} responses by the handlers registered in main.py.
"""

from fastapi import APIRouter, Request, Response, status

from catalog_api.dependencies import DbSession
from catalog_api.schemas import (
    ApiResponse,
    AuthorSummary,
    BookCreate,
    BookDetail,
    BookSummary,
    BookUpdate,
    ErrorResponse,
)
from catalog_api.services import books as books_service
from catalog_api.services import relationships

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/Books",
    tags=["Books"],
    responses={
        404: {"model": ErrorResponse, "description": "Book or referenced record not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.get(
    "/List",
    response_model=ApiResponse[list[BookSummary]],
    summary="List all books",
    description="Get every book as a summary (id, title, year).",
)
def list_books(db: DbSession) -> ApiResponse[list[BookSummary]]:
    """List all books. An empty catalog returns an empty list."""
    return ApiResponse(
        message="Books retrieved successfully.",
        data=books_service.list_books(db),
    )


@router.get(
    "/Find/{book_id}",
    response_model=ApiResponse[BookDetail],
    summary="Get a book by ID",
    description="Retrieve a book with its author names and publisher name.",
)
def find_book(book_id: int, db: DbSession) -> ApiResponse[BookDetail]:
    """
    Get a single book by its ID.

    Raises:
        NotFoundError: 404 if the book does not exist
    """
    return ApiResponse(
        message="Book retrieved successfully.",
        data=books_service.get_book(db, book_id),
    )


@router.post(
    "/Add",
    response_model=ApiResponse[BookDetail],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Create a book owned by an existing publisher and linked to existing authors.",
)
def add_book(
    request: Request,
    response: Response,
    book_data: BookCreate,
    db: DbSession,
) -> ApiResponse[BookDetail]:
    """
    Create a new book.

    Returns 201 Created with a Location header pointing at the Find
    endpoint for the new book.

    Raises:
        NotFoundError: 404 if the publisher or any author does not exist
    """
    book = books_service.create_book(db, book_data)
    response.headers["Location"] = str(request.url_for("find_book", book_id=book.book_id))
    return ApiResponse(message="Book added successfully.", data=book)


@router.post(
    "/AddMultiple",
    response_model=ApiResponse[list[BookDetail]],
    summary="Create several books",
    description=(
        "Create books one after another. The first invalid item stops the "
        "batch; books created before it are kept."
    ),
)
def add_multiple_books(
    books_data: list[BookCreate],
    db: DbSession,
) -> ApiResponse[list[BookDetail]]:
    """Create several books in order."""
    created = books_service.create_books(db, books_data)
    return ApiResponse(
        message=f"{len(created)} book(s) added successfully.",
        data=created,
    )


@router.put(
    "/Update/{book_id}",
    response_model=ApiResponse[BookDetail],
    summary="Update a book",
    description="Replace a book's title, year and synopsis (and optionally its publisher).",
    responses={
        400: {"model": ErrorResponse, "description": "Path ID and payload ID differ"},
        409: {"model": ErrorResponse, "description": "Book was modified concurrently"},
    },
)
def update_book(
    book_id: int,
    book_data: BookUpdate,
    db: DbSession,
) -> ApiResponse[BookDetail]:
    """
    Update an existing book.

    PUT semantics: every mutable field in the payload overwrites the stored
    value. Author links are managed with the link/unlink endpoints.
    """
    return ApiResponse(
        message="Book updated successfully.",
        data=books_service.update_book(db, book_id, book_data),
    )


@router.delete(
    "/Delete/{book_id}",
    response_model=ApiResponse[None],
    summary="Delete a book",
    description="Delete a book and all of its author links.",
)
def delete_book(book_id: int, db: DbSession) -> ApiResponse[None]:
    """Delete a book."""
    books_service.delete_book(db, book_id)
    return ApiResponse(message="Book deleted successfully.")


# =============================================================================
# Relationship Endpoints
# =============================================================================
@router.post(
    "/LinkAuthorToBook/{author_id}/{book_id}",
    response_model=ApiResponse[None],
    summary="Link an author to a book",
    responses={
        400: {"model": ErrorResponse, "description": "Author already linked to the book"},
    },
)
def link_author_to_book(
    author_id: int,
    book_id: int,
    db: DbSession,
) -> ApiResponse[None]:
    """
    Link an author to a book.

    Linking the same pair twice fails with 400 AlreadyLinked.
    """
    relationships.link_author(db, book_id=book_id, author_id=author_id)
    return ApiResponse(message="Author linked to book successfully.")


@router.delete(
    "/UnlinkAuthor/{author_id}/{book_id}",
    response_model=ApiResponse[None],
    summary="Unlink an author from a book",
    responses={
        400: {"model": ErrorResponse, "description": "Author not linked to the book"},
    },
)
def unlink_author(
    author_id: int,
    book_id: int,
    db: DbSession,
) -> ApiResponse[None]:
    """Remove the link between an author and a book."""
    relationships.unlink_author(db, book_id=book_id, author_id=author_id)
    return ApiResponse(message="Author unlinked from book successfully.")


@router.get(
    "/ListAuthorsByBook/{book_id}",
    response_model=ApiResponse[list[AuthorSummary]],
    summary="List the authors of a book",
)
def list_authors_by_book(book_id: int, db: DbSession) -> ApiResponse[list[AuthorSummary]]:
    """List authors linked to a book; a book without authors yields []."""
    return ApiResponse(
        message="Authors retrieved successfully.",
        data=relationships.list_authors_of_book(db, book_id),
    )
