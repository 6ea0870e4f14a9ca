"""
Authors Router

CRUD endpoints for authors.
Follows the same patterns as the books router.
"""

from fastapi import APIRouter, Request, Response, status

from catalog_api.dependencies import DbSession
from catalog_api.schemas import (
    ApiResponse,
    AuthorCreate,
    AuthorDetail,
    AuthorSummary,
    AuthorUpdate,
    BookSummary,
    ErrorResponse,
)
from catalog_api.services import authors as authors_service
from catalog_api.services import relationships

router = APIRouter(
    prefix="/Authors",
    tags=["Authors"],
    responses={
        404: {"model": ErrorResponse, "description": "Author not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)


@router.get(
    "/List",
    response_model=ApiResponse[list[AuthorSummary]],
    summary="List all authors",
)
def list_authors(db: DbSession) -> ApiResponse[list[AuthorSummary]]:
    """List all authors."""
    return ApiResponse(
        message="Authors retrieved successfully.",
        data=authors_service.list_authors(db),
    )


@router.get(
    "/Find/{author_id}",
    response_model=ApiResponse[AuthorDetail],
    summary="Get an author by ID",
    description="Retrieve an author with the titles of their books.",
)
def find_author(author_id: int, db: DbSession) -> ApiResponse[AuthorDetail]:
    """Get a single author by ID."""
    return ApiResponse(
        message="Author retrieved successfully.",
        data=authors_service.get_author(db, author_id),
    )


@router.post(
    "/Add",
    response_model=ApiResponse[AuthorDetail],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
def add_author(
    request: Request,
    response: Response,
    author_data: AuthorCreate,
    db: DbSession,
) -> ApiResponse[AuthorDetail]:
    """Create a new author."""
    author = authors_service.create_author(db, author_data)
    response.headers["Location"] = str(
        request.url_for("find_author", author_id=author.author_id)
    )
    return ApiResponse(message="Author added successfully.", data=author)


@router.put(
    "/Update/{author_id}",
    response_model=ApiResponse[AuthorDetail],
    summary="Update an author",
    responses={
        400: {"model": ErrorResponse, "description": "Path ID and payload ID differ"},
        409: {"model": ErrorResponse, "description": "Author was modified concurrently"},
    },
)
def update_author(
    author_id: int,
    author_data: AuthorUpdate,
    db: DbSession,
) -> ApiResponse[AuthorDetail]:
    """Replace an author's name and bio."""
    return ApiResponse(
        message="Author updated successfully.",
        data=authors_service.update_author(db, author_id, author_data),
    )


@router.delete(
    "/Delete/{author_id}",
    response_model=ApiResponse[None],
    summary="Delete an author",
    description="Delete an author and unlink them from all their books.",
)
def delete_author(author_id: int, db: DbSession) -> ApiResponse[None]:
    """Delete an author."""
    authors_service.delete_author(db, author_id)
    return ApiResponse(message="Author deleted successfully.")


@router.get(
    "/ListBooksByAuthor/{author_id}",
    response_model=ApiResponse[list[BookSummary]],
    summary="List the books of an author",
)
def list_books_by_author(author_id: int, db: DbSession) -> ApiResponse[list[BookSummary]]:
    """List books linked to an author; an author without books yields []."""
    return ApiResponse(
        message="Books retrieved successfully.",
        data=relationships.list_books_of_author(db, author_id),
    )
