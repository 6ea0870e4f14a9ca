"""
Publishers Router

CRUD endpoints for publishers, plus listing the books a publisher owns.
"""

from fastapi import APIRouter, Request, Response, status

from catalog_api.dependencies import DbSession
from catalog_api.schemas import (
    ApiResponse,
    BookSummary,
    ErrorResponse,
    PublisherCreate,
    PublisherDetail,
    PublisherSummary,
    PublisherUpdate,
)
from catalog_api.services import publishers as publishers_service
from catalog_api.services import relationships

router = APIRouter(
    prefix="/Publishers",
    tags=["Publishers"],
    responses={
        404: {"model": ErrorResponse, "description": "Publisher not found"},
        500: {"model": ErrorResponse, "description": "Storage failure"},
    },
)


@router.get(
    "/List",
    response_model=ApiResponse[list[PublisherSummary]],
    summary="List all publishers",
    description="Get every publisher with the titles it publishes.",
)
def list_publishers(db: DbSession) -> ApiResponse[list[PublisherSummary]]:
    return ApiResponse(
        message="Publishers retrieved successfully.",
        data=publishers_service.list_publishers(db),
    )


@router.get(
    "/Find/{publisher_id}",
    response_model=ApiResponse[PublisherDetail],
    summary="Get a publisher by ID",
)
def find_publisher(publisher_id: int, db: DbSession) -> ApiResponse[PublisherDetail]:
    return ApiResponse(
        message="Publisher retrieved successfully.",
        data=publishers_service.get_publisher(db, publisher_id),
    )


@router.post(
    "/Add",
    response_model=ApiResponse[PublisherDetail],
    status_code=status.HTTP_201_CREATED,
    summary="Create a new publisher",
)
def add_publisher(
    request: Request,
    response: Response,
    publisher_data: PublisherCreate,
    db: DbSession,
) -> ApiResponse[PublisherDetail]:
    """Create a new publisher."""
    publisher = publishers_service.create_publisher(db, publisher_data)
    response.headers["Location"] = str(
        request.url_for("find_publisher", publisher_id=publisher.publisher_id)
    )
    return ApiResponse(message="Publisher added successfully.", data=publisher)


@router.put(
    "/Update/{publisher_id}",
    response_model=ApiResponse[PublisherDetail],
    summary="Update a publisher",
    responses={
        400: {"model": ErrorResponse, "description": "Path ID and payload ID differ"},
        409: {"model": ErrorResponse, "description": "Publisher was modified concurrently"},
    },
)
def update_publisher(
    publisher_id: int,
    publisher_data: PublisherUpdate,
    db: DbSession,
) -> ApiResponse[PublisherDetail]:
    return ApiResponse(
        message="Publisher updated successfully.",
        data=publishers_service.update_publisher(db, publisher_id, publisher_data),
    )


@router.delete(
    "/Delete/{publisher_id}",
    response_model=ApiResponse[None],
    summary="Delete a publisher",
    description="Delete a publisher together with the books it owns.",
)
def delete_publisher(publisher_id: int, db: DbSession) -> ApiResponse[None]:
    publishers_service.delete_publisher(db, publisher_id)
    return ApiResponse(message="Publisher deleted successfully.")


@router.get(
    "/ListBooksByPublisher/{publisher_id}",
    response_model=ApiResponse[list[BookSummary]],
    summary="List the books of a publisher",
)
def list_books_by_publisher(
    publisher_id: int,
    db: DbSession,
) -> ApiResponse[list[BookSummary]]:
    """List books owned by a publisher; a publisher without books yields []."""
    return ApiResponse(
        message="Books retrieved successfully.",
        data=relationships.list_books_of_publisher(db, publisher_id),
    )
