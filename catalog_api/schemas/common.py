"""
Shared Pydantic Schemas

Base configuration and the response envelopes used by every endpoint.

Every successful response is wrapped as:
    {"message": "...", "data": <payload or null>}

Every failure is reported as:
    {"error": "<ErrorCode>", "message": "..."}
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CatalogSchema(BaseModel):
    """
    Base class for all request and response schemas.

    JSON keys are camelCase (bookId, authorNames) while Python attributes
    stay snake_case. populate_by_name lets clients send either form.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ApiResponse(CatalogSchema, Generic[T]):
    """
    Success envelope.

    Usage in route:
        @router.get("/Find/{book_id}", response_model=ApiResponse[BookDetail])
        def find_book(...) -> ApiResponse[BookDetail]:
            return ApiResponse(message="Book retrieved successfully.", data=book)
    """

    message: str = Field(
        ...,
        description="Human readable outcome",
        examples=["Book retrieved successfully."],
    )

    data: T | None = Field(
        default=None,
        description="Operation payload, null when there is nothing to return",
    )


class ErrorResponse(CatalogSchema):
    """Failure envelope returned by the exception handlers."""

    error: str = Field(
        ...,
        description="Machine readable error code",
        examples=["NotFound", "InvalidRequest", "ConcurrencyError"],
    )

    message: str = Field(
        ...,
        description="Human readable explanation",
        examples=["Book with ID 42 not found."],
    )
