"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what data is exposed in API responses
2. Validation: Different rules for create vs update vs response
3. Decoupling: Database schema can evolve independently of API
4. Documentation: Schemas generate OpenAPI documentation

Schema Naming Convention:
- XxxBase: Shared fields between create/update
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Whole-record replace payload (carries the record id)
- XxxSummary: List projection
- XxxDetail: Full record with resolved relations
"""

from catalog_api.schemas.author import (
    AuthorBase,
    AuthorCreate,
    AuthorDetail,
    AuthorSummary,
    AuthorUpdate,
)
from catalog_api.schemas.book import (
    BookBase,
    BookCreate,
    BookDetail,
    BookSummary,
    BookUpdate,
)
from catalog_api.schemas.common import ApiResponse, CatalogSchema, ErrorResponse
from catalog_api.schemas.publisher import (
    PublisherBase,
    PublisherCreate,
    PublisherDetail,
    PublisherSummary,
    PublisherUpdate,
)

__all__ = [
    # Envelopes
    "ApiResponse",
    "CatalogSchema",
    "ErrorResponse",
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorSummary",
    "AuthorDetail",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookSummary",
    "BookDetail",
    # Publisher schemas
    "PublisherBase",
    "PublisherCreate",
    "PublisherUpdate",
    "PublisherSummary",
    "PublisherDetail",
]
