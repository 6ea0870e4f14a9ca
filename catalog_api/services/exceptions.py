"""
Service Exceptions

The service layer reports expected, user-facing outcomes by raising one of
these exceptions. They carry their HTTP status and error code so the single
handler registered in main.py can turn any of them into an ErrorResponse.

    CatalogError
    ├── NotFoundError              404  NotFound
    ├── InvalidRequestError        400  InvalidRequest
    │   └── LinkStateError
    │       ├── AlreadyLinkedError 400  AlreadyLinked
    │       └── NotLinkedError     400  NotLinked
    └── ConcurrencyConflictError   409  ConcurrencyError
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for expected catalog failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "InternalServerError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(CatalogError):
    """Raised when an entity, or an entity it references, does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NotFound"


class InvalidRequestError(CatalogError):
    """Raised when a request is well formed but cannot be applied."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "InvalidRequest"


class LinkStateError(InvalidRequestError):
    """The requested link/unlink conflicts with the current association."""


class AlreadyLinkedError(LinkStateError):
    """Raised when linking a book and author that are already linked."""

    error_code = "AlreadyLinked"


class NotLinkedError(LinkStateError):
    """Raised when unlinking a book and author that are not linked."""

    error_code = "NotLinked"


class ConcurrencyConflictError(CatalogError):
    """Raised when a record changed since the client (or session) read it."""

    status_code = status.HTTP_409_CONFLICT
    error_code = "ConcurrencyError"
