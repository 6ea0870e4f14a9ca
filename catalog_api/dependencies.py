"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

WHY Dependency Injection?
=========================
1. Reusability: Write once, use in many routes
2. Testing: Easy to override in tests (app.dependency_overrides)
3. Lifecycle Management: FastAPI opens and closes the session per request
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from catalog_api.database import get_db

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def list_books(db: Session = Depends(get_db)):
#
# You can write:
#   def list_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]
