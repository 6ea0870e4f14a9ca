"""
API Routers Package

This package contains FastAPI routers that handle API endpoints.

Router Structure:
- books.py: /api/Books/* endpoints (CRUD, batch add, author linking)
- authors.py: /api/Authors/* endpoints
- publishers.py: /api/Publishers/* endpoints

Each router is imported and registered in main.py.
"""

from catalog_api.routers.authors import router as authors_router
from catalog_api.routers.books import router as books_router
from catalog_api.routers.publishers import router as publishers_router

__all__ = [
    "books_router",
    "authors_router",
    "publishers_router",
]
