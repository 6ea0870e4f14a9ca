"""
SQLAlchemy Models Package

This package contains all database models for the Catalog API.

Model Relationships:
- Publisher -> Book: One-to-Many (a book belongs to exactly one publisher)
- Author <-> Book: Many-to-Many through the book_authors table

Import all models here to:
1. Make them available as: from catalog_api.models import Book, Author, Publisher
2. Ensure Alembic discovers them for migrations
"""

# The order matters for SQLAlchemy to resolve relationships
from catalog_api.models.publisher import Publisher
from catalog_api.models.author import Author
from catalog_api.models.book import Book, book_authors

__all__ = [
    "Publisher",
    "Author",
    "Book",
    "book_authors",
]
