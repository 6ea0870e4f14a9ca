"""
Services Package

This package contains the catalog's business logic, kept separate from HTTP
handling so it can be reused and tested without a web server. Every
function takes the request's SQLAlchemy session as its first argument.

Current services:
- books.py: Book CRUD, including batch creation
- authors.py: Author CRUD
- publishers.py: Publisher CRUD
- relationships.py: Book <-> Author linking and related-record listings
- persistence.py: Version checks and conflict-aware commits
- exceptions.py: Expected failures raised to the API layer
"""
