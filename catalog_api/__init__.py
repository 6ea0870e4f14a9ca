"""
Catalog API Application Package

A REST API for managing a catalog of books, authors and publishers.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection aliases
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Catalog and relationship logic
"""

__version__ = "1.0.0"
