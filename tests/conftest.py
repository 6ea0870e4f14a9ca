"""
pytest Fixtures for Catalog API Tests

Shared fixtures used across all test files.

For database tests we use:
- A fresh SQLite in-memory engine per test, tables created up front
- One session per test, shared with the app through a get_db override
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app so the
# module-level engine is created for SQLite instead of PostgreSQL.
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "development"
os.environ["DEBUG"] = "false"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog_api.database import Base, get_db
from catalog_api.main import app
from catalog_api.models import Author, Book, Publisher

# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole test.
    Without it, the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test session.

    The get_db dependency is overridden so every request in the test
    works against the same in-memory database.
    """

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# HELPERS
# =============================================================================


def count_rows(db: Session, table) -> int:
    """Count rows in a model's table or in a plain Table."""
    return db.execute(select(func.count()).select_from(table)).scalar_one()


@pytest.fixture
def row_count(db_session: Session):
    """Return a callable counting rows, e.g. row_count(Book)."""
    return lambda table: count_rows(db_session, table)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_publisher(db_session: Session) -> Publisher:
    publisher = Publisher(name="Secker & Warburg")
    db_session.add(publisher)
    db_session.commit()
    db_session.refresh(publisher)
    return publisher


@pytest.fixture
def second_publisher(db_session: Session) -> Publisher:
    publisher = Publisher(name="Penguin Books")
    db_session.add(publisher)
    db_session.commit()
    db_session.refresh(publisher)
    return publisher


@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        name="George Orwell",
        bio="English novelist and essayist, journalist and critic.",
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    author = Author(name="Aldous Huxley")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(
    db_session: Session,
    sample_publisher: Publisher,
    sample_author: Author,
) -> Book:
    """
    Create a sample book owned by sample_publisher and linked to
    sample_author.
    """
    book = Book(
        title="1984",
        year=1949,
        synopsis="A dystopian novel set in a totalitarian society.",
        publisher=sample_publisher,
        authors=[sample_author],
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def unlinked_book(db_session: Session, sample_publisher: Publisher) -> Book:
    """A book with a publisher but no authors."""
    book = Book(title="Animal Farm", year=1945, publisher=sample_publisher)
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
