#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample publishers, authors and books for
development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py
    python scripts/seed_data.py --keep   # don't clear existing data

Records are created through the service layer, so the same validation
(publisher and author references must exist) applies as over HTTP.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from catalog_api.database import SessionLocal, create_tables
from catalog_api.models import Author, Book, Publisher, book_authors
from catalog_api.schemas import AuthorCreate, BookCreate, PublisherCreate
from catalog_api.services import authors as authors_service
from catalog_api.services import books as books_service
from catalog_api.services import publishers as publishers_service


def clear_data(db: Session) -> None:
    """Clear all existing data, join rows first."""
    print("Clearing existing data...")
    db.execute(delete(book_authors))
    db.execute(delete(Book))
    db.execute(delete(Author))
    db.execute(delete(Publisher))
    db.commit()
    print("Data cleared.")


def create_publishers(db: Session) -> dict[str, int]:
    """Create sample publishers and return their IDs by name."""
    print("Creating publishers...")
    names = [
        "Secker & Warburg",
        "T. Egerton",
        "Charles Scribner's Sons",
        "Gnome Press",
        "George Allen & Unwin",
    ]
    publishers = {
        name: publishers_service.create_publisher(db, PublisherCreate(name=name)).publisher_id
        for name in names
    }
    print(f"Created {len(publishers)} publishers.")
    return publishers


def create_authors(db: Session) -> dict[str, int]:
    """Create sample authors and return their IDs by name."""
    print("Creating authors...")
    authors_data = [
        {
            "name": "George Orwell",
            "bio": "English novelist and essayist, journalist and critic. "
                   "Best known for '1984' and 'Animal Farm'.",
        },
        {
            "name": "Jane Austen",
            "bio": "English novelist known for six major novels critiquing "
                   "the British landed gentry.",
        },
        {
            "name": "Ernest Hemingway",
            "bio": "American novelist, short-story writer and journalist.",
        },
        {
            "name": "Isaac Asimov",
            "bio": "American writer and professor of biochemistry, "
                   "known for his works of science fiction.",
        },
        {
            "name": "J.R.R. Tolkien",
            "bio": "English writer and philologist, author of 'The Hobbit'.",
        },
    ]
    authors = {
        data["name"]: authors_service.create_author(db, AuthorCreate(**data)).author_id
        for data in authors_data
    }
    print(f"Created {len(authors)} authors.")
    return authors


def create_books(
    db: Session,
    publishers: dict[str, int],
    authors: dict[str, int],
) -> int:
    """Create sample books linked to their publisher and authors."""
    print("Creating books...")
    books_data = [
        ("1984", 1949, "A dystopian novel set in a totalitarian society.",
         "Secker & Warburg", ["George Orwell"]),
        ("Animal Farm", 1945, "An allegorical novella about a farm revolution.",
         "Secker & Warburg", ["George Orwell"]),
        ("Pride and Prejudice", 1813, "Elizabeth Bennet and Mr. Darcy.",
         "T. Egerton", ["Jane Austen"]),
        ("The Old Man and the Sea", 1952, "An aging fisherman and a giant marlin.",
         "Charles Scribner's Sons", ["Ernest Hemingway"]),
        ("Foundation", 1951, "The fall of the Galactic Empire.",
         "Gnome Press", ["Isaac Asimov"]),
        ("The Hobbit", 1937, "Bilbo Baggins and the Lonely Mountain.",
         "George Allen & Unwin", ["J.R.R. Tolkien"]),
    ]
    items = [
        BookCreate(
            title=title,
            year=year,
            synopsis=synopsis,
            publisher_id=publishers[publisher],
            author_ids=[authors[name] for name in author_names],
        )
        for title, year, synopsis, publisher, author_names in books_data
    ]
    created = books_service.create_books(db, items)
    print(f"Created {len(created)} books.")
    return len(created)


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        publishers = create_publishers(db)
        authors = create_authors(db)
        book_count = create_books(db, publishers, authors)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Publishers: {len(publishers)}")
        print(f"  - Authors: {len(authors)}")
        print(f"  - Books: {book_count}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database(clear_existing="--keep" not in sys.argv[1:])
