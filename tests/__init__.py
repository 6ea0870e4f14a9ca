"""
Test Suite for the Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_books.py: /api/Books endpoints
- test_authors.py: /api/Authors endpoints
- test_publishers.py: /api/Publishers endpoints
- test_relationships.py: Book <-> Author linking rules (service and HTTP)
- test_app.py: Health, root and error envelopes

Running Tests:
    pytest
    pytest tests/test_books.py
    pytest -v
"""
