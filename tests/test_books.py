"""
Tests for Books API Endpoints

This module tests the CRUD operations of the /api/Books endpoints.
Linking and unlinking authors is covered in test_relationships.py.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_add_book_success, test_find_book_not_found
"""

from fastapi import status

from catalog_api.models import Book, book_authors


class TestListBooks:
    """Tests for GET /api/Books/List endpoint."""

    def test_list_books_empty(self, client):
        """An empty catalog returns an empty list, not 404."""
        response = client.get("/api/Books/List")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["message"] == "Books retrieved successfully."
        assert body["data"] == []

    def test_list_books_with_data(self, client, sample_book, unlinked_book):
        """Books are listed as summaries ordered by ID."""
        response = client.get("/api/Books/List")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert [b["title"] for b in data] == ["1984", "Animal Farm"]
        assert data[0] == {"bookId": sample_book.id, "title": "1984", "year": 1949}


class TestFindBook:
    """Tests for GET /api/Books/Find/{id} endpoint."""

    def test_find_book_success(self, client, sample_book):
        """A found book includes resolved author and publisher names."""
        response = client.get(f"/api/Books/Find/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["bookId"] == sample_book.id
        assert data["title"] == "1984"
        assert data["synopsis"].startswith("A dystopian novel")
        assert data["authorNames"] == ["George Orwell"]
        assert data["publisherName"] == "Secker & Warburg"
        assert data["versionId"] == 1

    def test_find_book_not_found(self, client):
        """A missing book returns the error envelope with 404."""
        response = client.get("/api/Books/Find/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["error"] == "NotFound"
        assert "99999" in body["message"]

    def test_find_book_invalid_id(self, client):
        """A non-integer id is a bad request."""
        response = client.get("/api/Books/Find/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "InvalidRequest"


class TestAddBook:
    """Tests for POST /api/Books/Add endpoint."""

    def test_add_book_with_authors(self, client, sample_publisher, sample_author, second_author):
        """Creating a book links its authors and resolves relation names."""
        book_data = {
            "title": "Collected Essays",
            "year": 1961,
            "synopsis": "Essays by two writers.",
            "publisherId": sample_publisher.id,
            "authorIds": [sample_author.id, second_author.id],
        }

        response = client.post("/api/Books/Add", json=book_data)

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "Book added successfully."
        data = body["data"]
        assert data["bookId"] is not None
        assert data["publisherId"] == sample_publisher.id
        assert data["publisherName"] == "Secker & Warburg"
        assert data["authorNames"] == ["George Orwell", "Aldous Huxley"]
        assert response.headers["location"].endswith(f"/api/Books/Find/{data['bookId']}")

    def test_add_book_without_authors(self, client, sample_publisher):
        """authorIds is optional."""
        response = client.post(
            "/api/Books/Add",
            json={"title": "Solo", "year": 2001, "publisherId": sample_publisher.id},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["authorNames"] == []
        assert data["synopsis"] is None

    def test_add_book_accepts_snake_case(self, client, sample_publisher):
        """Payload keys may also be sent in snake_case."""
        response = client.post(
            "/api/Books/Add",
            json={"title": "Snake", "year": 2001, "publisher_id": sample_publisher.id},
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_add_book_duplicate_author_ids(self, client, sample_publisher, sample_author):
        """Repeated author IDs produce a single link."""
        response = client.post(
            "/api/Books/Add",
            json={
                "title": "Twice",
                "year": 2001,
                "publisherId": sample_publisher.id,
                "authorIds": [sample_author.id, sample_author.id],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["data"]["authorNames"] == ["George Orwell"]

    def test_add_book_missing_publisher(self, client, sample_author, row_count):
        """A missing publisher fails with 404 and inserts nothing."""
        response = client.post(
            "/api/Books/Add",
            json={
                "title": "Orphan",
                "year": 2001,
                "publisherId": 99999,
                "authorIds": [sample_author.id],
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "NotFound"
        assert "Publisher" in response.json()["message"]
        assert row_count(Book) == 0
        assert row_count(book_authors) == 0

    def test_add_book_missing_author(self, client, sample_publisher, sample_author, row_count):
        """If any author is missing the book is not created."""
        response = client.post(
            "/api/Books/Add",
            json={
                "title": "Half Known",
                "year": 2001,
                "publisherId": sample_publisher.id,
                "authorIds": [sample_author.id, 99999],
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "99999" in response.json()["message"]
        assert row_count(Book) == 0
        assert row_count(book_authors) == 0

    def test_add_book_blank_title(self, client, sample_publisher):
        """Whitespace-only titles are rejected as a bad request."""
        response = client.post(
            "/api/Books/Add",
            json={"title": "   ", "year": 2001, "publisherId": sample_publisher.id},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error"] == "InvalidRequest"
        assert "title" in body["message"]

    def test_add_book_missing_required_fields(self, client):
        """year and publisherId are required."""
        response = client.post("/api/Books/Add", json={"title": "Incomplete"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestAddMultipleBooks:
    """Tests for POST /api/Books/AddMultiple endpoint."""

    def test_add_multiple_books_success(self, client, sample_publisher, sample_author):
        """All books are created and returned in order."""
        books_data = [
            {"title": "First", "year": 2001, "publisherId": sample_publisher.id},
            {
                "title": "Second",
                "year": 2002,
                "publisherId": sample_publisher.id,
                "authorIds": [sample_author.id],
            },
        ]

        response = client.post("/api/Books/AddMultiple", json=books_data)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert [b["title"] for b in data] == ["First", "Second"]
        assert data[1]["authorNames"] == ["George Orwell"]

    def test_add_multiple_books_stops_at_first_failure(self, client, sample_publisher, row_count):
        """The first invalid item aborts the batch; earlier items stay saved."""
        books_data = [
            {"title": "Saved", "year": 2001, "publisherId": sample_publisher.id},
            {"title": "Broken", "year": 2002, "publisherId": 99999},
            {"title": "Never Reached", "year": 2003, "publisherId": sample_publisher.id},
        ]

        response = client.post("/api/Books/AddMultiple", json=books_data)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert row_count(Book) == 1

        titles = [b["title"] for b in client.get("/api/Books/List").json()["data"]]
        assert titles == ["Saved"]

    def test_add_multiple_books_empty_list(self, client):
        response = client.post("/api/Books/AddMultiple", json=[])

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] == []


class TestUpdateBook:
    """Tests for PUT /api/Books/Update/{id} endpoint."""

    def test_update_book_success(self, client, sample_book):
        """All mutable fields are replaced and the version advances."""
        update_data = {
            "bookId": sample_book.id,
            "title": "Nineteen Eighty-Four",
            "year": 1950,
            "synopsis": "Revised synopsis.",
        }

        response = client.put(f"/api/Books/Update/{sample_book.id}", json=update_data)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["title"] == "Nineteen Eighty-Four"
        assert data["year"] == 1950
        assert data["synopsis"] == "Revised synopsis."
        assert data["authorNames"] == ["George Orwell"]
        assert data["versionId"] == 2

    def test_update_book_clears_omitted_synopsis(self, client, sample_book):
        """Update is a whole-record replace."""
        response = client.put(
            f"/api/Books/Update/{sample_book.id}",
            json={"bookId": sample_book.id, "title": "1984", "year": 1949},
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["synopsis"] is None

    def test_update_book_moves_publisher(self, client, sample_book, second_publisher):
        response = client.put(
            f"/api/Books/Update/{sample_book.id}",
            json={
                "bookId": sample_book.id,
                "title": "1984",
                "year": 1949,
                "publisherId": second_publisher.id,
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["publisherName"] == "Penguin Books"

    def test_update_book_missing_publisher(self, client, sample_book):
        response = client.put(
            f"/api/Books/Update/{sample_book.id}",
            json={
                "bookId": sample_book.id,
                "title": "1984",
                "year": 1949,
                "publisherId": 99999,
            },
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_id_mismatch(self, client, sample_book):
        """Path and payload IDs must agree."""
        response = client.put(
            f"/api/Books/Update/{sample_book.id}",
            json={"bookId": sample_book.id + 1, "title": "X", "year": 2000},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "InvalidRequest"

    def test_update_book_not_found(self, client):
        response = client.put(
            "/api/Books/Update/99999",
            json={"bookId": 99999, "title": "X", "year": 2000},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_stale_version(self, client, sample_book):
        """A versionId older than the stored one is a conflict."""
        response = client.put(
            f"/api/Books/Update/{sample_book.id}",
            json={"bookId": sample_book.id, "title": "X", "year": 2000, "versionId": 99},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["error"] == "ConcurrencyError"

        # Nothing was written
        data = client.get(f"/api/Books/Find/{sample_book.id}").json()["data"]
        assert data["title"] == "1984"

    def test_update_book_current_version(self, client, sample_book):
        response = client.put(
            f"/api/Books/Update/{sample_book.id}",
            json={"bookId": sample_book.id, "title": "X", "year": 2000, "versionId": 1},
        )

        assert response.status_code == status.HTTP_200_OK


class TestDeleteBook:
    """Tests for DELETE /api/Books/Delete/{id} endpoint."""

    def test_delete_book_success(self, client, sample_book, row_count):
        """Deleting a book removes it and its author links."""
        book_id = sample_book.id

        response = client.delete(f"/api/Books/Delete/{book_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Book deleted successfully.", "data": None}
        assert row_count(book_authors) == 0

        get_response = client.get(f"/api/Books/Find/{book_id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_keeps_authors_and_publisher(self, client, sample_book, sample_author):
        author_id = sample_author.id
        publisher_id = sample_book.publisher_id

        client.delete(f"/api/Books/Delete/{sample_book.id}")

        assert client.get(f"/api/Authors/Find/{author_id}").status_code == status.HTTP_200_OK
        assert client.get(f"/api/Publishers/Find/{publisher_id}").status_code == status.HTTP_200_OK

    def test_delete_book_not_found(self, client):
        response = client.delete("/api/Books/Delete/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
