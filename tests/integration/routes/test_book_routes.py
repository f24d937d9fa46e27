"""
Book route integration tests
"""
import pytest

from tests.fixtures.sample_data import SAMPLE_BOOKS

BOOKS_URL = "/api/v1/books"


@pytest.mark.integration
class TestBookRoutes:
    """Book route tests"""

    def test_create_book_success(self, client, sample_book_data):
        response = client.post(BOOKS_URL, json=sample_book_data)

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        for key, value in sample_book_data.items():
            assert data[key] == value
        assert data["created_at"] == data["updated_at"]
        assert data["created_at"].endswith("Z")

    def test_create_book_fills_defaults(self, client):
        response = client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert"})

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "planning"
        assert data["date_added"] == data["created_at"]
        for key in ("isbn_10", "isbn_13", "series_id", "rating", "book_type", "date_started", "date_finished"):
            assert data[key] is None

    def test_create_book_returns_dates_as_sent(self, client):
        dates = {
            "date_added": "2025-01-15T10:00:00.000Z",
            "date_started": "2025-01-16",
            "date_finished": "2025-01-20T10:00:00+02:00",
        }
        created = client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert", **dates}).json()

        fetched = client.get(f"{BOOKS_URL}/{created['id']}").json()

        for key, value in dates.items():
            assert fetched[key] == value, key
        assert fetched["created_at"].endswith(".000Z")

    def test_create_book_null_publication_year_rejected(self, client):
        response = client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert", "publication_year": None})

        assert response.status_code == 422
        assert "publication_year" in response.json()["errors"]

    def test_create_book_validation_error(self, client):
        response = client.post(BOOKS_URL, json={"title": "Only a title", "rating": 11})

        assert response.status_code == 422
        assert response.json() == {
            "type": "https://example.com/validation-error",
            "title": "Validation failed",
            "status": 422,
            "errors": {
                "author": ["can't be blank"],
                "rating": ["must be an integer between 1 and 10"],
            },
        }

    def test_create_book_duplicate_isbn(self, client):
        book_data = {"title": "First", "author": "X", "isbn_13": "9780765326355"}
        assert client.post(BOOKS_URL, json=book_data).status_code == 201

        response = client.post(BOOKS_URL, json={**book_data, "title": "Second"})

        assert response.status_code == 422
        assert response.json()["errors"] == {"isbn_13": ["has already been taken"]}

    def test_create_book_malformed_body(self, client):
        response = client.post(
            BOOKS_URL, content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        data = response.json()
        assert data["type"] == "https://example.com/validation-error"
        assert data["status"] == 400
        assert "errors" in data

    def test_create_book_non_object_body(self, client):
        response = client.post(BOOKS_URL, json=["title", "author"])

        assert response.status_code == 400

    def test_get_book_success(self, client, sample_book_data):
        created = client.post(BOOKS_URL, json=sample_book_data).json()

        response = client.get(f"{BOOKS_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_book_not_found(self, client):
        response = client.get(f"{BOOKS_URL}/999")

        assert response.status_code == 404
        assert response.json() == {
            "type": "https://example.com/not-found",
            "title": "Book not found",
            "status": 404,
        }

    def test_malformed_id_is_not_found(self, client):
        client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert"})

        assert client.get(f"{BOOKS_URL}/abc").status_code == 404
        assert client.delete(f"{BOOKS_URL}/abc").status_code == 404

    def test_leading_digits_id_is_lenient(self, client):
        client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert"})

        response = client.get(f"{BOOKS_URL}/1abc")

        assert response.status_code == 200
        assert response.json()["title"] == "Dune"

    def test_list_books_with_filters(self, client):
        for book in SAMPLE_BOOKS:
            assert client.post(BOOKS_URL, json=book).status_code == 201

        assert len(client.get(BOOKS_URL).json()) == 3
        assert [b["title"] for b in client.get(BOOKS_URL, params={"series_id": 1}).json()] == [
            "The Way of Kings", "Words of Radiance",
        ]
        assert [b["title"] for b in client.get(BOOKS_URL, params={"status": "reading"}).json()] == [
            "Words of Radiance",
        ]
        assert [b["title"] for b in client.get(BOOKS_URL, params={"publication_year": "2021"}).json()] == [
            "Project Hail Mary",
        ]
        assert client.get(BOOKS_URL, params={"series_id": "abc"}).json() == []
        assert len(client.get(BOOKS_URL, params={"series_id": ""}).json()) == 3

    def test_update_book_partial(self, client, sample_book_data):
        created = client.post(BOOKS_URL, json=sample_book_data).json()

        response = client.put(f"{BOOKS_URL}/{created['id']}", json={"status": "reading", "id": 77})

        assert response.status_code == 200
        updated = response.json()
        assert updated["id"] == created["id"]
        assert updated["status"] == "reading"
        assert updated["updated_at"] > created["updated_at"]
        for key in ("title", "author", "isbn_10", "isbn_13", "created_at"):
            assert updated[key] == created[key]

    def test_patch_book(self, client):
        created = client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert"}).json()

        response = client.patch(f"{BOOKS_URL}/{created['id']}", json={"rating": 9})

        assert response.status_code == 200
        assert response.json()["rating"] == 9

    def test_update_book_validation_error(self, client):
        created = client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert"}).json()

        response = client.put(f"{BOOKS_URL}/{created['id']}", json={"publication_year": 3000})

        assert response.status_code == 422
        assert "publication_year" in response.json()["errors"]

    def test_update_book_not_found(self, client):
        response = client.put(f"{BOOKS_URL}/5", json={"status": "reading"})

        assert response.status_code == 404

    def test_delete_book(self, client):
        created = client.post(BOOKS_URL, json={"title": "Dune", "author": "Frank Herbert"}).json()

        response = client.delete(f"{BOOKS_URL}/{created['id']}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BOOKS_URL}/{created['id']}").status_code == 404

    def test_delete_book_not_found(self, client):
        response = client.delete(f"{BOOKS_URL}/42")

        assert response.status_code == 404
        assert response.json()["title"] == "Book not found"
