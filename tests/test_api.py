"""HTTP tests: routes, status codes and the response envelope."""
from fastapi.testclient import TestClient

BOOKS = "/api/v1/addressbooks"
BOOKS_V2 = "/api/v2/addressbooks"
UNIQUE = "/api/v1/contacts/unique"


def _create_book(client: TestClient, name: str = "Work", **extra) -> dict:
    response = client.post(BOOKS, json={"name": name, **extra})
    assert response.status_code == 201
    return response.json()["response"]


def _contacts_url(address_book_id: int) -> str:
    return f"{BOOKS}/{address_book_id}/contacts"


def _add_contact(client: TestClient, address_book_id: int, name: str, phone: str) -> dict:
    response = client.post(_contacts_url(address_book_id), json={"name": name, "phone_number": phone})
    assert response.status_code == 201
    return response.json()["response"]


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_create_address_book_envelope(client: TestClient) -> None:
    response = client.post(BOOKS, json={"name": "Work", "description": "Office"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Address book created successfully"
    assert body["timestamp"]
    assert body["response"]["name"] == "Work"
    assert body["response"]["contact_count"] == 0


def test_v1_create_ignores_contacts(client: TestClient) -> None:
    book = _create_book(
        client, "Work", contacts=[{"name": "John", "phone_number": "+1234567890"}]
    )
    assert book["contact_count"] == 0


def test_v2_create_with_contacts(client: TestClient) -> None:
    response = client.post(
        BOOKS_V2,
        json={
            "name": "Friends",
            "contacts": [
                {"name": "John", "phone_number": "+1234567890"},
                {"name": "Jane", "phone_number": "+0987654321"},
            ],
        },
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Address book created successfully with contacts"
    assert body["response"]["contact_count"] == 2


def test_v2_create_with_duplicate_batch_is_conflict(client: TestClient) -> None:
    response = client.post(
        BOOKS_V2,
        json={
            "name": "Friends",
            "contacts": [
                {"name": "A", "phone_number": "+111111111"},
                {"name": "B", "phone_number": "+111111111"},
            ],
        },
    )

    assert response.status_code == 409
    assert "+111111111" in response.json()["message"]
    assert client.get(f"{BOOKS}/name/Friends").status_code == 404


def test_duplicate_address_book_is_conflict(client: TestClient) -> None:
    _create_book(client, "Work")

    response = client.post(BOOKS, json={"name": "Work"})

    assert response.status_code == 409
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Address book with name 'Work' already exists"
    assert body["path"] == BOOKS


def test_validation_error_is_bad_request_with_field_map(client: TestClient) -> None:
    response = client.post(BOOKS, json={"name": "W"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Validation failed for one or more fields"
    assert "name" in body["errors"]


def test_invalid_phone_number_is_bad_request(client: TestClient) -> None:
    book = _create_book(client)

    response = client.post(_contacts_url(book["id"]), json={"name": "John", "phone_number": "abc"})

    assert response.status_code == 400
    assert "phone_number" in response.json()["errors"]


def test_missing_address_book_is_not_found(client: TestClient) -> None:
    response = client.get(f"{BOOKS}/999")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Address book not found with id: 999"
    assert body["path"] == f"{BOOKS}/999"


def test_list_search_and_lookup(client: TestClient) -> None:
    for name in ("Work", "Homework", "Personal"):
        _create_book(client, name)

    listed = client.get(BOOKS, params={"page": 0, "size": 2}).json()["response"]
    assert listed["total_elements"] == 3
    assert listed["total_pages"] == 2
    assert len(listed["content"]) == 2
    assert listed["first"] is True and listed["last"] is False

    oversized = client.get(BOOKS, params={"size": 500}).json()["response"]
    assert oversized["size"] == 20

    assert len(client.get(f"{BOOKS}/all").json()["response"]) == 3

    found = client.get(f"{BOOKS}/search", params={"name": "work"}).json()["response"]
    assert [ab["name"] for ab in found["content"]] == ["Homework", "Work"]

    assert client.get(f"{BOOKS}/name/Personal").json()["response"]["name"] == "Personal"


def test_update_and_delete_address_book(client: TestClient) -> None:
    book = _create_book(client, "Work")
    _add_contact(client, book["id"], "John", "+1234567890")

    updated = client.put(f"{BOOKS}/{book['id']}", json={"name": "Office", "description": "HQ"})
    assert updated.status_code == 200
    assert updated.json()["response"]["name"] == "Office"
    assert updated.json()["response"]["description"] == "HQ"

    deleted = client.delete(f"{BOOKS}/{book['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Address book deleted successfully"
    assert client.get(f"{BOOKS}/{book['id']}").status_code == 404
    assert client.get(f"{UNIQUE}/count").json()["response"]["count"] == 0


def test_contact_lifecycle(client: TestClient) -> None:
    book = _create_book(client)
    url = _contacts_url(book["id"])
    contact = _add_contact(client, book["id"], "John", "+1234567890")
    assert contact["address_book_name"] == "Work"

    assert client.get(f"{url}/{contact['id']}").json()["response"]["name"] == "John"

    updated = client.put(f"{url}/{contact['id']}", json={"name": "Johnny", "phone_number": "+1234567890"})
    assert updated.status_code == 200
    assert updated.json()["response"]["name"] == "Johnny"

    assert client.get(url).json()["response"]["total_elements"] == 1
    assert len(client.get(f"{url}/all").json()["response"]) == 1
    assert client.get(f"{url}/count").json()["response"]["count"] == 1

    removed = client.delete(f"{url}/{contact['id']}")
    assert removed.status_code == 200
    assert client.get(f"{url}/{contact['id']}").status_code == 404


def test_duplicate_contact_is_conflict(client: TestClient) -> None:
    book = _create_book(client)
    _add_contact(client, book["id"], "John", "+1234567890")

    response = client.post(
        _contacts_url(book["id"]), json={"name": "Other", "phone_number": "+1234567890"}
    )

    assert response.status_code == 409
    assert response.json()["success"] is False


def test_contact_of_other_book_is_not_found(client: TestClient) -> None:
    work = _create_book(client, "Work")
    personal = _create_book(client, "Personal")
    contact = _add_contact(client, work["id"], "John", "+1234567890")

    response = client.get(f"{_contacts_url(personal['id'])}/{contact['id']}")

    assert response.status_code == 404


def test_bulk_delete_reports_counts(client: TestClient) -> None:
    book = _create_book(client)
    contact = _add_contact(client, book["id"], "John", "+1234567890")
    _add_contact(client, book["id"], "Jane", "+0987654321")

    response = client.delete(
        f"{_contacts_url(book['id'])}/bulk", params={"ids": [contact["id"], 99999, 99998]}
    )

    assert response.status_code == 200
    assert response.json()["response"] == {"requested_count": 3, "deleted_count": 1}


def test_delete_all_contacts(client: TestClient) -> None:
    book = _create_book(client)
    url = _contacts_url(book["id"])

    assert client.delete(url).json()["response"] == {"deleted_count": 0}

    _add_contact(client, book["id"], "John", "+1234567890")
    _add_contact(client, book["id"], "Jane", "+0987654321")
    assert client.delete(url).json()["response"] == {"deleted_count": 2}


def test_unique_contacts(client: TestClient) -> None:
    work = _create_book(client, "Work")
    personal = _create_book(client, "Personal")
    first = _add_contact(client, work["id"], "X", "+1111111111")
    _add_contact(client, personal["id"], "X", "+1111111111")
    other = _add_contact(client, personal["id"], "Y", "+2222222222")

    paged = client.get(UNIQUE).json()["response"]
    assert [c["id"] for c in paged["content"]] == [first["id"], other["id"]]

    assert [c["id"] for c in client.get(f"{UNIQUE}/all").json()["response"]] == [first["id"], other["id"]]
    assert client.get(f"{UNIQUE}/count").json()["response"]["count"] == 2


def test_unexpected_error_hides_details() -> None:
    from main import app
    from app.core.dependencies import get_address_book_service

    class Exploding:
        def list_all(self):
            raise RuntimeError("boom")

    app.dependency_overrides[get_address_book_service] = lambda: Exploding()
    try:
        response = TestClient(app, raise_server_exceptions=False).get(f"{BOOKS}/all")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "error_id" in body["message"]
    assert "boom" not in body["message"]
