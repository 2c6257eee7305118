"""HTTP tests for the users router."""

from datetime import datetime, timezone

from fastapi import status

KEMAL = {
    "first_name": "Kemal",
    "last_name": "Atdayew",
    "phone_number": "+993232323232",
    "password": "K8asdasdasd!",
}


def _create(client, **overrides):
    response = client.post("/api/users", json={**KEMAL, **overrides})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_create_then_get_returns_identical_record(client):
    before = datetime.now(timezone.utc)

    created = _create(client)

    assert created["blocked"] is False
    assert created["id"] > 0
    assert datetime.fromisoformat(created["registration_date"]) >= before
    assert "password" not in created
    assert "password_hash" not in created

    fetched = client.get(f"/api/users/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_create_without_password(client):
    before = datetime.now(timezone.utc)

    response = client.post(
        "/api/users",
        json={
            "first_name": "Kemal",
            "last_name": "Atdayew",
            "phone_number": "+993232323232",
        },
    )

    assert response.status_code == status.HTTP_201_CREATED
    created = response.json()
    assert created["id"] > 0
    assert created["blocked"] is False
    assert datetime.fromisoformat(created["registration_date"]) >= before
    assert "password" not in created

    fetched = client.get(f"/api/users/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


def test_get_missing_user_is_404(client):
    response = client.get("/api/users/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["code"] == "not_found"


def test_list_users_paginates_by_token(client):
    ids = [_create(client, first_name=f"user{i}")["id"] for i in range(5)]

    first = client.get("/api/users", params={"page_size": 2}).json()
    assert [u["id"] for u in first["users"]] == ids[:2]
    assert first["next_page_token"] == str(ids[1])

    second = client.get(
        "/api/users", params={"page_size": 2, "page_token": first["next_page_token"]}
    ).json()
    assert [u["id"] for u in second["users"]] == ids[2:4]

    third = client.get(
        "/api/users", params={"page_size": 2, "page_token": second["next_page_token"]}
    ).json()
    assert [u["id"] for u in third["users"]] == ids[4:]

    empty = client.get(
        "/api/users", params={"page_size": 2, "page_token": third["next_page_token"]}
    ).json()
    assert empty == {"users": [], "next_page_token": ""}


def test_list_users_defaults(client):
    for i in range(12):
        _create(client, first_name=f"user{i}")

    body = client.get("/api/users").json()

    assert len(body["users"]) == 10
    assert all("password" not in user for user in body["users"])


def test_list_users_rejects_non_numeric_token(client):
    response = client.get("/api/users", params={"page_token": "abc"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["code"] == "invalid_argument"


def test_update_user(client):
    created = _create(client)

    response = client.put(
        f"/api/users/{created['id']}",
        json={
            "first_name": "Merdan",
            "last_name": "Orazow",
            "phone_number": "+99365000000",
            "password": "n3w-pass",
            "blocked": True,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["first_name"] == "Merdan"
    assert body["blocked"] is True
    assert body["registration_date"] == created["registration_date"]


def test_update_missing_user_is_404(client):
    response = client.put("/api/users/31337", json=KEMAL)

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_update_with_blank_name_is_400(client):
    created = _create(client)

    response = client.put(f"/api/users/{created['id']}", json={**KEMAL, "first_name": "  "})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_create_requires_names_and_phone(client):
    response = client.post("/api/users", json={"first_name": "Kemal"})

    assert response.status_code == 422


def test_delete_user(client):
    created = _create(client)

    response = client.delete(f"/api/users/{created['id']}")
    assert response.status_code == status.HTTP_204_NO_CONTENT

    assert client.get(f"/api/users/{created['id']}").status_code == 404
    assert client.delete(f"/api/users/{created['id']}").status_code == 404


def test_block_and_unblock(client):
    created = _create(client)
    url = f"/api/users/{created['id']}"

    assert client.post(f"{url}/block").status_code == status.HTTP_204_NO_CONTENT
    assert client.post(f"{url}/block").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(url).json()["blocked"] is True

    assert client.post(f"{url}/unblock").status_code == status.HTTP_204_NO_CONTENT
    assert client.get(url).json()["blocked"] is False


def test_block_missing_user_is_404(client):
    assert client.post("/api/users/77/block").status_code == 404
    assert client.post("/api/users/77/unblock").status_code == 404
