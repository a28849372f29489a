from __future__ import annotations

from flask.testing import FlaskClient

from conftest import bearer, create_post, register


def test_get_user_profile(client: FlaskClient) -> None:
    _, alice = register(client, "Alice", "alice@x.com")

    response = client.get(f"/api/users/{alice['_id']}")

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "user": alice}


def test_get_unknown_user(client: FlaskClient) -> None:
    response = client.get("/api/users/missing")

    assert response.status_code == 404
    assert response.get_json() == {"success": False, "message": "User not found."}


def test_user_posts_only_lists_that_author(client: FlaskClient) -> None:
    alice_token, alice = register(client, "Alice", "alice@x.com")
    bob_token, _ = register(client, "Bob", "bob@x.com")
    create_post(client, alice_token, title="from alice")
    create_post(client, bob_token, title="from bob")

    posts = client.get(f"/api/users/{alice['_id']}/posts").get_json()

    assert [post["title"] for post in posts] == ["from alice"]
    assert client.get("/api/users/missing/posts").get_json() == []


def test_update_profile(client: FlaskClient) -> None:
    token, alice = register(client, "Alice", "alice@x.com")

    response = client.put(
        "/api/users/profile",
        json={"name": "Alice Smith", "bio": "Engineer", "email": "evil@x.com"},
        headers=bearer(token),
    )

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["message"] == "Profile updated successfully!"
    assert payload["user"]["name"] == "Alice Smith"
    assert payload["user"]["bio"] == "Engineer"
    assert payload["user"]["email"] == "alice@x.com"
    assert payload["user"]["_id"] == alice["_id"]


def test_update_profile_requires_auth(client: FlaskClient) -> None:
    response = client.put("/api/users/profile", json={"bio": "x"})

    assert response.status_code == 401


def test_update_profile_rejects_long_bio(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")

    response = client.put("/api/users/profile", json={"bio": "x" * 501}, headers=bearer(token))

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "bio"


def test_renamed_author_shows_on_posts(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")
    post_id = create_post(client, token).get_json()["post"]["_id"]

    client.put("/api/users/profile", json={"name": "Alicia"}, headers=bearer(token))

    assert client.get(f"/api/posts/{post_id}").get_json()["author"]["name"] == "Alicia"
