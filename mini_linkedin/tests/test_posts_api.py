from __future__ import annotations

from pathlib import Path

from flask import Flask
from flask.testing import FlaskClient

from conftest import PNG_BYTES, bearer, create_post, register


def test_full_scenario(client: FlaskClient) -> None:
    alice_token, alice = register(client, "Alice", "alice@x.com", "secret1")
    assert "password" not in alice

    failed = client.post("/api/auth/login", json={"email": "alice@x.com", "password": "wrong1"})
    assert failed.status_code == 400
    assert failed.get_json()["message"] == "Invalid email or password."

    created = create_post(client, alice_token, title="Hello", content="World")
    assert created.status_code == 201
    post = created.get_json()["post"]
    assert post["author"] == {"_id": alice["_id"], "name": "Alice"}

    bob_token, _ = register(client, "Bob", "bob@x.com", "secret2")
    denied = client.delete(f"/api/posts/{post['_id']}", headers=bearer(bob_token))
    assert denied.status_code == 401
    assert denied.get_json() == {
        "success": False,
        "message": "You can only delete your own posts.",
    }

    deleted = client.delete(f"/api/posts/{post['_id']}", headers=bearer(alice_token))
    assert deleted.status_code == 200
    assert deleted.get_json() == {"success": True, "message": "Post deleted successfully!"}

    assert client.get(f"/api/posts/{post['_id']}").status_code == 404
    assert client.get("/api/posts").get_json() == []


def test_create_post_shape_and_image_served(client: FlaskClient, app: Flask) -> None:
    token, _ = register(client, "Alice", "alice@x.com")

    response = create_post(client, token, title="  Title ", content=" Body ")

    assert response.status_code == 201
    payload = response.get_json()
    assert payload["message"] == "Post created successfully!"
    post = payload["post"]
    assert post["title"] == "Title"
    assert post["content"] == "Body"
    assert post["likes"] == [] and post["likeCount"] == 0
    assert post["comments"] == [] and post["commentCount"] == 0
    assert post["image"].startswith("/uploads/image-")

    image = client.get(post["image"])
    assert image.status_code == 200
    assert image.data == PNG_BYTES


def test_create_post_requires_auth(client: FlaskClient) -> None:
    response = client.post("/api/posts", data={"title": "t", "content": "c"})

    assert response.status_code == 401


def test_create_post_without_image(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")

    response = client.post(
        "/api/posts",
        data={"title": "t", "content": "c"},
        headers=bearer(token),
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert response.get_json()["message"] == "Please select an image for your post."


def test_create_post_rejects_non_image(client: FlaskClient, config) -> None:
    token, _ = register(client, "Alice", "alice@x.com")

    response = create_post(client, token, filename="notes.txt", mimetype="text/plain")

    assert response.status_code == 400
    assert response.get_json()["message"] == "Only image files are allowed."
    assert list(Path(config.uploads.directory).iterdir()) == []


def test_create_post_rejects_large_image(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")

    response = create_post(client, token, data=b"\x00" * (5 * 1024 * 1024 + 1))

    assert response.status_code == 400
    assert response.get_json()["message"] == (
        "File size too large. Please select a smaller image (max 5MB)."
    )


def test_create_post_rejects_long_title(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")

    response = create_post(client, token, title="x" * 101)

    assert response.status_code == 400
    assert response.get_json()["errors"][0]["field"] == "title"


def test_list_posts_newest_first(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")
    create_post(client, token, title="first")
    create_post(client, token, title="second")

    titles = [post["title"] for post in client.get("/api/posts").get_json()]

    assert titles == ["second", "first"]


def test_update_post_owner_only(client: FlaskClient) -> None:
    alice_token, _ = register(client, "Alice", "alice@x.com")
    bob_token, _ = register(client, "Bob", "bob@x.com")
    post_id = create_post(client, alice_token).get_json()["post"]["_id"]

    denied = client.put(
        f"/api/posts/{post_id}", json={"title": "hijack"}, headers=bearer(bob_token)
    )
    assert denied.status_code == 401
    assert denied.get_json()["message"] == "You can only edit your own posts."

    updated = client.put(
        f"/api/posts/{post_id}",
        json={"title": "Edited", "author": "someone"},
        headers=bearer(alice_token),
    )
    assert updated.status_code == 200
    payload = updated.get_json()
    assert payload["message"] == "Post updated successfully!"
    assert payload["post"]["title"] == "Edited"
    assert payload["post"]["content"] == "First post"


def test_unknown_post_returns_404(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")

    assert client.get("/api/posts/missing").get_json() == {
        "success": False,
        "message": "Post not found.",
    }
    assert client.put("/api/posts/missing/like", headers=bearer(token)).status_code == 404
    assert client.delete("/api/posts/missing", headers=bearer(token)).status_code == 404


def test_like_toggle_twice(client: FlaskClient) -> None:
    alice_token, _ = register(client, "Alice", "alice@x.com")
    bob_token, bob = register(client, "Bob", "bob@x.com")
    post_id = create_post(client, alice_token).get_json()["post"]["_id"]

    liked = client.put(f"/api/posts/{post_id}/like", headers=bearer(bob_token)).get_json()
    assert liked["message"] == "Post liked!"
    assert liked["post"]["likeCount"] == 1
    assert liked["post"]["likes"] == [{"_id": bob["_id"], "name": "Bob"}]

    unliked = client.put(f"/api/posts/{post_id}/like", headers=bearer(bob_token)).get_json()
    assert unliked["message"] == "Post unliked!"
    assert unliked["post"]["likeCount"] == 0
    assert unliked["post"]["likes"] == []


def test_author_can_like_own_post(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")
    post_id = create_post(client, token).get_json()["post"]["_id"]

    response = client.put(f"/api/posts/{post_id}/like", headers=bearer(token))

    assert response.status_code == 200
    assert response.get_json()["post"]["likeCount"] == 1


def test_add_comment(client: FlaskClient) -> None:
    alice_token, _ = register(client, "Alice", "alice@x.com")
    bob_token, bob = register(client, "Bob", "bob@x.com")
    post_id = create_post(client, alice_token).get_json()["post"]["_id"]

    response = client.post(
        f"/api/posts/{post_id}/comments", json={"text": " Nice! "}, headers=bearer(bob_token)
    )

    assert response.status_code == 201
    post = response.get_json()["post"]
    assert post["commentCount"] == 1
    comment = post["comments"][0]
    assert comment["text"] == "Nice!"
    assert comment["user"] == {"_id": bob["_id"], "name": "Bob"}
    assert "createdAt" in comment


def test_empty_comment_rejected(client: FlaskClient) -> None:
    token, _ = register(client, "Alice", "alice@x.com")
    post_id = create_post(client, token).get_json()["post"]["_id"]

    response = client.post(
        f"/api/posts/{post_id}/comments", json={"text": "  "}, headers=bearer(token)
    )

    assert response.status_code == 400


def test_delete_removes_image_file(client: FlaskClient, config) -> None:
    token, _ = register(client, "Alice", "alice@x.com")
    post = create_post(client, token).get_json()["post"]
    stored = Path(config.uploads.directory) / post["image"].rsplit("/", 1)[-1]
    assert stored.exists()

    client.delete(f"/api/posts/{post['_id']}", headers=bearer(token))

    assert not stored.exists()
