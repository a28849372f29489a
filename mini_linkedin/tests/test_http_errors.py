from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from mini_linkedin.app import create_app
from mini_linkedin.interfaces.http.auth import EXTENSION_KEY
from mini_linkedin.shared.config import AppConfig, SecurityConfig
from mini_linkedin.shared.errors import register_error_handler

from conftest import bearer, create_post, register


def test_api_test_endpoint(client: FlaskClient) -> None:
    payload = client.get("/api/test").get_json()

    assert payload["success"] is True
    assert payload["message"] == "Backend is working!"
    assert payload["timestamp"]


def test_health_reports_database(client: FlaskClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"success": True, "database": "ok"}


def test_unknown_route_uses_json_envelope(client: FlaskClient) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json() == {
        "success": False,
        "message": "The requested resource was not found.",
    }


def test_missing_upload_is_404(client: FlaskClient) -> None:
    assert client.get("/uploads/missing.png").status_code == 404


def test_request_id_is_echoed(client: FlaskClient) -> None:
    response = client.get("/api/test", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_unexpected_errors_are_hidden() -> None:
    flask_app = Flask(__name__)
    register_error_handler(flask_app)

    @flask_app.get("/boom")
    def boom():
        raise RuntimeError("database password=hunter2 leaked")

    response = flask_app.test_client().get("/boom")

    assert response.status_code == 500
    assert response.get_json() == {
        "success": False,
        "message": "Something went wrong. Please try again later.",
    }


@pytest.fixture()
def strict_app(config: AppConfig) -> Iterator[Flask]:
    config.security = SecurityConfig(FORBIDDEN_STATUS=403)
    flask_app = create_app(config)
    yield flask_app
    flask_app.extensions[EXTENSION_KEY].close()


def test_forbidden_status_can_be_403(strict_app: Flask) -> None:
    client = strict_app.test_client()
    alice_token, _ = register(client, "Alice", "alice@x.com")
    bob_token, _ = register(client, "Bob", "bob@x.com")
    post_id = create_post(client, alice_token).get_json()["post"]["_id"]

    response = client.delete(f"/api/posts/{post_id}", headers=bearer(bob_token))

    assert response.status_code == 403
    assert response.get_json()["message"] == "You can only delete your own posts."
