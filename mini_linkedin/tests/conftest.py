from __future__ import annotations

import io
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from flask import Flask
from flask.testing import FlaskClient

from mini_linkedin.app import create_app
from mini_linkedin.interfaces.http.auth import EXTENSION_KEY
from mini_linkedin.shared.config import AppConfig, AuthConfig, DatabaseConfig, UploadConfig

TEST_SECRET = "test-secret-0123456789abcdefghijklmnopqrstuvwxyz"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture()
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        APP_ENV="test",
        database=DatabaseConfig(DATABASE_URL="sqlite://"),
        auth=AuthConfig(JWT_SECRET=TEST_SECRET, PASSWORD_HASH_METHOD="pbkdf2:sha256:1000"),
        uploads=UploadConfig(UPLOAD_DIR=tmp_path / "uploads"),
    )


@pytest.fixture()
def app(config: AppConfig) -> Iterator[Flask]:
    flask_app = create_app(config)
    flask_app.config.update(TESTING=True)
    yield flask_app
    flask_app.extensions[EXTENSION_KEY].close()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


def register(
    client: FlaskClient, name: str, email: str, password: str = "secret1"
) -> tuple[str, dict[str, Any]]:
    response = client.post(
        "/api/auth/register", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.get_json()
    payload = response.get_json()
    return payload["token"], payload["user"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def create_post(
    client: FlaskClient,
    token: str,
    *,
    title: str = "Hello",
    content: str = "First post",
    filename: str = "photo.png",
    mimetype: str = "image/png",
    data: bytes = PNG_BYTES,
):
    return client.post(
        "/api/posts",
        data={"title": title, "content": content, "image": (io.BytesIO(data), filename, mimetype)},
        headers=bearer(token),
        content_type="multipart/form-data",
    )
