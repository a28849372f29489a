# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import wraps

from flask import current_app, g, request

from mini_linkedin.application.services.auth_gate import AuthGate
from mini_linkedin.domain.users.entities import UserProfile
from mini_linkedin.shared.errors.base import UnauthenticatedError
from mini_linkedin.shared.logging import logger

EXTENSION_KEY = "mini_linkedin"


def _client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _auth_gate() -> AuthGate:
    return current_app.extensions[EXTENSION_KEY].auth_gate


def current_user() -> UserProfile:
    """Return the user attached by ``auth_required`` for this request."""
    user = getattr(g, "current_user", None)
    if user is None:
        raise RuntimeError("current_user() used outside an auth_required view")
    return user


def auth_required(f):
    @wraps(f)
    def inner(*a, **kw):
        try:
            user = _auth_gate().authenticate(request.headers.get("Authorization"))
        except UnauthenticatedError as exc:
            logger.warning(
                f"Auth failed ({exc.code}) on {request.method} {request.path} "
                f"from {_client_ip()}"
            )
            raise

        g.current_user = user
        g.user_id = user.id
        logger.debug(f"Auth OK: user={user.id} {request.method} {request.path}")
        return f(*a, **kw)

    return inner


__all__ = ["EXTENSION_KEY", "auth_required", "current_user"]
