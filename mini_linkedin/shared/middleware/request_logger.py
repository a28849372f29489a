# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time

from flask import Flask, Response, g, request

from mini_linkedin.shared.logging import clear_correlation_id, logger, set_correlation_id

_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_SENSITIVE_PARAMS = ("password", "token", "secret", "auth")


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def _header_summary() -> dict[str, str]:
    # Credentials appear only as a short fingerprint.
    summary = {}
    for key, value in request.headers.items():
        if key.lower() in _SENSITIVE_HEADERS:
            summary[key] = f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
        else:
            summary[key] = value
    return summary


def _query_summary() -> dict[str, str]:
    return {
        key: "<redacted>" if any(p in key.lower() for p in _SENSITIVE_PARAMS) else value
        for key, value in request.args.items()
    }


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start() -> None:
        correlation_id = request.headers.get("X-Request-ID") or secrets.token_urlsafe(8)
        set_correlation_id(correlation_id)
        g.correlation_id = correlation_id
        g.request_start_time = time.perf_counter()

        if debug_mode:
            logger.info(
                f"Request started: {request.method} {request.path} from {_client_ip()}, "
                f"query={_query_summary()}, headers={_header_summary()}, "
                f"body_size={request.content_length or 0}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_client_ip()}")

    @app.after_request
    def _finish(response: Response) -> Response:
        duration = time.perf_counter() - getattr(g, "request_start_time", time.perf_counter())
        logger.info(
            f"Response: {request.method} {request.path} status={response.status_code}, "
            f"duration={duration:.3f}s, user={getattr(g, 'user_id', None)}"
        )
        response.headers.setdefault("X-Request-ID", getattr(g, "correlation_id", "-"))
        return response

    @app.teardown_request
    def _teardown(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on {request.method} {request.path}, "
                f"user={getattr(g, 'user_id', None)}"
            )
        clear_correlation_id()


__all__ = ["configure_request_logging"]
