# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from mini_linkedin.shared.logging import logger

from .base import AppError

_HTTP_MESSAGES: dict[int, str] = {
    HTTPStatus.NOT_FOUND: "The requested resource was not found.",
    HTTPStatus.METHOD_NOT_ALLOWED: "This method is not allowed for the requested resource.",
    HTTPStatus.BAD_REQUEST: "Please check your input and try again.",
    HTTPStatus.UNSUPPORTED_MEDIA_TYPE: "Unsupported request format.",
}


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, error.status


def _client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


def register_error_handler(
    app: Flask,
    *,
    debug_mode: bool = False,
    max_upload_mb: int = 5,
    default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        log = logger.warning if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR else logger.info
        log(f"Handled application error {exc.code} ({int(exc.status)}) on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(RequestEntityTooLarge)
    def _handle_too_large(exc: RequestEntityTooLarge):
        logger.info(f"Upload rejected (too large) on {request.method} {request.path}")
        response = jsonify(
            {
                "success": False,
                "message": (
                    "File size too large. Please select a smaller image "
                    f"(max {max_upload_mb}MB)."
                ),
            }
        )
        return response, HTTPStatus.BAD_REQUEST

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = exc.code or HTTPStatus.INTERNAL_SERVER_ERROR
        message = _HTTP_MESSAGES.get(status, exc.name)
        return jsonify({"success": False, "message": message}), status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        user_id = getattr(g, "user_id", None)

        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"from {_client_ip()}, user={user_id}, "
                f"query={dict(request.args)}, body_size={request.content_length or 0}"
            )
        else:
            logger.opt(exception=exc).error(
                f"Error: {type(exc).__name__} on {request.method} {request.path}"
            )

        response = jsonify(
            {"success": False, "message": "Something went wrong. Please try again later."}
        )
        return response, default_status
