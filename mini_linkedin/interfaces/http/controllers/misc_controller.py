# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from flask import Blueprint, jsonify, send_from_directory
from sqlalchemy.exc import SQLAlchemyError

from mini_linkedin.infrastructure.db.session import Database
from mini_linkedin.infrastructure.storage import LocalImageStorage
from mini_linkedin.shared.logging import logger


class MiscController:
    def __init__(self, *, database: Database, storage: LocalImageStorage) -> None:
        self._database = database
        self._storage = storage

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/api/test", view_func=self.ping, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/uploads/<path:filename>", view_func=self.uploads, methods=["GET"])
        return bp

    def ping(self):
        return jsonify(
            {
                "success": True,
                "message": "Backend is working!",
                "timestamp": datetime.now(UTC).isoformat(),
            }
        )

    def health(self):
        status: dict[str, object] = {"success": True}
        try:
            self._database.ping()
            status["database"] = "ok"
        except SQLAlchemyError as exc:
            logger.error(f"health: database check failed: {exc}")
            status["success"] = False
            status["database"] = "error"
            return jsonify(status), 503
        return jsonify(status), 200

    def uploads(self, filename: str):
        return send_from_directory(self._storage.root.resolve(), filename)
