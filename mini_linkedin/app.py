# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import atexit

from flask import Flask
from flask_cors import CORS

from mini_linkedin.container import Container
from mini_linkedin.interfaces.http.auth import EXTENSION_KEY
from mini_linkedin.shared.config import AppConfig, load_config
from mini_linkedin.shared.logging import logger, setup_logging
from mini_linkedin.shared.middleware.error_handler import configure_error_handling
from mini_linkedin.shared.middleware.request_logger import configure_request_logging

# Room for the multipart envelope around a maximum-size image.
_FORM_OVERHEAD_BYTES = 64 * 1024


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        level="DEBUG" if config.debug_logging else config.log_level,
        log_file=config.log_file,
    )

    container = Container(config)
    container.database.create_all()

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = container
    app.config.update(MAX_CONTENT_LENGTH=config.uploads.max_bytes + _FORM_OVERHEAD_BYTES)

    configure_error_handling(app, config)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.posts_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")

        resp.headers.setdefault("Referrer-Policy", "no-referrer")

        resp.headers.setdefault("X-Content-Type-Options", "nosniff")

        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=()",
        )

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    app = create_app()
    atexit.register(app.extensions[EXTENSION_KEY].close)
    app.run(host="0.0.0.0", port=5000)


if __name__ == "__main__":
    main()
