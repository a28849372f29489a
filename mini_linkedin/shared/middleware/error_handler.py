# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from mini_linkedin.shared.config import AppConfig
from mini_linkedin.shared.errors import register_error_handler


def configure_error_handling(app: Flask, config: AppConfig) -> None:
    register_error_handler(
        app,
        debug_mode=config.debug_logging,
        max_upload_mb=max(1, config.uploads.max_bytes // (1024 * 1024)),
    )
