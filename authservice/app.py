# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from authservice.infrastructure.container import Container, container
from authservice.infrastructure.db import init_db
from authservice.shared.config import load_config
from authservice.shared.logging import logger, setup_logging
from authservice.shared.middleware.error_handler import configure_error_handling
from authservice.shared.middleware.request_logger import configure_request_logging

_config = load_config()


def create_app(app_container: Container | None = None) -> Flask:
    deps = app_container or container
    setup_logging(debug_mode=_config.debug_logging)
    init_db()

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app)

    CORS(app, resources={r"/*": {"origins": _config.security.allowed_origins}})
    app.register_blueprint(deps.misc_controller.as_blueprint())
    app.register_blueprint(deps.auth_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if _config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info("Flask app initialized")
    return app
