# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from userservice.container import Container
from userservice.infrastructure.db import init_db
from userservice.shared.config import AppConfig, load_config
from userservice.shared.logging import logger, setup_logging
from userservice.shared.middleware.error_handler import configure_error_handling
from userservice.shared.middleware.request_logger import configure_request_logging


def create_app(config: AppConfig | None = None, container: Container | None = None) -> Flask:
    if container is None:
        container = Container(config or load_config())
    config = container.config

    setup_logging(config.log_level, config.log_file)
    init_db(container.engine)

    app = Flask(__name__)
    app.extensions["user_service.container"] = container
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(
        app, debug_mode=config.debug_logging, session_header=config.session.header
    )

    cors_kwargs: dict[str, object] = {
        "resources": {r"/*": {"origins": config.security.allowed_origins}},
        "allow_headers": ["Content-Type", "Authorization", config.session.header],
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.user_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return resp

    logger.info(
        f"Flask app initialized session_backend={config.session.backend} "
        f"password_scheme={config.password.scheme}"
    )
    return app
