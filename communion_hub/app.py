# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from communion_hub.container import Container
from communion_hub.infrastructure.auth import SESSION_TOKENS_EXTENSION
from communion_hub.infrastructure.memory import seed_demo_events
from communion_hub.shared.config import AppConfig, load_config
from communion_hub.shared.logging import logger, setup_logging
from communion_hub.shared.middleware.csrf import configure_csrf
from communion_hub.shared.middleware.error_handler import configure_error_handling
from communion_hub.shared.middleware.request_logger import configure_request_logging

CONTAINER_EXTENSION = "communion_hub.container"


def create_app(
    config: AppConfig | None = None, *, container: Container | None = None
) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, debug_mode=config.debug_logging)

    container = container or Container(config)
    if config.seed_demo_events and container.store.count_events() == 0:
        seed_demo_events(container.store)

    app = Flask(__name__)
    configure_error_handling(app)
    configure_csrf(app)
    configure_request_logging(app)

    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions[CONTAINER_EXTENSION] = container
    app.extensions[SESSION_TOKENS_EXTENSION] = container.session_token_repository

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.events_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True, threaded=True)
