# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import atexit
import importlib
from typing import Any, Protocol, cast

from flask import Flask

from taskhub.infrastructure.container import Container
from taskhub.infrastructure.db import init_db
from taskhub.shared.config import AppConfig, load_config
from taskhub.shared.logging import logger, setup_logging
from taskhub.shared.middleware.error_handler import configure_error_handling
from taskhub.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)

CONTAINER_EXTENSION = "taskhub.container"

_SECURITY_HEADERS = {
    "X-Frame-Options": "DENY",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "Cache-Control": "no-store",
}
_HSTS = "max-age=31536000; includeSubDomains"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    init_db(container.engine)

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    CORS(
        app,
        resources={r"/api/*": {"origins": config.security.cors_origins()}},
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.account_controller.as_blueprint())

    app.extensions[CONTAINER_EXTENSION] = container

    @app.after_request
    def _add_security_headers(resp):
        for header, value in _SECURITY_HEADERS.items():
            resp.headers.setdefault(header, value)
        if config.security.enable_hsts:
            resp.headers.setdefault("Strict-Transport-Security", _HSTS)
        return resp

    logger.info(f"Flask app initialized (cors origins: {', '.join(config.security.cors_origins())})")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    atexit.register(app.extensions[CONTAINER_EXTENSION].shutdown)
    logger.info(f"Server listening on port {config.port}")
    app.run(host=config.host, port=config.port, debug=config.debug_logging)


if __name__ == "__main__":
    main()
