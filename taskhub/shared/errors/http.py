# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound

from taskhub.shared.logging import logger

from .base import AppError

INTERNAL_ERROR_BODY = {"error": "Internal server error", "code": "internal_error"}
ROUTE_NOT_FOUND_BODY = {"error": "Route not found", "code": "not_found"}


def _where() -> str:
    return f"{request.method} {request.path}"


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def register_error_handler(app: Flask, *, debug_mode: bool = False) -> None:
    """Render every failure as JSON.

    ``AppError`` subclasses keep their own status and body. Werkzeug HTTP
    errors pass through, except 404 which gets a JSON body. Anything else is
    logged and answered with a generic 500.
    """

    @app.errorhandler(AppError)
    def _on_app_error(exc: AppError):
        if exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
            logger.opt(exception=exc.__cause__ or exc).error(f"{exc.code} on {_where()}")
        else:
            logger.warning(f"{exc.code} ({int(exc.status)}) on {_where()}")
        return handle_app_error(exc)

    @app.errorhandler(NotFound)
    def _on_not_found(_exc: NotFound):
        return jsonify(ROUTE_NOT_FOUND_BODY), HTTPStatus.NOT_FOUND

    @app.errorhandler(HTTPException)
    def _on_http_error(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _on_unexpected(exc: Exception):
        account = getattr(g, "user_id", None)
        if debug_mode:
            logger.exception(f"Unhandled {type(exc).__name__} on {_where()} account={account}")
        else:
            logger.error(f"Unhandled {type(exc).__name__} on {_where()} account={account}")
        return jsonify(INTERNAL_ERROR_BODY), HTTPStatus.INTERNAL_SERVER_ERROR


__all__ = ["handle_app_error", "register_error_handler"]
